"""
Bookmark Preview Cloud Function

Scrapes a bookmark's target page and returns the metadata shown in the
preview card, so the user can see what a link is without opening it.

Responsibilities:
- Validate the requested URL before any network call
- Fetch the page once
- Extract platform-specific fields (Zenn, Qiita, note, Medium, Hatena Blog, GitHub)
- Fill the rest from Open Graph / meta tags
- Normalize the preview image URL

Does NOT:
- Store anything (bookmarks and topics live elsewhere)
- Cache or retry fetches
"""

import functions_framework
import json
import logging
import os
import sys

# Add shared module to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from shared.config_utils import FunctionConfig, load_config, configure_logging
from shared.fetch_utils import fetch_webpage
from shared.preview_utils import extract_preview, parse_html
from shared.url_utils import is_valid_url

logger = logging.getLogger(__name__)

CONFIG = load_config()
configure_logging(CONFIG)

MISSING_URL_MESSAGE = 'URLパラメータが必要です'
INVALID_URL_MESSAGE = '有効なURLを入力してください'
NO_PREVIEW_MESSAGE = 'プレビュー可能な情報を取得できませんでした'
GENERIC_ERROR_MESSAGE = 'エラーが発生しました。もう一度お試しください。'

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}
JSON_HEADERS = {**CORS_HEADERS, 'Content-Type': 'application/json; charset=utf-8'}


class PreviewFetchError(Exception):
    """The target page could not be fetched."""


def _json_response(body: dict, status: int) -> tuple:
    return (json.dumps(body, ensure_ascii=False), status, JSON_HEADERS)


def _error_response(message: str, status: int, details: str = None) -> tuple:
    body = {'error': message}
    if details:
        body['details'] = details
    return _json_response(body, status)


def fetch_preview(url: str, config: FunctionConfig = CONFIG) -> dict:
    """Fetch url and extract its preview. Raises PreviewFetchError on fetch failure."""
    html, fetch_error = fetch_webpage(url, timeout=config.fetch_timeout)
    if fetch_error:
        raise PreviewFetchError(fetch_error)

    soup = parse_html(html)
    return extract_preview(url, soup)


def handle_preview(request, config: FunctionConfig = CONFIG) -> tuple:
    """Handle a preview request with an explicit configuration."""
    if request.method == 'OPTIONS':
        headers = {
            **CORS_HEADERS,
            'Access-Control-Allow-Methods': 'GET',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Max-Age': '3600'
        }
        return ('', 204, headers)

    if request.method != 'GET':
        logger.warning("Rejected %s request to preview", request.method)
        return _error_response('Method not allowed', 405)

    try:
        url = (request.args.get('url') or '').strip()

        if not url:
            logger.info("Preview request without url parameter")
            return _error_response(MISSING_URL_MESSAGE, 400)

        if not is_valid_url(url):
            logger.info("Rejected invalid url: %s", url)
            return _error_response(INVALID_URL_MESSAGE, 400)

        result = fetch_preview(url, config)

        if not result.is_previewable:
            logger.info("No previewable metadata for %s", url)
            return _error_response(NO_PREVIEW_MESSAGE, 400)

        return _json_response(result.to_dict(), 200)

    except Exception as e:
        logger.exception("Preview failed: %s", e)
        details = None if config.is_production else str(e)
        return _error_response(GENERIC_ERROR_MESSAGE, 500, details)


@functions_framework.http
def preview_bookmark(request):
    """
    Main Cloud Function entry point.

    Expected request:
        GET ?url=https://example.com/article

    Returns the preview JSON:
    {
        "title": "...",
        "description": "...",
        "image": "https://example.com/og.png",
        "siteName": "...",
        "canonicalUrl": "https://example.com/article",
        "url": "https://example.com/article",
        "domain": "example.com",
        "favicon": "https://www.google.com/s2/favicons?domain=example.com&sz=32",
        "author": "...",          (platform pages only)
        "publishedAt": "...",     (platform pages only)
        "tags": ["..."]           (platform pages only)
    }
    """
    return handle_preview(request, CONFIG)
