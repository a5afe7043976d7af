"""
URL Analyzer Cloud Function

Answers a user's question about a bookmarked page: fetches the page, reduces
it to its main text and asks Gemini to answer from that text.

Responsibilities:
- Validate the url/question pair
- Refuse to run without a Gemini API key
- Fetch the page once and extract up to 4000 characters of text
- Relay the completion and a short content preview

Does NOT:
- Retry failed fetches or completions
- Tell the caller which stage failed (logged server-side only)
"""

import functions_framework
import json
import logging
import os
import sys

# Add shared module to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from shared.completion_utils import generate_answer
from shared.config_utils import FunctionConfig, load_config, configure_logging
from shared.content_utils import content_preview, extract_page_content
from shared.fetch_utils import fetch_webpage
from shared.preview_utils import parse_html

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = 'URLと質問は必須です'
MISSING_KEY_MESSAGE = 'Gemini APIキーが設定されていません'
MISSING_KEY_DETAILS = 'GEMINI_API_KEY環境変数にGemini APIキーを設定してください。'
EMPTY_CONTENT_MESSAGE = 'URLから有効な内容を取得できませんでした'
GENERIC_ERROR_MESSAGE = 'エラーが発生しました。もう一度お試しください。'

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}
JSON_HEADERS = {**CORS_HEADERS, 'Content-Type': 'application/json; charset=utf-8'}


class AnalysisError(Exception):
    """A failure in one stage of the analysis: fetch, parse or completion."""

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage
        self.message = message


def _json_response(body: dict, status: int) -> tuple:
    return (json.dumps(body, ensure_ascii=False), status, JSON_HEADERS)


def _error_response(message: str, status: int, details: str = None) -> tuple:
    body = {'error': message}
    if details:
        body['details'] = details
    return _json_response(body, status)


class UrlAnalyzer:
    """
    Question answering handler.

    The configuration and both outbound collaborators are passed in, so a
    missing key is known when the analyzer is built rather than per request.
    """

    def __init__(self, config: FunctionConfig, fetch=fetch_webpage, generate=generate_answer):
        self.config = config
        self.fetch = fetch
        self.generate = generate

        if not config.has_completion_credential:
            logger.error("GEMINI_API_KEY is not set; every analysis request will fail")

    def get_page_content(self, url: str) -> str:
        html, fetch_error = self.fetch(url, timeout=self.config.fetch_timeout)
        if fetch_error:
            raise AnalysisError('fetch', fetch_error)

        try:
            soup = parse_html(html)
            return extract_page_content(soup)
        except Exception as e:
            raise AnalysisError('parse', str(e)) from e

    def answer(self, content: str, question: str) -> str:
        try:
            return self.generate(
                self.config.gemini_api_key,
                content,
                question,
                model_name=self.config.gemini_model,
            )
        except Exception as e:
            raise AnalysisError('completion', str(e)) from e

    def handle(self, request) -> tuple:
        if request.method == 'OPTIONS':
            headers = {
                **CORS_HEADERS,
                'Access-Control-Allow-Methods': 'POST',
                'Access-Control-Allow-Headers': 'Content-Type',
                'Access-Control-Max-Age': '3600'
            }
            return ('', 204, headers)

        if request.method != 'POST':
            logger.warning("Rejected %s request to analyzer", request.method)
            return _error_response('Method not allowed', 405)

        try:
            request_json = request.get_json(silent=True)
            if not isinstance(request_json, dict):
                request_json = {}

            url = request_json.get('url')
            question = request_json.get('question')
            url = url.strip() if isinstance(url, str) else ''
            question = question.strip() if isinstance(question, str) else ''

            if not url or not question:
                logger.info("Analysis request missing url or question")
                return _error_response(MISSING_FIELDS_MESSAGE, 400)

            if not self.config.has_completion_credential:
                logger.error("Analysis requested but GEMINI_API_KEY is not configured")
                return _error_response(MISSING_KEY_MESSAGE, 500, MISSING_KEY_DETAILS)

            content = self.get_page_content(url)
            if not content:
                logger.info("No text content extracted from %s", url)
                return _error_response(EMPTY_CONTENT_MESSAGE, 400)

            answer = self.answer(content, question)

            return _json_response({
                'answer': answer,
                'urlContent': content_preview(content),
            }, 200)

        except AnalysisError as e:
            logger.error("URL analysis failed [stage=%s]: %s", e.stage, e.message)
            return _error_response(GENERIC_ERROR_MESSAGE, 500)
        except Exception as e:
            logger.exception("URL analysis failed [stage=processing]: %s", e)
            return _error_response(GENERIC_ERROR_MESSAGE, 500)


CONFIG = load_config()
configure_logging(CONFIG)
analyzer = UrlAnalyzer(CONFIG)


@functions_framework.http
def analyze_url(request):
    """
    Main Cloud Function entry point.

    Expected JSON input:
    {
        "url": "https://example.com/article",
        "question": "この記事の要点は？"
    }

    Returns:
    {
        "answer": "...",
        "urlContent": "first 500 characters of the page text..."
    }
    """
    return analyzer.handle(request)
