"""
HTTP fetch client shared by the preview and analyzer functions.

One GET per call: no retries, no caching.
"""

import logging

import requests

from .config_utils import DEFAULT_FETCH_TIMEOUT

logger = logging.getLogger(__name__)

USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'

REQUEST_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'ja,en-US;q=0.7,en;q=0.3',
}


def fetch_webpage(url: str, timeout: int = DEFAULT_FETCH_TIMEOUT) -> tuple:
    """Fetch webpage content. Returns (html, error)."""
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout, allow_redirects=True)
        if not response.ok:
            return None, f'Failed to fetch URL: {response.status_code}'

        # requests falls back to ISO-8859-1 when no charset is declared
        content_type = response.headers.get('Content-Type', '').lower()
        if 'charset' not in content_type:
            response.encoding = response.apparent_encoding

        return response.text, None

    except requests.exceptions.Timeout:
        return None, 'Request timed out'
    except requests.exceptions.RequestException as e:
        return None, f'Request failed: {str(e)}'
