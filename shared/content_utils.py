"""Page text extraction for question answering."""

import re

from bs4 import BeautifulSoup

MAX_CONTENT_LENGTH = 4000
PREVIEW_LENGTH = 500

# Removed before any text is read
NON_CONTENT_TAGS = ['script', 'style', 'nav', 'header', 'footer']

# Checked in order, the first selector with a match is used
CONTENT_SELECTORS = ['main', 'article', '.content', '#content', 'body']


def extract_page_content(soup: BeautifulSoup, max_length: int = MAX_CONTENT_LENGTH) -> str:
    """Extract whitespace-collapsed main text from the page, truncated to max_length."""
    if not soup:
        return ""

    for element in soup.find_all(NON_CONTENT_TAGS):
        element.decompose()

    main_content = None
    for selector in CONTENT_SELECTORS:
        main_content = soup.select_one(selector)
        if main_content:
            break

    if not main_content:
        return ""

    text = re.sub(r'\s+', ' ', main_content.get_text()).strip()
    return text[:max_length]


def content_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Shortened page text shown next to an answer."""
    return text[:length] + '...'
