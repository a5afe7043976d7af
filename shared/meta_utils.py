"""
Selector helpers and the generic (Open Graph / meta tag) metadata resolver.

Each field is resolved by an ordered list of candidate providers. Providers are
zero-argument callables evaluated lazily; the first non-empty string wins, and
a provider that raises is skipped.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

Provider = Callable[[], Optional[str]]


def first_non_empty(*providers: Provider) -> str:
    """Return the first non-empty, stripped provider value, or ''."""
    for provider in providers:
        try:
            value = provider()
        except Exception as e:
            logger.debug("Metadata provider %r failed: %s", provider, e)
            continue
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ''


def get_meta_content(soup: BeautifulSoup, key: str) -> str:
    """Content of meta[property=key], falling back to meta[name=key]."""
    for attr in ('property', 'name'):
        tag = soup.find('meta', attrs={attr: key})
        if tag and tag.get('content'):
            return tag['content']
    return ''


def element_text(element) -> str:
    """Text of element with runs of whitespace collapsed. Text nodes are joined as-is."""
    return re.sub(r'\s+', ' ', element.get_text()).strip()


def select_text(soup: BeautifulSoup, selector: str) -> str:
    element = soup.select_one(selector)
    return element_text(element) if element else ''


def select_attr(soup: BeautifulSoup, selector: str, attr: str) -> str:
    element = soup.select_one(selector)
    if not element:
        return ''
    value = element.get(attr)
    if isinstance(value, list):
        value = ' '.join(value)
    return value or ''


def unique_tags(values: Iterable[str]) -> List[str]:
    """Trim values and drop empties and repeats, keeping first-seen order."""
    seen = set()
    tags = []
    for value in values:
        tag = (value or '').strip()
        if tag and tag not in seen:
            seen.add(tag)
            tags.append(tag)
    return tags


def select_tags(soup: BeautifulSoup, selector: str, strip_prefix: str = '') -> List[str]:
    """Collect tag text from every element matching selector."""
    values = []
    for element in soup.select(selector):
        text = element_text(element)
        if strip_prefix and text.startswith(strip_prefix):
            text = text[len(strip_prefix):]
        values.append(text)
    return unique_tags(values)


def title_text(soup: BeautifulSoup) -> str:
    return soup.title.get_text() if soup.title else ''


def canonical_link(soup: BeautifulSoup) -> str:
    link = soup.find('link', rel='canonical')
    return link.get('href', '') if link else ''


def resolve_metadata(url: str, soup: BeautifulSoup, platform: Optional[dict] = None) -> dict:
    """
    Fill every preview field from the platform values, then page meta tags.

    Args:
        url: The URL that was requested (last resort for canonical_url)
        soup: Parsed page
        platform: Partial fields from a platform extractor, may be empty

    Returns:
        dict with title, description, image, site_name, canonical_url,
        author, published_at and tags. Missing optional values are None.
    """
    platform = platform or {}

    def from_platform(field: str) -> Provider:
        return lambda: platform.get(field)

    metadata = {
        'title': first_non_empty(
            from_platform('title'),
            lambda: get_meta_content(soup, 'og:title'),
            lambda: title_text(soup),
        ),
        'description': first_non_empty(
            from_platform('description'),
            lambda: get_meta_content(soup, 'og:description'),
            lambda: get_meta_content(soup, 'description'),
        ),
        'image': first_non_empty(
            from_platform('image'),
            lambda: get_meta_content(soup, 'og:image'),
            lambda: get_meta_content(soup, 'twitter:image'),
        ),
        'site_name': first_non_empty(
            from_platform('site_name'),
            lambda: get_meta_content(soup, 'og:site_name'),
        ),
        'canonical_url': first_non_empty(
            lambda: get_meta_content(soup, 'og:url'),
            lambda: canonical_link(soup),
            lambda: url,
        ),
        'author': first_non_empty(from_platform('author')) or None,
        'published_at': first_non_empty(from_platform('published_at')) or None,
        'tags': unique_tags(platform.get('tags') or []) or None,
    }

    return metadata
