"""
Platform-specific preview extractors.

Known publishing platforms expose richer data than their Open Graph tags
(author, publish date, tags). Handlers are checked in registration order
against the raw URL and only the first match runs. Whatever a handler leaves
empty is filled by the generic resolver in meta_utils.
"""

import logging
from typing import Callable, List, NamedTuple, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .meta_utils import (
    first_non_empty,
    get_meta_content,
    select_attr,
    select_tags,
    select_text,
)

logger = logging.getLogger(__name__)


class PlatformHandler(NamedTuple):
    name: str
    predicate: Callable[[str], bool]
    extractor: Callable[[str, BeautifulSoup], dict]


def url_contains(*patterns: str) -> Callable[[str], bool]:
    def predicate(url: str) -> bool:
        return any(pattern in url for pattern in patterns)
    return predicate


def path_segments(url: str) -> list:
    return [s for s in urlparse(url).path.split('/') if s]


def path_segment(url: str, index: int) -> str:
    """Return the index-th non-empty path segment of url, or ''."""
    segments = path_segments(url)
    return segments[index] if len(segments) > index else ''


def published_time(soup: BeautifulSoup) -> str:
    return first_non_empty(
        lambda: get_meta_content(soup, 'article:published_time'),
        lambda: select_attr(soup, 'time[datetime]', 'datetime'),
    )


def extract_zenn(url: str, soup: BeautifulSoup) -> dict:
    """zenn.dev/<user>/articles/<slug>"""
    return {
        'title': first_non_empty(
            lambda: get_meta_content(soup, 'og:title'),
            lambda: select_text(soup, 'h1'),
        ),
        'description': get_meta_content(soup, 'og:description'),
        'image': get_meta_content(soup, 'og:image'),
        'site_name': 'Zenn',
        'author': first_non_empty(
            lambda: select_text(soup, '[class*="ArticleHeader_userName"]'),
            lambda: select_text(soup, '[class*="userName"]'),
            lambda: get_meta_content(soup, 'author'),
            lambda: path_segment(url, 0),
        ),
        'published_at': published_time(soup),
        'tags': select_tags(soup, 'a[href^="/topics/"]'),
    }


def extract_qiita(url: str, soup: BeautifulSoup) -> dict:
    """qiita.com/<user>/items/<id>"""
    return {
        'title': first_non_empty(
            lambda: get_meta_content(soup, 'og:title'),
            lambda: select_text(soup, 'h1'),
        ),
        'description': get_meta_content(soup, 'og:description'),
        'image': get_meta_content(soup, 'og:image'),
        'site_name': 'Qiita',
        'author': first_non_empty(
            lambda: path_segment(url, 0) if path_segment(url, 1) == 'items' else '',
            lambda: get_meta_content(soup, 'twitter:creator'),
            lambda: get_meta_content(soup, 'author'),
        ),
        'published_at': published_time(soup),
        'tags': select_tags(soup, 'a[href^="/tags/"]'),
    }


def extract_note(url: str, soup: BeautifulSoup) -> dict:
    """note.com/<creator>/n/<key>"""
    return {
        'title': first_non_empty(
            lambda: get_meta_content(soup, 'og:title'),
            lambda: select_text(soup, 'h1'),
        ),
        'description': first_non_empty(
            lambda: get_meta_content(soup, 'og:description'),
            lambda: get_meta_content(soup, 'description'),
        ),
        'image': first_non_empty(
            lambda: get_meta_content(soup, 'og:image'),
            lambda: select_attr(soup, '.o-noteEyecatch img', 'src'),
        ),
        'site_name': 'note',
        'author': first_non_empty(
            lambda: get_meta_content(soup, 'note:creator'),
            lambda: select_text(soup, '.o-noteContentHeader__name'),
            lambda: select_text(soup, '[class*="creatorName"]'),
            lambda: path_segment(url, 0),
        ),
        'published_at': published_time(soup),
        'tags': select_tags(soup, 'a[href*="/hashtag/"]', strip_prefix='#'),
    }


def extract_medium(url: str, soup: BeautifulSoup) -> dict:
    return {
        'title': first_non_empty(
            lambda: select_text(soup, 'h1[data-testid="storyTitle"]'),
            lambda: get_meta_content(soup, 'og:title'),
            lambda: select_text(soup, 'h1'),
        ),
        'description': first_non_empty(
            lambda: get_meta_content(soup, 'og:description'),
            lambda: get_meta_content(soup, 'description'),
        ),
        'image': get_meta_content(soup, 'og:image'),
        'site_name': 'Medium',
        'author': first_non_empty(
            lambda: get_meta_content(soup, 'author'),
            lambda: select_text(soup, '[data-testid="authorName"]'),
        ),
        'published_at': published_time(soup),
        'tags': select_tags(soup, 'a[href*="/tag/"]'),
    }


def extract_hatena(url: str, soup: BeautifulSoup) -> dict:
    return {
        'title': first_non_empty(
            lambda: select_text(soup, '.entry-title'),
            lambda: get_meta_content(soup, 'og:title'),
        ),
        'description': get_meta_content(soup, 'og:description'),
        'image': get_meta_content(soup, 'og:image'),
        'site_name': first_non_empty(
            lambda: select_text(soup, '#title a'),
            lambda: get_meta_content(soup, 'og:site_name'),
            lambda: 'Hatena Blog',
        ),
        'author': first_non_empty(
            lambda: select_text(soup, '.author'),
            lambda: get_meta_content(soup, 'author'),
            lambda: get_meta_content(soup, 'twitter:creator'),
        ),
        'published_at': first_non_empty(
            lambda: select_attr(soup, '.entry-date time[datetime]', 'datetime'),
            lambda: published_time(soup),
        ),
        'tags': select_tags(soup, '.entry-categories a.entry-category-link'),
    }


def extract_github(url: str, soup: BeautifulSoup) -> dict:
    """github.com/<owner>/<repo>, deeper pages keep their own og:title"""
    segments = path_segments(url)
    owner = segments[0] if segments else ''
    # Only the repository root is titled owner/repo
    repo_root = '/'.join(segments) if len(segments) == 2 else ''
    return {
        'title': first_non_empty(
            lambda: repo_root,
            lambda: get_meta_content(soup, 'og:title'),
        ),
        'description': first_non_empty(
            lambda: select_text(soup, '.BorderGrid p.f4'),
            lambda: get_meta_content(soup, 'og:description'),
            lambda: get_meta_content(soup, 'description'),
        ),
        'image': first_non_empty(
            lambda: select_attr(soup, 'img.avatar-user', 'src'),
            lambda: select_attr(soup, 'img.avatar', 'src'),
        ),
        'site_name': 'GitHub',
        'author': owner,
        'tags': select_tags(soup, 'a.topic-tag'),
    }


PLATFORM_HANDLERS: List[PlatformHandler] = [
    PlatformHandler('zenn', url_contains('zenn.dev'), extract_zenn),
    PlatformHandler('qiita', url_contains('qiita.com'), extract_qiita),
    PlatformHandler('note', url_contains('note.com'), extract_note),
    PlatformHandler('medium', url_contains('medium.com'), extract_medium),
    PlatformHandler(
        'hatena',
        url_contains('hatenablog.com', 'hatenablog.jp', 'hateblo.jp', 'hatenadiary'),
        extract_hatena,
    ),
    PlatformHandler('github', url_contains('github.com'), extract_github),
]


def find_platform_handler(url: str, handlers: Optional[List[PlatformHandler]] = None) -> Optional[PlatformHandler]:
    """Return the first handler whose predicate matches url."""
    for handler in PLATFORM_HANDLERS if handlers is None else handlers:
        if handler.predicate(url):
            return handler
    return None


def run_platform_extractor(url: str, soup: BeautifulSoup, handlers: Optional[List[PlatformHandler]] = None) -> dict:
    """
    Run the matching platform extractor.

    A failing extractor is logged and treated as no match, so the generic
    resolver still produces a preview.
    """
    handler = find_platform_handler(url, handlers)
    if handler is None:
        return {}

    try:
        return handler.extractor(url, soup) or {}
    except Exception as e:
        logger.warning("Platform extractor '%s' failed for %s: %s", handler.name, url, e)
        return {}
