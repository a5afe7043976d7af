"""
Link preview extraction.

Runs the extraction stages over an already fetched page:
platform extractor -> generic meta tag resolver -> image normalization.
Nothing here touches the network, so the same HTML always gives the same
result.
"""

from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup

from .image_utils import normalize_image_url
from .meta_utils import resolve_metadata
from .platform_utils import run_platform_extractor
from .url_utils import extract_domain, get_favicon_url


@dataclass
class ExtractionResult:
    title: str
    description: str
    image: str
    site_name: str
    canonical_url: str
    domain: str = ''
    favicon: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[str] = None
    tags: Optional[List[str]] = None

    @property
    def is_previewable(self) -> bool:
        """A title or a description is enough to show a preview."""
        return bool(self.title or self.description)

    def to_dict(self) -> dict:
        """JSON body for the preview endpoint (camelCase, optional keys omitted)."""
        data = {
            'title': self.title,
            'description': self.description,
            'image': self.image,
            'siteName': self.site_name,
            'canonicalUrl': self.canonical_url,
            'url': self.canonical_url,
            'domain': self.domain,
            'favicon': self.favicon,
        }
        if self.author:
            data['author'] = self.author
        if self.published_at:
            data['publishedAt'] = self.published_at
        if self.tags:
            data['tags'] = list(self.tags)
        return data


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or '', 'html.parser')


def extract_preview(url: str, soup: BeautifulSoup) -> ExtractionResult:
    """Build the preview for url from its parsed page."""
    platform_fields = run_platform_extractor(url, soup)
    metadata = resolve_metadata(url, soup, platform_fields)

    return ExtractionResult(
        title=metadata['title'],
        description=metadata['description'],
        image=normalize_image_url(metadata['image'], url),
        site_name=metadata['site_name'],
        canonical_url=metadata['canonical_url'],
        domain=extract_domain(url),
        favicon=get_favicon_url(url),
        author=metadata['author'],
        published_at=metadata['published_at'],
        tags=metadata['tags'],
    )
