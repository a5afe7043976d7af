"""
Image URL normalization for link previews.

Relative image paths are made absolute against the page origin, then kept only
if they look like an image asset. The check is a heuristic to drop tracking
pixels and unrelated assets; some real images will be dropped too.
"""

import logging
from urllib.parse import urljoin

from .url_utils import get_origin

logger = logging.getLogger(__name__)

IMAGE_MARKERS = (
    '.jpg',
    '.jpeg',
    '.png',
    '.gif',
    '.webp',
    'images/',
    'image/',
    'media/',
    'avatar',
    'thumb',
)


def looks_like_image(url: str) -> bool:
    lowered = url.lower()
    return any(marker in lowered for marker in IMAGE_MARKERS)


def normalize_image_url(image: str, page_url: str) -> str:
    """
    Return an absolute image URL for the page, or '' if unusable.

    Examples:
        >>> normalize_image_url('/img/pic.png', 'https://example.com/a/b')
        'https://example.com/img/pic.png'

        >>> normalize_image_url('https://example.com/tracker?x=1', 'https://example.com/')
        ''
    """
    if not image:
        return ''

    image = image.strip()
    if not image:
        return ''

    if not image.startswith('http'):
        try:
            image = urljoin(get_origin(page_url), image)
        except ValueError as e:
            logger.debug("Could not resolve image %r against %s: %s", image, page_url, e)
            return ''

    if not looks_like_image(image):
        return ''

    return image
