"""URL helpers: validation, origin and display domain."""

from typing import Optional
from urllib.parse import urlparse

FAVICON_SERVICE = 'https://www.google.com/s2/favicons?domain={domain}&sz=32'


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        return parsed.scheme in ('http', 'https') and bool(parsed.hostname)
    except ValueError:
        return False


def get_origin(url: str) -> str:
    """Return scheme://host[:port] of url, raising ValueError if it has none."""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f'URL has no origin: {url!r}')
    return f'{parsed.scheme}://{parsed.netloc}'


def extract_domain(url: str) -> str:
    """
    Extract the host name for display, without a leading "www.".

    Returns the input unchanged when it can't be parsed.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return url
    if not hostname:
        return url
    return hostname[4:] if hostname.startswith('www.') else hostname


def get_favicon_url(url: str) -> Optional[str]:
    """32x32 favicon URL from Google's favicon service, None for invalid URLs."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return None
    if not hostname:
        return None
    return FAVICON_SERVICE.format(domain=hostname)
