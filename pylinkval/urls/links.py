"""String-level helpers for classifying and tidying links.

These work on the raw text and never parse it, so they also accept hrefs
that are not valid URLs (relative paths, anchors, `javascript:` links).
"""

from typing import Optional


def is_external(href: str) -> bool:
    """Returns True if `href` starts with `http://` or `https://`."""
    return href.startswith(("http://", "https://"))


def is_internal(href: str) -> bool:
    return not is_external(href)


def is_secure(url: str) -> bool:
    return url.startswith("https://")


def scheme_of(url: str) -> Optional[str]:
    """Returns the text before the first `://`, or None if there is none."""
    scheme, separator, _ = url.partition("://")
    return scheme if separator else None


def normalize(url: str) -> str:
    """Drops the fragment and then exactly one trailing slash.

    Nothing else is touched: no re-encoding and no dot-segment handling.

    Example:
        >>> normalize("https://a.com/path/#frag")
        'https://a.com/path'
    """
    normalized = url.split("#", 1)[0]
    return normalized.removesuffix("/")
