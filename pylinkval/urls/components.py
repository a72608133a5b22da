"""Component accessors built on top of `parse`.

`origin_of`, `same_origin` and `path_segments` raise `ParseError` for text
that is not a URL. The `get_url_*` accessors are lenient: they return None
instead, which suits callers that only want to display whatever is there.
"""

import logging
from typing import List, Optional

from ..core.exceptions import ParseError
from .parser import Origin, Url, parse

logger = logging.getLogger(__name__)


def origin_of(url: str) -> Origin:
    """Returns the (scheme, host, effective port) origin of `url`.

    Raises:
        ParseError: If `url` does not parse.
    """
    return parse(url).origin


def same_origin(url1: str, url2: str) -> bool:
    """Returns True if both URLs share scheme, host and effective port.

    Raises:
        ParseError: If either URL does not parse; the message names which.
    """
    try:
        first = parse(url1)
    except ParseError as e:
        raise ParseError(f"URL 1: {e.detail}") from e
    try:
        second = parse(url2)
    except ParseError as e:
        raise ParseError(f"URL 2: {e.detail}") from e
    return first.origin.same_as(second.origin)


def path_segments(url: str) -> List[str]:
    """Splits the path of `url` on `/`, dropping empty segments.

    URLs without an authority (`mailto:`, `data:`) have no segments.

    Raises:
        ParseError: If `url` does not parse.
    """
    parsed = parse(url)
    if not parsed.has_authority:
        return []
    return [segment for segment in parsed.path.split("/") if segment]


def _try_parse(url: str) -> Optional[Url]:
    try:
        return parse(url)
    except ParseError as e:
        logger.debug(f"Not a URL: {e.detail}")
        return None


def validate_url(url: str) -> bool:
    return _try_parse(url) is not None


def get_url_domain(url: str) -> Optional[str]:
    parsed = _try_parse(url)
    return parsed.host if parsed else None


def get_url_path(url: str) -> Optional[str]:
    parsed = _try_parse(url)
    return parsed.path if parsed else None


def get_url_query(url: str) -> Optional[str]:
    parsed = _try_parse(url)
    return parsed.query if parsed else None


def get_url_fragment(url: str) -> Optional[str]:
    parsed = _try_parse(url)
    return parsed.fragment if parsed else None


def get_url_port(url: str) -> Optional[int]:
    """Returns the explicit, non-default port of `url`, if any."""
    parsed = _try_parse(url)
    return parsed.port if parsed else None


def get_url_scheme(url: str) -> Optional[str]:
    parsed = _try_parse(url)
    return parsed.scheme if parsed else None
