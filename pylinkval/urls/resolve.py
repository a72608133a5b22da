"""Resolves relative references against a base URL.

This is the "Transform References" algorithm from RFC 3986, section 5.2.2:

-   A reference with a scheme replaces the base entirely.
-   A reference starting with `//` keeps only the base scheme.
-   An absolute path keeps the base authority.
-   A relative path is merged with the directory of the base path.
-   An empty path keeps the base path, and the base query unless the
    reference has its own.

Dot segments are collapsed in every case, and the fragment always comes
from the reference.
"""

import logging

from ..core.exceptions import InvalidBaseError, InvalidRelativeError, ParseError
from .parser import FORBIDDEN_IN_URL, Reference, Url, build_url, parse, remove_dot_segments, split_reference

logger = logging.getLogger(__name__)


def join(base: str, relative: str) -> str:
    """Resolves `relative` against `base` and returns the target URL.

    Args:
        base (str): An absolute URL.
        relative (str): A URL or relative reference.

    Returns:
        str: The serialized target URL.

    Raises:
        InvalidBaseError: If `base` does not parse.
        InvalidRelativeError: If the result is not a valid URL, or if the
            base has no authority and `relative` is neither absolute nor
            fragment-only.

    Example:
        >>> join("https://a.com/x/y", "../z")
        'https://a.com/z'
    """
    try:
        base_url = parse(base)
    except ParseError as e:
        raise InvalidBaseError(e.detail) from e

    text = relative.strip()
    if FORBIDDEN_IN_URL.search(text):
        raise InvalidRelativeError(f"'{relative}' contains whitespace or control characters")

    ref = split_reference(text)
    try:
        target = resolve(base_url, ref, source=relative)
    except ParseError as e:
        raise InvalidRelativeError(e.detail) from e
    return target.serialize()


def resolve(base: Url, ref: Reference, source: str) -> Url:
    """Builds the target `Url` of an already split reference.

    Raises:
        ParseError: If the resolved components are malformed.
        InvalidRelativeError: If `base` cannot serve as a base for `ref`.
    """
    if ref.scheme is not None:
        return build_url(ref, source=source)

    if ref.authority is not None:
        return build_url(ref._replace(scheme=base.scheme), source=source)

    if not base.has_authority:
        if ref.path or ref.query is not None:
            raise InvalidRelativeError(f"'{base}' cannot be a base for '{source}'")
        return Url(
            scheme=base.scheme,
            path=base.path,
            query=base.query,
            fragment=ref.fragment,
        )

    if not ref.path:
        path = base.path
        query = ref.query if ref.query is not None else base.query
    elif ref.path.startswith("/"):
        path = remove_dot_segments(ref.path)
        query = ref.query
    else:
        path = remove_dot_segments(_merge_paths(base, ref.path))
        query = ref.query

    logger.debug(f"Resolved '{source}' against '{base}' to path '{path}'.")
    return Url(
        scheme=base.scheme,
        userinfo=base.userinfo,
        host=base.host,
        port=base.port,
        path=path,
        query=query,
        fragment=ref.fragment,
    )


def _merge_paths(base: Url, path: str) -> str:
    """Merges a relative path with the directory of the base path."""
    if base.has_authority and not base.path:
        return f"/{path}"
    directory, slash, _ = base.path.rpartition("/")
    return f"{directory}{slash}{path}"
