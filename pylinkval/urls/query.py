"""Reads and rewrites URL query strings.

Queries follow the `application/x-www-form-urlencoded` convention: pairs are
separated by `&`, keys from values by the first `=`, spaces are written as
`+` and everything outside a small safe set is percent-encoded as UTF-8.
"""

import logging
import re
import string
from dataclasses import replace
from typing import Iterable, List, Mapping, Tuple, Union

from .parser import parse

logger = logging.getLogger(__name__)

# An ordered list of (key, value) pairs; keys may repeat.
QueryParams = List[Tuple[str, str]]

_FORM_SAFE = frozenset(string.ascii_letters + string.digits + "*-._")
_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def percent_decode(text: str) -> str:
    """Decodes `%XX` escapes in `text` as UTF-8.

    Escaped bytes that are not part of valid UTF-8 are kept as their
    original escaped text while their neighbours are still decoded, and a
    `%` not followed by two hex digits is kept as is.

    Example:
        >>> percent_decode("caf%C3%A9%FF")
        'café%FF'
    """
    def _decode(match: "re.Match[str]") -> str:
        escapes = match.group(0)
        decoded = bytes.fromhex(escapes.replace("%", "")).decode("utf-8", errors="surrogateescape")
        if not any(_is_escaped_byte(c) for c in decoded):
            return decoded

        # Each escape is three characters and stands for one byte.
        pieces = []
        offset = 0
        for char in decoded:
            if _is_escaped_byte(char):
                pieces.append(escapes[offset:offset + 3])
                offset += 3
            else:
                pieces.append(char)
                offset += 3 * len(char.encode("utf-8"))
        logger.debug(f"Kept undecodable bytes of escape sequence '{escapes}'.")
        return "".join(pieces)

    return _ESCAPE_RUN.sub(_decode, text)


def _is_escaped_byte(char: str) -> bool:
    """True for the lone surrogates `surrogateescape` uses for bad bytes."""
    return "\udc80" <= char <= "\udcff"


def form_encode(text: str) -> str:
    """Encodes one key or value for a form-urlencoded query."""
    encoded = []
    for byte in text.encode("utf-8"):
        char = chr(byte)
        if char in _FORM_SAFE:
            encoded.append(char)
        elif char == " ":
            encoded.append("+")
        else:
            encoded.append(f"%{byte:02X}")
    return "".join(encoded)


def parse_query(raw: str) -> QueryParams:
    """Splits a raw query string into decoded (key, value) pairs."""
    params = []
    for piece in raw.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        params.append((
            percent_decode(key.replace("+", " ")),
            percent_decode(value.replace("+", " ")),
        ))
    return params


def encode_query(params: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> str:
    """Serializes pairs, in order, into a form-urlencoded query string."""
    pairs = params.items() if isinstance(params, Mapping) else params
    return "&".join(f"{form_encode(str(key))}={form_encode(str(value))}" for key, value in pairs)


def query_params(url: str) -> QueryParams:
    """Returns the decoded query pairs of `url`, in order, duplicates kept.

    Raises:
        ParseError: If `url` does not parse.

    Example:
        >>> query_params("https://a.com?x=1&x=2")
        [('x', '1'), ('x', '2')]
    """
    parsed = parse(url)
    if parsed.query is None:
        return []
    return parse_query(parsed.query)


def with_query(base_url: str, params: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> str:
    """Replaces the query of `base_url` with the encoding of `params`.

    Keys are not deduplicated. The fragment is kept. Empty `params` removes
    the query altogether.

    Raises:
        ParseError: If `base_url` does not parse.
    """
    parsed = parse(base_url)
    query = encode_query(params)
    return replace(parsed, query=query or None).serialize()
