"""Small text-processing helpers.

`matches_pattern` is the one place a caller-supplied regular expression is
accepted; it is compiled at call time and a bad pattern raises
`PatternError` instead of leaking `re.error`.
"""
import re
from typing import List

from ..core.exceptions import PatternError

_EMAIL_IN_TEXT = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_URL_IN_TEXT = re.compile(r"https?://[^\s<>\"]+")
_NOT_SLUG = re.compile(r"[^a-zA-Z0-9 -]")
_WHITESPACE = re.compile(r"\s+")


def matches_pattern(text: str, pattern: str) -> bool:
    """Returns True if `pattern` matches anywhere in `text`.

    Args:
        text (str): The text to search.
        pattern (str): A Python regular expression.

    Raises:
        PatternError: If `pattern` does not compile.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise PatternError(str(e)) from e
    return compiled.search(text) is not None


def extract_email_addresses(text: str) -> List[str]:
    return _EMAIL_IN_TEXT.findall(text)


def extract_urls(text: str) -> List[str]:
    """Returns every http(s) URL in `text`, up to the next whitespace, quote or angle bracket."""
    return _URL_IN_TEXT.findall(text)


def to_slug(text: str) -> str:
    """Converts text to a lowercase, hyphen-separated slug.

    Example:
        >>> to_slug("Hello, World!  Again")
        'hello-world-again'
    """
    cleaned = _NOT_SLUG.sub("", text)
    return _WHITESPACE.sub("-", cleaned).lower()


def is_ascii_only(text: str) -> bool:
    return text.isascii()
