"""Parses URL strings into structured `Url` values.

The grammar is the generic one from RFC 3986:

    scheme ":" ["//" authority] path ["?" query] ["#" fragment]

A handful of well-known schemes are treated as "special": they must carry an
authority, their host is required (except for `file`), and their default
port is dropped from the parsed form so that `https://a.com:443/` and
`https://a.com/` parse to the same value. Schemes such as `mailto:` or
`data:` have no authority at all and keep their path opaque.
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..core.exceptions import ParseError

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Schemes that must be written with an authority component.
SPECIAL_SCHEMES = frozenset(DEFAULT_PORTS) | {"file"}

_SCHEME = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):")
_REFERENCE = re.compile(r"(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?", re.DOTALL)
FORBIDDEN_IN_URL = re.compile(r"[\x00-\x20\x7f]")
_FORBIDDEN_IN_HOST = re.compile(r"[\s#%/:<>?@\[\\\]^|]")


class Reference(NamedTuple):
    """The raw components of a URL or relative reference, before validation."""

    scheme: Optional[str]
    authority: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]


@dataclass(frozen=True)
class Origin:
    """The (scheme, host, effective port) triple of a URL.

    An origin without a host is opaque and is never the same origin as any
    other, itself included.
    """

    scheme: str
    host: Optional[str]
    port: Optional[int]

    @property
    def is_opaque(self) -> bool:
        return self.host is None

    def same_as(self, other: "Origin") -> bool:
        if self.is_opaque or other.is_opaque:
            return False
        return (self.scheme, self.host, self.port) == (other.scheme, other.host, other.port)

    def __str__(self) -> str:
        if self.is_opaque:
            return "null"
        port = "" if self.port is None or self.port == DEFAULT_PORTS.get(self.scheme) else f":{self.port}"
        return f"{self.scheme}://{self.host}{port}"


@dataclass(frozen=True)
class Url:
    """A parsed URL.

    Attributes:
        scheme (str): The lower-cased scheme.
        userinfo (Optional[str]): Raw `user[:password]` text, if present.
        host (Optional[str]): The lower-cased host; `None` when the URL has
            no authority, `""` for an empty authority such as `file:///`.
        port (Optional[int]): The explicit port, or `None` when absent or
            equal to the scheme default.
        path (str): The path; starts with `/` whenever there is an authority.
        query (Optional[str]): The raw query, without the leading `?`.
        fragment (Optional[str]): The raw fragment, without the leading `#`.
    """

    scheme: str
    host: Optional[str] = None
    port: Optional[int] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None
    userinfo: Optional[str] = None

    @property
    def has_authority(self) -> bool:
        return self.host is not None

    @property
    def effective_port(self) -> Optional[int]:
        """The explicit port, falling back to the scheme default."""
        if self.port is not None:
            return self.port
        return DEFAULT_PORTS.get(self.scheme)

    @property
    def origin(self) -> Origin:
        return Origin(self.scheme, self.host, self.effective_port if self.has_authority else None)

    @property
    def authority(self) -> Optional[str]:
        if self.host is None:
            return None
        userinfo = f"{self.userinfo}@" if self.userinfo is not None else ""
        port = f":{self.port}" if self.port is not None else ""
        return f"{userinfo}{self.host}{port}"

    def serialize(self) -> str:
        """Rebuilds the URL string from its components."""
        result = f"{self.scheme}:"
        if self.authority is not None:
            result += f"//{self.authority}"
        result += self.path
        if self.query is not None:
            result += f"?{self.query}"
        if self.fragment is not None:
            result += f"#{self.fragment}"
        return result

    def __str__(self) -> str:
        return self.serialize()


def split_reference(text: str) -> Reference:
    """Splits a URL or relative reference into its raw components.

    No validation happens here; a leading `name:` is only taken as a scheme
    when it follows the scheme grammar, so `1abc:x` is a relative path.
    """
    scheme = None
    rest = text
    match = _SCHEME.match(text)
    if match:
        scheme = match.group(1)
        rest = text[match.end():]
    authority, path, query, fragment = _REFERENCE.fullmatch(rest).groups()
    return Reference(scheme, authority, path, query, fragment)


def remove_dot_segments(path: str) -> str:
    """Removes `.` and `..` segments from a path (RFC 3986, section 5.2.4).

    `..` never climbs above the root, and a trailing `.` or `..` leaves the
    path ending in `/`.

    Example:
        >>> remove_dot_segments("/a/b/c/./../../g")
        '/a/g'
    """
    absolute = path.startswith("/")
    segments = path.split("/")
    if absolute:
        segments = segments[1:]

    output = []
    for segment in segments:
        if segment == "..":
            if output:
                output.pop()
        elif segment != ".":
            output.append(segment)
    if segments and segments[-1] in (".", ".."):
        output.append("")

    result = "/".join(output)
    return f"/{result}" if absolute else result


def parse(url: str) -> Url:
    """Parses an absolute URL.

    Args:
        url (str): The URL text. Surrounding whitespace is ignored.

    Returns:
        Url: The structured form of the URL.

    Raises:
        ParseError: If the text does not follow the URL grammar.
    """
    text = url.strip()
    if FORBIDDEN_IN_URL.search(text):
        raise ParseError(f"'{url}' contains whitespace or control characters")

    ref = split_reference(text)
    if ref.scheme is None:
        raise ParseError(f"'{url}' has no scheme")
    return build_url(ref, source=url)


def build_url(ref: Reference, source: str) -> Url:
    """Validates raw components and assembles a `Url`.

    Raises:
        ParseError: If a component is malformed.
    """
    scheme = ref.scheme.lower()
    if ref.authority is None:
        if scheme in SPECIAL_SCHEMES:
            raise ParseError(f"'{source}' must use '{scheme}://'")
        return Url(scheme=scheme, path=ref.path, query=ref.query, fragment=ref.fragment)

    userinfo, host, port = _parse_authority(ref.authority, scheme, source)
    # The authority pattern stops at "/", so a non-empty path is absolute here.
    path = remove_dot_segments(ref.path) if ref.path else "/"
    return Url(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=port,
        path=path,
        query=ref.query,
        fragment=ref.fragment,
    )


def _parse_authority(authority: str, scheme: str, source: str):
    userinfo = None
    if "@" in authority:
        userinfo, _, authority = authority.rpartition("@")

    if authority.startswith("["):
        end = authority.find("]")
        if end == -1:
            raise ParseError(f"'{source}' has an unterminated IPv6 host")
        host = authority[:end + 1]
        rest = authority[end + 1:]
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError as e:
            raise ParseError(f"'{source}' has an invalid IPv6 host: {e}") from e
        if rest and not rest.startswith(":"):
            raise ParseError(f"'{source}' has characters after the IPv6 host")
        port_text = rest[1:] if rest else None
    else:
        host, colon, port_text = authority.partition(":")
        if not colon:
            port_text = None
        if _FORBIDDEN_IN_HOST.search(host):
            raise ParseError(f"'{source}' has a forbidden character in host '{host}'")

    if not host and scheme in SPECIAL_SCHEMES and scheme != "file":
        raise ParseError(f"'{source}' has an empty host")

    port = None
    if port_text:
        if not port_text.isascii() or not port_text.isdigit():
            raise ParseError(f"'{source}' has a non-numeric port '{port_text}'")
        port = int(port_text)
        if port > 65535:
            raise ParseError(f"'{source}' has a port out of range: {port}")
        if port == DEFAULT_PORTS.get(scheme):
            port = None

    return userinfo, host.lower(), port
