"""pylinkval: URL manipulation and format validation.

This package provides pure functions for parsing, resolving and rewriting
URLs, and a catalog of validators for common identifier formats (card
numbers, IP and MAC addresses, postal codes, emails, phone numbers and
more), together with a command-line tool to run them.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .core.exceptions import InvalidBaseError, InvalidRelativeError, JoinError, LinkvalError, ParseError, PatternError
from .core.formats import FormatKind, PostalRegion
from .core.validator import detect_format, detect_formats, validate_format, validate_value
from .urls import (
    Origin,
    QueryParams,
    Url,
    is_external,
    is_internal,
    is_secure,
    join,
    normalize,
    origin_of,
    parse,
    path_segments,
    query_params,
    same_origin,
    scheme_of,
    with_query,
)
from .utils.text import matches_pattern
from .validators import (
    validate_credit_card,
    validate_email,
    validate_hex_color,
    validate_ipv4,
    validate_ipv6,
    validate_json,
    validate_mac_address,
    validate_password_strength,
    validate_phone,
    validate_postal_code,
    validate_ssn,
    validate_uuid,
)

__all__ = [
    "__version__",
    "__license__",
    "FormatKind",
    "InvalidBaseError",
    "InvalidRelativeError",
    "JoinError",
    "LinkvalError",
    "Origin",
    "ParseError",
    "PatternError",
    "PostalRegion",
    "QueryParams",
    "Url",
    "detect_format",
    "detect_formats",
    "is_external",
    "is_internal",
    "is_secure",
    "join",
    "matches_pattern",
    "normalize",
    "origin_of",
    "parse",
    "path_segments",
    "query_params",
    "same_origin",
    "scheme_of",
    "validate_credit_card",
    "validate_email",
    "validate_format",
    "validate_hex_color",
    "validate_ipv4",
    "validate_ipv6",
    "validate_json",
    "validate_mac_address",
    "validate_password_strength",
    "validate_phone",
    "validate_postal_code",
    "validate_ssn",
    "validate_uuid",
    "validate_value",
    "with_query",
]
