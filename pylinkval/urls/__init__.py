"""The URL component engine.

Parses URLs into `Url` values, resolves relative references, compares
origins and rewrites query strings. Everything here is a pure function of
its string arguments.
"""
from .components import (
    get_url_domain,
    get_url_fragment,
    get_url_path,
    get_url_port,
    get_url_query,
    get_url_scheme,
    origin_of,
    path_segments,
    same_origin,
    validate_url,
)
from .links import is_external, is_internal, is_secure, normalize, scheme_of
from .parser import DEFAULT_PORTS, Origin, Url, parse, remove_dot_segments
from .query import QueryParams, encode_query, form_encode, parse_query, percent_decode, query_params, with_query
from .resolve import join
