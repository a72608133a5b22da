"""Validates absolute URLs with the URL component engine.

Besides the verdict, the validator reports the parsed components and flags
links that are commonly unwanted even when well formed: plain `http`
links and credentials embedded in the authority.
"""
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.exceptions import ParseError
from ..core.formats import FormatKind
from ..urls import is_secure, parse, validate_url


class UrlValidator(BaseValidator):
    """Validates a URL and reports its scheme, host, port and origin."""

    name = "URL"
    category = "Web"
    description = "Checks that the value parses as an absolute URL."
    kind = FormatKind.URL

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_url(value)

    def _validate(self) -> None:
        try:
            url = parse(self.value)
        except ParseError as e:
            self.add_error(str(e))
            return

        self.add_info("Scheme", url.scheme)
        if url.has_authority:
            self.add_info("Host", url.host)
            self.add_info("Origin", str(url.origin))
        if url.port is not None:
            self.add_info("Port", url.port)

        self.add_info("Secure", is_secure(url.serialize()))
        if url.scheme == "http":
            self.add_warning("The URL does not use HTTPS.")
        if url.userinfo is not None:
            self.add_warning("The URL embeds credentials in its authority.")
