"""Validates IPv4 and IPv6 address literals.

IPv4 addresses must be written as four decimal octets without leading
zeros, which rules out the ambiguous octal-looking forms some resolvers
accept ("010.0.0.1").

IPv6 support is deliberately narrow: the fully expanded eight-group form,
plus the two literals `::1` and `::`. Other compressed notations are valid
IPv6 but are not accepted here.
"""
import ipaddress
import re
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

_IPV6 = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}|::1|::")


def validate_ipv4(ip: str) -> bool:
    """Returns True for a dotted-quad IPv4 address.

    Example:
        >>> validate_ipv4("192.168.01.1")
        False
        >>> validate_ipv4("0.0.0.0")
        True
    """
    parts = ip.split(".")
    if len(parts) != 4:
        return False
    for part in parts:
        if not part.isascii() or not part.isdigit():
            return False
        if len(part) > 1 and part.startswith("0"):
            return False
        if int(part) > 255:
            return False
    return True


def validate_ipv6(ip: str) -> bool:
    """Returns True for an expanded IPv6 address, `::1` or `::`."""
    return _IPV6.fullmatch(ip) is not None


class IPv4Validator(BaseValidator):
    """Validates dotted-quad IPv4 addresses."""

    name = "IPv4"
    category = "Network"
    description = "Checks for four decimal octets (0-255) without leading zeros."
    kind = FormatKind.IPV4

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_ipv4(value)

    def _validate(self) -> None:
        if not validate_ipv4(self.value):
            self.add_error(f"'{self.value}' is not a dotted-quad IPv4 address.")
            return

        address = ipaddress.IPv4Address(self.value)
        if address.is_loopback:
            self.add_info("Range", "loopback")
        elif address.is_private:
            self.add_info("Range", "private")


class IPv6Validator(BaseValidator):
    """Validates expanded IPv6 addresses and the loopback/unspecified literals."""

    name = "IPv6"
    category = "Network"
    description = "Checks for an expanded 8-group IPv6 address, '::1' or '::'."
    kind = FormatKind.IPV6

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_ipv6(value)

    def _validate(self) -> None:
        if validate_ipv6(self.value):
            return
        if "::" in self.value:
            self.add_error("Compressed IPv6 notation is only accepted for '::1' and '::'.")
        else:
            self.add_error(f"'{self.value}' is not an expanded IPv6 address.")
