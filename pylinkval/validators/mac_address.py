"""Validates 48-bit MAC addresses written as six hex pairs."""
import re
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

# Each separator may be ":" or "-" independently of the others.
_MAC = re.compile(r"([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}")


def validate_mac_address(mac: str) -> bool:
    """Returns True for six 2-digit hex groups separated by ':' or '-'."""
    return _MAC.fullmatch(mac) is not None


class MacAddressValidator(BaseValidator):
    """Validates MAC addresses such as 00:1A:2B:3C:4D:5E."""

    name = "MacAddress"
    category = "Network"
    description = "Checks for six hex pairs separated by ':' or '-'."
    kind = FormatKind.MAC_ADDRESS

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_mac_address(value)

    def _validate(self) -> None:
        if not validate_mac_address(self.value):
            self.add_error(f"'{self.value}' is not six hex pairs separated by ':' or '-'.")
            return

        separators = set(re.findall(r"[:-]", self.value))
        if len(separators) > 1:
            self.add_warning("Mixed ':' and '-' separators.")
