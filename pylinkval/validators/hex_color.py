"""Validates CSS-style hexadecimal color codes."""
import re
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

_HEX_COLOR = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")


def validate_hex_color(color: str) -> bool:
    """Returns True for '#' followed by exactly 3 or 6 hex digits."""
    return _HEX_COLOR.fullmatch(color) is not None


class HexColorValidator(BaseValidator):
    name = "HexColor"
    category = "Web"
    description = "Checks for '#RGB' or '#RRGGBB'."
    kind = FormatKind.HEX_COLOR

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_hex_color(value)

    def _validate(self) -> None:
        if not validate_hex_color(self.value):
            self.add_error(f"'{self.value}' is not '#' followed by 3 or 6 hex digits.")
            return
        digits = self.value[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        self.add_info("RGB", tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4)))
