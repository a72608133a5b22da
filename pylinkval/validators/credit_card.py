"""Checks payment card numbers with the Luhn checksum.

Only ASCII digits take part in the check; spaces, dashes and any other
characters are ignored, so "4532 0151 1283 0366" and "4532015112830366"
are the same number.
"""
from typing import Any, List

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

MIN_DIGITS = 13
MAX_DIGITS = 19


def card_digits(number: str) -> List[int]:
    """Returns the ASCII digits of `number`, in order."""
    return [int(char) for char in number if char in "0123456789"]


def luhn_sum(digits: List[int]) -> int:
    """Computes the Luhn sum of a digit sequence.

    Starting from the rightmost digit, every second digit is doubled, and
    doubled values above 9 have 9 subtracted (the sum of their digits).
    """
    total = 0
    for position, digit in enumerate(reversed(digits)):
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total


def validate_credit_card(number: str) -> bool:
    """Returns True if `number` has 13 to 19 digits and passes Luhn.

    Example:
        >>> validate_credit_card("4532015112830366")
        True
        >>> validate_credit_card("4532015112830367")
        False
    """
    digits = card_digits(number)
    if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
        return False
    return luhn_sum(digits) % 10 == 0


class CreditCardValidator(BaseValidator):
    """Validates card numbers by digit count and Luhn checksum."""

    name = "CreditCard"
    category = "Payment"
    description = "Checks that a card number has 13-19 digits and a valid Luhn checksum."
    kind = FormatKind.CREDIT_CARD

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_credit_card(value)

    def _validate(self) -> None:
        """Performs the card number check."""
        digits = card_digits(self.value)
        self.add_info("Digits", len(digits))

        if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
            self.add_error(f"Card numbers have {MIN_DIGITS} to {MAX_DIGITS} digits, found {len(digits)}.")
            return
        if luhn_sum(digits) % 10 != 0:
            self.add_error("The Luhn checksum does not match; a digit is probably mistyped.")
            return

        stray = [char for char in self.value if char not in "0123456789 -"]
        if stray:
            self.add_warning(f"Ignored unexpected characters: {''.join(sorted(set(stray)))}")
