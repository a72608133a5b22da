"""Validates contact and identity strings: emails, phone numbers and SSNs.

These are fixed-grammar checks. They say nothing about whether a mailbox or
number exists, only whether the text has the expected shape.
"""
import re
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE = re.compile(r"\+?[1-9]\d{1,14}")
_SSN = re.compile(r"\d{3}-\d{2}-\d{4}")


def validate_email(email: str) -> bool:
    return _EMAIL.fullmatch(email) is not None


def clean_phone(phone: str) -> str:
    """Keeps only the ASCII digits and '+' signs of `phone`."""
    return "".join(c for c in phone if c in "0123456789+")


def validate_phone(phone: str) -> bool:
    """Returns True for an E.164-like number once punctuation is stripped.

    Example:
        >>> validate_phone("+1 (555) 123-4567")
        True
    """
    return _PHONE.fullmatch(clean_phone(phone)) is not None


def validate_ssn(ssn: str) -> bool:
    """Returns True for a US Social Security Number written as 123-45-6789."""
    return _SSN.fullmatch(ssn) is not None


class EmailValidator(BaseValidator):
    name = "Email"
    category = "Contact"
    description = "Checks for local-part@domain.tld."
    kind = FormatKind.EMAIL

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_email(value)

    def _validate(self) -> None:
        if not validate_email(self.value):
            self.add_error(f"'{self.value}' is not an email address.")
            return
        local, _, domain = self.value.rpartition("@")
        self.add_info("Domain", domain.lower())
        if ".." in local or ".." in domain:
            self.add_warning("Consecutive dots are rejected by most mail servers.")


class PhoneValidator(BaseValidator):
    name = "Phone"
    category = "Contact"
    description = "Checks for an E.164-like number after stripping punctuation."
    kind = FormatKind.PHONE

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_phone(value)

    def _validate(self) -> None:
        cleaned = clean_phone(self.value)
        self.add_info("Normalized", cleaned)
        if not validate_phone(self.value):
            self.add_error(f"'{self.value}' is not a phone number of 2 to 15 digits.")
        elif not cleaned.startswith("+"):
            self.add_warning("No country code; the number is ambiguous outside its own country.")


class SsnValidator(BaseValidator):
    name = "SSN"
    category = "Identity"
    description = "Checks for a US Social Security Number in 123-45-6789 form."
    kind = FormatKind.SSN

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_ssn(value)

    def _validate(self) -> None:
        if not validate_ssn(self.value):
            self.add_error(f"'{self.value}' is not in 123-45-6789 form.")
