"""Scores password strength on a 0-4 scale.

One point each is earned for a length of at least 8 characters, a lowercase
letter, an uppercase letter, a digit and a special character. That makes
five criteria for a four-point scale, so the raw count is clamped: a
password meeting all five still scores 4.
"""
from typing import Any, Dict

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind

MIN_LENGTH = 8
MAX_SCORE = 4
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"


def password_criteria(password: str) -> Dict[str, bool]:
    """Returns which strength criteria `password` meets."""
    return {
        "length": len(password) >= MIN_LENGTH,
        "lowercase": any("a" <= c <= "z" for c in password),
        "uppercase": any("A" <= c <= "Z" for c in password),
        "digit": any("0" <= c <= "9" for c in password),
        "special": any(c in SPECIAL_CHARACTERS for c in password),
    }


def validate_password_strength(password: str) -> int:
    """Returns the strength score of `password`, from 0 to 4.

    Example:
        >>> validate_password_strength("abc")
        1
        >>> validate_password_strength("Abc123!@")
        4
    """
    return min(sum(password_criteria(password).values()), MAX_SCORE)


class PasswordStrengthValidator(BaseValidator):
    """Scores a password and rejects it below a configurable minimum.

    The minimum comes from the `minimum_score` option or from
    `validators.PasswordStrength.minimum_score` in the configuration.
    """

    name = "PasswordStrength"
    category = "Security"
    description = "Scores length and character variety from 0 to 4."
    kind = FormatKind.PASSWORD
    detectable = False

    @classmethod
    def check(cls, value: str, **options: Any) -> int:
        return validate_password_strength(value)

    def _validate(self) -> None:
        criteria = password_criteria(self.value)
        score = min(sum(criteria.values()), MAX_SCORE)
        minimum = int(self.get_option("minimum_score", 3))
        self.add_info("Score", score)

        if score < minimum:
            missing = ", ".join(name for name, met in criteria.items() if not met)
            self.add_error(f"Password scores {score}/{MAX_SCORE}, below the required {minimum}. Missing: {missing}.")
        elif not all(criteria.values()):
            missing = ", ".join(name for name, met in criteria.items() if not met)
            self.add_warning(f"Could be stronger. Missing: {missing}.")
