"""Validates postal codes against a per-region grammar.

The region is a `PostalRegion`; plain country codes are still accepted and
mapped through `PostalRegion.from_code`, where codes without a dedicated
grammar fall back to the generic 3-10 character rule.
"""
from typing import Any, Union

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind, PostalRegion


def validate_postal_code(code: str, country: Union[str, PostalRegion]) -> bool:
    """Returns True if `code` matches the grammar of `country`.

    Example:
        >>> validate_postal_code("90210", "US")
        True
        >>> validate_postal_code("ab", "ZZ")
        False
    """
    return PostalRegion.from_code(country).matches(code)


class PostalCodeValidator(BaseValidator):
    """Validates a postal code for the region given as the `country` option.

    Without a `country` option the `postal_region` configuration value is
    used.
    """

    name = "PostalCode"
    category = "Postal"
    description = "Checks a postal code against the US, CA, GB or generic grammar."
    kind = FormatKind.POSTAL_CODE
    detectable = False

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_postal_code(value, options.get("country") or PostalRegion.GENERIC)

    def _validate(self) -> None:
        country = self.options.get("country") or self.config.get("postal_region", "GENERIC")
        region = PostalRegion.from_code(country)
        self.add_info("Region", region.name)

        if not region.matches(self.value):
            self.add_error(f"'{self.value}' is not a valid {region.name} postal code.")
        elif region is PostalRegion.GENERIC and str(country).strip().upper() != "GENERIC":
            self.add_warning(f"No postal grammar for '{country}'; only the generic rule was applied.")
