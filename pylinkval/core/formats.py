"""Enumerations that tag the formats known to pylinkval.

`FormatKind` names every entry in the validator catalog, and its declaration
order doubles as the priority used when guessing the format of an unknown
value. `PostalRegion` selects one postal-code grammar explicitly instead of
comparing country strings at every call site.
"""

import logging
import re
from enum import Enum
from typing import Pattern, Union

logger = logging.getLogger(__name__)


class FormatKind(Enum):
    """The string formats the validator catalog understands."""

    EMAIL = "email"
    URL = "url"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    MAC_ADDRESS = "mac"
    UUID = "uuid"
    HEX_COLOR = "hex-color"
    SSN = "ssn"
    CREDIT_CARD = "credit-card"
    PHONE = "phone"
    JSON = "json"
    POSTAL_CODE = "postal-code"
    PASSWORD = "password"

    @classmethod
    def from_name(cls, name: str) -> "FormatKind":
        """Looks up a kind by its value or member name, case-insensitively.

        Raises:
            ValueError: If `name` matches no kind.
        """
        wanted = name.strip().lower().replace("_", "-")
        for kind in cls:
            if wanted in (kind.value, kind.name.lower().replace("_", "-")):
                return kind
        raise ValueError(f"Unknown format kind: {name}")


class PostalRegion(Enum):
    """Postal-code grammars, one per supported region."""

    US = r"\d{5}(-\d{4})?"
    CA = r"[A-Za-z]\d[A-Za-z] \d[A-Za-z]\d"
    GB = r"[A-Z]{1,2}\d[A-Z\d]? \d[A-Z]{2}"
    GENERIC = r"[A-Za-z0-9\s-]{3,10}"

    @property
    def pattern(self) -> Pattern[str]:
        return _REGION_PATTERNS[self]

    def matches(self, code: str) -> bool:
        return self.pattern.fullmatch(code) is not None

    @classmethod
    def from_code(cls, country: Union[str, "PostalRegion"]) -> "PostalRegion":
        """Maps a country code to its region.

        `UK` is accepted as an alias of `GB`. Codes without a dedicated
        grammar map to `GENERIC`.
        """
        if isinstance(country, cls):
            return country
        code = country.strip().upper()
        if code == "UK":
            return cls.GB
        if code in cls.__members__:
            return cls[code]
        logger.debug(f"No postal grammar for country '{country}', using the generic rule.")
        return cls.GENERIC


_REGION_PATTERNS = {region: re.compile(region.value) for region in PostalRegion}
