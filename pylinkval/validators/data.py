"""Validates structured-data strings: UUIDs and JSON documents."""
import json
import uuid
from typing import Any

from ..core.base_validator import BaseValidator
from ..core.formats import FormatKind
from ..utils.digest import is_valid_uuid


def validate_uuid(value: str) -> bool:
    return is_valid_uuid(value)


def validate_json(value: str) -> bool:
    """Returns True if `value` is a complete JSON document."""
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


class UuidValidator(BaseValidator):
    name = "UUID"
    category = "Data"
    description = "Checks for a UUID in canonical, braced, URN or bare-hex form."
    kind = FormatKind.UUID

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_uuid(value)

    def _validate(self) -> None:
        if not validate_uuid(self.value):
            self.add_error(f"'{self.value}' is not a UUID.")
            return
        parsed = uuid.UUID(self.value)
        self.add_info("Version", parsed.version)
        if str(parsed) != self.value.lower():
            self.add_info("Canonical", str(parsed))


class JsonValidator(BaseValidator):
    name = "JSON"
    category = "Data"
    description = "Checks that the value parses as a JSON document."
    kind = FormatKind.JSON

    @classmethod
    def check(cls, value: str, **options: Any) -> bool:
        return validate_json(value)

    def _validate(self) -> None:
        try:
            document = json.loads(self.value)
        except ValueError as e:
            self.add_error(f"Not valid JSON: {e}")
            return
        self.add_info("Type", type(document).__name__)
        if not isinstance(document, (dict, list)):
            self.add_warning("The document is a bare scalar, not an object or array.")
