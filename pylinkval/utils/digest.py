"""Hashing, encoding and UUID helpers.

Thin wrappers over `hashlib`, `base64` and `uuid`, used by the checksum CLI
command and the UUID validator.
"""
import base64
import binascii
import hashlib
import re
import uuid

CHECKSUM_LENGTH = 8

_HYPHENATED = r"[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"
# Bare hex, hyphenated, braced hyphenated, or a `urn:uuid:` hyphenated form.
_UUID_FORMS = re.compile(rf"[0-9A-Fa-f]{{32}}|{_HYPHENATED}|\{{{_HYPHENATED}\}}|urn:uuid:{_HYPHENATED}")


def sha256_hash(text: str) -> str:
    """Returns the hex SHA-256 digest of the UTF-8 encoding of `text`."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_checksum(data: str) -> str:
    """Returns a short integrity checksum: the first 8 hex digits of SHA-256."""
    return sha256_hash(data)[:CHECKSUM_LENGTH]


def verify_checksum(data: str, checksum: str) -> bool:
    return generate_checksum(data) == checksum


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_base64(encoded: str) -> str:
    """Decodes standard base64 into UTF-8 text.

    Raises:
        ValueError: If the input is not base64 or not UTF-8 once decoded.
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Base64 decode error: {e}") from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"UTF-8 decode error: {e}") from e


def generate_uuid() -> str:
    return str(uuid.uuid4())


def is_valid_uuid(value: str) -> bool:
    """Returns True if `value` is a UUID written in one of the usual forms.

    `uuid.UUID` alone strips every brace and hyphen before parsing, so the
    layout is checked first.
    """
    if _UUID_FORMS.fullmatch(value) is None:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
