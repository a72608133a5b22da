"""The format validator catalog.

Each module pairs one or more pure `validate_*` functions with a
`BaseValidator` subclass that reports the same verdict with details. The
classes are discovered and run by the pipeline in `pylinkval.core.validator`.
"""
from .contact import EmailValidator, PhoneValidator, SsnValidator, validate_email, validate_phone, validate_ssn
from .credit_card import CreditCardValidator, validate_credit_card
from .data import JsonValidator, UuidValidator, validate_json, validate_uuid
from .hex_color import HexColorValidator, validate_hex_color
from .ip_address import IPv4Validator, IPv6Validator, validate_ipv4, validate_ipv6
from .mac_address import MacAddressValidator, validate_mac_address
from .password import PasswordStrengthValidator, validate_password_strength
from .postal_code import PostalCodeValidator, validate_postal_code
from .url_validator import UrlValidator
