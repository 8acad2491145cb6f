"""
Validation component - pure predicates over strings and mappings.
"""

from ._impl import (
    is_valid_credit_card,
    is_valid_date,
    is_valid_email,
    is_valid_hex_color,
    is_valid_ipv4,
    is_valid_ipv6,
    is_valid_json,
    is_valid_password,
    is_valid_phone_number,
    is_valid_postal_code,
    is_valid_ssn,
    is_valid_time,
    is_valid_url,
    is_valid_uuid,
    luhn_checksum,
    password_policy_violations,
    validate_schema,
)
from .models import DEFAULT_POLICY, PasswordPolicy, SchemaValidationResult

__all__ = [
    # Predicates
    "is_valid_credit_card",
    "is_valid_date",
    "is_valid_email",
    "is_valid_hex_color",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "is_valid_json",
    "is_valid_password",
    "is_valid_phone_number",
    "is_valid_postal_code",
    "is_valid_ssn",
    "is_valid_time",
    "is_valid_url",
    "is_valid_uuid",
    # Helpers
    "luhn_checksum",
    "password_policy_violations",
    "validate_schema",
    # Models
    "DEFAULT_POLICY",
    "PasswordPolicy",
    "SchemaValidationResult",
]
