"""
Encoding component - base64, non-cryptographic hashes and random tokens.
"""

from ._impl import (
    checksum,
    from_base64,
    from_base64_url,
    generate_password,
    generate_uuid,
    random_alphanumeric,
    random_hex,
    random_number,
    random_numeric,
    random_string,
    simple_hash,
    to_base64,
    to_base64_url,
)
from .models import DEFAULT_CONFIG, EncodingConfig, PasswordOptions

__all__ = [
    # Base64
    "from_base64",
    "from_base64_url",
    "to_base64",
    "to_base64_url",
    # Hashes
    "checksum",
    "simple_hash",
    # Random tokens
    "generate_password",
    "generate_uuid",
    "random_alphanumeric",
    "random_hex",
    "random_number",
    "random_numeric",
    "random_string",
    # Config
    "DEFAULT_CONFIG",
    "EncodingConfig",
    "PasswordOptions",
]
