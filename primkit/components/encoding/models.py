"""
Encoding component models.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
HEX_DIGITS = "0123456789abcdef"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
ALPHANUMERIC = UPPERCASE + LOWERCASE + DIGITS


@dataclass(frozen=True)
class PasswordOptions:
    """Character classes and length for generate_password."""

    length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True


@dataclass(frozen=True)
class EncodingConfig:
    """Defaults for random token helpers."""

    default_charset: str = ALPHANUMERIC
    password: PasswordOptions = field(default_factory=PasswordOptions)


DEFAULT_CONFIG = EncodingConfig()
