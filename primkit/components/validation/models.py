"""
Validation component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Password Policy ---


@dataclass(frozen=True)
class PasswordPolicy:
    """Minimum requirements for is_valid_password."""

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = False

    # Characters that satisfy require_special_chars
    special_chars: str = '!@#$%^&*(),.?":{}|<>'


DEFAULT_POLICY = PasswordPolicy()


# --- Schema Validation Result ---


@dataclass(frozen=True)
class SchemaValidationResult:
    """Outcome of validate_schema."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    invalid_keys: tuple[str, ...] = ()
