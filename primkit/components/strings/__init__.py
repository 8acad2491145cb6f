"""
Strings component - case conversion, trimming and inspection helpers.
"""

from ._impl import (
    capitalize,
    generate_random_string,
    is_palindrome,
    is_valid_email_string,
    reverse,
    strip_html,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    truncate,
    word_count,
)
from .models import DEFAULT_CONFIG, StringsConfig

__all__ = [
    # Case conversion
    "capitalize",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    # Trimming
    "strip_html",
    "truncate",
    # Generation
    "generate_random_string",
    # Inspection
    "is_palindrome",
    "is_valid_email_string",
    "reverse",
    "word_count",
    # Config
    "DEFAULT_CONFIG",
    "StringsConfig",
]
