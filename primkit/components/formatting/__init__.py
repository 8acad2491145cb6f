"""
Formatting component - presentation strings.
"""

from ._impl import (
    format_credit_card,
    format_currency,
    format_duration,
    format_file_size,
    format_name,
    format_number,
    format_ordinal,
    format_percentage,
    format_phone_number,
    format_postal_code,
    format_sentence,
    format_slug,
    format_ssn,
    format_title,
)
from .models import CURRENCIES, DEFAULT_CONFIG, LOCALES, Currency, FormatConfig, LocaleFormat

__all__ = [
    # Numbers
    "format_currency",
    "format_number",
    "format_ordinal",
    "format_percentage",
    # Sizes and durations
    "format_duration",
    "format_file_size",
    # Identifiers
    "format_credit_card",
    "format_phone_number",
    "format_postal_code",
    "format_ssn",
    # Text
    "format_name",
    "format_sentence",
    "format_slug",
    "format_title",
    # Models
    "CURRENCIES",
    "DEFAULT_CONFIG",
    "LOCALES",
    "Currency",
    "FormatConfig",
    "LocaleFormat",
]
