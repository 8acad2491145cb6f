"""
Formatting component models - locale and currency tables, configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"

# --- Locale Conventions ---


@dataclass(frozen=True)
class LocaleFormat:
    """Number presentation rules for one locale."""

    group_separator: str
    decimal_separator: str
    # Placeholders: {number}, {symbol}
    currency_pattern: str
    percent_pattern: str


LOCALES: dict[str, LocaleFormat] = {
    "en-US": LocaleFormat(",", ".", "{symbol}{number}", "{number}%"),
    "en-GB": LocaleFormat(",", ".", "{symbol}{number}", "{number}%"),
    "ja-JP": LocaleFormat(",", ".", "{symbol}{number}", "{number}%"),
    "de-DE": LocaleFormat(".", ",", "{number}" + NBSP + "{symbol}", "{number}" + NBSP + "%"),
    "fr-FR": LocaleFormat(
        NARROW_NBSP, ",", "{number}" + NBSP + "{symbol}", "{number}" + NARROW_NBSP + "%"
    ),
}


# --- Currencies ---


@dataclass(frozen=True)
class Currency:
    """Display symbol and minor units for an ISO 4217 code."""

    code: str
    symbol: str
    minor_units: int = 2


CURRENCIES: dict[str, Currency] = {
    c.code: c
    for c in (
        Currency("USD", "$"),
        Currency("EUR", "€"),
        Currency("GBP", "£"),
        Currency("JPY", "¥", 0),
        Currency("CNY", "CN¥"),
        Currency("INR", "₹"),
        Currency("CAD", "CA$"),
        Currency("AUD", "A$"),
        Currency("CHF", "CHF"),
        Currency("KRW", "₩", 0),
    )
}


# --- Configuration ---

SMALL_TITLE_WORDS: tuple[str, ...] = (
    "a", "an", "and", "as", "at", "but", "by", "for", "if", "in",
    "nor", "of", "on", "or", "so", "the", "to", "up", "yet",
)  # fmt: skip

FILE_SIZE_UNITS: tuple[str, ...] = (
    "Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB",
)  # fmt: skip


@dataclass(frozen=True)
class FormatConfig:
    """Formatting defaults."""

    locale: str = "en-US"
    currency: str = "USD"
    title_small_words: tuple[str, ...] = SMALL_TITLE_WORDS


DEFAULT_CONFIG = FormatConfig()
