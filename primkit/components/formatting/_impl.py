"""
Formatting component - presentation strings for numbers, sizes, durations,
identifiers and names.

Key behaviors:
- Decimal rounding is half-up on the decimal representation (1.005 -> "1.01")
- Locale-aware helpers use the LOCALES table; unknown locales raise ValueError
- Identifier formatters (phone, SSN, card, postal code) return the input
  unchanged when the digit count does not fit
"""

from __future__ import annotations

import math
import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext

from .models import (
    CURRENCIES,
    DEFAULT_CONFIG,
    FILE_SIZE_UNITS,
    LOCALES,
    NBSP,
    Currency,
    FormatConfig,
    LocaleFormat,
)

NON_DIGIT_PATTERN = re.compile(r"\D", re.ASCII)
SLUG_STRIP_PATTERN = re.compile(r"[^\w\s-]", re.ASCII)
SLUG_SEPARATOR_PATTERN = re.compile(r"[\s_-]+")

# --- Argument Checks ---


def _require_number(value: object, name: str = "value") -> float | int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"{name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    return value


def _require_int(value: object, name: str) -> int:
    """value as an int; integral floats such as 2.0 are accepted."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"{name} must be a number")
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise ValueError(f"{name} must be an integer")
    return int(value)


def _require_decimals(decimals: object) -> int:
    decimals = _require_int(decimals, "decimals")
    if decimals < 0:
        raise ValueError("decimals must be a non-negative integer")
    return decimals


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")
    return value


def _locale(locale: str | None, config: FormatConfig) -> LocaleFormat:
    name = locale or config.locale
    try:
        return LOCALES[name]
    except KeyError:
        raise ValueError(f"Unsupported locale: {name}") from None


def _round_half_up(value: float | int | Decimal, decimals: int) -> Decimal:
    exact = Decimal(str(value))
    # Enough precision for every integer digit plus the requested decimals
    with localcontext() as ctx:
        ctx.prec = max(exact.adjusted() + 1, 1) + decimals + 1
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        quantum = Decimal(1).scaleb(-decimals)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def _group_digits(value: float | int, decimals: int, fmt: LocaleFormat) -> tuple[bool, str]:
    """Return (is_negative, grouped absolute value) for a rounded number."""
    rounded = _round_half_up(value, decimals)
    negative = rounded < 0
    text = f"{rounded.copy_abs():,.{decimals}f}"
    integer, _, fraction = text.partition(".")
    integer = integer.replace(",", fmt.group_separator)
    if fraction:
        return negative, f"{integer}{fmt.decimal_separator}{fraction}"
    return negative, integer


# --- Numbers ---


def format_number(
    num: float | int,
    decimals: int = 0,
    locale: str | None = None,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """
    Group thousands and fix the number of decimals.

    Example:
        format_number(1234567.891, 2) -> "1,234,567.89"
        format_number(1234.5, 1, "de-DE") -> "1.234,5"
    """
    num = _require_number(num, "num")
    decimals = _require_decimals(decimals)
    negative, body = _group_digits(num, decimals, _locale(locale, config))
    return f"-{body}" if negative else body


def format_currency(
    amount: float | int,
    currency: str | None = None,
    locale: str | None = None,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """
    Format amount as money in the currency's minor units.

    Unknown currency codes are shown by code with two decimals.

    Example:
        format_currency(1234.5) -> "$1,234.50"
        format_currency(1234.5, "EUR", "de-DE") -> "1.234,50 €"
    """
    amount = _require_number(amount, "amount")
    code = (currency or config.currency).upper()
    fmt = _locale(locale, config)
    info = CURRENCIES.get(code, Currency(code, code))

    symbol = info.symbol
    if symbol.isalpha() and fmt.currency_pattern.startswith("{symbol}"):
        symbol += NBSP

    negative, body = _group_digits(amount, info.minor_units, fmt)
    text = fmt.currency_pattern.format(symbol=symbol, number=body)
    return f"-{text}" if negative else text


def format_percentage(
    value: float | int,
    decimals: int = 2,
    locale: str | None = None,
    config: FormatConfig = DEFAULT_CONFIG,
) -> str:
    """
    Format a value that is already a percentage.

    Example:
        format_percentage(12.345) -> "12.35%"
    """
    value = _require_number(value)
    decimals = _require_decimals(decimals)
    fmt = _locale(locale, config)
    negative, body = _group_digits(value, decimals, fmt)
    text = fmt.percent_pattern.format(number=body)
    return f"-{text}" if negative else text


def format_ordinal(num: int) -> str:
    """1st, 2nd, 3rd, 4th, 11th, 12th, 13th, 21st, 112th..."""
    num = _require_int(num, "num")

    last_two = abs(num) % 100
    last = abs(num) % 10
    if last == 1 and last_two != 11:
        suffix = "st"
    elif last == 2 and last_two != 12:
        suffix = "nd"
    elif last == 3 and last_two != 13:
        suffix = "rd"
    else:
        suffix = "th"
    return f"{num}{suffix}"


# --- Sizes and Durations ---


def format_file_size(num_bytes: float | int) -> str:
    """
    Human-readable size using 1024-based units.

    Example:
        format_file_size(1536) -> "1.5 KB"
        format_file_size(1048576) -> "1 MB"
    """
    num_bytes = _require_number(num_bytes, "num_bytes")
    if num_bytes < 0:
        raise ValueError("num_bytes cannot be negative")
    if num_bytes == 0:
        return "0 Bytes"

    index = 0
    size = Decimal(str(num_bytes))
    while size >= 1024 and index < len(FILE_SIZE_UNITS) - 1:
        size /= 1024
        index += 1

    text = f"{_round_half_up(size, 2):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {FILE_SIZE_UNITS[index]}"


def format_duration(seconds: float | int) -> str:
    """
    Compact duration using the two largest units.

    Example:
        format_duration(45) -> "45s"
        format_duration(3725) -> "1h 2m"
        format_duration(90061) -> "1d 1h"
    """
    seconds = _require_number(seconds, "seconds")
    if seconds < 0:
        raise ValueError("seconds cannot be negative")

    if seconds < 60:
        return f"{math.floor(seconds)}s"

    minutes, remaining_seconds = divmod(seconds, 60)
    minutes = int(minutes)
    if minutes < 60:
        return f"{minutes}m {math.floor(remaining_seconds)}s"

    hours, remaining_minutes = divmod(minutes, 60)
    if hours < 24:
        return f"{hours}h {remaining_minutes}m"

    days, remaining_hours = divmod(hours, 24)
    return f"{days}d {remaining_hours}h"


# --- Identifiers ---


def _digits(value: str) -> str:
    return NON_DIGIT_PATTERN.sub("", _require_str(value))


def format_phone_number(phone: str) -> str:
    """555-123-4567 for 10 digits, +1 555-123-4567 for 11 digits starting with 1."""
    cleaned = _digits(phone)
    if len(cleaned) == 10:
        return f"{cleaned[:3]}-{cleaned[3:6]}-{cleaned[6:]}"
    if len(cleaned) == 11 and cleaned.startswith("1"):
        return f"+1 {cleaned[1:4]}-{cleaned[4:7]}-{cleaned[7:]}"
    return phone


def format_credit_card(card_number: str) -> str:
    """Digits in groups of four separated by spaces."""
    cleaned = _digits(card_number)
    if not cleaned:
        return card_number
    return " ".join(cleaned[i : i + 4] for i in range(0, len(cleaned), 4))


def format_ssn(ssn: str) -> str:
    cleaned = _digits(ssn)
    if len(cleaned) == 9:
        return f"{cleaned[:3]}-{cleaned[3:5]}-{cleaned[5:]}"
    return ssn


def format_postal_code(postal_code: str) -> str:
    """ZIP+4 for nine digits, otherwise the digits alone."""
    cleaned = _digits(postal_code)
    if len(cleaned) == 9:
        return f"{cleaned[:5]}-{cleaned[5:]}"
    return cleaned


# --- Text ---


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def format_name(name: str) -> str:
    """Capitalize each space-separated word: "jOHN doe" -> "John Doe"."""
    return " ".join(_upper_first(word) for word in _require_str(name).lower().split(" "))


def format_sentence(sentence: str) -> str:
    sentence = _require_str(sentence)
    return sentence[:1].upper() + sentence[1:].lower()


def format_title(title: str, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """
    Title case, keeping small words lower-case unless first or last.

    Example:
        format_title("the lord of the rings") -> "The Lord of the Rings"
    """
    words = _require_str(title).lower().split(" ")
    last_index = len(words) - 1
    small = set(config.title_small_words)
    return " ".join(
        _upper_first(word) if i in (0, last_index) or word not in small else word
        for i, word in enumerate(words)
    )


def format_slug(text: str) -> str:
    """
    URL slug: "Hello, World!" -> "hello-world".
    """
    slug = SLUG_STRIP_PATTERN.sub("", _require_str(text).lower())
    slug = SLUG_SEPARATOR_PATTERN.sub("-", slug)
    return slug.strip("-")
