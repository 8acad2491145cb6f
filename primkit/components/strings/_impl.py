"""
Strings component - case conversion, trimming and inspection helpers.

Key behaviors:
- Case converters treat runs of "-", "_" and whitespace as word breaks
- truncate never returns more than max(length, len(suffix)) characters
- Random strings draw from an injectable random.Random
"""

from __future__ import annotations

import math
import random
import re

from .models import DEFAULT_CONFIG, StringsConfig

# --- Patterns ---

CAMEL_BREAK_PATTERN = re.compile(r"[-_\s]+(.)?")
LOWER_UPPER_PATTERN = re.compile(r"([a-z])([A-Z])")
KEBAB_SEPARATOR_PATTERN = re.compile(r"[\s_]+")
SNAKE_SEPARATOR_PATTERN = re.compile(r"[\s-]+")
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")
    return value


def _require_length(length: object) -> int:
    """length as an int; integral floats such as 3.0 are accepted."""
    if isinstance(length, bool) or not isinstance(length, int | float):
        raise TypeError("length must be a number")
    if isinstance(length, float) and not (math.isfinite(length) and length.is_integer()):
        raise ValueError("length must be an integer")
    if length < 0:
        raise ValueError("length must be a non-negative integer")
    return int(length)


# --- Case Conversion ---


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    text = _require_str(text)
    if not text:
        return text
    return text[0].upper() + text[1:].lower()


def to_camel_case(text: str) -> str:
    """
    Convert to camelCase.

    Example:
        to_camel_case("hello-world") -> "helloWorld"
        to_camel_case("Hello World") -> "helloWorld"
    """
    text = _require_str(text)
    joined = CAMEL_BREAK_PATTERN.sub(
        lambda m: m.group(1).upper() if m.group(1) else "",
        text,
    )
    return joined[:1].lower() + joined[1:]


def to_pascal_case(text: str) -> str:
    """Convert to PascalCase."""
    camel = to_camel_case(text)
    return camel[:1].upper() + camel[1:]


def to_kebab_case(text: str) -> str:
    """Convert to kebab-case: "helloWorld" -> "hello-world"."""
    text = _require_str(text)
    text = LOWER_UPPER_PATTERN.sub(r"\1-\2", text)
    return KEBAB_SEPARATOR_PATTERN.sub("-", text).lower()


def to_snake_case(text: str) -> str:
    """Convert to snake_case: "helloWorld" -> "hello_world"."""
    text = _require_str(text)
    text = LOWER_UPPER_PATTERN.sub(r"\1_\2", text)
    return SNAKE_SEPARATOR_PATTERN.sub("_", text).lower()


# --- Trimming ---


def truncate(
    text: str,
    length: int,
    suffix: str | None = None,
    config: StringsConfig = DEFAULT_CONFIG,
) -> str:
    """
    Shorten text to length characters, ending with suffix.

    If the suffix is longer than length, only the suffix is returned.

    Raises:
        ValueError: If length is negative.
    """
    text = _require_str(text)
    length = _require_length(length)
    if suffix is None:
        suffix = config.truncate_suffix

    if len(text) <= length:
        return text
    keep = max(length - len(suffix), 0)
    return text[:keep] + suffix


def strip_html(html: str) -> str:
    """Remove all <...> tags."""
    return HTML_TAG_PATTERN.sub("", _require_str(html))


# --- Generation ---


def generate_random_string(
    length: int,
    charset: str | None = None,
    *,
    rng: random.Random | None = None,
    config: StringsConfig = DEFAULT_CONFIG,
) -> str:
    """
    Random string of length characters drawn from charset.

    Not suitable for secrets; see encoding.random_string for that.
    """
    length = _require_length(length)
    charset = config.default_charset if charset is None else _require_str(charset)
    if not charset:
        raise ValueError("charset cannot be empty")

    source = rng or random
    return "".join(source.choice(charset) for _ in range(length))


# --- Inspection ---


def is_valid_email_string(email: str) -> bool:
    """Check for a local@domain.tld shape with no whitespace."""
    return EMAIL_PATTERN.fullmatch(_require_str(email)) is not None


def word_count(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(_require_str(text).split())


def reverse(text: str) -> str:
    return _require_str(text)[::-1]


def is_palindrome(text: str) -> bool:
    """
    Check if text reads the same backwards, ignoring case and anything
    other than ASCII letters and digits.
    """
    cleaned = NON_ALNUM_PATTERN.sub("", _require_str(text).lower())
    return cleaned == reverse(cleaned)
