"""
Encoding component - base64, non-cryptographic hashes and random tokens.

Key behaviors:
- Text is encoded as UTF-8 before base64
- simple_hash/checksum use the 31-multiplier string hash over UTF-16 code
  units with 32-bit signed wrap-around, so values match the classic
  JavaScript/Java implementations
- Random tokens default to secrets.SystemRandom; pass rng= for
  reproducible output

simple_hash and checksum are NOT suitable for integrity or security checks.
"""

from __future__ import annotations

import base64
import binascii
import math
import random
import secrets
import uuid

from .models import (
    ALPHANUMERIC,
    DEFAULT_CONFIG,
    DIGITS,
    HEX_DIGITS,
    LOWERCASE,
    SYMBOLS,
    UPPERCASE,
    EncodingConfig,
    PasswordOptions,
)

_SYSTEM_RANDOM = secrets.SystemRandom()

# --- Argument Checks ---


def _require_str(value: object, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
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


def _random_chars(length: int, charset: str, rng: random.Random | None) -> str:
    source = rng or _SYSTEM_RANDOM
    return "".join(source.choice(charset) for _ in range(length))


# --- Random Tokens ---


def random_string(
    length: int,
    charset: str | None = None,
    *,
    rng: random.Random | None = None,
    config: EncodingConfig = DEFAULT_CONFIG,
) -> str:
    """Random string of length characters drawn from charset."""
    length = _require_length(length)
    charset = config.default_charset if charset is None else _require_str(charset, "charset")
    if not charset:
        raise ValueError("charset cannot be empty")
    return _random_chars(length, charset, rng)


def random_number(minimum: int, maximum: int, *, rng: random.Random | None = None) -> int:
    """Random integer in [minimum, maximum]."""
    for value in (minimum, maximum):
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise TypeError("Bounds must be numbers")
        if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
            raise ValueError("Bounds must be integers")
    minimum, maximum = int(minimum), int(maximum)
    if minimum > maximum:
        raise ValueError("min cannot be greater than max")
    return (rng or _SYSTEM_RANDOM).randint(minimum, maximum)


def random_hex(length: int, *, rng: random.Random | None = None) -> str:
    return _random_chars(_require_length(length), HEX_DIGITS, rng)


def random_alphanumeric(length: int, *, rng: random.Random | None = None) -> str:
    return _random_chars(_require_length(length), ALPHANUMERIC, rng)


def random_numeric(length: int, *, rng: random.Random | None = None) -> str:
    return _random_chars(_require_length(length), DIGITS, rng)


def generate_uuid(*, rng: random.Random | None = None) -> str:
    """Random version-4 UUID string."""
    bits = (rng or _SYSTEM_RANDOM).getrandbits(128)
    return str(uuid.UUID(int=bits, version=4))


def generate_password(
    options: PasswordOptions | None = None,
    *,
    rng: random.Random | None = None,
    config: EncodingConfig = DEFAULT_CONFIG,
) -> str:
    """
    Random password from the selected character classes.

    Raises:
        ValueError: If no character class is selected.
    """
    options = options or config.password
    length = _require_length(options.length)

    chars = ""
    if options.include_uppercase:
        chars += UPPERCASE
    if options.include_lowercase:
        chars += LOWERCASE
    if options.include_numbers:
        chars += DIGITS
    if options.include_symbols:
        chars += SYMBOLS

    if not chars:
        raise ValueError("At least one character type must be included")

    return _random_chars(length, chars, rng)


# --- Hashes ---


def _string_hash(text: str) -> int:
    """31-multiplier hash over UTF-16 code units, as a signed 32-bit int."""
    data = _require_str(text).encode("utf-16-le")
    value = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def simple_hash(text: str) -> int:
    """
    Non-negative 32-bit string hash.

    Example:
        simple_hash("hello") -> 99162322
    """
    return abs(_string_hash(text))


def checksum(text: str) -> str:
    """Signed hexadecimal rendering of the string hash ("0" for "")."""
    return format(_string_hash(text), "x")


# --- Base64 ---


def to_base64(text: str) -> str:
    """Standard base64 of the UTF-8 bytes of text."""
    return base64.b64encode(_require_str(text).encode("utf-8")).decode("ascii")


def from_base64(data: str) -> str:
    """
    Decode standard base64 into UTF-8 text.

    Raises:
        ValueError: If data is not valid base64 or not UTF-8.
    """
    try:
        return base64.b64decode(_require_str(data, "data"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid base64 input: {e}") from e


def to_base64_url(text: str) -> str:
    """URL-safe base64 without padding."""
    return to_base64(text).replace("+", "-").replace("/", "_").rstrip("=")


def from_base64_url(data: str) -> str:
    """Decode URL-safe base64, restoring any stripped padding."""
    data = _require_str(data, "data")
    padded = data + "=" * (-len(data) % 4)
    return from_base64(padded.replace("-", "+").replace("_", "/"))
