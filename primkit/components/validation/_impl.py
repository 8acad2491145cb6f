"""
Validation component - boolean predicates over strings.

Key behaviors:
- Every predicate is pure and returns False for malformed input
- Non-string input raises TypeError
- Patterns are matched against the whole string (re.fullmatch)
- Credit cards are checked with the Luhn checksum
- validate_schema collects one error per failing key

Invariants:
- is_valid_email accepts local@domain.tld and rejects strings without "@"
- A Luhn-valid number with any single digit altered fails is_valid_credit_card
"""

from __future__ import annotations

import ipaddress
import json
import re
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any
from urllib.parse import urlsplit

from .models import DEFAULT_POLICY, PasswordPolicy, SchemaValidationResult

# --- Patterns ---

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[1-9]\d{0,15}", re.ASCII)
PHONE_STRIP_PATTERN = re.compile(r"[\s\-()]")
CARD_PATTERN = re.compile(r"\d{13,19}", re.ASCII)
POSTAL_CODE_PATTERN = re.compile(r"\d{5}(-\d{4})?", re.ASCII)
SSN_PATTERN = re.compile(r"\d{3}-\d{2}-\d{4}", re.ASCII)
TIME_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]", re.ASCII)
HEX_COLOR_PATTERN = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes that are meaningless without a host
HOST_REQUIRED_SCHEMES = ("http", "https", "ftp", "ws", "wss")

# Non-ISO date layouts accepted by is_valid_date
DATE_FORMATS = ("%m/%d/%Y", "%B %d, %Y", "%b %d, %Y", "%d %B %Y")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")
    return value


# --- Contact Details ---


def is_valid_email(email: str) -> bool:
    """Check for a local@domain.tld shape with no whitespace."""
    return EMAIL_PATTERN.fullmatch(_require_str(email)) is not None


def is_valid_url(url: str) -> bool:
    """
    Check if url is an absolute URL.

    A scheme is required. http(s), ftp and ws(s) URLs also need a host,
    and a port, if given, must be numeric and in range.
    """
    url = _require_str(url)
    if not url or any(ch.isspace() for ch in url):
        return False

    try:
        parts = urlsplit(url)
        # Accessing .port validates it
        parts.port  # noqa: B018
    except ValueError:
        return False

    if not parts.scheme or SCHEME_PATTERN.fullmatch(parts.scheme) is None:
        return False

    if parts.scheme.lower() in HOST_REQUIRED_SCHEMES:
        return bool(parts.hostname)

    return bool(parts.netloc or parts.path)


def is_valid_phone_number(phone: str) -> bool:
    """Basic international phone check, ignoring spaces, dashes and parentheses."""
    cleaned = PHONE_STRIP_PATTERN.sub("", _require_str(phone))
    return PHONE_PATTERN.fullmatch(cleaned) is not None


def is_valid_postal_code(postal_code: str) -> bool:
    """US ZIP or ZIP+4."""
    return POSTAL_CODE_PATTERN.fullmatch(_require_str(postal_code)) is not None


def is_valid_ssn(ssn: str) -> bool:
    """US social security number in 123-45-6789 form."""
    return SSN_PATTERN.fullmatch(_require_str(ssn)) is not None


# --- Payment Cards ---


def luhn_checksum(digits: str) -> int:
    """
    Luhn sum of a digit string, modulo 10.

    A valid identification number has a checksum of 0.
    """
    digits = _require_str(digits)
    if not digits.isdigit() or not digits.isascii():
        raise ValueError("Luhn checksum requires a string of digits")

    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10


def is_valid_credit_card(card_number: str) -> bool:
    """Check length (13-19 digits, whitespace ignored) and Luhn checksum."""
    cleaned = "".join(_require_str(card_number).split())
    if CARD_PATTERN.fullmatch(cleaned) is None:
        return False
    return luhn_checksum(cleaned) == 0


# --- Passwords ---


def password_policy_violations(
    password: str,
    policy: PasswordPolicy | None = None,
) -> list[str]:
    """
    Names of the policy rules the password fails.

    Possible values: "min_length", "uppercase", "lowercase", "numbers",
    "special_chars". An empty list means the password is acceptable.
    """
    password = _require_str(password)
    policy = policy or DEFAULT_POLICY
    violations: list[str] = []

    if len(password) < policy.min_length:
        violations.append("min_length")
    if policy.require_uppercase and not re.search(r"[A-Z]", password):
        violations.append("uppercase")
    if policy.require_lowercase and not re.search(r"[a-z]", password):
        violations.append("lowercase")
    if policy.require_numbers and not re.search(r"\d", password):
        violations.append("numbers")
    if policy.require_special_chars and not any(c in policy.special_chars for c in password):
        violations.append("special_chars")

    return violations


def is_valid_password(password: str, policy: PasswordPolicy | None = None) -> bool:
    """Check password against the policy (default: 8+ chars, mixed case, a digit)."""
    return not password_policy_violations(password, policy)


# --- Network Addresses ---


def is_valid_ipv4(ip: str) -> bool:
    """Dotted-quad IPv4 address."""
    try:
        ipaddress.IPv4Address(_require_str(ip))
    except ipaddress.AddressValueError:
        return False
    return True


def is_valid_ipv6(ip: str) -> bool:
    """IPv6 address in any RFC 4291 text form, including :: compression."""
    try:
        ipaddress.IPv6Address(_require_str(ip))
    except ipaddress.AddressValueError:
        return False
    return True


# --- Dates, Times, Colors ---


def is_valid_date(date_string: str) -> bool:
    """
    Check if the string parses as a date.

    Accepts ISO-8601 dates and datetimes, plus a few common written forms
    such as "01/15/2024" and "January 15, 2024".
    """
    text = _require_str(date_string).strip()
    if not text:
        return False

    for parse in (date.fromisoformat, datetime.fromisoformat):
        try:
            parse(text)
            return True
        except ValueError:
            continue

    for fmt in DATE_FORMATS:
        try:
            datetime.strptime(text, fmt)
            return True
        except ValueError:
            continue

    return False


def is_valid_time(time_string: str) -> bool:
    """24-hour H:MM or HH:MM."""
    return TIME_PATTERN.fullmatch(_require_str(time_string)) is not None


def is_valid_hex_color(color: str) -> bool:
    """#RGB or #RRGGBB."""
    return HEX_COLOR_PATTERN.fullmatch(_require_str(color)) is not None


# --- Structured Text ---


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def is_valid_json(json_string: str) -> bool:
    """
    Strict JSON syntax check (NaN and Infinity are rejected).

    Documents nested deeper than the decoder's recursion limit are invalid.
    """
    json_string = _require_str(json_string)
    try:
        json.loads(json_string, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def is_valid_uuid(uuid: str) -> bool:
    """Canonical RFC 4122 UUID, versions 1-5, case-insensitive."""
    return UUID_PATTERN.fullmatch(_require_str(uuid)) is not None


# --- Schema Validation ---


def validate_schema(
    obj: Mapping[str, Any],
    schema: Mapping[str, Callable[[Any], bool]],
) -> SchemaValidationResult:
    """
    Validate a mapping against per-key predicates.

    Each predicate receives obj.get(key), so a missing key is passed as None.
    A predicate that raises TypeError or ValueError counts as a failure.

    Returns:
        SchemaValidationResult with an "Invalid value for <key>" error per
        failing key, in schema order.
    """
    if not isinstance(obj, Mapping):
        raise TypeError("obj must be a mapping")

    errors: list[str] = []
    invalid: list[str] = []

    for key, predicate in schema.items():
        try:
            ok = bool(predicate(obj.get(key)))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            errors.append(f"Invalid value for {key}")
            invalid.append(key)

    return SchemaValidationResult(
        is_valid=not errors,
        errors=errors,
        invalid_keys=tuple(invalid),
    )
