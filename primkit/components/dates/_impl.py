"""
Dates component - calendar arithmetic and presentation.

Key behaviors:
- Works on datetime.date and datetime.datetime values
- Naive datetimes are treated as UTC wherever a timezone matters
- "now" is injectable (now=/on=) for deterministic callers and tests
- Month arithmetic clamps the day to the end of the target month

Invariants:
- add_months(d, n) is always a valid date in the target month
- start_of_day(d) <= d <= end_of_day(d)
"""

from __future__ import annotations

import calendar
import math
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DateLike = date | datetime

# Thresholds for format_relative_time, largest first
RELATIVE_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)
JUST_NOW_SECONDS = 45


# --- Argument Checks ---


def _require_date(value: object, name: str = "value") -> DateLike:
    if not isinstance(value, date):
        raise TypeError(f"{name} must be a date or datetime, got {type(value).__name__}")
    return value


def _require_int(value: object, name: str) -> int:
    """value as an int; integral floats such as 2.0 are accepted."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"{name} must be a number")
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise ValueError(f"{name} must be an integer")
    return int(value)


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _now_utc(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(UTC)
    return _as_aware(now)


# --- Calendar Facts ---


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return calendar.isleap(_require_int(year, "year"))


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in the given month.

    Raises:
        ValueError: If month is outside 1-12.
    """
    year = _require_int(year, "year")
    month = _require_int(month, "month")
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1-12, got {month}")
    return calendar.monthrange(year, month)[1]


def is_weekend(value: DateLike) -> bool:
    """Saturday or Sunday."""
    return _require_date(value).weekday() >= 5


def is_same_day(a: DateLike, b: DateLike) -> bool:
    """Same calendar date, ignoring time of day."""
    return _as_date(_require_date(a, "a")) == _as_date(_require_date(b, "b"))


# --- Arithmetic ---


def add_days(value: DateLike, days: int) -> DateLike:
    """Shift value by whole days (negative moves back)."""
    value = _require_date(value)
    days = _require_int(days, "days")
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise ValueError(f"Shifting by {days} days leaves the supported date range") from e


def add_months(value: DateLike, months: int) -> DateLike:
    """
    Shift value by calendar months.

    The day is clamped to the end of the target month:
    add_months(date(2024, 1, 31), 1) -> date(2024, 2, 29)
    """
    value = _require_date(value)
    months = _require_int(months, "months")

    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    if not date.min.year <= year <= date.max.year:
        raise ValueError(f"Resulting year {year} is out of range")

    month = month_index + 1
    day = min(value.day, days_in_month(year, month))
    return value.replace(year=year, month=month, day=day)


def add_years(value: DateLike, years: int) -> DateLike:
    """Shift value by calendar years (Feb 29 clamps to Feb 28)."""
    return add_months(value, 12 * _require_int(years, "years"))


def difference_in_days(later: DateLike, earlier: DateLike) -> int:
    """
    Whole days from earlier to later (negative if later is before earlier).

    Two datetimes are compared exactly and the result floored; if either
    side is a plain date, calendar dates are compared.
    """
    later = _require_date(later, "later")
    earlier = _require_date(earlier, "earlier")

    if isinstance(later, datetime) and isinstance(earlier, datetime):
        if (later.tzinfo is None) != (earlier.tzinfo is None):
            later, earlier = _as_aware(later), _as_aware(earlier)
        return (later - earlier) // timedelta(days=1)

    return (_as_date(later) - _as_date(earlier)).days


def start_of_day(value: DateLike) -> datetime:
    """Midnight at the start of value's day, tzinfo preserved."""
    value = _require_date(value)
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time.min)


def end_of_day(value: DateLike) -> datetime:
    """Last microsecond of value's day, tzinfo preserved."""
    value = _require_date(value)
    if isinstance(value, datetime):
        return value.replace(hour=23, minute=59, second=59, microsecond=999999)
    return datetime.combine(value, time.max)


def age(birth_date: DateLike, *, on: DateLike | None = None) -> int:
    """
    Completed years between birth_date and on (default: today).

    Raises:
        ValueError: If on is before birth_date.
    """
    born = _as_date(_require_date(birth_date, "birth_date"))
    today = _as_date(_require_date(on, "on")) if on is not None else date.today()
    if today < born:
        raise ValueError("on cannot be before birth_date")

    years = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        years -= 1
    return years


# --- Comparison with Now ---


def is_past(value: DateLike, *, now: datetime | None = None) -> bool:
    """Check if value is before now (default: current UTC time)."""
    value = _require_date(value)
    current = _now_utc(now)
    if isinstance(value, datetime):
        return _as_aware(value) < current
    return value < current.date()


def is_future(value: DateLike, *, now: datetime | None = None) -> bool:
    """Check if value is after now (default: current UTC time)."""
    value = _require_date(value)
    current = _now_utc(now)
    if isinstance(value, datetime):
        return _as_aware(value) > current
    return value > current.date()


# --- Timezones ---


def to_timezone(value: datetime, tz_name: str) -> datetime:
    """
    Convert a datetime to the IANA timezone tz_name.

    Naive values are assumed to be UTC.

    Raises:
        ValueError: If tz_name is not a known timezone.
    """
    if not isinstance(value, datetime):
        raise TypeError("value must be a datetime")
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {tz_name}") from e
    return _as_aware(value).astimezone(zone)


# --- Presentation ---


def format_date(value: DateLike, fmt: str = "%Y-%m-%d") -> str:
    return _require_date(value).strftime(fmt)


def parse_date(text: str, fmt: str | None = None) -> datetime:
    """
    Parse text as ISO-8601, or with strptime when fmt is given.

    Raises:
        ValueError: If text does not match.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    try:
        if fmt is None:
            return datetime.fromisoformat(text.strip())
        return datetime.strptime(text, fmt)
    except ValueError as e:
        raise ValueError(f"Unparsable date: {text!r}") from e


def format_relative_time(value: datetime, *, now: datetime | None = None) -> str:
    """
    Human-readable offset from now.

    Example:
        "just now", "5 minutes ago", "in 2 days", "1 year ago"
    """
    if not isinstance(value, datetime):
        raise TypeError("value must be a datetime")

    seconds = int((_now_utc(now) - _as_aware(value)).total_seconds())
    magnitude = abs(seconds)
    if magnitude < JUST_NOW_SECONDS:
        return "just now"

    for unit, size in RELATIVE_UNITS:
        if magnitude >= size:
            count = magnitude // size
            break

    label = f"{count} {unit}{'' if count == 1 else 's'}"
    return f"{label} ago" if seconds > 0 else f"in {label}"
