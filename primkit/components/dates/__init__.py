"""
Dates component - calendar arithmetic and presentation.
"""

from ._impl import (
    add_days,
    add_months,
    add_years,
    age,
    days_in_month,
    difference_in_days,
    end_of_day,
    format_date,
    format_relative_time,
    is_future,
    is_leap_year,
    is_past,
    is_same_day,
    is_weekend,
    parse_date,
    start_of_day,
    to_timezone,
)

__all__ = [
    # Arithmetic
    "add_days",
    "add_months",
    "add_years",
    "age",
    "difference_in_days",
    "end_of_day",
    "start_of_day",
    # Calendar facts
    "days_in_month",
    "is_leap_year",
    "is_same_day",
    "is_weekend",
    # Comparison with now
    "is_future",
    "is_past",
    # Timezones and presentation
    "format_date",
    "format_relative_time",
    "parse_date",
    "to_timezone",
]
