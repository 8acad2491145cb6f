"""
Tests for the dates component.
"""

from datetime import UTC, date, datetime, timedelta

import pytest

from primkit.components.dates import (
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


class TestCalendarFacts:
    @pytest.mark.parametrize("year,expected", [(2024, True), (2023, False),
                                               (1900, False), (2000, True)])
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 12) == 31

    def test_days_in_month_bad_month(self) -> None:
        with pytest.raises(ValueError):
            days_in_month(2024, 13)

    def test_days_in_month_integral_floats(self) -> None:
        assert days_in_month(2024.0, 2.0) == 29
        with pytest.raises(ValueError):
            days_in_month(2024, 2.5)

    def test_is_weekend(self) -> None:
        assert is_weekend(date(2024, 6, 15))
        assert is_weekend(date(2024, 6, 16))
        assert not is_weekend(date(2024, 6, 17))

    def test_is_same_day(self) -> None:
        assert is_same_day(datetime(2024, 1, 1, 1), datetime(2024, 1, 1, 23))
        assert is_same_day(date(2024, 1, 1), datetime(2024, 1, 1, 12))
        assert not is_same_day(date(2024, 1, 1), date(2024, 1, 2))

    def test_non_date_raises(self) -> None:
        with pytest.raises(TypeError):
            is_weekend("2024-06-15")


class TestArithmetic:
    def test_add_days(self) -> None:
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert add_days(date(2024, 1, 1), -1) == date(2023, 12, 31)

    def test_add_days_integral_float(self) -> None:
        assert add_days(date(2024, 1, 1), 1.0) == date(2024, 1, 2)
        with pytest.raises(ValueError):
            add_days(date(2024, 1, 1), 1.5)
        with pytest.raises(TypeError):
            add_days(date(2024, 1, 1), "1")

    def test_add_days_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            add_days(date(9999, 12, 31), 1)
        with pytest.raises(ValueError):
            add_days(date(2024, 1, 1), 10**10)

    def test_add_months_clamps_day(self) -> None:
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_add_months_crosses_years(self) -> None:
        assert add_months(date(2024, 3, 15), -3) == date(2023, 12, 15)
        assert add_months(date(2024, 11, 30), 14) == date(2026, 1, 30)

    def test_add_months_keeps_time(self) -> None:
        assert add_months(datetime(2024, 1, 31, 8, 30), 1) == datetime(2024, 2, 29, 8, 30)

    def test_add_months_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            add_months(date(9999, 12, 1), 1)

    def test_add_years_from_leap_day(self) -> None:
        assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
        assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)

    def test_difference_in_days(self) -> None:
        assert difference_in_days(date(2024, 1, 10), date(2024, 1, 1)) == 9
        assert difference_in_days(date(2024, 1, 1), date(2024, 1, 10)) == -9

    def test_difference_in_days_floors_datetimes(self) -> None:
        assert difference_in_days(datetime(2024, 1, 2), datetime(2024, 1, 1, 12)) == 0
        assert difference_in_days(datetime(2024, 1, 1), datetime(2024, 1, 1, 12)) == -1

    def test_day_bounds(self) -> None:
        moment = datetime(2024, 5, 5, 13, 45, tzinfo=UTC)
        assert start_of_day(moment) == datetime(2024, 5, 5, tzinfo=UTC)
        assert end_of_day(moment) == datetime(2024, 5, 5, 23, 59, 59, 999999, tzinfo=UTC)
        assert start_of_day(moment) <= moment <= end_of_day(moment)

    def test_day_bounds_of_plain_date(self) -> None:
        assert start_of_day(date(2024, 5, 5)) == datetime(2024, 5, 5)
        assert end_of_day(date(2024, 5, 5)).microsecond == 999999


class TestAge:
    def test_before_and_on_birthday(self) -> None:
        assert age(date(2000, 6, 16), on=date(2024, 6, 15)) == 23
        assert age(date(2000, 6, 16), on=date(2024, 6, 16)) == 24

    def test_future_birth_raises(self) -> None:
        with pytest.raises(ValueError):
            age(date(2030, 1, 1), on=date(2024, 1, 1))


class TestNow:
    def test_is_past_and_future(self, fixed_now) -> None:
        assert is_past(fixed_now - timedelta(minutes=1), now=fixed_now)
        assert is_future(fixed_now + timedelta(minutes=1), now=fixed_now)
        assert not is_past(fixed_now, now=fixed_now)

    def test_naive_values_are_utc(self, fixed_now) -> None:
        assert is_future(datetime(2024, 6, 15, 12, 1), now=fixed_now)

    def test_plain_dates_compare_by_day(self, fixed_now) -> None:
        assert not is_past(date(2024, 6, 15), now=fixed_now)
        assert not is_future(date(2024, 6, 15), now=fixed_now)
        assert is_past(date(2024, 6, 14), now=fixed_now)


class TestTimezones:
    def test_to_timezone(self, fixed_now) -> None:
        assert to_timezone(fixed_now, "Europe/London").hour == 13
        assert to_timezone(fixed_now, "Asia/Tokyo").hour == 21

    def test_naive_assumed_utc(self) -> None:
        converted = to_timezone(datetime(2024, 1, 15, 12), "Europe/London")
        assert converted.hour == 12

    def test_unknown_zone_raises(self, fixed_now) -> None:
        with pytest.raises(ValueError):
            to_timezone(fixed_now, "Mars/Olympus_Mons")


class TestPresentation:
    def test_format_date(self) -> None:
        assert format_date(date(2024, 1, 5)) == "2024-01-05"
        assert format_date(date(2024, 1, 5), "%d/%m/%Y") == "05/01/2024"

    def test_parse_date(self) -> None:
        assert parse_date("2024-01-15") == datetime(2024, 1, 15)
        assert parse_date("15/01/2024", "%d/%m/%Y") == datetime(2024, 1, 15)

    def test_parse_date_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_date("not a date")

    @pytest.mark.parametrize("offset,expected", [
        (timedelta(seconds=-10), "just now"),
        (timedelta(minutes=-5), "5 minutes ago"),
        (timedelta(hours=-1), "1 hour ago"),
        (timedelta(days=2), "in 2 days"),
        (timedelta(days=-400), "1 year ago"),
        (timedelta(days=-60), "2 months ago"),
    ])
    def test_format_relative_time(self, fixed_now, offset, expected) -> None:
        assert format_relative_time(fixed_now + offset, now=fixed_now) == expected
