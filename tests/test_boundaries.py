"""Tests for start_of, end_of and week_of_year."""

from datetime import datetime, timezone

import pytest

from datekit import (
    CALENDAR_UNITS,
    HOUR,
    Instant,
    InvalidInputError,
    UnsupportedUnitError,
    end_of,
    start_of,
    week_of_year,
)


def utc_ms(*fields: int, ms: int = 0) -> int:
    return int(datetime(*fields, tzinfo=timezone.utc).timestamp()) * 1000 + ms


# Wednesday
SAMPLE = Instant(millis=utc_ms(2024, 3, 13, 15, 45, 30, ms=250))

EXPECTED = {
    "year": (utc_ms(2024, 1, 1), utc_ms(2024, 12, 31, 23, 59, 59, ms=999)),
    "month": (utc_ms(2024, 3, 1), utc_ms(2024, 3, 31, 23, 59, 59, ms=999)),
    "week": (utc_ms(2024, 3, 11), utc_ms(2024, 3, 17, 23, 59, 59, ms=999)),
    "day": (utc_ms(2024, 3, 13), utc_ms(2024, 3, 13, 23, 59, 59, ms=999)),
    "hour": (utc_ms(2024, 3, 13, 15), utc_ms(2024, 3, 13, 15, 59, 59, ms=999)),
    "minute": (
        utc_ms(2024, 3, 13, 15, 45),
        utc_ms(2024, 3, 13, 15, 45, 59, ms=999),
    ),
    "second": (
        utc_ms(2024, 3, 13, 15, 45, 30),
        utc_ms(2024, 3, 13, 15, 45, 30, ms=999),
    ),
}


@pytest.mark.parametrize("unit", CALENDAR_UNITS)
def test_period_boundaries(unit):
    """Test start and end of every unit for a mid-week sample."""
    start, end = EXPECTED[unit]

    assert start_of(SAMPLE, unit, tz="UTC").millis == start
    assert end_of(SAMPLE, unit, tz="UTC").millis == end


@pytest.mark.parametrize("unit", CALENDAR_UNITS)
def test_start_of_is_idempotent(unit):
    """Test that the start of a period's start is itself."""
    once = start_of(SAMPLE, unit, tz="Europe/Berlin")

    assert start_of(once, unit, tz="Europe/Berlin") == once


@pytest.mark.parametrize("unit", CALENDAR_UNITS)
def test_sample_lies_inside_its_period(unit):
    """Test start <= value <= end in a zone with DST."""
    start = start_of(SAMPLE, unit, tz="America/New_York")
    end = end_of(SAMPLE, unit, tz="America/New_York")

    assert start.millis <= SAMPLE.millis <= end.millis


def test_week_starts_on_monday():
    """Test week boundaries from a Sunday and from a Monday."""
    sunday = utc_ms(2024, 3, 17, 10)
    monday = utc_ms(2024, 3, 11, 0, 0, 1)

    assert start_of(sunday, "week", tz="UTC").millis == utc_ms(2024, 3, 11)
    assert start_of(monday, "week", tz="UTC").millis == utc_ms(2024, 3, 11)
    assert end_of(monday, "week", tz="UTC").millis == utc_ms(
        2024, 3, 17, 23, 59, 59, ms=999
    )


def test_week_crosses_month_and_year():
    """Test a week that starts in the previous year."""
    # 2025-01-01 is a Wednesday
    assert start_of(utc_ms(2025, 1, 1, 12), "week", tz="UTC").millis == utc_ms(
        2024, 12, 30
    )


def test_day_length_follows_dst():
    """Test that the spring-forward day is 23 hours long."""
    tz = "America/New_York"
    start = start_of("2024-03-10T12:00:00", "day", tz=tz)
    end = end_of("2024-03-10T12:00:00", "day", tz=tz)

    assert start.millis == utc_ms(2024, 3, 10, 5)
    assert end.millis - start.millis == 23 * HOUR - 1


def test_month_end_in_february():
    """Test month ends in leap and common years."""
    assert end_of(utc_ms(2024, 2, 10), "month", tz="UTC").millis == utc_ms(
        2024, 2, 29, 23, 59, 59, ms=999
    )
    assert end_of(utc_ms(2023, 2, 10), "month", tz="UTC").millis == utc_ms(
        2023, 2, 28, 23, 59, 59, ms=999
    )


def test_unsupported_unit_raises():
    """Test that unknown units are rejected by both functions."""
    with pytest.raises(UnsupportedUnitError, match="Valid units: year, month"):
        start_of(SAMPLE, "fortnight")  # type: ignore[arg-type]
    with pytest.raises(UnsupportedUnitError):
        end_of(SAMPLE, "ms")  # type: ignore[arg-type]


def test_unit_is_checked_before_input():
    """Test that a bad unit wins over a bad input."""
    with pytest.raises(UnsupportedUnitError):
        start_of("not-a-date", "weeks")  # type: ignore[arg-type]


def test_invalid_input_raises():
    """Test that invalid instants have no boundaries."""
    with pytest.raises(InvalidInputError):
        start_of("not-a-date", "day")
    with pytest.raises(InvalidInputError):
        end_of(Instant(millis=None), "year")


@pytest.mark.parametrize(
    "fields, week",
    [
        ((2024, 1, 1), 1),  # Monday
        ((2023, 1, 1), 52),  # Sunday, last week of 2022
        ((2020, 12, 31), 53),
        ((2021, 1, 3), 53),
        ((2024, 12, 30), 1),  # Monday of 2025's first week
        ((2024, 3, 13), 11),
    ],
)
def test_week_of_year(fields, week):
    """Test ISO week numbers around year boundaries."""
    assert week_of_year(utc_ms(*fields, 12), tz="UTC") == week


def test_week_of_year_uses_local_date():
    """Test that the local calendar date picks the week."""
    # Still Sunday 2023-12-31 in New York
    assert week_of_year("2024-01-01T02:00:00Z", tz="America/New_York") == 52
    assert week_of_year("2024-01-01T02:00:00Z", tz="UTC") == 1


def test_week_of_year_invalid_input():
    """Test that invalid instants have no week number."""
    with pytest.raises(InvalidInputError):
        week_of_year("not-a-date")
