"""Calendar period boundaries and ISO week numbers.

Periods are taken in local time (or ``tz``). Weeks start on Monday.
"""

import math
from datetime import date, datetime, time, timedelta
from typing import Any, Literal, TypeAlias

from datekit.arithmetic import add
from datekit.duration import CalendarDuration
from datekit.errors import OutOfRangeError, UnsupportedUnitError
from datekit.instant import Instant, from_wall, require_valid, to_wall

CalendarUnit: TypeAlias = Literal[
    "year", "month", "week", "day", "hour", "minute", "second"
]

CALENDAR_UNITS: tuple[CalendarUnit, ...] = (
    "year",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
)

# Distance from a period's start to the start of the next one
_PERIODS: dict[CalendarUnit, CalendarDuration] = {
    "year": CalendarDuration(years=1),
    "month": CalendarDuration(months=1),
    "week": CalendarDuration(days=7),
    "day": CalendarDuration(days=1),
    "hour": CalendarDuration(hours=1),
    "minute": CalendarDuration(minutes=1),
    "second": CalendarDuration(seconds=1),
}


def _check_unit(unit: Any) -> None:
    if unit not in CALENDAR_UNITS:
        raise UnsupportedUnitError(unit, CALENDAR_UNITS)


def _truncate(wall: datetime, unit: CalendarUnit) -> datetime:
    if unit == "year":
        return datetime(wall.year, 1, 1)
    if unit == "month":
        return datetime(wall.year, wall.month, 1)
    if unit == "week":
        # weekday() counts from Monday = 0
        return datetime.combine(wall.date() - timedelta(days=wall.weekday()), time.min)
    if unit == "day":
        return datetime.combine(wall.date(), time.min)
    if unit == "hour":
        return wall.replace(minute=0, second=0, microsecond=0)
    if unit == "minute":
        return wall.replace(second=0, microsecond=0)
    return wall.replace(microsecond=0)


def start_of(value: Any, unit: CalendarUnit, *, tz: str | None = None) -> Instant:
    """
    Return the first millisecond of the ``unit`` period containing ``value``.

    Raises:
        UnsupportedUnitError: If ``unit`` is not a calendar unit
        InvalidInputError: If ``value`` is not a valid instant
    """
    _check_unit(unit)
    wall = to_wall(require_valid(value, tz=tz), tz).replace(tzinfo=None)
    try:
        start = _truncate(wall, unit)
    except OverflowError:
        raise OutOfRangeError(
            value, "period starts outside the supported calendar range"
        ) from None
    return from_wall(start, tz)


def end_of(value: Any, unit: CalendarUnit, *, tz: str | None = None) -> Instant:
    """
    Return the last millisecond of the ``unit`` period containing ``value``.

    This is one millisecond before the start of the following period.

    Raises:
        UnsupportedUnitError: If ``unit`` is not a calendar unit
        InvalidInputError: If ``value`` is not a valid instant
    """
    _check_unit(unit)
    following = add(start_of(value, unit, tz=tz), _PERIODS[unit], tz=tz)
    assert following.millis is not None
    return Instant(millis=following.millis - 1)


def week_of_year(value: Any, *, tz: str | None = None) -> int:
    """
    Return the ISO-8601 week number (1-53) of the local date of ``value``.

    Week 1 is the week holding the year's first Thursday, so early January
    days can belong to the previous year's last week.

    Raises:
        InvalidInputError: If ``value`` is not a valid instant
    """
    day = to_wall(require_valid(value, tz=tz), tz).date()
    # Move to the Thursday of the same Monday-based week; its year owns the week
    thursday = day + timedelta(days=4 - day.isoweekday())
    year_start = date(thursday.year, 1, 1)
    return math.ceil(((thursday - year_start).days + 1) / 7)
