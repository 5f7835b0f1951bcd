"""Calendar addition and subtraction."""

from typing import Any

from datekit.duration import CalendarDuration, DurationLike
from datekit.errors import InvalidInputError, OutOfRangeError
from datekit.instant import Instant, compose, from_wall, require_valid, to_wall
from datekit.util import MAX_MILLIS


def add(value: Any, duration: DurationLike = None, *, tz: str | None = None) -> Instant:
    """
    Shift ``value`` by ``duration``.

    Years, months and days move the local calendar fields one step at a time,
    each step rolling overflow forward (Jan 31 + 1 month lands in early March,
    Feb 29 + 1 year is Mar 1). Hours and finer are elapsed time.

    Args:
        value: Anything to_instant() accepts
        duration: CalendarDuration, mapping of field names to ints, or None
        tz: IANA zone for the calendar fields (host local if None)

    Raises:
        InvalidInputError: If ``value`` is invalid
        OutOfRangeError: If the result leaves the supported range

    Example:
        >>> add("2024-01-31T12:00:00", {"months": 1}, tz="UTC")
        Instant(millis=1709380800000)
    """
    instant = require_valid(value, tz=tz)
    step = CalendarDuration.coerce(duration)

    if step.years or step.months or step.days:
        wall = to_wall(instant, tz).replace(tzinfo=None)
        at = wall.time()
        try:
            if step.years:
                wall = compose(wall.year + step.years, wall.month, wall.day, at)
            if step.months:
                wall = compose(wall.year, wall.month + step.months, wall.day, at)
            if step.days:
                wall = compose(wall.year, wall.month, wall.day + step.days, at)
        except (OverflowError, ValueError):
            raise OutOfRangeError(
                value, "result is outside the supported calendar range"
            ) from None
        instant = from_wall(wall, tz)

    if instant.millis is None:
        raise OutOfRangeError(value, "result is outside the supported range")
    millis = instant.millis + step.fixed_millis
    if abs(millis) > MAX_MILLIS:
        raise OutOfRangeError(value, "result is outside the supported range")
    return Instant(millis=millis)


def sub(value: Any, duration: DurationLike = None, *, tz: str | None = None) -> Instant:
    """Shift ``value`` back by ``duration``; add() with every field negated."""
    return add(value, CalendarDuration.coerce(duration).negated(), tz=tz)
