"""Human-readable "3 min ago" / "in 2 h" phrasing, in English only."""

import math
from typing import Any

from datekit.instant import Clock, now, require_valid
from datekit.util import DAY, HOUR, MINUTE, SECOND


def _round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return math.floor(value + 0.5)


def _phrase(amount: int, unit: str, future: bool) -> str:
    return f"in {amount} {unit}" if future else f"{amount} {unit} ago"


def relative_time(
    to: Any,
    from_: Any = None,
    *,
    clock: Clock | None = None,
    tz: str | None = None,
) -> str:
    """
    Describe ``to`` relative to ``from_`` (the current time if None).

    Each unit is rounded before it is compared with its bucket limit:
    under 10 s is "just now" / "in a moment", then seconds below 60,
    minutes below 60, hours below 24, and days beyond.

    Args:
        to: The instant being described
        from_: Reference instant, defaults to now(clock)
        clock: Clock used when ``from_`` is None
        tz: Zone for naive inputs

    Raises:
        InvalidInputError: If either instant is invalid

    Example:
        >>> relative_time(0, 90_000)
        '2 min ago'
    """
    target = require_valid(to, tz=tz)
    origin = now(clock) if from_ is None else require_valid(from_, tz=tz)
    assert target.millis is not None and origin.millis is not None

    delta = target.millis - origin.millis
    elapsed = abs(delta)
    future = delta > 0
    seconds = _round_half_up(elapsed / SECOND)
    minutes = _round_half_up(elapsed / MINUTE)
    hours = _round_half_up(elapsed / HOUR)
    days = _round_half_up(elapsed / DAY)

    if seconds < 10:
        return "in a moment" if future else "just now"
    if seconds < 60:
        return _phrase(seconds, "sec", future)
    if minutes < 60:
        return _phrase(minutes, "min", future)
    if hours < 24:
        return _phrase(hours, "h", future)
    return _phrase(days, "day" if days == 1 else "days", future)
