"""Differences, ordering and clamping of instants.

None of these raise on invalid input: an invalid operand makes diff() NaN and
every comparison False.
"""

import math
from typing import Any, Literal, TypeAlias

from datekit.instant import Instant, to_instant
from datekit.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND

DiffUnit: TypeAlias = Literal["ms", "s", "m", "h", "d"]

SCALES: dict[str, int] = {
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
    "d": DAY,
}


def diff(a: Any, b: Any, unit: DiffUnit = "ms", *, tz: str | None = None) -> float:
    """
    Return ``a - b`` expressed in ``unit``, unrounded.

    Unknown units fall back to milliseconds.
    """
    left = to_instant(a, tz=tz).millis
    right = to_instant(b, tz=tz).millis
    if left is None or right is None:
        return math.nan
    delta = left - right
    scale = SCALES.get(unit, MILLISECOND) if isinstance(unit, str) else MILLISECOND
    return delta if scale == MILLISECOND else delta / scale


def _millis_pair(a: Any, b: Any, tz: str | None) -> tuple[int, int] | None:
    left = to_instant(a, tz=tz).millis
    right = to_instant(b, tz=tz).millis
    if left is None or right is None:
        return None
    return left, right


def is_before(a: Any, b: Any, *, tz: str | None = None) -> bool:
    pair = _millis_pair(a, b, tz)
    return pair is not None and pair[0] < pair[1]


def is_after(a: Any, b: Any, *, tz: str | None = None) -> bool:
    pair = _millis_pair(a, b, tz)
    return pair is not None and pair[0] > pair[1]


def is_equal(a: Any, b: Any, *, tz: str | None = None) -> bool:
    pair = _millis_pair(a, b, tz)
    return pair is not None and pair[0] == pair[1]


def clamp(value: Any, minimum: Any, maximum: Any, *, tz: str | None = None) -> Instant:
    """
    Pull ``value`` into [minimum, maximum].

    The two bounds are checked one after the other, lower first, and are not
    validated against each other: with minimum > maximum a value below
    minimum still comes back as minimum.
    """
    instant = to_instant(value, tz=tz)
    if is_before(instant, minimum, tz=tz):
        return to_instant(minimum, tz=tz)
    if is_after(instant, maximum, tz=tz):
        return to_instant(maximum, tz=tz)
    return instant
