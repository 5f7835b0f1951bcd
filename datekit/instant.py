"""The Instant value type and everything that produces one.

An Instant is a count of milliseconds since 1970-01-01T00:00:00Z. Calendar
fields are always derived on demand, in the host's local timezone unless an
IANA zone name is passed as ``tz``.
"""

import logging
import math
import re
import time as _time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, TypeAlias
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser
from typing_extensions import override

from datekit.errors import InvalidInputError, OutOfRangeError
from datekit.util import MAX_MILLIS

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# Date-only ISO forms (calendar and week dates, extended or basic) are read as
# UTC midnight, everything else without an offset as local wall time
_DATE_ONLY = re.compile(r"\d{4}(-?\d{2}(-?\d{2})?|-?W\d{2}(-?\d)?)?")

# Fields missing from free-form text are taken from here, not from today
_PARSE_DEFAULT = datetime(1970, 1, 1)


@dataclass(frozen=True, kw_only=True)
class Instant:
    """One point in time at millisecond resolution.

    ``millis`` is ``None`` for the invalid instant produced by unparseable or
    out-of-range input. A valid instant may lie up to 100,000,000 days from
    the epoch, but calendar fields only exist for years 1 through 9999:
    field-based operations raise OutOfRangeError beyond that.
    """

    millis: int | None

    def __post_init__(self) -> None:
        if self.millis is None:
            return
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise TypeError(
                f"Instant millis must be int or None.\n"
                f"Got {type(self.millis).__name__!r}: {self.millis!r}\n"
                f"Hint: use to_instant() to convert floats and strings"
            )
        if abs(self.millis) > MAX_MILLIS:
            raise ValueError(
                f"Instant millis ({self.millis}) is outside ±{MAX_MILLIS}"
            )

    @property
    def is_valid(self) -> bool:
        return self.millis is not None

    def to_datetime(self, tz: str | None = None) -> datetime:
        """Return an aware datetime for this instant in ``tz`` (host local if None)."""
        return to_wall(self, tz)

    @override
    def __str__(self) -> str:
        if self.millis is None:
            return "Invalid Date"
        try:
            utc = self.to_datetime("UTC")
        except InvalidInputError:
            return f"Instant({self.millis}ms)"
        return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


INVALID = Instant(millis=None)

Clock: TypeAlias = Callable[[], Instant]


def resolve_zone(tz: str | None) -> ZoneInfo | None:
    """Map a zone name to a ZoneInfo; None stands for the host's local zone."""
    return None if tz is None else ZoneInfo(tz)


def to_wall(instant: Instant, tz: str | None = None) -> datetime:
    """Aware datetime carrying the calendar fields of ``instant`` in ``tz``."""
    if instant.millis is None:
        raise InvalidInputError(instant)
    zone = resolve_zone(tz)
    try:
        utc = _EPOCH + timedelta(milliseconds=instant.millis)
        return utc.astimezone(zone)
    except (OverflowError, ValueError):
        raise OutOfRangeError(instant) from None


def from_wall(wall: datetime, tz: str | None = None) -> Instant:
    """Instant for naive wall-clock fields interpreted in ``tz``."""
    zone = resolve_zone(tz)
    try:
        aware = wall.replace(tzinfo=zone) if zone is not None else wall.astimezone()
        return _from_aware(aware)
    except (OverflowError, ValueError):
        raise OutOfRangeError(wall) from None


def compose(year: int, month: int, day: int, clock_time: time = time.min) -> datetime:
    """Naive datetime from fields whose month and day may overflow.

    Overflow rolls into the following months and years (April 31 is May 1,
    month 13 is January of the next year); nothing is clamped.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime.combine(date(year, month, 1) + timedelta(days=day - 1), clock_time)


def _from_aware(aware: datetime) -> Instant:
    millis = (aware - _EPOCH) // _ONE_MS
    if abs(millis) > MAX_MILLIS:
        return INVALID
    return Instant(millis=millis)


def _from_number(value: int | float) -> Instant:
    if isinstance(value, float):
        if not math.isfinite(value):
            return INVALID
        value = math.trunc(value)
    if abs(value) > MAX_MILLIS:
        return INVALID
    return Instant(millis=value)


def _from_datetime(value: datetime, tz: str | None) -> Instant:
    if value.tzinfo is None or value.utcoffset() is None:
        return from_wall(value.replace(tzinfo=None), tz)
    return _from_aware(value)


def _date_only_as_utc(parsed: datetime, text: str) -> datetime:
    if parsed.tzinfo is None and _DATE_ONLY.fullmatch(text):
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _from_string(text: str, tz: str | None) -> Instant:
    stripped = text.strip()
    try:
        parsed = date_parser.isoparse(stripped)
    except (ValueError, OverflowError):
        logger.debug("Not ISO-8601, trying general parser: %r", text)
        try:
            parsed = date_parser.parse(stripped, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError):
            logger.debug("Unparseable date string: %r", text)
            return INVALID
    try:
        return _from_datetime(_date_only_as_utc(parsed, stripped), tz)
    except (ValueError, OverflowError):
        # e.g. an offset of 24 hours or more from the general parser
        logger.debug("Unusable date string: %r", text)
        return INVALID


def to_instant(value: Any, *, tz: str | None = None) -> Instant:
    """Convert ``value`` to an Instant without ever raising.

    Accepts:
    - Instant: copied
    - int/float: epoch milliseconds (fractions truncated)
    - str: ISO-8601 first, then dateutil's general parser
    - datetime: aware as-is, naive as wall time in ``tz``
    - date: midnight in ``tz``

    Anything else, or anything that fails to convert, gives the invalid
    Instant (see is_valid).
    """
    try:
        if isinstance(value, Instant):
            return Instant(millis=value.millis)
        if isinstance(value, bool):
            return INVALID
        if isinstance(value, (int, float)):
            return _from_number(value)
        if isinstance(value, str):
            return _from_string(value, tz)
        if isinstance(value, datetime):
            return _from_datetime(value, tz)
        if isinstance(value, date):
            return from_wall(datetime.combine(value, time.min), tz)
    except InvalidInputError:
        logger.debug("Out of range for an Instant: %r", value)
    return INVALID


to_date = to_instant


def require_valid(value: Any, *, tz: str | None = None) -> Instant:
    """Convert ``value`` and raise InvalidInputError if the result is invalid."""
    instant = to_instant(value, tz=tz)
    if instant.millis is None:
        raise InvalidInputError(value)
    return instant


def is_valid(value: Any, *, tz: str | None = None) -> bool:
    if isinstance(value, Instant):
        return value.is_valid
    return to_instant(value, tz=tz).is_valid


def parse_iso(text: Any, *, tz: str | None = None) -> Instant | None:
    """Parse date text; return None for non-strings and anything unparseable.

    Strings go through the same parsers as to_instant(): ISO-8601 first, then
    dateutil's general parser.
    """
    if not isinstance(text, str):
        return None
    instant = to_instant(text, tz=tz)
    if not instant.is_valid:
        logger.debug("parse_iso rejected %r", text)
        return None
    return instant


def system_clock() -> Instant:
    """Current wall-clock time from the host."""
    return Instant(millis=_time.time_ns() // 1_000_000)


def fixed_clock(value: Any) -> Clock:
    """Return a clock that always reports ``value``."""
    instant = require_valid(value)

    def clock() -> Instant:
        return Instant(millis=instant.millis)

    return clock


def now(clock: Clock | None = None) -> Instant:
    """Return a fresh Instant for the current time.

    ``clock`` replaces the host clock, e.g. with fixed_clock() in tests.
    """
    return (clock or system_clock)()
