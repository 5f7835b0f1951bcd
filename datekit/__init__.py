from .arithmetic import add, sub
from .boundaries import CALENDAR_UNITS, CalendarUnit, end_of, start_of, week_of_year
from .compare import DiffUnit, clamp, diff, is_after, is_before, is_equal
from .duration import CalendarDuration
from .errors import (
    DateKitError,
    InvalidInputError,
    OutOfRangeError,
    UnsupportedUnitError,
)
from .formatting import format
from .instant import (
    Clock,
    Instant,
    fixed_clock,
    is_valid,
    now,
    parse_iso,
    system_clock,
    to_date,
    to_instant,
)
from .relative import relative_time
from .util import DAY, HOUR, MILLISECOND, MINUTE, SECOND, WEEK

__all__ = [
    "Instant",
    "CalendarDuration",
    "CalendarUnit",
    "CALENDAR_UNITS",
    "DiffUnit",
    "Clock",
    "to_instant",
    "to_date",
    "now",
    "system_clock",
    "fixed_clock",
    "is_valid",
    "parse_iso",
    "format",
    "add",
    "sub",
    "diff",
    "is_before",
    "is_after",
    "is_equal",
    "start_of",
    "end_of",
    "week_of_year",
    "clamp",
    "relative_time",
    "DateKitError",
    "InvalidInputError",
    "OutOfRangeError",
    "UnsupportedUnitError",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
