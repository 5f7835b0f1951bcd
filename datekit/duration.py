from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, TypeAlias

from datekit.util import HOUR, MINUTE, SECOND

# Short keys accepted in mapping input
_ALIASES = {"ms": "milliseconds"}


@dataclass(frozen=True, kw_only=True)
class CalendarDuration:
    """Signed per-field offsets, applied in declaration order.

    ``None`` marks an absent field. Fields are never normalized into each
    other: 90 minutes stays 90 minutes.
    """

    years: int | None = None
    months: int | None = None
    days: int | None = None
    hours: int | None = None
    minutes: int | None = None
    seconds: int | None = None
    milliseconds: int | None = None

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int)
            ):
                raise TypeError(
                    f"CalendarDuration.{field.name} must be an int or None.\n"
                    f"Got {type(value).__name__!r}: {value!r}"
                )

    def negated(self) -> "CalendarDuration":
        """Negate every present field; absent fields stay absent."""
        flipped = {
            field.name: -value
            for field in fields(self)
            if (value := getattr(self, field.name)) is not None
        }
        return replace(self, **flipped)

    @property
    def fixed_millis(self) -> int:
        """Elapsed-time part (hours and finer) in milliseconds."""
        return (
            (self.hours or 0) * HOUR
            + (self.minutes or 0) * MINUTE
            + (self.seconds or 0) * SECOND
            + (self.milliseconds or 0)
        )

    @classmethod
    def coerce(cls, value: "DurationLike") -> "CalendarDuration":
        """Build a CalendarDuration from a duration, a mapping or None.

        Raises:
            ValueError: If a mapping has unknown or duplicated keys
            TypeError: If ``value`` is some other type or a field is not an int
        """
        if value is None:
            return cls()
        if isinstance(value, CalendarDuration):
            return value
        if isinstance(value, Mapping):
            names = {field.name for field in fields(cls)}
            kwargs: dict[str, Any] = {}
            for key, amount in value.items():
                name = _ALIASES.get(key, key)
                if name not in names:
                    valid = ", ".join([field.name for field in fields(cls)] + ["ms"])
                    raise ValueError(
                        f"Unknown duration field: {key!r}\n" f"Valid fields: {valid}"
                    )
                if name in kwargs:
                    raise ValueError(f"Duration field {name!r} given twice")
                kwargs[name] = amount
            return cls(**kwargs)
        raise TypeError(
            f"Duration must be a CalendarDuration, a mapping or None.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Example: add(d, {{'months': 1, 'days': 2}})"
        )


DurationLike: TypeAlias = CalendarDuration | Mapping[str, int] | None
