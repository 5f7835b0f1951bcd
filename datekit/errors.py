class DateKitError(Exception):
    """Base class for all datekit errors."""


class InvalidInputError(DateKitError, ValueError):
    """Raised when an operation needs a valid instant and did not get one."""

    headline: str = "Invalid date"
    hint: str = "check the input with is_valid() before using it"

    def __init__(self, value: object, reason: str = "not a valid point in time"):
        self.value: object = value
        super().__init__(
            f"{self.headline}: {reason}.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: {self.hint}"
        )


class OutOfRangeError(InvalidInputError):
    """Raised when a valid instant has no calendar fields or a result overflows.

    Calendar fields exist for years 1 through 9999 only, while an Instant may
    lie up to 100,000,000 days either side of the epoch.
    """

    headline = "Date out of range"
    hint = "calendar fields exist for years 1 through 9999 in the chosen zone"

    def __init__(
        self, value: object, reason: str = "outside the supported calendar range"
    ):
        super().__init__(value, reason)


class UnsupportedUnitError(DateKitError, ValueError):
    """Raised by start_of/end_of for units outside the calendar units."""

    def __init__(self, unit: object, valid: tuple[str, ...]):
        self.unit: object = unit
        super().__init__(
            f"Unsupported unit: {unit!r}\n" f"Valid units: {', '.join(valid)}"
        )
