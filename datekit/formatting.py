from typing import Any

from datekit.instant import require_valid, to_wall


def format(value: Any, pattern: str, *, tz: str | None = None) -> str:
    """
    Render ``value`` by substituting tokens in ``pattern``.

    Tokens are case-sensitive and replaced everywhere they occur, in this order:
    YYYY (year, at least 4 digits), MM (month), DD (day), HH (hour, 00-23),
    mm (minute), ss (second). Everything else passes through unchanged.

    Raises:
        InvalidInputError: If ``value`` is not a valid instant

    Example:
        >>> format(0, "YYYY-MM-DD HH:mm:ss", tz="UTC")
        '1970-01-01 00:00:00'
    """
    wall = to_wall(require_valid(value, tz=tz), tz)
    tokens = (
        ("YYYY", f"{wall.year:04d}"),
        ("MM", f"{wall.month:02d}"),
        ("DD", f"{wall.day:02d}"),
        ("HH", f"{wall.hour:02d}"),
        ("mm", f"{wall.minute:02d}"),
        ("ss", f"{wall.second:02d}"),
    )
    result = pattern
    for token, text in tokens:
        result = result.replace(token, text)
    return result
