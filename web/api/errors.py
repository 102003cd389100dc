"""API errors and request coercion helpers."""

from typing import Any


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def coerce_positive_int(value: Any, default: int, maximum: int | None = None) -> int:
    """Parse a page or page-size value.

    Absent or non-numeric values give ``default``; numbers below 1 are clamped to 1
    and, when ``maximum`` is given, numbers above it to ``maximum``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    number = max(number, 1)
    return min(number, maximum) if maximum is not None else number
