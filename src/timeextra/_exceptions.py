from __future__ import annotations


class DateTimeError(Exception):
    """Base exception for all timeextra errors."""


class RangeError(DateTimeError, ValueError):
    """A numeric input lies outside the valid range of its field."""


class MissingArgumentError(DateTimeError, TypeError):
    """A required argument was None."""


class UnsupportedFieldError(DateTimeError):
    """The requested field cannot be obtained from, or applied to, a value."""


class PeriodOverflowError(DateTimeError, OverflowError):
    """A period amount left the signed 32-bit integer range."""


class PeriodDivisionError(DateTimeError, ZeroDivisionError):
    """A period amount was divided by zero."""


class PeriodParseError(DateTimeError, ValueError):
    """Text could not be parsed as a period."""


def require(value: object, name: str) -> None:
    if value is None:
        raise MissingArgumentError(f"{name} must not be None.")
