from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum

from timeextra._exceptions import RangeError, require


@dataclass(frozen=True, slots=True)
class ValueRange:
    minimum: int
    maximum: int

    def is_valid(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check(self, value: int, field: "ChronoField | None" = None) -> int:
        """
        Return ``value`` as an ``int`` if it lies in the range, otherwise raise.

        ``None`` raises ``MissingArgumentError``; booleans and non-integers
        raise ``TypeError``; integers outside the range raise ``RangeError``.
        """
        name = field.display_name if field is not None else "value"
        require(value, name)
        if isinstance(value, bool):
            raise TypeError(f"{name} must be an integer; got {value!r}")
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"{name} must be an integer; got {type(value).__name__}") from None
        if not self.is_valid(value):
            raise RangeError(
                f"Invalid value for {name} "
                f"(valid values {self.minimum} - {self.maximum}): {value}"
            )
        return value

    def __str__(self) -> str:
        return f"{self.minimum} - {self.maximum}"


class ChronoField(Enum):
    """Named, range-checked components of a date or time of day."""

    HOUR_OF_DAY = ("HourOfDay", ValueRange(0, 23))
    HOUR_OF_AMPM = ("HourOfAmPm", ValueRange(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", ValueRange(1, 12))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", ValueRange(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", ValueRange(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", ValueRange(1, 7))

    def __init__(self, display_name: str, value_range: ValueRange) -> None:
        self.display_name = display_name
        self.range = value_range

    def check_valid_value(self, value: int) -> int:
        return self.range.check(value, self)

    def __str__(self) -> str:
        return self.display_name
