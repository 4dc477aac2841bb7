from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

import numpy as np

from timeextra._exceptions import UnsupportedFieldError, require
from timeextra.temporal import _datetime64
from timeextra.temporal.fields import ChronoField

# 1970-01-01 was a Thursday.
_EPOCH_OFFSET = 3


class DayOfWeek(Enum):
    """ISO day of week, Monday (1) to Sunday (7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> "DayOfWeek":
        return cls(ChronoField.DAY_OF_WEEK.check_valid_value(value))

    @classmethod
    def from_date(cls, source: Any) -> "DayOfWeek":
        require(source, "date")
        if isinstance(source, date):
            return cls(source.isoweekday())
        if isinstance(source, np.datetime64):
            days = int(_datetime64.start_of_day(source).astype(np.int64))
            return cls((days + _EPOCH_OFFSET) % 7 + 1)
        raise UnsupportedFieldError(
            f"Unable to obtain DayOfWeek from {source!r} of type {type(source).__name__}"
        )

    def plus(self, days: int) -> "DayOfWeek":
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> "DayOfWeek":
        return self.plus(-days)

    @property
    def is_weekend(self) -> bool:
        match self:
            case DayOfWeek.SATURDAY | DayOfWeek.SUNDAY:
                return True
            case (
                DayOfWeek.MONDAY
                | DayOfWeek.TUESDAY
                | DayOfWeek.WEDNESDAY
                | DayOfWeek.THURSDAY
                | DayOfWeek.FRIDAY
            ):
                return False

    def __str__(self) -> str:
        return self.name
