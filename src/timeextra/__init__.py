"""
timeextra
~~~~~~~~~

Supplementary date/time value types and calendar adjusters for ``datetime``
and NumPy ``datetime64``.

Basic usage::

    from datetime import date, time
    from timeextra import Days, HourOfDay, next_non_weekend_day

    Days.of(5).plus(2)                                      # → Days(7)
    HourOfDay.of(15).adjust_into(time(9, 30))               # → time(15, 30)
    next_non_weekend_day().adjust_into(date(2010, 12, 31))  # → date(2011, 1, 3)

Public API
----------
Days, Weeks, Months, Years, Hours, Minutes, Seconds
                     Single-unit periods with checked arithmetic.
AbstractPeriodField  Base class of the period types.
HourOfDay, AmPm, DayOfWeek
                     Bounded fields of the clock and week.
WeekendRules, next_non_weekend_day, previous_non_weekend_day
                     Weekend-skipping date adjusters.
ChronoUnit, ChronoField
                     Units and fields understood by the above.
DateTimeError        Base exception for all timeextra errors.
"""

from __future__ import annotations

import logging

from timeextra._exceptions import (
    DateTimeError,
    MissingArgumentError,
    PeriodDivisionError,
    PeriodOverflowError,
    PeriodParseError,
    RangeError,
    UnsupportedFieldError,
)
from timeextra.adjusters import WeekendRules, next_non_weekend_day, previous_non_weekend_day
from timeextra.clock import AmPm, DayOfWeek, HourOfDay
from timeextra.period import (
    AbstractPeriodField,
    Days,
    Hours,
    Minutes,
    Months,
    Seconds,
    Weeks,
    Years,
)
from timeextra.temporal import ChronoField, ChronoUnit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AbstractPeriodField",
    "AmPm",
    "ChronoField",
    "ChronoUnit",
    "DateTimeError",
    "DayOfWeek",
    "Days",
    "HourOfDay",
    "Hours",
    "Minutes",
    "MissingArgumentError",
    "Months",
    "PeriodDivisionError",
    "PeriodOverflowError",
    "PeriodParseError",
    "RangeError",
    "Seconds",
    "UnsupportedFieldError",
    "Weeks",
    "WeekendRules",
    "Years",
    "next_non_weekend_day",
    "previous_non_weekend_day",
]
