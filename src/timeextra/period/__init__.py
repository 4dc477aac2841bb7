"""
timeextra.period
~~~~~~~~~~~~~~~~

Immutable single-unit periods with overflow-checked 32-bit arithmetic.

Basic usage::

    from datetime import date
    from timeextra.period import Days, Hours, Months

    Days.of(3).plus(4)                          # → Days(7)
    Days.of(7).divided_by(-2)                   # → Days(-3), truncates to zero
    Days.parse("P2W")                           # → Days(14)
    Months.of(1).add_to(date(2024, 1, 31))      # → date(2024, 2, 29)
    str(Hours.of(5))                            # → 'PT5H'

Arithmetic never wraps: leaving the signed 32-bit range raises
``PeriodOverflowError``.

Public API
----------
AbstractPeriodField  Base class for single-unit periods.
Days, Weeks, Months, Years, Hours, Minutes, Seconds
period_type          Look up the period class bound to a ChronoUnit.
"""

from __future__ import annotations

from timeextra.period.base import INT_MAX, INT_MIN, AbstractPeriodField, period_type
from timeextra.period.periods import Days, Hours, Minutes, Months, Seconds, Weeks, Years

__all__ = [
    "AbstractPeriodField",
    "Days",
    "Hours",
    "INT_MAX",
    "INT_MIN",
    "Minutes",
    "Months",
    "Seconds",
    "Weeks",
    "Years",
    "period_type",
]
