"""
timeextra.clock
~~~~~~~~~~~~~~~

Bounded cyclic fields of the clock and the calendar week.

Basic usage::

    from datetime import time
    from timeextra.clock import AmPm, HourOfDay

    h = HourOfDay.of(0)
    h.clock_hour_of_day                        # → 24
    HourOfDay.of_am_pm(AmPm.PM, 11).value      # → 23
    HourOfDay.from_temporal(time(7, 45))       # → HourOfDay=7

Public API
----------
HourOfDay   Hour of the day, 0-23, with AM/PM and clock-hour views.
AmPm        Half of the day.
DayOfWeek   ISO day of the week.
"""

from __future__ import annotations

from timeextra.clock.ampm import AmPm
from timeextra.clock.day_of_week import DayOfWeek
from timeextra.clock.hour_of_day import HourOfDay

__all__ = [
    "AmPm",
    "DayOfWeek",
    "HourOfDay",
]
