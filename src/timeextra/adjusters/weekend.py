from __future__ import annotations

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Any

import numpy as np

from timeextra._exceptions import DateTimeError, UnsupportedFieldError, require
from timeextra.clock.day_of_week import DayOfWeek
from timeextra.temporal import _datetime64

logger = logging.getLogger(__name__)

# Monday to Friday are working days.
WEEKMASK = "1111100"


class WeekendRules(Enum):
    """
    Date adjusters that step over Saturdays and Sundays.

    Each rule is a process-wide singleton.  Because the rules are enum
    members, pickling stores only the member and unpickling resolves back
    to the same object, so ``pickle.loads(pickle.dumps(rule)) is rule``.

    Rules accept ``date`` and ``datetime`` (the time of day is kept) as well
    as ``datetime64`` scalars and arrays.
    """

    NEXT_NON_WEEKEND_DAY = "next_non_weekend_day"
    PREVIOUS_NON_WEEKEND_DAY = "previous_non_weekend_day"

    @classmethod
    def by_name(cls, name: str) -> "WeekendRules":
        require(name, "name")
        try:
            return cls[name.upper()]
        except KeyError:
            raise DateTimeError(f"Unknown weekend rule: {name!r}") from None

    def adjust_into(self, temporal: Any) -> Any:
        require(temporal, "temporal")
        if _datetime64.is_datetime64(temporal):
            return self._adjust_datetime64(temporal)
        if isinstance(temporal, date):
            return temporal + timedelta(days=self._day_shift(DayOfWeek.from_date(temporal)))
        raise UnsupportedFieldError(
            f"{self.name} cannot be applied to {type(temporal).__name__}: {temporal!r}"
        )

    __call__ = adjust_into

    def _day_shift(self, day_of_week: DayOfWeek) -> int:
        match self:
            case WeekendRules.NEXT_NON_WEEKEND_DAY:
                match day_of_week:
                    case DayOfWeek.FRIDAY:
                        return 3
                    case DayOfWeek.SATURDAY:
                        return 2
                    case (
                        DayOfWeek.SUNDAY
                        | DayOfWeek.MONDAY
                        | DayOfWeek.TUESDAY
                        | DayOfWeek.WEDNESDAY
                        | DayOfWeek.THURSDAY
                    ):
                        return 1
            case WeekendRules.PREVIOUS_NON_WEEKEND_DAY:
                match day_of_week:
                    case DayOfWeek.MONDAY:
                        return -3
                    case DayOfWeek.SUNDAY:
                        return -2
                    case (
                        DayOfWeek.TUESDAY
                        | DayOfWeek.WEDNESDAY
                        | DayOfWeek.THURSDAY
                        | DayOfWeek.FRIDAY
                        | DayOfWeek.SATURDAY
                    ):
                        return -1
        raise AssertionError(f"Unhandled case {self.name} / {day_of_week.name}")

    def _adjust_datetime64(self, temporal: Any) -> Any:
        logger.debug("Applying %s to %d datetime64 value(s)", self.name, np.size(temporal))
        within = _datetime64.time_within_day(temporal)
        day = _datetime64.start_of_day(temporal)
        # Rolling onto a working day first turns the rule table into a single
        # business-day offset: Sat/Sun roll back to Friday for "next", and
        # forward to Monday for "previous".
        match self:
            case WeekendRules.NEXT_NON_WEEKEND_DAY:
                shifted = np.busday_offset(day, 1, roll="backward", weekmask=WEEKMASK)
            case WeekendRules.PREVIOUS_NON_WEEKEND_DAY:
                shifted = np.busday_offset(day, -1, roll="forward", weekmask=WEEKMASK)
        return shifted + within


def next_non_weekend_day() -> WeekendRules:
    """Adjuster returning the next Monday-to-Friday date after the input."""
    return WeekendRules.NEXT_NON_WEEKEND_DAY


def previous_non_weekend_day() -> WeekendRules:
    """Adjuster returning the last Monday-to-Friday date before the input."""
    return WeekendRules.PREVIOUS_NON_WEEKEND_DAY
