from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import Any, ClassVar

import numpy as np

from timeextra._exceptions import (
    PeriodOverflowError,
    PeriodParseError,
    UnsupportedFieldError,
    require,
)
from timeextra.period.base import AbstractPeriodField
from timeextra.temporal import _datetime64
from timeextra.temporal.units import ChronoUnit

_NUMPY_UNIT = {
    ChronoUnit.SECONDS: "s",
    ChronoUnit.MINUTES: "m",
    ChronoUnit.HOURS: "h",
    ChronoUnit.DAYS: "D",
    ChronoUnit.WEEKS: "W",
}

_MONTHS_PER_UNIT = {
    ChronoUnit.MONTHS: 1,
    ChronoUnit.YEARS: 12,
}


def _iso_pattern(prefix: str, designators: str) -> re.Pattern[str]:
    return re.compile(rf"([-+]?){prefix}([-+]?[0-9]+)([{designators}])", re.IGNORECASE)


def plus_months(value: date, months: int) -> date:
    """
    Shift ``value`` by whole calendar months, clamping the day of month.

    2024-01-31 plus one month is 2024-02-29; the time of a ``datetime`` is
    kept.
    """
    total = value.year * 12 + (value.month - 1) + months
    year, month0 = divmod(total, 12)
    if not MINYEAR <= year <= MAXYEAR:
        raise PeriodOverflowError(f"Year {year} is out of range shifting {value} by {months} months")
    day = min(value.day, calendar.monthrange(year, month0 + 1)[1])
    return value.replace(year=year, month=month0 + 1, day=day)


class _IsoPeriod(AbstractPeriodField):
    """Shared text form and temporal application of the concrete periods."""

    __slots__ = ()

    ZERO: ClassVar["_IsoPeriod"]
    ONE: ClassVar["_IsoPeriod"]

    _PREFIX: ClassVar[str] = "P"
    _PATTERN: ClassVar[re.Pattern[str]]

    def __str__(self) -> str:
        return f"{self._PREFIX}{self._amount}{self.UNIT.designator}"

    @classmethod
    def parse(cls, text: str) -> "_IsoPeriod":
        """
        Parse the form produced by ``str()``, e.g. ``P3D`` or ``PT-5H``.

        A sign may prefix the whole text, the number, or both.
        """
        require(text, "text")
        match = cls._PATTERN.fullmatch(text)
        if match is None:
            raise PeriodParseError(f"Text cannot be parsed to {cls.__name__}: {text!r}")
        sign, number, designator = match.groups()
        amount = int(number)
        if sign == "-":
            amount = -amount
        try:
            return cls._from_parsed(amount, designator.upper())
        except PeriodOverflowError as exc:
            raise PeriodParseError(f"Text cannot be parsed to {cls.__name__}: {text!r}") from exc

    @classmethod
    def _from_parsed(cls, amount: int, designator: str) -> "_IsoPeriod":
        return cls.of(amount)

    # ── application to temporal values ───────────────────────────────────

    def to_timedelta(self) -> timedelta:
        duration = self.UNIT.duration
        if duration is None:
            raise UnsupportedFieldError(f"{self.UNIT} have no fixed length: {self}")
        return duration * self._amount

    def add_to(self, temporal: Any) -> Any:
        """Return ``temporal`` moved forward by this period."""
        return self._shift(temporal, self._amount)

    def subtract_from(self, temporal: Any) -> Any:
        """Return ``temporal`` moved back by this period."""
        return self._shift(temporal, -self._amount)

    def _shift(self, temporal: Any, amount: int) -> Any:
        require(temporal, "temporal")
        unit = self.UNIT

        if _datetime64.is_datetime64(temporal):
            if unit not in _NUMPY_UNIT:
                raise UnsupportedFieldError(f"{unit} cannot be applied to datetime64 values")
            if unit.is_time_based and not _datetime64.has_time_of_day(temporal):
                raise UnsupportedFieldError(f"{unit} need a datetime64 with a time of day")
            return temporal + np.timedelta64(amount, _NUMPY_UNIT[unit])

        if not isinstance(temporal, date):
            raise UnsupportedFieldError(
                f"{unit} cannot be applied to {type(temporal).__name__}: {temporal!r}"
            )
        if unit.is_time_based and not isinstance(temporal, datetime):
            raise UnsupportedFieldError(f"{unit} cannot be applied to a date: {temporal}")

        if unit in _MONTHS_PER_UNIT:
            return plus_months(temporal, amount * _MONTHS_PER_UNIT[unit])
        return temporal + unit.duration * amount


class Days(_IsoPeriod):
    """A number of days, e.g. ``P12D``."""

    __slots__ = ()
    UNIT = ChronoUnit.DAYS
    _PATTERN = _iso_pattern("P", "DW")

    @classmethod
    def _from_parsed(cls, amount: int, designator: str) -> "Days":
        if designator == "W":
            return Weeks.of(amount).to_days()
        return cls.of(amount)


class Weeks(_IsoPeriod):
    """A number of weeks, e.g. ``P3W``."""

    __slots__ = ()
    UNIT = ChronoUnit.WEEKS
    _PATTERN = _iso_pattern("P", "W")

    def to_days(self) -> Days:
        return Days.of(self._amount).multiplied_by(7)


class Months(_IsoPeriod):
    __slots__ = ()
    UNIT = ChronoUnit.MONTHS
    _PATTERN = _iso_pattern("P", "M")


class Years(_IsoPeriod):
    __slots__ = ()
    UNIT = ChronoUnit.YEARS
    _PATTERN = _iso_pattern("P", "Y")

    def to_months(self) -> Months:
        return Months.of(self._amount).multiplied_by(12)


class Hours(_IsoPeriod):
    __slots__ = ()
    UNIT = ChronoUnit.HOURS
    _PREFIX = "PT"
    _PATTERN = _iso_pattern("PT", "H")


class Minutes(_IsoPeriod):
    __slots__ = ()
    UNIT = ChronoUnit.MINUTES
    _PREFIX = "PT"
    _PATTERN = _iso_pattern("PT", "M")


class Seconds(_IsoPeriod):
    __slots__ = ()
    UNIT = ChronoUnit.SECONDS
    _PREFIX = "PT"
    _PATTERN = _iso_pattern("PT", "S")


for _cls in (Days, Weeks, Months, Years, Hours, Minutes, Seconds):
    _cls.ZERO = _cls(0)
    _cls.ONE = _cls(1)
del _cls
