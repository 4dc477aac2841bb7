from __future__ import annotations

from datetime import datetime, time
from functools import total_ordering
from typing import Any

import numpy as np

from timeextra._exceptions import MissingArgumentError, UnsupportedFieldError, require
from timeextra.clock.ampm import AmPm
from timeextra.temporal import _datetime64
from timeextra.temporal.fields import ChronoField
from timeextra.temporal.protocols import TemporalAccessor

_SUPPORTED_FIELDS = frozenset({
    ChronoField.HOUR_OF_DAY,
    ChronoField.HOUR_OF_AMPM,
    ChronoField.CLOCK_HOUR_OF_AMPM,
    ChronoField.CLOCK_HOUR_OF_DAY,
    ChronoField.AMPM_OF_DAY,
})


@total_ordering
class HourOfDay:
    """
    An hour of the day, from 0 to 23.

    Instances are immutable and shared: ``HourOfDay.of(n)`` always returns
    the same object for a given ``n``.  The value can be read in 24-hour
    form or split into an AM/PM half with a 0-11 or 1-12 clock hour, and it
    can be applied to a ``time``, ``datetime`` or ``datetime64`` to replace
    the hour while leaving minutes and smaller fields alone.

    Basic usage::

        h = HourOfDay.of_am_pm(AmPm.PM, 3)    # → HourOfDay=15
        h.clock_hour_of_am_pm                 # → 3
        h.adjust_into(time(9, 30))            # → time(15, 30)
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        self._value: int = ChronoField.HOUR_OF_DAY.check_valid_value(value)

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def of(cls, hour_of_day: int) -> "HourOfDay":
        return _CACHE[ChronoField.HOUR_OF_DAY.check_valid_value(hour_of_day)]

    @classmethod
    def of_am_pm(cls, am_pm: AmPm, hour_of_am_pm: int) -> "HourOfDay":
        require(am_pm, "am_pm")
        if not isinstance(am_pm, AmPm):
            raise TypeError(f"am_pm must be an AmPm; got {type(am_pm).__name__}")
        hour = ChronoField.HOUR_OF_AMPM.check_valid_value(hour_of_am_pm)
        match am_pm:
            case AmPm.AM:
                return cls.of(hour)
            case AmPm.PM:
                return cls.of(hour + 12)

    @classmethod
    def from_temporal(cls, source: Any) -> "HourOfDay":
        """
        Obtain the hour of day held by ``source``.

        Accepts another HourOfDay, any TemporalAccessor that supports
        ``HOUR_OF_DAY``, objects with an integer ``hour`` attribute (``time``,
        ``datetime``) and scalar ``datetime64`` values finer than a day.
        """
        require(source, "temporal")
        if isinstance(source, HourOfDay):
            return source
        if isinstance(source, TemporalAccessor):
            if source.is_supported(ChronoField.HOUR_OF_DAY):
                return cls.of(source.get(ChronoField.HOUR_OF_DAY))
        elif _datetime64.is_datetime64(source):
            if np.ndim(source) == 0 and _datetime64.has_time_of_day(source):
                return cls.of(int(_datetime64.hour_of(source)))
        else:
            hour = getattr(source, "hour", None)
            if isinstance(hour, int) and not isinstance(hour, bool):
                return cls.of(hour)
        raise UnsupportedFieldError(
            f"Unable to obtain HourOfDay from {source!r} of type {type(source).__name__}"
        )

    # ── views ────────────────────────────────────────────────────────────

    @property
    def value(self) -> int:
        return self._value

    @property
    def field(self) -> ChronoField:
        return ChronoField.HOUR_OF_DAY

    @property
    def am_pm(self) -> AmPm:
        return AmPm.AM if self._value < 12 else AmPm.PM

    @property
    def hour_of_am_pm(self) -> int:
        return self._value % 12

    @property
    def clock_hour_of_am_pm(self) -> int:
        return self.hour_of_am_pm or 12

    @property
    def clock_hour_of_day(self) -> int:
        return self._value or 24

    # ── TemporalAccessor ─────────────────────────────────────────────────

    def is_supported(self, field: ChronoField) -> bool:
        return field in _SUPPORTED_FIELDS

    def get(self, field: ChronoField) -> int:
        require(field, "field")
        match field:
            case ChronoField.HOUR_OF_DAY:
                return self._value
            case ChronoField.HOUR_OF_AMPM:
                return self.hour_of_am_pm
            case ChronoField.CLOCK_HOUR_OF_AMPM:
                return self.clock_hour_of_am_pm
            case ChronoField.CLOCK_HOUR_OF_DAY:
                return self.clock_hour_of_day
            case ChronoField.AMPM_OF_DAY:
                return self.am_pm.value
            case _:
                raise UnsupportedFieldError(f"Unsupported field for HourOfDay: {field}")

    # ── adjustment ───────────────────────────────────────────────────────

    def do_with_adjustment(self, temporal: Any) -> Any:
        """Return ``temporal`` with its hour replaced by this hour."""
        require(temporal, "temporal")
        if _datetime64.is_datetime64(temporal):
            if not _datetime64.has_time_of_day(temporal):
                raise UnsupportedFieldError(
                    f"HourOfDay cannot be applied to a datetime64 without a time of day: {temporal!r}"
                )
            return _datetime64.with_hour(temporal, self._value)
        if isinstance(temporal, (time, datetime)):
            return temporal.replace(hour=self._value)
        raise UnsupportedFieldError(
            f"HourOfDay cannot be applied to {type(temporal).__name__}: {temporal!r}"
        )

    adjust_into = do_with_adjustment

    # ── comparison ───────────────────────────────────────────────────────

    def compare_to(self, other: "HourOfDay") -> int:
        require(other, "other")
        if not isinstance(other, HourOfDay):
            raise TypeError(f"Cannot compare HourOfDay with {type(other).__name__}")
        return (self._value > other._value) - (self._value < other._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HourOfDay):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if other is None:
            raise MissingArgumentError("Cannot compare HourOfDay with None.")
        if isinstance(other, HourOfDay):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    # ── persistence / text ───────────────────────────────────────────────

    def __reduce__(self) -> tuple[Any, ...]:
        return _unpkl_hour_of_day, (self._value,)

    def __str__(self) -> str:
        return f"HourOfDay={self._value}"

    def __repr__(self) -> str:
        return f"HourOfDay({self._value})"


def _unpkl_hour_of_day(value: int) -> HourOfDay:
    return HourOfDay.of(value)


_CACHE: tuple[HourOfDay, ...] = tuple(HourOfDay(hour) for hour in range(24))
