from __future__ import annotations

from enum import Enum
from typing import Any

from timeextra._exceptions import UnsupportedFieldError, require
from timeextra.temporal.fields import ChronoField
from timeextra.temporal.protocols import TemporalAccessor


class AmPm(Enum):
    """Half of the day: before noon (AM) or from noon onwards (PM)."""

    AM = 0
    PM = 1

    @classmethod
    def of(cls, value: int) -> "AmPm":
        return cls(ChronoField.AMPM_OF_DAY.check_valid_value(value))

    @classmethod
    def from_temporal(cls, source: Any) -> "AmPm":
        require(source, "temporal")
        if isinstance(source, AmPm):
            return source
        if isinstance(source, TemporalAccessor) and source.is_supported(ChronoField.AMPM_OF_DAY):
            return cls.of(source.get(ChronoField.AMPM_OF_DAY))
        from timeextra.clock.hour_of_day import HourOfDay

        try:
            return HourOfDay.from_temporal(source).am_pm
        except UnsupportedFieldError:
            raise UnsupportedFieldError(
                f"Unable to obtain AmPm from {source!r} of type {type(source).__name__}"
            ) from None

    def __str__(self) -> str:
        return self.name
