from __future__ import annotations

from typing import Any

import numpy as np

_DAY = np.timedelta64(1, "D")
_HOUR = np.timedelta64(1, "h")
_EPOCH = np.datetime64("1970-01-01")

# Resolutions finer than a day, i.e. values that carry a time of day.
_SUB_DAY_UNITS = frozenset({"h", "m", "s", "ms", "us", "ns", "ps", "fs", "as"})


def is_datetime64(value: Any) -> bool:
    if isinstance(value, np.datetime64):
        return True
    return isinstance(value, np.ndarray) and np.issubdtype(value.dtype, np.datetime64)


def has_time_of_day(value: Any) -> bool:
    unit, _ = np.datetime_data(np.asarray(value).dtype)
    return unit in _SUB_DAY_UNITS


def time_within_day(value: Any) -> Any:
    # timedelta modulo floors, so instants before the epoch land in [0, 1 day).
    return (value - _EPOCH) % _DAY


def start_of_day(value: Any) -> Any:
    return (value - time_within_day(value)).astype("datetime64[D]")


def hour_of(value: Any) -> Any:
    return (time_within_day(value) // _HOUR).astype(np.int64)


def with_hour(value: Any, hour: int) -> Any:
    within = time_within_day(value)
    return value - within + np.timedelta64(hour, "h") + within % _HOUR
