from __future__ import annotations

from datetime import timedelta
from enum import Enum


class ChronoUnit(Enum):
    """
    Units of time understood by the period types.

    Each member carries its ISO-8601 designator and, for fixed-length units,
    the exact ``timedelta`` of one unit.  Months and years have no fixed
    length and report ``None``.
    """

    SECONDS = ("S", True, timedelta(seconds=1))
    MINUTES = ("M", True, timedelta(minutes=1))
    HOURS = ("H", True, timedelta(hours=1))
    DAYS = ("D", False, timedelta(days=1))
    WEEKS = ("W", False, timedelta(weeks=1))
    MONTHS = ("M", False, None)
    YEARS = ("Y", False, None)

    def __init__(self, designator: str, time_based: bool, duration: timedelta | None) -> None:
        self.designator = designator
        self._time_based = time_based
        self._duration = duration

    @property
    def is_time_based(self) -> bool:
        return self._time_based

    @property
    def is_date_based(self) -> bool:
        return not self._time_based

    @property
    def is_duration_estimated(self) -> bool:
        return self._duration is None

    @property
    def duration(self) -> timedelta | None:
        return self._duration

    def __str__(self) -> str:
        return self.name.capitalize()
