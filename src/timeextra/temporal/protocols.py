from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from timeextra.temporal.fields import ChronoField


@runtime_checkable
class TemporalAdjuster(Protocol):
    """A rule that maps one temporal value to another of the same kind."""

    def adjust_into(self, temporal: Any) -> Any: ...


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to named fields of a temporal value."""

    def is_supported(self, field: ChronoField) -> bool: ...

    def get(self, field: ChronoField) -> int: ...
