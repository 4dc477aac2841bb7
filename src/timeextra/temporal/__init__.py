"""
timeextra.temporal
~~~~~~~~~~~~~~~~~~

The narrow interface the value types use to talk to ``datetime`` and NumPy:
units, range-checked fields, and the adjuster/accessor protocols.

Public API
----------
ChronoUnit         Units of time (seconds to years).
ChronoField        Named fields with their valid ranges.
ValueRange         Inclusive integer range used for validation.
TemporalAdjuster   Protocol for ``adjust_into(temporal)``.
TemporalAccessor   Protocol for ``is_supported(field)`` / ``get(field)``.
"""

from __future__ import annotations

from timeextra.temporal.fields import ChronoField, ValueRange
from timeextra.temporal.protocols import TemporalAccessor, TemporalAdjuster
from timeextra.temporal.units import ChronoUnit

__all__ = [
    "ChronoField",
    "ChronoUnit",
    "TemporalAccessor",
    "TemporalAdjuster",
    "ValueRange",
]
