"""
timeextra.adjusters
~~~~~~~~~~~~~~~~~~~

Stateless date adjusters.

Basic usage::

    from datetime import date
    from timeextra.adjusters import next_non_weekend_day

    next_non_weekend_day().adjust_into(date(2010, 12, 31))   # → date(2011, 1, 3)

NumPy arrays are accepted as well::

    import numpy as np
    days = np.array(["2011-01-01", "2011-01-04"], dtype="datetime64[D]")
    next_non_weekend_day()(days)     # → ['2011-01-03', '2011-01-05']

Public API
----------
WeekendRules               Enum holding the two singleton adjusters.
next_non_weekend_day       Skip forward over Saturday and Sunday.
previous_non_weekend_day   Skip back over Saturday and Sunday.
"""

from __future__ import annotations

from timeextra.adjusters.weekend import (
    WeekendRules,
    next_non_weekend_day,
    previous_non_weekend_day,
)

__all__ = [
    "WeekendRules",
    "next_non_weekend_day",
    "previous_non_weekend_day",
]
