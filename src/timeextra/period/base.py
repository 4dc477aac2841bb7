from __future__ import annotations

import logging
import operator
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, ClassVar

import numpy as np

from timeextra._exceptions import (
    PeriodDivisionError,
    PeriodOverflowError,
    UnsupportedFieldError,
    require,
)
from timeextra.temporal.units import ChronoUnit

logger = logging.getLogger(__name__)

INT_MIN: int = int(np.iinfo(np.int32).min)
INT_MAX: int = int(np.iinfo(np.int32).max)

_registry: dict[ChronoUnit, type["AbstractPeriodField"]] = {}


def _as_int(value: Any, name: str) -> int:
    require(value, name)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer; got {type(value).__name__}.") from None


def _checked(result: int, expression: str) -> int:
    if not INT_MIN <= result <= INT_MAX:
        raise PeriodOverflowError(f"Integer overflow: {expression} = {result}")
    return result


def period_type(unit: ChronoUnit) -> type["AbstractPeriodField"]:
    """Return the concrete period type registered for ``unit``."""
    try:
        return _registry[unit]
    except KeyError:
        raise UnsupportedFieldError(f"No period type is registered for unit {unit}.") from None


def _unpkl_period(unit_name: str, amount: int) -> "AbstractPeriodField":
    return period_type(ChronoUnit[unit_name]).of(amount)


@total_ordering
class AbstractPeriodField(ABC):
    """
    An immutable period measured in a single unit, such as days or hours.

    The amount is a signed 32-bit integer.  Every arithmetic operation
    returns a new instance and raises ``PeriodOverflowError`` rather than
    wrapping when the result leaves that range.

    Concrete subclasses set the ``UNIT`` class attribute and are registered
    against it on definition, so a unit maps to exactly one period type.
    Two periods are equal when they share a unit and an amount.
    """

    __slots__ = ("_amount",)

    UNIT: ClassVar[ChronoUnit]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        unit = cls.__dict__.get("UNIT")
        if unit is None:
            return
        if unit in _registry:
            raise TypeError(
                f"Unit {unit} is already bound to {_registry[unit].__name__}; "
                f"cannot register {cls.__name__}."
            )
        _registry[unit] = cls
        logger.debug("Registered period type %s for unit %s", cls.__name__, unit.name)

    def __init__(self, amount: int) -> None:
        amount = _as_int(amount, "amount")
        if not INT_MIN <= amount <= INT_MAX:
            raise PeriodOverflowError(
                f"{type(self).__name__} amount must fit in a 32-bit int; got {amount}"
            )
        self._amount: int = amount

    @classmethod
    def of(cls, amount: int) -> "AbstractPeriodField":
        return cls(amount)

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def unit(self) -> ChronoUnit:
        return self.UNIT

    @property
    def is_zero(self) -> bool:
        return self._amount == 0

    @property
    def is_negative(self) -> bool:
        return self._amount < 0

    def with_amount(self, amount: int) -> "AbstractPeriodField":
        """Return a period of the same type holding ``amount``."""
        return type(self).of(amount)

    # ── checked arithmetic ───────────────────────────────────────────────

    def _delta(self, delta: "int | AbstractPeriodField") -> int:
        if isinstance(delta, AbstractPeriodField):
            if delta.unit is not self.unit:
                raise UnsupportedFieldError(
                    f"Cannot combine {delta.unit} with {self.unit}: {delta} and {self}"
                )
            return delta.amount
        return _as_int(delta, "amount")

    def plus(self, delta: "int | AbstractPeriodField") -> "AbstractPeriodField":
        delta = self._delta(delta)
        if delta == 0:
            return self
        return self.with_amount(_checked(self._amount + delta, f"{self._amount} + {delta}"))

    def minus(self, delta: "int | AbstractPeriodField") -> "AbstractPeriodField":
        delta = self._delta(delta)
        return self.with_amount(_checked(self._amount - delta, f"{self._amount} - {delta}"))

    def multiplied_by(self, scalar: int) -> "AbstractPeriodField":
        scalar = _as_int(scalar, "scalar")
        return self.with_amount(_checked(self._amount * scalar, f"{self._amount} * {scalar}"))

    def divided_by(self, divisor: int) -> "AbstractPeriodField":
        """
        Integer division truncating toward zero, so 3/2 is 1 and -3/2 is -1.

        Dividing the minimum amount by -1 overflows.
        """
        divisor = _as_int(divisor, "divisor")
        if divisor == 0:
            raise PeriodDivisionError(f"Cannot divide {self} by zero.")
        if divisor == 1:
            return self
        quotient = abs(self._amount) // abs(divisor)
        if (self._amount < 0) != (divisor < 0):
            quotient = -quotient
        return self.with_amount(_checked(quotient, f"{self._amount} / {divisor}"))

    def negated(self) -> "AbstractPeriodField":
        if self._amount == INT_MIN:
            raise PeriodOverflowError(f"Integer overflow: {INT_MIN} cannot be negated")
        return self.with_amount(-self._amount)

    def abs(self) -> "AbstractPeriodField":
        return self.negated() if self._amount < 0 else self

    # ── operators ────────────────────────────────────────────────────────

    def __add__(self, other: Any) -> "AbstractPeriodField":
        if isinstance(other, (int, np.integer, AbstractPeriodField)):
            return self.plus(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> "AbstractPeriodField":
        if isinstance(other, (int, np.integer, AbstractPeriodField)):
            return self.minus(other)
        return NotImplemented

    def __mul__(self, other: Any) -> "AbstractPeriodField":
        if isinstance(other, (int, np.integer)):
            return self.multiplied_by(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "AbstractPeriodField":
        return self.negated()

    def __abs__(self) -> "AbstractPeriodField":
        return self.abs()

    # ── equality / ordering ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, AbstractPeriodField):
            return self.unit is other.unit and self._amount == other._amount
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, AbstractPeriodField) and other.unit is self.unit:
            return self._amount < other._amount
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.unit, self._amount))

    # ── persistence / text ───────────────────────────────────────────────

    def __reduce__(self) -> tuple[Any, ...]:
        return _unpkl_period, (self.unit.name, self._amount)

    @abstractmethod
    def __str__(self) -> str:
        """Canonical ISO-8601 text of the period."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._amount})"
