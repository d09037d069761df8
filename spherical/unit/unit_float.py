"""Unit-tagged floats for courses and distances.

A UnitFloat is a ``float`` whose value is held in SI (radians for courses,
meters for distances) and whose class records the unit it was created in.
Values of one family mix freely; the result keeps the unit of the left
operand:

    >>> from spherical.unit import Kilometer, NauticalMile
    >>> leg = NauticalMile(1) + Kilometer(1)
    >>> leg.to(NauticalMile)  # 1.54 NM
    >>> print(leg)            # "1.5399568034557235 NM"

Scaling takes plain numbers only. Dividing two values of one family gives a
plain ratio. Because the type is still a float, ``sorted``, ``min``, ``max``
and ``sum`` work on lists of distances without a key function.
"""

from __future__ import annotations

from collections.abc import Callable
import math
import operator
from typing import ClassVar

from spherical.config import Number

from .unit_base import Unit


def _is_scalar(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, Unit)


class UnitFloat(float, Unit):
    """Float stored in SI with a unit family attached.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): SI value of one native unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Wrap a value that is already in SI without rescaling it."""
        return float.__new__(cls, si_value)

    def _si_of(self, other: object) -> float:
        """SI value of ``other`` after checking it belongs to this family."""
        self._check_same_root(type(other))
        return float(other)

    def _rebuild(self, si_value: float) -> UnitFloat:
        return type(self).from_si(si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Plain float value expressed in ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """The same quantity re-tagged as ``unit_type``."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def is_positive(self) -> bool:
        """True when the value is strictly above zero."""
        return float(self) > 0.0

    def is_negative(self) -> bool:
        """True when the value is strictly below zero."""
        return float(self) < 0.0

    def is_zero(self) -> bool:
        return float(self) == 0.0

    def is_close(self, other: UnitFloat, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Compare two same-family values with ``math.isclose`` on their SI values.

        Args:
            other: Value of the same family.
            rel_tol: Relative tolerance.
            abs_tol: Absolute tolerance, in SI units.

        Returns:
            bool: True when the values are close.

        Raises:
            TypeError: If ``other`` is from another family.
        """
        return math.isclose(float(self), self._si_of(other), rel_tol=rel_tol, abs_tol=abs_tol)

    # Arithmetic
    def __add__(self, other: UnitFloat) -> UnitFloat:
        return self._rebuild(float(self) + self._si_of(other))

    def __radd__(self, other: UnitFloat | int) -> UnitFloat:
        # sum() starts from the integer 0
        if type(other) is int and other == 0:
            return self
        return self._rebuild(self._si_of(other) + float(self))

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        return self._rebuild(float(self) - self._si_of(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        return self._rebuild(self._si_of(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        if not _is_scalar(k):
            return NotImplemented
        return self._rebuild(float(self) * float(k))

    __rmul__ = __mul__

    def __truediv__(self, k: Number | UnitFloat) -> UnitFloat | float:
        """Scale down by a number, or take the plain ratio to a same-family unit."""
        if isinstance(k, Unit):
            return float(self) / self._si_of(k)
        if not _is_scalar(k):
            return NotImplemented
        return self._rebuild(float(self) / float(k))

    def __neg__(self) -> UnitFloat:
        return self._rebuild(-float(self))

    def __pos__(self) -> UnitFloat:
        return self

    def __abs__(self) -> UnitFloat:
        return self._rebuild(abs(float(self)))

    # Comparisons
    def _compare(self, other: object, op: Callable[[float, float], bool]) -> bool:
        return op(float(self), self._si_of(other))

    def __lt__(self, other: UnitFloat) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: UnitFloat) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: UnitFloat) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: UnitFloat) -> bool:
        return self._compare(other, operator.ge)

    def __eq__(self, other: object) -> bool:
        """Same family and same SI value; plain numbers never compare equal."""
        return self.same_family(type(other)) and float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = float.__hash__

    def __str__(self) -> str:
        return f"{self.to(type(self))} {self.SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {self.SYMBOL} (= {float(self):g} SI)"
