"""Unit families for course and distance quantities.

Every unit class belongs to exactly one family, identified by its ``ROOT``:
the nearest class in its MRO that declares ``IS_FAMILY_ROOT = True``. Radian
and Degree share the Radian root; Meter, NauticalMile, Foot and friends share
the Meter root. Arithmetic and comparisons across families are rejected with
``TypeError``, so a course can never be added to a distance by accident.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Cable(Length):
    ...     pass
    >>> Cable.ROOT is Length
    True
    >>> Cable.same_family(Length)
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Family bookkeeping shared by all unit types.

    Concrete units derive from UnitFloat, not from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): First family root found in the MRO.
        SYMBOL (ClassVar[str]): Display symbol, e.g. "NM" or "°".
        IS_FAMILY_ROOT (ClassVar[bool]): Set on the class that starts a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        roots = (klass for klass in cls.__mro__ if klass.__dict__.get("IS_FAMILY_ROOT", False))
        cls.ROOT = next(roots, cls)

    @classmethod
    def same_family(cls, unit_type: type) -> bool:
        """Check whether ``unit_type`` shares this class's family root.

        Args:
            unit_type: Any type; non-unit types are never in the family.

        Returns:
            bool: True for units of the same family.
        """
        return getattr(unit_type, "ROOT", None) is cls.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Raise TypeError unless ``unit_type`` is a unit of this family."""
        if cls.same_family(unit_type):
            return
        other_root = getattr(unit_type, "ROOT", unit_type)
        msg = f"Cannot combine {cls.ROOT.__name__} family with {other_root.__name__}"
        raise TypeError(msg)
