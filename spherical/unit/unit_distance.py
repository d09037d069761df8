"""Distance units.

The great-circle core speaks nautical miles. These classes tag its results so
they can be compared with, added to, or printed in whatever unit the caller
works in. Values are stored in meters.

    Meter         1 m, family root
    Kilometer     1000 m
    NauticalMile  1852 m, one arc minute of a great circle
    Foot          0.3048 m (international foot)
    Mile          5280 ft (statute mile)

Example:
    >>> one_degree = NauticalMile(60)
    >>> round(one_degree.to(Kilometer), 2)
    111.12
    >>> one_degree > Mile(60)
    True
"""

from __future__ import annotations

from spherical.config import FEET_PER_MILE, METERS_PER_FOOT, METERS_PER_NM

from .unit_float import UnitFloat


class Meter(UnitFloat):
    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"

    def in_nautical_miles(self) -> float:
        """Plain float in nautical miles, as taken by the great-circle functions."""
        return self.to(NauticalMile)

    def in_meters(self) -> float:
        """Plain float value in meters (the stored SI value)."""
        return float(self)


class Kilometer(Meter):
    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """One minute of arc on the spherical Earth.

    >>> NauticalMile(1).to(Meter)
    1852.0
    """

    SCALE_TO_SI = METERS_PER_NM
    SYMBOL = "NM"


class Foot(Meter):
    SCALE_TO_SI = METERS_PER_FOOT
    SYMBOL = "ft"


class Mile(Meter):
    SCALE_TO_SI = METERS_PER_FOOT * FEET_PER_MILE
    SYMBOL = "mi"


Length = Meter | Kilometer | NauticalMile | Foot | Mile

ZERO = Meter(0)
