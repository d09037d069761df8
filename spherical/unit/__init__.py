"""Unit-tagged scalars for courses and distances.

The great-circle core takes and returns bare floats (degrees and nautical
miles). The classes here attach a unit to such a float so it can be converted,
compared and summed safely:

    course family    Radian (root), Degree
    distance family  Meter (root), Kilometer, NauticalMile, Foot, Mile

Mixing families raises TypeError.

Example:
    >>> from spherical.unit import Degree, Kilometer, NauticalMile
    >>> leg = NauticalMile(100) + Kilometer(10)
    >>> round(leg.to(NauticalMile), 3)
    105.4
    >>> leg + Degree(90)
    Traceback (most recent call last):
    TypeError: Cannot combine Meter family with Radian
"""

from .unit_angle import EAST, NORTH, SOUTH, WEST, Angle, Degree, Radian, angle_between
from .unit_base import Unit
from .unit_distance import ZERO, Foot, Kilometer, Length, Meter, Mile, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    "NORTH",
    "EAST",
    "SOUTH",
    "WEST",
    "angle_between",
    # Distance units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Foot",
    "Mile",
    "Length",
    "ZERO",
]
