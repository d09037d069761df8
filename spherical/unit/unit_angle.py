"""Course units.

A course is the direction of travel over the ground, measured clockwise from
true north. It is not a heading: wind or current can make the two differ.
Courses are stored in radians and usually created and shown in degrees, so
``LatLong.forward(course, distance)`` cannot be called with the arguments
swapped or with an untagged number of the wrong kind.

Type Aliases:
    Angle: Any course unit (Radian | Degree).

Constants:
    NORTH, EAST, SOUTH, WEST: Cardinal courses.

Example:
    >>> print(EAST)                  # "90.0 °"
    >>> round(EAST.in_radians(), 4)
    1.5708
    >>> angle_between(Degree(5), Degree(355)).in_degrees()  # 10.0, not 350.0
"""

from __future__ import annotations

import math

from spherical.great_circle import angle_difference

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Root of the course family; one unit is one radian."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    def in_degrees(self) -> float:
        """Plain float value in degrees."""
        return self.to(Degree)

    def in_radians(self) -> float:
        """Plain float value in radians."""
        return float(self)

    def sin(self) -> float:
        """Sine of the angle.

        Returns:
            float: ``math.sin`` of the value in radians.
        """
        return math.sin(float(self))

    def cos(self) -> float:
        """Cosine of the angle.

        Returns:
            float: ``math.cos`` of the value in radians.
        """
        return math.cos(float(self))

    def tan(self) -> float:
        """Tangent of the angle.

        Returns:
            float: ``math.tan`` of the value in radians.
        """
        return math.tan(float(self))


class Degree(Radian):
    """Course in degrees, the unit ``course_to`` reports in.

    >>> Degree(90).to(Radian)  # pi / 2
    """

    SCALE_TO_SI = math.pi / 180
    SYMBOL = "°"


Angle = Radian | Degree

NORTH = Degree(0)
EAST = Degree(90)
SOUTH = Degree(180)
WEST = Degree(270)


def angle_between(one: Angle, two: Angle) -> Degree:
    """Signed turn from ``two`` to ``one``, in degrees within [-180, 180].

    Example:
        >>> round(angle_between(Degree(355), Degree(5)).in_degrees(), 6)
        -10.0
    """
    return Degree(angle_difference(one.in_degrees(), two.in_degrees()))
