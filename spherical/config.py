"""Global constants and type definitions for spherical navigation math.

This module centralizes the numeric constants shared by every layer of the
library. Values are plain module-level constants: they are computed once at
import time and never mutated, so all functions can read them freely from any
thread.

Earth Model:
    EARTH_RADIUS_NM: Mean spherical Earth radius in nautical miles. Distances
        computed with the haversine formula and angular distances used by
        projection are both derived from this radius.

Unit Conversions:
    METERS_PER_NM: Exact international nautical mile (1852 m).
    METERS_PER_FOOT: Exact international foot (0.3048 m).
    FEET_PER_MILE: Statute mile in feet.
    DEGREES_TO_RADIANS / RADIANS_TO_DEGREES: Fixed multiplication factors, so
        every conversion shares the same rounding.

Numeric Guards:
    TOLERANCE: How far the along-track acos ratio may drift outside [-1, 1]
        before the inputs are treated as inconsistent.
    POLE_PROXIMITY_NM: Projected points closer than this to a pole keep the
        starting longitude.

Type Definitions:
    Number: Union of the scalar types accepted by the unit system.

Example:
    >>> from spherical.config import EARTH_RADIUS_NM, METERS_PER_NM
    >>> round(EARTH_RADIUS_NM * METERS_PER_NM / 1000, 1)  # radius in km
    6367.4
"""

from math import pi

Number = int | float

EARTH_RADIUS_NM = 3438.14021579022

METERS_PER_NM = 1852.0
METERS_PER_FOOT = 0.3048
FEET_PER_MILE = 5280.0

# Multiply degrees by this to get radians.
DEGREES_TO_RADIANS = 0.017453292519943295
# Multiply radians by this to get degrees.
RADIANS_TO_DEGREES = 57.29577951308232
TWO_PI = 2.0 * pi

# Arc minutes in a half circle: 1 nm is one minute of great-circle arc.
ARC_MINUTES_PER_PI = 180.0 * 60.0

TOLERANCE = 1e-10
POLE_PROXIMITY_NM = 0.01
