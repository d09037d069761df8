"""Spherical-Earth great-circle navigation.

Spherical is a small geodesy library for navigation, flight-planning and
simulation software. It computes great-circle distance, initial course,
projection along a course, and cross-track/along-track offsets from a route
segment, all on a spherical Earth. The error of the spherical model compared to
an ellipsoid (e.g. WGS84) is small enough for many applications, and the math is
far less computationally intensive.

Library Architecture:
    Core Math (spherical.great_circle, spherical.angles):
        Pure functions over plain floats: degrees for latitude, longitude and
        course, nautical miles for distance. Every inverse trig call is
        domain-clamped, so floating-point overshoot never turns into NaN.

    Measurement Framework (spherical.unit):
        • Type-safe Course (Radian, Degree) and Distance (Meter, Kilometer,
          NauticalMile, Foot, Mile) units with automatic conversions
        • Cross-family operations raise TypeError

    Geographic Points (spherical.geo):
        • LatLong: validated coordinate pair delegating to the core

    Route Tools (spherical.report):
        • Route legs, closest-leg track offsets and rich tables

    Configuration and Errors (spherical.config, spherical.errors):
        • Process-wide constants (Earth radius, conversions, tolerances)
        • InvalidInputError, InvalidGeometryError, InvalidCoordinateError

Usage Patterns:
    Plain floats:
        >>> from spherical import course_in_degrees, distance_in_nm, project_out
        >>> nm = distance_in_nm(0.0, 0.0, 10.0, 10.0)
        >>> course = course_in_degrees(0.0, 0.0, 10.0, 10.0)
        >>> lat, lon = project_out(0.0, 0.0, course, nm)  # back at (10, 10)

    Value objects:
        >>> from spherical.geo import LatLong
        >>> from spherical.unit import NORTH, NauticalMile
        >>> home = LatLong(51.4700, -0.4543)
        >>> checkpoint = home.forward(NORTH, NauticalMile(25))
        >>> home.distance_to(checkpoint).to(NauticalMile)  # ≈ 25.0
"""

from spherical.errors import (
    InvalidCoordinateError,
    InvalidGeometryError,
    InvalidInputError,
    SphericalError,
)
from spherical.great_circle import (
    LongitudeBranch,
    along_track_distance_nm,
    angle_difference,
    course_in_degrees,
    cross_track_distance_nm,
    distance_in_nm,
    longitude_branch,
    project_out,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidCoordinateError",
    "InvalidGeometryError",
    "InvalidInputError",
    "LongitudeBranch",
    "SphericalError",
    "along_track_distance_nm",
    "angle_difference",
    "course_in_degrees",
    "cross_track_distance_nm",
    "distance_in_nm",
    "longitude_branch",
    "project_out",
]
