"""Geographic coordinate type for spherical navigation.

This package provides LatLong, the coordinate pair consumed by route tools. It
validates latitude/longitude ranges on construction and delegates every
geometric query to the great-circle core.

Typical Usage:
    >>> from spherical.geo import LatLong
    >>> from spherical.unit import Degree, NauticalMile
    >>>
    >>> start = LatLong(0.0, 0.0)
    >>> end = LatLong(0.0, 10.0)
    >>> aircraft = LatLong(1.0, 0.5)
    >>>
    >>> xtd = aircraft.cross_track_distance_to(start, end)  # left of track
    >>> atd = aircraft.along_track_distance_to(start, end, xtd)
    >>> round(xtd.to(NauticalMile), 2), round(atd.to(NauticalMile), 2)
    (-60.01, 30.0)
"""

from .geo_point import LatLong

__all__ = ["LatLong"]
