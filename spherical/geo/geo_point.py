"""Geographic coordinate pair delegating to the great-circle core.

The module defines LatLong, an immutable latitude/longitude pair in degrees.
Every geometric query (distance, course, projection, cross-track and
along-track offsets) is a thin call into ``spherical.great_circle``. Each query
comes in two flavors: a plain float in degrees or nautical miles, and a
unit-tagged value from ``spherical.unit``.
"""

from __future__ import annotations

from dataclasses import dataclass

from spherical import great_circle
from spherical.angles import to_degrees
from spherical.errors import InvalidCoordinateError
from spherical.unit import Angle, Degree, Length, NauticalMile


def _range_problems(latitude: float, longitude: float) -> list[str]:
    problems = []
    if not -90.0 < latitude < 90.0:
        problems.append(f"Latitude is out of range (-90, 90): {latitude:f}")
    if not -180.0 < longitude < 180.0:
        problems.append(f"Longitude is out of range (-180, 180): {longitude:f}")
    return problems


@dataclass(frozen=True)
class LatLong:
    """Represents a geographic point with latitude and longitude in degrees.

    Latitude must lie in the open range (-90, 90) and longitude in (-180, 180).
    Both poles are excluded because longitude is undefined there.

    Attributes:
        latitude (float): Latitude in decimal degrees, positive north.
        longitude (float): Longitude in decimal degrees, positive east.

    Example:
        >>> origin = LatLong(0.0, 0.0)
        >>> target = LatLong(1.0, 1.0)
        >>> round(origin.course_in_degrees(target), 1)
        45.0
        >>> origin.is_within(NauticalMile(100), target)
        True
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        problems = _range_problems(self.latitude, self.longitude)
        if problems:
            raise InvalidCoordinateError(self.latitude, self.longitude, problems)

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> LatLong:
        """Create a LatLong from latitude and longitude values in degrees."""
        return cls(float(lat), float(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> LatLong:
        """Create a LatLong from latitude and longitude values in radians.

        Example:
            >>> import math
            >>> point = LatLong.from_rad(math.pi / 4, math.pi / 3)  # 45°N, 60°E
            >>> round(point.latitude, 6), round(point.longitude, 6)
            (45.0, 60.0)
        """
        return cls(to_degrees(lat), to_degrees(lon))

    # -------------------------------- Distance and course --------------------------------
    def distance_in_nm(self, other: LatLong) -> float:
        """Great-circle distance to ``other`` in nautical miles."""
        return great_circle.distance_in_nm(self.latitude, self.longitude, other.latitude, other.longitude)

    def distance_to(self, other: LatLong) -> NauticalMile:
        """Great-circle distance to another point.

        Example:
            >>> d = LatLong(0.0, 0.0).distance_to(LatLong(1.0, 1.0))
            >>> round(d.to(NauticalMile), 1)
            84.9
        """
        return NauticalMile(self.distance_in_nm(other))

    def course_in_degrees(self, other: LatLong) -> float:
        """Initial course to ``other`` in degrees, in ``[0, 360)``."""
        return great_circle.course_in_degrees(self.latitude, self.longitude, other.latitude, other.longitude)

    def course_to(self, other: LatLong) -> Degree:
        """Initial great-circle course toward another point."""
        return Degree(self.course_in_degrees(other))

    def is_within(self, distance: Length, other: LatLong) -> bool:
        """Return True if the other point is no further away than ``distance``."""
        return self.distance_to(other) <= distance

    # -------------------------------- Projection --------------------------------
    def project_out(self, bearing_degrees: float, distance_nm: float) -> LatLong:
        """Point reached by travelling ``distance_nm`` along ``bearing_degrees``.

        Raises:
            InvalidInputError: If the bearing or distance is NaN.
            InvalidCoordinateError: If the projection lands exactly on a pole.
        """
        latitude, longitude = great_circle.project_out(self.latitude, self.longitude, bearing_degrees, distance_nm)
        return LatLong(latitude, longitude)

    def forward(self, course: Angle, distance: Length) -> LatLong:
        """Unit-tagged version of ``project_out``.

        Example:
            >>> from spherical.unit import EAST
            >>> point = LatLong(0.0, 0.0).forward(EAST, NauticalMile(60))
            >>> round(point.longitude, 3)
            1.0
        """
        return self.project_out(course.in_degrees(), distance.in_nautical_miles())

    # -------------------------------- Track offsets --------------------------------
    def cross_track_distance_nm(self, start: LatLong, end: LatLong) -> float:
        """Signed distance from this point to the great circle start→end (negative = left)."""
        return great_circle.cross_track_distance_nm(
            start.latitude, start.longitude, end.latitude, end.longitude, self.latitude, self.longitude
        )

    def cross_track_distance_to(self, start: LatLong, end: LatLong) -> NauticalMile:
        """Unit-tagged ``cross_track_distance_nm``."""
        return NauticalMile(self.cross_track_distance_nm(start, end))

    def along_track_distance_nm(self, start: LatLong, end: LatLong, cross_track_nm: float | None = None) -> float:
        """Signed distance from start to the foot of the perpendicular from this point.

        Raises:
            InvalidGeometryError: If ``cross_track_nm`` does not belong to this
                point and the start→end segment.
        """
        return great_circle.along_track_distance_nm(
            start.latitude,
            start.longitude,
            end.latitude,
            end.longitude,
            self.latitude,
            self.longitude,
            cross_track_nm,
        )

    def along_track_distance_to(self, start: LatLong, end: LatLong, cross_track: Length | None = None) -> NauticalMile:
        """Unit-tagged ``along_track_distance_nm``; ``cross_track`` may be any length unit.

        Raises:
            InvalidGeometryError: If ``cross_track`` does not fit the three points.
        """
        cross_track_nm = cross_track.in_nautical_miles() if cross_track is not None else None
        return NauticalMile(self.along_track_distance_nm(start, end, cross_track_nm))
