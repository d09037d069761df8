"""Great-circle navigation on a spherical Earth.

This module holds the geodesic core of the library: distance, initial course,
projection along a course, and cross-/along-track offsets from a route segment.
The Earth is modeled as a sphere of radius ``EARTH_RADIUS_NM``. The error this
introduces compared to an ellipsoid is small enough for many navigation,
flight-planning and simulation uses, and the math is far cheaper.

Conventions:
    • Latitudes, longitudes and courses are plain floats in degrees.
    • Distances are plain floats in nautical miles.
    • Courses are measured clockwise from true north and returned in [0, 360).
    • Cross-track distance is negative left of the path and positive right of it.
    • Along-track distance is negative when the foot point lies behind the start.

All functions are pure: no state is kept between calls and nothing is cached.

Example:
    >>> round(distance_in_nm(0.0, 0.0, 10.0, 10.0), 1)
    846.5
    >>> round(course_in_degrees(0.0, 0.0, 0.0, 10.0), 6)
    90.0
    >>> lat, lon = project_out(0.0, 0.0, 90.0, 60.0)
    >>> round(lat, 6), round(lon, 3)
    (0.0, 1.0)
"""

from __future__ import annotations

from enum import Enum, auto
import logging
import math

from .angles import (
    acos_real,
    ahaversine,
    asin_real,
    distance_in_radians,
    haversine,
    mod,
    radians_to_nm,
    to_degrees,
    to_radians,
    wrap_delta,
)
from .config import EARTH_RADIUS_NM, POLE_PROXIMITY_NM, TOLERANCE, TWO_PI
from .errors import InvalidGeometryError, InvalidInputError

logger = logging.getLogger(__name__)

_NEAR_FIELD_LIMIT = math.pi / 4.0


class LongitudeBranch(Enum):
    """How ``project_out`` derives the projected longitude.

    POLE: The projected point sits on (or within ``POLE_PROXIMITY_NM`` of) a
        pole where longitude is undefined, so the starting longitude is kept.
    NEAR_FIELD: The longitude change is under 45 degrees and is taken from the
        spherical sine rule, which is more accurate for small offsets.
    FAR_FIELD: The acos-derived magnitude is used, signed by whether the course
        points east (< 180 degrees) or west.
    """

    POLE = auto()
    NEAR_FIELD = auto()
    FAR_FIELD = auto()


def longitude_branch(lat_proj: float, d_lon: float) -> LongitudeBranch:
    """Select the longitude branch for a projected latitude (radians) and |dLon| (radians)."""
    if EARTH_RADIUS_NM * abs(math.cos(lat_proj)) < POLE_PROXIMITY_NM:
        return LongitudeBranch.POLE
    if abs(d_lon) < _NEAR_FIELD_LIMIT:
        return LongitudeBranch.NEAR_FIELD
    return LongitudeBranch.FAR_FIELD


def distance_in_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates, in nautical miles.

    Uses the haversine formula, which stays accurate for small separations where
    the spherical law of cosines loses precision.
    """
    lat_rad1, lon_rad1 = to_radians(lat1), to_radians(lon1)
    lat_rad2, lon_rad2 = to_radians(lat2), to_radians(lon2)

    lat_haver = haversine(lat_rad2 - lat_rad1)
    lon_haver = math.cos(lat_rad1) * math.cos(lat_rad2) * haversine(lon_rad2 - lon_rad1)
    return EARTH_RADIUS_NM * ahaversine(lat_haver + lon_haver)


def course_in_degrees(start_lat: float, start_lon: float, end_lat: float, end_lon: float) -> float:
    """Initial great-circle course from the start to the end coordinate.

    ``atan2`` is fed ``sin(lon1 - lon2)``, which yields a counter-clockwise angle;
    taking its complement in the full circle turns it into the clockwise-from-north
    navigational course. Swapping either step flips east and west.

    Returns:
        float: Course in degrees in ``[0, 360)``. Identical points give 0.
    """
    lat1, lon1 = to_radians(start_lat), to_radians(start_lon)
    lat2, lon2 = to_radians(end_lat), to_radians(end_lon)

    y = math.sin(lon1 - lon2) * math.cos(lat2)
    x = (math.cos(lat1) * math.sin(lat2)) - (math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1))

    course = to_degrees(TWO_PI - mod(math.atan2(y, x), TWO_PI))
    # The complement maps a raw bearing of 0 onto 360.
    if course >= 360.0:
        course -= 360.0
    return course


def angle_difference(heading: float, reference: float) -> float:
    """Signed difference ``heading - reference`` in degrees, wrapped to [-180, 180]."""
    return wrap_delta(heading - reference)


def project_out(lat: float, lon: float, bearing_degrees: float, distance_nm: float) -> tuple[float, float]:
    """Travel along a great circle from a coordinate and return where you end up.

    The angular distance is always ``|distance_nm| / EARTH_RADIUS_NM``. A negative
    bearing is remapped to ``(bearing + 180) mod 360`` before use.

    Args:
        lat (float): Starting latitude in degrees.
        lon (float): Starting longitude in degrees.
        bearing_degrees (float): Departure course in degrees.
        distance_nm (float): Distance to travel in nautical miles.

    Returns:
        tuple[float, float]: Projected (latitude, longitude) in degrees, with the
        longitude in ``[-180, 180)``.

    Raises:
        InvalidInputError: If the bearing or the distance is NaN or infinite.

    Example:
        >>> lat, lon = project_out(0.0, 0.0, 0.0, 600.0)
        >>> round(lat, 2), lon
        (10.0, 0.0)
    """
    if not math.isfinite(bearing_degrees):
        msg = f"Heading must be finite, got {bearing_degrees}"
        raise InvalidInputError(msg)
    if not math.isfinite(distance_nm):
        msg = f"Distance must be finite, got {distance_nm}"
        raise InvalidInputError(msg)

    lat_rad, lon_rad = to_radians(lat), to_radians(lon)

    course, dist = bearing_degrees, abs(distance_nm) / EARTH_RADIUS_NM
    if bearing_degrees < 0.0:
        course = mod(bearing_degrees + 180.0, 360.0)
    elif bearing_degrees >= 360.0:
        course = mod(bearing_degrees, 360.0)
    course = to_radians(course)

    lat_proj = asin_real(
        (math.cos(dist) * math.sin(lat_rad)) + (math.sin(dist) * math.cos(lat_rad) * math.cos(course))
    )

    lon_num = math.cos(dist) - (math.sin(lat_proj) * math.sin(lat_rad))
    lon_den = math.cos(lat_proj) * math.cos(lat_rad)
    d_lon = acos_real(lon_num / lon_den) if lon_den != 0.0 else 0.0

    branch = longitude_branch(lat_proj, d_lon)
    if branch is LongitudeBranch.POLE:
        logger.debug("Projection from (%f, %f) ends at a pole, keeping longitude", lat, lon)
        lon_proj = lon_rad
    elif branch is LongitudeBranch.NEAR_FIELD:
        lon_proj = lon_rad + asin_real(math.sin(dist) * math.sin(course) / math.cos(lat_proj))
    else:
        sign = 1.0 if course < math.pi else -1.0
        lon_proj = lon_rad + sign * d_lon

    return to_degrees(lat_proj), mod(to_degrees(lon_proj) + 180.0, 360.0) - 180.0


def cross_track_distance_nm(
    start_lat: float,
    start_lon: float,
    end_lat: float,
    end_lon: float,
    pos_lat: float,
    pos_lon: float,
) -> float:
    """Signed distance from a position to the great circle through start and end.

    The value is negative when the position lies left of the start→end direction
    and positive when it lies right of it.

    Note:
        The foot of the perpendicular is on the full great circle. It is not
        guaranteed to fall between the start and end points.
    """
    distance = distance_in_radians(distance_in_nm(start_lat, start_lon, pos_lat, pos_lon))
    angle = to_radians(course_in_degrees(start_lat, start_lon, pos_lat, pos_lon)) - to_radians(
        course_in_degrees(start_lat, start_lon, end_lat, end_lon)
    )
    return radians_to_nm(asin_real(math.sin(distance) * math.sin(angle)))


def along_track_distance_nm(
    start_lat: float,
    start_lon: float,
    end_lat: float,
    end_lon: float,
    pos_lat: float,
    pos_lon: float,
    cross_track_nm: float | None = None,
) -> float:
    """Signed distance from the start to the foot of the perpendicular from a position.

    The cross-track distance is normally supplied by the caller, who has usually
    computed it already; it is not recomputed. When omitted it is derived with
    ``cross_track_distance_nm``.

    The result is negative when the foot point lies behind the start, i.e. the
    position is more than 90 degrees off the start→end course.

    Args:
        start_lat (float): Segment start latitude in degrees.
        start_lon (float): Segment start longitude in degrees.
        end_lat (float): Segment end latitude in degrees.
        end_lon (float): Segment end longitude in degrees.
        pos_lat (float): Query latitude in degrees.
        pos_lon (float): Query longitude in degrees.
        cross_track_nm (float | None): Cross-track distance of the position in nm.

    Returns:
        float: Signed along-track distance in nautical miles.

    Raises:
        InvalidGeometryError: If the cross-track distance is inconsistent with the
            three points, i.e. ``cos(position distance) / cos(cross-track)`` is more
            than ``TOLERANCE`` outside ``[-1, 1]``, or the cross-track distance is
            NaN or infinite.
    """
    if cross_track_nm is None:
        cross_track_nm = cross_track_distance_nm(start_lat, start_lon, end_lat, end_lon, pos_lat, pos_lon)
    if not math.isfinite(cross_track_nm):
        raise InvalidGeometryError(
            math.nan,
            (start_lat, start_lon),
            (end_lat, end_lon),
            (pos_lat, pos_lon),
            cross_track_nm,
        )

    relative_angle = angle_difference(
        course_in_degrees(start_lat, start_lon, end_lat, end_lon),
        course_in_degrees(start_lat, start_lon, pos_lat, pos_lon),
    )
    sign = -1.0 if abs(relative_angle) > 90.0 else 1.0

    pos_distance = distance_in_nm(start_lat, start_lon, pos_lat, pos_lon)
    cos_ctd = math.cos(distance_in_radians(cross_track_nm))
    cos_ptd = math.cos(distance_in_radians(pos_distance))

    # Rounding can push a valid ratio just past 1 (e.g. 1.0000000000000002).
    ratio = cos_ptd / cos_ctd if cos_ctd != 0.0 else math.copysign(math.inf, cos_ptd)
    if not (-1.0 - TOLERANCE) <= ratio <= (1.0 + TOLERANCE):
        raise InvalidGeometryError(
            ratio,
            (start_lat, start_lon),
            (end_lat, end_lon),
            (pos_lat, pos_lon),
            cross_track_nm,
        )

    if abs(ratio) > 1.0:
        logger.debug("Clamping along-track ratio %r into [-1, 1]", ratio)
    return sign * radians_to_nm(acos_real(ratio))
