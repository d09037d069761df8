"""Exception types raised by the spherical navigation library.

Every error derives from both ``SphericalError`` and ``ValueError``. Callers can
catch the whole family at once or treat these as ordinary invalid-value errors.
Unit-family mismatches are not part of this hierarchy and keep raising
``TypeError`` from the unit system.
"""

from __future__ import annotations


class SphericalError(ValueError):
    """Base class for all value errors raised by this library."""


class InvalidInputError(SphericalError):
    """Raised when a projection receives a NaN or infinite bearing or distance."""


class InvalidGeometryError(SphericalError):
    """Raised when an along-track query is geometrically inconsistent.

    The supplied cross-track distance does not match the start, end and position
    triple, so the acos ratio fell outside the tolerated domain. All inputs are
    kept on the exception for diagnosis.

    Attributes:
        ratio (float): The offending cos(position distance) / cos(cross-track) ratio.
        start (tuple[float, float]): Segment start as (latitude, longitude) degrees.
        end (tuple[float, float]): Segment end as (latitude, longitude) degrees.
        position (tuple[float, float]): Query point as (latitude, longitude) degrees.
        cross_track_nm (float): The caller-supplied cross-track distance.
    """

    def __init__(
        self,
        ratio: float,
        start: tuple[float, float],
        end: tuple[float, float],
        position: tuple[float, float],
        cross_track_nm: float,
    ):
        self.ratio = ratio
        self.start = start
        self.end = end
        self.position = position
        self.cross_track_nm = cross_track_nm
        msg = (
            f"Cannot compute acos({ratio:f}). Inputs were: "
            f"Start({start[0]:f}, {start[1]:f}), End({end[0]:f}, {end[1]:f}), "
            f"Position({position[0]:f}, {position[1]:f}), CTD({cross_track_nm:f})"
        )
        super().__init__(msg)


class InvalidCoordinateError(SphericalError):
    """Raised when a latitude/longitude pair falls outside the accepted ranges.

    Attributes:
        latitude (float): Latitude that was supplied, in degrees.
        longitude (float): Longitude that was supplied, in degrees.
        problems (list[str]): One message per violated range.
    """

    def __init__(self, latitude: float, longitude: float, problems: list[str]):
        self.latitude = latitude
        self.longitude = longitude
        self.problems = problems
        super().__init__("; ".join(problems))
