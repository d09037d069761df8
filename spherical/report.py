"""Route legs, track offsets and rich tables built on the great-circle core.

A route is an ordered sequence of LatLong waypoints. This module breaks it into
legs (distance, initial course, cumulative distance), locates a position
relative to the route with cross-track/along-track offsets, and renders legs as
a rich Table for terminal output.

Example:
    >>> from rich.console import Console
    >>> from spherical.geo import LatLong
    >>> legs = summarize_route([LatLong(0.0, 0.0), LatLong(0.0, 10.0), LatLong(10.0, 10.0)])
    >>> len(legs)
    2
    >>> Console().print(route_table(legs))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.table import Table

from spherical.geo import LatLong
from spherical.unit import Degree, NauticalMile


@dataclass(frozen=True)
class RouteLeg:
    """One great-circle leg of a route.

    Attributes:
        index (int): Zero-based leg number.
        start (LatLong): Leg start waypoint.
        end (LatLong): Leg end waypoint.
        distance_nm (float): Great-circle length of the leg.
        course_deg (float): Initial course from start to end, in [0, 360).
        cumulative_nm (float): Route distance flown at the end of this leg.
    """

    index: int
    start: LatLong
    end: LatLong
    distance_nm: float
    course_deg: float
    cumulative_nm: float

    @property
    def distance(self) -> NauticalMile:
        """Leg length as a unit value."""
        return NauticalMile(self.distance_nm)

    @property
    def course(self) -> Degree:
        """Initial leg course as a unit value."""
        return Degree(self.course_deg)


@dataclass(frozen=True)
class TrackOffset:
    """Where a position sits relative to one route leg.

    Attributes:
        leg (RouteLeg): The leg the offsets were measured against.
        cross_track_nm (float): Signed distance off the leg's great circle (negative = left).
        along_track_nm (float): Signed distance from the leg start to the foot point.
    """

    leg: RouteLeg
    cross_track_nm: float
    along_track_nm: float

    @property
    def abeam(self) -> bool:
        """True when the foot point falls between the leg's start and end."""
        return 0.0 <= self.along_track_nm <= self.leg.distance_nm


def summarize_route(waypoints: Sequence[LatLong]) -> list[RouteLeg]:
    """Break an ordered list of waypoints into great-circle legs.

    Raises:
        ValueError: If fewer than two waypoints are given.
    """
    if len(waypoints) < 2:
        msg = f"A route needs at least two waypoints, got {len(waypoints)}"
        raise ValueError(msg)

    legs = []
    cumulative = 0.0
    for index, (start, end) in enumerate(zip(waypoints, waypoints[1:])):
        distance = start.distance_in_nm(end)
        cumulative += distance
        legs.append(
            RouteLeg(
                index=index,
                start=start,
                end=end,
                distance_nm=distance,
                course_deg=start.course_in_degrees(end),
                cumulative_nm=cumulative,
            )
        )
    return legs


def total_distance(legs: Sequence[RouteLeg]) -> NauticalMile:
    """Sum of all leg lengths.

    Args:
        legs: Legs from ``summarize_route``.

    Returns:
        NauticalMile: Total route distance; zero for no legs.
    """
    return sum((leg.distance for leg in legs), NauticalMile(0))


def offset_from_route(legs: Sequence[RouteLeg], position: LatLong) -> TrackOffset:
    """Locate a position against the closest leg of a route.

    Legs whose foot point falls inside the leg are preferred; among them (or
    among all legs when none qualifies) the one with the smallest absolute
    cross-track distance wins. Zero-length legs are skipped.

    Raises:
        ValueError: If there is no leg with a non-zero length.
    """
    offsets = []
    for leg in legs:
        if leg.distance_nm == 0.0:
            continue
        cross_track = position.cross_track_distance_nm(leg.start, leg.end)
        along_track = position.along_track_distance_nm(leg.start, leg.end, cross_track)
        offsets.append(TrackOffset(leg=leg, cross_track_nm=cross_track, along_track_nm=along_track))

    if not offsets:
        msg = "Route has no leg with a non-zero length"
        raise ValueError(msg)

    candidates = [offset for offset in offsets if offset.abeam] or offsets
    return min(candidates, key=lambda offset: abs(offset.cross_track_nm))


def route_table(legs: Sequence[RouteLeg], title: str = "Route") -> Table:
    """Render route legs as a rich Table."""
    table = Table(title=title)
    table.add_column("Leg", justify="right", style="cyan")
    table.add_column("From", style="magenta")
    table.add_column("To", style="magenta")
    table.add_column("Course (°)", justify="right")
    table.add_column("Distance (NM)", justify="right", style="green")
    table.add_column("Cumulative (NM)", justify="right", style="green")

    for leg in legs:
        table.add_row(
            str(leg.index + 1),
            f"{leg.start.latitude:.4f}, {leg.start.longitude:.4f}",
            f"{leg.end.latitude:.4f}, {leg.end.longitude:.4f}",
            f"{leg.course_deg:06.2f}",
            f"{leg.distance_nm:.1f}",
            f"{leg.cumulative_nm:.1f}",
        )
    return table
