"""
Route report example: legs of a transatlantic route and an aircraft's offset from it.
"""

from rich.console import Console

from spherical.geo import LatLong
from spherical.report import offset_from_route, route_table, summarize_route, total_distance
from spherical.unit import Kilometer, NauticalMile


def main():
    console = Console()

    waypoints = [
        LatLong(40.6413, -73.7781),   # JFK
        LatLong(46.4800, -53.0000),   # Newfoundland coast
        LatLong(53.0000, -30.0000),   # Mid-ocean
        LatLong(51.4700, -0.4543),    # LHR
    ]
    legs = summarize_route(waypoints)

    console.rule("Spherical Navigation - Route Report")
    console.print(route_table(legs, title="JFK → LHR"))

    total = total_distance(legs)
    console.print(
        f"Total: {total.to(NauticalMile):.1f} NM ({total.to(Kilometer):.1f} km), "
        f"direct: {waypoints[0].distance_in_nm(waypoints[-1]):.1f} NM"
    )

    aircraft = LatLong(50.2, -40.0)
    offset = offset_from_route(legs, aircraft)
    side = "left" if offset.cross_track_nm < 0 else "right"
    console.print(
        f"\nAircraft at ({aircraft.latitude}, {aircraft.longitude}) is on leg {offset.leg.index + 1}: "
        f"{abs(offset.cross_track_nm):.1f} NM {side} of track, "
        f"{offset.along_track_nm:.1f} NM along the leg"
    )


if __name__ == "__main__":
    main()
