"""
Tests for the LatLong coordinate pair.
"""

import dataclasses
import math
import unittest

from spherical.errors import InvalidCoordinateError, InvalidGeometryError, InvalidInputError
from spherical.geo import LatLong
from spherical.great_circle import course_in_degrees, distance_in_nm
from spherical.unit import EAST, NORTH, Degree, Foot, Kilometer, NauticalMile


class TestLatLongConstruction(unittest.TestCase):
    """Test creating and validating coordinates."""

    def test_new_lat_long(self):
        """Test accessors return the given degrees."""
        point = LatLong(1.0, -1.0)
        self.assertEqual(point.latitude, 1.0)
        self.assertEqual(point.longitude, -1.0)

    def test_from_deg(self):
        """Test the degree constructor."""
        self.assertEqual(LatLong.from_deg(37, 127), LatLong(37.0, 127.0))

    def test_from_rad(self):
        """Test the radian constructor."""
        point = LatLong.from_rad(math.pi / 4, math.pi / 3)
        self.assertAlmostEqual(point.latitude, 45.0)
        self.assertAlmostEqual(point.longitude, 60.0)

    def test_latitude_out_of_range(self):
        """Test poles and beyond are rejected."""
        for latitude in (90.0, -90.0, 91.0, -135.0):
            with self.assertRaises(InvalidCoordinateError):
                LatLong(latitude, 0.0)

    def test_longitude_out_of_range(self):
        """Test the antimeridian and beyond are rejected."""
        for longitude in (180.0, -180.0, 181.0):
            with self.assertRaises(InvalidCoordinateError):
                LatLong(0.0, longitude)

    def test_reports_every_problem(self):
        """Test both range violations are reported together."""
        with self.assertRaises(InvalidCoordinateError) as ctx:
            LatLong(95.0, 200.0)
        self.assertEqual(len(ctx.exception.problems), 2)
        self.assertIn("Latitude is out of range", str(ctx.exception))
        self.assertIn("Longitude is out of range", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_nan_rejected(self):
        """Test NaN coordinates are rejected."""
        with self.assertRaises(InvalidCoordinateError):
            LatLong(math.nan, 0.0)

    def test_immutable(self):
        """Test coordinates cannot be reassigned."""
        point = LatLong(0.0, 0.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            point.latitude = 1.0


class TestLatLongDistanceAndCourse(unittest.TestCase):
    """Test distance and course queries."""

    def test_distance_to(self):
        """Test distance between two points."""
        one, two = LatLong(0.0, 0.0), LatLong(1.0, 1.0)
        actual = one.distance_to(two)
        self.assertIsInstance(actual, NauticalMile)
        self.assertAlmostEqual(actual.to(NauticalMile), Kilometer(157.2).to(NauticalMile), delta=0.1)
        self.assertEqual(one.distance_in_nm(two), distance_in_nm(0.0, 0.0, 1.0, 1.0))

    def test_distance_triangle(self):
        """Test c^2 <= a^2 + b^2 on a sphere."""
        a, b, c = LatLong(0.0, 0.0), LatLong(0.0, 1.0), LatLong(1.0, 0.0)
        l1, l2, hypotenuse = a.distance_in_nm(b), a.distance_in_nm(c), b.distance_in_nm(c)
        self.assertLessEqual(hypotenuse ** 2, l1 ** 2 + l2 ** 2)

    def test_course(self):
        """Test course between two points."""
        one, two = LatLong(0.0, 0.0), LatLong(1.0, 1.0)
        self.assertAlmostEqual(one.course_in_degrees(two), 45.0, delta=0.1)
        self.assertIsInstance(one.course_to(two), Degree)
        self.assertAlmostEqual(one.course_to(two).in_degrees(), course_in_degrees(0.0, 0.0, 1.0, 1.0))

    def test_is_within_same_point(self):
        """Test proximity to the same point."""
        one, two = LatLong(0.0, 0.0), LatLong(0.0, 0.0)
        self.assertTrue(one.is_within(Foot(0), two))
        self.assertTrue(one.is_within(Foot(0.1), two))
        self.assertFalse(one.is_within(Foot(-1), two))

    def test_is_within_different_points(self):
        """Test proximity to a point about 157 km away."""
        one, two = LatLong(0.0, 0.0), LatLong(1.0, 1.0)
        self.assertFalse(one.is_within(Kilometer(0), two))
        self.assertFalse(one.is_within(Kilometer(50), two))
        self.assertTrue(one.is_within(Kilometer(160), two))


class TestLatLongProjection(unittest.TestCase):
    """Test projecting coordinates."""

    def test_project_out_round_trip(self):
        """Test projecting along course/distance reaches the target."""
        start, target = LatLong(0.0, 0.0), LatLong(10.0, 10.0)
        actual = start.project_out(start.course_in_degrees(target), start.distance_in_nm(target))
        self.assertAlmostEqual(actual.latitude, 10.0, delta=0.01)
        self.assertAlmostEqual(actual.longitude, 10.0, delta=0.01)

    def test_forward_with_units(self):
        """Test unit-tagged projection matches the float version."""
        start = LatLong(20.0, 30.0)
        self.assertEqual(start.forward(EAST, NauticalMile(60)), start.project_out(EAST.in_degrees(), 60.0))
        north = start.forward(NORTH, Kilometer(111.12))
        self.assertAlmostEqual(north.latitude, 20.0 + 60.0 / 3438.14021579022 * 180 / math.pi, places=6)
        self.assertAlmostEqual(north.longitude, 30.0, places=9)

    def test_project_out_nan(self):
        """Test NaN projection inputs are rejected."""
        with self.assertRaises(InvalidInputError):
            LatLong(0.0, 0.0).project_out(math.nan, 1.0)


class TestLatLongTrackOffsets(unittest.TestCase):
    """Test cross-track and along-track queries."""

    def setUp(self):
        """Set up test fixtures."""
        self.start = LatLong(0.0, 0.0)
        self.end = LatLong(0.0, 10.0)

    def test_cross_track(self):
        """Test cross-track distance on either side of the track."""
        left, right = LatLong(1.0, 0.5), LatLong(-1.0, 0.5)
        self.assertAlmostEqual(left.cross_track_distance_nm(self.start, self.end), -60.00686673640662, delta=1e-4)
        self.assertAlmostEqual(right.cross_track_distance_nm(self.start, self.end), 60.00686673640662, delta=1e-4)
        self.assertIsInstance(left.cross_track_distance_to(self.start, self.end), NauticalMile)

    def test_along_track(self):
        """Test along-track distance with and without a supplied cross-track."""
        position = LatLong(1.0, 0.5)
        cross = position.cross_track_distance_to(self.start, self.end)
        with_cross = position.along_track_distance_to(self.start, self.end, cross)
        without_cross = position.along_track_distance_to(self.start, self.end)
        self.assertAlmostEqual(with_cross.to(NauticalMile), 30.00343415285915, delta=1e-4)
        self.assertAlmostEqual(with_cross.to(NauticalMile), without_cross.to(NauticalMile), places=9)

    def test_along_track_behind(self):
        """Test a point behind the start is negative."""
        position = LatLong(1.0, -0.5)
        self.assertAlmostEqual(position.along_track_distance_nm(self.start, self.end), -30.00343415285915, delta=1e-4)

    def test_along_track_inconsistent(self):
        """Test a cross-track distance for another point is rejected."""
        position = LatLong(1.0, 0.5)
        with self.assertRaises(InvalidGeometryError):
            position.along_track_distance_to(self.start, self.end, Kilometer(10000))


if __name__ == '__main__':
    unittest.main()
