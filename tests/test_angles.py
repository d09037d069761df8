"""
Tests for angle and arc-length helpers.
"""

import math
import unittest

from spherical.angles import (
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


class TestConversions(unittest.TestCase):
    """Test degree/radian and nautical mile/arc conversions."""

    def test_to_radians(self):
        """Test degrees convert to radians."""
        self.assertAlmostEqual(to_radians(180.0), math.pi, places=12)
        self.assertAlmostEqual(to_radians(-90.0), -math.pi / 2, places=12)
        self.assertEqual(to_radians(0.0), 0.0)

    def test_to_degrees(self):
        """Test radians convert to degrees."""
        self.assertAlmostEqual(to_degrees(math.pi), 180.0, places=12)
        self.assertAlmostEqual(to_degrees(2.0), 2 * (180 / math.pi), places=12)

    def test_round_trip(self):
        """Test degrees survive a radian round trip."""
        for degrees in (-179.5, -45.0, 0.25, 33.3, 359.9):
            self.assertAlmostEqual(to_degrees(to_radians(degrees)), degrees, places=10)

    def test_sixty_nm_is_one_degree(self):
        """Test one nautical mile is one arc minute."""
        self.assertAlmostEqual(distance_in_radians(60.0), to_radians(1.0), places=15)
        self.assertAlmostEqual(radians_to_nm(math.pi), 10800.0, places=9)
        self.assertAlmostEqual(radians_to_nm(distance_in_radians(123.4)), 123.4, places=9)


class TestMod(unittest.TestCase):
    """Test the non-negative modulo."""

    def test_positive_values(self):
        """Test values already in range are unchanged."""
        self.assertEqual(mod(10.0, 360.0), 10.0)
        self.assertEqual(mod(200.0, 360.0), 200.0)
        self.assertEqual(mod(0.0, 360.0), 0.0)

    def test_wraps_large_values(self):
        """Test values beyond one period wrap around."""
        self.assertEqual(mod(370.0, 360.0), 10.0)
        self.assertEqual(mod(720.0, 360.0), 0.0)

    def test_negative_values(self):
        """Test negative values come back non-negative."""
        self.assertEqual(mod(-90.0, 360.0), 270.0)
        self.assertEqual(mod(-370.0, 360.0), 350.0)

    def test_result_in_range(self):
        """Test result is always in [0, y)."""
        for x in (-1000.5, -360.0, -0.5, -1e-17, 0.0, 179.9, 180.0, 359.99, 1e6):
            result = mod(x, 360.0)
            self.assertGreaterEqual(result, 0.0)
            self.assertLess(result, 360.0)

    def test_tiny_negative_folds_to_zero(self):
        """Test a negative value too small to survive adding y comes back as 0."""
        self.assertEqual(mod(-1e-17, 360.0), 0.0)
        self.assertEqual(mod(-1e-18, 2 * math.pi), 0.0)


class TestWrapDelta(unittest.TestCase):
    """Test wrapping of angular differences."""

    def test_positive_inputs(self):
        """Test positive deltas."""
        self.assertAlmostEqual(wrap_delta(5.0), 5.0)
        self.assertAlmostEqual(wrap_delta(175.0), 175.0)
        self.assertAlmostEqual(wrap_delta(185.0), -175.0)
        self.assertAlmostEqual(wrap_delta(355.0), -5.0)

    def test_negative_inputs(self):
        """Test negative deltas."""
        self.assertAlmostEqual(wrap_delta(-5.0), -5.0)
        self.assertAlmostEqual(wrap_delta(-175.0), -175.0)
        self.assertAlmostEqual(wrap_delta(-185.0), 175.0)

    def test_half_circle_boundaries(self):
        """Test exactly ±180 is left alone."""
        self.assertEqual(wrap_delta(180.0), 180.0)
        self.assertEqual(wrap_delta(-180.0), -180.0)


class TestClampedInverseTrig(unittest.TestCase):
    """Test inverse trig never returns NaN for rounding overshoot."""

    def test_asin_overshoot(self):
        """Test asin of values just past ±1."""
        self.assertEqual(asin_real(1.0000000000000002), math.pi / 2)
        self.assertEqual(asin_real(-1.0000000000000002), -math.pi / 2)

    def test_acos_overshoot(self):
        """Test acos of values just past ±1."""
        self.assertEqual(acos_real(1.0000000000000002), 0.0)
        self.assertEqual(acos_real(-1.0000000000000002), math.pi)

    def test_in_range_unchanged(self):
        """Test in-range arguments match the math module."""
        self.assertEqual(asin_real(0.5), math.asin(0.5))
        self.assertEqual(acos_real(-0.25), math.acos(-0.25))


class TestHaversine(unittest.TestCase):
    """Test haversine building blocks."""

    def test_haversine(self):
        """Test haversine at known angles."""
        self.assertEqual(haversine(0.0), 0.0)
        self.assertAlmostEqual(haversine(math.pi), 1.0)
        self.assertAlmostEqual(haversine(math.pi / 2), 0.5)

    def test_ahaversine_inverts_haversine(self):
        """Test ahaversine undoes haversine on [0, pi]."""
        for angle in (0.0, 0.001, 0.5, 1.0, 2.5, math.pi):
            self.assertAlmostEqual(ahaversine(haversine(angle)), angle, places=7)

    def test_ahaversine_overshoot(self):
        """Test ahaversine tolerates rounding past 1."""
        self.assertEqual(ahaversine(1.0000000000000002), math.pi)


if __name__ == '__main__':
    unittest.main()
