"""
Tests for haversine distance, bearing and compass sectors.
"""

import math
import unittest

from geocoord.errors import RangeError
from geocoord.geo import CompassDirection, bearing, compass_direction, haversine_distance
from geocoord.unit import Meter

DRESDEN = (51.0504, 13.7373)
CAPE_TOWN = (-33.940525, 18.414006)
NEW_YORK = (40.690069, -74.045508)
CORDOBA = (-31.425299, -64.201743)


class TestHaversineDistance(unittest.TestCase):
    """Test spherical distance."""

    def test_returns_meters(self):
        """Test that the distance is a typed Meter value."""
        self.assertIsInstance(haversine_distance(*DRESDEN, *CAPE_TOWN), Meter)

    def test_same_point_is_zero(self):
        """Test identity distance."""
        self.assertEqual(float(haversine_distance(*DRESDEN, *DRESDEN)), 0.0)

    def test_known_distances(self):
        """Test reference distances from Dresden."""
        self.assertEqual(round(float(haversine_distance(*DRESDEN, *CAPE_TOWN)), 1), 9461663.6)
        self.assertEqual(round(float(haversine_distance(*DRESDEN, *NEW_YORK)), 1), 6482638.0)
        self.assertEqual(round(float(haversine_distance(*DRESDEN, *CORDOBA)), 1), 11904668.4)

    def test_symmetry(self):
        """Test that distance does not depend on direction."""
        self.assertAlmostEqual(
            float(haversine_distance(*NEW_YORK, *CORDOBA)),
            float(haversine_distance(*CORDOBA, *NEW_YORK)),
        )

    def test_antipodal_half_circumference(self):
        """Test that antipodes are half a great circle apart."""
        distance = float(haversine_distance(0.0, 0.0, 0.0, 180.0))
        self.assertAlmostEqual(distance, math.pi * 6_371_000, places=3)


class TestBearing(unittest.TestCase):
    """Test bearing computation."""

    def test_identical_points(self):
        """Test the short-circuit for identical points."""
        self.assertEqual(bearing(*DRESDEN, *DRESDEN), 0.0)

    def test_known_bearings(self):
        """Test reference bearings from Dresden."""
        self.assertEqual(bearing(*DRESDEN, *CAPE_TOWN), 176.85)
        self.assertEqual(bearing(*DRESDEN, *NEW_YORK), -96.73)
        self.assertEqual(bearing(*DRESDEN, *CORDOBA), -136.62)

    def test_cardinal_axes(self):
        """Test the four axis-aligned headings."""
        self.assertEqual(bearing(0.0, 0.0, 1.0, 0.0), 0.0)
        self.assertEqual(bearing(0.0, 0.0, 0.0, 1.0), 90.0)
        self.assertEqual(bearing(0.0, 0.0, -1.0, 0.0), 180.0)
        self.assertEqual(bearing(0.0, 0.0, 0.0, -1.0), -90.0)

    def test_normalized_range(self):
        """Test that bearings stay within (-180, 180]."""
        for lat, lon in [(-1.0, -0.001), (-1.0, 0.001), (-5.0, -5.0), (3.0, -7.0)]:
            with self.subTest(lat=lat, lon=lon):
                value = bearing(0.0, 0.0, lat, lon)
                self.assertGreater(value, -180.0)
                self.assertLessEqual(value, 180.0)


class TestCompassDirection(unittest.TestCase):
    """Test bearing to compass sector mapping."""

    def test_sector_centres(self):
        """Test the centre of every sector."""
        expected = {
            0.0: CompassDirection.NORTH,
            45.0: CompassDirection.NORTH_EAST,
            90.0: CompassDirection.EAST,
            135.0: CompassDirection.SOUTH_EAST,
            180.0: CompassDirection.SOUTH,
            -180.0: CompassDirection.SOUTH,
            -135.0: CompassDirection.SOUTH_WEST,
            -90.0: CompassDirection.WEST,
            -45.0: CompassDirection.NORTH_WEST,
        }
        for degrees, direction in expected.items():
            with self.subTest(degrees=degrees):
                self.assertIs(compass_direction(degrees), direction)

    def test_sector_boundaries(self):
        """Test that lower bounds are inclusive."""
        self.assertIs(compass_direction(-22.5), CompassDirection.NORTH)
        self.assertIs(compass_direction(22.5), CompassDirection.NORTH_EAST)
        self.assertIs(compass_direction(67.5), CompassDirection.EAST)
        self.assertIs(compass_direction(112.5), CompassDirection.SOUTH_EAST)
        self.assertIs(compass_direction(157.5), CompassDirection.SOUTH)
        self.assertIs(compass_direction(-157.5), CompassDirection.SOUTH_WEST)
        self.assertIs(compass_direction(-157.51), CompassDirection.SOUTH)
        self.assertIs(compass_direction(-112.5), CompassDirection.WEST)
        self.assertIs(compass_direction(-67.5), CompassDirection.NORTH_WEST)

    def test_letter_codes(self):
        """Test that the enum values are the letter codes."""
        self.assertEqual(compass_direction(-136.62), "SW")
        self.assertEqual(compass_direction(-96.73).value, "W")

    def test_out_of_range(self):
        """Test that impossible bearings fail loudly."""
        for degrees in (180.01, -180.01, 360.0, math.nan):
            with self.subTest(degrees=degrees):
                with self.assertRaises(RangeError):
                    compass_direction(degrees)


if __name__ == '__main__':
    unittest.main()
