"""
Unit tests for the coordinate value types.

Tests EquatorialCoordinate and HorizontalCoordinate validation, accessors,
formatting and geometry.
"""

import unittest

from skyframe.api.coordinates import EquatorialCoordinate, HorizontalCoordinate
from skyframe.api.core.exceptions import InvalidCoordinateError


class TestEquatorialCoordinate(unittest.TestCase):
    """Test suite for EquatorialCoordinate"""

    def test_creation(self):
        """Test creating a valid coordinate"""
        coord = EquatorialCoordinate(101.2875, -16.7161)
        self.assertEqual(coord.right_ascension, 101.2875)
        self.assertEqual(coord.declination, -16.7161)

    def test_boundaries(self):
        """Test the extreme valid values"""
        EquatorialCoordinate(0.0, -90.0)
        EquatorialCoordinate(359.999999, 90.0)

    def test_right_ascension_360_rejected(self):
        """Test that RA 360 is rejected"""
        with self.assertRaises(InvalidCoordinateError) as context:
            EquatorialCoordinate(360.0, 0.0)
        self.assertEqual(str(context.exception), "Right ascension must be between 0 and 360 degrees")

    def test_negative_right_ascension_rejected(self):
        """Test that negative RA is rejected"""
        with self.assertRaises(InvalidCoordinateError):
            EquatorialCoordinate(-0.1, 0.0)

    def test_declination_out_of_range(self):
        """Test that declination beyond the poles is rejected"""
        with self.assertRaises(InvalidCoordinateError) as context:
            EquatorialCoordinate(0.0, 90.1)
        self.assertEqual(str(context.exception), "Declination must be between -90 and +90 degrees")

    def test_nan_rejected(self):
        """Test that NaN is rejected"""
        with self.assertRaises(InvalidCoordinateError):
            EquatorialCoordinate(float("nan"), 0.0)

    def test_invalid_coordinate_error_is_value_error(self):
        """Test that validation errors can be caught as ValueError"""
        with self.assertRaises(ValueError):
            EquatorialCoordinate(0.0, -91.0)

    def test_equality_and_hash(self):
        """Test value equality"""
        a = EquatorialCoordinate(10.0, 20.0)
        b = EquatorialCoordinate(10, 20)
        self.assertEqual(a, b)
        self.assertEqual(len({a, b}), 1)

    def test_immutable(self):
        """Test that fields cannot be reassigned"""
        coord = EquatorialCoordinate(10.0, 20.0)
        with self.assertRaises(AttributeError):
            coord.declination = 0.0  # type: ignore[misc]

    def test_from_hours(self):
        """Test creating from RA in hours"""
        coord = EquatorialCoordinate.from_hours(6.75, -16.7161)
        self.assertEqual(coord.right_ascension, 101.25)
        self.assertEqual(coord.right_ascension_hours, 6.75)

    def test_from_hours_24_rejected(self):
        """Test that 24h maps to RA 360, which is rejected"""
        with self.assertRaises(InvalidCoordinateError):
            EquatorialCoordinate.from_hours(24.0, 0.0)

    def test_right_ascension_parts(self):
        """Test hour/minute/second parts of RA"""
        coord = EquatorialCoordinate(152.75, 0.0)
        self.assertEqual(coord.right_ascension_hour_part, 10)
        self.assertEqual(coord.right_ascension_minute_part, 11)
        self.assertAlmostEqual(coord.right_ascension_second_part, 0.0, places=6)

    def test_right_ascension_parts_stay_below_24_hours(self):
        """Test that parts just below 360 degrees never carry into a 24th hour"""
        coord = EquatorialCoordinate(359.99999999999, 0.0)
        self.assertEqual(coord.right_ascension_hour_part, 23)
        self.assertEqual(coord.right_ascension_minute_part, 59)
        self.assertLess(coord.right_ascension_second_part, 60.0)
        self.assertEqual(coord.format_right_ascension(), "0h 00m 00.00s")

    def test_declination_parts_negative(self):
        """Test signed degree part and unsigned minute/second parts"""
        coord = EquatorialCoordinate(0.0, -16.7161)
        self.assertEqual(coord.declination_degree_part, -16)
        self.assertEqual(coord.declination_arcminute_part, 42)
        self.assertAlmostEqual(coord.declination_arcsecond_part, 57.96, places=6)

    def test_format(self):
        """Test sexagesimal formatting"""
        coord = EquatorialCoordinate(152.75, 42.5)
        self.assertEqual(coord.format_right_ascension(), "10h 11m 00.00s")
        self.assertEqual(coord.format_declination(), "+42° 30' 00.00\"")

    def test_str(self):
        """Test string representation"""
        self.assertEqual(str(EquatorialCoordinate(10.0, -5.5)), "RA 10.0000°, Dec -5.5000°")

    def test_separation_with_self(self):
        """Test that a coordinate is 0 degrees from itself"""
        sirius = EquatorialCoordinate(101.2875, -16.7161)
        self.assertAlmostEqual(sirius.angular_separation(sirius), 0.0, places=5)

    def test_separation_pole_to_equator(self):
        """Test that the pole is 90 degrees from any equatorial point"""
        pole = EquatorialCoordinate(0.0, 90.0)
        for ra in (0.0, 45.0, 180.0, 300.0):
            self.assertAlmostEqual(pole.angular_separation(EquatorialCoordinate(ra, 0.0)), 90.0, places=9)

    def test_separation_antipodes(self):
        """Test that opposite points are 180 degrees apart"""
        a = EquatorialCoordinate(0.0, 0.0)
        b = EquatorialCoordinate(180.0, 0.0)
        self.assertAlmostEqual(a.angular_separation(b), 180.0, places=9)

    def test_separation_symmetric(self):
        """Test that separation does not depend on order"""
        betelgeuse = EquatorialCoordinate(88.7929, 7.4071)
        rigel = EquatorialCoordinate(78.6345, -8.2016)
        self.assertEqual(betelgeuse.angular_separation(rigel), rigel.angular_separation(betelgeuse))
        self.assertAlmostEqual(betelgeuse.angular_separation(rigel), 18.6, delta=0.1)

    def test_separation_wraps_right_ascension(self):
        """Test separation across RA 0"""
        a = EquatorialCoordinate(359.0, 0.0)
        b = EquatorialCoordinate(1.0, 0.0)
        self.assertAlmostEqual(a.angular_separation(b), 2.0, places=9)

    def test_unit_vector_matches_separation(self):
        """Test that vector angles agree with angular separation"""
        a = EquatorialCoordinate(88.7929, 7.4071)
        b = EquatorialCoordinate(78.6345, -8.2016)
        self.assertAlmostEqual(a.to_unit_vector().angle_to(b.to_unit_vector()), a.angular_separation(b), places=9)

    def test_unit_vector_axes(self):
        """Test unit vector orientation"""
        pole = EquatorialCoordinate(0.0, 90.0).to_unit_vector()
        self.assertAlmostEqual(pole.z, 1.0)
        six_hours = EquatorialCoordinate(90.0, 0.0).to_unit_vector()
        self.assertAlmostEqual(six_hours.y, 1.0)
        self.assertAlmostEqual(six_hours.magnitude(), 1.0)


class TestHorizontalCoordinate(unittest.TestCase):
    """Test suite for HorizontalCoordinate"""

    def test_creation(self):
        """Test creating a valid coordinate"""
        coord = HorizontalCoordinate(180.0, 45.0)
        self.assertEqual(coord.azimuth, 180.0)
        self.assertEqual(coord.altitude, 45.0)

    def test_azimuth_360_rejected(self):
        """Test that azimuth 360 is rejected"""
        with self.assertRaises(InvalidCoordinateError) as context:
            HorizontalCoordinate(360.0, 0.0)
        self.assertEqual(str(context.exception), "Azimuth must be between 0 and 360 degrees")

    def test_altitude_out_of_range(self):
        """Test that altitude beyond zenith or nadir is rejected"""
        with self.assertRaises(InvalidCoordinateError) as context:
            HorizontalCoordinate(0.0, -90.5)
        self.assertEqual(str(context.exception), "Altitude must be between -90 and +90 degrees")

    def test_is_above_horizon(self):
        """Test horizon check, which excludes the horizon itself"""
        self.assertTrue(HorizontalCoordinate(0.0, 0.1).is_above_horizon)
        self.assertFalse(HorizontalCoordinate(0.0, 0.0).is_above_horizon)
        self.assertFalse(HorizontalCoordinate(0.0, -10.0).is_above_horizon)

    def test_zenith_distance(self):
        """Test zenith distance"""
        self.assertEqual(HorizontalCoordinate(0.0, 90.0).zenith_distance, 0.0)
        self.assertEqual(HorizontalCoordinate(0.0, 30.0).zenith_distance, 60.0)
        self.assertEqual(HorizontalCoordinate(0.0, -90.0).zenith_distance, 180.0)

    def test_parts(self):
        """Test degree/minute/second parts"""
        coord = HorizontalCoordinate(123.45, -12.5)
        self.assertEqual(coord.azimuth_degree_part, 123)
        self.assertEqual(coord.azimuth_minute_part, 27)
        self.assertAlmostEqual(coord.azimuth_second_part, 0.0, places=6)
        self.assertEqual(coord.altitude_degree_part, -12)
        self.assertEqual(coord.altitude_minute_part, 30)

    def test_azimuth_parts_stay_below_360_degrees(self):
        """Test that parts just below 360 degrees never carry into a 360th degree"""
        coord = HorizontalCoordinate(359.9999999999, 0.0)
        self.assertEqual(coord.azimuth_degree_part, 359)
        self.assertEqual(coord.azimuth_minute_part, 59)
        self.assertLess(coord.azimuth_second_part, 60.0)
        self.assertEqual(coord.format_azimuth(), "0° 00' 00.00\"")

    def test_format(self):
        """Test sexagesimal formatting"""
        coord = HorizontalCoordinate(123.45, 45.5)
        self.assertEqual(coord.format_azimuth(), "123° 27' 00.00\"")
        self.assertEqual(coord.format_altitude(), "+45° 30' 00.00\"")

    def test_str(self):
        """Test string representation"""
        self.assertEqual(str(HorizontalCoordinate(180.0, 45.0)), "Az 180.00°, Alt 45.00°")

    def test_unit_vector(self):
        """Test unit vector orientation: x north, y east, z up"""
        east = HorizontalCoordinate(90.0, 0.0).to_unit_vector()
        self.assertAlmostEqual(east.y, 1.0)
        self.assertAlmostEqual(east.x, 0.0)
        zenith = HorizontalCoordinate(0.0, 90.0).to_unit_vector()
        self.assertAlmostEqual(zenith.z, 1.0)


if __name__ == "__main__":
    unittest.main()
