"""
Unit tests for converters module.

Tests RA unit conversion, hour angle and the spherical transform between
hour angle/declination and azimuth/altitude.
"""

import unittest

from skyframe.api.converters import CoordinateConverter


class TestCoordinateConverter(unittest.TestCase):
    """Test suite for CoordinateConverter class"""

    def test_ra_hours_to_degrees(self):
        """Test Right Ascension hours to degrees conversion"""
        # Test standard conversion
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(12.0), 180.0)
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(0.0), 0.0)
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(24.0), 360.0)
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(6.0), 90.0)

        # Test fractional hours
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(12.5), 187.5)
        self.assertEqual(CoordinateConverter.ra_hours_to_degrees(1.5), 22.5)

    def test_ra_degrees_to_hours(self):
        """Test Right Ascension degrees to hours conversion"""
        self.assertEqual(CoordinateConverter.ra_degrees_to_hours(180.0), 12.0)
        self.assertEqual(CoordinateConverter.ra_degrees_to_hours(0.0), 0.0)
        self.assertEqual(CoordinateConverter.ra_degrees_to_hours(270.0), 18.0)
        self.assertEqual(CoordinateConverter.ra_degrees_to_hours(187.5), 12.5)

    def test_ra_conversion_roundtrip(self):
        """Test that RA conversions are reversible"""
        test_values = [0.0, 6.0, 12.0, 18.0, 12.5, 1.5, 23.75]
        for hours in test_values:
            degrees = CoordinateConverter.ra_hours_to_degrees(hours)
            back_to_hours = CoordinateConverter.ra_degrees_to_hours(degrees)
            self.assertAlmostEqual(hours, back_to_hours, places=10)


class TestHourAngle(unittest.TestCase):
    """Test suite for CoordinateConverter.hour_angle"""

    def test_on_meridian(self):
        """Test that an object at RA = LST has hour angle 0"""
        self.assertEqual(CoordinateConverter.hour_angle(6.0, 90.0), 0.0)

    def test_west_of_meridian(self):
        """Test a positive hour angle"""
        self.assertEqual(CoordinateConverter.hour_angle(8.0, 90.0), 30.0)

    def test_east_of_meridian_wraps(self):
        """Test that an object east of the meridian wraps into 0-360"""
        self.assertEqual(CoordinateConverter.hour_angle(4.0, 90.0), 330.0)

    def test_always_in_range(self):
        """Test that the hour angle is always 0-360"""
        for lst in (0.0, 0.5, 12.0, 23.99):
            for ra in (0.0, 10.0, 180.0, 359.9):
                ha = CoordinateConverter.hour_angle(lst, ra)
                self.assertGreaterEqual(ha, 0.0)
                self.assertLess(ha, 360.0)


class TestEquatorialToHorizontal(unittest.TestCase):
    """Test suite for CoordinateConverter.equatorial_to_horizontal"""

    def test_setting_in_west(self):
        """Test that an equatorial object 6h west sets due west"""
        az, alt = CoordinateConverter.equatorial_to_horizontal(90.0, 0.0, 0.0)
        self.assertAlmostEqual(az, 270.0, places=9)
        self.assertAlmostEqual(alt, 0.0, places=9)

    def test_rising_in_east(self):
        """Test that an equatorial object 6h east rises due east"""
        az, alt = CoordinateConverter.equatorial_to_horizontal(270.0, 0.0, 0.0)
        self.assertAlmostEqual(az, 90.0, places=9)
        self.assertAlmostEqual(alt, 0.0, places=9)

    def test_upper_culmination_south(self):
        """Test that a southern object on the meridian is due south"""
        az, alt = CoordinateConverter.equatorial_to_horizontal(0.0, 0.0, 40.0)
        self.assertAlmostEqual(az, 180.0, places=9)
        self.assertAlmostEqual(alt, 50.0, places=9)

    def test_zenith_gives_azimuth_zero(self):
        """Test that the zenith degeneracy yields azimuth 0 without error"""
        az, alt = CoordinateConverter.equatorial_to_horizontal(0.0, 0.0, 0.0)
        self.assertEqual(az, 0.0)
        self.assertEqual(alt, 90.0)

    def test_pole_observer(self):
        """Test that altitude equals declination at the pole"""
        _az, alt = CoordinateConverter.equatorial_to_horizontal(123.0, 30.0, 90.0)
        self.assertAlmostEqual(alt, 30.0, places=9)


class TestHorizontalToEquatorial(unittest.TestCase):
    """Test suite for CoordinateConverter.horizontal_to_equatorial"""

    def test_west_horizon(self):
        """Test that due west on the horizon is 6h hour angle at the equator"""
        ha, dec = CoordinateConverter.horizontal_to_equatorial(270.0, 0.0, 0.0)
        self.assertAlmostEqual(ha, 90.0, places=9)
        self.assertAlmostEqual(dec, 0.0, places=9)

    def test_inverse(self):
        """Test that the two transforms are inverses"""
        for ha, dec, lat in [(10.0, 20.0, 45.0), (200.0, -30.0, -33.9), (300.0, 60.0, 51.5)]:
            az, alt = CoordinateConverter.equatorial_to_horizontal(ha, dec, lat)
            ha_back, dec_back = CoordinateConverter.horizontal_to_equatorial(az, alt, lat)
            self.assertAlmostEqual(ha_back, ha, places=9)
            self.assertAlmostEqual(dec_back, dec, places=9)


if __name__ == "__main__":
    unittest.main()
