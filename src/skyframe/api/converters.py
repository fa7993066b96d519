"""
Coordinate conversion utilities.

This module provides the spherical trigonometry behind the
equatorial/horizontal transform, working on plain floats in degrees so it
can be reused without constructing coordinate objects.
"""

from __future__ import annotations

import math

from .core.angles import normalize_degrees
from .core.constants import DEGREES_PER_HOUR_ANGLE


__all__ = ["CoordinateConverter"]


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


class CoordinateConverter:
    """Helper class for coordinate system conversions."""

    @staticmethod
    def ra_hours_to_degrees(ra_hours: float) -> float:
        """
        Convert Right Ascension from hours to degrees.

        Example:
            >>> CoordinateConverter.ra_hours_to_degrees(12.0)
            180.0
        """
        return ra_hours * DEGREES_PER_HOUR_ANGLE

    @staticmethod
    def ra_degrees_to_hours(ra_degrees: float) -> float:
        """
        Convert Right Ascension from degrees to hours.

        Example:
            >>> CoordinateConverter.ra_degrees_to_hours(180.0)
            12.0
        """
        return ra_degrees / DEGREES_PER_HOUR_ANGLE

    @staticmethod
    def hour_angle(lst_hours: float, ra_degrees: float) -> float:
        """
        Hour angle of an object west of the local meridian.

        Args:
            lst_hours: Local Sidereal Time in hours
            ra_degrees: Right Ascension in degrees

        Returns:
            Hour angle in degrees (0-360)
        """
        return normalize_degrees(lst_hours * DEGREES_PER_HOUR_ANGLE - ra_degrees)

    @staticmethod
    def equatorial_to_horizontal(
        hour_angle: float, declination: float, latitude: float
    ) -> tuple[float, float]:
        """
        Convert hour angle/declination to azimuth/altitude.

        Azimuth comes from ``atan2(sinAz, cosAz)`` with both terms scaled by
        ``cos(lat) * cos(alt)``. That factor is never negative, so the angle is
        unchanged, and no division is needed. At the zenith or nadir both terms
        vanish and the azimuth comes out as 0.

        Args:
            hour_angle: Hour angle in degrees
            declination: Declination in degrees (-90 to +90)
            latitude: Observer latitude in degrees (-90 to +90)

        Returns:
            Tuple of (azimuth in degrees 0-360, altitude in degrees -90 to +90)
        """
        ha_rad = math.radians(hour_angle)
        dec_rad = math.radians(declination)
        lat_rad = math.radians(latitude)

        sin_alt = _clamp_unit(
            math.sin(dec_rad) * math.sin(lat_rad) + math.cos(dec_rad) * math.cos(lat_rad) * math.cos(ha_rad)
        )
        altitude = math.degrees(math.asin(sin_alt))

        y = -math.sin(ha_rad) * math.cos(dec_rad) * math.cos(lat_rad)
        x = math.sin(dec_rad) - math.sin(lat_rad) * sin_alt
        azimuth = normalize_degrees(math.degrees(math.atan2(y, x)))

        return azimuth, altitude

    @staticmethod
    def horizontal_to_equatorial(
        azimuth: float, altitude: float, latitude: float
    ) -> tuple[float, float]:
        """
        Convert azimuth/altitude to hour angle/declination.

        The algebraic inverse of ``equatorial_to_horizontal``; the hour angle
        uses the same division-free ``atan2`` form, scaled by
        ``cos(lat) * cos(dec)``.

        Args:
            azimuth: Azimuth in degrees (0-360, clockwise from north)
            altitude: Altitude in degrees (-90 to +90)
            latitude: Observer latitude in degrees (-90 to +90)

        Returns:
            Tuple of (hour angle in degrees 0-360, declination in degrees -90 to +90)
        """
        az_rad = math.radians(azimuth)
        alt_rad = math.radians(altitude)
        lat_rad = math.radians(latitude)

        sin_dec = _clamp_unit(
            math.sin(alt_rad) * math.sin(lat_rad) + math.cos(alt_rad) * math.cos(lat_rad) * math.cos(az_rad)
        )
        declination = math.degrees(math.asin(sin_dec))

        y = -math.sin(az_rad) * math.cos(alt_rad) * math.cos(lat_rad)
        x = math.sin(alt_rad) - math.sin(lat_rad) * sin_dec
        hour_angle = normalize_degrees(math.degrees(math.atan2(y, x)))

        return hour_angle, declination
