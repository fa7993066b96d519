"""
Functional interface to the coordinate and time calculations.

These helpers take and return plain floats, with Right Ascension in hours,
for callers that do not want to build coordinate objects. Every function
delegates to the value types, so validation and normalization are the same
as in the object API.
"""

from __future__ import annotations

from datetime import datetime

from ..coordinates.equatorial import EquatorialCoordinate
from ..coordinates.horizontal import HorizontalCoordinate
from ..coordinates.observer import Observer
from ..time.julian_date import JulianDate
from ..time.sidereal import local_sidereal_time
from .angles import DECLINATION, degrees_to_dms, format_dms, format_hms, hours_to_hms
from .constants import DEGREES_PER_HOUR_ANGLE


__all__ = [
    "alt_az_to_ra_dec",
    "angular_separation",
    "calculate_julian_date",
    "calculate_lst",
    "dec_to_degrees",
    "degrees_to_dms",
    "format_dec",
    "format_position",
    "format_ra",
    "hours_to_hms",
    "ra_dec_to_alt_az",
    "ra_to_degrees",
    "ra_to_hours",
]


def ra_to_degrees(hours: float, minutes: float = 0, seconds: float = 0) -> float:
    """
    Convert Right Ascension from hours/minutes/seconds to decimal degrees.

    Args:
        hours: RA hours (0-24)
        minutes: RA minutes (0-59)
        seconds: RA seconds (0-59)

    Returns:
        RA in decimal degrees (0-360)
    """
    return ra_to_hours(hours, minutes, seconds) * DEGREES_PER_HOUR_ANGLE


def ra_to_hours(hours: float, minutes: float = 0, seconds: float = 0) -> float:
    """
    Convert Right Ascension from hours/minutes/seconds to decimal hours.

    Args:
        hours: RA hours (0-24)
        minutes: RA minutes (0-59)
        seconds: RA seconds (0-59)

    Returns:
        RA in decimal hours (0-24)
    """
    return hours + minutes / 60.0 + seconds / 3600.0


def dec_to_degrees(degrees: float, minutes: float = 0, seconds: float = 0, sign: str = "+") -> float:
    """
    Convert Declination from degrees/minutes/seconds to decimal degrees.

    Args:
        degrees: Dec degrees (0-90)
        minutes: Dec minutes (0-59)
        seconds: Dec seconds (0-59)
        sign: '+' for north, '-' for south

    Returns:
        Dec in decimal degrees (-90 to +90)

    Raises:
        InvalidCoordinateError: If the result is beyond either pole
    """
    total_degrees = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    if sign == "-":
        total_degrees = -total_degrees
    return DECLINATION.check(total_degrees)


def alt_az_to_ra_dec(
    azimuth: float, altitude: float, latitude: float, longitude: float, utc_time: datetime
) -> tuple[float, float]:
    """
    Convert Alt/Az coordinates to RA/Dec coordinates.

    Args:
        azimuth: Azimuth in degrees (0-360)
        altitude: Altitude in degrees (-90 to +90)
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        utc_time: UTC time as datetime object

    Returns:
        Tuple of (RA in hours, Dec in degrees)
    """
    observer = Observer(latitude, longitude)
    equatorial = observer.to_equatorial(HorizontalCoordinate(azimuth, altitude), utc_time)
    return equatorial.right_ascension_hours, equatorial.declination


def ra_dec_to_alt_az(
    ra_hours: float, dec_degrees: float, latitude: float, longitude: float, utc_time: datetime
) -> tuple[float, float]:
    """
    Convert RA/Dec coordinates to Alt/Az coordinates.

    Args:
        ra_hours: Right Ascension in hours (0-24)
        dec_degrees: Declination in degrees (-90 to +90)
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        utc_time: UTC time as datetime object

    Returns:
        Tuple of (Azimuth in degrees, Altitude in degrees)
    """
    observer = Observer(latitude, longitude)
    horizontal = observer.to_horizontal(EquatorialCoordinate.from_hours(ra_hours, dec_degrees), utc_time)
    return horizontal.azimuth, horizontal.altitude


def calculate_lst(longitude: float, utc_time: datetime) -> float:
    """
    Calculate Local Sidereal Time.

    Args:
        longitude: Observer longitude in degrees (positive east)
        utc_time: UTC time as datetime object

    Returns:
        LST in hours (0-24)
    """
    return local_sidereal_time(JulianDate.from_datetime(utc_time), longitude)


def calculate_julian_date(dt: datetime) -> float:
    """
    Calculate Julian Date from datetime.

    Args:
        dt: datetime object (assumed to be UTC)

    Returns:
        Julian Date
    """
    return JulianDate.from_datetime(dt).value


def angular_separation(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """
    Calculate angular separation between two celestial coordinates.

    Args:
        ra1: First RA in hours
        dec1: First Dec in degrees
        ra2: Second RA in hours
        dec2: Second Dec in degrees

    Returns:
        Angular separation in degrees
    """
    first = EquatorialCoordinate.from_hours(ra1, dec1)
    second = EquatorialCoordinate.from_hours(ra2, dec2)
    return first.angular_separation(second)


def format_ra(hours: float) -> str:
    """
    Format RA as a readable string.

    Args:
        hours: RA in decimal hours

    Returns:
        Formatted string (e.g., "12h 34m 56.78s")
    """
    return format_hms(hours)


def format_dec(degrees: float) -> str:
    """
    Format Dec as a readable string.

    Args:
        degrees: Dec in decimal degrees

    Returns:
        Formatted string (e.g., "+45° 12' 34.50\"")
    """
    return format_dms(degrees, signed=True)


def format_position(ra_hours: float, dec_degrees: float) -> str:
    """
    Format celestial position as readable string.

    Args:
        ra_hours: RA in hours
        dec_degrees: Dec in degrees

    Returns:
        Formatted position string
    """
    return f"RA: {format_ra(ra_hours)}, Dec: {format_dec(dec_degrees)}"
