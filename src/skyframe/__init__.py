"""
skyframe - Celestial Coordinate and Time Library

Represents positions on the celestial sphere in equatorial (RA/Dec) and
horizontal (Az/Alt) coordinates, represents time as Julian Date and sidereal
time, and converts between the two coordinate systems for an observer at a
given moment.

Example:
    >>> from datetime import UTC, datetime
    >>> from skyframe import EquatorialCoordinate, Observer
    >>> seoul = Observer(37.5665, 126.9780)
    >>> polaris = EquatorialCoordinate(37.95, 89.26)
    >>> horizontal = seoul.to_horizontal(polaris, datetime(2025, 1, 1, 12, tzinfo=UTC))
    >>> print(horizontal.format_azimuth(), horizontal.format_altitude())
"""

# Coordinate types and observer transform
from skyframe.api.converters import CoordinateConverter
from skyframe.api.coordinates import EquatorialCoordinate, HorizontalCoordinate, Observer

# Angles and vectors
from skyframe.api.core import Vector3D, normalize_degrees, normalize_hours

# Exceptions
from skyframe.api.core.exceptions import (
    ConfigurationError,
    InvalidCoordinateError,
    InvalidTimeError,
    SkyframeError,
    ZeroVectorError,
)

# Functional facade
from skyframe.api.core.utils import (
    alt_az_to_ra_dec,
    angular_separation,
    calculate_julian_date,
    calculate_lst,
    dec_to_degrees,
    degrees_to_dms,
    format_dec,
    format_position,
    format_ra,
    hours_to_hms,
    ra_dec_to_alt_az,
    ra_to_degrees,
    ra_to_hours,
)

# Time scales
from skyframe.api.time import (
    J2000,
    JulianDate,
    format_hour_angle,
    greenwich_sidereal_time,
    local_sidereal_time,
)


__version__ = "0.1.0"

__all__ = [
    "J2000",
    "ConfigurationError",
    "CoordinateConverter",
    "EquatorialCoordinate",
    "HorizontalCoordinate",
    "InvalidCoordinateError",
    "InvalidTimeError",
    "JulianDate",
    "Observer",
    "SkyframeError",
    "Vector3D",
    "ZeroVectorError",
    "alt_az_to_ra_dec",
    "angular_separation",
    "calculate_julian_date",
    "calculate_lst",
    "dec_to_degrees",
    "degrees_to_dms",
    "format_dec",
    "format_hour_angle",
    "format_position",
    "format_ra",
    "greenwich_sidereal_time",
    "hours_to_hms",
    "local_sidereal_time",
    "normalize_degrees",
    "normalize_hours",
    "ra_dec_to_alt_az",
    "ra_to_degrees",
    "ra_to_hours",
]
