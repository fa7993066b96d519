"""
Sidereal time.

Converts solar time (a JulianDate) into sidereal time, the rotation angle of
the Earth measured against the stars. Uses the IAU 1982 mean sidereal time
polynomial as given by Meeus, without nutation.
"""

from __future__ import annotations

import deal

from ..core.angles import LONGITUDE, format_hms, normalize_degrees, normalize_hours
from ..core.constants import (
    DEGREES_PER_HOUR_ANGLE,
    GMST_CUBIC,
    GMST_DAILY_RATE,
    GMST_J2000_DEGREES,
    GMST_QUADRATIC,
    J2000_JD,
)
from ..core.exceptions import InvalidCoordinateError
from .julian_date import JulianDate


__all__ = [
    "format_hour_angle",
    "greenwich_sidereal_time",
    "local_sidereal_time",
]


@deal.post(lambda result: 0.0 <= result < 24.0, message="GST must be 0-24 hours")
def greenwich_sidereal_time(jd: JulianDate) -> float:
    """
    Calculate Greenwich (mean) Sidereal Time.

    Args:
        jd: Julian Date

    Returns:
        GST in hours (0-24)
    """
    t = jd.julian_centuries()
    theta = (
        GMST_J2000_DEGREES
        + GMST_DAILY_RATE * (jd.value - J2000_JD)
        + GMST_QUADRATIC * t * t
        - t * t * t / GMST_CUBIC
    )
    return normalize_hours(normalize_degrees(theta) / DEGREES_PER_HOUR_ANGLE)


@deal.post(lambda result: 0.0 <= result < 24.0, message="LST must be 0-24 hours")
@deal.raises(InvalidCoordinateError)
def local_sidereal_time(jd: JulianDate, longitude: float) -> float:
    """
    Calculate Local Sidereal Time.

    Args:
        jd: Julian Date
        longitude: Observer longitude in degrees (positive east, -180 to +180)

    Returns:
        LST in hours (0-24)

    Raises:
        InvalidCoordinateError: If longitude is out of range
    """
    longitude = LONGITUDE.check(longitude)
    return normalize_hours(greenwich_sidereal_time(jd) + longitude / DEGREES_PER_HOUR_ANGLE)


def format_hour_angle(hours: float) -> str:
    """
    Format an hour angle or sidereal time as ``"18h 41m 50.55s"``.

    The value is reduced into 0-24 hours first, so negative hour angles
    display as their positive equivalent.
    """
    return format_hms(normalize_hours(hours))
