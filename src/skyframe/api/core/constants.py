"""
Physical and Astronomical Constants

Constants used throughout the skyframe API for calculations.
"""

from typing import Final


__all__ = [
    "ARCSEC_PER_ARCMIN",
    "ARCSEC_PER_DEGREE",
    "DAYS_PER_JULIAN_CENTURY",
    "DEGREES_PER_HOUR_ANGLE",
    "GMST_CUBIC",
    "GMST_DAILY_RATE",
    "GMST_J2000_DEGREES",
    "GMST_QUADRATIC",
    "HOURS_PER_DAY",
    "J2000_JD",
    "JD_OF_ORDINAL_ZERO",
    "MJD_OFFSET",
    "SECONDS_PER_DAY",
]


# Conversion factors
ARCSEC_PER_DEGREE: Final[float] = 3600.0
"""Arcseconds per degree."""

ARCSEC_PER_ARCMIN: Final[float] = 60.0
"""Arcseconds per arcminute."""

DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

HOURS_PER_DAY: Final[float] = 24.0

SECONDS_PER_DAY: Final[float] = 86400.0

# Time scales
J2000_JD: Final[float] = 2451545.0
"""Julian Date of the J2000.0 epoch (2000 January 1, 12:00 TT)."""

DAYS_PER_JULIAN_CENTURY: Final[float] = 36525.0

MJD_OFFSET: Final[float] = 2400000.5
"""Julian Date of the Modified Julian Date origin (1858 November 17, 00:00)."""

JD_OF_ORDINAL_ZERO: Final[int] = 1721425
"""Julian Day Number of the day before 0001-01-01 (``date.toordinal() == 0``)."""

# Greenwich mean sidereal time polynomial (Meeus, eq. 12.4), degrees
GMST_J2000_DEGREES: Final[float] = 280.46061837
GMST_DAILY_RATE: Final[float] = 360.98564736629
GMST_QUADRATIC: Final[float] = 0.000387933
GMST_CUBIC: Final[float] = 38710000.0
