"""Time scales: Julian Date and sidereal time."""

from skyframe.api.time.julian_date import J2000, JulianDate, to_julian_date
from skyframe.api.time.sidereal import (
    format_hour_angle,
    greenwich_sidereal_time,
    local_sidereal_time,
)


__all__ = [
    "J2000",
    "JulianDate",
    "format_hour_angle",
    "greenwich_sidereal_time",
    "local_sidereal_time",
    "to_julian_date",
]
