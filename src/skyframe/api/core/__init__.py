"""Core subpackage for shared angles, vectors, constants and exceptions."""

from skyframe.api.core.angles import (
    ALTITUDE,
    AZIMUTH,
    DECLINATION,
    LATITUDE,
    LONGITUDE,
    RIGHT_ASCENSION,
    AngleRange,
    degrees_to_dms,
    format_dms,
    format_hms,
    hours_to_hms,
    normalize_degrees,
    normalize_hours,
    reduce_angle,
)
from skyframe.api.core.vector import Vector3D


__all__ = [
    "ALTITUDE",
    "AZIMUTH",
    "DECLINATION",
    "LATITUDE",
    "LONGITUDE",
    "RIGHT_ASCENSION",
    "AngleRange",
    "Vector3D",
    "degrees_to_dms",
    "format_dms",
    "format_hms",
    "hours_to_hms",
    "normalize_degrees",
    "normalize_hours",
    "reduce_angle",
]
