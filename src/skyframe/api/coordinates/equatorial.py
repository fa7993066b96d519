"""
Equatorial coordinate system (RA/Dec).

This is the standard celestial coordinate system used in astronomy.
Coordinates are fixed relative to the celestial sphere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import deal

from ..converters import CoordinateConverter
from ..core.angles import DECLINATION, RIGHT_ASCENSION, degrees_to_dms, format_dms, format_hms, hours_to_hms
from ..core.constants import HOURS_PER_DAY
from ..core.vector import Vector3D


__all__ = ["EquatorialCoordinate"]


@dataclass(frozen=True)
class EquatorialCoordinate:
    """
    A point on the celestial sphere in right ascension and declination.

    Attributes:
        right_ascension: Right Ascension in degrees (0 to 360, 360 excluded)
        declination: Declination in degrees (-90 to +90)

    Raises:
        InvalidCoordinateError: If either value is out of range
    """

    right_ascension: float
    declination: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "right_ascension", RIGHT_ASCENSION.check(self.right_ascension))
        object.__setattr__(self, "declination", DECLINATION.check(self.declination))

    @classmethod
    def from_hours(cls, ra_hours: float, dec_degrees: float) -> EquatorialCoordinate:
        """Create from Right Ascension in hours (0-24) and Declination in degrees."""
        return cls(CoordinateConverter.ra_hours_to_degrees(ra_hours), dec_degrees)

    @property
    def right_ascension_hours(self) -> float:
        return CoordinateConverter.ra_degrees_to_hours(self.right_ascension)

    # Sexagesimal parts

    @property
    def right_ascension_hour_part(self) -> int:
        return hours_to_hms(self.right_ascension_hours)[0] % int(HOURS_PER_DAY)

    @property
    def right_ascension_minute_part(self) -> int:
        return hours_to_hms(self.right_ascension_hours)[1]

    @property
    def right_ascension_second_part(self) -> float:
        return hours_to_hms(self.right_ascension_hours)[2]

    @property
    def declination_degree_part(self) -> int:
        """Whole degrees of declination, carrying the sign (truncated toward zero)."""
        d, _, _, sign = degrees_to_dms(self.declination)
        return -d if sign == "-" else d

    @property
    def declination_arcminute_part(self) -> int:
        return degrees_to_dms(self.declination)[1]

    @property
    def declination_arcsecond_part(self) -> float:
        return degrees_to_dms(self.declination)[2]

    @deal.post(lambda result: 0.0 <= result <= 180.0, message="Separation must be 0-180 degrees")
    def angular_separation(self, other: EquatorialCoordinate) -> float:
        """
        Calculate angular separation between this coordinate and another.

        Uses the spherical law of cosines, clamping the cosine so rounding
        can never push it outside ``acos``'s domain.

        Args:
            other: The other coordinate

        Returns:
            Angular separation in degrees (0-180)
        """
        ra1 = math.radians(self.right_ascension)
        ra2 = math.radians(other.right_ascension)
        dec1 = math.radians(self.declination)
        dec2 = math.radians(other.declination)

        cos_sep = math.sin(dec1) * math.sin(dec2) + math.cos(dec1) * math.cos(dec2) * math.cos(ra1 - ra2)

        # Clamp to valid range
        cos_sep = max(-1.0, min(1.0, cos_sep))
        return math.degrees(math.acos(cos_sep))

    def to_unit_vector(self) -> Vector3D:
        """Direction cosines with x toward RA 0h, z toward the north celestial pole."""
        ra = math.radians(self.right_ascension)
        dec = math.radians(self.declination)
        return Vector3D(math.cos(dec) * math.cos(ra), math.cos(dec) * math.sin(ra), math.sin(dec))

    def format_right_ascension(self) -> str:
        """Right ascension as ``"10h 11m 00.00s"``."""
        return format_hms(self.right_ascension_hours)

    def format_declination(self) -> str:
        """Declination as ``"+42° 30' 00.00\\""``."""
        return format_dms(self.declination, signed=True)

    def __str__(self) -> str:
        return f"RA {self.right_ascension:.4f}°, Dec {self.declination:+.4f}°"
