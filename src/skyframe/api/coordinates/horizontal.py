"""
Horizontal coordinate system (Alt/Az).

This system is relative to the observer's local horizon.
Coordinates change as Earth rotates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.angles import ALTITUDE, AZIMUTH, degrees_to_dms, format_dms
from ..core.vector import Vector3D


__all__ = ["HorizontalCoordinate"]


@dataclass(frozen=True)
class HorizontalCoordinate:
    """
    A direction in the observer's local sky.

    Attributes:
        azimuth: Azimuth in degrees (0-360, where 0=North, 90=East, 180=South, 270=West)
        altitude: Altitude in degrees (-90 to +90, where 0=horizon, 90=zenith)

    Raises:
        InvalidCoordinateError: If either value is out of range
    """

    azimuth: float
    altitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "azimuth", AZIMUTH.check(self.azimuth))
        object.__setattr__(self, "altitude", ALTITUDE.check(self.altitude))

    @property
    def azimuth_degree_part(self) -> int:
        return degrees_to_dms(self.azimuth)[0] % 360

    @property
    def azimuth_minute_part(self) -> int:
        return degrees_to_dms(self.azimuth)[1]

    @property
    def azimuth_second_part(self) -> float:
        return degrees_to_dms(self.azimuth)[2]

    @property
    def altitude_degree_part(self) -> int:
        d, _, _, sign = degrees_to_dms(self.altitude)
        return -d if sign == "-" else d

    @property
    def altitude_minute_part(self) -> int:
        return degrees_to_dms(self.altitude)[1]

    @property
    def altitude_second_part(self) -> float:
        return degrees_to_dms(self.altitude)[2]

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude > 0.0

    @property
    def zenith_distance(self) -> float:
        return 90.0 - self.altitude

    def to_unit_vector(self) -> Vector3D:
        """Direction cosines with x north, y east, z toward the zenith."""
        az = math.radians(self.azimuth)
        alt = math.radians(self.altitude)
        return Vector3D(math.cos(alt) * math.cos(az), math.cos(alt) * math.sin(az), math.sin(alt))

    def format_azimuth(self) -> str:
        """Azimuth as ``"123° 27' 00.00\\""``."""
        return format_dms(self.azimuth, wrap_at=360)

    def format_altitude(self) -> str:
        """Altitude as ``"+45° 30' 00.00\\""``."""
        return format_dms(self.altitude, signed=True)

    def __str__(self) -> str:
        return f"Az {self.azimuth:.2f}°, Alt {self.altitude:.2f}°"
