"""
Observer Location and the equatorial/horizontal transform.

An observer's geographic position, combined with an instant of time, is what
relates fixed sky positions (RA/Dec) to directions in the local sky (Az/Alt).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

import deal

from ..converters import CoordinateConverter
from ..core.angles import LATITUDE, LONGITUDE, normalize_degrees
from ..core.constants import DEGREES_PER_HOUR_ANGLE
from ..core.exceptions import InvalidTimeError
from ..time.julian_date import JulianDate, to_julian_date
from ..time.sidereal import local_sidereal_time
from .equatorial import EquatorialCoordinate
from .horizontal import HorizontalCoordinate


logger = logging.getLogger(__name__)


__all__ = ["Observer"]


@dataclass(frozen=True)
class Observer:
    """
    Observer's geographic location.

    Attributes:
        latitude: Degrees north (negative for south), -90 to +90
        longitude: Degrees east (negative for west), -180 to +180
        name: Optional location name, ignored by equality

    Raises:
        InvalidCoordinateError: If latitude or longitude is out of range

    Example:
        >>> seoul = Observer(37.5665, 126.9780)
        >>> polaris = EquatorialCoordinate(37.95, 89.26)
        >>> horizontal = seoul.to_horizontal(polaris, datetime(2025, 1, 1, 12, tzinfo=UTC))
    """

    latitude: float
    longitude: float
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", LATITUDE.check(self.latitude))
        object.__setattr__(self, "longitude", LONGITUDE.check(self.longitude))

    def local_sidereal_time(self, moment: datetime | JulianDate) -> float:
        """Local Sidereal Time in hours (0-24) at this location."""
        return local_sidereal_time(to_julian_date(moment), self.longitude)

    def hour_angle(self, equatorial: EquatorialCoordinate, moment: datetime | JulianDate) -> float:
        """Hour angle of ``equatorial`` west of the local meridian, in degrees (0-360)."""
        return CoordinateConverter.hour_angle(self.local_sidereal_time(moment), equatorial.right_ascension)

    @deal.raises(InvalidTimeError)
    def to_horizontal(
        self, equatorial: EquatorialCoordinate, moment: datetime | JulianDate
    ) -> HorizontalCoordinate:
        """
        Convert equatorial coordinates to horizontal coordinates.

        Args:
            equatorial: Position on the celestial sphere
            moment: Observation time (datetime, naive treated as UTC, or JulianDate)

        Returns:
            Azimuth/altitude seen from this location at that moment

        Raises:
            InvalidTimeError: If ``moment`` is missing
        """
        jd = to_julian_date(moment)
        lst = local_sidereal_time(jd, self.longitude)
        ha = CoordinateConverter.hour_angle(lst, equatorial.right_ascension)

        azimuth, altitude = CoordinateConverter.equatorial_to_horizontal(ha, equatorial.declination, self.latitude)
        logger.debug(f"RA/Dec {equatorial} at {jd}: LST={lst:.6f}h HA={ha:.6f}° -> Az={azimuth:.6f}° Alt={altitude:.6f}°")

        return HorizontalCoordinate(azimuth, altitude)

    @deal.raises(InvalidTimeError)
    def to_equatorial(
        self, horizontal: HorizontalCoordinate, moment: datetime | JulianDate
    ) -> EquatorialCoordinate:
        """
        Convert horizontal coordinates to equatorial coordinates.

        Args:
            horizontal: Direction in the local sky
            moment: Observation time (datetime, naive treated as UTC, or JulianDate)

        Returns:
            Right ascension/declination of that direction at that moment

        Raises:
            InvalidTimeError: If ``moment`` is missing
        """
        jd = to_julian_date(moment)
        lst = local_sidereal_time(jd, self.longitude)

        ha, declination = CoordinateConverter.horizontal_to_equatorial(
            horizontal.azimuth, horizontal.altitude, self.latitude
        )
        right_ascension = normalize_degrees(lst * DEGREES_PER_HOUR_ANGLE - ha)
        logger.debug(
            f"Az/Alt {horizontal} at {jd}: LST={lst:.6f}h HA={ha:.6f}° -> RA={right_ascension:.6f}° Dec={declination:.6f}°"
        )

        return EquatorialCoordinate(right_ascension, declination)

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        location = f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"
        return f"{self.name} ({location})" if self.name else location
