"""
Angle ranges, reduction and sexagesimal formatting.

Every component that validates or normalizes an angle goes through this
module, so boundary behavior is the same everywhere:

- ``reduce_angle`` is a floored modulo: the result is never negative and
  never equal to the period (``-0.0001`` degrees becomes ``359.9999``).
- ``AngleRange.check`` rejects out-of-range or non-finite values with an
  ``InvalidCoordinateError`` whose message names the violated bound.
- Sexagesimal splitting and formatting go through astropy's ``Angle``,
  which rounds and carries, so 152.75 degrees never renders as
  ``10h 10m 60.00s``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import deal
from astropy import units as u
from astropy.coordinates import Angle

from .constants import HOURS_PER_DAY
from .exceptions import InvalidCoordinateError


__all__ = [
    "ALTITUDE",
    "AZIMUTH",
    "DECLINATION",
    "LATITUDE",
    "LONGITUDE",
    "RIGHT_ASCENSION",
    "AngleRange",
    "degrees_to_dms",
    "format_dms",
    "format_hms",
    "hours_to_hms",
    "normalize_degrees",
    "normalize_hours",
    "reduce_angle",
]

_HMS_SEP = ("h ", "m ", "s")
_DMS_SEP = ("° ", "' ", '"')


@deal.ensure(lambda value, period, result: 0.0 <= result < period or math.isnan(result))
def reduce_angle(value: float, period: float) -> float:
    """
    Reduce a value into ``[0, period)`` using a floored modulo.

    Args:
        value: Angle (or time) to reduce
        period: Length of the cycle, e.g. 360.0 or 24.0

    Returns:
        Reduced value, always ``>= 0`` and ``< period``
    """
    reduced = value % period
    # Python's % rounds tiny negatives up to exactly `period`
    if reduced >= period:
        reduced = 0.0
    return reduced


def normalize_degrees(degrees: float) -> float:
    """Reduce an angle in degrees into ``[0, 360)``."""
    return reduce_angle(degrees, 360.0)


def normalize_hours(hours: float) -> float:
    """Reduce a time or hour angle in hours into ``[0, 24)``."""
    return reduce_angle(hours, HOURS_PER_DAY)


def _bound_text(bound: float, signed: bool) -> str:
    text = f"{bound:g}"
    if signed and bound > 0:
        return f"+{text}"
    return text


@dataclass(frozen=True)
class AngleRange:
    """
    A named, validated range of angles.

    Attributes:
        label: Human readable name used in error messages
        minimum: Lowest accepted value (always inclusive)
        maximum: Highest value of the range
        include_maximum: Whether ``maximum`` itself is accepted
    """

    label: str
    minimum: float
    maximum: float
    include_maximum: bool = True

    @property
    def message(self) -> str:
        signed = self.minimum < 0
        return (
            f"{self.label} must be between {_bound_text(self.minimum, signed)} "
            f"and {_bound_text(self.maximum, signed)} degrees"
        )

    def contains(self, value: float) -> bool:
        if not math.isfinite(value):
            return False
        if self.include_maximum:
            return self.minimum <= value <= self.maximum
        return self.minimum <= value < self.maximum

    def check(self, value: float) -> float:
        """
        Validate a value against this range.

        Args:
            value: Candidate angle in degrees

        Returns:
            The value as a float

        Raises:
            InvalidCoordinateError: If the value is not a number, not finite,
                or outside the range
        """
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidCoordinateError(f"{self.label} must be a number, got {value!r}") from e
        if not self.contains(number):
            raise InvalidCoordinateError(self.message)
        return number


RIGHT_ASCENSION = AngleRange("Right ascension", 0.0, 360.0, include_maximum=False)
DECLINATION = AngleRange("Declination", -90.0, 90.0)
AZIMUTH = AngleRange("Azimuth", 0.0, 360.0, include_maximum=False)
ALTITUDE = AngleRange("Altitude", -90.0, 90.0)
LATITUDE = AngleRange("Latitude", -90.0, 90.0)
LONGITUDE = AngleRange("Longitude", -180.0, 180.0)


def _wrap_whole(text: str, unit_sep: str, period: int) -> str:
    """Show a whole-unit count that rounded up to ``period`` as 0."""
    whole, rest = text.split(unit_sep, 1)
    if abs(int(whole)) >= period:
        return f"{int(whole) % period}{unit_sep}{rest}"
    return text


def hours_to_hms(hours: float) -> tuple[int, int, float]:
    """
    Convert decimal hours to hours/minutes/seconds format.

    Args:
        hours: Decimal hours (0-24)

    Returns:
        Tuple of (hours, minutes, seconds)
    """
    angle = Angle(hours, unit=u.hour)
    hms = angle.hms
    return int(abs(hms.h)), int(abs(hms.m)), float(abs(hms.s))


def degrees_to_dms(degrees: float) -> tuple[int, int, float, str]:
    """
    Convert decimal degrees to degrees/minutes/seconds format.

    Args:
        degrees: Decimal degrees

    Returns:
        Tuple of (degrees, minutes, seconds, sign)
    """
    angle = Angle(degrees, unit=u.deg)
    dms = angle.dms
    sign = "+" if degrees >= 0 else "-"
    return int(abs(dms.d)), int(abs(dms.m)), float(abs(dms.s)), sign


def format_hms(hours: float, wrap: bool = True) -> str:
    """
    Format decimal hours as ``"12h 34m 56.78s"``.

    Args:
        hours: Decimal hours, non-negative
        wrap: Show 24h (reached only by rounding) as 0h

    Returns:
        Formatted string
    """
    text = Angle(hours, unit=u.hour).to_string(sep=_HMS_SEP, precision=2, pad=False)
    if wrap:
        text = _wrap_whole(text, _HMS_SEP[0], int(HOURS_PER_DAY))
    return text


def format_dms(degrees: float, signed: bool = False, wrap_at: int | None = None) -> str:
    """
    Format decimal degrees as ``"123° 27' 00.00\\""``.

    Args:
        degrees: Decimal degrees
        signed: Prefix ``+`` or ``-`` (declination, altitude)
        wrap_at: Wrap the whole-degree count at this value (360 for azimuth)

    Returns:
        Formatted string
    """
    text = Angle(degrees, unit=u.deg).to_string(sep=_DMS_SEP, precision=2, pad=False, alwayssign=signed)
    if wrap_at is not None:
        text = _wrap_whole(text, _DMS_SEP[0], wrap_at)
    return text
