"""
Julian Date

A continuous count of days (and fractions of a day) since noon UTC on
January 1, 4713 BC (Julian calendar). Day boundaries fall at noon, so
midnight UTC on a civil date is always ``N + 0.5``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

import deal

from ..core.constants import (
    DAYS_PER_JULIAN_CENTURY,
    HOURS_PER_DAY,
    J2000_JD,
    JD_OF_ORDINAL_ZERO,
    MJD_OFFSET,
    SECONDS_PER_DAY,
)
from ..core.exceptions import InvalidTimeError


__all__ = [
    "J2000",
    "JulianDate",
    "to_julian_date",
]

_MICROSECONDS_PER_DAY = int(SECONDS_PER_DAY) * 1_000_000


def _julian_day_number(year: int, month: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian date (noon of that day)."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


@dataclass(frozen=True, order=True)
class JulianDate:
    """
    Julian Date value.

    Attributes:
        value: Days since the start of the Julian Period (non-negative)

    Example:
        >>> JulianDate.from_datetime(datetime(2000, 1, 1, 12, tzinfo=UTC)).value
        2451545.0
    """

    value: float

    def __post_init__(self) -> None:
        try:
            number = float(self.value)
        except (TypeError, ValueError) as e:
            raise InvalidTimeError(f"Julian Date must be a number, got {self.value!r}") from e
        if math.isnan(number) or math.isinf(number):
            raise InvalidTimeError("Julian Date must be finite")
        if number < 0:
            raise InvalidTimeError("Julian Date cannot be negative")
        object.__setattr__(self, "value", number)

    @classmethod
    @deal.raises(InvalidTimeError)
    def from_datetime(cls, dt: datetime | None) -> JulianDate:
        """
        Calculate the Julian Date of a civil date and time.

        Args:
            dt: datetime object. Naive values are assumed to be UTC; aware
                values are converted to UTC first.

        Returns:
            JulianDate for that instant

        Raises:
            InvalidTimeError: If ``dt`` is None, not a datetime, or falls outside
                the representable range once converted to UTC
        """
        if dt is None:
            raise InvalidTimeError("datetime must not be None")
        if not isinstance(dt, datetime):
            raise InvalidTimeError(f"Expected a datetime, got {type(dt).__name__}")
        if dt.tzinfo is not None:
            try:
                dt = dt.astimezone(UTC)
            except OverflowError as e:
                raise InvalidTimeError(f"{dt.isoformat()} cannot be converted to UTC") from e

        jdn = _julian_day_number(dt.year, dt.month, dt.day)

        # Time fraction relative to noon
        fraction = (
            dt.hour - 12 + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3600e6
        ) / HOURS_PER_DAY

        return cls(jdn + fraction)

    @classmethod
    def now(cls) -> JulianDate:
        """Julian Date of the current UTC instant."""
        return cls.from_datetime(datetime.now(UTC))

    @deal.raises(InvalidTimeError)
    def to_datetime(self) -> datetime:
        """
        Convert back to a civil date and time.

        Returns:
            Timezone-aware UTC datetime, rounded to the microsecond

        Raises:
            InvalidTimeError: If the date falls outside years 1-9999
        """
        shifted = self.value + 0.5
        day_number = math.floor(shifted)
        micros = round((shifted - day_number) * _MICROSECONDS_PER_DAY)

        ordinal = day_number - JD_OF_ORDINAL_ZERO
        if ordinal < 1:
            raise InvalidTimeError(f"Julian Date {self.value} is before 0001-01-01")
        try:
            midnight = datetime.combine(date.fromordinal(ordinal), time(), tzinfo=UTC)
            # micros may equal a whole day after rounding; timedelta carries it
            return midnight + timedelta(microseconds=micros)
        except (ValueError, OverflowError) as e:
            raise InvalidTimeError(f"Julian Date {self.value} is after 9999-12-31") from e

    def julian_centuries(self) -> float:
        """Julian centuries elapsed since J2000.0."""
        return (self.value - J2000_JD) / DAYS_PER_JULIAN_CENTURY

    @property
    def modified_julian_date(self) -> float:
        return self.value - MJD_OFFSET

    def plus_days(self, days: float) -> JulianDate:
        return JulianDate(self.value + days)

    def minus_days(self, days: float) -> JulianDate:
        return JulianDate(self.value - days)

    def days_since(self, other: JulianDate) -> float:
        """Signed number of days from ``other`` to this date."""
        return self.value - other.value

    def __str__(self) -> str:
        return f"JD {self.value:.6f}"


J2000 = JulianDate(J2000_JD)
"""The J2000.0 reference epoch."""


def to_julian_date(moment: datetime | JulianDate | None) -> JulianDate:
    """
    Accept either a datetime or an existing JulianDate.

    Raises:
        InvalidTimeError: If ``moment`` is None or of another type
    """
    if isinstance(moment, JulianDate):
        return moment
    return JulianDate.from_datetime(moment)
