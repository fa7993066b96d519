"""
Custom exception classes for skyframe.

This module defines specific exceptions for the different kinds of invalid
input the coordinate and time types reject.
"""

from __future__ import annotations


__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    # Coordinate exceptions
    "InvalidCoordinateError",
    # Time exceptions
    "InvalidTimeError",
    # Base exception
    "SkyframeError",
    # Vector exceptions
    "ZeroVectorError",
]


class SkyframeError(Exception):
    """
    Base exception for all skyframe errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all library errors.
    """

    pass


class InvalidCoordinateError(SkyframeError, ValueError):
    """
    Raised when coordinates are out of valid range.

    This occurs when attempting to construct a value with:
    - Right ascension outside 0-360 degrees (360 excluded)
    - Declination outside -90 to +90 degrees
    - Azimuth outside 0-360 degrees (360 excluded)
    - Altitude outside -90 to +90 degrees
    - Observer latitude outside -90 to +90 or longitude outside -180 to +180
    - Any non-finite value
    """

    pass


class InvalidTimeError(SkyframeError, ValueError):
    """
    Raised when a time value cannot be represented.

    This can occur when:
    - A Julian Date is negative or not finite
    - No datetime is supplied where one is required
    - A Julian Date falls before the first year a datetime can hold
    """

    pass


class ZeroVectorError(SkyframeError, ArithmeticError):
    """Raised when a zero-length vector has no direction."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(SkyframeError):
    """Raised when required CLI configuration is missing or invalid."""

    pass
