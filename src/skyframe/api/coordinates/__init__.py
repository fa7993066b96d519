"""Coordinate types and the observer-based transform between them."""

from skyframe.api.coordinates.equatorial import EquatorialCoordinate
from skyframe.api.coordinates.horizontal import HorizontalCoordinate
from skyframe.api.coordinates.observer import Observer


__all__ = [
    "EquatorialCoordinate",
    "HorizontalCoordinate",
    "Observer",
]
