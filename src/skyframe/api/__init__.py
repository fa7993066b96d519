"""
skyframe API

This package contains the coordinate and time calculations, separated from
CLI presentation concerns.

The API is organized into logical subpackages:
- core: Angles, vectors, constants, exceptions and a functional facade
- time: Julian Date and sidereal time
- coordinates: Equatorial and horizontal coordinates, observer transform
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from skyframe.api.coordinates import ...
    # from skyframe.api.time import ...
    # from skyframe.api.core import ...
]
