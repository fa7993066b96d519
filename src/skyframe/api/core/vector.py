"""
Immutable 3D vector used for direction cosines on the celestial sphere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import ZeroVectorError


__all__ = ["Vector3D"]


@dataclass(frozen=True)
class Vector3D:
    """
    Cartesian 3-vector.

    Attributes:
        x: X component
        y: Y component
        z: Z component
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3D:
        return cls(0.0, 0.0, 0.0)

    def add(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3D:
        """
        Return the unit vector with the same direction.

        Raises:
            ZeroVectorError: If this is the zero vector
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroVectorError("Cannot normalize a zero vector")
        return self.multiply(1.0 / mag)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_to(self, other: Vector3D) -> float:
        """
        Angle between two vectors in degrees (0-180).

        Raises:
            ZeroVectorError: If either vector is the zero vector
        """
        cos_angle = self.normalize().dot(other.normalize())
        # Clamp to valid range
        cos_angle = max(-1.0, min(1.0, cos_angle))
        return math.degrees(math.acos(cos_angle))

    # Operator sugar over the named methods
    def __add__(self, other: Vector3D) -> Vector3D:
        return self.add(other)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector3D:
        return self.multiply(scalar)

    __rmul__ = __mul__
