"""
3D vector value type used for agent positions and headings.
"""

import pygame
from typing import Tuple


class Vector3(pygame.math.Vector3):
    """
    A 3D vector with a pure and an in-place form of each operation.

    Pure methods (``add``, ``scale``, ``normalize`` ...) return a new
    Vector3. The ``*_ip`` methods update this vector and return it, so
    accumulators in the neighbor scan can chain them without allocating.
    Applying an in-place method gives the same components as the pure one.
    """

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, c: float) -> "Vector3":
        return Vector3(self.x * c, self.y * c, self.z * c)

    def scale_down(self, c: float) -> "Vector3":
        return self.scale(1.0 / c)

    def negate(self) -> "Vector3":
        return self.scale(-1)

    def add_ip(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def subtract_ip(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def scale_ip(self, c: float) -> "Vector3":
        self.x *= c
        self.y *= c
        self.z *= c
        return self

    def scale_down_ip(self, c: float) -> "Vector3":
        return self.scale_ip(1.0 / c)

    def negate_ip(self) -> "Vector3":
        return self.scale_ip(-1)

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return self.length()

    def normalize(self) -> "Vector3":
        """
        Return a unit vector in the same direction.

        Unlike ``pygame.math.Vector3.normalize`` a zero vector does not
        raise; an unchanged copy is returned instead.
        """
        length = self.norm()
        if length == 0:
            return self.copy()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def normalize_ip(self) -> "Vector3":
        """Normalize in place; a zero vector is left as it is."""
        length = self.norm()
        if length == 0:
            return self
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def distance(self, other: "Vector3") -> float:
        return self.subtract(other).norm()

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


def zero() -> Vector3:
    """Fresh zero vector for use as an accumulator."""
    return Vector3(0, 0, 0)
