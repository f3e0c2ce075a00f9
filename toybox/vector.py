"""Two-dimensional vectors shared by the simulations and games."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def direction(self, other: Vector) -> Vector:
        """Unit vector pointing from this point towards *other*."""
        return (other - self).normalize()

    def dot_product(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def angle(self, other: Vector) -> float:
        """Angle in radians between this vector and *other*."""
        cosine = self.dot_product(other) / (self.magnitude() * other.magnitude())
        return math.acos(max(-1.0, min(1.0, cosine)))

    def normalize(self) -> Vector:
        """Vector of length one with the same direction."""
        length = self.magnitude()
        return Vector(self.x / length, self.y / length)

    def inverse(self) -> Vector:
        """Vector pointing the opposite way."""
        return Vector(-self.x, -self.y)

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vector:
        return self.__mul__(scalar)