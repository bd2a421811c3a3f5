"""
2D Vector Mathematics Utility

This module provides a simple 2D vector class for handling positions, velocities,
and directions in the football simulation. It implements the vector operations
needed for ball integration, agent steering, kick directions and bounds checks.

**Key Operations**:
- Vector arithmetic (addition, subtraction, scalar multiplication)
- Magnitude and distance calculation
- Normalization that is safe on the zero vector
- Per-axis clamping and magnitude clamping

**Usage**: Used throughout the codebase for agent positions, ball movement,
goal rectangles and the camera target.
"""

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """
    2D vector class for position, velocity, and direction calculations.

    **Common Usage Patterns**:
    - Positions: Vector(-200, 0)
    - Velocities: ball.velocity * dt
    - Directions: (target - position).normalize()
    - Distances: position.distance_to(ball.position)
    """
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0)

    def __add__(self, other: "Vector") -> "Vector":
        """Add two vectors component-wise. Used for position + displacement."""
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        """Subtract vectors to get displacement from other to self."""
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        """Scale vector by multiplying each component by scalar."""
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        """Allow scalar * vector syntax (e.g., 0.7 * ball_position)."""
        return self.__mul__(scalar)

    def length(self) -> float:
        """Calculate Euclidean distance/magnitude of vector."""
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def distance_to(self, other: "Vector") -> float:
        return (self - other).length()

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def normalize(self) -> "Vector":
        """
        Return unit vector (length 1) in same direction.
        Returns zero vector if original length is zero.
        """
        l = self.length()
        if l == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / l, self.y / l)

    def clamp(self, minimum: "Vector", maximum: "Vector") -> "Vector":
        """Clamp each axis independently into [minimum, maximum]."""
        return Vector(
            min(max(self.x, minimum.x), maximum.x),
            min(max(self.y, minimum.y), maximum.y),
        )

    def clamp_length(self, max_length: float) -> "Vector":
        """Scale the vector down so its magnitude does not exceed max_length."""
        l = self.length()
        if l <= max_length:
            return Vector(self.x, self.y)
        return self.normalize() * max_length

    def copy(self) -> "Vector":
        return Vector(self.x, self.y)

    def as_tuple(self):
        return self.x, self.y

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y})"
