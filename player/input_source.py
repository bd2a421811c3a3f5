"""
Player Input System

This module translates keyboard state into the normalized direction vector the
user agent consumes each tick.

**Responsibility**: Input handling
**Dependencies**: pygame (for key constants)
"""

import pygame

from common.Vector import Vector


class KeyboardInputSource:
    """
    Translate pressed keys into a direction vector.

    Opposite keys cancel out; diagonals are normalized so the magnitude never
    exceeds 1. No keys pressed yields the zero vector (idle).
    """

    def __init__(self):
        # Arrow keys and WASD
        self.key_mappings = {
            pygame.K_UP: Vector(0, -1),
            pygame.K_w: Vector(0, -1),
            pygame.K_DOWN: Vector(0, 1),
            pygame.K_s: Vector(0, 1),
            pygame.K_LEFT: Vector(-1, 0),
            pygame.K_a: Vector(-1, 0),
            pygame.K_RIGHT: Vector(1, 0),
            pygame.K_d: Vector(1, 0),
        }

    def get_direction(self, keys) -> Vector:
        """
        Args:
            keys: pygame key state or any mapping indexable by key constant
        """
        total = Vector.zero()
        for key, direction in self.key_mappings.items():
            if keys[key]:
                total = total + direction
        # Duplicate bindings for the same direction count once
        return Vector(_sign(total.x), _sign(total.y)).normalize()


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0
