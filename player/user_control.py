"""
User Control for the joystick/keyboard-driven agent.

The external input collaborator supplies a direction vector each tick
(magnitude at most 1, zero when idle). Out-of-range input is clamped rather
than rejected.
"""

from typing import Optional

from common.Vector import Vector
from player.agent import AgentKind


class UserControl:
    kind = AgentKind.USER

    def __init__(self):
        self.input_vector = Vector.zero()

    def set_input(self, input_vector: Optional[Vector]) -> Vector:
        if input_vector is None:
            self.input_vector = Vector.zero()
        else:
            self.input_vector = input_vector.clamp_length(1.0)
        return self.input_vector

    def update(self, agent, dt: float, input_vector: Optional[Vector] = None) -> None:
        direction = self.set_input(input_vector)
        if direction.is_zero():
            return

        # Kick uses the position from before this tick's movement
        if agent.can_kick():
            agent.kick(direction)

        agent.try_move(direction * agent.speed * dt)
