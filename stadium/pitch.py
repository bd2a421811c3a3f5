"""
Football Field/Pitch Implementation

This module defines the playing field: its bounds, the two goals, and the
boundary rules every mover on the field obeys.

**Key Components**:
1. **Field Bounds**: Half extents from the center of the pitch (origin)
2. **Goal Integration**: Builds the left and right Goal objects
3. **Agent Bounds**: Strict inset acceptance test for proposed agent positions
4. **Camera Bounds**: Clamp used by the renderer to frame the view

**Field Layout**:
- 1920x1080 world units centered on (0, 0)
- Left goal at x=-960 (blue defends it), right goal at x=960 (red defends it)
"""

from typing import Callable

from common.Vector import Vector
from config.game_config import GameConfig
from stadium.goal import Goal, GoalSide


class Pitch:
    """
    Playing field with bounds and goal management.

    **Coordinate System**: origin at the center spot, x to the right, y down
    """

    def __init__(self, on_left_goal: Callable[[], None], on_right_goal: Callable[[], None],
                 config: GameConfig = None) -> None:
        self.config = config or GameConfig.create_default()
        self.half_width = self.config.field.HALF_WIDTH
        self.half_height = self.config.field.HALF_HEIGHT

        goals = self.config.goals
        half_size = Vector(goals.WIDTH / 2, goals.HEIGHT / 2)
        self.goal_left = Goal(Vector(-goals.CENTER_X, goals.CENTER_Y), half_size, GoalSide.LEFT, on_left_goal)
        self.goal_right = Goal(Vector(goals.CENTER_X, goals.CENTER_Y), half_size, GoalSide.RIGHT, on_right_goal)

    def goals(self):
        return [self.goal_left, self.goal_right]

    def accepts_agent_position(self, position: Vector, radius: float) -> bool:
        """
        Strict inset test: a proposed agent position is accepted only if it lies
        strictly inside the field shrunk by the agent radius on both axes.
        """
        return (abs(position.x) < self.half_width - radius
                and abs(position.y) < self.half_height - radius)

    def clamp_to_field(self, position: Vector) -> Vector:
        return position.clamp(Vector(-self.half_width, -self.half_height),
                              Vector(self.half_width, self.half_height))
