"""
Football Goal Implementation with Scoring Detection

This module implements the two scoring zones at the horizontal extremes of the
field. Each goal is an axis-aligned rectangle; the ball scores as soon as its
center lies inside the rectangle, edges included.

**Key Features**:
1. **Goal Detection**: Pure containment predicate against the ball center
2. **Directional Goals**: Left and right goals identified by GoalSide
3. **Scoring Callback**: One-shot callback into the owning match's counters

**Goal Structure**:
- Rectangle centered on `position` with extents `half_size`
- No debounce: the ball resets itself away from the goal after scoring
"""

from enum import Enum
from typing import Callable

from common.Vector import Vector


class GoalSide(Enum):
    LEFT = "left"
    RIGHT = "right"


class Goal:
    """
    Rectangular scoring zone at one end of the field.

    **Purpose**: Report ball containment and notify the match of a goal

    **Usage**: Created by Pitch, checked by Ball.update every tick
    """
    def __init__(self, position: Vector, half_size: Vector, side: GoalSide,
                 on_score: Callable[[], None]):
        if not isinstance(side, GoalSide):
            raise ValueError("Goal side must be GoalSide.LEFT or GoalSide.RIGHT")
        self.position = position
        self.half_size = half_size
        self.side = side
        self.on_score = on_score

    @property
    def left(self) -> float:
        return self.position.x - self.half_size.x

    @property
    def right(self) -> float:
        return self.position.x + self.half_size.x

    @property
    def top(self) -> float:
        return self.position.y - self.half_size.y

    @property
    def bottom(self) -> float:
        return self.position.y + self.half_size.y

    def is_ball_inside_goal(self, ball) -> bool:
        """Inclusive bounding-box check of the ball center; the radius is ignored."""
        ball_pos = ball.position
        return (self.left <= ball_pos.x <= self.right
                and self.top <= ball_pos.y <= self.bottom)

    def __repr__(self) -> str:
        return f"Goal({self.side.value}, position={self.position}, half_size={self.half_size})"
