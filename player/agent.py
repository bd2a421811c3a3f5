"""
Agent Coordinator

This module defines the circular mover shared by every player on the field.
An Agent owns its body state (position, radius, team, speed, kick values) and
delegates its per-tick behaviour to a control component:

1. **UserControl**: driven by the external input vector
2. **ReactiveControl**: driven by periodic AI re-targeting

Both controls implement the same `update(agent, dt, input_vector)` contract and
are tagged with an `AgentKind`, so the match can treat every agent uniformly
while still telling them apart.

**Responsibility**: Body state, bounded movement and kicking
"""

from enum import Enum
from typing import Optional

from common.Vector import Vector
from config.game_config import GameConfig


class TeamColor(Enum):
    """Team identity; red defends the right goal, blue defends the left goal"""
    BLUE = "blue"
    RED = "red"

    @property
    def defending_side(self) -> float:
        """+1 when defending the right (positive x) goal, -1 for the left."""
        return 1.0 if self is TeamColor.RED else -1.0


class AgentKind(Enum):
    USER = "user"
    REACTIVE = "reactive"


class Agent:
    """
    Circular mover with a kick interaction radius.

    **Usage**:
    ```python
    agent = Agent(3, TeamColor.BLUE, Vector(-200, 0), UserControl(), ball, pitch,
                  speed=200, kick_power=300)
    agent.update(dt, input_vector)
    ```
    """

    def __init__(self, agent_id: int, team: TeamColor, position: Vector, control,
                 ball, pitch, speed: float, kick_power: float,
                 config: Optional[GameConfig] = None):
        self.config = config or GameConfig.create_default()
        self.agent_id = agent_id
        self.team = team
        self.position = position.copy()
        self.radius = self.config.agents.RADIUS
        self.kick_range = self.config.agents.KICK_RANGE
        self.speed = speed
        self.kick_power = kick_power
        self.control = control
        self.ball = ball
        self.pitch = pitch

    @property
    def kind(self) -> AgentKind:
        return self.control.kind

    @property
    def is_user(self) -> bool:
        return self.kind is AgentKind.USER

    @property
    def is_goalkeeper(self) -> bool:
        return getattr(self.control, "is_goalkeeper", False)

    def update(self, dt: float, input_vector: Optional[Vector] = None) -> None:
        self.control.update(self, dt, input_vector)

    def distance_to_ball(self) -> float:
        return self.position.distance_to(self.ball.position)

    def can_kick(self) -> bool:
        return self.distance_to_ball() < self.kick_range

    def kick(self, direction: Vector) -> None:
        """Overwrite the ball velocity; a zero direction stops the ball."""
        self.ball.kick(direction, self.kick_power)

    def try_move(self, movement: Vector) -> bool:
        """
        Propose position + movement. The whole proposal is accepted or rejected;
        there is no per-axis sliding along the boundary.
        """
        new_position = self.position + movement
        if self.pitch.accepts_agent_position(new_position, self.radius):
            self.position = new_position
            return True
        return False

    def __repr__(self) -> str:
        return (f"Agent(id={self.agent_id}, team={self.team.value}, kind={self.kind.value}, "
                f"position={self.position})")
