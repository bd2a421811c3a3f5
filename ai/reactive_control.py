"""
Reactive AI Control for computer-driven agents.

Each reactive agent runs a tiny state machine: a think timer gates target
re-selection to once every `THINK_INTERVAL` seconds of simulated time, while
movement toward the current target and kicking run on every tick.

**Roles**:
1. **Goalkeeper**: Holds the defending goal spot and steps out toward the
   ball when it comes within `KEEPER_ENGAGE_DISTANCE`, staying inside a box
   in front of goal. Kicks clear away from its own goal.
2. **Field agent**: Chases the ball with a small per-agent offset so team
   mates spread out, limited to its team's allowed band of the field. Kicks
   toward the opponent goal.

**Usage**:
```python
control = ReactiveControl(start_position, is_goalkeeper=True)
agent = Agent(0, TeamColor.RED, start_position, control, ball, pitch, 180, 280)
agent.update(dt)
```
"""

from typing import Optional

from common.Vector import Vector
from config.game_config import GameConfig
from player.agent import AgentKind

_HASH_MULTIPLIER = 2654435761
_HASH_MODULUS = 2 ** 32


def jitter_offset(agent_id: int, scale: float) -> Vector:
    """
    Deterministic crowding offset for an agent, roughly +/-50 * scale per axis.
    The id is spread with a multiplicative hash so neighbouring ids differ.
    """
    seed = (agent_id * _HASH_MULTIPLIER) % _HASH_MODULUS
    return Vector((seed % 100 - 50) * scale, ((seed // 100) % 100 - 50) * scale)


class ReactiveControl:
    kind = AgentKind.REACTIVE

    def __init__(self, start_position: Vector, is_goalkeeper: bool = False,
                 config: Optional[GameConfig] = None):
        self.config = config or GameConfig.create_default()
        self.is_goalkeeper = is_goalkeeper
        self.target_position = start_position.copy()
        self.think_timer = 0.0
        self.think_interval = self.config.reactive.THINK_INTERVAL

    def update(self, agent, dt: float, input_vector: Optional[Vector] = None) -> None:
        self.think_timer += dt
        if self.think_timer >= self.think_interval:
            # Overshoot past the interval is discarded, not carried over
            self.think_timer = 0.0
            self._update_target(agent)

        toward = self.target_position - agent.position
        if toward.length() > self.config.reactive.ARRIVAL_DISTANCE:
            agent.try_move(toward.normalize() * agent.speed * dt)

        if agent.can_kick():
            agent.kick(self._kick_direction(agent))

    def defending_goal(self, agent) -> Vector:
        return Vector(agent.team.defending_side * self.config.reactive.DEFENDING_GOAL_X, 0.0)

    def attacking_goal(self, agent) -> Vector:
        return Vector(-agent.team.defending_side * self.config.reactive.ATTACKING_GOAL_X, 0.0)

    def _kick_direction(self, agent) -> Vector:
        ball_position = agent.ball.position
        if self.is_goalkeeper:
            return ball_position - self.defending_goal(agent)
        return self.attacking_goal(agent) - ball_position

    def _update_target(self, agent) -> None:
        if self.is_goalkeeper:
            self.target_position = self._goalkeeper_target(agent)
        else:
            self.target_position = self._field_target(agent)

    def _goalkeeper_target(self, agent) -> Vector:
        cfg = self.config.reactive
        side = agent.team.defending_side
        goal_position = self.defending_goal(agent)
        ball_position = agent.ball.position

        if goal_position.distance_to(ball_position) >= cfg.KEEPER_ENGAGE_DISTANCE:
            return goal_position

        target = ball_position * cfg.KEEPER_BALL_WEIGHT + goal_position * cfg.KEEPER_GOAL_WEIGHT
        low_x, high_x = sorted((side * cfg.KEEPER_MIN_X, side * cfg.KEEPER_MAX_X))
        return target.clamp(Vector(low_x, -cfg.KEEPER_MAX_Y), Vector(high_x, cfg.KEEPER_MAX_Y))

    def _field_target(self, agent) -> Vector:
        cfg = self.config.reactive
        side = agent.team.defending_side
        ball_position = agent.ball.position

        # Close to the ball or not, the target is the same offset chase point
        if agent.position.distance_to(ball_position) > cfg.CHASE_DISTANCE:
            target = ball_position + jitter_offset(agent.agent_id, cfg.JITTER_SCALE)
        else:
            target = ball_position + jitter_offset(agent.agent_id, cfg.JITTER_SCALE)

        low_x, high_x = sorted((-side * cfg.FIELD_FORWARD_LIMIT_X, side * cfg.FIELD_BACK_LIMIT_X))
        target.x = min(max(target.x, low_x), high_x)
        return target
