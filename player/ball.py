from typing import List

from common.Vector import Vector
from config.game_config import GameConfig


class Ball:
    def __init__(self, config: GameConfig = None) -> None:
        self.config = config or GameConfig.create_default()
        self.radius = self.config.ball.RADIUS
        self.position = Vector.zero()
        self.velocity = Vector.zero()
        self.goals: List = []

    def attach_goals(self, goals) -> None:
        self.goals = list(goals)

    def update(self, dt: float) -> None:
        ball_cfg = self.config.ball
        field = self.config.field

        self.position = self.position + self.velocity * dt

        # Friction is per tick, so the decay depends on the frame rate
        self.velocity = self.velocity * ball_cfg.FRICTION
        if self.velocity.length() < ball_cfg.REST_SPEED:
            self.velocity = Vector.zero()

        if abs(self.position.x) > field.HALF_WIDTH:
            self.position.x = _sign(self.position.x) * field.HALF_WIDTH
            self.velocity.x *= -ball_cfg.BOUNCE_DAMPING

        if abs(self.position.y) > field.HALF_HEIGHT:
            self.position.y = _sign(self.position.y) * field.HALF_HEIGHT
            self.velocity.y *= -ball_cfg.BOUNCE_DAMPING

        scored = [goal for goal in self.goals if goal.is_ball_inside_goal(self)]
        for goal in scored:
            goal.on_score()
        if scored:
            self._reset_ball()

    def kick(self, direction: Vector, power: float) -> None:
        self.velocity = direction.normalize() * power

    def _reset_ball(self) -> None:
        self.position = Vector.zero()
        self.velocity = Vector.zero()


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0
