"""
Match Simulation - Core Game State and Scoring System

This module owns every entity on the field and advances them once per tick:

- The user agent with the current input vector
- Each reactive agent, blue roster first, then red
- The ball, which integrates motion, bounces and checks both goals

**Key Features**:
- Deterministic update order; when several agents are in kick range the last
  one to update wins the ball
- Goal callbacks increment plain integer score counters
- Read-only camera target derived from the user agent position
- Simulated elapsed time for the host's timer display
"""

import itertools
from typing import List, Optional

from common.Vector import Vector
from config.game_config import GameConfig
from player.agent import Agent, TeamColor
from player.ball import Ball
from player.team import BLUE_FORMATION, RED_FORMATION, FormationSlot, Team
from stadium.pitch import Pitch


class MatchSimulation:
    """
    Central match manager that owns the ball, both goals and all agents.

    **Scoring**:
    - Ball inside the left goal (blue defends it): ai_score += 1
    - Ball inside the right goal (red defends it): player_score += 1

    **Integration**: The host calls `tick(dt, user_input)` once per frame and
    then reads positions, `camera_target` and the score counters.
    """
    def __init__(self, config: Optional[GameConfig] = None,
                 blue_formation: Optional[List[FormationSlot]] = None,
                 red_formation: Optional[List[FormationSlot]] = None):
        self.config = config or GameConfig.create_default()

        self.player_score = 0
        self.ai_score = 0
        self.elapsed = 0.0
        self.ticks = 0

        self.pitch = Pitch(self._on_left_goal, self._on_right_goal, self.config)
        self.left_goal = self.pitch.goal_left
        self.right_goal = self.pitch.goal_right

        self.ball = Ball(self.config)
        self.ball.attach_goals(self.pitch.goals())

        ids = itertools.count()
        self.blue_team = Team(TeamColor.BLUE, blue_formation or BLUE_FORMATION, self.ball, self.pitch, ids, self.config)
        self.red_team = Team(TeamColor.RED, red_formation or RED_FORMATION, self.ball, self.pitch, ids, self.config)

        users = self.blue_team.user_agents() + self.red_team.user_agents()
        if len(users) != 1:
            raise ValueError(f"A match needs exactly one user-controlled agent, got {len(users)}")
        self.user_agent = users[0]

        self.camera_target = self._compute_camera_target()

    def _on_left_goal(self):
        self.ai_score += 1

    def _on_right_goal(self):
        self.player_score += 1

    def agents(self) -> List[Agent]:
        """All agents in update order."""
        return self.blue_team.players() + self.red_team.players()

    def reactive_agents(self) -> List[Agent]:
        return [agent for agent in self.agents() if not agent.is_user]

    def tick(self, dt: float, user_input: Optional[Vector] = None) -> None:
        if dt < 0:
            return

        # Agents act on last tick's ball before the ball integrates
        self.user_agent.update(dt, user_input)
        for agent in self.reactive_agents():
            agent.update(dt)
        self.ball.update(dt)

        self.elapsed += dt
        self.ticks += 1
        self.camera_target = self._compute_camera_target()

    def _compute_camera_target(self) -> Vector:
        return self.pitch.clamp_to_field(self.user_agent.position)

    def score_str(self) -> str:
        return f"{self.player_score} : {self.ai_score}"

    def get_elapsed_time_str(self) -> str:
        elapsed = int(self.elapsed)
        minutes = elapsed // 60
        seconds = elapsed % 60
        return f"{minutes:02d}:{seconds:02d}"
