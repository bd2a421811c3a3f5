"""
Observation Builder for the Match Environment

This module converts a MatchSimulation into a flat float32 vector for the
headless gymnasium environment. Every value is normalized so it stays roughly
within [-1, 1].

**Observation Structure** (23 dimensions):
- Ball position (2 dims, divided by field half extents)
- Ball velocity (2 dims, divided by the user kick power)
- Agent positions (16 dims: 8 agents x 2, blue roster then red roster)
- Match state (3 dims: player score, AI score, episode progress)
"""

import numpy as np

from config.game_config import GameConfig

AGENT_COUNT = 8
OBSERVATION_SIZE = 2 + 2 + AGENT_COUNT * 2 + 3


class ObservationBuilder:

    def __init__(self, config: GameConfig = None, max_score: int = 10):
        self.config = config or GameConfig.create_default()
        self.half_width = self.config.field.HALF_WIDTH
        self.half_height = self.config.field.HALF_HEIGHT
        self.velocity_scale = self.config.agents.USER_KICK_POWER
        self.max_score = max_score

    def build_observation(self, match, steps: int, max_steps: int) -> np.ndarray:
        ball = match.ball
        parts = [
            self._build_position(ball.position),
            np.array([ball.velocity.x / self.velocity_scale,
                      ball.velocity.y / self.velocity_scale], dtype=np.float32),
        ]
        parts.extend(self._build_position(agent.position) for agent in match.agents())
        parts.append(self._build_match_state(match, steps, max_steps))

        obs = np.concatenate(parts).astype(np.float32)
        if obs.shape != (OBSERVATION_SIZE,):
            raise ValueError(f"Expected observation of size {OBSERVATION_SIZE}, got {obs.shape[0]}")
        return obs

    def _build_position(self, position) -> np.ndarray:
        return np.array([position.x / self.half_width, position.y / self.half_height], dtype=np.float32)

    def _build_match_state(self, match, steps: int, max_steps: int) -> np.ndarray:
        return np.array([
            min(match.player_score, self.max_score) / self.max_score,
            min(match.ai_score, self.max_score) / self.max_score,
            steps / max_steps if max_steps > 0 else 0.0,
        ], dtype=np.float32)
