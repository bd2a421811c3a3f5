"""
Match Environment for Reinforcement Learning

Gymnasium-compatible wrapper that lets a policy drive the user agent while the
other seven agents follow their reactive rules. The simulation advances with
a fixed step so episodes are reproducible.

**Interface**:
- Action: the user agent's input vector, `Box(-1, 1, (2,))`
- Observation: 23-dim float32 vector from ObservationBuilder
- Reward: +1 when the player scores, -1 when the AI scores, minus a small
  penalty proportional to the user agent's distance from the ball
- Termination: any goal; truncation after `max_steps`
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
import pygame
from gymnasium import spaces

from ai.observation_builder import OBSERVATION_SIZE, ObservationBuilder
from common.Vector import Vector
from config.game_config import GameConfig
from drawing.drawing import MatchRenderer
from game.match import MatchSimulation

STEP_DT = 1 / 60
DISTANCE_PENALTY = 0.001


class MatchEnv(gym.Env):
    """
    Gymnasium environment around a single MatchSimulation.

    **Core Responsibilities**:
    - Implement Gymnasium interface (reset, step, render, close)
    - Translate actions into the user agent's input vector
    - Track episode length and goal events
    """
    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(self, render_mode: Optional[str] = None, max_steps: int = 3600,
                 config: Optional[GameConfig] = None):
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.config = config or GameConfig.create_default()
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.observation_builder = ObservationBuilder(self.config)

        self.action_space = spaces.Box(low=-1.0, high=1.0, shape=(2,), dtype=np.float32)
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(OBSERVATION_SIZE,), dtype=np.float32
        )

        self.match = MatchSimulation(self.config)
        self.steps = 0
        self.screen = None
        self.clock = None
        self.renderer = None

        print(f"Environment initialized - max_steps: {self.max_steps}, dt: {STEP_DT:.4f}")

    def reset(self, seed=None, options=None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a fresh match"""
        super().reset(seed=seed)
        self.match = MatchSimulation(self.config)
        self.steps = 0
        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        action = np.clip(np.asarray(action, dtype=np.float32), -1.0, 1.0)
        user_input = Vector(float(action[0]), float(action[1]))

        scores_before = (self.match.player_score, self.match.ai_score)
        self.match.tick(STEP_DT, user_input)
        self.steps += 1

        player_goals = self.match.player_score - scores_before[0]
        ai_goals = self.match.ai_score - scores_before[1]

        reward = float(player_goals - ai_goals)
        reward -= DISTANCE_PENALTY * self.match.user_agent.distance_to_ball() / self.config.field.HALF_WIDTH

        terminated = player_goals > 0 or ai_goals > 0
        truncated = not terminated and self.steps >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _get_observation(self) -> np.ndarray:
        return self.observation_builder.build_observation(self.match, self.steps, self.max_steps)

    def _get_info(self) -> Dict[str, Any]:
        return {
            'player_score': self.match.player_score,
            'ai_score': self.match.ai_score,
            'episode_steps': self.steps,
            'elapsed': self.match.elapsed,
        }

    def render(self):
        """Render the environment"""
        if self.render_mode != "human":
            return

        if self.screen is None:
            pygame.init()
            visual = self.config.visual
            self.screen = pygame.display.set_mode((visual.SCREEN_WIDTH, visual.SCREEN_HEIGHT))
            pygame.display.set_caption("Arcade Football Training")
            self.clock = pygame.time.Clock()
            self.renderer = MatchRenderer(self.config)

        pygame.event.pump()
        self.renderer.draw(self.screen, self.match)
        pygame.display.flip()
        self.clock.tick(self.metadata["render_fps"])

    def close(self):
        """Clean up resources"""
        if self.screen is not None:
            pygame.quit()
            self.screen = None
