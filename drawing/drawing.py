"""
Match Rendering System

This module draws a MatchSimulation onto a pygame surface. The view follows
the simulation's camera target at a fixed zoom, so only part of the
1920x1080 pitch is visible at once.

**Responsibility**: Visual rendering and display (read-only access to the match)
**Dependencies**: pygame, GameConfig
"""

from typing import Tuple

import pygame

from common.Vector import Vector
from config.game_config import GameConfig
from player.agent import TeamColor
from stadium.goal import GoalSide


class MatchRenderer:
    """
    Draws pitch, goals, ball, agents and the score line.

    **Usage**:
    ```python
    renderer = MatchRenderer(config)
    renderer.draw(screen, match)
    ```
    """

    def __init__(self, config: GameConfig = None):
        self.config = config or GameConfig.create_default()
        self._font = None
        self.team_colors = {
            TeamColor.BLUE: pygame.Color(*self.config.visual.BLUE_COLOR),
            TeamColor.RED: pygame.Color(*self.config.visual.RED_COLOR),
        }

    @property
    def font(self) -> pygame.font.Font:
        """Lazy-loaded font; pygame.font must be initialised first"""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self.config.visual.FONT_SIZE)
        return self._font

    def world_to_screen(self, position: Vector, camera: Vector, surface_size: Tuple[int, int]) -> Tuple[int, int]:
        zoom = self.config.visual.ZOOM
        width, height = surface_size
        return (int(width / 2 + (position.x - camera.x) * zoom),
                int(height / 2 + (position.y - camera.y) * zoom))

    def draw(self, surface: pygame.Surface, match) -> None:
        camera = match.camera_target
        size = surface.get_size()

        surface.fill(self.config.visual.BACKGROUND_COLOR)
        self.draw_pitch(surface, match, camera, size)
        for goal in match.pitch.goals():
            self.draw_goal(surface, goal, camera, size)
        self.draw_ball(surface, match.ball, camera, size)
        for agent in match.agents():
            self.draw_agent(surface, agent, camera, size)
        self.draw_score(surface, match)

    def draw_pitch(self, surface, match, camera, size):
        visual = self.config.visual
        zoom = visual.ZOOM
        half_w = match.pitch.half_width
        half_h = match.pitch.half_height

        top_left = self.world_to_screen(Vector(-half_w, -half_h), camera, size)
        rect = pygame.Rect(top_left[0], top_left[1], int(2 * half_w * zoom), int(2 * half_h * zoom))
        pygame.draw.rect(surface, visual.PITCH_COLOR, rect)
        pygame.draw.rect(surface, visual.LINE_COLOR, rect, 3)

        # Midfield line
        pygame.draw.line(surface, visual.LINE_COLOR,
                         self.world_to_screen(Vector(0, -half_h), camera, size),
                         self.world_to_screen(Vector(0, half_h), camera, size), 3)
        # Center circle
        pygame.draw.circle(surface, visual.LINE_COLOR,
                           self.world_to_screen(Vector(0, 0), camera, size), int(90 * zoom), 3)

    def draw_goal(self, surface, goal, camera, size):
        zoom = self.config.visual.ZOOM
        color = self.config.visual.LEFT_GOAL_COLOR if goal.side is GoalSide.LEFT else self.config.visual.RIGHT_GOAL_COLOR
        top_left = self.world_to_screen(Vector(goal.left, goal.top), camera, size)
        width = int(2 * goal.half_size.x * zoom)
        height = int(2 * goal.half_size.y * zoom)

        # Translucent fill needs its own per-pixel alpha surface
        overlay = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
        overlay.fill(color)
        surface.blit(overlay, top_left)

    def draw_ball(self, surface, ball, camera, size):
        center = self.world_to_screen(ball.position, camera, size)
        radius = max(1, int(ball.radius * self.config.visual.ZOOM))
        pygame.draw.circle(surface, self.config.visual.BALL_COLOR, center, radius)

    def draw_agent(self, surface, agent, camera, size):
        center = self.world_to_screen(agent.position, camera, size)
        radius = max(1, int(agent.radius * self.config.visual.ZOOM))
        pygame.draw.circle(surface, self.team_colors[agent.team], center, radius)
        if agent.is_user:
            pygame.draw.circle(surface, self.config.visual.LINE_COLOR, center, radius + 2, 2)

    def draw_score(self, surface, match):
        display_str = f"{match.get_elapsed_time_str()}   {match.score_str()}"
        text_surface = self.font.render(display_str, True, self.config.visual.TEXT_COLOR)
        text_rect = text_surface.get_rect(center=(surface.get_width() // 2, 20))
        surface.blit(text_surface, text_rect)
