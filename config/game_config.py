"""
Game Configuration Constants

This module centralizes all game constants and configuration values for the
simulation and its pygame host. Keeping them in one place makes it easy to
tune game balance without touching the simulation code.

**Categories**:
1. **Field**: Half extents of the playing area
2. **Ball**: Radius, friction, bounce damping
3. **Agents**: Speeds, kick range and power for user and AI agents
4. **Reactive AI**: Think interval, goalkeeper and field agent zones
5. **Goals**: Rectangle size and placement
6. **Visual**: Window size, zoom, colors, fonts
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldConfig:
    """Field dimensions (origin at the center of the pitch)"""
    HALF_WIDTH: float = 960.0
    HALF_HEIGHT: float = 540.0


@dataclass(frozen=True)
class BallConfig:
    """Ball physics constants"""
    RADIUS: float = 12.0
    FRICTION: float = 0.95          # Applied once per tick, not per second
    BOUNCE_DAMPING: float = 0.7
    REST_SPEED: float = 0.1         # Below this the ball stops


@dataclass(frozen=True)
class AgentConfig:
    """Shared agent body constants and per-variant movement/kick values"""
    RADIUS: float = 20.0
    KICK_RANGE: float = 30.0

    USER_SPEED: float = 200.0
    USER_KICK_POWER: float = 300.0

    AI_SPEED: float = 180.0
    AI_KICK_POWER: float = 280.0


@dataclass(frozen=True)
class ReactiveConfig:
    """Reactive AI targeting constants"""
    THINK_INTERVAL: float = 0.5
    ARRIVAL_DISTANCE: float = 0.5

    DEFENDING_GOAL_X: float = 850.0
    ATTACKING_GOAL_X: float = 960.0

    # Goalkeeper
    KEEPER_ENGAGE_DISTANCE: float = 300.0
    KEEPER_BALL_WEIGHT: float = 0.7
    KEEPER_GOAL_WEIGHT: float = 0.3
    KEEPER_MIN_X: float = 700.0     # Mirrored for the blue keeper
    KEEPER_MAX_X: float = 950.0
    KEEPER_MAX_Y: float = 150.0

    # Field agents
    CHASE_DISTANCE: float = 50.0
    FIELD_FORWARD_LIMIT_X: float = 950.0   # Toward the attacked goal
    FIELD_BACK_LIMIT_X: float = 600.0      # Toward the defended goal
    JITTER_SCALE: float = 0.1


@dataclass(frozen=True)
class GoalConfig:
    """Goal rectangles, centered on the left and right field edges"""
    CENTER_X: float = 960.0
    CENTER_Y: float = 0.0
    WIDTH: float = 300.0
    HEIGHT: float = 200.0


@dataclass(frozen=True)
class VisualConfig:
    """Visual rendering constants"""
    SCREEN_WIDTH: int = 1280
    SCREEN_HEIGHT: int = 720
    ZOOM: float = 0.8
    FPS: int = 60
    FONT_SIZE: int = 36
    PITCH_COLOR: Tuple[int, int, int] = (46, 125, 50)
    LINE_COLOR: Tuple[int, int, int] = (255, 255, 255)
    BALL_COLOR: Tuple[int, int, int] = (255, 255, 255)
    BLUE_COLOR: Tuple[int, int, int] = (33, 150, 243)
    RED_COLOR: Tuple[int, int, int] = (244, 67, 54)
    LEFT_GOAL_COLOR: Tuple[int, int, int, int] = (100, 181, 246, 178)
    RIGHT_GOAL_COLOR: Tuple[int, int, int, int] = (229, 115, 115, 178)
    TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
    BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)


class GameConfig:
    """
    Central game configuration container.

    **Usage**:
    ```python
    from config.game_config import GameConfig

    config = GameConfig()
    half_width = config.field.HALF_WIDTH
    kick_power = config.agents.USER_KICK_POWER
    ```
    """

    def __init__(self, visual: VisualConfig = None):
        self.field = FieldConfig()
        self.ball = BallConfig()
        self.agents = AgentConfig()
        self.reactive = ReactiveConfig()
        self.goals = GoalConfig()
        self.visual = visual or VisualConfig()

    @classmethod
    def create_default(cls) -> 'GameConfig':
        """Create default game configuration"""
        return cls()

    @classmethod
    def create_for_display(cls, width: int, height: int, zoom: float, fps: int) -> 'GameConfig':
        """Create configuration with a custom window for the pygame host"""
        return cls(visual=VisualConfig(SCREEN_WIDTH=width, SCREEN_HEIGHT=height, ZOOM=zoom, FPS=fps))
