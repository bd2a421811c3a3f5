"""
Team Management System

This module handles team creation and player organization. A team is a fixed
roster of four agents: one goalkeeper and three field agents, any of which may
be the user-controlled agent instead of a reactive one.

**Key Features**:
- Default formations for the blue (user) and red (AI) sides
- Agent construction with stable, creation-ordered ids
- Roster invariant checks at construction time
- Starting position resets
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from ai.reactive_control import ReactiveControl
from common.Vector import Vector
from config.game_config import GameConfig
from player.agent import Agent, TeamColor
from player.user_control import UserControl

TEAM_SIZE = 4


class Role(Enum):
    GOALKEEPER = "goalkeeper"
    FIELD = "field"
    USER = "user"


@dataclass
class FormationSlot:
    """Starting spot and role for one roster position."""
    position: Vector
    role: Role


BLUE_FORMATION = [
    FormationSlot(Vector(-850, 0), Role.GOALKEEPER),
    FormationSlot(Vector(-200, 0), Role.USER),        # Center of the left half
    FormationSlot(Vector(-300, -150), Role.FIELD),
    FormationSlot(Vector(-300, 150), Role.FIELD),
]

RED_FORMATION = [
    FormationSlot(Vector(850, 0), Role.GOALKEEPER),
    FormationSlot(Vector(200, 0), Role.FIELD),         # Center of the right half
    FormationSlot(Vector(300, -150), Role.FIELD),
    FormationSlot(Vector(300, 150), Role.FIELD),
]


class Team:
    """
    Fixed four-agent roster for one side of the match.

    **Team Layouts**:
    - Blue: defends the left goal, attacks right, carries the user agent
    - Red: defends the right goal, attacks left, fully reactive
    """
    def __init__(self, color: TeamColor, formation: List[FormationSlot], ball, pitch,
                 id_source: Iterator[int], config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig.create_default()
        self.color = color
        self._formation = formation
        self._validate_formation()
        self._players = [self._create_agent(slot, next(id_source), ball, pitch) for slot in formation]

    def _validate_formation(self):
        if len(self._formation) != TEAM_SIZE:
            raise ValueError(f"A team needs exactly {TEAM_SIZE} agents, got {len(self._formation)}")
        keepers = sum(1 for slot in self._formation if slot.role is Role.GOALKEEPER)
        if keepers != 1:
            raise ValueError(f"A team needs exactly one goalkeeper, got {keepers}")

    def _create_agent(self, slot: FormationSlot, agent_id: int, ball, pitch) -> Agent:
        agents = self.config.agents
        if slot.role is Role.USER:
            return Agent(agent_id, self.color, slot.position, UserControl(), ball, pitch,
                         speed=agents.USER_SPEED, kick_power=agents.USER_KICK_POWER, config=self.config)
        control = ReactiveControl(slot.position, is_goalkeeper=slot.role is Role.GOALKEEPER, config=self.config)
        return Agent(agent_id, self.color, slot.position, control, ball, pitch,
                     speed=agents.AI_SPEED, kick_power=agents.AI_KICK_POWER, config=self.config)

    def players(self) -> List[Agent]:
        return self._players

    def goalkeeper(self) -> Agent:
        return next(player for player in self._players if player.is_goalkeeper)

    def user_agents(self) -> List[Agent]:
        return [player for player in self._players if player.is_user]

