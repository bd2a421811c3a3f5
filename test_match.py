"""
Test the match simulation, its host-facing helpers and the training environment.

This script tests:
1. Roster invariants and construction errors
2. Tick ordering, scoring through tick, camera target and timers
3. Determinism and long-run stability
4. Keyboard input mapping
5. Observation builder and MatchEnv step/reset
6. Rendering onto an off-screen surface
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import math
from collections import defaultdict

import numpy as np
import pygame
import pytest

from ai.match_env import MatchEnv
from ai.observation_builder import OBSERVATION_SIZE, ObservationBuilder
from common.Vector import Vector
from config.game_config import GameConfig
from drawing.drawing import MatchRenderer
from game.match import MatchSimulation
from player.input_source import KeyboardInputSource
from player.team import BLUE_FORMATION, RED_FORMATION, FormationSlot, Role


def _hold_all(match):
    for agent in match.reactive_agents():
        agent.control.target_position = agent.position.copy()


# === MATCH SETUP ===

def test_match_roster_invariants():
    match = MatchSimulation()
    for team in (match.blue_team, match.red_team):
        players = team.players()
        assert len(players) == 4
        assert sum(1 for p in players if p.is_goalkeeper) == 1
        assert sum(1 for p in players if not p.is_goalkeeper) == 3

    assert [a.agent_id for a in match.agents()] == list(range(8))
    assert match.user_agent in match.blue_team.players()
    assert match.player_score == 0 and match.ai_score == 0


def test_team_needs_one_goalkeeper():
    two_keepers = [FormationSlot(Vector(-850, 0), Role.GOALKEEPER)] + BLUE_FORMATION[:3]
    with pytest.raises(ValueError):
        MatchSimulation(blue_formation=two_keepers)


def test_team_needs_four_agents():
    with pytest.raises(ValueError):
        MatchSimulation(blue_formation=BLUE_FORMATION[:3])


def test_match_needs_exactly_one_user():
    mirrored = [FormationSlot(Vector(-slot.position.x, slot.position.y), slot.role) for slot in RED_FORMATION]
    with pytest.raises(ValueError):
        MatchSimulation(blue_formation=mirrored)


# === TICKING ===

def test_kick_and_displacement_in_same_tick():
    match = MatchSimulation()
    match.user_agent.position = Vector(0, 0)
    match.ball.position = Vector(25, 0)

    match.tick(0.1, Vector(1, 0))

    # Kicked to 300, moved 30 this tick, then friction
    assert math.isclose(match.ball.position.x, 55.0)
    assert math.isclose(match.ball.velocity.x, 285.0)


def test_last_agent_in_range_wins_the_ball():
    match = MatchSimulation()
    blue = match.blue_team.players()[2]
    red = match.red_team.players()[2]
    blue.position = Vector(0, 0)
    red.position = Vector(10, 0)
    match.ball.position = Vector(5, 0)
    _hold_all(match)

    match.tick(0.01, Vector(0, 0))

    # Red updates after blue and aims left
    assert match.ball.velocity.x < 0


def test_goal_through_tick_resets_ball():
    match = MatchSimulation()
    match.ball.position = Vector(950, 0)

    match.tick(1 / 60)

    assert match.player_score == 1
    assert match.ball.position == Vector(0, 0)
    assert match.ball.velocity == Vector(0, 0)
    assert match.score_str() == "1 : 0"


def test_camera_target_follows_user_and_is_clamped():
    match = MatchSimulation()
    assert match.camera_target == Vector(-200, 0)

    match.user_agent.position = Vector(1200, -700)
    match.tick(1 / 60)

    assert match.camera_target == Vector(960, -540)
    assert match.user_agent.position == Vector(1200, -700)


def test_zero_dt_tick_still_applies_friction_and_kicks():
    match = MatchSimulation()
    match.ball.velocity = Vector(100, 0)
    match.tick(0)

    assert match.ticks == 1
    assert math.isclose(match.ball.velocity.x, 95.0)

    # A zero-length frame still lets the user kick; the ball does not travel
    match = MatchSimulation()
    _hold_all(match)
    match.user_agent.position = Vector(0, 0)
    match.ball.position = Vector(25, 0)
    match.tick(0.0, Vector(1, 0))

    assert math.isclose(match.ball.velocity.x, 285.0)
    assert match.ball.velocity.y == 0
    assert match.ball.position == Vector(25, 0)
    assert match.user_agent.position == Vector(0, 0)


def test_negative_dt_is_ignored():
    match = MatchSimulation()
    match.ball.velocity = Vector(100, 0)
    match.tick(-0.5)

    assert match.ticks == 0
    assert match.ball.velocity == Vector(100, 0)


def test_elapsed_time_string():
    match = MatchSimulation()
    for _ in range(2):
        match.tick(45.0)
    assert match.get_elapsed_time_str() == "01:30"


def test_ball_never_speeds_up_without_kick():
    match = MatchSimulation()
    match.ball.velocity = Vector(400, 120)
    previous = match.ball.velocity.length()
    for _ in range(30):
        match.ball.update(1 / 60)
        assert match.ball.velocity.length() <= previous
        previous = match.ball.velocity.length()


def test_simulation_is_deterministic():
    inputs = [Vector(math.cos(i / 10), math.sin(i / 7)) for i in range(600)]

    def run():
        match = MatchSimulation()
        for direction in inputs:
            match.tick(1 / 60, direction)
        return ([a.position.as_tuple() for a in match.agents()],
                match.ball.position.as_tuple(), match.player_score, match.ai_score)

    assert run() == run()


def test_long_run_stays_in_bounds():
    match = MatchSimulation()
    for i in range(1800):
        match.tick(1 / 60, Vector(1, 0) if i % 200 < 100 else Vector(0, 0))
        assert abs(match.ball.position.x) <= 960 and abs(match.ball.position.y) <= 540
        assert not math.isnan(match.ball.position.x)
        for agent in match.agents():
            assert abs(agent.position.x) < 940 and abs(agent.position.y) < 520
    assert match.player_score >= 0 and match.ai_score >= 0


# === INPUT ===

def test_keyboard_directions():
    source = KeyboardInputSource()

    keys = defaultdict(bool)
    assert source.get_direction(keys) == Vector(0, 0)

    keys[pygame.K_RIGHT] = True
    assert source.get_direction(keys) == Vector(1, 0)

    keys[pygame.K_UP] = True
    diagonal = source.get_direction(keys)
    assert math.isclose(diagonal.length(), 1.0)
    assert diagonal.x > 0 and diagonal.y < 0

    keys[pygame.K_LEFT] = True
    assert source.get_direction(keys) == Vector(0, -1)

    keys = defaultdict(bool, {pygame.K_w: True, pygame.K_UP: True})
    assert source.get_direction(keys) == Vector(0, -1)


# === ENVIRONMENT ===

def test_observation_shape_and_range():
    match = MatchSimulation()
    obs = ObservationBuilder().build_observation(match, 0, 100)

    assert obs.shape == (OBSERVATION_SIZE,)
    assert obs.dtype == np.float32
    assert np.all(np.abs(obs) <= 1.0)
    assert math.isclose(obs[4], -850 / 960, rel_tol=1e-6)    # blue keeper
    assert math.isclose(obs[6], -200 / 960, rel_tol=1e-6)    # user agent


def test_env_reset_and_truncation():
    env = MatchEnv(max_steps=3)
    obs, info = env.reset(seed=0)
    assert obs.shape == (OBSERVATION_SIZE,)
    assert info['player_score'] == 0

    truncated = False
    for _ in range(3):
        obs, reward, terminated, truncated, info = env.step(np.array([0.0, 0.0], dtype=np.float32))
        assert not terminated
        assert reward <= 0
    assert truncated
    assert info['episode_steps'] == 3
    env.close()


def test_env_terminates_on_goal():
    env = MatchEnv()
    env.reset()
    env.match.ball.position = Vector(950, 0)

    obs, reward, terminated, truncated, info = env.step([0.0, 0.0])

    assert terminated and not truncated
    assert info['player_score'] == 1
    assert 0.99 < reward <= 1.0
    env.close()


# === RENDERING ===

def test_renderer_draws_user_at_screen_center():
    config = GameConfig()
    renderer = MatchRenderer(config)
    match = MatchSimulation(config)
    surface = pygame.Surface((320, 180))

    renderer.draw(surface, match)

    assert tuple(surface.get_at((160, 90)))[:3] == config.visual.BLUE_COLOR
    assert renderer.world_to_screen(Vector(100, 0), Vector(0, 0), (320, 180)) == (240, 90)


if __name__ == "__main__":
    tests = [value for name, value in sorted(globals().items()) if name.startswith("test_")]
    for test in tests:
        test()
        print(f"OK {test.__name__}")
    print(f"All {len(tests)} match tests passed")
