"""
Main game file for the Arcade Football match

This is the entry point for the game that features:
- One user-controlled blue agent driven by arrow keys / WASD
- Seven reactive AI agents (three blue team mates, four red opponents)
- A camera that follows the user agent across the 1920x1080 pitch
- Goal detection and a live score line

The game loop measures the real frame time and hands it to the simulation as
`dt` once per frame; rendering only reads simulation state.
"""

import argparse
import sys

import pygame

from config.game_config import GameConfig
from drawing.drawing import MatchRenderer
from game.match import MatchSimulation
from player.input_source import KeyboardInputSource


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Arcade Football: 4-a-side against reactive AI")
    parser.add_argument("--fps", type=int, default=60, help="Target frame rate")
    parser.add_argument("--zoom", type=float, default=0.8, help="Camera zoom factor")
    parser.add_argument("--width", type=int, default=1280, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=720, help="Window height in pixels")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = GameConfig.create_for_display(args.width, args.height, args.zoom, args.fps)

    # === PYGAME INITIALIZATION ===
    pygame.init()
    screen = pygame.display.set_mode((config.visual.SCREEN_WIDTH, config.visual.SCREEN_HEIGHT))
    pygame.display.set_caption("Arcade Football")
    clock = pygame.time.Clock()

    # === GAME OBJECTS CREATION ===
    match = MatchSimulation(config)
    renderer = MatchRenderer(config)
    input_source = KeyboardInputSource()
    print(f"Match started - {len(match.agents())} agents, target {config.visual.FPS} FPS")
    print("Arrow keys / WASD to move and kick, BACKSPACE for a new match")

    # === MAIN GAME LOOP ===
    while True:
        # Real elapsed frame time in seconds
        dt = clock.tick(config.visual.FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            if event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
                match = MatchSimulation(config)
                print("New match")

        keys = pygame.key.get_pressed()
        score_before = match.score_str()
        match.tick(dt, input_source.get_direction(keys))
        if match.score_str() != score_before:
            print(f"GOAL! {match.get_elapsed_time_str()}  player {match.score_str()} ai")

        renderer.draw(screen, match)
        pygame.display.flip()


if __name__ == "__main__":
    main()
