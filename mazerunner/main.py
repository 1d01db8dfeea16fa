"""Window setup and the main loop."""

from __future__ import annotations

import argparse
import string
from collections.abc import Sequence

import pygame

from mazerunner.game import Game

WINDOW_SIZE = (800, 600)
FRAME_RATE = 60


def _key_names() -> dict[int, str]:
    names = {getattr(pygame, f"K_{letter}"): letter for letter in string.ascii_lowercase}
    names.update(
        {
            pygame.K_UP: "up",
            pygame.K_DOWN: "down",
            pygame.K_LEFT: "left",
            pygame.K_RIGHT: "right",
            pygame.K_RETURN: "enter",
            pygame.K_ESCAPE: "escape",
        }
    )
    return names


def _pressed_keys(state, names: dict[int, str]) -> frozenset[str]:
    return frozenset(name for key, name in names.items() if state[key])


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="mazerunner", description="Run the maze game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Maze Runner")
        ticker = pygame.time.Clock()
        names = _key_names()
        game = Game(screen)
        window_open = True
        while window_open and game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    window_open = False
            game.update(_pressed_keys(pygame.key.get_pressed(), names))
            screen.fill((0, 0, 0))
            game.draw()
            pygame.display.flip()
            ticker.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())