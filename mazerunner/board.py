"""Grid constants, map cells and integer positions for the arcade board."""

from __future__ import annotations

import enum
from dataclasses import dataclass

CELL_SIZE = 16
FONT_HEIGHT = 16
GHOST_1_CHASE = 2
GHOST_2_CHASE = 1
GHOST_3_CHASE = 4
GHOST_ANIMATION_FRAMES = 6
GHOST_ANIMATION_SPEED = 4
GHOST_ESCAPE_SPEED = 4
GHOST_FRIGHTENED_SPEED = 3
GHOST_SPEED = 1
MAP_HEIGHT = 21
MAP_WIDTH = 21
PACMAN_ANIMATION_FRAMES = 6
PACMAN_ANIMATION_SPEED = 4
PACMAN_DEATH_FRAMES = 12
PACMAN_SPEED = 2
SCREEN_RESIZE = 2

# Durations are counted in frames.
CHASE_DURATION = 1024
ENERGIZER_DURATION = 512
FRAME_DURATION = 16667
GHOST_FLASH_START = 64
LONG_SCATTER_DURATION = 512
SHORT_SCATTER_DURATION = 256

# Direction codes: 0 right, 1 up, 2 left, 3 down.
RIGHT, UP, LEFT, DOWN = range(4)
_STEPS = {RIGHT: (1, 0), UP: (0, -1), LEFT: (-1, 0), DOWN: (0, 1)}


class Cell(enum.Enum):
    """What occupies one square of the map."""

    DOOR = 0
    EMPTY = 1
    ENERGIZER = 2
    PELLET = 3
    WALL = 4


@dataclass(frozen=True)
class Position:
    """A point on the board in pixels."""

    x: int = 0
    y: int = 0

    def moved(self, direction: int, distance: int) -> Position:
        """Return the position shifted by ``distance`` in ``direction``.

        An unknown direction leaves the position where it is.
        """
        dx, dy = _STEPS.get(direction, (0, 0))
        return Position(self.x + dx * distance, self.y + dy * distance)


Grid = list[list[Cell]]


def empty_map() -> Grid:
    """Return a map of empty cells, indexed as ``grid[x][y]``."""
    return [[Cell.EMPTY] * MAP_HEIGHT for _ in range(MAP_WIDTH)]