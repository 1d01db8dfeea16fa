"""Loading maze levels from text files and querying them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pygame

from mazerunner.actor import FloatRect, Vec2
from mazerunner.utils import executable_dir

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0
LEVEL_TIMES = (20.0, 30.0, 40.0)

_WALL_COLOR = (0, 0, 255)
_END_COLOR = (255, 255, 0)


def _to_rect(box: FloatRect) -> pygame.Rect:
    return pygame.Rect(round(box.left), round(box.top), round(box.width), round(box.height))


class LevelManager:
    """The current maze: walls, start, end tile and trap positions.

    In a level file ``w`` is a wall, ``S`` the start, ``E`` the end and
    ``.`` or ``T`` a trap; the maze is centred in the window.
    """

    CELL_SIZE = 32

    def __init__(self, base_dir: str | Path | None = None) -> None:
        base = Path(executable_dir() if base_dir is None else base_dir)
        self.level_files = [base / "Resources" / "Level" / f"level{n}.txt" for n in (1, 2, 3)]
        self.current_level = 0
        self.walls: list[FloatRect] = []
        self.trap_positions: list[Vec2] = []
        self.start_position = Vec2()
        self.end_position = Vec2()
        self.end_tile = FloatRect(0.0, 0.0, 0.0, 0.0)
        self.load_maze_from_file(self.level_files[0])

    @staticmethod
    def _read_lines(filename: Path) -> list[str] | None:
        for candidate in (filename, Path(filename.name)):
            try:
                text = candidate.read_text()
            except OSError:
                continue
            lines = text.split("\n")
            if lines and lines[-1] == "":
                lines.pop()
            return lines
        return None

    def load_maze_from_file(self, filename: str | Path) -> None:
        """Replace the walls and traps with those of ``filename``.

        If the file is missing, its base name is tried in the current
        directory; if that fails too the level stays empty.
        """
        filename = Path(filename)
        self.walls = []
        self.trap_positions = []
        layout = self._read_lines(filename)
        if layout is None:
            logger.error("Failed to open maze file: %s", filename)
            return
        if not layout:
            return

        size = self.CELL_SIZE
        half = size / 2.0
        offset_x = (WINDOW_WIDTH - len(layout[0]) * size) / 2.0
        offset_y = (WINDOW_HEIGHT - len(layout) * size) / 2.0

        for row, line in enumerate(layout):
            for column, char in enumerate(line):
                left = column * size + offset_x
                top = row * size + offset_y
                centre = Vec2(left + half, top + half)
                if char == "w":
                    self.walls.append(FloatRect(left, top, size, size))
                elif char == "S":
                    self.start_position = centre
                elif char == "E":
                    self.end_position = centre
                    self.end_tile = FloatRect(centre.x - half, centre.y - half, size, size)
                elif char in ".T":
                    self.trap_positions.append(centre)

        logger.debug("Player start position: (%s, %s)", self.start_position.x, self.start_position.y)
        for wall in self.walls:
            logger.debug("Wall at: (%s, %s)", wall.left, wall.top)

    def reset(self) -> None:
        """Go back to the first level."""
        self.current_level = 0
        self.load_maze_from_file(self.level_files[0])

    def load_next_level(self) -> None:
        """Advance to the next level, wrapping after the last."""
        self.current_level = (self.current_level + 1) % len(self.level_files)
        self.load_maze_from_file(self.level_files[self.current_level])

    def draw(self, surface: Any) -> None:
        """Draw the walls in blue and the end tile in yellow."""
        for wall in self.walls:
            pygame.draw.rect(surface, _WALL_COLOR, _to_rect(wall))
        if self.end_tile.width > 0 and self.end_tile.height > 0:
            pygame.draw.rect(surface, _END_COLOR, _to_rect(self.end_tile))

    def is_wall(self, x: float, y: float) -> bool:
        """True when the point lies inside any wall."""
        return any(wall.contains(x, y) for wall in self.walls)

    def is_end(self, x: float, y: float) -> bool:
        """True when the point lies on the end tile."""
        return self.end_tile.contains(x, y)

    def level_time(self) -> float:
        """Seconds allowed for the current level."""
        seconds = LEVEL_TIMES[min(self.current_level, len(LEVEL_TIMES) - 1)]
        logger.debug("Level %d timer: %s seconds", self.current_level + 1, seconds)
        return seconds