"""Drawing the maze: walls, doors, pellets and energizers."""

from __future__ import annotations

import functools
import os

import pygame

from mazerunner.board import CELL_SIZE, MAP_HEIGHT, MAP_WIDTH, Cell, Grid


@functools.lru_cache(maxsize=None)
def _load_cached(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error):
        return None


def _load_texture(relative_path: str) -> pygame.Surface | None:
    return _load_cached(os.path.abspath(relative_path))


def wall_tile_index(grid: Grid, x: int, y: int) -> int:
    """Index of the wall tile for cell ``(x, y)`` from its wall neighbours.

    The map's left and right edges count as walls; the top and bottom do not.
    """
    down = y < MAP_HEIGHT - 1 and grid[x][y + 1] is Cell.WALL
    left = x == 0 or grid[x - 1][y] is Cell.WALL
    right = x == MAP_WIDTH - 1 or grid[x + 1][y] is Cell.WALL
    up = y > 0 and grid[x][y - 1] is Cell.WALL
    return int(down) + 2 * (int(left) + 2 * (int(right) + 2 * int(up)))


def _tile_area(grid: Grid, x: int, y: int) -> pygame.Rect | None:
    cell = grid[x][y]
    if cell is Cell.DOOR:
        return pygame.Rect(2 * CELL_SIZE, CELL_SIZE, CELL_SIZE, CELL_SIZE)
    if cell is Cell.ENERGIZER:
        return pygame.Rect(CELL_SIZE, CELL_SIZE, CELL_SIZE, CELL_SIZE)
    if cell is Cell.PELLET:
        return pygame.Rect(0, CELL_SIZE, CELL_SIZE, CELL_SIZE)
    if cell is Cell.WALL:
        return pygame.Rect(CELL_SIZE * wall_tile_index(grid, x, y), 0, CELL_SIZE, CELL_SIZE)
    return None


def draw_map(grid: Grid, surface: pygame.Surface) -> None:
    """Draw every non-empty cell of ``grid`` onto ``surface``."""
    texture = _load_texture(f"Resources/Images/Map{CELL_SIZE}.png")
    if texture is None:
        return
    for x in range(MAP_WIDTH):
        for y in range(MAP_HEIGHT):
            area = _tile_area(grid, x, y)
            if area is not None:
                surface.blit(texture, (CELL_SIZE * x, CELL_SIZE * y), area)