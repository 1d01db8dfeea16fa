"""Collision of a cell-sized body with the map, and pellet collection."""

from __future__ import annotations

import math

from mazerunner.board import CELL_SIZE, MAP_HEIGHT, MAP_WIDTH, Cell, Grid


def map_collision(collect_pellets: bool, use_door: bool, x: int, y: int, grid: Grid) -> bool:
    """Check the cells covered by a body at pixel position ``(x, y)``.

    Without ``collect_pellets`` this reports whether the body touches a wall,
    or a door when ``use_door`` is false. With ``collect_pellets`` the pellets
    and energizers under the body are removed from ``grid`` and the result
    tells whether an energizer was eaten.
    """
    cell_x = x / CELL_SIZE
    cell_y = y / CELL_SIZE
    low_x, high_x = math.floor(cell_x), math.ceil(cell_x)
    low_y, high_y = math.floor(cell_y), math.ceil(cell_y)

    hit = False
    for cx, cy in ((low_x, low_y), (high_x, low_y), (low_x, high_y), (high_x, high_y)):
        if not (0 <= cx < MAP_WIDTH and 0 <= cy < MAP_HEIGHT):
            continue
        cell = grid[cx][cy]
        if collect_pellets:
            if cell is Cell.ENERGIZER:
                hit = True
                grid[cx][cy] = Cell.EMPTY
            elif cell is Cell.PELLET:
                grid[cx][cy] = Cell.EMPTY
        elif cell is Cell.WALL or (not use_door and cell is Cell.DOOR):
            hit = True
    return hit