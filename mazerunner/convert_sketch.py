"""Turning a text sketch of the maze into a map and start positions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from mazerunner.board import CELL_SIZE, MAP_HEIGHT, MAP_WIDTH, Cell, Grid, Position, empty_map

_CELL_CHARS = {
    "#": Cell.WALL,
    "=": Cell.DOOR,
    ".": Cell.PELLET,
    "o": Cell.ENERGIZER,
}
_GHOST_CHARS = "0123"


@dataclass
class Sketch:
    """A map read from a sketch with the start positions found in it."""

    grid: Grid
    ghost_positions: list[Position] = field(default_factory=lambda: [Position() for _ in range(4)])
    pacman_position: Position | None = None


def convert_sketch(sketch: Sequence[str]) -> Sketch:
    """Read ``MAP_HEIGHT`` rows of at least ``MAP_WIDTH`` characters.

    ``#`` is a wall, ``=`` a door, ``.`` a pellet, ``o`` an energizer,
    ``0``-``3`` mark ghost starts and ``P`` marks Pacman's start.
    """
    if len(sketch) != MAP_HEIGHT:
        raise ValueError(f"sketch must have {MAP_HEIGHT} rows, got {len(sketch)}")

    result = Sketch(grid=empty_map())
    for row_index, row in enumerate(sketch):
        if len(row) < MAP_WIDTH:
            raise ValueError(f"sketch row {row_index} is shorter than {MAP_WIDTH} characters")
        for column_index, char in enumerate(row[:MAP_WIDTH]):
            here = Position(CELL_SIZE * column_index, CELL_SIZE * row_index)
            if char in _CELL_CHARS:
                result.grid[column_index][row_index] = _CELL_CHARS[char]
            elif char in _GHOST_CHARS:
                result.ghost_positions[int(char)] = here
            elif char == "P":
                result.pacman_position = here
    return result