"""The four ghosts together and the scatter/chase waves."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

import pygame

from mazerunner.board import (
    CHASE_DURATION,
    LONG_SCATTER_DURATION,
    SHORT_SCATTER_DURATION,
    Grid,
    Position,
)
from mazerunner.ghost import Ghost

if TYPE_CHECKING:
    from mazerunner.pacman import Pacman

_LAST_WAVE = 7


class GhostManager:
    """Owns the ghosts and switches them between scatter and chase."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.current_wave = 0
        self.wave_timer = LONG_SCATTER_DURATION
        self.ghosts = [Ghost(ghost_id, rng) for ghost_id in range(4)]

    def draw(self, flash: bool, surface: pygame.Surface) -> None:
        """Draw every ghost."""
        for ghost in self.ghosts:
            ghost.draw(flash, surface)

    def reset(self, level: int, ghost_positions: Sequence[Position]) -> None:
        """Put the ghosts at their starts and restart the waves."""
        if len(ghost_positions) != len(self.ghosts):
            raise ValueError(f"expected {len(self.ghosts)} ghost positions, got {len(ghost_positions)}")
        self.current_wave = 0
        self.wave_timer = int(LONG_SCATTER_DURATION / 2**level)

        for ghost, start in zip(self.ghosts, ghost_positions):
            ghost.position = Position(start.x, start.y)

        for ghost in self.ghosts:
            ghost.reset(self.ghosts[2].position, self.ghosts[0].position)

    def update(self, level: int, grid: Grid, pacman: Pacman) -> None:
        """Advance the wave timer and every ghost by one frame."""
        if pacman.energizer_timer == 0:
            if self.wave_timer == 0:
                if self.current_wave < _LAST_WAVE:
                    self.current_wave += 1
                    for ghost in self.ghosts:
                        ghost.switch_mode()

                if self.current_wave % 2 == 1:
                    self.wave_timer = CHASE_DURATION
                elif self.current_wave == 2:
                    self.wave_timer = int(LONG_SCATTER_DURATION / 2**level)
                else:
                    self.wave_timer = int(SHORT_SCATTER_DURATION / 2**level)
            else:
                self.wave_timer -= 1

        for ghost in self.ghosts:
            ghost.update(level, grid, self.ghosts[0], pacman)