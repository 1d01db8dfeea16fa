"""The player-controlled Pacman: movement, energizers and animation."""

from __future__ import annotations

import functools
from collections.abc import Collection

import pygame

from mazerunner.board import (
    CELL_SIZE,
    ENERGIZER_DURATION,
    MAP_WIDTH,
    PACMAN_ANIMATION_FRAMES,
    PACMAN_ANIMATION_SPEED,
    PACMAN_DEATH_FRAMES,
    PACMAN_SPEED,
    Grid,
    Position,
)
from mazerunner.map_collision import map_collision

# Arrow keys in the order they are checked; a later key wins.
_KEY_DIRECTIONS = (("right", 0), ("up", 1), ("left", 2), ("down", 3))


@functools.lru_cache(maxsize=None)
def _load_texture(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error):
        return None


class Pacman:
    """Pacman's state on the board."""

    def __init__(self) -> None:
        self.animation_over = False
        self._dead = False
        self.direction = 0
        self.animation_timer = 0
        self.energizer_timer = 0
        self.position = Position(0, 0)

    @property
    def dead(self) -> bool:
        return self._dead

    @dead.setter
    def dead(self, value: bool) -> None:
        self._dead = value
        if value:
            self.animation_timer = 0

    def draw(self, victory: bool, surface: pygame.Surface) -> None:
        """Draw the current animation frame and advance the animation."""
        frame = self.animation_timer // PACMAN_ANIMATION_SPEED
        spot = (self.position.x, self.position.y)

        if self._dead or victory:
            if self.animation_timer < PACMAN_DEATH_FRAMES * PACMAN_ANIMATION_SPEED:
                self.animation_timer += 1
                texture = _load_texture(f"Resources/Images/PacmanDeath{CELL_SIZE}.png")
                if texture is not None:
                    area = pygame.Rect(CELL_SIZE * frame, 0, CELL_SIZE, CELL_SIZE)
                    surface.blit(texture, spot, area)
            else:
                self.animation_over = True
        else:
            texture = _load_texture(f"Resources/Images/Pacman{CELL_SIZE}.png")
            if texture is not None:
                area = pygame.Rect(CELL_SIZE * frame, CELL_SIZE * self.direction, CELL_SIZE, CELL_SIZE)
                surface.blit(texture, spot, area)
            self.animation_timer = (self.animation_timer + 1) % (
                PACMAN_ANIMATION_FRAMES * PACMAN_ANIMATION_SPEED
            )

    def reset(self) -> None:
        """Bring Pacman back to life facing right with no energizer."""
        self.animation_over = False
        self._dead = False
        self.direction = 0
        self.animation_timer = 0
        self.energizer_timer = 0

    def update(self, level: int, grid: Grid, pressed: Collection[str]) -> None:
        """Advance one frame.

        ``pressed`` holds the names of the arrow keys held down:
        ``"right"``, ``"up"``, ``"left"``, ``"down"``.
        """
        x, y = self.position.x, self.position.y
        walls = [
            map_collision(False, False, x + PACMAN_SPEED, y, grid),
            map_collision(False, False, x, y - PACMAN_SPEED, grid),
            map_collision(False, False, x - PACMAN_SPEED, y, grid),
            map_collision(False, False, x, y + PACMAN_SPEED, grid),
        ]

        for key, direction in _KEY_DIRECTIONS:
            if key in pressed and not walls[direction]:
                self.direction = direction

        if not walls[self.direction]:
            self.position = self.position.moved(self.direction, PACMAN_SPEED)

        if self.position.x <= -CELL_SIZE:
            self.position = Position(CELL_SIZE * MAP_WIDTH - PACMAN_SPEED, self.position.y)
        elif self.position.x >= CELL_SIZE * MAP_WIDTH:
            self.position = Position(PACMAN_SPEED - CELL_SIZE, self.position.y)

        if map_collision(True, False, self.position.x, self.position.y, grid):
            self.energizer_timer = int(ENERGIZER_DURATION / 2**level)
        else:
            self.energizer_timer = max(0, self.energizer_timer - 1)