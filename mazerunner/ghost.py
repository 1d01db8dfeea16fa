"""A single ghost: targeting, movement, fright and drawing."""

from __future__ import annotations

import enum
import functools
import math
import os
import random
from typing import TYPE_CHECKING

import pygame

from mazerunner.board import (
    CELL_SIZE,
    ENERGIZER_DURATION,
    GHOST_1_CHASE,
    GHOST_2_CHASE,
    GHOST_3_CHASE,
    GHOST_ANIMATION_FRAMES,
    GHOST_ANIMATION_SPEED,
    GHOST_ESCAPE_SPEED,
    GHOST_FRIGHTENED_SPEED,
    GHOST_SPEED,
    MAP_HEIGHT,
    MAP_WIDTH,
    Grid,
    Position,
)
from mazerunner.map_collision import map_collision

if TYPE_CHECKING:
    from mazerunner.pacman import Pacman


class FrightenedMode(enum.IntEnum):
    """How scared a ghost is."""

    CALM = 0
    FRIGHTENED = 1
    ESCAPING = 2


# Corner each ghost heads for while scattering.
_SCATTER_TARGETS = {
    0: Position(CELL_SIZE * (MAP_WIDTH - 1), 0),
    1: Position(0, 0),
    2: Position(CELL_SIZE * (MAP_WIDTH - 1), CELL_SIZE * (MAP_HEIGHT - 1)),
    3: Position(0, CELL_SIZE * (MAP_HEIGHT - 1)),
}

_BODY_COLORS = {
    0: (255, 0, 0),
    1: (255, 182, 255),
    2: (0, 255, 255),
    3: (255, 182, 85),
}

_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_FRIGHTENED_BLUE = (36, 36, 255)


@functools.lru_cache(maxsize=None)
def _load_cached(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error):
        return None


def _load_texture(relative_path: str) -> pygame.Surface | None:
    return _load_cached(os.path.abspath(relative_path))


def _tinted(texture: pygame.Surface, area: pygame.Rect, color: tuple[int, int, int]) -> pygame.Surface:
    piece = texture.subsurface(area).copy()
    if color != _WHITE:
        piece.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
    return piece


class Ghost:
    """One of the four ghosts, identified by ``ghost_id`` 0 to 3."""

    def __init__(self, ghost_id: int, rng: random.Random | None = None) -> None:
        if ghost_id not in _SCATTER_TARGETS:
            raise ValueError(f"ghost id must be 0 to 3, got {ghost_id}")
        self.id = ghost_id
        self._rng = rng if rng is not None else random.Random()
        self.movement_mode = False  # False scatters, True chases.
        self.use_door = ghost_id > 0
        self.direction = 0
        self.frightened_mode = FrightenedMode.CALM
        self.frightened_speed_timer = 0
        self.animation_timer = 0
        self.home = Position()
        self.home_exit = Position()
        self.position = Position()
        self.target = Position()

    def pacman_collision(self, pacman_position: Position) -> bool:
        """True when the ghost overlaps a cell-sized Pacman at ``pacman_position``."""
        return (
            pacman_position.x - CELL_SIZE < self.position.x < pacman_position.x + CELL_SIZE
            and pacman_position.y - CELL_SIZE < self.position.y < pacman_position.y + CELL_SIZE
        )

    def target_distance(self, direction: int) -> float:
        """Distance to the target after one step in ``direction``."""
        step = self.position.moved(direction, GHOST_SPEED)
        return math.hypot(step.x - self.target.x, step.y - self.target.y)

    def draw(self, flash: bool, surface: pygame.Surface) -> None:
        """Draw body and face, then advance the animation."""
        body_frame = self.animation_timer // GHOST_ANIMATION_SPEED
        texture = _load_texture(f"Resources/Images/Ghost{CELL_SIZE}.png")

        if texture is not None:
            spot = (self.position.x, self.position.y)
            body_area = pygame.Rect(CELL_SIZE * body_frame, 0, CELL_SIZE, CELL_SIZE)
            face_color = _WHITE

            if self.frightened_mode == FrightenedMode.CALM:
                face_area = pygame.Rect(CELL_SIZE * self.direction, CELL_SIZE, CELL_SIZE, CELL_SIZE)
                surface.blit(_tinted(texture, body_area, _BODY_COLORS[self.id]), spot)
            elif self.frightened_mode == FrightenedMode.FRIGHTENED:
                face_area = pygame.Rect(4 * CELL_SIZE, CELL_SIZE, CELL_SIZE, CELL_SIZE)
                if flash and body_frame % 2 == 0:
                    body_color, face_color = _WHITE, _RED
                else:
                    body_color, face_color = _FRIGHTENED_BLUE, _WHITE
                surface.blit(_tinted(texture, body_area, body_color), spot)
            else:
                # Only the eyes go home.
                face_area = pygame.Rect(CELL_SIZE * self.direction, 2 * CELL_SIZE, CELL_SIZE, CELL_SIZE)

            surface.blit(_tinted(texture, face_area, face_color), spot)

        self.animation_timer = (self.animation_timer + 1) % (
            GHOST_ANIMATION_FRAMES * GHOST_ANIMATION_SPEED
        )

    def reset(self, home: Position, home_exit: Position) -> None:
        """Return to scatter mode, calm, heading for ``home_exit``."""
        self.movement_mode = False
        self.use_door = self.id > 0
        self.direction = 0
        self.frightened_mode = FrightenedMode.CALM
        self.frightened_speed_timer = 0
        self.animation_timer = 0
        self.home = home
        self.home_exit = home_exit
        self.target = home_exit

    def switch_mode(self) -> None:
        """Toggle between scatter and chase."""
        self.movement_mode = not self.movement_mode

    def update(self, level: int, grid: Grid, ghost_0: Ghost, pacman: Pacman) -> None:
        """Advance one frame."""
        move = False
        speed = GHOST_SPEED

        if (
            self.frightened_mode == FrightenedMode.CALM
            and pacman.energizer_timer == ENERGIZER_DURATION / 2**level
        ):
            self.frightened_speed_timer = GHOST_FRIGHTENED_SPEED
            self.frightened_mode = FrightenedMode.FRIGHTENED
        elif pacman.energizer_timer == 0 and self.frightened_mode == FrightenedMode.FRIGHTENED:
            self.frightened_mode = FrightenedMode.CALM

        if (
            self.frightened_mode == FrightenedMode.ESCAPING
            and self.position.x % GHOST_ESCAPE_SPEED == 0
            and self.position.y % GHOST_ESCAPE_SPEED == 0
        ):
            speed = GHOST_ESCAPE_SPEED

        self.update_target(pacman.direction, ghost_0.position, pacman.position)

        x, y = self.position.x, self.position.y
        walls = [
            map_collision(False, self.use_door, x + speed, y, grid),
            map_collision(False, self.use_door, x, y - speed, grid),
            map_collision(False, self.use_door, x - speed, y, grid),
            map_collision(False, self.use_door, x, y + speed, grid),
        ]
        back = (self.direction + 2) % 4

        if self.frightened_mode != FrightenedMode.FRIGHTENED:
            move = True
            optimal = None
            for direction in range(4):
                if direction == back or walls[direction]:
                    continue
                if optimal is None or self.target_distance(direction) < self.target_distance(optimal):
                    optimal = direction
            # Turning back is allowed only when nothing else is open.
            self.direction = back if optimal is None else optimal
        else:
            random_direction = self._rng.randrange(4)
            if self.frightened_speed_timer == 0:
                move = True
                self.frightened_speed_timer = GHOST_FRIGHTENED_SPEED
                if any(not walls[d] for d in range(4) if d != back):
                    while walls[random_direction] or random_direction == back:
                        random_direction = self._rng.randrange(4)
                    self.direction = random_direction
                else:
                    self.direction = back
            else:
                self.frightened_speed_timer -= 1

        if move:
            self.position = self.position.moved(self.direction, speed)
            if self.position.x <= -CELL_SIZE:
                self.position = Position(CELL_SIZE * MAP_WIDTH - speed, self.position.y)
            elif self.position.x >= CELL_SIZE * MAP_WIDTH:
                self.position = Position(speed - CELL_SIZE, self.position.y)

        if self.pacman_collision(pacman.position):
            if self.frightened_mode == FrightenedMode.CALM:
                pacman.dead = True
            else:
                self.use_door = True
                self.frightened_mode = FrightenedMode.ESCAPING
                self.target = self.home

    def update_target(
        self, pacman_direction: int, ghost_0_position: Position, pacman_position: Position
    ) -> None:
        """Choose where the ghost is heading this frame."""
        if self.use_door:
            if self.position == self.target:
                if self.home_exit == self.target:
                    self.use_door = False
                elif self.home == self.target:
                    self.frightened_mode = FrightenedMode.CALM
                    self.target = self.home_exit
            return

        if not self.movement_mode:
            self.target = _SCATTER_TARGETS[self.id]
            return

        if self.id == 0:
            self.target = pacman_position
        elif self.id == 1:
            self.target = pacman_position.moved(pacman_direction, CELL_SIZE * GHOST_1_CHASE)
        elif self.id == 2:
            ahead = pacman_position.moved(pacman_direction, CELL_SIZE * GHOST_2_CHASE)
            self.target = Position(
                2 * ahead.x - ghost_0_position.x, 2 * ahead.y - ghost_0_position.y
            )
        else:
            distance = math.hypot(
                self.position.x - pacman_position.x, self.position.y - pacman_position.y
            )
            if distance >= CELL_SIZE * GHOST_3_CHASE:
                self.target = pacman_position
            else:
                self.target = _SCATTER_TARGETS[3]