"""The maze runner controlled with W, A, S and D."""

from __future__ import annotations

import logging
import math
from collections.abc import Collection
from pathlib import Path
from typing import Any

import pygame

from mazerunner.actor import Actor, FloatRect, Vec2

logger = logging.getLogger(__name__)

FRAME_SIZE = 30
FRAME_COUNT = 3
FRAME_DURATION = 0.15
COLLISION_RADIUS = 10.0
PLAYER_SPEED = 200.0


def _load_texture(path: str | Path | None) -> pygame.Surface | None:
    if path is None:
        return None
    try:
        return pygame.image.load(str(path))
    except (FileNotFoundError, pygame.error):
        logger.error("Failed to load player texture %s", path)
        return None


class Player(Actor):
    """A player that walks at a fixed speed and animates while moving."""

    def __init__(self, texture_path: str | Path | None = None) -> None:
        super().__init__(Vec2(0.0, 0.0))
        self.speed = PLAYER_SPEED
        self.is_dead = False
        self.current_frame = 0
        self.animation_timer = 0.0
        self._texture = _load_texture(texture_path)

    @property
    def is_alive(self) -> bool:
        return not self.is_dead

    @property
    def collision_radius(self) -> float:
        return COLLISION_RADIUS

    def update(self, delta_time: float, pressed: Collection[str] = frozenset()) -> None:
        """Move by the held keys for ``delta_time`` seconds.

        ``pressed`` holds lower-case letter names of the keys held down.
        """
        if self.is_dead:
            return

        for key in sorted(k for k in pressed if len(k) == 1 and k.isalpha()):
            logger.debug("Key pressed: %s", key.upper())

        dx = float("d" in pressed) - float("a" in pressed)
        dy = float("s" in pressed) - float("w" in pressed)
        if dx and dy:
            length = math.hypot(dx, dy)
            dx, dy = dx / length, dy / length

        self.position = self.position + Vec2(dx, dy) * (self.speed * delta_time)

        if dx or dy:
            self.animation_timer += delta_time
            if self.animation_timer >= FRAME_DURATION:
                self.animation_timer = 0.0
                self.current_frame = (self.current_frame + 1) % FRAME_COUNT
        else:
            self.current_frame = 0

    def render(self, surface: Any) -> None:
        """Draw the current frame centred on the player's position."""
        if self._texture is None:
            return
        area = pygame.Rect(self.current_frame * FRAME_SIZE, 0, FRAME_SIZE, FRAME_SIZE)
        spot = (
            round(self.position.x - FRAME_SIZE / 2),
            round(self.position.y - FRAME_SIZE / 2),
        )
        surface.blit(self._texture, spot, area)

    def bounds(self) -> FloatRect:
        """A square of twice the collision radius around the position."""
        r = self.collision_radius
        return FloatRect(self.position.x - r, self.position.y - r, 2 * r, 2 * r)

    def reset(self, start: Vec2) -> None:
        """Bring the player back to life at ``start``."""
        self.position = start
        self.is_dead = False
        self.current_frame = 0
        self.animation_timer = 0.0

    def kill(self) -> None:
        """Mark the player as dead; it stops moving."""
        self.is_dead = True