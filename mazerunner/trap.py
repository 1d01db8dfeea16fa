"""Traps that appear in the maze after a short delay."""

from __future__ import annotations

from typing import Any

import pygame

from mazerunner.actor import Actor, FloatRect, Vec2

TRAP_RADIUS = 8.0
_TRAP_COLOR = (255, 0, 0)


class Trap(Actor):
    """A round trap that becomes dangerous once its delay runs out."""

    def __init__(self, position: Vec2, delay: float = 0.5) -> None:
        super().__init__(position)
        self.is_active = False
        self.spawn_delay = delay

    @property
    def is_spawned(self) -> bool:
        return self.is_active

    def update(self, delta_time: float) -> None:
        """Count down the delay and activate when it reaches zero."""
        if not self.is_active:
            self.spawn_delay -= delta_time
            if self.spawn_delay <= 0.0:
                self.activate()

    def render(self, surface: Any) -> None:
        """Draw the trap as a red circle once it is active."""
        if self.is_active:
            pygame.draw.circle(
                surface,
                _TRAP_COLOR,
                (round(self.position.x), round(self.position.y)),
                round(TRAP_RADIUS),
            )

    def bounds(self) -> FloatRect:
        """The square around the circle, centred on the trap's position."""
        return FloatRect(
            self.position.x - TRAP_RADIUS,
            self.position.y - TRAP_RADIUS,
            2 * TRAP_RADIUS,
            2 * TRAP_RADIUS,
        )

    def activate(self) -> None:
        """Make the trap dangerous at once."""
        self.is_active = True