"""Geometry helpers and the base class of things that move and draw."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _span(self) -> tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, x1, y0, y1

    def intersects(self, other: FloatRect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        ax0, ax1, ay0, ay1 = self._span()
        bx0, bx1, by0, by1 = other._span()
        return max(ax0, bx0) < min(ax1, bx1) and max(ay0, by0) < min(ay1, by1)

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; the right and bottom edges are outside."""
        x0, x1, y0, y1 = self._span()
        return x0 <= x < x1 and y0 <= y < y1


class Actor(abc.ABC):
    """Something in the world that updates, draws itself and has bounds."""

    def __init__(self, position: Vec2 | None = None) -> None:
        self.position = position if position is not None else Vec2()

    @abc.abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds."""

    @abc.abstractmethod
    def render(self, surface: Any) -> None:
        """Draw onto ``surface``."""

    @abc.abstractmethod
    def bounds(self) -> FloatRect:
        """Return the rectangle used for collisions."""