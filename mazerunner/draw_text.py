"""Bitmap-font text: layout of glyphs and drawing them."""

from __future__ import annotations

import functools
import math
import os
from dataclasses import dataclass

import pygame

from mazerunner.board import CELL_SIZE, FONT_HEIGHT, MAP_HEIGHT, MAP_WIDTH

# The font strip holds the 96 printable characters starting at space.
_FONT_GLYPHS = 96
_FIRST_CHAR = 32


@dataclass(frozen=True)
class Glyph:
    """One character placed on screen and its column in the font strip."""

    char: str
    x: int
    y: int
    source_x: int


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _centered_x(line: str, character_width: int) -> int:
    return _round_half_away(0.5 * (CELL_SIZE * MAP_WIDTH - character_width * len(line)))


def text_layout(center: bool, x: int, y: int, text: str, character_width: int) -> list[Glyph]:
    """Place each character of ``text``; newlines start a new line.

    With ``center`` every line is centred on the board horizontally and the
    block of lines vertically, and ``x`` and ``y`` are ignored.
    """
    lines = text.split("\n")
    line_y = (
        _round_half_away(0.5 * (CELL_SIZE * MAP_HEIGHT - FONT_HEIGHT * len(lines)))
        if center
        else y
    )
    glyphs = []
    for index, line in enumerate(lines):
        if index:
            line_y += FONT_HEIGHT
        char_x = _centered_x(line, character_width) if center else x
        for char in line:
            glyphs.append(Glyph(char, char_x, line_y, character_width * (ord(char) - _FIRST_CHAR)))
            char_x += character_width
    return glyphs


@functools.lru_cache(maxsize=None)
def _load_cached(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error):
        return None


def draw_text(center: bool, x: int, y: int, text: str, surface: pygame.Surface) -> None:
    """Draw ``text`` with the bitmap font onto ``surface``."""
    font = _load_cached(os.path.abspath("Resources/Images/Font.png"))
    if font is None:
        return
    character_width = font.get_width() // _FONT_GLYPHS
    if character_width == 0:
        return
    for glyph in text_layout(center, x, y, text, character_width):
        area = pygame.Rect(glyph.source_x, 0, character_width, FONT_HEIGHT)
        surface.blit(font, (glyph.x, glyph.y), area)