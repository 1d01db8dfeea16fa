import pygame

from mazerunner.board import CELL_SIZE, FONT_HEIGHT, MAP_HEIGHT, MAP_WIDTH
from mazerunner.draw_text import draw_text, text_layout

BOARD_WIDTH = CELL_SIZE * MAP_WIDTH
BOARD_HEIGHT = CELL_SIZE * MAP_HEIGHT


def test_plain_layout_advances_and_wraps():
    glyphs = text_layout(False, 5, 7, "AB\nC", 8)
    assert [g.char for g in glyphs] == ["A", "B", "C"]
    assert [(g.x, g.y) for g in glyphs] == [(5, 7), (5 + 8, 7), (5, 7 + FONT_HEIGHT)]


def test_space_is_first_glyph_in_strip():
    glyphs = text_layout(False, 0, 0, " !", 8)
    assert glyphs[0].source_x == 0
    assert glyphs[1].source_x == 8


def test_centered_line_is_symmetric():
    width = 8
    glyphs = text_layout(True, 99, 99, "ABCD", width)
    left = glyphs[0].x
    right = glyphs[-1].x + width
    assert left + right == BOARD_WIDTH
    assert 2 * glyphs[0].y + FONT_HEIGHT == BOARD_HEIGHT


def test_centered_lines_each_centered():
    width = 8
    glyphs = text_layout(True, 0, 0, "AB\nCDEF", width)
    first, second = glyphs[:2], glyphs[2:]
    assert first[0].x + first[-1].x + width == BOARD_WIDTH
    assert second[0].x + second[-1].x + width == BOARD_WIDTH
    assert second[0].y == first[0].y + FONT_HEIGHT
    assert first[0].y + second[0].y + FONT_HEIGHT == BOARD_HEIGHT - FONT_HEIGHT + FONT_HEIGHT - FONT_HEIGHT + FONT_HEIGHT


def test_centering_rounds_half_away_from_zero():
    glyphs = text_layout(True, 0, 0, "ABCDEFG", 1)
    assert glyphs[0].x == 165


def test_empty_lines_produce_no_glyphs():
    assert text_layout(False, 0, 0, "\n\n", 8) == []


def test_draw_text_uses_font_strip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    images = tmp_path / "Resources" / "Images"
    images.mkdir(parents=True)
    width = 8
    font = pygame.Surface((width * 96, FONT_HEIGHT))
    font.fill((0, 0, 0))
    font.fill((0, 255, 0), pygame.Rect(width * (ord("A") - 32), 0, width, FONT_HEIGHT))
    pygame.image.save(font, str(images / "Font.png"))

    surface = pygame.Surface((BOARD_WIDTH, BOARD_HEIGHT))
    surface.fill((0, 0, 255))
    draw_text(False, 0, 0, "AB", surface)
    assert tuple(surface.get_at((1, 1)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((width + 1, 1)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((3 * width, 1)))[:3] == (0, 0, 255)