import pygame

from mazerunner.board import (
    CELL_SIZE,
    ENERGIZER_DURATION,
    MAP_WIDTH,
    PACMAN_ANIMATION_FRAMES,
    PACMAN_ANIMATION_SPEED,
    PACMAN_DEATH_FRAMES,
    PACMAN_SPEED,
    Cell,
    Position,
    empty_map,
)
from mazerunner.pacman import Pacman


def _pacman_at(cx, cy):
    pacman = Pacman()
    pacman.position = Position(cx * CELL_SIZE, cy * CELL_SIZE)
    return pacman


def test_new_pacman_state():
    pacman = Pacman()
    assert pacman.position == Position(0, 0)
    assert pacman.direction == 0
    assert pacman.dead is False
    assert pacman.energizer_timer == 0


def test_moves_right_by_default():
    pacman = _pacman_at(5, 5)
    pacman.update(0, empty_map(), set())
    assert pacman.position == Position(5 * CELL_SIZE + PACMAN_SPEED, 5 * CELL_SIZE)


def test_arrow_key_turns_and_moves():
    pacman = _pacman_at(5, 5)
    pacman.update(0, empty_map(), {"down"})
    assert pacman.direction == 3
    assert pacman.position == Position(5 * CELL_SIZE, 5 * CELL_SIZE + PACMAN_SPEED)


def test_later_key_wins():
    pacman = _pacman_at(5, 5)
    pacman.update(0, empty_map(), {"up", "left"})
    assert pacman.direction == 2


def test_wall_blocks_movement_and_turning():
    grid = empty_map()
    grid[6][5] = Cell.WALL
    grid[5][4] = Cell.WALL
    pacman = _pacman_at(5, 5)
    pacman.update(0, grid, {"up"})
    assert pacman.direction == 0
    assert pacman.position == Position(5 * CELL_SIZE, 5 * CELL_SIZE)


def test_warps_from_left_edge():
    pacman = Pacman()
    pacman.position = Position(PACMAN_SPEED - CELL_SIZE, 5 * CELL_SIZE)
    pacman.update(0, empty_map(), {"left"})
    assert pacman.position == Position(CELL_SIZE * MAP_WIDTH - PACMAN_SPEED, 5 * CELL_SIZE)


def test_warps_from_right_edge():
    pacman = Pacman()
    pacman.position = Position(CELL_SIZE * MAP_WIDTH - PACMAN_SPEED, 5 * CELL_SIZE)
    pacman.update(0, empty_map(), set())
    assert pacman.position == Position(PACMAN_SPEED - CELL_SIZE, 5 * CELL_SIZE)


def test_energizer_sets_timer_then_counts_down():
    grid = empty_map()
    grid[5][5] = Cell.ENERGIZER
    pacman = _pacman_at(5, 5)
    pacman.update(0, grid, set())
    assert grid[5][5] is Cell.EMPTY
    assert pacman.energizer_timer == ENERGIZER_DURATION
    pacman.update(0, grid, set())
    assert pacman.energizer_timer == ENERGIZER_DURATION - 1


def test_energizer_shorter_on_later_levels():
    grid = empty_map()
    grid[5][5] = Cell.ENERGIZER
    pacman = _pacman_at(5, 5)
    pacman.update(1, grid, set())
    assert pacman.energizer_timer == ENERGIZER_DURATION // 2


def test_timer_never_negative():
    pacman = _pacman_at(5, 5)
    pacman.update(0, empty_map(), set())
    assert pacman.energizer_timer == 0


def test_dying_restarts_animation():
    pacman = Pacman()
    pacman.animation_timer = 7
    pacman.dead = True
    assert pacman.dead is True
    assert pacman.animation_timer == 0


def test_reset_revives():
    pacman = Pacman()
    pacman.dead = True
    pacman.direction = 3
    pacman.energizer_timer = 40
    pacman.reset()
    assert (pacman.dead, pacman.direction, pacman.energizer_timer) == (False, 0, 0)


def test_draw_wraps_walking_animation():
    pacman = Pacman()
    pacman.animation_timer = PACMAN_ANIMATION_FRAMES * PACMAN_ANIMATION_SPEED - 1
    pacman.draw(False, pygame.Surface((CELL_SIZE, CELL_SIZE)))
    assert pacman.animation_timer == 0


def test_death_animation_finishes():
    pacman = Pacman()
    pacman.dead = True
    surface = pygame.Surface((CELL_SIZE, CELL_SIZE))
    pacman.draw(False, surface)
    assert pacman.animation_timer == 1
    assert pacman.animation_over is False
    pacman.animation_timer = PACMAN_DEATH_FRAMES * PACMAN_ANIMATION_SPEED
    pacman.draw(False, surface)
    assert pacman.animation_over is True