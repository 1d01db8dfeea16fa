import random

import pytest

from mazerunner.board import (
    CELL_SIZE,
    CHASE_DURATION,
    LONG_SCATTER_DURATION,
    SHORT_SCATTER_DURATION,
    Position,
    empty_map,
)
from mazerunner.ghost_manager import GhostManager
from mazerunner.pacman import Pacman

STARTS = [Position(CELL_SIZE * (i + 2), CELL_SIZE * 2) for i in range(4)]


def make_manager(level=0):
    manager = GhostManager(random.Random(0))
    manager.reset(level, STARTS)
    return manager


def far_pacman():
    pacman = Pacman()
    pacman.position = Position(CELL_SIZE * 15, CELL_SIZE * 15)
    return pacman


def test_initial_state():
    manager = GhostManager(random.Random(0))
    assert [ghost.id for ghost in manager.ghosts] == [0, 1, 2, 3]
    assert manager.wave_timer == LONG_SCATTER_DURATION
    assert manager.current_wave == 0


def test_reset_places_ghosts_and_homes():
    manager = make_manager(level=1)
    assert manager.wave_timer == LONG_SCATTER_DURATION // 2
    assert [ghost.position for ghost in manager.ghosts] == STARTS
    for ghost in manager.ghosts:
        assert ghost.home == STARTS[2]
        assert ghost.home_exit == STARTS[0]


def test_reset_requires_four_positions():
    manager = GhostManager(random.Random(0))
    with pytest.raises(ValueError):
        manager.reset(0, STARTS[:3])


def test_timer_counts_down():
    manager = make_manager()
    manager.update(0, empty_map(), far_pacman())
    assert manager.wave_timer == LONG_SCATTER_DURATION - 1


def test_timer_frozen_while_energized():
    manager = make_manager()
    pacman = far_pacman()
    pacman.energizer_timer = 5
    manager.update(0, empty_map(), pacman)
    assert manager.wave_timer == LONG_SCATTER_DURATION


def test_wave_sequence():
    manager = make_manager(level=1)
    pacman = far_pacman()

    manager.wave_timer = 0
    manager.update(1, empty_map(), pacman)
    assert manager.current_wave == 1
    assert manager.wave_timer == CHASE_DURATION
    assert all(ghost.movement_mode for ghost in manager.ghosts)

    manager.wave_timer = 0
    manager.update(1, empty_map(), pacman)
    assert manager.current_wave == 2
    assert manager.wave_timer == LONG_SCATTER_DURATION // 2
    assert not any(ghost.movement_mode for ghost in manager.ghosts)

    manager.wave_timer = 0
    manager.update(1, empty_map(), pacman)
    manager.wave_timer = 0
    manager.update(1, empty_map(), pacman)
    assert manager.current_wave == 4
    assert manager.wave_timer == SHORT_SCATTER_DURATION // 2


def test_last_wave_chases_forever():
    manager = make_manager()
    manager.current_wave = 7
    modes = [ghost.movement_mode for ghost in manager.ghosts]
    manager.wave_timer = 0
    manager.update(0, empty_map(), far_pacman())
    assert manager.current_wave == 7
    assert manager.wave_timer == CHASE_DURATION
    assert [ghost.movement_mode for ghost in manager.ghosts] == modes