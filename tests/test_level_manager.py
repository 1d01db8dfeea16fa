import pygame
import pytest

from mazerunner.actor import Vec2
from mazerunner.level_manager import WINDOW_HEIGHT, WINDOW_WIDTH, LevelManager

LEVEL_ONE = "wwwww\nwS.Ew\nwTwww\n"
LEVEL_TWO = "wE\nSw\n"
LEVEL_THREE = "wwwS\n"


@pytest.fixture
def levels(tmp_path, monkeypatch):
    folder = tmp_path / "Resources" / "Level"
    folder.mkdir(parents=True)
    (folder / "level1.txt").write_text(LEVEL_ONE)
    (folder / "level2.txt").write_text(LEVEL_TWO)
    (folder / "level3.txt").write_text(LEVEL_THREE)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_counts_walls_and_traps(levels):
    manager = LevelManager(levels)
    assert len(manager.walls) == LEVEL_ONE.count("w")
    assert len(manager.trap_positions) == 2


def test_maze_is_centred_in_window(levels):
    manager = LevelManager(levels)
    left = min(w.left for w in manager.walls)
    right = max(w.left + w.width for w in manager.walls)
    top = min(w.top for w in manager.walls)
    bottom = max(w.top + w.height for w in manager.walls)
    assert left + right == pytest.approx(WINDOW_WIDTH)
    assert top + bottom == pytest.approx(WINDOW_HEIGHT)


def test_start_and_end_positions(levels):
    manager = LevelManager(levels)
    start, end = manager.start_position, manager.end_position
    assert start.y == pytest.approx(end.y)
    assert end.x - start.x == pytest.approx(2 * LevelManager.CELL_SIZE)
    assert manager.is_end(end.x, end.y)
    assert not manager.is_end(start.x, start.y)
    assert not manager.is_wall(start.x, start.y)


def test_wall_centres_are_walls(levels):
    manager = LevelManager(levels)
    for wall in manager.walls:
        assert manager.is_wall(wall.left + wall.width / 2, wall.top + wall.height / 2)


def test_traps_sit_in_cell_centres(levels):
    manager = LevelManager(levels)
    left = min(w.left for w in manager.walls)
    half = LevelManager.CELL_SIZE / 2
    for trap in manager.trap_positions:
        assert (trap.x - left) % LevelManager.CELL_SIZE == pytest.approx(half)
        assert not manager.is_wall(trap.x, trap.y)


def test_level_times(levels):
    manager = LevelManager(levels)
    assert manager.level_time() == 20.0
    manager.load_next_level()
    assert manager.level_time() == 30.0
    manager.load_next_level()
    assert manager.level_time() == 40.0


def test_next_level_wraps_around(levels):
    manager = LevelManager(levels)
    manager.load_next_level()
    assert manager.current_level == 1
    assert len(manager.walls) == LEVEL_TWO.count("w")
    manager.load_next_level()
    assert manager.current_level == 2
    assert len(manager.walls) == LEVEL_THREE.count("w")
    manager.load_next_level()
    assert manager.current_level == 0
    assert len(manager.walls) == LEVEL_ONE.count("w")


def test_reset_returns_to_first_level(levels):
    manager = LevelManager(levels)
    manager.load_next_level()
    manager.reset()
    assert manager.current_level == 0
    assert len(manager.walls) == LEVEL_ONE.count("w")


def test_missing_file_leaves_empty_level(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = LevelManager(tmp_path / "nowhere")
    assert manager.walls == []
    assert manager.trap_positions == []
    assert manager.start_position == Vec2(0.0, 0.0)
    assert not manager.is_end(0.0, 0.0)


def test_falls_back_to_file_in_current_directory(tmp_path, monkeypatch):
    (tmp_path / "level1.txt").write_text(LEVEL_ONE)
    monkeypatch.chdir(tmp_path)
    manager = LevelManager(tmp_path / "elsewhere")
    assert len(manager.walls) == LEVEL_ONE.count("w")


def test_draw_paints_walls_and_end(levels):
    manager = LevelManager(levels)
    surface = pygame.Surface((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
    surface.fill((0, 0, 0))
    manager.draw(surface)
    wall = manager.walls[0]
    centre = (int(wall.left + wall.width / 2), int(wall.top + wall.height / 2))
    assert surface.get_at(centre)[:3] == (0, 0, 255)
    end = manager.end_position
    assert surface.get_at((int(end.x), int(end.y)))[:3] == (255, 255, 0)
    start = manager.start_position
    assert surface.get_at((int(start.x), int(start.y)))[:3] == (0, 0, 0)