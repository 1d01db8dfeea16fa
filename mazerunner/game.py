"""The maze game: menu, play, pause, game over, timers and high scores."""

from __future__ import annotations

import enum
import logging
import math
import time
from collections.abc import Callable, Collection
from pathlib import Path

import pygame

from mazerunner.level_manager import LevelManager
from mazerunner.player import Player
from mazerunner.trap import Trap
from mazerunner.utils import executable_dir

logger = logging.getLogger(__name__)

HIGH_SCORES_FILE = "highscores.txt"
DEBUG_LOG_FILE = "debug.log"
LEVEL_COUNT = 3
TRAP_SPAWN_DISTANCE = 20.0
TRAP_STEP = 1.0 / 60.0
COLLISION_FLASH_SECONDS = 0.2

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)


class GameState(enum.Enum):
    """Which screen the game is showing."""

    MENU = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    GAME_OVER = enum.auto()


class _Stopwatch:
    """Measures seconds since it was last restarted."""

    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._start = clock()

    def restart(self) -> float:
        now = self._clock()
        elapsed = now - self._start
        self._start = now
        return elapsed

    @property
    def elapsed(self) -> float:
        return self._clock() - self._start


class _Sound:
    """A sound effect that may be missing; then every call does nothing."""

    def __init__(self, candidates: list[Path], loop: bool = False) -> None:
        self._sound: pygame.mixer.Sound | None = None
        self._loop = loop
        if not pygame.mixer.get_init():
            return
        for path in candidates:
            try:
                self._sound = pygame.mixer.Sound(str(path))
                return
            except (FileNotFoundError, pygame.error):
                continue

    @property
    def playing(self) -> bool:
        return self._sound is not None and self._sound.get_num_channels() > 0

    def play(self) -> None:
        if self._sound is not None:
            self._sound.play(loops=-1 if self._loop else 0)

    def stop(self) -> None:
        if self._sound is not None:
            self._sound.stop()


class Game:
    """Runs one maze game on ``screen``; feed it the held keys each frame.

    Keys are named ``"w"``, ``"a"``, ``"s"``, ``"d"``, ``"up"``, ``"down"``,
    ``"enter"`` and ``"escape"``. High scores and the debug log live in the
    current directory.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        base_dir: str | Path | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.screen = screen
        self.base_dir = Path(executable_dir() if base_dir is None else base_dir)
        self._clock = clock if clock is not None else time.monotonic
        self.state = GameState.MENU
        self.menu_selection = 0
        self.running = True
        self.timer_started = False

        if not pygame.font.get_init():
            pygame.font.init()
        self._font_path = self._find_font()
        self._fonts: dict[int, pygame.font.Font] = {}

        self.player = Player(self.base_dir / "player.png")
        self.traps: list[Trap] = []
        self.level_manager = LevelManager(self.base_dir)

        self.game_clock = _Stopwatch(self._clock)
        self.frame_clock = _Stopwatch(self._clock)

        self.best_times = [0.0] * LEVEL_COUNT
        self.load_high_scores()

        self.time_text = ""
        self.best_text = ""
        self.level_text = ""
        self._ui_y = 0

        self._previous: frozenset[str] = frozenset()

        sounds = self.base_dir / "Resources" / "Sounds"
        local = Path("Resources") / "Sounds"
        self.menu_sound = _Sound([sounds / "menu.ogg", local / "menu.ogg"], loop=True)
        self.level_complete_sound = _Sound(
            [sounds / "level_complete.wav", local / "level_complete.wav"]
        )
        self.game_over_sound = _Sound([sounds / "game_over.wav", local / "game_over.wav"])
        self.menu_sound.play()

    def _find_font(self) -> str | None:
        for candidate in (self.base_dir / "arial.ttf", Path("arial.ttf")):
            if candidate.is_file():
                return str(candidate)
        logger.error("Failed to load font")
        return None

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            try:
                font = pygame.font.Font(self._font_path, size)
            except (OSError, pygame.error):
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    @staticmethod
    def _log_debug(message: str) -> None:
        try:
            with open(DEBUG_LOG_FILE, "a", encoding="utf-8") as log_file:
                log_file.write(message + "\n")
        except OSError:
            pass

    def _newly(self, pressed: Collection[str], key: str) -> bool:
        return key in pressed and key not in self._previous

    def update(self, pressed: Collection[str] = frozenset()) -> None:
        """Advance the game by one frame with the keys in ``pressed`` held."""
        if self.state is GameState.MENU:
            self._update_menu(pressed)
            return
        if self.state is GameState.PAUSED:
            if not self.menu_sound.playing:
                self.menu_sound.play()
            if "escape" in pressed:
                self.state = GameState.PLAYING
                self.frame_clock.restart()
            if "enter" in pressed:
                self.state = GameState.MENU
            return
        if self.state is GameState.GAME_OVER:
            if self.menu_sound.playing:
                self.menu_sound.stop()
            if not self.game_over_sound.playing:
                self.game_over_sound.play()
            if "enter" in pressed:
                self.state = GameState.MENU
            return
        if "escape" in pressed:
            self.state = GameState.PAUSED
            return

        if not self.timer_started:
            if pressed & {"w", "a", "s", "d"} if isinstance(pressed, (set, frozenset)) else any(
                key in pressed for key in "wasd"
            ):
                self.timer_started = True
                self.game_clock.restart()
                self.frame_clock.restart()
            else:
                self._update_timer()
                return

        delta_time = self.frame_clock.restart()

        self.player.update(delta_time, pressed)
        self._update_traps()
        self._check_collisions()
        self._update_timer()

        if self.game_clock.elapsed > self.level_manager.level_time():
            self.state = GameState.GAME_OVER
            self._log_debug("Time's up! Game Over.")
            logger.info("Time's up! Game Over.")

        logger.debug("Current time: %s seconds", self.game_clock.elapsed)
        logger.debug("Trap positions: %d", len(self.level_manager.trap_positions))

        position = self.player.position
        if self.level_manager.is_end(position.x, position.y):
            self._finish_level()

    def _update_menu(self, pressed: Collection[str]) -> None:
        if not self.menu_sound.playing:
            self.menu_sound.play()
        if self._newly(pressed, "w") or self._newly(pressed, "up"):
            self.menu_selection = (self.menu_selection + 1) % 2
        if self._newly(pressed, "s") or self._newly(pressed, "down"):
            self.menu_selection = (self.menu_selection + 1) % 2
        if self._newly(pressed, "enter"):
            if self.menu_selection == 0:
                self.state = GameState.PLAYING
                self.reset_game()
            else:
                self.running = False
        self._previous = frozenset(pressed)

    def _finish_level(self) -> None:
        level = self.level_manager.current_level
        current = self.game_clock.elapsed
        if self.best_times[level] == 0 or current < self.best_times[level]:
            self.best_times[level] = current
            self.save_high_scores()
        if self.menu_sound.playing:
            self.menu_sound.stop()
        self.level_complete_sound.play()
        self.level_manager.load_next_level()
        self.player.reset(self.level_manager.start_position)
        self.traps.clear()
        self.game_clock.restart()
        self.timer_started = False

    def _update_traps(self) -> None:
        for trap in self.traps:
            trap.update(TRAP_STEP)
        position = self.player.position
        for trap_position in self.level_manager.trap_positions:
            distance = math.hypot(position.x - trap_position.x, position.y - trap_position.y)
            if distance < TRAP_SPAWN_DISTANCE:
                self.traps.append(Trap(trap_position, 0.0))
                self._log_debug(
                    f"Trap spawned at: ({trap_position.x:f}, {trap_position.y:f})"
                )

    def _die(self) -> None:
        self.screen.fill(_WHITE)
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()
        time.sleep(COLLISION_FLASH_SECONDS)
        self.player.kill()
        self.state = GameState.GAME_OVER

    def _check_collisions(self) -> None:
        player_bounds = self.player.bounds()
        if any(player_bounds.intersects(wall) for wall in self.level_manager.walls):
            self._die()
            return
        if any(trap.is_spawned and trap.bounds().intersects(player_bounds) for trap in self.traps):
            self._die()

    def _update_timer(self) -> None:
        if self.state is not GameState.PLAYING:
            return
        elapsed = self.game_clock.elapsed if self.timer_started else 0.0
        remaining = max(0.0, self.level_manager.level_time() - elapsed)
        level = self.level_manager.current_level
        self.time_text = f"Time: {remaining:.2f}"
        self.best_text = f"Best: {int(self.best_times[level] * 100) / 100:f}"
        self.level_text = f"Level: {level + 1}"
        self._ui_y = self.screen.get_height() - 90

    def _blit_text(self, text: str, size: int, color: tuple[int, int, int], x: float, y: float) -> None:
        rendered = self._font(size).render(text, True, color)
        self.screen.blit(rendered, (round(x), round(y)))

    def _blit_centred(self, text: str, size: int, color: tuple[int, int, int], y: float) -> None:
        rendered = self._font(size).render(text, True, color)
        x = (self.screen.get_width() - rendered.get_width()) / 2
        self.screen.blit(rendered, (round(x), round(y)))

    def _draw_world(self) -> None:
        self.level_manager.draw(self.screen)
        for trap in self.traps:
            trap.render(self.screen)
        self.player.render(self.screen)
        self._draw_ui()

    def _draw_ui(self) -> None:
        for offset, text in enumerate((self.time_text, self.best_text, self.level_text)):
            if text:
                self._blit_text(text, 20, _WHITE, 10, self._ui_y + 30 * offset)

    def draw(self) -> None:
        """Draw the current screen."""
        half_height = self.screen.get_height() / 2
        if self.state is GameState.MENU:
            self.screen.fill(_BLACK)
            self._blit_centred("Maze Runner", 40, _WHITE, 80)
            self._blit_centred("Start Game", 28, _YELLOW if self.menu_selection == 0 else _WHITE, 200)
            self._blit_centred("Quit", 28, _YELLOW if self.menu_selection == 1 else _WHITE, 250)
            return
        self._draw_world()
        if self.state is GameState.PAUSED:
            self._blit_centred("Paused", 36, _RED, half_height - 60)
            self._blit_centred("Press Esc to Resume", 24, _WHITE, half_height)
            self._blit_centred("Press Enter for Menu", 20, _WHITE, half_height + 40)
        elif self.state is GameState.GAME_OVER:
            self._blit_centred("Game Over!", 32, _RED, half_height - 40)
            self._blit_centred("Press Enter to return to menu", 24, _RED, half_height + 10)

    def reset_game(self) -> None:
        """Start again from the first level."""
        self.state = GameState.PLAYING
        self.timer_started = False
        self.game_clock.restart()
        self.frame_clock.restart()
        self.traps.clear()
        self.level_manager.reset()
        self.player.reset(self.level_manager.start_position)

    def load_high_scores(self) -> None:
        """Read the best times; create a file of zeros if there is none."""
        try:
            with open(HIGH_SCORES_FILE, encoding="utf-8") as scores:
                tokens = scores.read().split()
        except FileNotFoundError:
            try:
                with open(HIGH_SCORES_FILE, "w", encoding="utf-8") as scores:
                    scores.write("0 " * len(self.best_times))
            except OSError:
                pass
            return
        except OSError:
            return
        values = []
        for token in tokens[: len(self.best_times)]:
            try:
                values.append(float(token))
            except ValueError:
                break
        self.best_times = values + [0.0] * (len(self.best_times) - len(values))

    def save_high_scores(self) -> None:
        """Write the best times, one per level."""
        try:
            with open(HIGH_SCORES_FILE, "w", encoding="utf-8") as scores:
                scores.write("".join(f"{best:g} " for best in self.best_times))
        except OSError:
            pass