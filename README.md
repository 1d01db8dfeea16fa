# mazerunner

A small arcade maze game built on pygame. Guide the runner from the start tile
to the yellow exit before the level timer runs out. Touching a wall or a trap
ends the run. Traps stay hidden until you come close to them.

The package also holds a separate grid-based chase engine, with a player
character, four ghosts, pellets and energizers. It is described at the end of
this file.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
mazerunner
```

This opens an 800×600 window titled "Maze Runner" and shows the main menu.

Menu:

- **W / S** or **Up / Down**: switch between *Start Game* and *Quit*
- **Enter**: confirm

In play:

- **W A S D**: move. Diagonal moves are as fast as straight ones. The level
  timer starts with your first move.
- **Esc**: pause. While paused, **Esc** resumes and **Enter** returns to the menu.

There are three levels, with 20, 30 and 40 seconds on the clock. When you reach
the exit the next level loads, and its timer waits for your next move. After
the third level the game goes back to the first. A trap appears once you come
within 20 pixels of its spot. The run ends when you touch a wall or an active
trap, or when time runs out. On the *Game Over!* screen, press **Enter** to go
back to the menu.

## Files the game uses

"The program's directory" below means the directory of the running program.

- **Levels**: the game looks for `Resources/Level/level1.txt`, `level2.txt`
  and `level3.txt` in the program's directory. If one is missing, it tries the
  bare file name (for example `level1.txt`) in the current directory. If that
  fails too, the level is empty.

  Each line of a level file is one row of the maze:

  | Character | Meaning     |
  |-----------|-------------|
  | `w`       | wall        |
  | `S`       | start       |
  | `E`       | exit        |
  | `.` / `T` | hidden trap |

  Each cell is 32 pixels across, and the maze is centred in the window.
- **Player image**: `player.png` in the program's directory. It is a strip of
  three 30×30 frames. Without it the runner is not drawn.
- **Font**: `arial.ttf` in the program's directory or in the current
  directory. If neither is found, pygame's default font is used.
- **Sounds**: `menu.ogg`, `level_complete.wav` and `game_over.wav`. The game
  looks for them in `Resources/Sounds/` in the program's directory, then in
  `Resources/Sounds/` in the current directory. A missing sound is not played.
- **Best times**: `highscores.txt` in the current directory. It holds one time
  per level and is created with zeros if it does not exist.
- **Debug log**: `debug.log` in the current directory. Trap spawns and
  time-outs are appended to it.

## Using the game from code

`mazerunner.game.Game(screen, base_dir=None, clock=None)` runs the game on any
pygame surface:

- `base_dir` takes the place of the program's directory.
- `clock` is a callable that returns seconds. The default is `time.monotonic`.

Each frame, call `game.update(pressed)` with the set of held keys, then
`game.draw()`. The key names are `"w"`, `"a"`, `"s"`, `"d"`, `"up"`, `"down"`,
`"enter"` and `"escape"`.

- `game.state` is a `GameState`: `MENU`, `PLAYING`, `PAUSED` or `GAME_OVER`.
- `game.running` becomes false when *Quit* is chosen.

The other modules behind the game are:

| Module                      | Contents                                                                                |
|-----------------------------|-----------------------------------------------------------------------------------------|
| `mazerunner.level_manager`  | `LevelManager`: loads levels and answers `is_wall`, `is_end` and `level_time`           |
| `mazerunner.player`         | `Player`                                                                                |
| `mazerunner.trap`           | `Trap`                                                                                  |
| `mazerunner.actor`          | `Vec2`, `FloatRect` (with `intersects` and `contains`) and the abstract base class `Actor` |
| `mazerunner.utils`          | `executable_dir()`                                                                      |

## The chase engine

These modules work on a 21×21 grid of 16-pixel cells. Each cell is a
`mazerunner.board.Cell`: `DOOR`, `EMPTY`, `ENERGIZER`, `PELLET` or `WALL`. The
grid is indexed as `grid[x][y]`. Positions are integer-pixel
`mazerunner.board.Position` values.

| Module                        | Contents |
|-------------------------------|----------|
| `mazerunner.board`            | The constants, `Cell`, `Position` and `empty_map()` |
| `mazerunner.map_collision`    | `map_collision(collect_pellets, use_door, x, y, grid)`: tests for walls and doors, or eats pellets and reports whether an energizer was eaten |
| `mazerunner.convert_sketch`   | `convert_sketch(rows)`: reads 21 text rows into a `Sketch` holding `grid`, `ghost_positions` and `pacman_position` (see below) |
| `mazerunner.pacman`           | `Pacman`: steered by the arrow-key names `"right"`, `"up"`, `"left"`, `"down"` |
| `mazerunner.ghost`            | `Ghost`: scatter, chase and frightened behaviour for ghost ids 0 to 3 |
| `mazerunner.ghost_manager`    | `GhostManager`: all four ghosts and the scatter/chase waves |
| `mazerunner.draw_map`         | `draw_map(grid, surface)` and `wall_tile_index(grid, x, y)` |
| `mazerunner.draw_text`        | `draw_text(...)` and the pure layout helper `text_layout(...)` |

The sketch characters that `convert_sketch` reads are:

- `#` wall
- `=` door
- `.` pellet
- `o` energizer
- `0` to `3` ghost starts
- `P` the player's start

Rows that are too few, or shorter than 21 characters, raise `ValueError`.

The drawing functions look for `Resources/Images/Map16.png`, `Ghost16.png`,
`Pacman16.png`, `PacmanDeath16.png` and `Font.png` in the current directory.
If an image is missing, they draw nothing.

```python
import random

from mazerunner.convert_sketch import convert_sketch
from mazerunner.ghost_manager import GhostManager
from mazerunner.pacman import Pacman

sketch = convert_sketch(rows)          # rows: 21 strings of 21 characters
pacman = Pacman()
pacman.position = sketch.pacman_position
ghosts = GhostManager(random.Random(1))
ghosts.reset(0, sketch.ghost_positions)

pacman.update(0, sketch.grid, {"left"})
ghosts.update(0, sketch.grid, pacman)
print(pacman.dead, pacman.energizer_timer)
```

## What is not included

The chase engine has no command, window or game loop of its own. The
`mazerunner` command runs only the maze game. To play with Pacman and the
ghosts, you have to write the main loop around `Pacman`, `GhostManager`,
`draw_map` and `draw_text` yourself, including scoring and level progression.