# solong

A top-down tile puzzle. You walk a character around a walled map, pick
up every collectible, and then step onto the exit. Each step that moves
the player is counted, and the count is printed to standard output as
`Number of action : N`.

## Installing

```
pip install .
```

This installs `pygame`, which draws the game window. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

Controls:

- `W` / Up arrow: move up
- `S` / Down arrow: move down
- `A` / Left arrow: move left
- `D` / Right arrow: move right
- `Esc` or closing the window: quit

Walls block movement. The exit blocks the player until every collectible
has been picked up; stepping on it then ends the game and closes the
window. The winning step is not counted.

### Exit status

- `0`: the game was won or quit.
- `1`: the map was rejected (`Error` and the reason are printed on
  standard error).
- `2`: the file could not be opened, the wrong number of arguments was
  given, the name has a bad extension, or a texture could not be loaded.

The file is tried before the argument count is checked. The extension
check looks at the first `.` in the argument and requires it to be
followed by `ber`, so a path such as `./maps/level.ber` is rejected;
pass a path without a leading `./`.

## Map files

Maps are plain text files. Each non-empty line is one row of the map,
and only these characters are allowed:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |

The checks run in this order, and the first that fails is reported:

1. only the characters above (`Structure issue.`);
2. every row has the width of the first row (`Design issue.`);
3. the number of rows differs from the width (`The map is a square.`);
4. the map is enclosed by walls on all four sides (`Wall issue.`);
5. exactly one `P`, exactly one `E` and at least one `C`
   (`Component issue.`);
6. every collectible and the exit can be reached from the start
   (`The map is not possible to play.`).

Example:

```
1111111111
1P0C00C0E1
1111111111
```

## Images

The window is drawn from five images in an `img/` directory under the
current working directory: `floor.xpm`, `wall.xpm`, `key.xpm`,
`tardis.xpm` and `doctor.xpm`. Tiles are placed on a 100-pixel grid and
the images are not scaled. Collectibles, the exit and the player are
drawn over the floor image. If an image is missing or cannot be loaded,
the program exits with status 2 without opening a game.

## Using it as a library

Everything but the window works without pygame being initialised:

```python
from solong.mapfile import load_map
from solong.checker import check_map, MapError
from solong.pathing import is_playable
from solong.game import Game, Direction, MoveResult

grid = load_map("level.ber")   # list of row strings
counts = check_map(grid)       # raises MapError; returns ComponentCounts
assert is_playable(grid)

game = Game(grid)
result = game.move(Direction.RIGHT)   # a MoveResult
print(game.player, game.collected, game.total, game.actions, game.won)
print("\n".join(game.rows))
```

Modules:

- `solong.mapfile`: `read_lines(stream, buffer_size)` yields the lines of
  a text or binary stream read in chunks; `parse_map(text)` splits text
  into rows, dropping empty lines; `load_map(path)` reads a file into
  rows; `has_ber_extension(name)` performs the extension check above.
- `solong.checker`: `has_valid_structure`, `is_rectangular`, `is_square`,
  `is_walled` and `count_components` for the individual checks, and
  `check_map(grid)`, which runs them in order and raises `MapError`
  (its `message` holds the reason) or returns a `ComponentCounts`
  (`collectibles`, `exits`, `players`, `is_valid`).
- `solong.pathing`: `find_tile(grid, tile)` returns the `(x, y)` of the
  last matching tile or raises `ValueError`; `flood_fill(grid, start)`
  returns the set of positions reachable without crossing a wall;
  `is_playable(grid)`.
- `solong.game`: `Game` with `move(direction)`, `tile_at(x, y)` and the
  `rows`, `player`, `width`, `height` properties; `Direction` (`LEFT`,
  `RIGHT`, `UP`, `DOWN`); `MoveResult` (`BLOCKED`, `MOVED`, `COLLECTED`,
  `WON`); `format_action(count)`.
- `solong.display`: `tile_layers(grid)` lists the images drawn at each
  position, `direction_for_key(key)` maps pygame key names to
  directions, and `run_window(game, image_dir)` runs the window.
- `solong.cli`: `prepare_game(path)` loads and validates a map and
  returns a `Game`; `main(argv)` is the `solong` command.

## What it does not do

The move count is shown only on standard output, not in the window.
There are no levels beyond the single map given on the command line,
no saving, and no animation.