# solong

A small top-down puzzle game drawn with pygame. The player walks across a
tile map, eats every fish on it, and then leaves through the exit. After each
step the running move count is printed to standard output.

## Installing

```
pip install .
```

The test suite needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
so_long maps/level1.ber
```

The command takes exactly one argument, a map file whose name ends in `.ber`
(the text after the last dot must be exactly `.ber`). It also expects a
`textures/` directory in the current working directory holding
`floor.xpm`, `player.xpm`, `exit.xpm`, `wall.xpm` and `fish.xpm`. Each tile is
drawn 64 × 64 pixels, and the window is sized to fit the whole map.

Controls:

| Key    | Action     |
|--------|------------|
| W      | move up    |
| S      | move down  |
| A      | move left  |
| D      | move right |
| Escape | end game   |

Keys act when they are released. Walking into a wall does nothing and is not
counted as a move. Stepping onto the exit while fish remain prints
`Eat all fishes` and the player stands on the exit; stepping onto it with every
fish eaten ends the game with `Congratulations! Zeytin is happy!`. Escape ends
the game with the same message. Closing the window ends it silently.

Exit status is 0 once the game ends, and 1 when:

- the number of arguments is not one (`Wrong argument`);
- a texture file cannot be opened (`Wrong texture`);
- the map is rejected (see below).

Messages for these cases go to standard error.

## Map format

A map is a plain text file, one row per line, made of these characters:

| Char | Meaning                         |
|------|---------------------------------|
| `1`  | wall                            |
| `0`  | floor                           |
| `P`  | player start (exactly one)      |
| `E`  | exit (exactly one)              |
| `C`  | fish to collect (at least one)  |

For example:

```
1111111
1P0C0E1
1111111
```

A map is rejected, with the message shown, when:

| Message                    | Cause                                                    |
|----------------------------|----------------------------------------------------------|
| `Wrong file name`          | the name does not end in `.ber`                          |
| `Map couldn't read!`       | the file cannot be opened                                |
| `Map error`                | the file is empty, or its rows differ in length          |
| `Incorrect Map Contents!`  | an unknown character, or wrong counts of `P`, `E`, `C`   |
| `Map walls not correct!`   | the border is not made entirely of walls                 |
| `Map target not correct!`  | the exit or some fish cannot be reached from the player  |

## Using the library

The map checks and the game rules work without a window.

```python
from solong.maps import load_map, MapError
from solong.game import Game, GameOver, Key

game_map = load_map("maps/level1.ber")   # raises MapError on a bad map
game = Game(game_map)                    # move counts go to sys.stdout
try:
    game.move(1, 0)                      # True if the player moved
    game.handle_key(Key.D)
except GameOver as over:
    print(over.message)
```

### `solong.maps`

- `GameMap` — a grid addressed as `rows[y][x]`, with `height`, `width`,
  `find_player()` returning `(x, y)` and `count(tile)`.
- `check_map_arg(path)`, `read_map(path)`, `validate_map(game_map)` (returns
  the number of fish) and `check_reachable(game_map)` — the individual steps,
  each raising `MapError`, whose `message` holds the texts listed above.
- `load_map(path)` — all of the steps in order.

### `solong.game`

- `Game(game_map, out=None)` — tracks `player_x`, `player_y`, the remaining
  `collectibles` and `moves`; `move(dx, dy)`, `handle_key(keycode)` and
  `tile_at(x, y)`. Unknown keys are ignored.
- `Key` — the key codes the game reacts to.
- `GameOver` — raised when the game is won or Escape is pressed.

### `solong.display`

- `check_textures(directory)` and `load_textures(directory)` — the texture
  files, the former raising `FileNotFoundError("Wrong texture")`.
- `Renderer(game, screen, textures)` with `draw_map()`, `draw_tile(row, col)`
  and `update_player(old_x, old_y)`.
- `keycode_for(pygame_key)` — maps pygame key constants to `Key`.
- `run(game, texture_dir)` — opens the window and plays until the window is
  closed or `GameOver` propagates.

### `solong.linereader`

- `LineReader(stream, buffer_size=5)` — reads lines (newlines kept) by pulling
  a fixed number of characters at a time; `read_line()`, `reset()`, iteration.
- `read_lines(path, buffer_size=5)` — every line of a file.

### Text and byte helpers

- `solong.asciitools` — ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case changes (`to_lower`, `to_upper`),
  `atoi`, `itoa`, and stream output (`put_char`, `put_str`, `put_endl`,
  `put_nbr`).
- `solong.membytes` — `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` over `bytes` and `bytearray`.
- `solong.strsearch` — `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  returning indices or `None`.
- `solong.strbuild` — `split`, `strdup`, `striteri`, `strjoin`, `strlcat`,
  `strlcpy`, `strmapi`, `strtrim`, `substr`.