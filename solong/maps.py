"""Loading and validating game maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from .linereader import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})

MAP_EXTENSION = ".ber"

WRONG_FILE = "Wrong file name"
MAP_ERROR = "Map error"
MAP_READ = "Map couldn't read!"
MAP_CONTENTS = "Incorrect Map Contents!"
MAP_WALLS = "Map walls not correct!"
MAP_TARGET = "Map target not correct!"


class MapError(Exception):
    """Raised when a map file is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class GameMap:
    """A grid of tiles, addressed as ``rows[y][x]``."""

    rows: list[list[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def find_player(self) -> tuple[int, int]:
        """Return the player's ``(x, y)`` position, searching inside the walls."""
        for y, row in enumerate(self.rows[1:-1], start=1):
            for x, tile in enumerate(row[1 : self.width - 1], start=1):
                if tile == PLAYER:
                    return x, y
        raise MapError(MAP_CONTENTS)

    def count(self, tile: str) -> int:
        """Number of cells holding ``tile``."""
        return sum(row.count(tile) for row in self.rows)


def check_map_arg(path: str | PathLike[str]) -> None:
    """Require the file name to end in the map extension after its last dot."""
    name = str(path)
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != MAP_EXTENSION:
        raise MapError(WRONG_FILE)


def read_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file into a GameMap without validating its contents."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise MapError(MAP_READ) from exc
    if not lines:
        raise MapError(MAP_ERROR)
    return GameMap([line.strip("\n") for line in lines])


def _check_rectangular(game_map: GameMap) -> None:
    if not game_map.rows:
        raise MapError(MAP_ERROR)
    width = game_map.width
    if any(len(row) != width for row in game_map.rows):
        raise MapError(MAP_ERROR)


def _check_contents(game_map: GameMap) -> int:
    for row in game_map.rows:
        if any(tile not in TILES for tile in row):
            raise MapError(MAP_CONTENTS)
    collectibles = game_map.count(COLLECTIBLE)
    if game_map.count(PLAYER) != 1 or game_map.count(EXIT) != 1 or collectibles < 1:
        raise MapError(MAP_CONTENTS)
    return collectibles


def _check_walls(game_map: GameMap) -> None:
    top, bottom = game_map.rows[0], game_map.rows[-1]
    if any(tile != WALL for tile in top) or any(tile != WALL for tile in bottom):
        raise MapError(MAP_WALLS)
    if any(row[0] != WALL or row[-1] != WALL for row in game_map.rows):
        raise MapError(MAP_WALLS)


def validate_map(game_map: GameMap) -> int:
    """Check shape, contents and walls; return the number of collectibles."""
    _check_rectangular(game_map)
    collectibles = _check_contents(game_map)
    _check_walls(game_map)
    return collectibles


def check_reachable(game_map: GameMap) -> None:
    """Require the exit and every collectible to be reachable from the player."""
    start_x, start_y = game_map.find_player()
    seen: set[tuple[int, int]] = set()
    stack = [(start_x, start_y)]
    gathered = 0
    exit_reached = False
    while stack:
        x, y = stack.pop()
        if not (0 <= y < game_map.height and 0 <= x < game_map.width):
            continue
        if (x, y) in seen or game_map.rows[y][x] == WALL:
            continue
        seen.add((x, y))
        tile = game_map.rows[y][x]
        if tile == COLLECTIBLE:
            gathered += 1
        elif tile == EXIT:
            exit_reached = True
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    if not exit_reached or gathered != game_map.count(COLLECTIBLE):
        raise MapError(MAP_TARGET)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read a map file and run every check on it."""
    check_map_arg(path)
    game_map = read_map(path)
    validate_map(game_map)
    check_reachable(game_map)
    return game_map