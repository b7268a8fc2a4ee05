"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from .maps import COLLECTIBLE, EXIT, FLOOR, WALL, GameMap

END_GAME = "Congratulations! Zeytin is happy!\n"
EAT_ALL = "Eat all fishes\n"


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESCAPE = 65307
    W = 119
    S = 115
    A = 97
    D = 100


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


class GameOver(Exception):
    """Raised when the game ends, either won or abandoned."""

    def __init__(self, message: str = END_GAME) -> None:
        super().__init__(message)
        self.message = message


class Game:
    """A running game: the map, the player's position and the score so far.

    The move count is written to ``out`` after every move.
    """

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        self.game_map = game_map
        self.player_x, self.player_y = game_map.find_player()
        self.collectibles = game_map.count(COLLECTIBLE)
        self.moves = 0
        self.out = out if out is not None else sys.stdout

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` and row ``y``."""
        if not (0 <= y < self.game_map.height and 0 <= x < self.game_map.width):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.game_map.rows[y][x]

    def move(self, dx: int, dy: int) -> bool:
        """Try to move the player by ``(dx, dy)``; return True if it moved.

        Raises GameOver when the player steps onto the exit with every
        collectible gathered.
        """
        new_x = self.player_x + dx
        new_y = self.player_y + dy
        tile = self.tile_at(new_x, new_y)
        if tile == WALL:
            return False
        if tile == COLLECTIBLE and self.collectibles:
            self.collectibles -= 1
            self.game_map.rows[new_y][new_x] = FLOOR
        if tile == EXIT:
            if self.collectibles:
                self.out.write(EAT_ALL)
            else:
                raise GameOver()
        self.player_x, self.player_y = new_x, new_y
        self.moves += 1
        self.out.write(f"{self.moves}\n")
        return True

    def handle_key(self, keycode: int) -> bool:
        """React to a key; return True if the player moved.

        Escape ends the game by raising GameOver; other unknown keys are ignored.
        """
        if keycode == Key.ESCAPE:
            raise GameOver()
        try:
            direction = _DIRECTIONS[Key(keycode)]
        except (ValueError, KeyError):
            return False
        return self.move(*direction)