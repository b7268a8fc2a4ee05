"""Drawing the game with pygame and running its event loop."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import pygame

from .game import Game, Key
from .maps import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL

TILE_SIZE = 64
WINDOW_TITLE = "so_long"
WRONG_TEXTURE = "Wrong texture"

TEXTURE_FILES = {
    "floor": "floor.xpm",
    "player": "player.xpm",
    "exit": "exit.xpm",
    "wall": "wall.xpm",
    "fish": "fish.xpm",
}

_TILE_TEXTURES = {
    WALL: "wall",
    PLAYER: "player",
    EXIT: "exit",
    COLLECTIBLE: "fish",
    FLOOR: "floor",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
}


def check_textures(directory: str | PathLike[str]) -> list[Path]:
    """Make sure every texture file can be opened; return their paths."""
    paths = [Path(directory) / name for name in TEXTURE_FILES.values()]
    for path in paths:
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise FileNotFoundError(WRONG_TEXTURE) from exc
    return paths


def load_textures(directory: str | PathLike[str]) -> dict[str, pygame.Surface]:
    """Load every texture image from ``directory``, keyed by texture name."""
    paths = check_textures(directory)
    return {
        name: pygame.image.load(str(path)) for name, path in zip(TEXTURE_FILES, paths)
    }


def keycode_for(pygame_key: int) -> Key | None:
    """Translate a pygame key constant to a game key, or None if unused."""
    return _PYGAME_KEYS.get(pygame_key)


class Renderer:
    """Draws a game's map onto a surface, one tile per texture."""

    def __init__(
        self, game: Game, screen: pygame.Surface, textures: dict[str, pygame.Surface]
    ) -> None:
        self.game = game
        self.screen = screen
        self.textures = textures

    def _blit(self, name: str, col: int, row: int) -> None:
        self.screen.blit(self.textures[name], (col * TILE_SIZE, row * TILE_SIZE))

    def draw_tile(self, row: int, col: int) -> None:
        """Draw the texture for the map tile at ``row``, ``col``."""
        name = _TILE_TEXTURES.get(self.game.tile_at(col, row))
        if name is not None:
            self._blit(name, col, row)

    def draw_map(self) -> None:
        """Draw every tile of the map."""
        for row, tiles in enumerate(self.game.game_map.rows):
            for col, _ in enumerate(tiles):
                self.draw_tile(row, col)

    def update_player(self, old_x: int, old_y: int) -> None:
        """Redraw the tile the player left and the player at its new place."""
        left = "exit" if self.game.tile_at(old_x, old_y) == EXIT else "floor"
        self._blit(left, old_x, old_y)
        self._blit("player", self.game.player_x, self.game.player_y)


def run(game: Game, texture_dir: str | PathLike[str]) -> None:
    """Open a window and play ``game`` until it ends or the window closes.

    GameOver raised by the game propagates to the caller.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.game_map.width * TILE_SIZE, game.game_map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(game, screen, load_textures(texture_dir))
        renderer.draw_map()
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYUP:
                continue
            keycode = keycode_for(event.key)
            if keycode is None:
                continue
            old_x, old_y = game.player_x, game.player_y
            if game.handle_key(keycode):
                renderer.update_player(old_x, old_y)
                pygame.display.flip()
    finally:
        pygame.quit()