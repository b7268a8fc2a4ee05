"""Command-line entry point: validate a map and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .display import check_textures, run
from .game import Game, GameOver
from .maps import MapError, load_map

TEXTURE_DIR = "textures"
WRONG_ARGUMENT = "Wrong argument\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(WRONG_ARGUMENT)
        return 1
    try:
        check_textures(TEXTURE_DIR)
    except OSError as exc:
        sys.stderr.write(str(exc))
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        sys.stderr.write(f"{exc.message}\n")
        return 1
    try:
        run(Game(game_map), TEXTURE_DIR)
    except GameOver as over:
        sys.stdout.write(over.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())