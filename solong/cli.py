"""Command line entry point: validate the map file and start the game."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .checker import MapError, check_map
from .display import run_window
from .game import Game
from .mapfile import has_ber_extension, load_map
from .pathing import is_playable

IMAGE_DIR = Path("img")
USAGE_ERROR = 2
MAP_ERROR = 1


def prepare_game(path: str | PathLike[str]) -> Game:
    """Load, validate and check the playability of the map at ``path``.

    Raises ``MapError`` when the map is invalid or cannot be finished.
    """
    grid = load_map(path)
    check_map(grid)
    if not is_playable(grid):
        raise MapError("The map is not possible to play.")
    return Game(grid)


def _report(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def _can_open(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not _can_open(args[0]):
        _report("Bad file name.")
        return USAGE_ERROR
    if len(args) != 1:
        _report("Number of argument(s) invalid.")
        return USAGE_ERROR
    if not has_ber_extension(args[0]):
        _report("Bad extension.")
        return USAGE_ERROR
    try:
        game = prepare_game(args[0])
    except MapError as error:
        _report(error.message)
        return MAP_ERROR
    except OSError:
        _report("Bad file name.")
        return USAGE_ERROR
    try:
        run_window(game, IMAGE_DIR)
    except OSError:
        return USAGE_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())