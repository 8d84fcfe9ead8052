"""The game window: textures, key bindings and the event loop."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from .game import Direction, Game, MoveResult, format_action

TILE_SIZE = 100
WINDOW_TITLE = "so_long"

FLOOR_IMAGE = "floor.xpm"
TEXTURES = {
    "0": FLOOR_IMAGE,
    "1": "wall.xpm",
    "C": "key.xpm",
    "E": "tardis.xpm",
    "P": "doctor.xpm",
}

_KEY_DIRECTIONS = {
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
}

QUIT_KEY = "escape"


def tile_layers(grid: Sequence[str]) -> list[tuple[int, int, tuple[str, ...]]]:
    """Return, for each drawable tile, its position and the images drawn on it.

    Walls and floor are a single image; collectibles, the exit and the
    player are drawn over a floor image. Unknown tiles are left out.
    """
    layers = []
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            image = TEXTURES.get(tile)
            if image is None:
                continue
            if image in (FLOOR_IMAGE, TEXTURES["1"]):
                layers.append((x, y, (image,)))
            else:
                layers.append((x, y, (FLOOR_IMAGE, image)))
    return layers


def direction_for_key(key: str) -> Direction | None:
    """Map a key name (``"w"``, ``"left"``...) to a direction, or ``None``."""
    return _KEY_DIRECTIONS.get(key.lower())


def run_window(game: Game, image_dir: str | PathLike[str]) -> None:
    """Open the game window and play until the player wins or quits.

    Raises ``FileNotFoundError`` when a texture is missing and ``OSError``
    when one cannot be loaded.
    """
    directory = Path(image_dir)
    paths = {name: directory / name for name in set(TEXTURES.values())}
    for path in paths.values():
        if not path.is_file():
            raise FileNotFoundError(f"missing texture: {path}")

    import pygame

    pygame.init()
    try:
        try:
            images = {name: pygame.image.load(str(path)) for name, path in paths.items()}
        except pygame.error as error:
            raise OSError(str(error)) from error
        screen = pygame.display.set_mode((game.width * TILE_SIZE, game.height * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        while True:
            for x, y, names in tile_layers(game.rows):
                for name in names:
                    screen.blit(images[name], (x * TILE_SIZE, y * TILE_SIZE))
            pygame.display.flip()
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            name = pygame.key.name(event.key)
            if name == QUIT_KEY:
                return
            direction = direction_for_key(name)
            if direction is None:
                continue
            result = game.move(direction)
            if result is MoveResult.WON:
                return
            if result in (MoveResult.MOVED, MoveResult.COLLECTED):
                print(format_action(game.actions))
    finally:
        pygame.quit()