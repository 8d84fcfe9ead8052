"""Reachability checks: can the player collect everything and reach the exit."""

from __future__ import annotations

from collections.abc import Sequence

WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"


def find_tile(grid: Sequence[str], tile: str) -> tuple[int, int]:
    """Return the ``(x, y)`` position of the last ``tile`` in row-major order.

    Raises ``ValueError`` when the grid holds no such tile.
    """
    found = [
        (x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == tile
    ]
    if not found:
        raise ValueError(f"no {tile!r} tile in the map")
    return found[-1]


def _tile(grid: Sequence[str], x: int, y: int) -> str | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def flood_fill(grid: Sequence[str], start: tuple[int, int]) -> frozenset[tuple[int, int]]:
    """Return every position reachable from ``start`` without crossing a wall.

    Movement is horizontal and vertical; every tile other than a wall,
    the exit included, can be walked through. The grid is not modified.
    """
    reached: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached:
            continue
        tile = _tile(grid, x, y)
        if tile is None or tile == WALL:
            continue
        reached.add((x, y))
        pending.extend(((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)))
    return frozenset(reached)


def is_playable(grid: Sequence[str]) -> bool:
    """Tell whether every collectible and the exit can be reached from the player."""
    reached = flood_fill(grid, find_tile(grid, PLAYER))
    exit_position = find_tile(grid, EXIT)
    collectibles = {
        (x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == COLLECTIBLE
    }
    return exit_position in reached and collectibles <= reached