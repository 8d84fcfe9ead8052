"""Validation of a map grid before it can be played."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

VALID_TILES = frozenset("10EPC")


class MapError(ValueError):
    """Raised when a map fails one of the validity checks."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ComponentCounts:
    """How many collectibles, exits and players a map holds."""

    collectibles: int = 0
    exits: int = 0
    players: int = 0

    @property
    def is_valid(self) -> bool:
        """At least one collectible, exactly one exit and one player."""
        return self.collectibles > 0 and self.exits == 1 and self.players == 1


def has_valid_structure(grid: Sequence[str]) -> bool:
    """Tell whether every tile is one of ``1``, ``0``, ``E``, ``P``, ``C``."""
    return all(set(row) <= VALID_TILES for row in grid)


def is_rectangular(grid: Sequence[str]) -> bool:
    """Tell whether the grid has rows and all of them share the first row's width."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def is_square(grid: Sequence[str]) -> bool:
    """Tell whether the number of rows equals the width of the first row."""
    return bool(grid) and len(grid) == len(grid[0])


def is_walled(grid: Sequence[str]) -> bool:
    """Tell whether the grid is closed by walls on all four sides."""
    if not grid or not grid[0]:
        return False
    width = len(grid[0])
    if set(grid[0]) != {"1"} or set(grid[-1]) != {"1"}:
        return False
    return all(
        len(row) >= width and row[0] == "1" and row[width - 1] == "1"
        for row in grid[1:]
    )


def count_components(grid: Sequence[str]) -> ComponentCounts:
    """Count collectibles, exits and players in the grid."""
    text = "".join(grid)
    return ComponentCounts(
        collectibles=text.count("C"),
        exits=text.count("E"),
        players=text.count("P"),
    )


def check_map(grid: Sequence[str]) -> ComponentCounts:
    """Run every check in order and return the component counts.

    Raises ``MapError`` describing the first check that fails.
    """
    if not has_valid_structure(grid):
        raise MapError("Structure issue.")
    if not is_rectangular(grid):
        raise MapError("Design issue.")
    if is_square(grid):
        raise MapError("The map is a square.")
    if not is_walled(grid):
        raise MapError("Wall issue.")
    counts = count_components(grid)
    if not counts.is_valid:
        raise MapError("Component issue.")
    return counts