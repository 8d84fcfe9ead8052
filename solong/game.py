"""Game state: the player's moves, collected items and the action counter."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from .pathing import find_tile

FLOOR = "0"
WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"


class Direction(Enum):
    """A step on the grid, as ``(dx, dy)``."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What a move attempt did."""

    BLOCKED = auto()
    MOVED = auto()
    COLLECTED = auto()
    WON = auto()


class Game:
    """A map being played: player position, collectibles and actions taken."""

    def __init__(self, grid: Sequence[str]) -> None:
        self.player_x, self.player_y = find_tile(grid, PLAYER)
        self._grid = [list(row) for row in grid]
        self._grid[self.player_y][self.player_x] = FLOOR
        self.total = sum(row.count(COLLECTIBLE) for row in grid)
        self.collected = 0
        self.actions = 0
        self.won = False

    @property
    def width(self) -> int:
        """Width of the map, taken from its last row."""
        return len(self._grid[-1])

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def player(self) -> tuple[int, int]:
        return self.player_x, self.player_y

    @property
    def rows(self) -> list[str]:
        """The current map with the player drawn at its position."""
        rows = ["".join(row) for row in self._grid]
        row = rows[self.player_y]
        rows[self.player_y] = row[: self.player_x] + PLAYER + row[self.player_x + 1 :]
        return rows

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile under position ``(x, y)``, ignoring the player."""
        if not (0 <= y < len(self._grid) and 0 <= x < len(self._grid[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self._grid[y][x]

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one step in ``direction``."""
        if self.won:
            return MoveResult.WON
        x = self.player_x + direction.dx
        y = self.player_y + direction.dy
        try:
            tile = self.tile_at(x, y)
        except IndexError:
            return MoveResult.BLOCKED
        if tile == WALL:
            return MoveResult.BLOCKED
        result = MoveResult.MOVED
        if tile == COLLECTIBLE:
            self._grid[y][x] = FLOOR
            self.collected += 1
            result = MoveResult.COLLECTED
        elif tile == EXIT:
            if self.collected == self.total:
                self.won = True
                return MoveResult.WON
            return MoveResult.BLOCKED
        self.actions += 1
        self.player_x, self.player_y = x, y
        return result


def format_action(count: int) -> str:
    """Return the line reporting how many actions have been taken."""
    return f"Number of action : {count}"