from __future__ import annotations

from enum import Enum

Coord = tuple[int, int]  # (row, col)


class Tile(str, Enum):
    OPEN = "-"
    PLAYER = "o"
    TREASURE = "$"
    AMULET = "@"
    MONSTER = "M"
    PILLAR = "+"
    DOOR = "?"
    EXIT = "!"
    # Fill written into replicated quadrants by resize_double
    WALL = "#"

    @property
    def blocks_sight(self) -> bool:
        return self in (Tile.PILLAR, Tile.WALL)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]


_DELTAS: dict[Direction, Coord] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class MoveOutcome(str, Enum):
    STAYED = "stayed"
    MOVED = "moved"
    MOVED_TREASURE = "moved_treasure"
    MOVED_AMULET = "moved_amulet"
    MOVED_DOOR = "moved_door"
    MOVED_EXIT = "moved_exit"


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    ESCAPED = "escaped"
    CAUGHT = "caught"
    QUIT = "quit"


class TurnLogResult(str, Enum):
    APPLIED = "applied"
    QUIT = "quit"
    ERROR = "error"
