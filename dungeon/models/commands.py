from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownCommandError
from .enums import Direction


class Command(str, Enum):
    """
    One keystroke of player input:
    - UP/DOWN/LEFT/RIGHT: attempt a move
    - STAY: skip the move, monsters still advance
    - QUIT: abandon the session
    """

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    STAY = "e"
    QUIT = "q"

    @classmethod
    def from_symbol(cls, symbol: str) -> Command:
        key = (symbol or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            raise UnknownCommandError(f"unknown command {symbol!r}") from None

    @property
    def direction(self) -> Direction | None:
        return {
            Command.UP: Direction.UP,
            Command.DOWN: Direction.DOWN,
            Command.LEFT: Direction.LEFT,
            Command.RIGHT: Direction.RIGHT,
        }.get(self)
