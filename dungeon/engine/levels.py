"""Level text format.

A level is whitespace-separated tokens::

    rows cols
    player_row player_col
    <rows * cols tile symbols>

Symbols are read one character at a time, so a row may be written as
``-$-M`` or ``- $ - M``. The player marker is placed at the start cell.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import LevelFormatError, PreconditionError
from ..models.enums import Tile
from ..models.grid import Grid
from ..models.player import Player
from .grid_store import allocate


def _header(tokens: list[str], name: str) -> tuple[int, int]:
    try:
        a, b = int(tokens.pop(0)), int(tokens.pop(0))
    except (IndexError, ValueError):
        raise LevelFormatError(f"missing or non-integer {name}") from None
    return a, b


def parse_level(text: str) -> tuple[Grid, Player]:
    tokens = text.split()
    rows, cols = _header(tokens, "dimensions")
    prow, pcol = _header(tokens, "player start")
    try:
        grid = allocate(rows, cols)
    except PreconditionError as e:
        raise LevelFormatError(str(e)) from e
    if not grid.in_bounds(prow, pcol):
        raise LevelFormatError(f"player start ({prow}, {pcol}) outside {rows}x{cols}")

    symbols = "".join(tokens)
    if len(symbols) != rows * cols:
        raise LevelFormatError(
            f"expected {rows * cols} tile symbols, found {len(symbols)}"
        )
    for i, ch in enumerate(symbols):
        r, c = divmod(i, cols)
        try:
            tile = Tile(ch)
        except ValueError:
            raise LevelFormatError(f"unknown tile {ch!r} at ({r}, {c})") from None
        if tile is Tile.PLAYER and (r, c) != (prow, pcol):
            raise LevelFormatError(f"stray player marker at ({r}, {c})")
        grid.tiles[r][c] = tile
    grid.tiles[prow][pcol] = Tile.PLAYER
    return grid, Player(row=prow, col=pcol)


def read_level_text(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise LevelFormatError(f"unable to open {path}: {e}") from e


def load_level(path: str | Path) -> tuple[Grid, Player]:
    return parse_level(read_level_text(path))


def render(grid: Grid) -> list[str]:
    return ["".join(t.value for t in line) for line in grid.tiles]


def dump_level(grid: Grid, player: Player) -> str:
    lines = [f"{grid.rows} {grid.cols}", f"{player.row} {player.col}"]
    lines.extend(render(grid))
    return "\n".join(lines) + "\n"
