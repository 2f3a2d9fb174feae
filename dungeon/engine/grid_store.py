"""Grid lifecycle: allocation, teardown and doubling resize."""

from __future__ import annotations

import logging

from ..exceptions import PreconditionError
from ..models.enums import Tile
from ..models.grid import Grid

logger = logging.getLogger(__name__)


def allocate(rows: int, cols: int) -> Grid:
    if rows <= 0 or cols <= 0:
        raise PreconditionError(f"grid dimensions must be positive, got {rows}x{cols}")
    return Grid(
        rows=rows,
        cols=cols,
        tiles=[[Tile.OPEN for _ in range(cols)] for _ in range(rows)],
    )


def release(grid: Grid) -> None:
    if grid.released:
        raise PreconditionError("grid already released")
    for line in grid.tiles:
        line.clear()
    grid.tiles.clear()
    grid.released = True


def _replica(tile: Tile) -> Tile:
    # Copies are not walkable space, and the player is never duplicated
    if tile is Tile.OPEN:
        return Tile.WALL
    if tile is Tile.PLAYER:
        return Tile.OPEN
    return tile


def resize_double(grid: Grid) -> Grid:
    """Return a 2R x 2C grid built from ``grid`` and release the original.

    Layout::

        +----------+----------+
        | original | replica  |
        +----------+----------+
        | replica  | replica  |
        +----------+----------+

    Replicas turn Open cells into Wall and the player marker into Open.
    The new grid is fully built before the old one is released, so a
    failure leaves the caller holding the untouched original.
    """
    if grid.released:
        raise PreconditionError("grid has been released")
    rows, cols = grid.rows, grid.cols
    bigger = allocate(rows * 2, cols * 2)
    for r in range(rows):
        for c in range(cols):
            src = grid.tiles[r][c]
            copy = _replica(src)
            bigger.tiles[r][c] = src
            bigger.tiles[r][c + cols] = copy
            bigger.tiles[r + rows][c] = copy
            bigger.tiles[r + rows][c + cols] = copy
    release(grid)
    logger.debug("Resized grid %dx%d -> %dx%d", rows, cols, bigger.rows, bigger.cols)
    return bigger
