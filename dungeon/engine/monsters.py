from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.enums import Direction, Tile

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.grid import Grid
    from ..models.player import Player

# Fixed scan order; each ray sees the grid as left by the previous one
SCAN_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def ray(grid: Grid, player: Player, direction: Direction) -> Iterator[tuple[int, int]]:
    """Cells from the player's own cell outward to the edge of the grid."""
    dr, dc = direction.delta
    r, c = player.row, player.col
    while grid.in_bounds(r, c):
        yield r, c
        r, c = r + dr, c + dc


def advance_along(grid: Grid, player: Player, direction: Direction) -> bool:
    """Step the nearest visible monster on one ray toward the player.

    Returns True when a monster moved.
    """
    dr, dc = direction.delta
    for r, c in ray(grid, player, direction):
        tile = grid.tile(r, c)
        if tile.blocks_sight:
            return False
        if tile is Tile.MONSTER:
            if (r, c) == player.pos:
                # already on the player; nowhere closer to go
                return False
            grid.set(r, c, Tile.OPEN)
            grid.set(r - dr, c - dc, Tile.MONSTER)
            return True
    return False


def advance_monsters(grid: Grid, player: Player) -> bool:
    """Advance monsters with line of sight to the player; True if the player is caught."""
    for direction in SCAN_ORDER:
        advance_along(grid, player, direction)
    return grid.tile(player.row, player.col) is Tile.MONSTER
