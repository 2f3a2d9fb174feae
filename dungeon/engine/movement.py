from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import InvariantViolation
from ..models.enums import Direction, MoveOutcome, Tile

if TYPE_CHECKING:
    from ..models.grid import Grid
    from ..models.player import Player

# Tile the player steps onto -> outcome of an accepted move
_ENTER: dict[Tile, MoveOutcome] = {
    Tile.OPEN: MoveOutcome.MOVED,
    Tile.TREASURE: MoveOutcome.MOVED_TREASURE,
    Tile.AMULET: MoveOutcome.MOVED_AMULET,
    Tile.DOOR: MoveOutcome.MOVED_DOOR,
    Tile.EXIT: MoveOutcome.MOVED_EXIT,
}
_BLOCKING = frozenset({Tile.PILLAR, Tile.MONSTER, Tile.WALL})


def check_marker(grid: Grid, player: Player) -> None:
    markers = grid.find(Tile.PLAYER)
    if markers != [player.pos]:
        raise InvariantViolation(
            f"player at {player.pos} but marker(s) found at {markers}"
        )


def target_of(player: Player, direction: Direction) -> tuple[int, int]:
    dr, dc = direction.delta
    return player.row + dr, player.col + dc


def blocked_reason(grid: Grid, player: Player, direction: Direction) -> str | None:
    """Why a move in ``direction`` would be refused, or None when it is allowed."""
    row, col = target_of(player, direction)
    if not grid.in_bounds(row, col):
        return "out of bounds"
    target = grid.tile(row, col)
    if target in _BLOCKING:
        return f"blocked by {target.name.lower()}"
    if target is Tile.EXIT and player.treasure < 1:
        return "exit needs at least one treasure"
    if target not in _ENTER:
        raise InvariantViolation(f"no move outcome defined for tile {target!r}")
    return None


def resolve_move(
    grid: Grid, player: Player, direction: Direction
) -> tuple[MoveOutcome, str | None]:
    """Apply a move if allowed; a Stayed outcome carries the refusal reason."""
    reason = blocked_reason(grid, player, direction)
    if reason is not None:
        return MoveOutcome.STAYED, reason
    row, col = target_of(player, direction)
    outcome = _ENTER[grid.tile(row, col)]
    grid.set(player.row, player.col, Tile.OPEN)
    grid.set(row, col, Tile.PLAYER)
    player.row, player.col = row, col
    if outcome is MoveOutcome.MOVED_TREASURE:
        player.treasure += 1
    return outcome, None


def attempt_move(grid: Grid, player: Player, direction: Direction) -> MoveOutcome:
    return resolve_move(grid, player, direction)[0]
