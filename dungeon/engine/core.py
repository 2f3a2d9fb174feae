from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from ..exceptions import LevelFormatError, SessionOverError
from ..models.api import TurnResult
from ..models.enums import MoveOutcome, SessionStatus
from ..models.player import Player
from ..models.session import DungeonSession
from .grid_store import release, resize_double
from .levels import parse_level
from .logging.logger import log_error, log_quit, log_turn
from .monsters import advance_monsters
from .movement import check_marker, resolve_move

if TYPE_CHECKING:
    from ..models.enums import Direction

MESSAGES: dict[MoveOutcome, str] = {
    MoveOutcome.STAYED: "You stay where you are.",
    MoveOutcome.MOVED: "You move.",
    MoveOutcome.MOVED_TREASURE: "You found treasure!",
    MoveOutcome.MOVED_AMULET: "You picked up the amulet. The dungeon grows!",
    MoveOutcome.MOVED_DOOR: "You pass through the door.",
    MoveOutcome.MOVED_EXIT: "You escaped the dungeon!",
}
CAUGHT_MESSAGE = "A monster caught you."
FINAL_DOOR_MESSAGE = "The last door leads out of the dungeon. You escaped!"


class DungeonEngine:
    """Sequences one turn: the player's move, then the monsters' advance."""

    def new_session(
        self, levels: list[str], session_id: str | None = None
    ) -> DungeonSession:
        if not levels:
            raise LevelFormatError("at least one level is required")
        parsed = []
        for i, text in enumerate(levels):
            try:
                parsed.append(parse_level(text))
            except LevelFormatError as e:
                raise LevelFormatError(f"level {i}: {e}") from e
        grid, player = parsed[0]
        return DungeonSession(
            id=session_id or str(uuid4()),
            levels=list(levels),
            grid=grid,
            player=player,
        )

    def take_turn(
        self, sess: DungeonSession, direction: Direction | None
    ) -> TurnResult:
        if sess.status != SessionStatus.IN_PROGRESS:
            raise SessionOverError(sess.id, sess.status.value)
        try:
            result = self._resolve(sess, direction)
        except Exception as e:
            log_error(sess, direction, e)
            raise
        log_turn(sess, direction, result.outcome, caught=result.caught, message=result.message)
        sess.turn += 1
        return result

    def quit(self, sess: DungeonSession) -> None:
        if sess.status != SessionStatus.IN_PROGRESS:
            raise SessionOverError(sess.id, sess.status.value)
        sess.status = SessionStatus.QUIT
        log_quit(sess)

    def _resolve(self, sess: DungeonSession, direction: Direction | None) -> TurnResult:
        outcome, reason = (
            resolve_move(sess.grid, sess.player, direction)
            if direction is not None
            else (MoveOutcome.STAYED, None)
        )
        message = f"You can't go that way: {reason}." if reason else MESSAGES[outcome]

        if outcome is MoveOutcome.MOVED_AMULET:
            sess.grid = resize_double(sess.grid)
        elif outcome is MoveOutcome.MOVED_DOOR:
            if sess.level_index + 1 < len(sess.levels):
                self._enter_level(sess, sess.level_index + 1)
            else:
                sess.status = SessionStatus.ESCAPED
                message = FINAL_DOOR_MESSAGE
        elif outcome is MoveOutcome.MOVED_EXIT:
            sess.status = SessionStatus.ESCAPED

        caught = False
        if sess.status == SessionStatus.IN_PROGRESS:
            caught = advance_monsters(sess.grid, sess.player)
            if caught:
                sess.status = SessionStatus.CAUGHT
                message = CAUGHT_MESSAGE
            else:
                check_marker(sess.grid, sess.player)

        return TurnResult(
            outcome=outcome,
            caught=caught,
            status=sess.status,
            level_index=sess.level_index,
            message=message,
        )

    def _enter_level(self, sess: DungeonSession, index: int) -> None:
        grid, start = parse_level(sess.levels[index])
        release(sess.grid)
        sess.grid = grid
        sess.player = Player(row=start.row, col=start.col, treasure=sess.player.treasure)
        sess.level_index = index
