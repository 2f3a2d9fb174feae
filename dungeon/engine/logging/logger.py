from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.enums import Direction, MoveOutcome
    from ...models.session import DungeonSession

from ...events import TurnEvent, event_bus
from ...models.enums import TurnLogResult


def log_turn(
    sess: DungeonSession,
    direction: Direction | None,
    outcome: MoveOutcome | None,
    result: TurnLogResult = TurnLogResult.APPLIED,
    caught: bool = False,
    message: str | None = None,
) -> None:
    event_bus.emit(
        TurnEvent(
            session_id=sess.id,
            turn=sess.turn,
            level_index=sess.level_index,
            direction=direction.value if direction else None,
            outcome=outcome,
            caught=caught,
            status=sess.status,
            result=result,
            message=message,
        )
    )


def log_quit(sess: DungeonSession) -> None:
    log_turn(sess, None, None, TurnLogResult.QUIT, message="player quit")


def log_error(sess: DungeonSession, direction: Direction | None, error: Exception) -> None:
    log_turn(sess, direction, None, TurnLogResult.ERROR, message=str(error))
