from __future__ import annotations

import logging

from . import storage
from .events import TurnEvent, event_bus
from .models.api import TurnLogEntry
from .models.enums import TurnLogResult

logger = logging.getLogger(__name__)

_registered = False


def _on_turn_event(ev: TurnEvent) -> None:
    # Convert event to TurnLogEntry JSON for the session log
    entry = TurnLogEntry(
        session_id=ev.session_id,
        turn=ev.turn,
        level_index=ev.level_index,
        direction=ev.direction,
        outcome=ev.outcome,
        caught=ev.caught,
        status=ev.status,
        result=ev.result,
        message=ev.message,
    )
    storage.logs.append(ev.session_id, entry.model_dump_json())
    level = logging.WARNING if ev.result == TurnLogResult.ERROR else logging.INFO
    logger.log(
        level,
        "session=%s turn=%d level=%d direction=%s outcome=%s status=%s %s",
        ev.session_id,
        ev.turn,
        ev.level_index,
        ev.direction,
        ev.outcome.value if ev.outcome else None,
        ev.status.value,
        ev.message or "",
    )


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(TurnEvent, _on_turn_event)
    _registered = True
