from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from dungeon.models.enums import MoveOutcome, SessionStatus, TurnLogResult


@dataclass
class TurnEvent:
    session_id: str
    turn: int
    level_index: int
    direction: str | None
    outcome: MoveOutcome | None
    caught: bool
    status: SessionStatus
    result: TurnLogResult
    message: str | None = None


T = TypeVar("T")


class EventBus:
    """Synchronous per-type dispatch of turn events to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: dict[type[Any], list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: Any) -> None:
        # Snapshot so a handler may unsubscribe itself mid-dispatch;
        # handler exceptions propagate to the emitter
        for handler in tuple(self._handlers.get(type(event), ())):
            handler(event)


# Global bus instance
event_bus = EventBus()
