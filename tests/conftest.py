# Shared helpers: build grids and players from compact level text.

import pytest

from dungeon.engine.levels import parse_level
from dungeon.events import TurnEvent, event_bus


def level(*rows: str, start: tuple[int, int]) -> str:
    return f"{len(rows)} {len(rows[0])}\n{start[0]} {start[1]}\n" + "\n".join(rows) + "\n"


@pytest.fixture()
def board():
    def _build(*rows: str, start: tuple[int, int]):
        return parse_level(level(*rows, start=start))

    return _build


@pytest.fixture()
def turn_events():
    seen: list[TurnEvent] = []
    event_bus.subscribe(TurnEvent, seen.append)
    try:
        yield seen
    finally:
        event_bus.unsubscribe(TurnEvent, seen.append)
