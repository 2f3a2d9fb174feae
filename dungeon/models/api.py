from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import MoveOutcome, SessionStatus, TurnLogResult
from .player import Player


class TurnResult(BaseModel):
    outcome: MoveOutcome
    caught: bool = False
    status: SessionStatus
    level_index: int
    message: str


# ----- API IO -----
class CreateSessionRequest(BaseModel):
    # Level texts in play order; the bundled demo levels when omitted
    levels: list[str] | None = None


class SessionView(BaseModel):
    id: str
    level_index: int
    level_count: int
    turn: int
    status: SessionStatus
    rows: int
    cols: int
    player: Player
    board: list[str]


class TurnRequest(BaseModel):
    command: str


class TurnResponse(BaseModel):
    result: TurnResult
    session: SessionView


# ----- Turn Log -----


class TurnLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    session_id: str
    turn: int
    level_index: int
    direction: str | None = None
    outcome: MoveOutcome | None = None
    caught: bool = False
    status: SessionStatus
    result: TurnLogResult = TurnLogResult.APPLIED
    message: str | None = None


class TurnLogResponse(BaseModel):
    entries: list[TurnLogEntry]
