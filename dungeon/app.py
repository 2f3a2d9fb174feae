from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Query
from pydantic import TypeAdapter

from . import config, storage
from .engine.core import DungeonEngine
from .engine.levels import render
from .exceptions import LevelFormatError, SessionOverError, UnknownCommandError
from .levels.demo import default_demo_levels
from .logging_listeners import register_listeners
from .models.api import (
    CreateSessionRequest,
    SessionView,
    TurnLogEntry,
    TurnLogResponse,
    TurnRequest,
    TurnResponse,
    TurnResult,
)
from .models.commands import Command
from .models.enums import MoveOutcome
from .models.session import DungeonSession

app = FastAPI(title="Dungeon Crawl")
engine = DungeonEngine()
register_listeners()


def _view(sess: DungeonSession) -> SessionView:
    return SessionView(
        id=sess.id,
        level_index=sess.level_index,
        level_count=len(sess.levels),
        turn=sess.turn,
        status=sess.status,
        rows=sess.grid.rows,
        cols=sess.grid.cols,
        player=sess.player,
        board=render(sess.grid),
    )


def _load(sid: str) -> DungeonSession:
    sess = storage.get(sid)
    if not sess:
        raise HTTPException(404, "session not found")
    return sess


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "storage": "memory", "sessions": len(storage.list_all())}


@app.get("/sessions", response_model=list[SessionView])
def list_sessions():
    return [_view(s) for s in storage.list_all()]


@app.post("/sessions", response_model=SessionView)
def create_session(req: CreateSessionRequest):
    try:
        sess = engine.new_session(req.levels or default_demo_levels())
    except LevelFormatError as e:
        raise HTTPException(400, str(e))
    storage.save(sess)
    return _view(sess)


@app.get("/sessions/{sid}", response_model=SessionView)
def get_session(sid: str):
    return _view(_load(sid))


@app.delete("/sessions/{sid}")
def delete_session(sid: str) -> dict[str, bool]:
    with storage.locked(sid):
        deleted = storage.delete(sid)
    if not deleted:
        raise HTTPException(404, "session not found")
    return {"deleted": True}


@app.post("/sessions/{sid}/turn", response_model=TurnResponse)
def take_turn(sid: str, req: TurnRequest):
    try:
        command = Command.from_symbol(req.command)
    except UnknownCommandError as e:
        raise HTTPException(400, str(e))
    # load, play and save as one step per session
    with storage.locked(sid):
        sess = _load(sid)
        try:
            if command is Command.QUIT:
                engine.quit(sess)
                result = TurnResult(
                    outcome=MoveOutcome.STAYED,
                    status=sess.status,
                    level_index=sess.level_index,
                    message="You gave up.",
                )
            else:
                result = engine.take_turn(sess, command.direction)
        except SessionOverError as e:
            raise HTTPException(409, str(e))
        storage.save(sess)
    return TurnResponse(result=result, session=_view(sess))


@app.get("/sessions/{sid}/log", response_model=TurnLogResponse)
def get_turn_log(sid: str, limit: int = Query(50, ge=1, le=1000)):
    _load(sid)
    raw = storage.logs.list(sid, limit)
    ta = TypeAdapter(TurnLogEntry)
    return TurnLogResponse(entries=[ta.validate_json(s) for s in raw])


def serve() -> None:
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
