from pydantic import BaseModel

from .enums import SessionStatus
from .grid import Grid
from .player import Player


class DungeonSession(BaseModel):
    id: str
    levels: list[str]  # raw level texts, played in order
    level_index: int = 0
    grid: Grid
    player: Player
    turn: int = 1
    status: SessionStatus = SessionStatus.IN_PROGRESS
