from __future__ import annotations


class DungeonError(Exception):
    """Base class for errors raised by the dungeon core."""


class PreconditionError(DungeonError):
    """Raised when a caller passes invalid dimensions, coordinates or a released grid."""


class InvariantViolation(DungeonError):
    """Raised when grid and player state disagree or a tile has no defined outcome."""


class LevelFormatError(DungeonError):
    """Raised when level text cannot be parsed into a grid."""


class UnknownCommandError(DungeonError):
    """Raised when an input symbol does not map to a command."""


class SessionOverError(DungeonError):
    def __init__(self, session_id: str, status: str, *args: object):
        super().__init__(f"session {session_id} is over ({status})", *args)
        self.session_id = session_id
        self.status = status
