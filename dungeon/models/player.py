from pydantic import BaseModel, Field

from .enums import Coord


class Player(BaseModel):
    row: int = 0
    col: int = 0
    # Treasure collected so far; carried across levels
    treasure: int = Field(default=0, ge=0)

    @property
    def pos(self) -> Coord:
        return (self.row, self.col)
