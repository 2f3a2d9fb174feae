from __future__ import annotations

from pydantic import BaseModel, model_validator

from ..exceptions import PreconditionError
from .enums import Coord, Tile


class Grid(BaseModel):
    rows: int
    cols: int
    tiles: list[list[Tile]]  # tiles[row][col]
    released: bool = False

    @model_validator(mode="after")
    def check_rectangular(self) -> Grid:
        if self.released:
            return self
        if len(self.tiles) != self.rows or any(len(r) != self.cols for r in self.tiles):
            raise ValueError(f"tiles must be exactly {self.rows}x{self.cols}")
        return self

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_live(self) -> None:
        if self.released:
            raise PreconditionError("grid has been released")

    def _check(self, row: int, col: int) -> None:
        self._check_live()
        if not self.in_bounds(row, col):
            raise PreconditionError(
                f"({row}, {col}) outside {self.rows}x{self.cols} grid"
            )

    def tile(self, row: int, col: int) -> Tile:
        self._check(row, col)
        return self.tiles[row][col]

    def set(self, row: int, col: int, tile: Tile) -> None:
        self._check(row, col)
        self.tiles[row][col] = tile

    def find(self, tile: Tile) -> list[Coord]:
        self._check_live()
        return [
            (r, c)
            for r, line in enumerate(self.tiles)
            for c, t in enumerate(line)
            if t == tile
        ]
