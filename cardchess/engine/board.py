from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.primitives import Coordinate
from ..errors import EmptySource, OutOfBounds

if TYPE_CHECKING:
    from ..models.config import BoardConfig
    from ..models.pieces import Piece


class Board:
    """Rectangular grid of optional pieces. The only owner of piece placement."""

    def __init__(self, width: int, height: int, pieces: list[Piece] | None = None):
        self.width = width
        self.height = height
        self._grid: list[list[Piece | None]] = [
            [None for _ in range(width)] for _ in range(height)
        ]
        for p in pieces or []:
            if p.position is None:
                raise ValueError(f"Piece {p.label()} has no position")
            self.set_piece(p.position, p)

    @classmethod
    def from_config(cls, config: BoardConfig) -> Board:
        return cls(config.width, config.height, [p.to_piece() for p in config.pieces])

    def in_bounds(self, c: Coordinate) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def _check(self, c: Coordinate) -> None:
        if not self.in_bounds(c):
            raise OutOfBounds(c, self.width, self.height)

    def has_piece(self, c: Coordinate) -> bool:
        return self.get_piece(c) is not None

    def get_piece(self, c: Coordinate) -> Piece | None:
        self._check(c)
        return self._grid[c.y][c.x]

    def set_piece(self, c: Coordinate, piece: Piece | None) -> None:
        self._check(c)
        displaced = self._grid[c.y][c.x]
        if displaced is not None and displaced is not piece:
            displaced.position = None
        if piece is not None:
            piece.position = c
        self._grid[c.y][c.x] = piece

    def remove_piece(self, c: Coordinate) -> Piece | None:
        removed = self.get_piece(c)
        self._grid[c.y][c.x] = None
        if removed is not None:
            removed.position = None
        return removed

    def move_piece(self, src: Coordinate, dst: Coordinate) -> None:
        self._check(src)
        self._check(dst)
        piece = self._grid[src.y][src.x]
        if piece is None:
            raise EmptySource(src)
        self.set_piece(dst, piece)
        if src != dst:
            self._grid[src.y][src.x] = None

    def all_pieces(self) -> list[Piece]:
        return [p for row in self._grid for p in row if p is not None]
