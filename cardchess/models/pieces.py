from __future__ import annotations

from pydantic import BaseModel

from ..core.primitives import Coordinate
from .enums import Color


class Piece(BaseModel):
    type: str
    color: Color
    # authoritative only while the piece sits on a board
    position: Coordinate | None = None

    def label(self) -> str:
        return f"{self.color.value[0]}{self.type}"


class PieceDef(BaseModel):
    name: str
    royal: bool = False  # capturing it ends the game
    castle_partner: bool = False  # corner piece that castles with a royal slider
