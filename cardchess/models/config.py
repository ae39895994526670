from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from ..core.primitives import Coordinate
from .cards import CardDef
from .enums import Color
from .patterns import MovePattern
from .pieces import Piece, PieceDef

_COLOR_SHORTHAND = {"w": Color.WHITE, "b": Color.BLACK}


class PiecePlacement(BaseModel):
    """One entry of a board document: {"t": "p", "c": "w", "pos": "E2"}."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(alias="t", min_length=1)
    color: Color = Field(alias="c")
    pos: Coordinate

    @field_validator("color", mode="before")
    @classmethod
    def _expand_color(cls, v: Any) -> Any:
        return _COLOR_SHORTHAND.get(v, v) if isinstance(v, str) else v

    @field_validator("pos", mode="before")
    @classmethod
    def _parse_pos(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Coordinate.from_algebraic(v)
        return v

    def to_piece(self) -> Piece:
        return Piece(type=self.type, color=self.color, position=self.pos)


class BoardConfig(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    pieces: list[PiecePlacement] = Field(default_factory=list)

    @model_validator(mode="after")
    def _pieces_on_board(self) -> BoardConfig:
        for p in self.pieces:
            if not self.in_bounds(p.pos):
                raise ValueError(f"Piece out of bounds: {p.pos.algebraic}")
        return self

    def in_bounds(self, c: Coordinate) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height


class CardsConfig(BaseModel):
    cards: list[CardDef] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(c.frequency for c in self.cards)


class GameSettings(BaseModel):
    initial_hand: int = Field(default=2, ge=0)  # dealt to each player at start
    draw_count: int = Field(default=1, ge=1)  # cards taken by the draw action


MovesConfig = dict[str, MovePattern]
PiecesConfig = dict[str, PieceDef]

moves_adapter: TypeAdapter[MovesConfig] = TypeAdapter(MovesConfig)
pieces_adapter: TypeAdapter[PiecesConfig] = TypeAdapter(PiecesConfig)
