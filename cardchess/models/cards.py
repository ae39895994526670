from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CardDef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    piece_type: str = Field(alias="pieceType")
    moves_as: str = Field(alias="movesAs")
    frequency: int = Field(ge=0)


class Card(BaseModel):
    """One-shot permission for `piece_type` to also move like `moves_as`."""

    model_config = ConfigDict(populate_by_name=True)

    piece_type: str = Field(alias="pieceType")
    moves_as: str = Field(alias="movesAs")
    used: bool = False

    @classmethod
    def from_def(cls, d: CardDef) -> Card:
        return cls(piece_type=d.piece_type, moves_as=d.moves_as)

    def label(self) -> str:
        return f"{self.piece_type.upper()} -> {self.moves_as.upper()}"
