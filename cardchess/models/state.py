from __future__ import annotations

from pydantic import BaseModel, Field

from .cards import Card
from .enums import Color


class SideRights(BaseModel):
    king_side: bool = True
    queen_side: bool = True

    def revoke(self) -> None:
        self.king_side = False
        self.queen_side = False


class CastleRights(BaseModel):
    # rights are only ever revoked, never restored
    white: SideRights = Field(default_factory=SideRights)
    black: SideRights = Field(default_factory=SideRights)

    def of(self, color: Color) -> SideRights:
        return self.white if color is Color.WHITE else self.black


class Player(BaseModel):
    color: Color
    hand: list[Card] = Field(default_factory=list)

    def unused(self) -> list[Card]:
        return [c for c in self.hand if not c.used]

    def discard_used(self) -> None:
        self.hand = self.unused()
