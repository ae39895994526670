from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import Color

Delta = tuple[int, int]  # (dx, dy)


class PawnPattern(BaseModel):
    """
    Forward-only pattern. Offsets are written from white's side of the board;
    black's dy is mirrored by `orient`.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["pawn"] = "pawn"
    deltas: list[Delta]
    double_start: tuple[int, int] = Field(alias="doubleStart")  # (white row, black row)
    captures: list[Delta] = Field(default_factory=list)
    promotions: list[str] = Field(default_factory=list)

    def start_row(self, color: Color) -> int:
        return self.double_start[0] if color is Color.WHITE else self.double_start[1]


class LeaperPattern(BaseModel):
    type: Literal["leaper"] = "leaper"
    deltas: list[Delta]


class SliderPattern(BaseModel):
    type: Literal["slider"] = "slider"
    dirs: list[Delta]
    range: int | None = Field(default=None, ge=1)
    castling: bool = False


MovePattern = Annotated[
    Union[PawnPattern, LeaperPattern, SliderPattern], Field(discriminator="type")
]


def orient(delta: Delta, color: Color) -> Delta:
    dx, dy = delta
    return (dx, dy) if color is Color.WHITE else (dx, -dy)
