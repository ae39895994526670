from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from ..core.primitives import Coordinate
from .cards import Card
from .enums import ActionKind, ActionLogResult, Color, ResultKind
from .pieces import Piece

# ----- Legal-move entries -----


class MoveWithCard(BaseModel):
    target: Coordinate
    # set iff the target is only reachable by spending this card
    card: Card | None = None


# ----- Actions (discriminated union) -----


class MoveAction(BaseModel):
    kind: Literal[ActionKind.MOVE] = ActionKind.MOVE
    src: Coordinate
    dst: Coordinate
    card: Card | None = None


class DrawCardsAction(BaseModel):
    kind: Literal[ActionKind.DRAW_CARDS] = ActionKind.DRAW_CARDS


Action = MoveAction | DrawCardsAction


# ----- Results returned to the input layer -----


class PieceSelected(BaseModel):
    kind: Literal[ResultKind.PIECE_SELECTED] = ResultKind.PIECE_SELECTED
    piece: Piece


class InvalidSelection(BaseModel):
    kind: Literal[ResultKind.INVALID_SELECTION] = ResultKind.INVALID_SELECTION
    coord: Coordinate


class LegalMove(BaseModel):
    kind: Literal[ResultKind.LEGAL_MOVE] = ResultKind.LEGAL_MOVE
    src: Coordinate
    dst: Coordinate
    card: Card | None = None
    captured: Piece | None = None
    promoted_to: str | None = None
    en_passant: bool = False
    castled: bool = False
    game_over: bool = False


class IllegalMove(BaseModel):
    kind: Literal[ResultKind.ILLEGAL_MOVE] = ResultKind.ILLEGAL_MOVE
    src: Coordinate
    dst: Coordinate


class CardsDrawn(BaseModel):
    kind: Literal[ResultKind.CARDS_DRAWN] = ResultKind.CARDS_DRAWN
    color: Color
    cards: list[Card] = Field(default_factory=list)


SelectResult = PieceSelected | InvalidSelection | LegalMove | IllegalMove


# ----- Read-only snapshot for renderers -----


class GameView(BaseModel):
    width: int
    height: int
    pieces: list[Piece]
    turn: Color
    selected: Coordinate | None = None
    legal: list[MoveWithCard] = Field(default_factory=list)
    hands: dict[Color, list[Card]] = Field(default_factory=dict)
    game_over: bool = False
    winner: Color | None = None
    deck_remaining: int = 0


# ----- Action Log -----


class ActionLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    ply: int
    color: Color
    action: Action
    result: ActionLogResult = ActionLogResult.APPLIED
    message: str | None = None
