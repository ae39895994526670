from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        # white starts on the last row and advances toward row 0
        return -1 if self is Color.WHITE else 1


class ResultKind(str, Enum):
    PIECE_SELECTED = "piece_selected"
    INVALID_SELECTION = "invalid_selection"
    LEGAL_MOVE = "legal_move"
    ILLEGAL_MOVE = "illegal_move"
    CARDS_DRAWN = "cards_drawn"


class ActionKind(str, Enum):
    MOVE = "move"
    DRAW_CARDS = "draw_cards"


class ActionLogResult(str, Enum):
    APPLIED = "applied"
    ILLEGAL = "illegal"
    ERROR = "error"
