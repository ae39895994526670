from __future__ import annotations

from .core.primitives import Coordinate
from .models.cards import CardDef
from .models.config import BoardConfig, CardsConfig, MovesConfig, PiecePlacement, PiecesConfig
from .models.enums import Color
from .models.patterns import LeaperPattern, PawnPattern, SliderPattern
from .models.pieces import PieceDef

DIRS_KNIGHT = [(1, 2), (2, 1), (-1, 2), (-2, 1), (1, -2), (2, -1), (-1, -2), (-2, -1)]
DIRS_BISHOP = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
DIRS_ROOK = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIRS_KING = DIRS_BISHOP + DIRS_ROOK

BACK_RANK = ["r", "n", "b", "q", "k", "b", "n", "r"]


def standard_moves() -> MovesConfig:
    return {
        "p": PawnPattern(
            deltas=[(0, -1)],
            double_start=(6, 1),
            captures=[(-1, -1), (1, -1)],
            promotions=["q", "r", "b", "n"],
        ),
        "n": LeaperPattern(deltas=DIRS_KNIGHT),
        "b": SliderPattern(dirs=DIRS_BISHOP),
        "r": SliderPattern(dirs=DIRS_ROOK),
        "q": SliderPattern(dirs=DIRS_KING),
        "k": SliderPattern(dirs=DIRS_KING, range=1, castling=True),
    }


def standard_pieces() -> PiecesConfig:
    return {
        "p": PieceDef(name="Pawn"),
        "n": PieceDef(name="Knight"),
        "b": PieceDef(name="Bishop"),
        "r": PieceDef(name="Rook", castle_partner=True),
        "q": PieceDef(name="Queen"),
        "k": PieceDef(name="King", royal=True),
    }


def standard_board() -> BoardConfig:
    """8x8 opening position; black on rows 0-1, white on rows 6-7."""
    pieces: list[PiecePlacement] = []
    for x, t in enumerate(BACK_RANK):
        pieces.append(PiecePlacement(type=t, color=Color.BLACK, pos=Coordinate(x=x, y=0)))
        pieces.append(PiecePlacement(type="p", color=Color.BLACK, pos=Coordinate(x=x, y=1)))
        pieces.append(PiecePlacement(type="p", color=Color.WHITE, pos=Coordinate(x=x, y=6)))
        pieces.append(PiecePlacement(type=t, color=Color.WHITE, pos=Coordinate(x=x, y=7)))
    return BoardConfig(width=8, height=8, pieces=pieces)


def standard_cards() -> CardsConfig:
    return CardsConfig(
        cards=[
            CardDef(piece_type="p", moves_as="r", frequency=4),
            CardDef(piece_type="p", moves_as="n", frequency=4),
            CardDef(piece_type="n", moves_as="b", frequency=3),
            CardDef(piece_type="b", moves_as="r", frequency=3),
            CardDef(piece_type="q", moves_as="n", frequency=2),
            CardDef(piece_type="k", moves_as="n", frequency=1),
        ]
    )
