from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import UnknownPieceType
from ..models.patterns import PawnPattern, SliderPattern
from ..models.pieces import PieceDef

if TYPE_CHECKING:
    from ..models.config import BoardConfig, CardsConfig, MovesConfig, PiecesConfig
    from ..models.patterns import MovePattern


def derive_pieces(moves: MovesConfig) -> PiecesConfig:
    """Fallback piece table: castling sliders are royal, "r" partners them."""
    out: PiecesConfig = {}
    for t, pat in moves.items():
        royal = isinstance(pat, SliderPattern) and pat.castling
        out[t] = PieceDef(name=t, royal=royal, castle_partner=t == "r")
    return out


class Ruleset:
    """Pattern table plus per-type metadata, keyed by piece-type tag."""

    def __init__(self, moves: MovesConfig, pieces: PiecesConfig | None = None):
        self.moves = dict(moves)
        self.pieces = dict(pieces) if pieces else derive_pieces(self.moves)
        self.castle_partners = frozenset(
            t for t, d in self.pieces.items() if d.castle_partner
        )

    def pattern_of(self, piece_type: str) -> MovePattern:
        try:
            return self.moves[piece_type]
        except KeyError:
            raise UnknownPieceType(piece_type, "no move pattern") from None

    def is_royal(self, piece_type: str) -> bool:
        d = self.pieces.get(piece_type)
        return bool(d and d.royal)

    def is_castle_partner(self, piece_type: str) -> bool:
        return piece_type in self.castle_partners

    def is_pawn(self, piece_type: str) -> bool:
        return isinstance(self.moves.get(piece_type), PawnPattern)

    def validate(self, board: BoardConfig, cards: CardsConfig) -> None:
        for p in board.pieces:
            if p.type not in self.moves:
                raise UnknownPieceType(p.type, f"placed at {p.pos.algebraic}")
        for c in cards.cards:
            for t in (c.piece_type, c.moves_as):
                if t not in self.moves:
                    raise UnknownPieceType(t, "referenced by a card")
        for t, pat in self.moves.items():
            if isinstance(pat, PawnPattern):
                for promo in pat.promotions:
                    if promo not in self.moves:
                        raise UnknownPieceType(promo, f"promotion of {t!r}")
