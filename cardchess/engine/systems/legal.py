from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.api import MoveWithCard
from .movement import MoveContext, moves_for

if TYPE_CHECKING:
    from ...core.primitives import Coordinate
    from ...models.cards import Card
    from ..board import Board
    from ..ruleset import Ruleset


def generate_moves(
    board: Board,
    c: Coordinate,
    rules: Ruleset,
    ctx: MoveContext,
    hand: list[Card],
) -> list[MoveWithCard]:
    """
    Normal moves first (untagged), then squares only a card reaches, tagged with
    the first card granting them. Card moves are evaluated without special-rule
    context so they never yield en passant or castling.
    """
    piece = board.get_piece(c)
    if piece is None:
        return []

    normal = moves_for(board, c, rules.pattern_of(piece.type), ctx)
    out = [MoveWithCard(target=t) for t in normal]
    taken = set(normal)

    for card in hand:
        if card.used or card.piece_type != piece.type:
            continue
        for t in moves_for(board, c, rules.pattern_of(card.moves_as), MoveContext.plain()):
            if t in taken:
                continue
            taken.add(t)
            out.append(MoveWithCard(target=t, card=card))
    return out


def find_move(legal: list[MoveWithCard], target: Coordinate) -> MoveWithCard | None:
    return next((m for m in legal if m.target == target), None)
