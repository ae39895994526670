from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.primitives import Coordinate
from ...models.patterns import PawnPattern
from .movement import far_row, home_row

if TYPE_CHECKING:
    from ...models.enums import Color
    from ...models.pieces import Piece
    from ...models.state import CastleRights
    from ..board import Board
    from ..ruleset import Ruleset


def en_passant_victim(
    board: Board,
    rules: Ruleset,
    moving: Piece,
    src: Coordinate,
    dst: Coordinate,
    tracked: Piece | None,
) -> Piece | None:
    """The pawn passed over when `moving` steps diagonally onto an empty square behind it."""
    if tracked is None or tracked.position is None or not rules.is_pawn(moving.type):
        return None
    if tracked.color == moving.color:
        return None
    pos = tracked.position
    if pos.y != src.y or dst.x != pos.x or dst.y != src.y + moving.color.forward:
        return None
    if board.get_piece(dst) is not None or board.get_piece(pos) is not tracked:
        return None
    return tracked


def promote(board: Board, rules: Ruleset, piece: Piece, dst: Coordinate) -> str | None:
    pat = rules.moves.get(piece.type)
    if not isinstance(pat, PawnPattern) or not pat.promotions:
        return None
    if dst.y != far_row(board, piece.color):
        return None
    # no choice offered: the first configured type wins
    piece.type = pat.promotions[0]
    return piece.type


def castle_rook(board: Board, rules: Ruleset, src: Coordinate, dst: Coordinate) -> bool:
    if abs(dst.x - src.x) != 2:
        return False
    if dst.x > src.x:
        corner, landing = board.width - 1, dst.x - 1
    else:
        corner, landing = 0, dst.x + 1
    rook_at = Coordinate(x=corner, y=dst.y)
    rook = board.get_piece(rook_at)
    if rook is None or not rules.is_castle_partner(rook.type):
        return False
    board.move_piece(rook_at, Coordinate(x=landing, y=dst.y))
    return True


def update_castle_rights(
    rights: CastleRights,
    board: Board,
    rules: Ruleset,
    piece_type: str,
    color: Color,
    src: Coordinate,
) -> None:
    side = rights.of(color)
    if rules.is_royal(piece_type):
        side.revoke()
        return
    if rules.is_castle_partner(piece_type) and src.y == home_row(board, color):
        if src.x == 0:
            side.queen_side = False
        elif src.x == board.width - 1:
            side.king_side = False


def is_double_step(
    rules: Ruleset, piece_type: str, color: Color, src: Coordinate, dst: Coordinate
) -> bool:
    # a straight two-row advance; card jumps and retreats are not double steps
    return (
        rules.is_pawn(piece_type)
        and dst.x == src.x
        and dst.y - src.y == 2 * color.forward
    )
