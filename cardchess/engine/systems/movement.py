from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...core.primitives import Coordinate
from ...models.enums import Color
from ...models.patterns import LeaperPattern, PawnPattern, SliderPattern, orient

if TYPE_CHECKING:
    from ...models.patterns import MovePattern
    from ...models.pieces import Piece
    from ...models.state import CastleRights
    from ..board import Board


@dataclass(frozen=True)
class MoveContext:
    """Special-rule state a pattern may read. Empty for card substitutions."""

    last_double_step: Piece | None = None
    castle_rights: CastleRights | None = None
    castle_partners: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def plain(cls) -> MoveContext:
        return cls()


def home_row(board: Board, color: Color) -> int:
    return board.height - 1 if color is Color.WHITE else 0


def far_row(board: Board, color: Color) -> int:
    return 0 if color is Color.WHITE else board.height - 1


def _unique(coords: list[Coordinate]) -> list[Coordinate]:
    seen: set[Coordinate] = set()
    out: list[Coordinate] = []
    for c in coords:
        if c not in seen:
            seen.add(c)
            out.append(c)
    return out


def _enemy_at(board: Board, c: Coordinate, color: Color) -> bool:
    occ = board.get_piece(c)
    return occ is not None and occ.color != color


def pawn_moves(
    board: Board, c: Coordinate, piece: Piece, pat: PawnPattern, ctx: MoveContext
) -> list[Coordinate]:
    out: list[Coordinate] = []
    for d in pat.deltas:
        dx, dy = orient(d, piece.color)
        step = c.offset(dx, dy)
        if not board.in_bounds(step) or board.get_piece(step) is not None:
            continue
        out.append(step)
        if c.y == pat.start_row(piece.color):
            jump = step.offset(dx, dy)
            if board.in_bounds(jump) and board.get_piece(jump) is None:
                out.append(jump)

    for d in pat.captures:
        dx, dy = orient(d, piece.color)
        dst = c.offset(dx, dy)
        if board.in_bounds(dst) and _enemy_at(board, dst, piece.color):
            out.append(dst)

    ep = en_passant_target(board, c, piece, ctx.last_double_step)
    if ep is not None:
        out.append(ep)
    return _unique(out)


def en_passant_target(
    board: Board, c: Coordinate, piece: Piece, tracked: Piece | None
) -> Coordinate | None:
    if tracked is None or tracked.color == piece.color or tracked.position is None:
        return None
    pos = tracked.position
    if pos.y != c.y or abs(pos.x - c.x) != 1:
        return None
    if not board.in_bounds(pos) or board.get_piece(pos) is not tracked:
        return None
    dst = Coordinate(x=pos.x, y=c.y + piece.color.forward)
    if not board.in_bounds(dst) or board.get_piece(dst) is not None:
        return None
    return dst


def leaper_moves(
    board: Board, c: Coordinate, piece: Piece, pat: LeaperPattern
) -> list[Coordinate]:
    out: list[Coordinate] = []
    for dx, dy in pat.deltas:
        dst = c.offset(dx, dy)
        if not board.in_bounds(dst):
            continue
        occ = board.get_piece(dst)
        if occ is None or occ.color != piece.color:
            out.append(dst)
    return _unique(out)


def slider_moves(
    board: Board, c: Coordinate, piece: Piece, pat: SliderPattern, ctx: MoveContext
) -> list[Coordinate]:
    out: list[Coordinate] = []
    for dx, dy in pat.dirs:
        if dx == 0 and dy == 0:
            continue
        cur, steps = c, 0
        while pat.range is None or steps < pat.range:
            cur = cur.offset(dx, dy)
            steps += 1
            if not board.in_bounds(cur):
                break
            occ = board.get_piece(cur)
            if occ is None:
                out.append(cur)
                continue
            if occ.color != piece.color:
                out.append(cur)
            break

    if pat.castling and ctx.castle_rights is not None:
        out.extend(castling_targets(board, c, piece, ctx))
    return _unique(out)


def castling_targets(
    board: Board, c: Coordinate, piece: Piece, ctx: MoveContext
) -> list[Coordinate]:
    row = home_row(board, piece.color)
    if c.y != row or ctx.castle_rights is None or board.width < 5:
        return []
    rights = ctx.castle_rights.of(piece.color)
    last = board.width - 1

    def empty(xs) -> bool:
        return all(board.get_piece(Coordinate(x=x, y=row)) is None for x in xs)

    def partner(x: int) -> bool:
        p = board.get_piece(Coordinate(x=x, y=row))
        return p is not None and p.color == piece.color and p.type in ctx.castle_partners

    out: list[Coordinate] = []
    if rights.king_side and empty(range(last - 2, last)) and partner(last):
        out.append(Coordinate(x=last - 1, y=row))
    if rights.queen_side and empty(range(1, 4)) and partner(0):
        out.append(Coordinate(x=2, y=row))
    return out


def moves_for(
    board: Board, c: Coordinate, pattern: MovePattern, ctx: MoveContext | None = None
) -> list[Coordinate]:
    """Squares reachable from `c` by the piece standing there under `pattern`."""
    piece = board.get_piece(c)
    if piece is None:
        return []
    ctx = ctx or MoveContext.plain()
    if isinstance(pattern, PawnPattern):
        return pawn_moves(board, c, piece, pattern, ctx)
    if isinstance(pattern, LeaperPattern):
        return leaper_moves(board, c, piece, pattern)
    if isinstance(pattern, SliderPattern):
        return slider_moves(board, c, piece, pattern, ctx)
    raise TypeError(f"Unsupported move pattern: {type(pattern).__name__}")
