from cardchess.models.api import LegalMove
from cardchess.models.enums import Color
from cardchess.models.patterns import PawnPattern
from cardchess.presets import standard_moves
from tests.helpers import B, W, make_game, targets, xy


def play(game, src, dst):
    game.select(xy(*src))
    res = game.select(xy(*dst))
    assert isinstance(res, LegalMove), res
    return res


# ---------- double step / en passant ----------


def en_passant_game():
    return make_game(("p", W, (4, 3)), ("p", B, (3, 1)), ("k", W, (7, 7)), ("k", B, (0, 0)))


def test_double_step_is_tracked_and_cleared():
    g = en_passant_game()
    play(g, (7, 7), (7, 6))
    assert g.last_double_step_pawn is None
    black_pawn = g.board.get_piece(xy(3, 1))
    play(g, (3, 1), (3, 3))
    assert g.last_double_step_pawn is black_pawn
    play(g, (7, 6), (7, 5))
    assert g.last_double_step_pawn is None


def test_single_step_is_not_tracked():
    g = make_game(("p", W, (2, 6)), ("k", W, (7, 7)), ("k", B, (0, 0)))
    play(g, (2, 6), (2, 5))
    assert g.last_double_step_pawn is None


def test_en_passant_capture():
    g = en_passant_game()
    play(g, (7, 7), (7, 6))
    black_pawn = g.board.get_piece(xy(3, 1))
    play(g, (3, 1), (3, 3))

    g.select(xy(4, 3))
    assert (3, 2) in targets(g)
    white_pawn = g.board.get_piece(xy(4, 3))
    res = g.select(xy(3, 2))
    assert isinstance(res, LegalMove)
    assert res.en_passant
    assert res.captured is black_pawn
    assert not g.board.has_piece(xy(3, 3))
    assert g.board.get_piece(xy(3, 2)) is white_pawn
    assert len([p for p in g.board.all_pieces() if p.type == "p"]) == 1


def test_en_passant_expires_after_one_turn():
    g = en_passant_game()
    play(g, (7, 7), (7, 6))
    play(g, (3, 1), (3, 3))
    play(g, (7, 6), (7, 5))
    play(g, (0, 0), (0, 1))
    g.select(xy(4, 3))
    assert (3, 2) not in targets(g)


def test_drawing_closes_en_passant_window():
    g = en_passant_game()
    play(g, (7, 7), (7, 6))
    play(g, (3, 1), (3, 3))
    g.draw_cards()
    assert g.last_double_step_pawn is None
    assert g.turn == Color.BLACK


# ---------- castling ----------


def castle_game(*extra):
    return make_game(
        ("k", W, (4, 7)), ("r", W, (0, 7)), ("r", W, (7, 7)), ("k", B, (4, 0)), *extra
    )


def test_king_side_castle_moves_rook():
    g = castle_game()
    g.select(xy(4, 7))
    assert {(6, 7), (2, 7)} <= targets(g)
    res = g.select(xy(6, 7))
    assert isinstance(res, LegalMove) and res.castled
    assert g.board.get_piece(xy(6, 7)).type == "k"
    assert g.board.get_piece(xy(5, 7)).type == "r"
    assert not g.board.has_piece(xy(7, 7))
    assert not g.castle_rights.white.king_side
    assert not g.castle_rights.white.queen_side


def test_queen_side_castle_moves_rook():
    g = castle_game()
    res = play(g, (4, 7), (2, 7))
    assert res.castled
    assert g.board.get_piece(xy(2, 7)).type == "k"
    assert g.board.get_piece(xy(3, 7)).type == "r"
    assert not g.board.has_piece(xy(0, 7))


def test_plain_king_step_revokes_rights():
    g = castle_game()
    res = play(g, (4, 7), (5, 7))
    assert not res.castled
    assert not g.castle_rights.white.king_side and not g.castle_rights.white.queen_side
    assert g.castle_rights.black.king_side and g.castle_rights.black.queen_side


def test_rook_move_revokes_only_its_side():
    g = castle_game()
    play(g, (7, 7), (7, 6))
    assert not g.castle_rights.white.king_side
    assert g.castle_rights.white.queen_side
    play(g, (4, 0), (4, 1))
    g.select(xy(4, 7))
    assert (6, 7) not in targets(g)
    assert (2, 7) in targets(g)


def test_castling_blocked_by_pieces_between():
    g = castle_game(("n", W, (6, 7)), ("b", W, (2, 7)))
    g.select(xy(4, 7))
    assert (6, 7) not in targets(g) and (2, 7) not in targets(g)


def test_black_castles_on_top_row():
    g = make_game(("k", B, (4, 0)), ("r", B, (7, 0)), ("k", W, (7, 4)))
    play(g, (7, 4), (7, 5))
    res = play(g, (4, 0), (6, 0))
    assert res.castled
    assert g.board.get_piece(xy(5, 0)).type == "r"
    assert not g.castle_rights.black.king_side


# ---------- promotion ----------


def test_white_pawn_promotes_on_row_zero():
    g = make_game(("p", W, (0, 1)), ("k", W, (7, 7)), ("k", B, (4, 0)))
    pawn = g.board.get_piece(xy(0, 1))
    res = play(g, (0, 1), (0, 0))
    assert res.promoted_to == "q"
    assert g.board.get_piece(xy(0, 0)) is pawn
    assert pawn.type == "q"


def test_black_pawn_promotes_on_last_row():
    g = make_game(("p", B, (1, 6)), ("k", W, (7, 4)), ("k", B, (4, 0)))
    play(g, (7, 4), (7, 5))
    res = play(g, (1, 6), (1, 7))
    assert res.promoted_to == "q"
    assert g.board.get_piece(xy(1, 7)).type == "q"
    assert g.board.get_piece(xy(1, 7)).color == Color.BLACK


def test_promoted_piece_moves_as_new_type():
    g = make_game(("p", W, (0, 1)), ("k", W, (7, 7)), ("k", B, (4, 3)))
    play(g, (0, 1), (0, 0))
    play(g, (4, 3), (4, 4))
    g.select(xy(0, 0))
    assert {(7, 0), (0, 6), (7, 7)} & targets(g) == {(7, 0), (0, 6)}


def test_no_promotion_without_targets():
    moves = standard_moves()
    moves["p"] = PawnPattern(deltas=[(0, -1)], double_start=(6, 1))
    g = make_game(("p", W, (0, 1)), ("k", W, (7, 7)), ("k", B, (4, 0)), moves=moves)
    res = play(g, (0, 1), (0, 0))
    assert res.promoted_to is None
    assert g.board.get_piece(xy(0, 0)).type == "p"
