from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.api import LegalMove, MoveAction
from ...models.enums import ActionLogResult
from ..logging.logger import log_event
from ..systems import special, victory
from ..systems.legal import find_move
from .base import ActionHandler

if TYPE_CHECKING:
    from ..core import Game


class MoveHandler(ActionHandler):
    action_type = MoveAction

    def evaluate(self, game: Game, action: MoveAction):
        if game.game_over:
            return False, "game is over"
        if not game.board.in_bounds(action.src) or not game.board.in_bounds(action.dst):
            return False, "coordinate out of bounds"
        p = game.board.get_piece(action.src)
        if not p:
            return False, "no piece at src"
        if p.color != game.turn:
            return False, "not your turn"
        entry = find_move(game.generate_moves(action.src), action.dst)
        if entry is None:
            return False, "target not reachable"
        if entry.card is not action.card:
            if action.card is None:
                return False, "target needs a card"
            return False, "card does not grant this target"
        return True, "ok"

    def apply(self, game: Game, action: MoveAction) -> LegalMove | None:
        board, rules = game.board, game.rules
        src, dst, card = action.src, action.dst, action.card

        moving = board.get_piece(src)
        if moving is None:
            return None
        moved_type, color = moving.type, moving.color

        target = board.get_piece(dst)
        if victory.captures_royal(rules, target):
            game.game_over = True
            game.winner = color

        captured = target
        victim = None
        if card is None:
            victim = special.en_passant_victim(
                board, rules, moving, src, dst, game.last_double_step_pawn
            )
        if victim is not None and victim.position is not None:
            board.remove_piece(victim.position)
            captured = victim

        board.move_piece(src, dst)
        promoted_to = special.promote(board, rules, moving, dst)

        castled = False
        if card is None and rules.is_royal(moved_type):
            castled = special.castle_rook(board, rules, src, dst)

        special.update_castle_rights(
            game.castle_rights, board, rules, moved_type, color, src
        )

        game.last_double_step_pawn = None
        if special.is_double_step(rules, moved_type, color, src, dst):
            game.last_double_step_pawn = moving

        if card is not None:
            card.used = True
            game.players[color].discard_used()

        log_event(game, action, ActionLogResult.APPLIED)
        game.end_turn()
        return LegalMove(
            src=src,
            dst=dst,
            card=card,
            captured=captured,
            promoted_to=promoted_to,
            en_passant=victim is not None,
            castled=castled,
            game_over=game.game_over,
        )
