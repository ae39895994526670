from __future__ import annotations

from typing import TYPE_CHECKING

from ...models.api import CardsDrawn, DrawCardsAction
from ...models.enums import ActionLogResult
from ..logging.logger import log_event
from .base import ActionHandler

if TYPE_CHECKING:
    from ..core import Game


class DrawCardsHandler(ActionHandler):
    action_type = DrawCardsAction

    def evaluate(self, game: Game, action: DrawCardsAction):
        # an exhausted deck still allows the action; it just yields nothing
        if game.game_over:
            return False, "game is over"
        return True, "ok"

    def apply(self, game: Game, action: DrawCardsAction) -> CardsDrawn:
        color = game.turn
        drawn = game.deck.draw(game.settings.draw_count)
        game.players[color].hand.extend(drawn)
        # drawing spends the turn, so any en passant window closes
        game.last_double_step_pawn = None
        log_event(game, action, ActionLogResult.APPLIED, f"drew {len(drawn)}")
        game.end_turn()
        return CardsDrawn(color=color, cards=drawn)
