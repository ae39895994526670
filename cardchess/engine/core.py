from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from ..models.api import (
    Action,
    CardsDrawn,
    DrawCardsAction,
    GameView,
    IllegalMove,
    InvalidSelection,
    LegalMove,
    MoveAction,
    MoveWithCard,
    PieceSelected,
    SelectResult,
)
from ..models.config import GameSettings
from ..models.enums import Color
from ..models.state import CastleRights, Player
from .actions.draw import DrawCardsHandler
from .actions.move import MoveHandler
from .board import Board
from .deck import Deck
from .logging.logger import log_error, log_illegal
from .ruleset import Ruleset
from .systems import legal
from .systems.movement import MoveContext

if TYPE_CHECKING:
    from ..core.primitives import Coordinate
    from ..models.cards import Card
    from ..models.config import BoardConfig, CardsConfig, MovesConfig, PiecesConfig
    from ..models.pieces import Piece
    from .actions.base import Registry

default_handlers: Registry = {
    MoveHandler.action_type: MoveHandler(),
    DrawCardsHandler.action_type: DrawCardsHandler(),
}


class Game:
    """
    One match. The input layer drives it through `select` and `draw_cards`;
    renderers read `board`, `turn`, `selected`, `legal`, `players` and
    `game_over` (or a `view()` snapshot) after each call.
    """

    def __init__(
        self,
        moves: MovesConfig,
        board: BoardConfig,
        cards: CardsConfig,
        pieces: PiecesConfig | None = None,
        *,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        handlers: Registry | None = None,
        game_id: str | None = None,
    ):
        self.id = game_id or uuid4().hex[:12]
        self.rules = Ruleset(moves, pieces)
        self.rules.validate(board, cards)
        self.settings = settings or GameSettings()
        self.handlers: Registry = handlers or default_handlers

        self.board = Board.from_config(board)
        self.deck = Deck(cards, rng or random.Random(seed))
        self.players: dict[Color, Player] = {c: Player(color=c) for c in Color}

        self.turn = Color.WHITE
        self.selected: Coordinate | None = None
        self.legal: list[MoveWithCard] = []
        self.last_double_step_pawn: Piece | None = None
        self.castle_rights = CastleRights()
        self.game_over = False
        self.winner: Color | None = None
        self.ply = 0
        self.action_log: list[Any] = []

        for c in (Color.WHITE, Color.BLACK):
            self.players[c].hand.extend(self.deck.draw(self.settings.initial_hand))

    # ---------- Read side ----------

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    @property
    def current_hand(self) -> list[Card]:
        return self.current_player.unused()

    def context(self) -> MoveContext:
        return MoveContext(
            last_double_step=self.last_double_step_pawn,
            castle_rights=self.castle_rights,
            castle_partners=self.rules.castle_partners,
        )

    def generate_moves(self, coord: Coordinate) -> list[MoveWithCard]:
        return legal.generate_moves(
            self.board, coord, self.rules, self.context(), self.current_hand
        )

    def view(self) -> GameView:
        return GameView(
            width=self.board.width,
            height=self.board.height,
            pieces=self.board.all_pieces(),
            turn=self.turn,
            selected=self.selected,
            legal=list(self.legal),
            hands={c: p.unused() for c, p in self.players.items()},
            game_over=self.game_over,
            winner=self.winner,
            deck_remaining=self.deck.remaining(),
        )

    # ---------- Player intents ----------

    def select(self, coord: Coordinate) -> SelectResult:
        if self.game_over:
            return InvalidSelection(coord=coord)

        if self.selected is not None:
            src = self.selected
            entry = legal.find_move(self.legal, coord)
            if entry is not None:
                return self.make_move(src, coord, entry.card)
            self.clear_selection()
            log_illegal(self, MoveAction(src=src, dst=coord), "not a legal target")
            return IllegalMove(src=src, dst=coord)

        piece = self.board.get_piece(coord)
        if piece is None or piece.color != self.turn:
            return InvalidSelection(coord=coord)
        self.selected = coord
        self.legal = self.generate_moves(coord)
        return PieceSelected(piece=piece)

    def make_move(
        self, src: Coordinate, dst: Coordinate, card: Card | None = None
    ) -> LegalMove | None:
        """Execute a move already known to be legal. No-op if `src` is empty."""
        return self.apply(MoveAction(src=src, dst=dst, card=card))

    def draw_cards(self) -> CardsDrawn:
        action = DrawCardsAction()
        ok, why = self.evaluate(action)
        if not ok:
            log_illegal(self, action, why)
            return CardsDrawn(color=self.turn, cards=[])
        return self.apply(action)

    # ---------- Action pipeline ----------

    def evaluate(self, action: Action) -> tuple[bool, str]:
        h = self.handlers.get(type(action))
        if not h:
            return False, "unknown action"
        return h.evaluate(self, action)

    def process_action(self, action: Action):
        """Evaluate then apply; illegal actions are logged and returned as such."""
        ok, why = self.evaluate(action)
        if not ok:
            log_illegal(self, action, why)
            if isinstance(action, MoveAction):
                return IllegalMove(src=action.src, dst=action.dst)
            return None
        return self.apply(action)

    def apply(self, action: Action):
        try:
            return self.handlers[type(action)].apply(self, action)
        except Exception as e:
            log_error(self, action, e)
            raise

    # ---------- Turn bookkeeping ----------

    def clear_selection(self) -> None:
        self.selected = None
        self.legal = []

    def end_turn(self) -> None:
        self.turn = self.turn.opposite
        self.ply += 1
        self.clear_selection()
