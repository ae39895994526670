from __future__ import annotations

from cardchess.core.primitives import Coordinate
from cardchess.engine.core import Game
from cardchess.models.cards import Card
from cardchess.models.config import BoardConfig, CardsConfig, GameSettings, PiecePlacement
from cardchess.models.enums import Color
from cardchess.presets import standard_moves, standard_pieces

W, B = Color.WHITE, Color.BLACK


def xy(x: int, y: int) -> Coordinate:
    return Coordinate(x=x, y=y)


def board_of(*specs, width: int = 8, height: int = 8) -> BoardConfig:
    """specs: (type, color, (x, y))"""
    return BoardConfig(
        width=width,
        height=height,
        pieces=[
            PiecePlacement(type=t, color=c, pos=xy(*pos)) for t, c, pos in specs
        ],
    )


def make_game(
    *specs,
    cards: CardsConfig | None = None,
    moves=None,
    pieces=None,
    settings: GameSettings | None = None,
    seed: int = 0,
    width: int = 8,
    height: int = 8,
) -> Game:
    return Game(
        moves or standard_moves(),
        board_of(*specs, width=width, height=height),
        cards or CardsConfig(),
        pieces if pieces is not None else standard_pieces(),
        settings=settings,
        seed=seed,
    )


def give(game: Game, color: Color, piece_type: str, moves_as: str) -> Card:
    card = Card(piece_type=piece_type, moves_as=moves_as)
    game.players[color].hand.append(card)
    return card


def targets(game: Game) -> set[tuple[int, int]]:
    return {(m.target.x, m.target.y) for m in game.legal}


def card_targets(game: Game) -> set[tuple[int, int]]:
    return {(m.target.x, m.target.y) for m in game.legal if m.card is not None}
