from __future__ import annotations

from pathlib import Path
from typing import Any

from . import loaders, presets
from .engine.core import Game


def quickstart(seed: int | None = None, **kwargs: Any) -> Game:
    """Standard 8x8 chess with the default card table."""
    return Game(
        presets.standard_moves(),
        presets.standard_board(),
        presets.standard_cards(),
        presets.standard_pieces(),
        seed=seed,
        **kwargs,
    )


def load_game(
    moves: str | Path,
    board: str | Path,
    cards: str | Path,
    pieces: str | Path | None = None,
    **kwargs: Any,
) -> Game:
    return Game(
        loaders.load_moves_config(moves),
        loaders.load_board_config(board),
        loaders.load_cards_config(cards),
        loaders.load_pieces_config(pieces) if pieces else None,
        **kwargs,
    )
