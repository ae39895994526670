"""JSON loaders for the four configuration documents.

Each loader reads a UTF-8 file and validates it with the pydantic models in
`cardchess.models.config`; malformed documents raise `pydantic.ValidationError`.
"""

from __future__ import annotations

from pathlib import Path

from .models.config import (
    BoardConfig,
    CardsConfig,
    MovesConfig,
    PiecesConfig,
    moves_adapter,
    pieces_adapter,
)


def _read(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def load_board_config(path: str | Path) -> BoardConfig:
    return BoardConfig.model_validate_json(_read(path))


def load_moves_config(path: str | Path) -> MovesConfig:
    return moves_adapter.validate_json(_read(path))


def load_cards_config(path: str | Path) -> CardsConfig:
    return CardsConfig.model_validate_json(_read(path))


def load_pieces_config(path: str | Path) -> PiecesConfig:
    return pieces_adapter.validate_json(_read(path))
