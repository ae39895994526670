# Shared fixtures: JSON documents under tests/data and ready-made games.

import logging
from pathlib import Path

import pytest

from cardchess.factory import load_game, quickstart
from cardchess.loaders import load_cards_config, load_moves_config

ROOT = Path(__file__).resolve().parent
DATA_DIR = ROOT / "data"
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(scope="session")
def moves_config():
    return load_moves_config(DATA_DIR / "moves.json")


@pytest.fixture()
def cards_config():
    return load_cards_config(DATA_DIR / "cards" / "test.json")


@pytest.fixture()
def test_game():
    """The 12-piece board from tests/data/boards/test.json, two cards dealt each."""
    logger.info("[tests] loading game from %s", DATA_DIR)
    return load_game(
        DATA_DIR / "moves.json",
        DATA_DIR / "boards" / "test.json",
        DATA_DIR / "cards" / "test.json",
        DATA_DIR / "pieces.json",
        seed=1,
    )


@pytest.fixture()
def standard_game():
    return quickstart(seed=42)
