import pytest

from othello.engine.game_engine import GameEngine

EMPTY_ROW = "........"

# White to move: A1 captures B1. Afterwards Black's only disc (B8) sits
# beside the edge and cannot bracket anything, while White can still take it.
PASS_ROWS = [
    ".BW.....",
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    "WB......",
]


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def pass_engine():
    return GameEngine.from_rows(PASS_ROWS, current_player="WHITE")
