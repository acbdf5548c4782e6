import pytest

from othello.engine.game_engine import GameEngine
from othello.engine.local_engine import LocalEngine

from conftest import PASS_ROWS

INITIAL_STATE = "." * 27 + "WB" + "." * 6 + "BW" + "." * 27


@pytest.fixture
def local():
    engine = LocalEngine()
    messages = []
    engine.set_callback(messages.append)
    engine.start()
    engine.messages = messages
    return engine


def _drain(local):
    sent = list(local.messages)
    local.messages.clear()
    return sent


def test_commands_before_start_are_ignored():
    engine = LocalEngine()
    messages = []
    engine.set_callback(messages.append)
    engine.send_command("NEWGAME")
    assert messages == []


def test_start_and_newgame(local):
    assert _drain(local) == ["READY"]
    local.send_command("NEWGAME")
    assert _drain(local) == [
        "OK",
        f"BOARD 8 BLACK {INITIAL_STATE}",
        "INFO SCORE 2 2",
        "TURN BLACK",
    ]


def test_play_reports_board_score_and_turn(local):
    _drain(local)
    local.send_command("PLAY D3")
    sent = _drain(local)
    assert sent[0] == "OK"
    assert sent[1].startswith("BOARD 8 WHITE ")
    state = sent[1].split()[3]
    assert state[2 * 8 + 3] == "B"
    assert state[3 * 8 + 3] == "B"
    assert sent[2:] == ["INFO SCORE 4 1", "TURN WHITE"]


def test_board_reply_names_player_to_move(local):
    _drain(local)
    local.send_command("PLAY D3")
    local.send_command("PLAY C3")
    boards = [m for m in _drain(local) if m.startswith("BOARD")]
    assert [b.split()[2] for b in boards] == ["WHITE", "BLACK"]


@pytest.mark.parametrize(
    "command, reply",
    [
        ("PLAY", "ERROR Missing coordinate"),
        ("PLAY ??", "ERROR Invalid coordinate format"),
        ("PLAY Dx", "ERROR Invalid coordinate format"),
        ("PLAY A1", "ERROR Illegal move A1"),
        ("PLAY D4", "ERROR Illegal move D4"),
        ("PLAY Z9", "ERROR Illegal move Z9"),
        ("CONFIRM_PASS", "ERROR No pass pending"),
        ("VALID_MOVES RED", "ERROR Unknown color RED"),
        ("FOO", "ERROR Unknown command FOO"),
    ],
)
def test_bad_input_is_reported(local, command, reply):
    _drain(local)
    local.send_command(command)
    assert _drain(local) == [reply]
    assert local.game.score() == (2, 2)


def test_valid_moves(local):
    _drain(local)
    local.send_command("VALID_MOVES")
    local.send_command("VALID_MOVES white")
    assert _drain(local) == [
        "VALID_MOVES D3 C4 F5 E6",
        "VALID_MOVES E3 F4 C5 D6",
    ]


def test_score_and_board_queries(local):
    _drain(local)
    local.send_command("SCORE")
    local.send_command("BOARD")
    assert _drain(local) == ["INFO SCORE 2 2", f"BOARD 8 BLACK {INITIAL_STATE}"]


def test_pass_and_result_flow(local):
    local.game = GameEngine.from_rows(PASS_ROWS, current_player="WHITE")
    _drain(local)

    local.send_command("PLAY A1")
    sent = _drain(local)
    assert sent[0] == "OK"
    assert sent[-2:] == ["INFO SCORE 1 4", "PASS BLACK WHITE"]

    local.send_command("PLAY C8")
    assert _drain(local) == ["ERROR Pass pending for BLACK"]

    local.send_command("CONFIRM_PASS")
    sent = _drain(local)
    assert sent[0] == "OK"
    assert sent[-1] == "TURN WHITE"

    local.send_command("PLAY C8")
    sent = _drain(local)
    assert sent[-1] == "RESULT WHITE 0 6"

    local.send_command("PLAY D4")
    assert _drain(local) == ["ERROR Game is over"]


def test_quit_stops_engine(local):
    _drain(local)
    local.send_command("QUIT")
    local.send_command("BOARD")
    assert _drain(local) == []
