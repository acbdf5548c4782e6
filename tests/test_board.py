import pytest

from othello.engine.board import Board


def test_initial_layout():
    board = Board()
    assert board.get_piece(3, 3) == Board.WHITE
    assert board.get_piece(4, 4) == Board.WHITE
    assert board.get_piece(3, 4) == Board.BLACK
    assert board.get_piece(4, 3) == Board.BLACK
    occupied = [(r, c) for r in range(8) for c in range(8) if board.grid[r][c] is not Board.EMPTY]
    assert sorted(occupied) == [(3, 3), (3, 4), (4, 3), (4, 4)]
    assert board.get_score() == {Board.BLACK: 2, Board.WHITE: 2}


@pytest.mark.parametrize("size", [3, 5, 2, 0])
def test_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        Board(size)


def test_flips_follow_direction_order():
    board = Board.from_rows([
        "........",
        "........",
        "..B.B...",
        "...WW...",
        "..BW.W..",
        "....W...",
        "....W...",
        "....B...",
    ])
    # up, down, left, up-left; the open run to the right is discarded
    assert board.flippable_pieces(4, 4, Board.BLACK) == [(3, 4), (5, 4), (6, 4), (4, 3), (3, 3)]


def test_run_reaching_edge_or_gap_flips_nothing():
    board = Board.from_rows([
        "WW.W.B..",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ])
    assert board.flippable_pieces(0, 2, Board.BLACK) == []
    assert board.flippable_pieces(0, 4, Board.BLACK) == []
    assert board.place(0, 2, Board.BLACK) is False
    assert board.get_piece(0, 2) is Board.EMPTY


def test_occupied_and_off_board_cells_are_illegal():
    board = Board()
    for player in (Board.BLACK, Board.WHITE):
        assert board.flippable_pieces(3, 3, player) == []
        assert board.flippable_pieces(3, 4, player) == []
    assert board.flippable_pieces(-1, 3, Board.BLACK) == []
    assert board.flippable_pieces(8, 3, Board.BLACK) == []
    assert board.flippable_pieces(2, -5, Board.BLACK) == []
    for r, c in [(2.0, 3), ("2", 3), (None, 3), (2, None)]:
        assert board.flippable_pieces(r, c, Board.BLACK) == []


def test_unknown_player_is_a_programming_error():
    with pytest.raises(ValueError):
        Board().flippable_pieces(2, 3, "RED")


def test_valid_moves_are_row_major():
    board = Board()
    assert board.get_valid_moves(Board.BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.get_valid_moves(Board.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_from_rows_validation():
    with pytest.raises(ValueError):
        Board.from_rows(["....", "....", "...."])
    with pytest.raises(ValueError):
        Board.from_rows(["....", ".X..", "....", "...."])
    board = Board.from_rows([
        [None, "BLACK", "W", "."],
        [None] * 4,
        [None] * 4,
        [None] * 4,
    ])
    assert board.snapshot()[0] == (None, Board.BLACK, Board.WHITE, None)


def test_state_string_and_coordinates():
    board = Board()
    assert board.state_string() == "." * 27 + "WB" + "." * 6 + "BW" + "." * 27
    assert board.coord_to_str(2, 3) == "D3"
    assert Board.str_to_coord("d3") == (2, 3)
    assert Board.str_to_coord("H8") == (7, 7)
    for bad in ("", "3", "33", "D", "Dx"):
        with pytest.raises(ValueError):
            Board.str_to_coord(bad)
