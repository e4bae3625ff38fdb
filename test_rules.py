"""
Tests for the win/draw rules.
"""

from tictactoe.marks import Cell, Player
from tictactoe.rules import WIN_LINES, find_winner, is_draw

E, X, O = Cell.EMPTY, Cell.X, Cell.O


def board_from(text):
    # "XO.X..O.." -> list of cells
    return [{"X": X, "O": O, ".": E}[ch] for ch in text]


def test_win_lines_are_rows_cols_diagonals_in_order():
    assert WIN_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_empty_board_has_no_winner():
    assert find_winner([E] * 9) is None
    assert not is_draw([E] * 9)


def test_every_line_is_detected():
    """Each of the 8 lines wins on its own, for both marks."""
    for line in WIN_LINES:
        for mark, player in ((X, Player.X), (O, Player.O)):
            board = [E] * 9
            for i in line:
                board[i] = mark
            assert find_winner(board) == (player, line)


def test_mixed_line_is_not_a_win():
    assert find_winner(board_from("XXO......")) is None


def test_no_three_in_a_row():
    assert find_winner(board_from("XO.OX.X.O")) is None


def test_first_line_in_scan_order_is_reported():
    # row 0 and column 0 both complete
    board = board_from("XXXX..X..")
    assert find_winner(board) == (Player.X, (0, 1, 2))


def test_full_board_without_winner_is_draw():
    board = board_from("XOXXOOOXX")
    assert find_winner(board) is None
    assert is_draw(board)


def test_full_board_with_winner_is_not_draw():
    board = board_from("XXXOOXXOO")
    assert find_winner(board) is not None
    assert not is_draw(board)


def test_partial_board_is_not_draw():
    assert not is_draw(board_from("XOXXOOOX."))
