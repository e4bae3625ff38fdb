"""
win/draw evaluation over a flat 9-cell board
"""
from typing import Optional, Sequence, Tuple

from .marks import Cell, Player

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags; scan order decides which line gets reported
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def find_winner(board: Sequence[Cell]) -> Optional[Tuple[Player, Tuple[int, int, int]]]:
    """
    first line holding three identical marks, paired with its owner
    returns: (player, line) or None
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return Player(board[a].value), line
    return None


def is_draw(board: Sequence[Cell]) -> bool:
    """
    full board and nobody has three in a row
    """
    if any(cell is Cell.EMPTY for cell in board):
        return False
    return find_winner(board) is None
