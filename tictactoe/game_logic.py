from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from loguru import logger

from .marks import Cell, Player
from .rules import BOARD_SIZE, CELL_COUNT, find_winner, is_draw


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    exactly one of in progress / won / draw
    winner and line are only set for WON
    """
    kind: StatusKind
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player, line: Tuple[int, int, int]) -> "GameStatus":
        return cls(StatusKind.WON, player, tuple(line))

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(StatusKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not StatusKind.IN_PROGRESS


class GameLogic:
    """
    tic-tac-toe board, turn and keyboard cursor
    """
    def __init__(self):
        """
        fresh board, X to move
        """
        self.reset()

    def reset(self):
        """
        clear board and reset flags
        """
        self.board = [Cell.EMPTY] * CELL_COUNT   # row-major, index = row*3 + col
        self.current_player = Player.X
        self.status = GameStatus.in_progress()
        self.selection = 0                        # keyboard cursor, ignores occupancy
        logger.debug("board reset")

    @property
    def game_over(self):
        return self.status.is_terminal

    @property
    def winner(self):
        return self.status.winner

    @property
    def winning_line(self):
        return self.status.line

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if 0 <= index < CELL_COUNT:
            return self.board[index] is Cell.EMPTY
        return False

    def commit_move(self, index) -> GameStatus:
        """
        place current player's mark, then check result
        returns: the status after the move (unchanged if the move was ignored)
        """
        # only if cell empty and game not over
        if self.game_over:
            logger.debug("move at {} ignored, game is over", index)
            return self.status
        if not self.is_cell_empty(index):
            logger.debug("move at {} ignored, cell unavailable", index)
            return self.status

        player = self.current_player
        self.board[index] = player.mark
        logger.info("{} plays cell {}", player.value, index)

        result = find_winner(self.board)
        if result is not None:
            winner, line = result
            self.status = GameStatus.won(winner, line)
            logger.info("{} wins on line {}", winner.value, line)
        elif is_draw(self.board):
            self.status = GameStatus.draw()
            logger.info("game drawn")
        else:
            self.current_player = player.opposite()
        return self.status

    def move_selection(self, d_col, d_row):
        """
        shift cursor by (d_col, d_row), clamped to the grid (no wrap)
        """
        row, col = divmod(self.selection, BOARD_SIZE)
        row = max(0, min(row + d_row, BOARD_SIZE - 1))
        col = max(0, min(col + d_col, BOARD_SIZE - 1))
        self.selection = row * BOARD_SIZE + col
        return self.selection

    def select(self, index):
        # pointer path: jump the cursor straight to a cell
        if 0 <= index < CELL_COUNT:
            self.selection = index
        return self.selection
