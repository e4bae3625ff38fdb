from enum import Enum


class Cell(Enum):
    """
    contents of one board square
    """
    EMPTY = ""
    X = "X"
    O = "O"


class Player(Enum):
    """
    the two sides, X always opens
    """
    X = "X"
    O = "O"

    @property
    def mark(self) -> Cell:
        # cell value this player leaves on the board
        return Cell(self.value)

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X
