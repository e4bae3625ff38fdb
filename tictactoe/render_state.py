"""
read-only view of a game for the widgets, rebuilt after every change
per-cell flags are derived here, never stored on the board
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple

from . import config
from .game_logic import GameLogic, StatusKind
from .marks import Cell


class StatusCategory(Enum):
    TURN = "info"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class RenderState:
    cells: Tuple[Cell, ...]
    selection: int
    game_over: bool
    winning_cells: FrozenSet[int]
    message: str
    category: StatusCategory

    @classmethod
    def from_game(cls, game: GameLogic) -> "RenderState":
        status = game.status
        if status.kind is StatusKind.WON:
            message = config.WIN_MESSAGE.format(player=game.winner.value)
            category = StatusCategory.WIN
        elif status.kind is StatusKind.DRAW:
            message = config.DRAW_MESSAGE
            category = StatusCategory.DRAW
        else:
            message = config.TURN_MESSAGE.format(player=game.current_player.value)
            category = StatusCategory.TURN
        return cls(
            cells=tuple(game.board),
            selection=game.selection,
            game_over=game.game_over,
            winning_cells=frozenset(game.winning_line or ()),
            message=message,
            category=category,
        )

    def is_disabled(self, index):
        return self.game_over or self.cells[index] is not Cell.EMPTY

    def is_selected(self, index):
        # cursor is hidden once the game ends
        return index == self.selection and not self.game_over

    def is_winning(self, index):
        return index in self.winning_cells
