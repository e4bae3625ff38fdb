from loguru import logger
from PySide6.QtCore import QObject, Signal, Slot

from . import config
from .game_logic import GameLogic
from .render_state import RenderState


class GameController(QObject):
    """
    routes pointer/keyboard events into the game model
    and announces a fresh RenderState after each one
    """
    render_requested = Signal(object)   # RenderState

    def __init__(self, game_logic=None, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic if game_logic is not None else GameLogic()

    def render_state(self):
        return RenderState.from_game(self.game_logic)

    @Slot()
    def refresh(self):
        # push the current state without touching it (first paint)
        self.render_requested.emit(self.render_state())

    @Slot(int)
    def cell_activated(self, index):
        """
        click on a cell: move the cursor there, then try to play it
        """
        self.game_logic.select(index)
        self.game_logic.commit_move(index)
        self.refresh()

    @Slot(int, int)
    def direction_pressed(self, d_col, d_row):
        if self.game_logic.game_over:
            return
        self.game_logic.move_selection(d_col, d_row)
        self.refresh()

    @Slot()
    def confirm_pressed(self):
        if self.game_logic.game_over:
            return
        self.game_logic.commit_move(self.game_logic.selection)
        self.refresh()

    @Slot()
    def reset_requested(self):
        # allowed at any time, finished or not
        self.game_logic.reset()
        logger.info("new game")
        self.refresh()

    def key_pressed(self, key, editing=False):
        """
        translate a Qt key into a game action
        returns: True if the key was consumed (caller should accept the event)
        """
        if key not in config.DIRECTION_KEYS and key not in config.CONFIRM_KEYS:
            return False
        if editing or self.game_logic.game_over:
            return False
        if key in config.DIRECTION_KEYS:
            self.direction_pressed(*config.DIRECTION_KEYS[key])
        else:
            self.confirm_pressed()
        return True
