"""
Widget tests, run on the offscreen platform.
"""

import pytest
from PySide6.QtCore import Qt, QEvent, QPointF
from PySide6.QtGui import QKeyEvent, QMouseEvent
from PySide6.QtWidgets import QApplication, QLineEdit

from tictactoe.controller import GameController
from tictactoe.marks import Cell
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow


@pytest.fixture
def board(qapp):
    controller = GameController()
    widget = BoardWidget(controller)
    widget.resize(300, 300)
    yield widget
    widget.deleteLater()


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()


def key_event(key):
    return QKeyEvent(QEvent.KeyPress, key, Qt.NoModifier)


def release_at(x, y):
    pos = QPointF(x, y)
    return QMouseEvent(QEvent.MouseButtonRelease, pos, pos,
                       Qt.LeftButton, Qt.NoButton, Qt.NoModifier)


def test_index_at_maps_grid(board):
    assert board.index_at(10, 10) == 0
    assert board.index_at(150, 150) == 4
    assert board.index_at(299, 299) == 8
    assert board.index_at(250, 20) == 2


def test_index_at_outside_grid(board):
    board.resize(400, 300)     # grid is centred, 50px margins left/right
    assert board.index_at(10, 10) is None
    assert board.index_at(60, 10) == 0


def test_click_plays_cell(board):
    board.mouseReleaseEvent(release_at(250, 250))
    assert board.controller.game_logic.board[8] is Cell.X
    assert board.render_state.cells[8] is Cell.X
    assert board.render_state.selection == 8


def test_arrow_key_accepted(board):
    event = key_event(Qt.Key_Right)
    board.keyPressEvent(event)
    assert event.isAccepted()
    assert board.controller.game_logic.selection == 1


def test_other_key_not_accepted(board):
    event = key_event(Qt.Key_A)
    board.keyPressEvent(event)
    assert not event.isAccepted()


def test_paint_does_not_fail(board):
    for i in (0, 1, 3, 4, 6):
        board.controller.cell_activated(i)
    image = board.grab()
    assert not image.isNull()


def test_window_shows_turn_then_result(window):
    assert window.message_label.text() == "Turn: X"
    for i in (0, 1, 3, 4, 6):
        window.controller.cell_activated(i)
    assert window.message_label.text() == "\U0001F3C6 X wins!"


def test_window_reset(window, qapp):
    """Reset clears the game and hands keyboard focus back to the board."""
    window.show(); window.activateWindow()
    window.controller.cell_activated(4)
    window.reset_button.setFocus()
    qapp.processEvents()
    window.reset_button.click()
    qapp.processEvents()
    assert window.controller.game_logic.board == [Cell.EMPTY] * 9
    assert window.message_label.text() == "Turn: X"
    assert QApplication.focusWidget() is window.board_widget


def test_window_routes_keys_from_other_widgets(window):
    event = key_event(Qt.Key_Down)
    QApplication.sendEvent(window.reset_button, event)
    assert window.controller.game_logic.selection == 3


def test_window_ignores_keys_while_typing(window, qapp):
    """Arrows typed into a text field stay with the field."""
    edit = QLineEdit()
    window.main_layout.addWidget(edit)
    window.show(); window.activateWindow()
    edit.setFocus()
    qapp.processEvents()
    assert QApplication.focusWidget() is edit
    event = key_event(Qt.Key_Right)
    QApplication.sendEvent(edit, event)
    assert window.controller.game_logic.selection == 0
