from loguru import logger

from .. import config
from ..controller import GameController
from ..render_state import StatusCategory
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit, QTextEdit,
    QPlainTextEdit, QAbstractSpinBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QEvent, QTimer, Slot

# focus on any of these means the user is typing, not playing
TEXT_INPUT_TYPES = (QLineEdit, QTextEdit, QPlainTextEdit, QAbstractSpinBox)

class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, controller=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.controller = controller if controller is not None else GameController(parent=self)
        self.board_widget = BoardWidget(self.controller, parent=self)
        self._last_message = None

        self._setup_ui()
        self.controller.render_requested.connect(self._on_render_requested)
        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)   # window-wide arrow/enter handling
        self.controller.refresh()
        self.board_widget.setFocus()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(config.STATUS_FONT_SIZE); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(object)
    def _on_render_requested(self, state):
        self._update_message(state.message, state.category)

    def _update_message(self, text, category=StatusCategory.TURN):
        # set message text + style, pulse when it changes
        self.message_label.setStyleSheet(config.STATUS_STYLES[category.value])
        self.message_label.setText(text)
        if text != self._last_message:
            self._last_message = text
            self._pop_message()

    def _pop_message(self):
        # brief font bump, purely cosmetic
        f = self.message_label.font(); f.setPointSize(config.STATUS_POP_SIZE)
        self.message_label.setFont(f)
        QTimer.singleShot(config.STATUS_POP_MS, self._restore_message_font)

    def _restore_message_font(self):
        f = self.message_label.font(); f.setPointSize(config.STATUS_FONT_SIZE)
        self.message_label.setFont(f)

    def _is_typing_in_field(self):
        return isinstance(QApplication.focusWidget(), TEXT_INPUT_TYPES)

    def eventFilter(self, obj, event):
        # keys anywhere in this window drive the board, unless typing
        if event.type() == QEvent.KeyPress and isinstance(obj, QWidget) \
           and obj.window() is self:
            if self.controller.key_pressed(event.key(), editing=self._is_typing_in_field()):
                event.accept()
                return True
        return super().eventFilter(obj, event)

    @Slot()
    def reset_game(self):
        # new game, keyboard focus back on the board
        self.controller.reset_requested()
        self.board_widget.setFocus()

    def closeEvent(self, event):
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
        logger.debug("window closed")
        event.accept()
