from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
MIN_BOARD_SIZE = 150
LOG_LEVEL = "INFO"

# -----------------------------------------------------------------------------
# PALETTE COLORS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
SELECTION_COLOR = "#f0d060"
WIN_FILL_COLOR = "#2e5a2e"
DISABLED_FILL_COLOR = "#2b2b2b"

# status label style per category value
STATUS_STYLES = {
    "info": "color: #8acaff; font-weight: bold;",
    "win": "color: lime; font-weight: bold;",
    "draw": "color: #eee; font-weight: bold;",
}
STATUS_FONT_SIZE = 12
STATUS_POP_SIZE = 15     # point size at the top of the pulse
STATUS_POP_MS = 150

# -----------------------------------------------------------------------------
# STATUS TEXT
# -----------------------------------------------------------------------------

TURN_MESSAGE = "Turn: {player}"
WIN_MESSAGE = "\U0001F3C6 {player} wins!"
DRAW_MESSAGE = "\U0001F91D Draw!"

# -----------------------------------------------------------------------------
# KEY BINDINGS
# -----------------------------------------------------------------------------

# key -> (d_col, d_row)
DIRECTION_KEYS = {
    Qt.Key_Left: (-1, 0),
    Qt.Key_Right: (1, 0),
    Qt.Key_Up: (0, -1),
    Qt.Key_Down: (0, 1),
}
CONFIRM_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space)
