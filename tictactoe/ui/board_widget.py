from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import config
from ..marks import Cell
from ..rules import BOARD_SIZE

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    paints only from the last RenderState it was handed
    """
    cell_activated = Signal(int)  # emits cell index on click

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.render_state = controller.render_state()
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(config.MIN_BOARD_SIZE, config.MIN_BOARD_SIZE))
        self.setFocusPolicy(Qt.StrongFocus)   # arrows land here
        self.cell_activated.connect(controller.cell_activated)
        controller.render_requested.connect(self.set_render_state)

    def set_render_state(self, state):
        self.render_state = state
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw cell backgrounds, grid, X/O marks and the cursor
        """
        state = self.render_state
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(config.BOARD_BACKGROUND))
            cell_size = side / BOARD_SIZE
            # shaded cells: winning line, then unavailable ones
            for i in range(BOARD_SIZE * BOARD_SIZE):
                if state.is_winning(i):
                    painter.fillRect(self.cell_rect(i), QColor(config.WIN_FILL_COLOR))
                elif state.is_disabled(i):
                    painter.fillRect(self.cell_rect(i), QColor(config.DISABLED_FILL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # draw marks
            for i, mark in enumerate(state.cells):
                if mark is Cell.EMPTY: continue
                centre = self.cell_rect(i).center()
                cx, cy = centre.x(), centre.y()
                rad = cell_size / 2 * 0.7
                if mark is Cell.X:
                    painter.setPen(QPen(QColor(config.X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(config.O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # keyboard cursor
            for i in range(BOARD_SIZE * BOARD_SIZE):
                if state.is_selected(i):
                    painter.setPen(QPen(QColor(config.SELECTION_COLOR), 3))
                    painter.drawRect(self.cell_rect(i).adjusted(3, 3, -3, -3))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is None:
            return
        self.setFocus(Qt.MouseFocusReason)
        self.cell_activated.emit(index)

    def keyPressEvent(self, event):
        # swallow only keys the game used, let the rest propagate
        if self.controller.key_pressed(event.key(), editing=False):
            event.accept()
        else:
            super().keyPressEvent(event)
