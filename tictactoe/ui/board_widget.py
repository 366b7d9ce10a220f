from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_CELLS, BOARD_SIZE, Mark, winning_line

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
GRID_COLOR = "#555"
BACKGROUND_COLOR = "#333"
HIGHLIGHT_COLOR = "#4a4a2a"

class BoardWidget(QWidget):
    """
    draws the board and turns clicks into cell indices
    """
    cell_clicked = Signal(int)  # emits index 0-8 on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._cells = [Mark.EMPTY] * BOARD_CELLS
        self._locked = True             # nothing to click before start

    def set_board(self, cells, locked):
        # render callback: new snapshot + input lock
        self._cells = list(cells)
        self._locked = locked
        self.update()

    def is_cell_enabled(self, index):
        # clicks only on empty cells while unlocked
        return not self._locked and self._cells[index] is Mark.EMPTY

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight a winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # winning cells get a tinted background
            line = winning_line(self._cells) or ()
            for i in line:
                r, c = divmod(i, BOARD_SIZE)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size), QColor(HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for i, mark in enumerate(self._cells):
                if mark is Mark.EMPTY: continue
                r, c = divmod(i, BOARD_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if mark is Mark.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: emit the cell index if that cell takes input
        """
        index = self.index_at(event.position().x(), event.position().y())
        if index is None or not self.is_cell_enabled(index):
            return
        self.cell_clicked.emit(index)  # notify main window
