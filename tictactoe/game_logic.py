from enum import Enum

BOARD_SIZE = 3                       # fixed 3x3 grid
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

# rows, then cols, then the two diags. order matters for winner()
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)


class Mark(Enum):
    """
    what a cell can hold
    """
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self):
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY


class Board:
    """
    the 9 cells, row-major, 0 is top-left
    """
    def __init__(self):
        self._cells = [Mark.EMPTY] * BOARD_CELLS

    def reset(self):
        # back to all empty
        self._cells = [Mark.EMPTY] * BOARD_CELLS

    def get(self):
        """
        copy of the cells, safe for the caller to change
        """
        return list(self._cells)

    def set(self, index, mark):
        """
        place mark only if the cell is empty
        returns: True if placed, False if occupied
        """
        if not 0 <= index < BOARD_CELLS:
            raise IndexError(f"cell index {index} out of range 0-{BOARD_CELLS - 1}")
        if mark is Mark.EMPTY:
            raise ValueError("cannot place an empty mark")
        if self._cells[index] is not Mark.EMPTY:
            return False
        self._cells[index] = mark
        return True

    def __getitem__(self, index):
        return self._cells[index]

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return BOARD_CELLS

    def __repr__(self):
        text = "".join(c.value or "_" for c in self._cells)
        return f"Board({text!r})"


def winning_line(board):
    """
    first completed line in LINES order, or None
    """
    for a, b, c in LINES:
        if board[a] is not Mark.EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def winner(board):
    """
    mark holding a full line, or None
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def tie(board):
    """
    no empty cells and no winner
    """
    return all(c is not Mark.EMPTY for c in board) and winner(board) is None


def empty_cells(board):
    # ascending indices of blank cells
    return [i for i, c in enumerate(board) if c is Mark.EMPTY]
