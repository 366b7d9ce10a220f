"""
Terminal front-end: you (X) against the computer (O).
Prints the board after every change and reads moves from stdin.
"""
from .controller import GameController
from .game_logic import BOARD_CELLS, BOARD_SIZE, Mark


def run_now(delay_ms, callback):
    """Scheduler that skips the thinking pause; the terminal has no event loop."""
    callback()


def parse_move(text):
    """
    Turn user input into a cell index.
    Accepts a single index (0-8) or row,col with both in 0-2.
    Raises ValueError on anything else.
    """
    text = text.strip()
    if ',' in text:
        row_col = text.split(',')
        if len(row_col) != 2:
            raise ValueError("use row,col (e.g., 1,1)")
        row, col = int(row_col[0]), int(row_col[1])
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError("row/column must be between 0 and 2")
        return row * BOARD_SIZE + col
    index = int(text)
    if not 0 <= index < BOARD_CELLS:
        raise ValueError("cell must be between 0 and 8")
    return index


def format_board(cells):
    """Board as text; empty cells show their index."""
    lines = ["-------------"]
    for r in range(BOARD_SIZE):
        row = []
        for c in range(BOARD_SIZE):
            i = r * BOARD_SIZE + c
            row.append(cells[i].value if cells[i] is not Mark.EMPTY else str(i))
        lines.append(f"  {' | '.join(row)}")
        if r < BOARD_SIZE - 1:
            lines.append("  ---------")
    lines.append("-------------")
    return "\n".join(lines)


class ConsoleGame:
    """
    Wires a GameController to print/input.
    """

    def __init__(self, controller=None, input_func=input, output_func=print):
        self.controller = controller or GameController(scheduler=run_now)
        self._input = input_func
        self._print = output_func
        self._last_printed = None     # last board shown, to skip repaints
        self.controller.board_changed.connect(self._on_board_changed)
        self.controller.status_changed.connect(self._on_status_changed)

    def _on_board_changed(self, cells, locked):
        # lock changes repaint the same cells; print each position once
        if cells == self._last_printed:
            return
        self._last_printed = cells
        self._print(format_board(cells))

    def _on_status_changed(self, text):
        self._print(text)

    def run(self, player_name, difficulty):
        """Play until the user quits. Returns when 'q' or EOF is read."""
        self.controller.start(player_name, difficulty)
        while True:
            if self.controller.running:
                prompt = "Your move (0-8 or row,col), r to restart, q to quit: "
            else:
                prompt = "Game over. r to play again, q to quit: "
            try:
                move = self._input(prompt).strip().lower()
            except EOFError:
                return
            if move == 'q':
                return
            if move == 'r':
                self._last_printed = None
                self.controller.restart()
                continue
            if not self.controller.running:
                continue
            try:
                index = parse_move(move)
            except ValueError as e:
                self._print(f"!! Invalid input: {e}")
                continue
            if self.controller.board[index] is not Mark.EMPTY:
                self._print("!! Cell already taken. Try again.")
                continue
            self.controller.human_move(index)
