import os
import sys
from pathlib import Path
import unittest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, os.fspath(PROJECT_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from tictactoe.ai import Difficulty
from tictactoe.controller import GameController
from tictactoe.game_logic import Mark
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow

X, O, _ = Mark.X, Mark.O, Mark.EMPTY

app = QApplication.instance() or QApplication([])


class TestBoardWidget(unittest.TestCase):
    def setUp(self) -> None:
        self.widget = BoardWidget()
        self.widget.resize(300, 300)

    def test_locked_before_first_board(self) -> None:
        self.assertFalse(any(self.widget.is_cell_enabled(i) for i in range(9)))

    def test_occupied_cell_takes_no_clicks(self) -> None:
        cells = [_] * 9
        cells[4] = X
        self.widget.set_board(cells, False)
        self.assertFalse(self.widget.is_cell_enabled(4))
        self.assertTrue(self.widget.is_cell_enabled(0))

    def test_locked_board_takes_no_clicks(self) -> None:
        self.widget.set_board([_] * 9, True)
        for i in range(9):
            self.assertFalse(self.widget.is_cell_enabled(i), i)

    def test_index_at_maps_grid_corners(self) -> None:
        self.assertEqual(self.widget.index_at(10, 10), 0)
        self.assertEqual(self.widget.index_at(290, 10), 2)
        self.assertEqual(self.widget.index_at(150, 150), 4)
        self.assertEqual(self.widget.index_at(10, 290), 6)
        self.assertEqual(self.widget.index_at(290, 290), 8)

    def test_index_at_outside_square_is_none(self) -> None:
        self.assertIsNone(self.widget.index_at(300, 10))
        self.assertIsNone(self.widget.index_at(-1, 150))
        wide = BoardWidget()
        wide.resize(400, 300)
        # grid is centred: 50px margin either side
        self.assertIsNone(wide.index_at(20, 150))
        self.assertEqual(wide.index_at(60, 10), 0)


class TestWindow(unittest.TestCase):
    def setUp(self) -> None:
        self.pending = []
        controller = GameController(scheduler=lambda delay_ms, callback: self.pending.append(callback))
        self.window = TicTacToeWindow(controller=controller, player_name="Ann",
                                      difficulty=Difficulty.EASY)

    def test_waits_for_start(self) -> None:
        self.assertEqual(self.window.message_label.text(), "Click Start.")
        self.assertFalse(self.window.board_widget.is_cell_enabled(0))

    def test_click_goes_through_controller(self) -> None:
        self.window.start_game()
        self.assertIs(self.window.controller.difficulty, Difficulty.EASY)
        self.assertEqual(self.window.message_label.text(), "Ann's turn")
        self.assertTrue(self.window.board_widget.is_cell_enabled(0))

        self.window.board_widget.cell_clicked.emit(0)
        self.assertIs(self.window.controller.board[0], X)
        self.assertFalse(self.window.board_widget.is_cell_enabled(1))
        self.assertEqual(self.window.message_label.text(), "Computer's turn")

        for callback in self.pending:
            callback()
        self.assertEqual(self.window.message_label.text(), "Ann's turn")
        self.assertFalse(self.window.board_widget.is_cell_enabled(0))


if __name__ == "__main__":
    unittest.main()
