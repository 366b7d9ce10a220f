import os
import sys
from pathlib import Path
import unittest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, os.fspath(PROJECT_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from tictactoe.ai import Difficulty
from tictactoe.console import ConsoleGame, format_board, parse_move, run_now
from tictactoe.controller import GameController
from tictactoe.game_logic import Mark

X, O, _ = Mark.X, Mark.O, Mark.EMPTY

app = QApplication.instance() or QApplication([])


class TestParseMove(unittest.TestCase):
    def test_single_index(self) -> None:
        self.assertEqual(parse_move("0"), 0)
        self.assertEqual(parse_move(" 8 "), 8)

    def test_row_col(self) -> None:
        self.assertEqual(parse_move("1,2"), 5)
        self.assertEqual(parse_move("2, 0"), 6)

    def test_rejects_bad_input(self) -> None:
        for text in ("9", "-1", "3,0", "1,1,1", "abc", ""):
            with self.assertRaises(ValueError, msg=text):
                parse_move(text)


class TestFormatBoard(unittest.TestCase):
    def test_empty_cells_show_their_index(self) -> None:
        text = format_board([X, _, _, _, O, _, _, _, _])
        self.assertIn("X | 1 | 2", text)
        self.assertIn("3 | O | 5", text)


class TestConsoleGame(unittest.TestCase):
    def run_game(self, inputs, difficulty=Difficulty.HARD):
        feed = iter(inputs)
        printed = []

        def fake_input(prompt):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        game = ConsoleGame(input_func=fake_input, output_func=printed.append)
        game.run("Ann", difficulty)
        return game, printed

    def test_plays_until_quit(self) -> None:
        game, printed = self.run_game(["4", "q"])
        cells = game.controller.board
        self.assertIs(cells[4], X)
        self.assertEqual(cells.count(O), 1)
        self.assertEqual(printed[0], "Ann's turn")

    def test_bad_and_taken_cells_are_reported(self) -> None:
        game, printed = self.run_game(["x", "4", "4"])
        self.assertIn("!! Invalid input: invalid literal for int() with base 10: 'x'", printed)
        self.assertIn("!! Cell already taken. Try again.", printed)

    def test_restart_clears_the_board(self) -> None:
        game, printed = self.run_game(["4", "r"])
        self.assertEqual(game.controller.board, [_] * 9)
        self.assertTrue(game.controller.running)

    def test_each_position_printed_once(self) -> None:
        # X takes the top row while O answers at 3 and 4
        bot_moves = iter([3, 4])
        controller = GameController(
            scheduler=run_now,
            move_selector=lambda difficulty, board, ai_mark, human_mark, rng: next(bot_moves),
        )
        feed = iter(["0", "1", "2"])
        printed = []

        def fake_input(prompt):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        ConsoleGame(controller, input_func=fake_input, output_func=printed.append).run("Ann", Difficulty.EASY)
        boards = [text for text in printed if text.startswith("-------------")]
        # the empty board plus five moves
        self.assertEqual(len(boards), 6)
        self.assertEqual(len(set(boards)), 6)
        self.assertEqual(printed[-1], "Ann wins!")

    def test_hard_game_never_ends_in_human_win(self) -> None:
        moves = [str(i) for i in range(9)] * 2
        game, printed = self.run_game(moves)
        self.assertFalse(game.controller.running)
        self.assertNotIn("Ann wins!", printed)


if __name__ == "__main__":
    unittest.main()
