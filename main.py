import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtGui import QPalette, QColor
from tictactoe.ai import Difficulty
from tictactoe.console import ConsoleGame
from tictactoe.controller import BOT_DELAY_MS, DEFAULT_DIFFICULTY, DEFAULT_PLAYER_NAME, GameController
from tictactoe.ui.main_window import TicTacToeWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TOOLTIP_BASE_COLOR = Qt.white
TOOLTIP_TEXT_COLOR = Qt.black
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
BRIGHT_TEXT_COLOR = Qt.red
LINK_COLOR = QColor(42, 130, 218)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_WINDOW_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.ToolTipBase, TOOLTIP_BASE_COLOR)
    palette.setColor(QPalette.ToolTipText, TOOLTIP_TEXT_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.BrightText, BRIGHT_TEXT_COLOR)
    palette.setColor(QPalette.Link, LINK_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Placeholder text (e.g., QLineEdit placeholder)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_WINDOW_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    parser.add_argument("--name", default=DEFAULT_PLAYER_NAME, help="Your name (default %(default)s).")
    parser.add_argument(
        "--difficulty",
        type=Difficulty,
        choices=list(Difficulty),
        default=DEFAULT_DIFFICULTY.value,
        metavar="{" + ",".join(d.value for d in Difficulty) + "}",
        help="Computer strength (default %(default)s).",
    )
    parser.add_argument("--delay", type=int, default=BOT_DELAY_MS,
                        help="Computer thinking pause in ms (default %(default)s).")
    parser.add_argument("--console", action="store_true", help="Play in the terminal instead of a window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must be >= 0")
    return args


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.console:
        app = QCoreApplication(sys.argv[:1])
        ConsoleGame().run(args.name, args.difficulty)
        return 0

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(
        controller=GameController(delay_ms=args.delay),
        player_name=args.name,
        difficulty=args.difficulty,
    )
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
