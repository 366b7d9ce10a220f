import logging
import random
from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .ai import Difficulty, get_move
from .game_logic import BOARD_CELLS, Board, Mark, tie, winner

logger = logging.getLogger(__name__)

BOT_DELAY_MS = 200                 # "thinking" pause before the bot plays
DEFAULT_PLAYER_NAME = "You"
DEFAULT_DIFFICULTY = Difficulty.MEDIUM
BOT_NAME = "Computer"
HUMAN_MARK = Mark.X                # human always moves first


class Turn(Enum):
    HUMAN = "human"
    BOT = "bot"


class Phase(Enum):
    IDLE = "idle"
    HUMAN_TURN = "human_turn"
    BOT_THINKING = "bot_thinking"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class Player:
    name: str
    mark: Mark
    is_ai: bool = False


@dataclass(frozen=True)
class GameState:
    turn: Turn
    running: bool
    locked: bool


class GameController(QObject):
    """
    turn-taking for one human (X) against the computer (O)

    adapters call start / restart / human_move and listen to
    board_changed (render) and status_changed (status line).
    """
    board_changed = Signal(object, bool)    # cells, locked
    status_changed = Signal(str)
    game_finished = Signal(object)          # winning Mark, or None on a tie

    def __init__(self, board=None, delay_ms=BOT_DELAY_MS, scheduler=None,
                 move_selector=get_move, rng=None, parent=None):
        super().__init__(parent)
        self._board = board if board is not None else Board()
        self._delay_ms = delay_ms
        self._schedule = scheduler or QTimer.singleShot
        self._select_move = move_selector
        self._rng = rng or random.Random()

        self._human = Player(DEFAULT_PLAYER_NAME, HUMAN_MARK)
        self._bot = Player(BOT_NAME, HUMAN_MARK.opposite(), is_ai=True)
        self._difficulty = DEFAULT_DIFFICULTY
        self._turn = Turn.HUMAN
        self._running = False
        self._locked = False
        self._generation = 0          # bumped per session, stale bot moves check it
        self._finished = False        # terminal reached, as opposed to never started

    # ----- read-only state -----

    @property
    def board(self):
        return self._board.get()

    @property
    def human(self):
        return self._human

    @property
    def bot(self):
        return self._bot

    @property
    def difficulty(self):
        return self._difficulty

    @property
    def turn(self):
        return self._turn

    @property
    def running(self):
        return self._running

    @property
    def locked(self):
        return self._locked

    @property
    def state(self):
        return GameState(self._turn, self._running, self._locked)

    @property
    def phase(self):
        if not self._running:
            return Phase.TERMINAL if self._finished else Phase.IDLE
        if self._turn is Turn.BOT:
            return Phase.BOT_THINKING
        return Phase.HUMAN_TURN

    def accepts_input(self):
        return self._running and not self._locked and self._turn is Turn.HUMAN

    # ----- operations -----

    def start(self, player_name=DEFAULT_PLAYER_NAME, difficulty=DEFAULT_DIFFICULTY):
        """
        new game with fresh settings, from any state
        """
        name = (player_name or "").strip() or DEFAULT_PLAYER_NAME
        self._human = Player(name, HUMAN_MARK)
        self._bot = Player(BOT_NAME, HUMAN_MARK.opposite(), is_ai=True)
        self._difficulty = difficulty
        logger.info("new game: %s vs %s (%s)", name, self._bot.name, difficulty.value)
        self._new_session()

    @Slot()
    def restart(self):
        """
        clear the board but keep name and difficulty
        """
        if not self._running:
            self.start(self._human.name, self._difficulty)
            return
        logger.info("game abandoned, restarting")
        self._new_session()

    @Slot(int)
    def human_move(self, index):
        """
        try to place X; anything not allowed right now is ignored
        """
        if not self.accepts_input():
            logger.debug("ignored move %s: input not accepted", index)
            return
        if not 0 <= index < BOARD_CELLS:
            logger.debug("ignored move %s: no such cell", index)
            return
        if not self._board.set(index, self._human.mark):
            logger.debug("ignored move %s: cell taken", index)
            return

        self._render()
        if self._check_end():
            return

        self._turn = Turn.BOT
        self._locked = True
        self.status_changed.emit(f"{self._bot.name}'s turn")
        self._render()
        generation = self._generation
        self._schedule(self._delay_ms, lambda: self._bot_move(generation))

    # ----- internals -----

    def _new_session(self):
        self._generation += 1
        self._board.reset()
        self._turn = Turn.HUMAN
        self._locked = False
        self._finished = False
        self._running = True
        self._emit_human_turn()
        self._render()

    def _bot_move(self, generation):
        # runs once, after the delay
        if not self._running or generation != self._generation:
            logger.debug("dropped stale bot move (generation %s)", generation)
            return

        move = self._select_move(self._difficulty, self._board.get(),
                                 self._bot.mark, self._human.mark, self._rng)
        if move is not None:
            self._board.set(move, self._bot.mark)

        self._locked = False
        self._render()
        if self._check_end():
            return

        self._turn = Turn.HUMAN
        self._emit_human_turn()

    def _check_end(self):
        cells = self._board.get()
        won = winner(cells)
        if won is not None or tie(cells):
            self._end(won)
            return True
        return False

    def _end(self, won):
        self._running = False
        self._locked = True
        self._finished = True
        if won == self._human.mark:
            msg = f"{self._human.name} wins!"
        elif won == self._bot.mark:
            msg = f"{self._bot.name} wins!"
        else:
            msg = "Tie game."
        logger.info("game over: %s", msg)
        self.status_changed.emit(msg)
        self._render()
        self.game_finished.emit(won)

    def _emit_human_turn(self):
        self.status_changed.emit(f"{self._human.name}'s turn")

    def _render(self):
        self.board_changed.emit(self._board.get(), self._locked)
