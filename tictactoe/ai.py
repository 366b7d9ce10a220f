"""
computer opponent: easy (random), medium (heuristic), hard (minimax)

every strategy takes a board snapshot and works on its own copy,
the caller's board is never touched.
"""
import logging
import random
from enum import Enum
from functools import lru_cache

from .game_logic import CENTER, CORNERS, LINES, Mark, empty_cells, winner

logger = logging.getLogger(__name__)

WIN_SCORE = 10


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def random_move(board, rng=random):
    """
    any empty cell, uniformly; None if the board is full
    """
    free = empty_cells(board)
    if not free:
        return None
    return rng.choice(free)


def find_line_move(board, mark):
    """
    empty cell that completes a line already holding two of mark
    """
    for line in LINES:
        values = [board[i] for i in line]
        if values.count(mark) == 2 and Mark.EMPTY in values:
            for i in line:
                if board[i] is Mark.EMPTY:
                    return i
    return None


def take_center(board):
    return CENTER if board[CENTER] is Mark.EMPTY else None


def take_corner(board, rng=random):
    free = [i for i in CORNERS if board[i] is Mark.EMPTY]
    return rng.choice(free) if free else None


def medium_move(board, ai_mark, human_mark, rng=random):
    """
    win > block > center > corner > random, first hit wins
    """
    selectors = (
        lambda: find_line_move(board, ai_mark),
        lambda: find_line_move(board, human_mark),
        lambda: take_center(board),
        lambda: take_corner(board, rng),
        lambda: random_move(board, rng),
    )
    for select in selectors:
        move = select()
        if move is not None:
            return move
    return None


@lru_cache(maxsize=None)
def _minimax(cells, depth, maximizing, ai_mark, human_mark):
    # cells is a tuple so every level gets its own copy
    won = winner(cells)
    if won is ai_mark:
        return WIN_SCORE - depth      # sooner is better
    if won is human_mark:
        return -WIN_SCORE + depth     # later is less bad
    free = [i for i, c in enumerate(cells) if c is Mark.EMPTY]
    if not free:
        return 0

    mark = ai_mark if maximizing else human_mark
    scores = []
    for i in free:
        child = cells[:i] + (mark,) + cells[i + 1:]
        scores.append(_minimax(child, depth + 1, not maximizing, ai_mark, human_mark))
    return max(scores) if maximizing else min(scores)


def hard_move(board, ai_mark, human_mark):
    """
    full game-tree minimax, never loses

    each candidate is scored from the opponent's reply at depth 0.
    the first cell (lowest index) with the strictly best score is kept.
    """
    cells = tuple(board)
    best_move, best_score = None, float("-inf")
    for i in empty_cells(cells):
        child = cells[:i] + (ai_mark,) + cells[i + 1:]
        score = _minimax(child, 0, False, ai_mark, human_mark)
        if score > best_score:
            best_move, best_score = i, score
    return best_move


def get_move(difficulty, board, ai_mark, human_mark, rng=random):
    """
    route to the strategy for difficulty
    returns: cell index, or None if there is nothing to play
    """
    if difficulty is Difficulty.EASY:
        move = random_move(board, rng)
    elif difficulty is Difficulty.MEDIUM:
        move = medium_move(board, ai_mark, human_mark, rng)
    elif difficulty is Difficulty.HARD:
        move = hard_move(board, ai_mark, human_mark)
    else:
        raise ValueError(f"unknown difficulty: {difficulty!r}")
    logger.debug("%s move for %s: %s", difficulty.value, ai_mark.value, move)
    return move
