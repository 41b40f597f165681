"""
Exhaustive minimax search for the computer player.
Scoring is from X's perspective:
- X win scores 10 - depth (faster wins preferred).
- O win scores -10 + depth (slower losses preferred, from X's side).
- Draw scores 0.
The computer always plays O against X and minimizes the score.
"""
import logging
from typing import List, Optional

from .board import Board, GameResult, Mark, empty_cells, evaluate

logger = logging.getLogger(__name__)

WIN_SCORE = 10


class NoMoveAvailable(RuntimeError):
    """Raised when the computer is asked to move on a board with no empty cell."""


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """Score ``board`` with full-depth minimax.

    Trial marks are placed directly on ``board`` and removed before the next
    candidate is tried, so the board is unchanged when this returns.
    """
    result = evaluate(board)
    if result is GameResult.X_WINS:
        return WIN_SCORE - depth
    if result is GameResult.O_WINS:
        return -WIN_SCORE + depth
    if result is GameResult.DRAW:
        return 0

    mark = Mark.X if maximizing else Mark.O
    best = -1000 if maximizing else 1000
    for i in empty_cells(board):
        board[i] = mark
        val = minimax(board, depth + 1, not maximizing)
        board[i] = Mark.EMPTY
        if (val > best) if maximizing else (val < best):
            best = val
    return best


def move_scores(board: Board) -> List[Optional[int]]:
    """Minimax score of every O move on ``board``; occupied cells map to None."""
    scores: List[Optional[int]] = [None] * 9
    for i in empty_cells(board):
        board[i] = Mark.O
        scores[i] = minimax(board, 0, True)
        board[i] = Mark.EMPTY
    return scores


def best_move_for_o(board: Board) -> int:
    """Place O on the lowest-scoring cell of ``board`` and return its index.

    Ties go to the lowest index.
    """
    scores = move_scores(board)
    best_idx = -1
    best_val: Optional[int] = None
    for i, s in enumerate(scores):
        if s is None:
            continue
        if best_val is None or s < best_val:
            best_val = s
            best_idx = i
    if best_idx == -1:
        raise NoMoveAvailable("No empty cell left for O")
    board[best_idx] = Mark.O
    logger.debug("computer plays cell=%d score=%s scores=%s", best_idx, best_val, scores)
    return best_idx
