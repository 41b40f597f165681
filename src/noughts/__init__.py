"""noughts package.

Terminal tic-tac-toe: rules engine, exhaustive minimax opponent, and an
interactive session.

Convenience imports are exposed for the core game API.
"""

from .board import GameResult, Mark, evaluate, new_board
from .search import NoMoveAvailable, best_move_for_o, minimax, move_scores

__all__ = [
    "Mark",
    "GameResult",
    "new_board",
    "evaluate",
    "minimax",
    "move_scores",
    "best_move_for_o",
    "NoMoveAvailable",
]
