from typing import Iterable, List

from noughts.board import Mark, evaluate, new_board

_ = Mark.EMPTY
X = Mark.X
O = Mark.O


def board_from_moves(moves: Iterable[int]) -> List[Mark]:
    """Play cells alternately starting with X, stopping once the game is decided."""
    b = new_board()
    mark = X
    for mv in moves:
        if evaluate(b).is_terminal:
            break
        b[mv] = mark
        mark = mark.opponent()
    return b
