"""
Board representation and rules: marks, results, win/draw detection, parsing.
Teaching notes:
- A board is a list of 9 marks, row-major. Position p (1..9) is cell p-1.
- X always starts, so reachable boards have X == O or X == O + 1 marks.
- evaluate() is pure; it judges whatever board it is given.
"""
from enum import Enum, IntEnum
from typing import List

WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
]

POSITION_GUIDE = "\n".join([
    " 1 | 2 | 3 ",
    "---+---+---",
    " 4 | 5 | 6 ",
    "---+---+---",
    " 7 | 8 | 9 ",
])


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return " " if self is Mark.EMPTY else self.name

    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.O if self is Mark.X else Mark.X


class GameResult(Enum):
    ONGOING = "ongoing"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.ONGOING


class BoardParseError(ValueError):
    """Raised when a board string cannot be turned into a board."""


Board = List[Mark]

_CHAR_TO_MARK = {
    "0": Mark.EMPTY, ".": Mark.EMPTY, "-": Mark.EMPTY, "_": Mark.EMPTY,
    "1": Mark.X, "X": Mark.X,
    "2": Mark.O, "O": Mark.O,
}


def new_board() -> Board:
    return [Mark.EMPTY] * 9


def winner(board: Board) -> Mark:
    for a, b, c in WIN_LINES:
        v = board[a]
        if v != Mark.EMPTY and v == board[b] and v == board[c]:
            return Mark(v)
    return Mark.EMPTY


def evaluate(board: Board) -> GameResult:
    """Classify a board as won by X, won by O, drawn, or still in play.

    Boards where both sides complete a line cannot be reached; whichever line
    is found first decides.
    """
    w = winner(board)
    if w == Mark.X:
        return GameResult.X_WINS
    if w == Mark.O:
        return GameResult.O_WINS
    if Mark.EMPTY in board:
        return GameResult.ONGOING
    return GameResult.DRAW


def empty_cells(board: Board) -> List[int]:
    return [i for i, v in enumerate(board) if v == Mark.EMPTY]


def position_to_index(position: int) -> int:
    if not 1 <= position <= 9:
        raise ValueError(f"Position out of range 1-9: {position}")
    return position - 1


def get_piece_counts(board: Board):
    return board.count(Mark.X), board.count(Mark.O)


def is_valid_state(board: Board) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def has_line(p: Mark) -> bool:
        return any(all(board[i] == p for i in line) for line in WIN_LINES)

    x_line, o_line = has_line(Mark.X), has_line(Mark.O)
    if x_line and o_line:
        return False
    if x_line and x_count != o_count + 1:
        return False
    if o_line and x_count != o_count:
        return False
    return True


def parse_board(text: str) -> Board:
    raw = text.strip().upper()
    if len(raw) != 9:
        raise BoardParseError(f"Board must have exactly 9 cells, got {len(raw)}: {text!r}")
    try:
        return [_CHAR_TO_MARK[c] for c in raw]
    except KeyError as exc:
        raise BoardParseError(f"Unknown cell character {exc.args[0]!r} in {text!r}") from None


def serialize_board(board: Board) -> str:
    return ''.join(str(int(cell)) for cell in board)


def render_board(board: Board) -> str:
    rows = []
    for r in range(3):
        a, b, c = (Mark(v).symbol for v in board[r * 3:r * 3 + 3])
        rows.append(f" {a} | {b} | {c} ")
    return "\n---+---+---\n".join(rows)
