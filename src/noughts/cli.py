from __future__ import annotations

import argparse
import logging
from typing import Optional

from .board import BoardParseError, Mark, evaluate, is_valid_state, parse_board, serialize_board
from .config import MODES, default_mode, log_level
from .game import Mode, run_session
from .search import best_move_for_o, move_scores


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noughts", description="Terminal tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play interactively (default command)")
    p_play.add_argument(
        "--mode",
        choices=list(MODES),
        default=None,
        help="Skip the menu for the first game: hvh (human vs human) or hvc (human vs computer)",
    )

    board_help = "Board string, 9 cells of 0/1/2 (or ./X/O), e.g. 120010000"
    p_eval = sub.add_parser("evaluate", help="Report whether a board is won, drawn or ongoing")
    p_eval.add_argument("--board", required=True, help=board_help)

    p_move = sub.add_parser("move", help="Compute the computer's (O) move for a board")
    p_move.add_argument("--board", required=True, help=board_help)

    return p


def _load_board(raw: str) -> Optional[list]:
    try:
        b = parse_board(raw)
    except BoardParseError as exc:
        logging.error("Invalid board string: %s", exc)
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=log_level(getattr(ns, "verbose", False)),
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("noughts"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "evaluate":
        b = _load_board(ns.board)
        if b is None:
            return 2
        print(f"result={evaluate(b).name}")
        return 0

    if ns.cmd == "move":
        b = _load_board(ns.board)
        if b is None:
            return 2
        result = evaluate(b)
        if result.is_terminal:
            logging.error("Board is already finished (%s); no move to make.", result.name)
            return 2
        if b.count(Mark.X) == b.count(Mark.O):
            logging.error("It is X's turn; the computer plays O.")
            return 2
        scores = move_scores(b)
        idx = best_move_for_o(b)
        print(f"move={idx + 1} index={idx}")
        print("scores=" + " ".join("-" if s is None else str(s) for s in scores))
        print(f"board={serialize_board(b)}")
        return 0

    mode_name = getattr(ns, "mode", None) or default_mode()
    run_session(input, print, mode=Mode(mode_name) if mode_name else None)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
