"""
Interactive terminal session: instructions, mode menu, turns, play-again.
Input and output are passed in as callables (defaults: input/print) so the
whole loop can be driven from tests.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from .board import (
    POSITION_GUIDE,
    Board,
    GameResult,
    Mark,
    evaluate,
    new_board,
    position_to_index,
    render_board,
)
from .search import best_move_for_o

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class Mode(Enum):
    HUMAN_VS_HUMAN = "hvh"
    HUMAN_VS_COMPUTER = "hvc"


MENU_CHOICES = {"1": Mode.HUMAN_VS_HUMAN, "2": Mode.HUMAN_VS_COMPUTER}


def show_instructions(output: OutputFn = print) -> None:
    output("Tic-Tac-Toe board positions:")
    output(POSITION_GUIDE)
    output("")
    output("X always goes first.")
    output("")


def read_human_move(board: Board, mark: Mark, read: InputFn = input, output: OutputFn = print) -> int:
    """Prompt until a legal position is entered, place ``mark`` and return the cell index."""
    while True:
        raw = read(f"Player {mark.name}, enter your move (1-9): ").strip()
        # ASCII digits with an optional sign only
        if not (raw.isascii() and raw.lstrip("+-").isdigit()):
            output("Invalid input. Please enter a number 1-9.")
            continue
        pos = int(raw)
        try:
            idx = position_to_index(pos)
        except ValueError:
            output("Number out of range. Choose 1-9.")
            continue
        if board[idx] != Mark.EMPTY:
            output("Cell already taken. Choose another.")
            continue
        board[idx] = mark
        return idx


def play_game(mode: Mode, read: InputFn = input, output: OutputFn = print) -> GameResult:
    """Play one game to completion and announce the result."""
    board = new_board()
    turn = Mark.X
    logger.debug("starting game mode=%s", mode.value)
    while True:
        result = evaluate(board)
        if result.is_terminal:
            output(render_board(board))
            if result is GameResult.DRAW:
                output("It's a draw!")
            else:
                output(f"Player {'X' if result is GameResult.X_WINS else 'O'} wins!")
            logger.debug("game over result=%s", result.name)
            return result

        if mode is Mode.HUMAN_VS_COMPUTER and turn is Mark.O:
            best_move_for_o(board)
            output("Computer (O) played.")
        else:
            output(render_board(board))
            read_human_move(board, turn, read, output)
        turn = turn.opponent()


def choose_mode(read: InputFn = input, output: OutputFn = print) -> Optional[Mode]:
    """Show the menu until a mode is picked; None means quit."""
    while True:
        output("Choose mode:")
        output(" 1. Human vs Human")
        output(" 2. Human (X) vs Computer (O)")
        output(" Q. Quit")
        choice = read("Select: ").strip().upper()[:1]
        if choice in MENU_CHOICES:
            return MENU_CHOICES[choice]
        if choice == "Q":
            return None
        output("Invalid choice. Try again.")


def run_session(
    read: InputFn = input,
    output: OutputFn = print,
    mode: Optional[Mode] = None,
) -> int:
    """Run the menu loop; returns the number of games finished.

    ``mode`` skips the menu for the first game only.
    """
    output("Welcome to Tic-Tac-Toe")
    show_instructions(output)
    played = 0
    try:
        while True:
            if mode is None:
                mode = choose_mode(read, output)
                if mode is None:
                    break
            play_game(mode, read, output)
            played += 1
            mode = None
            again = read("Play again (y/n)? ").strip().lower()
            if not again.startswith("y"):
                break
    except (EOFError, KeyboardInterrupt):
        output("")
        logger.debug("input closed, ending session")
    output("Goodbye!")
    return played
