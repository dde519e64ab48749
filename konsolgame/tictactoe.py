"""Two-player tic-tac-toe played on the terminal."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Sequence, TextIO

from konsolgame.words import read_command, string_to_int

WIN_SCORE = 100
LOSE_SCORE = 0
DRAW_SCORE = 50

MARKS = {1: "X", 2: "O"}

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

_BOARD_PAD = " " * 84
_CELL_PAD = " " * 84
_RULE_PAD = " " * 82
_PROMPT_PAD = " " * 80
_PLAYER_PAD = " " * 86
_RESULT_PAD = " " * 82
_SCORE_PAD = " " * 83


class Outcome(IntEnum):
    """State of the board after a move."""

    ONGOING = -1
    DRAW = 0
    WIN = 1


def new_board() -> list[str]:
    """Return an empty board: each cell shows its own number, 1 to 9."""
    return [str(number) for number in range(1, 10)]


def _check_size(cells: Sequence[str]) -> None:
    if len(cells) != 9:
        raise ValueError(f"a board has 9 cells, got {len(cells)}")


def check_win(cells: Sequence[str]) -> Outcome:
    """Return WIN when a line is complete, DRAW when the board is full, else ONGOING."""
    _check_size(cells)
    if any(cells[a] == cells[b] == cells[c] for a, b, c in _LINES):
        return Outcome.WIN
    if all(cell != str(number) for number, cell in enumerate(cells, start=1)):
        return Outcome.DRAW
    return Outcome.ONGOING


def render_board(cells: Sequence[str]) -> str:
    """Return the board drawn with both players' marks."""
    _check_size(cells)
    spacer = f"{_BOARD_PAD}   |     |     \n"
    rule = f"{_RULE_PAD}_____|_____|_____\n"

    def row(start: int) -> str:
        a, b, c = cells[start:start + 3]
        return f"{_CELL_PAD}{a}  |  {b}  |  {c} \n"

    return "".join(
        [
            "\n" * 11,
            f"{' ' * 85}Tic Tac Toe\n\n",
            f"{' ' * 76}PEMAIN 1 (X)  -  PEMAIN 2 (O)\n\n\n",
            spacer,
            row(0),
            rule,
            spacer,
            row(3),
            rule,
            spacer,
            row(6),
            f"{_BOARD_PAD}   |     |     \n\n",
        ]
    )


def play(input_stream: TextIO, output: TextIO) -> tuple[int, int]:
    """Play one game reading cell numbers from ``input_stream``.

    Returns the scores of player 1 and player 2. Raises EOFError when the
    input ends before the game does.
    """
    cells = new_board()
    player = 1
    outcome = Outcome.ONGOING
    while outcome is Outcome.ONGOING:
        output.write(render_board(cells))
        output.write("\n\n")
        output.write(f"{_PLAYER_PAD}PEMAIN {player} \n")
        output.write(f"{_PROMPT_PAD}MASUKKAN NOMOR :  ")
        choice = string_to_int(read_command(input_stream))

        if 1 <= choice <= 9 and cells[choice - 1] == str(choice):
            cells[choice - 1] = MARKS[player]
            outcome = check_win(cells)
            if outcome is Outcome.ONGOING:
                player = 2 if player == 1 else 1
        else:
            output.write(f"{_PROMPT_PAD}INVALID MOVE! SILAKAN COBA LAGI!")

    output.write(render_board(cells))

    if outcome is Outcome.WIN:
        scores = (WIN_SCORE, LOSE_SCORE) if player == 1 else (LOSE_SCORE, WIN_SCORE)
        output.write(f"\n{_RESULT_PAD}PEMAIN {player} MENANG!!! \n\n\n")
        output.write(f"{' ' * 75}---------- SCOREBOARD ----------\n\n")
    else:
        scores = (DRAW_SCORE, DRAW_SCORE)
        output.write(f"{' ' * 81}PERMAINAN SERI!!!\n\n\n")
        output.write(f"{' ' * 74}---------- SCOREBOARD ---------\n\n")
    output.write(f"{_SCORE_PAD}PEMAIN 1 : {scores[0]}\n\n")
    output.write(f"{_SCORE_PAD}PEMAIN 2 : {scores[1]}\n")
    return scores


def main(argv: list[str] | None = None) -> int:
    """Play tic-tac-toe on the terminal."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe for two players.")
    parser.parse_args(argv)
    try:
        play(sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())