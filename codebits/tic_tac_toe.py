"""Two-player tic-tac-toe on the terminal."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

EMPTY = " "
MARKS = ("X", "O")
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_INDENT = "\t" * 6


@dataclass
class Board:
    """A 3x3 board whose cells are numbered 0 to 8 row by row."""

    cells: list[str] = field(default_factory=lambda: [EMPTY] * 9)

    def place(self, position: int, mark: str) -> None:
        """Put ``mark`` on an empty cell; raise ValueError for an invalid move."""
        if mark not in MARKS:
            raise ValueError(f"unknown mark {mark!r}")
        if not 0 <= position <= 8:
            raise ValueError(f"position {position} is off the board")
        if self.cells[position] != EMPTY:
            raise ValueError(f"position {position} is already taken")
        self.cells[position] = mark

    def winner(self) -> str | None:
        """Return the mark holding a full row, column or diagonal, if any."""
        for mark in MARKS:
            if any(all(self.cells[i] == mark for i in line) for line in _LINES):
                return mark
        return None

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def render(self) -> str:
        """Return the framed drawing of the board."""
        parts = [f"{_INDENT}#################################\n{_INDENT}#\t\t\t\t#"]
        for row in range(3):
            marks = "".join(f"* {self.cells[row * 3 + col]}  " for col in range(3))
            parts.append(f"\n{_INDENT}#\t****************\t#\n{_INDENT}#\t{marks}\t#")
        parts.append(
            f"\n{_INDENT}#\t****************\t#\n{_INDENT}#\t\t\t\t#\n"
            f"{_INDENT}#\t\t\t\t#\n{_INDENT}#################################\n"
        )
        return "".join(parts)


def _take_turn(board: Board, player: int, mark: str) -> None:
    while True:
        answer = input(f"\n\t\t\t\t\t Player {player}\n\t\t\t\t\tEnter the place (0-8): ")
        try:
            board.place(int(answer), mark)
            return
        except ValueError:
            print("INVALID MOVE TRY AGAIN \n")


def main(argv: list[str] | None = None) -> int:
    """Play a game between two players sharing the terminal."""
    argparse.ArgumentParser(description="Play tic-tac-toe.").parse_args(argv)
    board = Board()
    print(board.render())
    try:
        if input("\n\n\t\t\t\t\tPress Y to continue:  ")[:1] not in ("y", "Y"):
            return 0
        while True:
            for player, mark in enumerate(MARKS, start=1):
                _take_turn(board, player, mark)
                print(board.render())
                if board.winner() is not None:
                    print(f"\n\n{_INDENT}PLAYER {player} WINS")
                    return 0
                if board.is_full():
                    print(f"\n{_INDENT}\tDRAW MATCH\n")
                    return 0
    except EOFError:
        return 1