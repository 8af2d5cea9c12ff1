"""N-Queens solved by backtracking; queens are labelled by their row."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

Board = list[list[int]]

DEFAULT_SIZE = 5


def is_safe(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """True if no queen in an earlier row attacks the square."""
    size = len(board)
    if any(board[i][col] for i in range(row)):
        return False
    if any(board[i][j] for i, j in zip(range(row, -1, -1), range(col, -1, -1))):
        return False
    if any(board[i][j] for i, j in zip(range(row, -1, -1), range(col, size))):
        return False
    return True


def solve_n_queens(n: int) -> Optional[Board]:
    """Return the first solution found, or None if there is none."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def place(row: int) -> bool:
        if row >= n:
            return True
        for col in range(n):
            if is_safe(board, row, col):
                board[row][col] = row + 1
                if place(row + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render empty squares as dots and queens as Q1, Q2, ..."""
    return "\n".join(
        "".join("  ." if cell == 0 else f" Q{cell}" for cell in row) for row in board
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Place N queens on an N by N board.")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE)
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("board size must not be negative")
    board = solve_n_queens(args.size)
    if board is None:
        print("Solution does not exist")
    else:
        print(format_board(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())