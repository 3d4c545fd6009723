"""Tic-tac-toe board drawing and win detection."""

import sys
from typing import List, Optional, Sequence, TextIO

from .console import Color, color

SEPARATOR = "________________________"


def _rows(board: Sequence[Sequence[str]]) -> List[List[str]]:
    rows = [list(row) for row in board]
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("a board must have 3 rows of 3 cells")
    return rows


def draw_board(board: Sequence[Sequence[str]], stream: Optional[TextIO] = None) -> None:
    """Write the 3x3 board to the stream, one row per line."""
    out = sys.stdout if stream is None else stream
    for index, row in enumerate(_rows(board)):
        if index:
            color(Color.GRAY, out)
            out.write(SEPARATOR + "\n")
            color(Color.WHITE, out)
        for position, cell in enumerate(row):
            if position:
                color(Color.GRAY, out)
                out.write("\t |")
                color(Color.WHITE, out)
            out.write(str(cell))
        out.write("\n")
    out.write("\n")


def has_line(board: Sequence[Sequence[str]], mark: str) -> bool:
    """Tell whether the mark fills a row, a column or a diagonal."""
    rows = _rows(board)
    columns = [list(column) for column in zip(*rows)]
    diagonals = [
        [rows[i][i] for i in range(3)],
        [rows[i][2 - i] for i in range(3)],
    ]
    return any(all(cell == mark for cell in line) for line in rows + columns + diagonals)