import io
import re

import pytest

from torres.tictactoe import SEPARATOR, draw_board, has_line

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

EMPTY = [[" "] * 3 for _ in range(3)]


def _plain(text):
    return _ANSI.sub("", text)


@pytest.mark.parametrize("row", range(3))
def test_full_row_wins(row):
    board = [list(r) for r in EMPTY]
    board[row] = ["X", "X", "X"]
    assert has_line(board, "X") is True
    assert has_line(board, "O") is False


@pytest.mark.parametrize("column", range(3))
def test_full_column_wins(column):
    board = [list(r) for r in EMPTY]
    for row in board:
        row[column] = "O"
    assert has_line(board, "O") is True


def test_main_diagonal_wins():
    board = [["X", "O", " "], ["O", "X", " "], [" ", " ", "X"]]
    assert has_line(board, "X") is True


def test_anti_diagonal_wins():
    board = [[" ", " ", "O"], [" ", "O", "X"], ["O", "X", "X"]]
    assert has_line(board, "O") is True


def test_drawn_board_has_no_line():
    board = [["X", "O", "X"], ["X", "O", "O"], ["O", "X", "X"]]
    assert has_line(board, "X") is False
    assert has_line(board, "O") is False


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        has_line([["X", "X"], ["X", "X"]], "X")


def test_draw_board_layout():
    board = [["X", "O", "X"], ["O", "X", "O"], [" ", " ", "X"]]
    stream = io.StringIO()
    draw_board(board, stream)
    lines = _plain(stream.getvalue()).split("\n")
    assert lines[0] == "\t |".join(board[0])
    assert lines[1] == SEPARATOR
    assert lines[2] == "\t |".join(board[1])
    assert lines[3] == SEPARATOR
    assert lines[4] == "\t |".join(board[2])
    assert lines[5:] == ["", ""]


def test_draw_board_rejects_bad_shape():
    with pytest.raises(ValueError):
        draw_board([["X"]], io.StringIO())