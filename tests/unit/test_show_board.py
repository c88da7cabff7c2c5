"""Unit tests for the board renderer (core/show_board.py)."""
from __future__ import annotations

from core.board import Board
from core.show_board import board_to_string, diagram, render_board


def test_diagram_matches_str():
    board = Board.from_content([1, 0, 0, 2])
    assert diagram(board) == str(board) == "X . \n. O \n"


def test_board_to_string_has_labels():
    board = Board.from_content([1, 0, 0, 2])
    assert board_to_string(board) == "   1 2\n 1 X .\n 2 . O"


def test_board_to_string_while_scoring():
    board = Board.from_content([1, 0, 0, 0])
    board.is_scoring = True
    board.territory
    assert board_to_string(board).splitlines() == [
        "   1  2",
        " 1 X. .x",
        " 2 .x .x",
    ]


def test_render_board_prints(capsys):
    render_board(Board(2, 2))
    assert capsys.readouterr().out == "   1 2\n 1 . .\n 2 . .\n"
