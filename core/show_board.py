"""Utility functions to render a Go board in a human readable form."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from core.board import Board, CellState

# Second character of a cell while scoring: dead, neutral, black/white territory.
DEAD, NEUTRAL, BLACK_AREA, WHITE_AREA = "D", ".", "x", "o"


def _cell_to_string(cell: "CellState") -> str:
    if cell.empty:
        text = "."
    elif cell.black:
        text = "X"
    else:
        text = "O"
    if cell.scoring:
        if cell.dead:
            text += DEAD
        elif cell.territory_black:
            text += BLACK_AREA
        elif cell.empty and not cell.territory_empty:
            text += WHITE_AREA
        else:
            text += NEUTRAL
    return text


def _rows(board: "Board") -> List[List[str]]:
    cells: Dict[Tuple[int, int], str] = {
        (cell.x, cell.y): _cell_to_string(cell) for cell in board.all_cells()
    }
    return [
        [cells[(x, y)] for x in range(board.size_x)] for y in range(board.size_y)
    ]


def diagram(board: "Board") -> str:
    """Return the compact diagram of ``board``, one line per row.

    Each cell is one of ``.XO``; in scoring mode a second character follows:
    ``D`` for a dead group, ``x``/``o`` for black/white territory and ``.``
    otherwise.
    """
    return "".join(" ".join(row) + " \n" for row in _rows(board))


def board_to_string(board: "Board") -> str:
    """Return the diagram of ``board`` with 1-based row and column labels.

    Column labels only show the last digit so they stay aligned with cells.
    """
    width = 2 if board.is_scoring else 1
    header = " ".join(f"{i % 10:<{width}d}" for i in range(1, board.size_x + 1))
    lines = ["   " + header.rstrip()]
    for y, row in enumerate(_rows(board)):
        lines.append(f"{y + 1:2d} " + " ".join(row))
    return "\n".join(lines)


def render_board(board: "Board") -> None:
    """Print the board to stdout."""
    print(board_to_string(board))


__all__ = ["diagram", "board_to_string", "render_board"]
