"""Utilities for summarising the groups and liberties of a board."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from core.board import Board
from core.content import Content
from core.point import point_to_sgf


def count_liberties(board: Board) -> List[Tuple[int, int, int]]:
    """Return a list of ``(x, y, liberties)`` for all stones on the board.

    Black liberties are positive and white liberties negative, so the color
    of each stone can be read from the sign.  Cells are listed row by row.
    """
    result: List[Tuple[int, int, int]] = []
    for y in range(board.size_y):
        for x in range(board.size_x):
            color = board.get(x, y)
            if color is Content.EMPTY:
                continue
            libs = board.get_liberties(x, y)
            result.append((x, y, libs if color is Content.BLACK else -libs))
    return result


def group_summary(board: Board) -> List[Dict[str, Any]]:
    """Return one JSON-ready record per group of stones."""
    summary: List[Dict[str, Any]] = []
    for group in board.groups():
        if group.content is Content.EMPTY:
            continue
        points = sorted(group.points, key=lambda p: (p.y, p.x))
        summary.append(
            {
                "color": group.content.name.lower(),
                "points": [point_to_sgf(p) for p in points],
                "size": len(group),
                "liberties": board.get_liberties(group),
                "dead": group.is_dead,
            }
        )
    return summary


__all__ = ["count_liberties", "group_summary"]
