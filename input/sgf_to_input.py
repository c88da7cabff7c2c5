"""SGF to board/score converter using sgfmill.

Game records are read with ``sgfmill`` and replayed onto a
:class:`core.board.Board`.  Replaying is deliberately naive: stones are placed
with :meth:`Board.set`, opponent groups left without liberties are removed
with :meth:`Board.capture`, and a stone whose own group ends without
liberties is removed as well.  No legality, ko or turn order checks are made;
the record is trusted.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Tuple

from sgfmill import sgf

from core.board import Board
from core.content import Content
from core.liberty import count_liberties, group_summary
from core.point import Point, point_from_sgf, point_to_sgf
from core.show_board import diagram

logger = logging.getLogger(__name__)

# Sentinel coordinate used for pass moves; rendered as "" in SGF.
PASS_MOVE = Point(-1, -1)

_COLORS = {"b": Content.BLACK, "w": Content.WHITE}
_NAMES = {Content.BLACK: "black", Content.WHITE: "white"}


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------

def _to_point(move: Tuple[int, int], size: int) -> Point:
    """Convert an sgfmill ``(row, col)`` (row 0 at the bottom) to a board point."""
    row, col = move
    return Point(col, size - 1 - row)


def play_stone(board: Board, point: Point, color: Content) -> Tuple[int, int]:
    """Place ``color`` at ``point`` and resolve captures.

    Returns ``(captured, self_captured)``: opponent stones removed and stones
    of ``color`` removed because the move left its own group without
    liberties.
    """
    board.set(point.x, point.y, color)
    captured = board.capture(board.get_captured_groups(point.x, point.y))
    self_captured = 0
    own = board.get_group_at(point.x, point.y)
    if board.get_liberties(own) == 0:
        self_captured = board.capture(own)
    return captured, self_captured


def _apply_setup(board: Board, node: sgf.Tree_node, size: int) -> None:
    black, white, empty = node.get_setup_stones()
    for stones, content in ((black, Content.BLACK), (white, Content.WHITE), (empty, Content.EMPTY)):
        for move in stones:
            point = _to_point(move, size)
            board.set(point.x, point.y, content)


def _property(node: sgf.Tree_node, name: str, default: Any) -> Any:
    try:
        return node.get(name)
    except KeyError:
        return default


# ---------------------------------------------------------------------------
# Core SGF parsing logic
# ---------------------------------------------------------------------------

def parse_sgf(
    source: str, step: int | None = None, from_string: bool = False
) -> Tuple[Board, Dict[str, Any]]:
    """Parse ``source`` up to ``step`` moves and return the board and metadata.

    Parameters
    ----------
    source:
        Path to an SGF file, or the SGF text itself when ``from_string`` is
        true.
    step:
        Number of moves to replay.  ``None`` replays the whole main line.
    """
    if from_string:
        sgf_bytes = source.encode("utf-8")
    else:
        with open(source, "rb") as f:
            sgf_bytes = f.read()

    game = sgf.Sgf_game.from_bytes(sgf_bytes)
    size = game.get_size()
    board = Board(size, size)
    root = game.get_root()

    komi = game.get_komi() if root.has_property("KM") else 7.5
    ruleset = (_property(root, "RU", None) or "chinese").lower()
    handicap = game.get_handicap() or 0

    captures = {"black": 0, "white": 0}
    next_move = "white" if handicap > 1 else "black"
    steps: List[Tuple[str, str]] = []

    moves_played = 0
    for node in game.get_main_sequence():
        color, move = node.get_move()
        if color is not None and step is not None and moves_played >= step:
            break
        if node.has_setup_stones():
            _apply_setup(board, node, size)
        if color is None:
            continue
        moves_played += 1
        content = _COLORS[color]
        name = _NAMES[content]
        next_move = _NAMES[content.opponent]
        if move is None:
            steps.append((name, point_to_sgf(PASS_MOVE, PASS_MOVE)))
            continue
        point = _to_point(move, size)
        captured, self_captured = play_stone(board, point, content)
        captures[name] += captured
        captures[next_move] += self_captured
        steps.append((name, point_to_sgf(point, PASS_MOVE)))

    logger.info("Replayed %d move(s) on a %dx%d board", moves_played, size, size)

    metadata = {
        "board_size": size,
        "komi": komi,
        "ruleset": ruleset,
        "handicap": handicap,
        "captures": captures,
        "next_move": next_move,
        "step": steps,
    }
    return board, metadata


def score(board: Board, dead: Iterable[str] = (), komi: float = 0.0) -> Dict[str, Any]:
    """Enter scoring mode on ``board`` and return a JSON-ready score report.

    ``dead`` lists SGF coordinates of stones whose group should have its dead
    flag toggled after automatic inference.  ``komi`` is added to white.
    """
    board.is_scoring = True
    for text in dead:
        point = point_from_sgf(text, PASS_MOVE)
        if point == PASS_MOVE:
            continue
        board.set_dead_group(point)

    territory = board.territory
    black = float(territory[Content.BLACK])
    white = float(territory[Content.WHITE]) + komi
    if black > white:
        result = f"B+{black - white:g}"
    elif white > black:
        result = f"W+{white - black:g}"
    else:
        result = "0"
    logger.info("Score black=%s white=%s (%s)", black, white, result)

    return {
        "territory": {
            "black": territory[Content.BLACK],
            "white": territory[Content.WHITE],
        },
        "komi": komi,
        "result": result,
        "dead": [g for g in group_summary(board) if g["dead"]],
        "diagram": diagram(board),
    }


def convert(
    path: str, step: int | None = None, dead: Iterable[str] = (), from_string: bool = False
) -> Dict[str, Any]:
    """High level convenience wrapper returning the structured data."""
    board, metadata = parse_sgf(path, step, from_string=from_string)
    liberty = count_liberties(board)
    report = score(board, dead=dead, komi=metadata["komi"])
    return {"liberty": liberty, "metadata": metadata, "score": report}


def convert_from_string(
    sgf_content: str, step: int | None = None, dead: Iterable[str] = ()
) -> Dict[str, Any]:
    """Same as :func:`convert` but taking the SGF text directly."""
    return convert(sgf_content, step, dead, from_string=True)


__all__ = ["PASS_MOVE", "play_stone", "parse_sgf", "score", "convert", "convert_from_string"]
