"""Cell values of a Go board."""
from __future__ import annotations

from enum import IntEnum


class Content(IntEnum):
    """The tri-state value of a board cell.

    The integer codes double as the alphabet accepted by
    :meth:`core.board.Board.from_content` (0 empty, 1 black, 2 white).
    """

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Content":
        """Return the other stone color (``EMPTY`` has no opponent)."""
        if self is Content.BLACK:
            return Content.WHITE
        if self is Content.WHITE:
            return Content.BLACK
        return Content.EMPTY


__all__ = ["Content"]
