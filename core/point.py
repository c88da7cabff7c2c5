"""Board coordinates and the SGF coordinate codec."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Number of coordinates one SGF letter can address: 'a'-'z' then 'A'-'Z'.
SGF_MAX_COORD = 52


@dataclass(frozen=True)
class Point:
    """An immutable ``(x, y)`` pair of board coordinates."""

    x: int
    y: int

    def __hash__(self) -> int:
        return (self.x << 16) ^ self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def neighbours(self, size_x: int, size_y: int) -> Iterator["Point"]:
        """Yield the orthogonal neighbours of this point inside ``size_x`` x ``size_y``."""
        if self.x > 0:
            yield Point(self.x - 1, self.y)
        if self.x < size_x - 1:
            yield Point(self.x + 1, self.y)
        if self.y > 0:
            yield Point(self.x, self.y - 1)
        if self.y < size_y - 1:
            yield Point(self.x, self.y + 1)


def _encode(value: int) -> str:
    if 0 <= value < 26:
        return chr(ord("a") + value)
    if 26 <= value < SGF_MAX_COORD:
        return chr(ord("A") + value - 26)
    raise ValueError(f"Coordinate {value} cannot be expressed in SGF")


def _decode(char: str) -> int:
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 26
    raise ValueError(f"Invalid SGF coordinate character: {char!r}")


def point_to_sgf(point: Point, pass_move: Point | None = None) -> str:
    """Convert ``point`` to its two letter SGF form (``(2, 3)`` -> ``"cd"``).

    ``pass_move`` is the sentinel coordinate the caller uses for a pass; it
    is rendered as an empty string.
    """
    if pass_move is not None and point == pass_move:
        return ""
    return _encode(point.x) + _encode(point.y)


def point_from_sgf(text: str, pass_move: Point | None = None) -> Point:
    """Convert a two letter SGF coordinate back to a :class:`Point`.

    An empty string decodes to ``pass_move``.
    """
    if text == "":
        if pass_move is None:
            raise ValueError("Empty SGF coordinate but no pass sentinel given")
        return pass_move
    if len(text) != 2:
        raise ValueError(f"SGF coordinate must have two characters: {text!r}")
    return Point(_decode(text[0]), _decode(text[1]))


__all__ = ["Point", "point_to_sgf", "point_from_sgf", "SGF_MAX_COORD"]
