"""Context free groups of board cells.

A :class:`Group` is a plain value computed from one board snapshot: the set of
connected points sharing a content, and the set of adjacent points whose
content differs.  It holds no reference to the board it came from.  The only
mutable parts are the two scoring annotations, ``is_dead`` and
``territory``, which the owning board sets while in scoring mode.
"""
from __future__ import annotations

from typing import AbstractSet, Set

from core.content import Content
from core.point import Point


class Group:
    """A maximal 4-connected region of equal content plus its boundary."""

    def __init__(self, content: Content) -> None:
        """Create an empty group of ``content``."""
        self._content = Content(content)
        self._points: Set[Point] = set()
        self._neighbours: Set[Point] = set()
        self.is_dead = False
        self.territory = Content.EMPTY

    @property
    def content(self) -> Content:
        return self._content

    @property
    def points(self) -> AbstractSet[Point]:
        """The coordinates belonging to this group."""
        return frozenset(self._points)

    @property
    def neighbours(self) -> AbstractSet[Point]:
        """Adjacent coordinates whose content differs from the group's."""
        return frozenset(self._neighbours)

    def add_point(self, x: int, y: int) -> None:
        self._points.add(Point(x, y))

    def contains_point(self, x: int, y: int) -> bool:
        return Point(x, y) in self._points

    def add_neighbour(self, x: int, y: int) -> None:
        self._neighbours.add(Point(x, y))

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __str__(self) -> str:
        inner = ",".join(str(p) for p in sorted(self._points, key=lambda p: (p.x, p.y)))
        return f"{self._content.name.capitalize()}:{{{inner}}}"

    def __repr__(self) -> str:
        return f"<Group {self} dead={self.is_dead} territory={self.territory.name}>"


__all__ = ["Group"]
