"""Board position, group cache and scoring.

The :class:`Board` stores the raw grid and memoizes its decomposition into
:class:`~core.group.Group` objects.  The cache is discarded wholesale on every
write and rebuilt lazily by flood fill on the next query; it is never patched
incrementally.

Scoring mode is a separate state of the board.  Entering it fully populates
the group cache, assigns territory to empty regions and then infers dead
groups.  While scoring, stones of a dead group read as empty through
:meth:`Board.get` without touching the stored grid, so connectivity,
liberties and territory all see them as removed.
"""
from __future__ import annotations

import logging
import math
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Set,
    Tuple,
    Union,
)

from core.content import Content
from core.group import Group
from core.point import Point
from core.show_board import diagram

logger = logging.getLogger(__name__)

_HASH_MASK = 0xFFFFFFFF


class OutOfRangeError(IndexError):
    """Raised when a coordinate lies outside the board."""


class InvalidInputError(ValueError):
    """Raised when a board cannot be built from the given arguments."""


class CellState(NamedTuple):
    """Per-cell scoring snapshot used for rendering."""

    x: int
    y: int
    empty: bool
    black: bool
    scoring: bool
    dead: bool
    territory_empty: bool
    territory_black: bool


Target = Union[Group, Point, int]


class Board:
    """A rectangular Go board without any game context."""

    def __init__(self, size_x: int, size_y: Optional[int] = None) -> None:
        """Create an empty board of ``size_x`` x ``size_y`` (square if ``size_y`` is omitted)."""
        if size_y is None:
            size_y = size_x
        if size_x <= 0 or size_y <= 0:
            raise InvalidInputError(f"Board dimensions must be positive: {size_x}x{size_y}")
        self.size_x = size_x
        self.size_y = size_y
        # indexed as _content[x][y]
        self._content: List[List[Content]] = [
            [Content.EMPTY] * size_y for _ in range(size_x)
        ]
        self._groups: List[Group] = []
        self._index: Dict[Point, Group] = {}
        self._is_scoring = False
        self._hash: Optional[int] = None
        self.scoring_observers: List[Callable[[bool], None]] = []

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_board(cls, other: "Board") -> "Board":
        """Copy size and content of ``other``; caches and scoring state are not copied."""
        board = cls(other.size_x, other.size_y)
        board._content = [column[:] for column in other._content]
        return board

    @classmethod
    def from_content(cls, codes: Sequence[int]) -> "Board":
        """Build a square board from a flat row-major list of content codes.

        Each code is 0 (empty), 1 (black) or 2 (white) and the number of codes
        must be the square of a natural number.
        """
        if len(codes) == 0:
            raise InvalidInputError("Must provide some content codes")
        side = math.isqrt(len(codes))
        if side * side != len(codes):
            raise InvalidInputError(
                f"Content length {len(codes)} is not a square of a natural number"
            )
        try:
            cells = [Content(code) for code in codes]
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
        board = cls(side, side)
        for i, cell in enumerate(cells):
            board._content[i % side][i // side] = cell
        return board

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _check(self, x: int, y: int) -> None:
        if not 0 <= x < self.size_x:
            raise OutOfRangeError(f"Invalid x coordinate: {x}")
        if not 0 <= y < self.size_y:
            raise OutOfRangeError(f"Invalid y coordinate: {y}")

    def _effective(self, x: int, y: int) -> Content:
        content = self._content[x][y]
        if self._is_scoring and content is not Content.EMPTY:
            group = self._index.get(Point(x, y))
            if group is not None and group.is_dead:
                return Content.EMPTY
        return content

    def get(self, x: int, y: int) -> Content:
        """Return the content at ``(x, y)``, reading dead stones as empty while scoring."""
        self._check(x, y)
        return self._effective(x, y)

    def set(self, x: int, y: int, content: Content) -> None:
        """Write ``content`` at ``(x, y)``.

        This is a setup change, not a game move: no captures happen.  The
        content hash and the whole group cache are discarded.
        """
        self._check(x, y)
        self._content[x][y] = Content(content)
        self._hash = None
        self._clear_group_cache()

    def __getitem__(self, key: Union[Point, Tuple[int, int]]) -> Content:
        x, y = (key.x, key.y) if isinstance(key, Point) else key
        return self.get(x, y)

    def __setitem__(self, key: Union[Point, Tuple[int, int]], content: Content) -> None:
        x, y = (key.x, key.y) if isinstance(key, Point) else key
        self.set(x, y, content)

    # ------------------------------------------------------------------
    # Groups and liberties
    # ------------------------------------------------------------------
    def _clear_group_cache(self) -> None:
        self._groups = []
        self._index = {}

    def get_group_at(self, x: Union[Point, int], y: Optional[int] = None) -> Group:
        """Return the group containing ``(x, y)``, flood filling it on a cache miss."""
        if isinstance(x, Point):
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("y is required when x is an int")
        self._check(x, y)
        origin = Point(x, y)
        cached = self._index.get(origin)
        if cached is not None:
            return cached

        group = Group(self._effective(x, y))
        stack = [origin]
        while stack:
            point = stack.pop()
            if group.contains_point(point.x, point.y):
                continue
            if self._effective(point.x, point.y) != group.content:
                group.add_neighbour(point.x, point.y)
                continue
            group.add_point(point.x, point.y)
            self._index[point] = group
            for neighbour in point.neighbours(self.size_x, self.size_y):
                if not group.contains_point(neighbour.x, neighbour.y):
                    stack.append(neighbour)
        self._groups.append(group)
        return group

    def groups(self) -> List[Group]:
        """Return every group on the board in discovery order."""
        self._populate()
        return list(self._groups)

    def _populate(self) -> None:
        for x in range(self.size_x):
            for y in range(self.size_y):
                if Point(x, y) not in self._index:
                    self.get_group_at(x, y)

    def get_liberties(self, target: Target, y: Optional[int] = None) -> int:
        """Return the liberty count of a group, or of the group at a point or ``(x, y)``."""
        if isinstance(target, Group):
            group = target
        else:
            group = self.get_group_at(target, y)
        return sum(
            1 for n in group.neighbours if self._effective(n.x, n.y) is Content.EMPTY
        )

    def get_captured_groups(self, x: int, y: int) -> List[Group]:
        """Return the neighbouring groups left without liberties next to ``(x, y)``.

        The board is not modified; see :meth:`capture`.
        """
        self._check(x, y)
        captures: List[Group] = []
        for n in Point(x, y).neighbours(self.size_x, self.size_y):
            if self._effective(n.x, n.y) is Content.EMPTY:
                continue
            group = self.get_group_at(n.x, n.y)
            if group.contains_point(x, y):
                continue
            if self.get_liberties(group) == 0:
                if not any(g.points & group.points for g in captures):
                    captures.append(group)
        return captures

    def capture(self, groups: Union[Group, Iterable[Group]]) -> int:
        """Empty every point of ``groups`` and return the number of stones removed."""
        if isinstance(groups, Group):
            groups = [groups]
        removed = 0
        for group in groups:
            for point in group.points:
                self.set(point.x, point.y, Content.EMPTY)
            removed += len(group)
        return removed

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    @property
    def is_scoring(self) -> bool:
        """Whether the board is in scoring mode.

        Switching it on discards the group cache, so all dead groups are
        reinstated before territory and dead groups are derived afresh.
        """
        return self._is_scoring

    @is_scoring.setter
    def is_scoring(self, value: bool) -> None:
        value = bool(value)
        if self._is_scoring == value:
            return
        self._is_scoring = value
        self._clear_group_cache()
        logger.debug("Scoring mode %s", "on" if value else "off")
        if value:
            self._populate()
            self.calc_dead()
        for observer in self.scoring_observers:
            observer(value)

    def reset_scoring(self) -> None:
        """Unmark every dead group and rerun dead group inference."""
        if not self._is_scoring:
            return
        self._clear_group_cache()
        self._populate()
        self.calc_dead()

    def set_dead_group(self, x: Union[Point, int], y: Optional[int] = None) -> None:
        """Toggle the dead flag of the group at ``(x, y)`` while scoring.

        Territory is not recomputed; read :attr:`territory` again afterwards.
        """
        if not self._is_scoring:
            return
        group = self.get_group_at(x, y)
        if group.content is Content.EMPTY:
            return
        group.is_dead = not group.is_dead

    @property
    def territory(self) -> Dict[Content, int]:
        """Score per color: owned empty points plus twice the size of dead groups.

        Captures made during the game are not included.  The value is
        recomputed on every access.
        """
        self._populate()
        black = white = 0
        for group in self._groups:
            if group.content is not Content.EMPTY:
                continue
            around = {self._effective(n.x, n.y) for n in group.neighbours}
            if Content.BLACK not in around:
                white += len(group)
                group.territory = Content.WHITE
            elif Content.WHITE not in around:
                black += len(group)
                group.territory = Content.BLACK
            else:
                group.territory = Content.EMPTY
        for group in self._groups:
            if not group.is_dead:
                continue
            if group.content is Content.BLACK:
                white += len(group) * 2
            elif group.content is Content.WHITE:
                black += len(group) * 2
        return {Content.BLACK: black, Content.WHITE: white}

    def calc_dead(self) -> None:
        """Mark stones enclosed by the opponent as dead.

        Starting from each stone group, a block is grown by absorbing every
        neighbouring group that is not of the opponent's color.  When the
        block is bordered only by opponent stones, its stones of the seed's
        color are marked dead.  Groups touching assigned territory are never
        used as seeds, larger groups are tried first, and every group taking
        part in a block is not tried again.
        """
        if not self._is_scoring:
            return

        _ = self.territory

        owned = [g for g in self._groups if g.territory is not Content.EMPTY]
        settled = {self.get_group_at(n) for g in owned for n in g.neighbours}
        seeds = [
            g for g in self._groups
            if g.content is not Content.EMPTY and g not in settled
        ]
        seeds.sort(key=len, reverse=True)

        processed: Set[Group] = set()
        dead = 0
        for seed in seeds:
            if seed in processed:
                continue
            opponent = seed.content.opponent
            frontier = {seed}
            block = {seed}
            while True:
                before = len(block)
                frontier = {
                    neighbour
                    for neighbour in (
                        self.get_group_at(n) for g in frontier for n in g.neighbours
                    )
                    if neighbour.content is not opponent
                }
                block |= frontier
                if len(block) == before:
                    break

            inside = {p for g in block for p in g.points}
            boundary = {
                self.get_group_at(n)
                for g in block
                for n in g.neighbours
                if n not in inside
            }
            if all(g.content is opponent for g in boundary):
                for g in block:
                    if g.content is seed.content:
                        g.is_dead = True
                        dead += 1
            processed |= block
            processed |= boundary
        logger.debug("Dead group inference marked %d group(s) from %d seed(s)", dead, len(seeds))

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------
    def all_stones(self) -> Iterator[Tuple[Point, Content]]:
        """Yield ``(point, content)`` for every occupied cell."""
        for x in range(self.size_x):
            for y in range(self.size_y):
                if self._content[x][y] is not Content.EMPTY:
                    yield Point(x, y), self._content[x][y]

    def empty_spaces(self) -> Iterator[Point]:
        """Yield every empty cell."""
        for x in range(self.size_x):
            for y in range(self.size_y):
                if self._content[x][y] is Content.EMPTY:
                    yield Point(x, y)

    def all_cells(self) -> Iterator[CellState]:
        """Yield a :class:`CellState` for every cell."""
        if self._is_scoring:
            self._populate()
        for x in range(self.size_x):
            for y in range(self.size_y):
                if self._is_scoring:
                    group = self._index[Point(x, y)]
                    empty = group.content is Content.EMPTY
                    yield CellState(
                        x, y,
                        empty=empty,
                        black=group.content is Content.BLACK,
                        scoring=True,
                        dead=group.is_dead,
                        territory_empty=empty and group.territory is Content.EMPTY,
                        territory_black=group.territory is Content.BLACK,
                    )
                else:
                    content = self._content[x][y]
                    yield CellState(
                        x, y,
                        empty=content is Content.EMPTY,
                        black=content is Content.BLACK,
                        scoring=False,
                        dead=False,
                        territory_empty=False,
                        territory_black=False,
                    )

    # ------------------------------------------------------------------
    # Hashing and comparison
    # ------------------------------------------------------------------
    def content_hash(self) -> int:
        """Return a rolling fingerprint of the raw content (not collision proof)."""
        if self._hash is None:
            acc = 0
            for column in self._content:
                for cell in column:
                    acc = ((acc << 2) & _HASH_MASK) ^ int(cell) ^ (acc >> 30)
            self._hash = acc
        return self._hash

    def __hash__(self) -> int:
        return self.content_hash()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size_x == other.size_x
            and self.size_y == other.size_y
            and self._content == other._content
        )

    def __str__(self) -> str:
        return diagram(self)

    def __repr__(self) -> str:
        return f"<Board {self.size_x}x{self.size_y} scoring={self._is_scoring}>"


__all__ = ["Board", "CellState", "OutOfRangeError", "InvalidInputError"]
