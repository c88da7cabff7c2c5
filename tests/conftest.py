"""Root-level pytest configuration and shared fixtures.

This module provides:
- Automatic sys.path configuration for all tests
- Shared board factory fixtures available to all test modules
- Common SGF snippets
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# ---------------------------------------------------------------------------
# Path Configuration (automatically applied to all tests)
# ---------------------------------------------------------------------------

# Add project root to sys.path so imports work from any test directory
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.board import Board  # noqa: E402
from core.content import Content  # noqa: E402

Stone = Tuple[int, int, Content]
"""A stone placement: ``(x, y, color)``."""


def ring(low: int, high: int) -> List[Tuple[int, int]]:
    """Return the perimeter cells of the square ``[low, high]`` x ``[low, high]``."""
    return [
        (x, y)
        for y in range(low, high + 1)
        for x in range(low, high + 1)
        if x in (low, high) or y in (low, high)
    ]


# ---------------------------------------------------------------------------
# Board Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_board() -> Callable[[int, Iterable[Stone]], Board]:
    """Factory fixture to create boards with stones at specified positions.

    Usage:
        board = make_board(5, [(2, 2, Content.BLACK), (0, 0, Content.WHITE)])

    Args:
        size: Board size (e.g., 5, 9, 19)
        stones: Iterable of (x, y, color) tuples

    Returns:
        A square :class:`Board`
    """
    def _make_board(size: int, stones: Iterable[Stone] = ()) -> Board:
        board = Board(size, size)
        for x, y, color in stones:
            board.set(x, y, color)
        return board
    return _make_board


@pytest.fixture
def empty_board_5x5() -> Board:
    """Return a 5x5 empty board."""
    return Board(5, 5)


@pytest.fixture
def empty_board_9x9() -> Board:
    """Return a 9x9 empty board."""
    return Board(9, 9)


@pytest.fixture
def ring_cells() -> Callable[[int, int], List[Tuple[int, int]]]:
    """Expose :func:`ring` to test modules."""
    return ring


@pytest.fixture
def enclosed_stone_board(make_board) -> Board:
    """Return a 7x7 board with one black stone inside a closed white ring.

    The ring runs along the square from (1, 1) to (5, 5); the black stone
    sits at the center (3, 3) with eight empty points around it.
    """
    stones = [(x, y, Content.WHITE) for x, y in ring(1, 5)]
    stones.append((3, 3, Content.BLACK))
    return make_board(7, stones)


# ---------------------------------------------------------------------------
# SGF Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_sgf_content() -> str:
    """Return a simple 5x5 SGF game string."""
    return "(;GM[1]FF[4]SZ[5]KM[0.5];B[aa];W[bb];B[cc];W[dd])"


@pytest.fixture
def enclosed_stone_sgf() -> str:
    """Return the enclosed stone position as SGF setup properties."""
    letters = "abcdefg"
    white = "".join(f"[{letters[x]}{letters[y]}]" for x, y in ring(1, 5))
    return f"(;GM[1]FF[4]SZ[7]KM[0]AW{white}AB[dd])"


# ---------------------------------------------------------------------------
# Pytest Configuration
# ---------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
