"""Shared fixtures for component tests.

This module provides component-specific board patterns. Common fixtures like
the board factory and SGF content are inherited from tests/conftest.py.
"""
from __future__ import annotations

import random

import pytest

from core.board import Board
from core.content import Content

B, W = Content.BLACK, Content.WHITE


# ---------------------------------------------------------------------------
# Board Pattern Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def board_with_single_black_stone(make_board) -> Board:
    """Return a 5x5 board with a single black stone at center."""
    return make_board(5, [(2, 2, B)])


@pytest.fixture
def board_with_cross_pattern(make_board) -> Board:
    """Return a 5x5 board with a cross pattern of black stones at center."""
    return make_board(5, [(2, 1, B), (1, 2, B), (2, 2, B), (3, 2, B), (2, 3, B)])


@pytest.fixture
def board_with_capture_scenario(make_board) -> Board:
    """Return a 5x5 board where the black stone at (2, 2) is fully surrounded."""
    return make_board(5, [(2, 2, B), (1, 2, W), (3, 2, W), (2, 1, W), (2, 3, W)])


@pytest.fixture
def board_with_black_eye(make_board) -> Board:
    """Return a 5x5 board with a single empty point enclosed by black at (2, 2)."""
    return make_board(5, [(2, 1, B), (1, 2, B), (3, 2, B), (2, 3, B)])


@pytest.fixture
def split_board(make_board) -> Board:
    """Return a 5x5 board split by a black wall at x=2 and a white wall at x=3."""
    stones = [(2, y, B) for y in range(5)] + [(3, y, W) for y in range(5)]
    return make_board(5, stones)


@pytest.fixture
def random_board() -> Board:
    """Return a reproducible 9x9 board with a random mix of contents."""
    rng = random.Random(20240607)
    return Board.from_content([rng.choice((0, 0, 1, 2)) for _ in range(81)])
