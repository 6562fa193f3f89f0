"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from kingside.core.board import Board
from kingside.core.notation import board_from_diagram

CASTLING_DIAGRAM = """
    _ _ _ _ K _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    r _ _ _ k _ _ r
"""

STALEMATE_DIAGRAM = """
    _ _ _ _ _ _ _ K
    _ _ _ _ _ _ _ _
    _ _ _ _ _ k q _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
"""


class NoSlackRandom(random.Random):
    """Random source that never relaxes the search acceptance bar."""

    def random(self) -> float:
        return 0.99


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def castling_board() -> Board:
    """Both white rooks and the white king at home, black king on e8."""
    return board_from_diagram(CASTLING_DIAGRAM)


@pytest.fixture
def stalemate_board() -> Board:
    """Black to move has no legal move and is not in check."""
    return board_from_diagram(STALEMATE_DIAGRAM)


@pytest.fixture
def no_slack_rng() -> random.Random:
    return NoSlackRandom()
