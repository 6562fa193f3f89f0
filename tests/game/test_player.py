"""Tests for Player implementations."""

import random

from kingside.core.board import Board
from kingside.core.enums import Color
from kingside.engine import SearchLimits, ShallowSearchEngine
from kingside.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert "black" in p.name.lower()

    def test_choose_move_is_none(self, initial_board: Board) -> None:
        assert HumanPlayer(Color.WHITE).choose_move(initial_board) is None


class TestAIPlayer:
    def test_properties(self) -> None:
        p = AIPlayer(Color.BLACK, ShallowSearchEngine(), name="Kingside AI")
        assert p.color == Color.BLACK
        assert p.name == "Kingside AI"
        assert p.is_human is False

    def test_default_name_and_limits(self) -> None:
        p = AIPlayer(Color.WHITE, ShallowSearchEngine())
        assert "white" in p.name.lower()
        assert p.limits == SearchLimits()

    def test_choose_move_is_legal(self, initial_board: Board) -> None:
        p = AIPlayer(Color.BLACK, ShallowSearchEngine(random.Random(2)), SearchLimits(max_depth=0))
        move = p.choose_move(initial_board)
        assert move in initial_board.legal_moves(Color.BLACK)

    def test_choose_move_without_moves(self, stalemate_board: Board) -> None:
        p = AIPlayer(Color.BLACK, ShallowSearchEngine(random.Random(2)), SearchLimits(max_depth=0))
        assert p.choose_move(stalemate_board) is None
