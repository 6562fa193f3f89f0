"""High-level game outcome: checkmate, stalemate, result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, GameResult

if TYPE_CHECKING:
    from kingside.core.board import Board


class Outcome:
    """Static outcome checker that operates on a :class:`Board`."""

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """*color* is in check and has no legal move."""
        if not board.is_in_check(color):
            return False
        return not board.legal_moves(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        """*color* is not in check but has no legal move."""
        if board.is_in_check(color):
            return False
        return not board.legal_moves(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        if board.legal_moves(side_to_move):
            return GameResult.IN_PROGRESS
        if board.is_in_check(side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
