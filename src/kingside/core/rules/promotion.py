"""Promotion: pawns on the far rank become queens."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.rules.base import MoveRule
from kingside.core.types import ALL_SQUARES

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move

PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class Promotion(MoveRule):
    """Whole-board scan after every move; always promotes to a queen."""

    __slots__ = ()

    runs_after_relocation = True

    def apply(self, move: Move, board: Board) -> None:
        for sq in ALL_SQUARES:
            piece = board[sq]
            if piece is None or piece.piece_type != PieceType.PAWN:
                continue
            if sq.rank == PROMOTION_RANK[piece.color]:
                board[sq] = Piece(PieceType.QUEEN, piece.color)

    def copy(self) -> Promotion:
        return self
