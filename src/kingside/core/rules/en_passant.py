"""En passant: capturing a pawn that has just double-stepped past."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.piece import PAWN_FORWARD
from kingside.core.rules.base import MoveRule
from kingside.core.types import Offset

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move
    from kingside.core.piece import Piece
    from kingside.core.planner import MovePlanner

# color -> (rank the capturing pawn stands on, opponent double-step from rank)
_CAPTURE_RANKS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (3, 1),
    Color.BLACK: (4, 6),
}


class EnPassant(MoveRule):
    """Remembers the last pawn double-step and offers the capture."""

    __slots__ = ("_last_double_step",)

    def __init__(self) -> None:
        self._last_double_step: Move | None = None

    @property
    def last_double_step(self) -> Move | None:
        return self._last_double_step

    def propose(
        self, piece: Piece, planner: MovePlanner, check_filtering: bool
    ) -> None:
        last = self._last_double_step
        if last is None or piece.piece_type != PieceType.PAWN:
            return

        capture_rank, from_rank = _CAPTURE_RANKS[piece.color]
        origin = planner.origin
        if origin.rank != capture_rank:
            return
        if last.from_sq.rank != from_rank or last.to_sq.rank != capture_rank:
            return

        d_file = last.to_sq.file - origin.file
        if d_file in (-1, 1):
            planner.try_add_no_take(Offset(d_file, PAWN_FORWARD[piece.color]))

    def apply(self, move: Move, board: Board) -> None:
        piece = board[move.from_sq]
        is_pawn = piece is not None and piece.piece_type == PieceType.PAWN

        last = self._last_double_step
        if (
            last is not None
            and is_pawn
            and move.from_sq.file != move.to_sq.file
            and board[move.to_sq] is None
        ):
            board[last.to_sq] = None

        if (
            is_pawn
            and move.from_sq.file == move.to_sq.file
            and abs(move.to_sq.rank - move.from_sq.rank) == 2
        ):
            self._last_double_step = move
        else:
            self._last_double_step = None

    def copy(self) -> EnPassant:
        clone = EnPassant()
        clone._last_double_step = self._last_double_step
        return clone
