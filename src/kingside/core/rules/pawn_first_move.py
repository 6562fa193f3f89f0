"""Pawn double step from the starting rank."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.piece import PAWN_FORWARD
from kingside.core.rules.base import MoveRule
from kingside.core.types import Offset

if TYPE_CHECKING:
    from kingside.core.piece import Piece
    from kingside.core.planner import MovePlanner

PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class PawnFirstMove(MoveRule):
    """Stateless rule offering the two-square advance."""

    __slots__ = ()

    def propose(
        self, piece: Piece, planner: MovePlanner, check_filtering: bool
    ) -> None:
        if piece.piece_type != PieceType.PAWN:
            return
        if planner.origin.rank != PAWN_START_RANK[piece.color]:
            return
        forward = PAWN_FORWARD[piece.color]
        # The double step may not jump over an occupied square.
        if planner.try_add_no_take(Offset(0, forward)):
            planner.try_add_no_take(Offset(0, forward * 2))

    def copy(self) -> PawnFirstMove:
        return self
