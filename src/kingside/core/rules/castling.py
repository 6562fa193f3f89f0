"""Castling: king-side and queen-side two-square king moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.rules.base import MoveRule
from kingside.core.types import (
    C1,
    C8,
    E1,
    E8,
    G1,
    G8,
    SQUARE_COUNT,
    Offset,
    Square,
)

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move
    from kingside.core.piece import Piece
    from kingside.core.planner import MovePlanner

_KING_SIDE_ROOK = Offset(3, 0)
_QUEEN_SIDE_ROOK = Offset(-4, 0)

# (color, from, to) -> (rook offset from king, rook landing offset from king)
_CASTLE_PATTERNS: dict[tuple[Color, Square, Square], tuple[Offset, Offset]] = {
    (Color.WHITE, E1, G1): (_KING_SIDE_ROOK, Offset(1, 0)),
    (Color.WHITE, E1, C1): (_QUEEN_SIDE_ROOK, Offset(-1, 0)),
    (Color.BLACK, E8, G8): (_KING_SIDE_ROOK, Offset(1, 0)),
    (Color.BLACK, E8, C8): (_QUEEN_SIDE_ROOK, Offset(-1, 0)),
}


class Castling(MoveRule):
    """Tracks which squares have seen movement and proposes castling."""

    __slots__ = ("_moved",)

    def __init__(self) -> None:
        self._moved: list[bool] = [False] * SQUARE_COUNT

    def has_moved(self, sq: Square) -> bool:
        """Whether a piece has left or arrived on *sq* this game."""
        return self._moved[sq.index]

    def propose(
        self, piece: Piece, planner: MovePlanner, check_filtering: bool
    ) -> None:
        # Castling never captures, so attack detection does not need it.
        if piece.piece_type != PieceType.KING or not check_filtering:
            return
        self._propose_side(planner, 1)
        self._propose_side(planner, -1)

    def _propose_side(self, planner: MovePlanner, step: int) -> None:
        # King side has two empty squares before the rook, queen side three.
        gap = 2 if step > 0 else 3
        if not all(planner.is_empty(Offset(step * i, 0)) for i in range(1, gap + 1)):
            return
        rook_offset = Offset(step * (gap + 1), 0)
        if not planner.is_my_piece(rook_offset, PieceType.ROOK):
            return

        rook_sq = planner.origin.offset(rook_offset)
        assert rook_sq is not None
        if self._moved[planner.origin.index] or self._moved[rook_sq.index]:
            return

        # Attack queries generate opponent moves unfiltered, and an unfiltered
        # pass never reaches this point, so nesting stops at one level.
        if planner.is_under_attack(Offset(0, 0)):
            return
        if planner.is_under_attack(Offset(step, 0)):
            return
        planner.try_add_no_take(Offset(step * 2, 0))

    def apply(self, move: Move, board: Board) -> None:
        piece = board[move.from_sq]
        if piece is not None and piece.piece_type == PieceType.KING:
            pattern = _CASTLE_PATTERNS.get((piece.color, move.from_sq, move.to_sq))
            if pattern is not None:
                rook_offset, landing_offset = pattern
                rook_sq = move.from_sq.offset(rook_offset)
                landing_sq = move.from_sq.offset(landing_offset)
                if rook_sq is not None and landing_sq is not None:
                    board[landing_sq] = board[rook_sq]
                    board[rook_sq] = None

        self._moved[move.from_sq.index] = True
        self._moved[move.to_sq.index] = True

    def copy(self) -> Castling:
        clone = Castling()
        clone._moved = self._moved.copy()
        return clone
