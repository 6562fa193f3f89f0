"""Per-piece move accumulator shared by piece templates and rule modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.types import SQUARE_COUNT, Offset, Square

if TYPE_CHECKING:
    from kingside.core.board import Board


class MovePlanner:
    """Collects candidate destinations for the piece on one square.

    A planner lives for a single generation pass of a single piece.  Each
    destination square has one slot, so a destination proposed twice (e.g.
    by the pawn template and by the first-move rule) is recorded once.
    """

    __slots__ = ("_board", "_origin", "_color", "_moves")

    def __init__(self, board: Board, origin: Square, color: Color) -> None:
        self._board = board
        self._origin = origin
        self._color = color
        self._moves: list[Move | None] = [None] * SQUARE_COUNT

    @property
    def origin(self) -> Square:
        return self._origin

    @property
    def color(self) -> Color:
        return self._color

    # -- Recording ----------------------------------------------------------

    def add(self, to_sq: Square) -> None:
        self._moves[to_sq.index] = Move(self._origin, to_sq)

    def try_add_no_take(self, offset: Offset) -> bool:
        """Add when the destination is empty."""
        to_sq = self._origin.offset(offset)
        if to_sq is None or self._board[to_sq] is not None:
            return False
        self.add(to_sq)
        return True

    def try_add_take(self, offset: Offset) -> bool:
        """Add when the destination is empty or holds an opponent piece."""
        to_sq = self._origin.offset(offset)
        if to_sq is None:
            return False
        target = self._board[to_sq]
        if target is not None and target.color == self._color:
            return False
        self.add(to_sq)
        return True

    def try_add_take_only(self, offset: Offset) -> bool:
        """Add only when the destination holds an opponent piece."""
        to_sq = self._origin.offset(offset)
        if to_sq is None:
            return False
        target = self._board[to_sq]
        if target is None or target.color == self._color:
            return False
        self.add(to_sq)
        return True

    def try_add_directional_take(self, direction: Offset) -> bool:
        """Walk along *direction* until blocked; capture the first enemy."""
        added = False
        to_sq = self._origin.offset(direction)
        while to_sq is not None:
            target = self._board[to_sq]
            if target is not None:
                if target.color != self._color:
                    self.add(to_sq)
                    added = True
                break
            self.add(to_sq)
            added = True
            to_sq = to_sq.offset(direction)
        return added

    # -- Board queries relative to the origin -------------------------------

    def is_under_attack(self, offset: Offset) -> bool:
        """Whether any unfiltered opponent move lands on ``origin + offset``."""
        target_sq = self._origin.offset(offset)
        if target_sq is None:
            return False
        opponent_moves = self._board.generate(self._color.opposite, False)
        return any(move.to_sq == target_sq for move in opponent_moves)

    def is_my_piece(self, offset: Offset, piece_type: PieceType) -> bool:
        sq = self._origin.offset(offset)
        if sq is None:
            return False
        piece = self._board[sq]
        return (
            piece is not None
            and piece.color == self._color
            and piece.piece_type == piece_type
        )

    def is_empty(self, offset: Offset) -> bool:
        """Off-board squares are never empty."""
        sq = self._origin.offset(offset)
        return sq is not None and self._board[sq] is None

    # -- Draining -----------------------------------------------------------

    def collect(self) -> list[Move]:
        """All recorded moves, ordered by destination index."""
        return [move for move in self._moves if move is not None]
