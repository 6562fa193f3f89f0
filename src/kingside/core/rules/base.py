"""Common contract for pluggable move rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingside.core.board import Board
    from kingside.core.move import Move
    from kingside.core.piece import Piece
    from kingside.core.planner import MovePlanner


class MoveRule(ABC):
    """A rule that proposes extra candidates and reacts to applied moves.

    The board calls :meth:`propose` for every piece during generation and
    :meth:`apply` for every forced move.  Rules with
    ``runs_after_relocation`` set see the board after the moving piece has
    been placed on its destination; the others see it before.
    """

    __slots__ = ()

    runs_after_relocation: bool = False

    def propose(
        self, piece: Piece, planner: MovePlanner, check_filtering: bool
    ) -> None:
        """Write extra candidate moves for *piece* into *planner*."""

    def apply(self, move: Move, board: Board) -> None:
        """Update rule state and board contents for *move*."""

    @abstractmethod
    def copy(self) -> MoveRule:
        """Independent copy for a cloned board."""
