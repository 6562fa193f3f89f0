"""Pluggable move rules layered on top of the piece templates.

The board runs them in this fixed order: castling, en passant, pawn first
move, promotion.
"""

from kingside.core.rules.base import MoveRule
from kingside.core.rules.castling import Castling
from kingside.core.rules.en_passant import EnPassant
from kingside.core.rules.pawn_first_move import PawnFirstMove
from kingside.core.rules.promotion import Promotion


def default_rules() -> tuple[MoveRule, ...]:
    """Fresh rule modules for a new game, in invocation order."""
    return (Castling(), EnPassant(), PawnFirstMove(), Promotion())


__all__ = [
    "Castling",
    "EnPassant",
    "MoveRule",
    "PawnFirstMove",
    "Promotion",
    "default_rules",
]
