"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from kingside.core import Board, Color, parse_move

    board = Board.initial()
    for move in board.legal_moves(Color.WHITE):
        print(move)
    board.apply_move(parse_move("e2 e4"))
"""

from kingside.core.board import Board
from kingside.core.enums import Color, GameResult, PieceType
from kingside.core.move import Move
from kingside.core.notation import board_from_diagram, board_to_diagram, parse_move
from kingside.core.outcome import Outcome
from kingside.core.piece import Piece
from kingside.core.planner import MovePlanner
from kingside.core.rules import (
    Castling,
    EnPassant,
    MoveRule,
    PawnFirstMove,
    Promotion,
)
from kingside.core.types import (
    Offset,
    Square,
    offset_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Offset",
    "Square",
    "offset_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MovePlanner",
    "Outcome",
    "Piece",
    # Rules
    "Castling",
    "EnPassant",
    "MoveRule",
    "PawnFirstMove",
    "Promotion",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
    "parse_move",
]
