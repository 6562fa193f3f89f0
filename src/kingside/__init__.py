"""Kingside — a chess rules engine with pluggable move rules."""

from kingside.core import Board, Color, Move, Piece, PieceType, Square

__version__ = "0.1.0"

__all__ = ["Board", "Color", "Move", "Piece", "PieceType", "Square", "__version__"]
