"""Text forms used to build fixtures: squares, moves and board diagrams.

A diagram lists eight rows of eight cells, top row first (rank ``8``).
Cells are separated by whitespace; ``_`` or ``.`` marks an empty square,
lowercase letters are white pieces and uppercase letters black ones::

    R _ _ _ K _ _ R
    _ _ _ _ _ _ _ _
    ...
    r _ _ _ k _ _ r

Malformed text raises :class:`ValueError`; the board engine itself never
parses text.
"""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square, parse_square

_EMPTY_CELLS = frozenset({"_", "."})


def parse_move(text: str) -> Move:
    """Parse ``'e2 e4'`` (or ``'e2e4'``) into a :class:`Move`."""
    parts = text.split()
    if len(parts) == 1 and len(parts[0]) == 4:
        parts = [parts[0][:2], parts[0][2:]]
    if len(parts) != 2:
        raise ValueError(f"Invalid move text: {text!r}")
    return Move(parse_square(parts[0]), parse_square(parts[1]))


def board_from_diagram(text: str) -> Board:
    """Build a board with fresh rule state from a diagram."""
    rows = [line.split() for line in text.strip().splitlines() if line.strip()]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(rows)}")

    board = Board()
    for rank, cells in enumerate(rows):
        if len(cells) != BOARD_SIZE:
            raise ValueError(
                f"Diagram row {rank + 1} must have {BOARD_SIZE} cells: {' '.join(cells)!r}"
            )
        for file, cell in enumerate(cells):
            if cell in _EMPTY_CELLS:
                continue
            board[Square(file, rank)] = Piece.from_char(cell)
    return board


def board_to_diagram(board: Board) -> str:
    """Serialise piece placement to diagram text."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        cells = []
        for file in range(BOARD_SIZE):
            piece = board[Square(file, rank)]
            cells.append(str(piece) if piece is not None else "_")
        rows.append(" ".join(cells))
    return "\n".join(rows)
