"""Piece value object and per-kind movement templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingside.core.enums import Color, PieceType
from kingside.core.types import Offset

if TYPE_CHECKING:
    from kingside.core.planner import MovePlanner

# Diagram character ↔ (Color, PieceType); white is lowercase.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "p": (Color.WHITE, PieceType.PAWN),
    "r": (Color.WHITE, PieceType.ROOK),
    "n": (Color.WHITE, PieceType.KNIGHT),
    "b": (Color.WHITE, PieceType.BISHOP),
    "q": (Color.WHITE, PieceType.QUEEN),
    "k": (Color.WHITE, PieceType.KING),
    "P": (Color.BLACK, PieceType.PAWN),
    "R": (Color.BLACK, PieceType.ROOK),
    "N": (Color.BLACK, PieceType.KNIGHT),
    "B": (Color.BLACK, PieceType.BISHOP),
    "Q": (Color.BLACK, PieceType.QUEEN),
    "K": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_DIAGRAM_CHARS: dict[tuple[Color, PieceType], str] = {
    v: k for k, v in _CHAR_MAP.items()
}

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.KING: 6,
    PieceType.QUEEN: 8,
}

# -- Movement templates -----------------------------------------------------

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    Offset(-2, -1),
    Offset(-1, -2),
    Offset(-2, 1),
    Offset(-1, 2),
    Offset(2, -1),
    Offset(1, -2),
    Offset(2, 1),
    Offset(1, 2),
)

ROOK_DIRS: tuple[Offset, ...] = (
    Offset(0, -1),
    Offset(0, 1),
    Offset(-1, 0),
    Offset(1, 0),
)
BISHOP_DIRS: tuple[Offset, ...] = (
    Offset(-1, -1),
    Offset(-1, 1),
    Offset(1, -1),
    Offset(1, 1),
)
QUEEN_DIRS: tuple[Offset, ...] = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: tuple[Offset, ...] = QUEEN_DIRS

# White marches toward rank index 0, Black toward rank index 7.
PAWN_FORWARD: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    piece_type: PieceType
    color: Color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (lowercase = white, uppercase = black)."""
        return _DIAGRAM_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a diagram character, e.g. ``'n'`` → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def value(self) -> int:
        """Material value; the same for both colors."""
        return PIECE_VALUES[self.piece_type]

    # ── Movement ─────────────────────────────────────────────────────────

    def plan_moves(self, planner: MovePlanner) -> None:
        """Write this piece's template candidates into *planner*."""
        ptype = self.piece_type
        if ptype == PieceType.PAWN:
            forward = PAWN_FORWARD[self.color]
            planner.try_add_no_take(Offset(0, forward))
            planner.try_add_take_only(Offset(-1, forward))
            planner.try_add_take_only(Offset(1, forward))
        elif ptype == PieceType.ROOK:
            for direction in ROOK_DIRS:
                planner.try_add_directional_take(direction)
        elif ptype == PieceType.BISHOP:
            for direction in BISHOP_DIRS:
                planner.try_add_directional_take(direction)
        elif ptype == PieceType.QUEEN:
            for direction in QUEEN_DIRS:
                planner.try_add_directional_take(direction)
        elif ptype == PieceType.KNIGHT:
            for offset in KNIGHT_OFFSETS:
                planner.try_add_take(offset)
        else:
            for offset in KING_OFFSETS:
                planner.try_add_take(offset)
