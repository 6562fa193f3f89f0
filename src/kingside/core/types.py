"""Square and offset value types plus coordinate helpers.

Board layout (rank index 0 is Black's home rank)::

    index = file + rank * 8

    rank 0 -> "8"   a8=0,  b8=1,  ..., h8=7
    rank 1 -> "7"   a7=8,  ...
    ...
    rank 7 -> "1"   a1=56, b1=57, ..., h1=63

White starts on the high-index ranks and moves toward decreasing rank.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

_FILE_CHARS = "abcdefgh"
_RANK_CHARS = "87654321"


@dataclass(frozen=True, slots=True)
class Offset:
    """Signed (file, rank) displacement."""

    d_file: int
    d_rank: int


@dataclass(frozen=True, slots=True)
class Square:
    """A board cell addressed by (file, rank), both in ``0..7``."""

    file: int
    rank: int

    @property
    def index(self) -> int:
        """Flat index 0–63."""
        return self.file + self.rank * BOARD_SIZE

    @classmethod
    def from_index(cls, index: int) -> Square:
        return ALL_SQUARES[index]

    def offset(self, offset: Offset) -> Square | None:
        """Square reached by *offset*, or ``None`` when it leaves the board."""
        file = self.file + offset.d_file
        rank = self.rank + offset.d_rank
        if 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE:
            return ALL_SQUARES[file + rank * BOARD_SIZE]
        return None

    def __str__(self) -> str:
        return square_name(self)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(index % BOARD_SIZE, index // BOARD_SIZE) for index in range(SQUARE_COUNT)
)


def offset_square(square: Square, offset: Offset) -> Square | None:
    """Functional form of :meth:`Square.offset`."""
    return square.offset(offset)


def square_name(square: Square) -> str:
    """Human-readable name, e.g. ``Square(4, 7)`` → ``'e1'``."""
    return _FILE_CHARS[square.file] + _RANK_CHARS[square.rank]


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'e4'`` → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILE_CHARS or name[1] not in _RANK_CHARS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILE_CHARS.index(name[0]), _RANK_CHARS.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
