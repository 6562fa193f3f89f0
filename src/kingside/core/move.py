"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    No capture / castling / promotion flag is stored: those are inferred
    from the board contents when the move is applied.
    """

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)} {square_name(self.to_sq)}"
