"""Board - piece placement, rule state and move generation on an 8x8 grid."""

from __future__ import annotations

from typing import TypeVar

from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.planner import MovePlanner
from kingside.core.rules import Castling, EnPassant, MoveRule, default_rules
from kingside.core.types import ALL_SQUARES, BOARD_SIZE, SQUARE_COUNT, Square

_R = TypeVar("_R", bound=MoveRule)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Value-type chess board: 64 squares plus the state of every rule.

    Legality is decided by clone-and-simulate: each pseudo-legal candidate
    is forced on an independent :meth:`copy` and kept only if the mover's
    king is not attacked afterwards.  The attack test generates the
    opponent's moves with ``check_filtering=False`` so the recursion is
    exactly one level deep.
    """

    __slots__ = ("_squares", "_rules")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT
        self._rules: tuple[MoveRule, ...] = default_rules()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on ranks 8–7, White on 2–1)."""
        b = cls()
        last_rank = BOARD_SIZE - 1
        for file, ptype in enumerate(_BACK_RANK):
            b[Square(file, 0)] = Piece(ptype, Color.BLACK)
            b[Square(file, 1)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Square(file, last_rank - 1)] = Piece(PieceType.PAWN, Color.WHITE)
            b[Square(file, last_rank)] = Piece(ptype, Color.WHITE)
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def piece(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq in ALL_SQUARES
            if (p := self._squares[sq.index]) is not None and p.color == color
        ]

    def king_squares(self, color: Color) -> list[Square]:
        """Squares holding *color*'s king (normally exactly one)."""
        king = Piece(PieceType.KING, color)
        return [sq for sq in ALL_SQUARES if self._squares[sq.index] == king]

    @property
    def castling(self) -> Castling:
        return self._rule(Castling)

    @property
    def en_passant(self) -> EnPassant:
        return self._rule(EnPassant)

    def _rule(self, kind: type[_R]) -> _R:
        for rule in self._rules:
            if isinstance(rule, kind):
                return rule
        raise LookupError(f"No {kind.__name__} rule on board")

    # -- Move generation ----------------------------------------------------

    def generate(self, color: Color, check_filtering: bool) -> list[Move]:
        """Candidate moves for *color*.

        With *check_filtering* the result holds only moves that do not leave
        *color*'s king attacked; without it the result is pseudo-legal.
        """
        moves: list[Move] = []
        append = moves.append
        for sq in ALL_SQUARES:
            piece = self._squares[sq.index]
            if piece is None or piece.color != color:
                continue

            planner = MovePlanner(self, sq, color)
            piece.plan_moves(planner)
            for rule in self._rules:
                rule.propose(piece, planner, check_filtering)

            for move in planner.collect():
                if check_filtering:
                    simulated = self.copy()
                    simulated.force_move(move)
                    if simulated.is_in_check(color):
                        continue
                append(move)
        return moves

    def legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        return self.generate(color, True)

    def is_legal(self, move: Move) -> bool:
        piece = self._squares[move.from_sq.index]
        if piece is None:
            return False
        return move in self.legal_moves(piece.color)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        kings = self.king_squares(color)
        if not kings:
            return False
        return any(
            move.to_sq in kings for move in self.generate(color.opposite, False)
        )

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, move: Move) -> bool:
        """Play *move* if it is legal; returns whether it was played."""
        if not self.is_legal(move):
            return False
        self.force_move(move)
        return True

    def force_move(self, move: Move) -> None:
        """Play *move* without validation, running every rule hook."""
        for rule in self._rules:
            if not rule.runs_after_relocation:
                rule.apply(move, self)

        self._squares[move.to_sq.index] = self._squares[move.from_sq.index]
        self._squares[move.from_sq.index] = None

        for rule in self._rules:
            if rule.runs_after_relocation:
                rule.apply(move, self)

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        b._rules = tuple(rule.copy() for rule in self._rules)
        return b

    # -- Evaluation ---------------------------------------------------------

    def score(self, color: Color) -> int:
        """Own material minus opponent material."""
        total = 0
        for piece in self._squares:
            if piece is None:
                continue
            total += piece.value if piece.color == color else -piece.value
        return total

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE):
            row = []
            for file in range(BOARD_SIZE):
                p = self._squares[file + rank * BOARD_SIZE]
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
