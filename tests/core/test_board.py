"""Tests for Board."""

from kingside.core.board import Board
from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.notation import board_from_diagram, parse_move
from kingside.core.piece import Piece
from kingside.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D7, E2, E4, Square,
)

PINNED_BISHOP = """
    _ _ _ _ R _ _ K
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ _ _ _ _
    _ _ _ _ b _ _ _
    _ _ _ _ k _ _ _
"""


class TestBoardInitial:
    def test_white_king_position(self, initial_board: Board) -> None:
        assert initial_board[E1] == Piece(PieceType.KING, Color.WHITE)

    def test_black_king_position(self, initial_board: Board) -> None:
        assert initial_board[E8] == Piece(PieceType.KING, Color.BLACK)

    def test_white_back_rank(self, initial_board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert initial_board[sq] == Piece(pt, Color.WHITE), f"Mismatch at {sq}"

    def test_black_back_rank(self, initial_board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert initial_board[sq] == Piece(pt, Color.BLACK), f"Mismatch at {sq}"

    def test_sixteen_pieces_per_color(self, initial_board: Board) -> None:
        assert len(initial_board.all_pieces(Color.WHITE)) == 16
        assert len(initial_board.all_pieces(Color.BLACK)) == 16

    def test_pawn_ranks(self, initial_board: Board) -> None:
        for file in range(8):
            assert initial_board[Square(file, 6)] == Piece(PieceType.PAWN, Color.WHITE)
            assert initial_board[Square(file, 1)] == Piece(PieceType.PAWN, Color.BLACK)

    def test_empty_middle(self, initial_board: Board) -> None:
        for index in range(16, 48):
            assert initial_board.is_empty(Square.from_index(index))

    def test_material_is_balanced(self, initial_board: Board) -> None:
        assert initial_board.score(Color.WHITE) == 0
        assert initial_board.score(Color.BLACK) == 0

    def test_twenty_opening_moves(self, initial_board: Board) -> None:
        assert len(initial_board.legal_moves(Color.WHITE)) == 20
        assert len(initial_board.legal_moves(Color.BLACK)) == 20

    def test_four_hundred_replies(self, initial_board: Board) -> None:
        total = 0
        for move in initial_board.legal_moves(Color.WHITE):
            after = initial_board.copy()
            after.force_move(move)
            total += len(after.legal_moves(Color.BLACK))
        assert total == 400


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(PieceType.PAWN, Color.WHITE)
        board.set_piece(E4, piece)
        assert board.piece(E4) == piece
        assert board.is_empty(E2)
        board.set_piece(E4, None)
        assert board.piece(E4) is None

    def test_copy_independence(self, initial_board: Board) -> None:
        copy = initial_board.copy()
        assert initial_board == copy
        copy[E1] = None
        assert initial_board != copy
        assert initial_board[E1] == Piece(PieceType.KING, Color.WHITE)

    def test_copy_does_not_share_rule_state(self, castling_board: Board) -> None:
        copy = castling_board.copy()
        assert copy.apply_move(parse_move("e1 e2"))
        assert castling_board.is_legal(parse_move("e1 g1"))
        assert not castling_board.castling.has_moved(E1)

    def test_equality_ignores_rule_state(self, castling_board: Board) -> None:
        moved = castling_board.copy()
        assert moved.apply_move(parse_move("e1 e2"))
        assert moved.apply_move(parse_move("e2 e1"))
        assert moved == castling_board
        assert not moved.is_legal(parse_move("e1 g1"))

    def test_score_counts_material_difference(self, initial_board: Board) -> None:
        initial_board[D8] = None
        assert initial_board.score(Color.WHITE) == 8
        assert initial_board.score(Color.BLACK) == -8

    def test_repr_not_empty(self, initial_board: Board) -> None:
        text = repr(initial_board)
        assert "k" in text and "K" in text
        assert "a b c d e f g h" in text


class TestMoveApplication:
    def test_apply_legal_move(self, initial_board: Board) -> None:
        assert initial_board.apply_move(parse_move("e2 e4"))
        assert initial_board[E4] == Piece(PieceType.PAWN, Color.WHITE)
        assert initial_board.is_empty(E2)

    def test_apply_illegal_move_leaves_board_untouched(self, initial_board: Board) -> None:
        before = initial_board.copy()
        assert not initial_board.apply_move(parse_move("e2 e5"))
        assert not initial_board.apply_move(parse_move("e4 e5"))  # empty origin
        assert initial_board == before

    def test_is_legal(self, initial_board: Board) -> None:
        assert initial_board.is_legal(parse_move("g1 f3"))
        assert not initial_board.is_legal(parse_move("g1 e2"))
        assert not initial_board.is_legal(Move(E4, E2))

    def test_force_move_skips_validation(self, initial_board: Board) -> None:
        initial_board.force_move(parse_move("d1 d7"))
        assert initial_board[D7] == Piece(PieceType.QUEEN, Color.WHITE)
        assert initial_board.is_empty(D1)


class TestCheckDetection:
    def test_start_not_in_check(self, initial_board: Board) -> None:
        assert not initial_board.is_in_check(Color.WHITE)
        assert not initial_board.is_in_check(Color.BLACK)

    def test_fools_mate(self, initial_board: Board) -> None:
        for text in ("f2 f3", "e7 e5", "g2 g4", "d8 h4"):
            assert initial_board.apply_move(parse_move(text)), text
        assert initial_board.is_in_check(Color.WHITE)
        assert initial_board.legal_moves(Color.WHITE) == []

    def test_no_king_is_never_in_check(self) -> None:
        assert not Board().is_in_check(Color.WHITE)

    def test_pinned_piece_cannot_move(self) -> None:
        board = board_from_diagram(PINNED_BISHOP)
        moves = board.legal_moves(Color.WHITE)
        assert moves
        assert all(move.from_sq != E2 for move in moves)
        # The same bishop moves freely when unfiltered.
        assert any(move.from_sq == E2 for move in board.generate(Color.WHITE, False))

    def test_legal_moves_never_leave_king_attacked(self) -> None:
        board = board_from_diagram(PINNED_BISHOP)
        for color in Color:
            for move in board.legal_moves(color):
                after = board.copy()
                after.force_move(move)
                assert not after.is_in_check(color), str(move)
