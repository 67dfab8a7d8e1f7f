"""Tests for Board and Piece."""

import pytest

from chessboard.core.board import Board
from chessboard.core.enums import Color, PieceType
from chessboard.core.piece import Piece
from chessboard.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    INVALID_SQUARE,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == 1 for sq in white)
        assert len(black) == 8 and all(sq.rank == 6 for sq in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Square(file, rank)] is None

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_pieces_have_distinct_identities(self) -> None:
        board = Board.initial()
        uids = {piece.uid for _, piece in board.occupied()}
        assert len(uids) == 32


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] is piece
        assert board.is_empty(E2)

    def test_invalid_square_reads_empty_and_ignores_writes(self) -> None:
        board = Board()
        board[INVALID_SQUARE] = Piece(Color.WHITE, PieceType.QUEEN)
        board[Square(8, 8)] = Piece(Color.WHITE, PieceType.QUEEN)
        assert board[INVALID_SQUARE] is None
        assert list(board.occupied()) == []

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_is_none(self) -> None:
        assert Board().king_square(Color.WHITE) is None

    def test_find_by_identity(self) -> None:
        board = Board()
        first = Piece(Color.WHITE, PieceType.KNIGHT)
        second = Piece(Color.WHITE, PieceType.KNIGHT)
        board[B1] = first
        board[G1] = second
        assert first == second
        assert board.find(second) == G1
        assert board.find(Piece(Color.WHITE, PieceType.KNIGHT)) is None

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "Q"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_is_same_kind(self) -> None:
        rook = Piece(Color.BLACK, PieceType.ROOK)
        assert rook.is_same_kind(Color.BLACK, PieceType.ROOK)
        assert not rook.is_same_kind(Color.WHITE, PieceType.ROOK)
