"""Tests for square coordinates and algebraic conversion."""

import pytest

from chessboard.core.types import (
    A1,
    E4,
    H8,
    INVALID_SQUARE,
    Square,
    algebraic_to_square,
    all_squares,
    as_square,
    is_valid_square,
    make_square,
    square_to_algebraic,
)


class TestAlgebraic:
    def test_round_trip_all_squares(self) -> None:
        squares = list(all_squares())
        assert len(squares) == 64
        for sq in squares:
            assert algebraic_to_square(square_to_algebraic(sq)) == sq

    def test_known_names(self) -> None:
        assert algebraic_to_square("a1") == A1
        assert algebraic_to_square("e4") == Square(4, 3)
        assert square_to_algebraic(H8) == "h8"

    def test_uppercase_and_whitespace_accepted(self) -> None:
        assert algebraic_to_square(" E4 ") == E4

    @pytest.mark.parametrize("text", ["", "e", "i1", "a0", "a9", "e44", "4e", "zz"])
    def test_invalid_names_give_sentinel(self, text: str) -> None:
        assert algebraic_to_square(text) == INVALID_SQUARE

    def test_non_string_gives_sentinel(self) -> None:
        assert algebraic_to_square(None) == INVALID_SQUARE
        assert algebraic_to_square(42) == INVALID_SQUARE

    def test_out_of_range_square_gives_empty_name(self) -> None:
        assert square_to_algebraic(Square(8, 0)) == ""
        assert square_to_algebraic(Square(0, -1)) == ""
        assert square_to_algebraic(INVALID_SQUARE) == ""


class TestSquareHelpers:
    def test_make_square_bounds(self) -> None:
        assert make_square(7, 7) == H8
        assert make_square(8, 7) == INVALID_SQUARE
        assert make_square(-1, 0) == INVALID_SQUARE

    def test_is_valid_square(self) -> None:
        assert is_valid_square(A1)
        assert is_valid_square((3, 3))
        assert not is_valid_square(INVALID_SQUARE)
        assert not is_valid_square("e4")
        assert not is_valid_square((1, 2, 3))

    def test_offset(self) -> None:
        assert E4.offset(1, 1) == Square(5, 4)
        assert H8.offset(1, 0) == INVALID_SQUARE

    def test_as_square_accepts_both_forms(self) -> None:
        assert as_square("e4") == E4
        assert as_square((4, 3)) == E4
        assert isinstance(as_square((4, 3)), Square)
        assert as_square((9, 9)) == INVALID_SQUARE
        assert as_square(None) == INVALID_SQUARE

    def test_str(self) -> None:
        assert str(E4) == "e4"
        assert str(INVALID_SQUARE) == "-"
