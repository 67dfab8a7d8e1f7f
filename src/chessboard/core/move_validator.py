"""Per-piece move legality, special-move validity and attack detection.

Legality here is board geometry plus occupancy only; whether a move leaves
the mover's own king in check is decided by :class:`Position` and
:class:`Rules` with a temporary apply/revert.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessboard.core.enums import Color, MovedFlags, PieceType
from chessboard.core.piece import Piece
from chessboard.core.types import Square, is_valid_square, make_square

if TYPE_CHECKING:
    from chessboard.core.position import Position

_LOGGER = logging.getLogger(__name__)

KING_FILE = 4
ROOK_FILE_QUEENSIDE = 0
ROOK_FILE_KINGSIDE = 7

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def pawn_start_rank(color: Color) -> int:
    return 1 if color == Color.WHITE else 6


def en_passant_rank(color: Color) -> int:
    """Rank a pawn must stand on to capture en passant."""
    return 4 if color == Color.WHITE else 3


def promotion_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


class MoveValidator:
    """Answers "may this piece go from here to there" for a :class:`Position`.

    Stateless apart from the position it reads; cheap to construct.
    """

    __slots__ = ("_pos", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._dispatch: dict[PieceType, Callable[[Piece, Square, Square], bool]] = {
            PieceType.PAWN: self._is_legal_pawn,
            PieceType.KNIGHT: self._is_legal_knight,
            PieceType.BISHOP: self._is_legal_bishop,
            PieceType.ROOK: self._is_legal_rook,
            PieceType.QUEEN: self._is_legal_queen,
            PieceType.KING: self._is_legal_king,
        }

    # -- Public API ---------------------------------------------------------

    def is_legal_move(
        self, piece: Piece | None, from_sq: Square, to_sq: Square
    ) -> bool:
        """Geometry + occupancy legality of *piece* moving *from_sq* → *to_sq*."""
        if not self._basic_checks(piece, from_sq, to_sq):
            return False
        assert piece is not None
        check = self._dispatch.get(piece.piece_type)
        if check is None:
            _LOGGER.warning("Unknown piece kind %r; move rejected", piece.piece_type)
            return False
        return check(piece, from_sq, to_sq)

    def is_en_passant_valid(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Whether a diagonal pawn step onto an empty square captures en passant."""
        last = self._pos.last_move
        if last is None or not last.was_double_pawn_push:
            return False
        victim_sq = make_square(to_sq[0], from_sq[1])
        if tuple(last.to_sq) != victim_sq:
            return False
        victim = self._pos.board[victim_sq]
        return (
            victim is not None
            and victim.color == piece.color.opposite
            and victim.piece_type == PieceType.PAWN
        )

    def is_castling_valid(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Whether a two-file king move is a legal castle."""
        board = self._pos.board
        color = piece.color
        rank = color.home_rank
        if piece.piece_type != PieceType.KING:
            return False
        if tuple(from_sq) != (KING_FILE, rank) or to_sq[1] != rank:
            return False
        if self._pos.moved & MovedFlags.king(color):
            return False

        kingside = to_sq[0] > from_sq[0]
        rook_file = ROOK_FILE_KINGSIDE if kingside else ROOK_FILE_QUEENSIDE
        if self._pos.moved & MovedFlags.rook(color, kingside):
            return False
        rook = board[Square(rook_file, rank)]
        if rook is None or not rook.is_same_kind(color, PieceType.ROOK):
            return False

        step = 1 if kingside else -1
        for file in range(KING_FILE + step, rook_file, step):
            if board[Square(file, rank)] is not None:
                return False

        # Current square, the square passed over and the landing square.
        enemy = color.opposite
        for file in (KING_FILE, KING_FILE + step, KING_FILE + 2 * step):
            if self.is_square_attacked(Square(file, rank), enemy):
                return False
        return True

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        if not is_valid_square(sq):
            return False
        for origin, piece in self._pos.board.occupied():
            if piece.color == by_color and self.attacks(piece, origin, sq):
                return True
        return False

    def attacks(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Whether *piece* on *from_sq* attacks *to_sq*.

        Same as :meth:`is_legal_move` except that pawns attack only their
        forward diagonals (occupied or not) and kings only adjacent squares,
        so an attack probe can never reach castling validation.
        """
        if not self._basic_checks(piece, from_sq, to_sq):
            return False
        df = to_sq[0] - from_sq[0]
        dr = to_sq[1] - from_sq[1]
        if piece.piece_type == PieceType.PAWN:
            return abs(df) == 1 and dr == piece.color.forward
        if piece.piece_type == PieceType.KING:
            return max(abs(df), abs(dr)) == 1
        return self.is_legal_move(piece, from_sq, to_sq)

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._pos.board.king_square(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board; reporting not in check", color)
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Shared preconditions ----------------------------------------------

    def _basic_checks(
        self, piece: Piece | None, from_sq: Square, to_sq: Square
    ) -> bool:
        if piece is None:
            return False
        if not is_valid_square(from_sq) or not is_valid_square(to_sq):
            return False
        if tuple(from_sq) == tuple(to_sq):
            return False
        target = self._pos.board[Square(*to_sq)]
        return target is None or target.color != piece.color

    def _path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """All squares strictly between the endpoints of a straight line are empty."""
        df = _sign(to_sq[0] - from_sq[0])
        dr = _sign(to_sq[1] - from_sq[1])
        file, rank = from_sq[0] + df, from_sq[1] + dr
        board = self._pos.board
        while (file, rank) != tuple(to_sq):
            if board[Square(file, rank)] is not None:
                return False
            file += df
            rank += dr
        return True

    # -- Piece-specific checks (private) -----------------------------------

    def _is_legal_pawn(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        board = self._pos.board
        color = piece.color
        direction = color.forward
        df = to_sq[0] - from_sq[0]
        dr = to_sq[1] - from_sq[1]
        target = board[Square(*to_sq)]

        if df == 0:
            if dr == direction:
                return target is None
            if dr == 2 * direction and from_sq[1] == pawn_start_rank(color):
                between = Square(from_sq[0], from_sq[1] + direction)
                return board[between] is None and target is None
            return False

        if abs(df) == 1 and dr == direction:
            if target is not None:
                return target.color != color
            return from_sq[1] == en_passant_rank(color) and self.is_en_passant_valid(
                piece, from_sq, to_sq
            )
        return False

    def _is_legal_knight(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return (to_sq[0] - from_sq[0], to_sq[1] - from_sq[1]) in KNIGHT_OFFSETS

    def _is_legal_bishop(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        df = to_sq[0] - from_sq[0]
        dr = to_sq[1] - from_sq[1]
        return abs(df) == abs(dr) and self._path_clear(from_sq, to_sq)

    def _is_legal_rook(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        df = to_sq[0] - from_sq[0]
        dr = to_sq[1] - from_sq[1]
        return (df == 0 or dr == 0) and self._path_clear(from_sq, to_sq)

    def _is_legal_queen(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return self._is_legal_rook(piece, from_sq, to_sq) or self._is_legal_bishop(
            piece, from_sq, to_sq
        )

    def _is_legal_king(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        df = to_sq[0] - from_sq[0]
        dr = to_sq[1] - from_sq[1]
        if max(abs(df), abs(dr)) == 1:
            return True
        if abs(df) == 2 and dr == 0:
            return self.is_castling_valid(piece, from_sq, to_sq)
        return False
