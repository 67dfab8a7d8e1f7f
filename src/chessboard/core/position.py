"""Position — board plus turn, castling bookkeeping and last move.

Owns the single mutable board of a game and implements move execution with
a temporary apply/revert (Command pattern) for self-check validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from chessboard.core.board import Board
from chessboard.core.enums import Color, MovedFlags, PieceType
from chessboard.core.move import LastMove, MoveOutcome, TempMove
from chessboard.core.move_validator import (
    KING_FILE,
    ROOK_FILE_KINGSIDE,
    ROOK_FILE_QUEENSIDE,
    MoveValidator,
    promotion_rank,
)
from chessboard.core.piece import Piece
from chessboard.core.types import INVALID_SQUARE, Square, SquareLike, as_square

_LOGGER = logging.getLogger(__name__)

# Home corner → moved flag of the rook that starts there.
_ROOK_CORNERS: dict[Square, MovedFlags] = {
    Square(ROOK_FILE_QUEENSIDE, 0): MovedFlags.WHITE_ROOK_A,
    Square(ROOK_FILE_KINGSIDE, 0): MovedFlags.WHITE_ROOK_H,
    Square(ROOK_FILE_QUEENSIDE, 7): MovedFlags.BLACK_ROOK_A,
    Square(ROOK_FILE_KINGSIDE, 7): MovedFlags.BLACK_ROOK_H,
}


class Position:
    """Full rules state of one game.

    ``current_turn`` is the side to move, ``moved`` records which kings and
    rooks have left their home squares and ``last_move`` is the most recent
    finalized move (only that one matters for en passant).
    """

    __slots__ = (
        "board",
        "current_turn",
        "moved",
        "last_move",
        "_validator",
        "_pending",
    )

    def __init__(
        self,
        board: Board | None = None,
        current_turn: Color = Color.WHITE,
        moved: MovedFlags = MovedFlags.NONE,
        last_move: LastMove | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.current_turn = current_turn
        self.moved = moved
        self.last_move = last_move
        self._validator = MoveValidator(self)
        self._pending: TempMove | None = None

    @classmethod
    def empty(cls) -> Position:
        """Position with no pieces, white to move."""
        return cls(board=Board())

    @property
    def validator(self) -> MoveValidator:
        return self._validator

    # ── Setup / placement ────────────────────────────────────────────────

    def setup_standard_position(self) -> None:
        """Reset to the standard opening layout with fresh pieces."""
        self._ensure_no_pending()
        self.board = Board.initial()
        self.current_turn = Color.WHITE
        self.moved = MovedFlags.NONE
        self.last_move = None

    def clear(self) -> None:
        """Remove every piece and forget turn, castling and last-move state."""
        self._ensure_no_pending()
        self.board.clear()
        self.current_turn = Color.WHITE
        self.moved = MovedFlags.NONE
        self.last_move = None

    def get_piece_at(self, where: SquareLike) -> Piece | None:
        return self.board[as_square(where)]

    def set_piece_at(self, where: SquareLike, piece: Piece | None) -> bool:
        """Place *piece* (or clear with ``None``); False for an invalid square."""
        sq = as_square(where)
        if sq == INVALID_SQUARE:
            return False
        self.board[sq] = piece
        return True

    def remove_piece_at(self, where: SquareLike) -> Piece | None:
        """Lift and return the piece on *where*, if any."""
        sq = as_square(where)
        piece = self.board[sq]
        if piece is not None:
            self.board[sq] = None
        return piece

    # ── Queries ──────────────────────────────────────────────────────────

    def is_legal_move(
        self, piece: Piece | None, from_sq: SquareLike, to_sq: SquareLike
    ) -> bool:
        return self._validator.is_legal_move(
            piece, as_square(from_sq), as_square(to_sq)
        )

    def is_in_check(self, color: Color) -> bool:
        return self._validator.is_in_check(color)

    def is_square_attacked(self, sq: SquareLike, by_color: Color) -> bool:
        return self._validator.is_square_attacked(as_square(sq), by_color)

    # ── Temporary moves ──────────────────────────────────────────────────

    def apply_temp_move(
        self, from_sq: SquareLike, to_sq: SquareLike
    ) -> TempMove | None:
        """Move a piece provisionally, without any finalization side effects.

        Returns the undo record, or ``None`` when there is nothing to move.
        Must be paired with :meth:`revert_temp_move` before any other board
        query or mutation.
        """
        self._ensure_no_pending()
        src = as_square(from_sq)
        dst = as_square(to_sq)
        if src == INVALID_SQUARE or dst == INVALID_SQUARE or src == dst:
            return None
        piece = self.board[src]
        if piece is None:
            return None

        temp = TempMove(
            piece=piece, from_sq=src, to_sq=dst, displaced=self.board[dst]
        )
        if (
            piece.piece_type == PieceType.PAWN
            and abs(dst.file - src.file) == 1
            and temp.displaced is None
        ):
            beside = Square(dst.file, src.rank)
            victim = self.board[beside]
            if victim is not None and victim.is_same_kind(
                piece.color.opposite, PieceType.PAWN
            ):
                temp.en_passant_sq = beside
                temp.en_passant_captured = victim
                self.board[beside] = None

        self.board[dst] = piece
        self.board[src] = None
        self._pending = temp
        return temp

    def revert_temp_move(self, temp: TempMove) -> None:
        """Restore the board exactly as it was before :meth:`apply_temp_move`."""
        if temp.reverted or temp is not self._pending:
            raise RuntimeError(f"Temporary move {temp!r} is not the pending one")
        self.board[temp.from_sq] = temp.piece
        self.board[temp.to_sq] = temp.displaced
        if temp.en_passant_sq is not None:
            self.board[temp.en_passant_sq] = temp.en_passant_captured
        temp.reverted = True
        self._pending = None

    @contextmanager
    def temp_move(
        self, from_sq: SquareLike, to_sq: SquareLike
    ) -> Iterator[TempMove | None]:
        """Context manager form; the move is reverted on every exit path."""
        temp = self.apply_temp_move(from_sq, to_sq)
        try:
            yield temp
        finally:
            if temp is not None and not temp.reverted:
                self.revert_temp_move(temp)

    def leaves_king_in_check(self, from_sq: SquareLike, to_sq: SquareLike) -> bool:
        """Would moving the piece on *from_sq* expose its own king?"""
        piece = self.get_piece_at(from_sq)
        if piece is None:
            return False
        with self.temp_move(from_sq, to_sq) as temp:
            if temp is None:
                return False
            return self._validator.is_in_check(piece.color)

    # ── Move execution ───────────────────────────────────────────────────

    def move_piece(self, from_sq: SquareLike, to_sq: SquareLike) -> MoveOutcome:
        """Execute a move; reject it if it leaves the mover's king in check.

        Geometric legality is the caller's job (see :meth:`is_legal_move`).
        """
        self._ensure_no_pending()
        src = as_square(from_sq)
        dst = as_square(to_sq)
        piece = self.board[src]
        if piece is None or dst == INVALID_SQUARE or src == dst:
            return MoveOutcome.rejected()

        moved_before = self.moved
        self._update_moved_flags(piece, src, dst)

        temp = self.apply_temp_move(src, dst)
        assert temp is not None
        if self._validator.is_in_check(piece.color):
            self.revert_temp_move(temp)
            self.moved = moved_before
            _LOGGER.debug("Rejected %s%s: own king left in check", src, dst)
            return MoveOutcome.rejected()
        self._pending = None

        # Finalize: captures are already off the board; handle rook and promotion.
        rook_from: Square | None = None
        rook_to: Square | None = None
        if (
            piece.piece_type == PieceType.KING
            and src == Square(KING_FILE, piece.color.home_rank)
            and dst.rank == src.rank
            and abs(dst.file - src.file) == 2
        ):
            kingside = dst.file > src.file
            rook_file = ROOK_FILE_KINGSIDE if kingside else ROOK_FILE_QUEENSIDE
            corner = Square(rook_file, src.rank)
            passed = Square((src.file + dst.file) // 2, src.rank)
            rook = self.board[corner]
            # Only a home-square king with its own rook in the corner castles.
            if (
                rook is not None
                and rook.is_same_kind(piece.color, PieceType.ROOK)
                and self.board[passed] is None
            ):
                self.board[passed] = rook
                self.board[corner] = None
                rook_from, rook_to = corner, passed

        promoted: Piece | None = None
        last_rank = promotion_rank(piece.color)
        if piece.piece_type == PieceType.PAWN and dst.rank == last_rank:
            promoted = Piece(piece.color, PieceType.QUEEN)
            self.board[dst] = promoted

        self.last_move = LastMove(
            piece=piece,
            from_sq=src,
            to_sq=dst,
            was_double_pawn_push=(
                piece.piece_type == PieceType.PAWN and abs(dst.rank - src.rank) == 2
            ),
        )
        self.current_turn = piece.color.opposite

        captured_sq: Square | None = None
        if temp.en_passant_captured is not None:
            captured_sq = temp.en_passant_sq
        elif temp.displaced is not None:
            captured_sq = dst
        return MoveOutcome(
            applied=True,
            piece=piece,
            from_sq=src,
            to_sq=dst,
            captured=temp.captured,
            captured_sq=captured_sq,
            is_en_passant=temp.en_passant_captured is not None,
            rook_from=rook_from,
            rook_to=rook_to,
            promoted_to=promoted,
        )

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_moved_flags(self, piece: Piece, src: Square, dst: Square) -> None:
        flags = self.moved
        if piece.piece_type == PieceType.KING:
            flags |= MovedFlags.king(piece.color)
        if piece.piece_type == PieceType.ROOK and src.rank == piece.color.home_rank:
            flags |= _ROOK_CORNERS.get(src, MovedFlags.NONE)
        # A rook captured on its home corner can never castle either.
        victim = self.board[dst]
        if (
            victim is not None
            and victim.piece_type == PieceType.ROOK
            and dst.rank == victim.color.home_rank
        ):
            flags |= _ROOK_CORNERS.get(dst, MovedFlags.NONE)
        self.moved = flags

    def _ensure_no_pending(self) -> None:
        if self._pending is not None:
            raise RuntimeError("A temporary move is still applied")

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy sharing the (immutable) piece objects."""
        self._ensure_no_pending()
        return Position(
            board=self.board.copy(),
            current_turn=self.current_turn,
            moved=self.moved,
            last_move=self.last_move,
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.current_turn} to move"
