"""High-level chess rules: legal-move search, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessboard.core.enums import Color, GameStatus
from chessboard.core.types import Square, SquareLike, all_squares, as_square

if TYPE_CHECKING:
    from chessboard.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    Legal-move search is exhaustive: every piece of a color is probed
    against every square, and each geometrically legal candidate is
    applied temporarily to filter out moves that leave the own king in
    check.
    """

    @staticmethod
    def legal_moves_from(position: Position, from_sq: SquareLike) -> list[Square]:
        """Self-check-filtered target squares for the piece on *from_sq*."""
        src = as_square(from_sq)
        piece = position.board[src]
        if piece is None:
            return []
        validator = position.validator
        targets: list[Square] = []
        for to_sq in all_squares():
            if not validator.is_legal_move(piece, src, to_sq):
                continue
            if not position.leaves_king_in_check(src, to_sq):
                targets.append(to_sq)
        return targets

    @staticmethod
    def has_any_legal_moves(position: Position, color: Color) -> bool:
        validator = position.validator
        for from_sq in position.board.all_pieces(color):
            piece = position.board[from_sq]
            for to_sq in all_squares():
                if not validator.is_legal_move(piece, from_sq, to_sq):
                    continue
                if not position.leaves_king_in_check(from_sq, to_sq):
                    return True
        return False

    @staticmethod
    def is_in_check(position: Position, color: Color) -> bool:
        return position.validator.is_in_check(color)

    @staticmethod
    def is_checkmate(position: Position, color: Color) -> bool:
        if not Rules.is_in_check(position, color):
            return False
        return not Rules.has_any_legal_moves(position, color)

    @staticmethod
    def is_stalemate(position: Position, color: Color) -> bool:
        if Rules.is_in_check(position, color):
            return False
        return not Rules.has_any_legal_moves(position, color)

    @staticmethod
    def game_status(position: Position, color: Color) -> GameStatus:
        """Check / checkmate / stalemate summary for *color*."""
        in_check = Rules.is_in_check(position, color)
        if not Rules.has_any_legal_moves(position, color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS
