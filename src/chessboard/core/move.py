"""Move records: last move, speculative-move command, move outcome."""

from __future__ import annotations

from dataclasses import dataclass

from chessboard.core.piece import Piece
from chessboard.core.types import Square, square_to_algebraic


@dataclass(frozen=True, slots=True)
class LastMove:
    """The most recently finalized move; all en passant needs to know."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    was_double_pawn_push: bool = False

    def __str__(self) -> str:
        return f"{square_to_algebraic(self.from_sq)}{square_to_algebraic(self.to_sq)}"


@dataclass(slots=True)
class TempMove:
    """Undo record for a provisionally applied move (Command pattern).

    Holds everything needed to put the board back exactly as it was.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    displaced: Piece | None = None
    en_passant_sq: Square | None = None
    en_passant_captured: Piece | None = None
    reverted: bool = False

    @property
    def is_en_passant(self) -> bool:
        return self.en_passant_sq is not None

    @property
    def captured(self) -> Piece | None:
        """Piece taken by this move, wherever it stood."""
        if self.en_passant_captured is not None:
            return self.en_passant_captured
        return self.displaced


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :meth:`Position.move_piece`. Truthy only when applied."""

    applied: bool
    piece: Piece | None = None
    from_sq: Square | None = None
    to_sq: Square | None = None
    captured: Piece | None = None
    captured_sq: Square | None = None
    is_en_passant: bool = False
    rook_from: Square | None = None
    rook_to: Square | None = None
    promoted_to: Piece | None = None

    def __bool__(self) -> bool:
        return self.applied

    @property
    def is_castling(self) -> bool:
        return self.rook_from is not None

    @classmethod
    def rejected(cls) -> MoveOutcome:
        return cls(applied=False)
