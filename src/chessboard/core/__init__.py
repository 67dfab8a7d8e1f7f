"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessboard.core import Position, Rules, Color

    pos = Position()
    pos.move_piece("e2", "e4")
    Rules.is_checkmate(pos, Color.BLACK)
"""

from chessboard.core.board import Board
from chessboard.core.enums import Color, GameStatus, MovedFlags, PieceType
from chessboard.core.move import LastMove, MoveOutcome, TempMove
from chessboard.core.move_validator import MoveValidator
from chessboard.core.piece import Piece
from chessboard.core.position import Position
from chessboard.core.rules import Rules
from chessboard.core.types import (
    INVALID_SQUARE,
    Square,
    algebraic_to_square,
    as_square,
    is_valid_square,
    make_square,
    square_to_algebraic,
)

__all__ = [
    # Enums / flags
    "Color",
    "GameStatus",
    "MovedFlags",
    "PieceType",
    # Types / helpers
    "INVALID_SQUARE",
    "Square",
    "algebraic_to_square",
    "as_square",
    "is_valid_square",
    "make_square",
    "square_to_algebraic",
    # Domain objects
    "Board",
    "LastMove",
    "MoveOutcome",
    "MoveValidator",
    "Piece",
    "Position",
    "Rules",
    "TempMove",
]
