"""Chess board state and rules engine for board presentation layers."""

from chessboard.core import Color, Piece, PieceType, Position, Rules, Square
from chessboard.game import BoardController, BoardEvents, RulesConfig

__all__ = [
    "BoardController",
    "BoardEvents",
    "Color",
    "Piece",
    "PieceType",
    "Position",
    "Rules",
    "RulesConfig",
    "Square",
]

__version__ = "0.1.0"
