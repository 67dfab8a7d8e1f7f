"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step for this side."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index of the back rank (king and rooks)."""
        return 0 if self == Color.WHITE else 7

    @classmethod
    def coerce(cls, value: Color | str) -> Color:
        """Accept a :class:`Color` or its name, e.g. ``"white"``."""
        if isinstance(value, Color):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid color: {value!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class MovedFlags(IntFlag):
    """Which castling pieces have left their home squares.

    Flags are only ever added during a game; a full reset starts from
    :attr:`NONE` again.
    """

    NONE = 0
    WHITE_KING = auto()
    BLACK_KING = auto()
    WHITE_ROOK_A = auto()
    WHITE_ROOK_H = auto()
    BLACK_ROOK_A = auto()
    BLACK_ROOK_H = auto()

    @classmethod
    def king(cls, color: Color) -> MovedFlags:
        return cls.WHITE_KING if color == Color.WHITE else cls.BLACK_KING

    @classmethod
    def rook(cls, color: Color, kingside: bool) -> MovedFlags:
        if color == Color.WHITE:
            return cls.WHITE_ROOK_H if kingside else cls.WHITE_ROOK_A
        return cls.BLACK_ROOK_H if kingside else cls.BLACK_ROOK_A


class GameStatus(IntEnum):
    """Situation of the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
