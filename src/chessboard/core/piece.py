"""Piece value object."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from chessboard.core.enums import Color, PieceType

# FEN-style character ↔ (Color, PieceType), used for board diagrams
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_uid_counter = itertools.count(1)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece.

    Equality compares kind and color only. ``uid`` is unique per created
    piece so the presentation layer can tell two white knights apart.
    """

    color: Color
    piece_type: PieceType
    uid: int = field(
        default_factory=lambda: next(_uid_counter), compare=False, repr=False
    )

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        return _CHARS.get((self.color, self.piece_type), "?")

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def is_same_kind(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type
