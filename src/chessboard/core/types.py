"""Square type and coordinate helpers.

A square is a ``(file, rank)`` pair, both 0-indexed::

    a1 = Square(0, 0), h1 = Square(7, 0), a8 = Square(0, 7), h8 = Square(7, 7)

Conversions never raise on bad input; they return :data:`INVALID_SQUARE`
(or ``""``) so UI code can pass stray clicks straight through.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple, TypeAlias

_FILES = "abcdefgh"


class Square(NamedTuple):
    """Board coordinate: file 0–7 (a–h), rank 0–7 (1–8)."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Square:
        """Square shifted by ``(df, dr)``, or :data:`INVALID_SQUARE`."""
        return make_square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return square_to_algebraic(self) or "-"


INVALID_SQUARE = Square(-1, -1)

SquareLike: TypeAlias = "Square | tuple[int, int] | str"


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a ``(file, rank)`` pair inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    file, rank = sq
    if not isinstance(file, int) or not isinstance(rank, int):
        return False
    return 0 <= file < 8 and 0 <= rank < 8


def make_square(file: int, rank: int) -> Square:
    """Create square from file and rank, or :data:`INVALID_SQUARE` if off-board."""
    if 0 <= file < 8 and 0 <= rank < 8:
        return Square(file, rank)
    return INVALID_SQUARE


def algebraic_to_square(name: object) -> Square:
    """Parse a square name, e.g. ``'e4'`` → ``Square(4, 3)``."""
    if not isinstance(name, str):
        return INVALID_SQUARE
    text = name.strip().lower()
    if len(text) != 2:
        return INVALID_SQUARE
    file_char, rank_char = text
    if file_char not in _FILES or not rank_char.isdigit():
        return INVALID_SQUARE
    return make_square(_FILES.index(file_char), int(rank_char) - 1)


def square_to_algebraic(sq: object) -> str:
    """Human-readable name, e.g. ``Square(0, 0)`` → ``'a1'``; ``""`` if invalid."""
    if not is_valid_square(sq):
        return ""
    file, rank = sq  # type: ignore[misc]
    return f"{_FILES[file]}{rank + 1}"


def as_square(value: object) -> Square:
    """Resolve a square given either as coordinates or algebraic text."""
    if isinstance(value, str):
        return algebraic_to_square(value)
    if is_valid_square(value):
        file, rank = value  # type: ignore[misc]
        return Square(file, rank)
    return INVALID_SQUARE


def all_squares() -> Iterator[Square]:
    """Every square, a1 to h8, rank by rank."""
    for rank in range(8):
        for file in range(8):
            yield Square(file, rank)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
