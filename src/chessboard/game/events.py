"""Observer callbacks published by :class:`BoardController`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from chessboard.core.enums import Color
from chessboard.core.move import MoveOutcome
from chessboard.core.piece import Piece
from chessboard.core.types import Square

_LOGGER = logging.getLogger(__name__)

PiecePlacedCallback = Callable[[Piece, Square], None]
PieceRemovedCallback = Callable[[Piece, Square], None]
PieceMovedCallback = Callable[[MoveOutcome], None]
ColorCallback = Callable[[Color], None]  # check, checkmate, stalemate, turn


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_piece_placed: list[PiecePlacedCallback] = field(default_factory=list)
    on_piece_removed: list[PieceRemovedCallback] = field(default_factory=list)
    on_piece_moved: list[PieceMovedCallback] = field(default_factory=list)
    on_check: list[ColorCallback] = field(default_factory=list)
    on_checkmate: list[ColorCallback] = field(default_factory=list)
    on_stalemate: list[ColorCallback] = field(default_factory=list)
    on_turn_changed: list[ColorCallback] = field(default_factory=list)

    def clear(self) -> None:
        """Drop every subscriber."""
        for handlers in self._all():
            handlers.clear()

    def _all(self) -> tuple[list[Any], ...]:
        return (
            self.on_piece_placed,
            self.on_piece_removed,
            self.on_piece_moved,
            self.on_check,
            self.on_checkmate,
            self.on_stalemate,
            self.on_turn_changed,
        )


def emit(handlers: list[Callable[..., None]], *args: object) -> None:
    """Call every handler; a failing handler is logged and skipped."""
    for cb in list(handlers):
        try:
            cb(*args)
        except Exception:
            _LOGGER.exception("Board event handler %r failed", cb)
