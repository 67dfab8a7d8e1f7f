"""BoardController — the rules engine as seen by a presentation layer.

Owns one :class:`Position`, guards move attempts (turn, per-piece
legality, self-check) and publishes :class:`BoardEvents` so 2D or 3D board
views can redraw and animate without touching the rules.
"""

from __future__ import annotations

import logging

from chessboard.core.enums import Color, GameStatus
from chessboard.core.move import MoveOutcome
from chessboard.core.piece import Piece
from chessboard.core.position import Position
from chessboard.core.rules import Rules
from chessboard.core.types import INVALID_SQUARE, Square, SquareLike, as_square
from chessboard.game.config import RulesConfig
from chessboard.game.events import BoardEvents, emit

_LOGGER = logging.getLogger(__name__)


class BoardController:
    """Single-threaded orchestrator of one board.

    Every notification is fired synchronously after the mutation that
    caused it. Invalid input (off-board squares, empty origins, illegal
    moves) is answered with ``None`` / ``False``, never an exception.
    """

    __slots__ = ("_position", "_config", "_status", "events")

    def __init__(
        self,
        config: RulesConfig | None = None,
        position: Position | None = None,
    ) -> None:
        self._config = config if config is not None else RulesConfig()
        self._position = position if position is not None else Position.empty()
        # An empty board has no status to evaluate; a supplied one is lazily read
        self._status: GameStatus | None = (
            GameStatus.IN_PROGRESS if position is None else None
        )
        self.events = BoardEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def current_turn(self) -> Color:
        return self._position.current_turn

    @property
    def status(self) -> GameStatus:
        """Status of the side to move.

        Cached after each move and re-evaluated after placement or turn
        changes made through the controller.
        """
        if self._status is None:
            self._status = Rules.game_status(
                self._position, self._position.current_turn
            )
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self.status in (GameStatus.CHECKMATE, GameStatus.STALEMATE)

    # ── Setup / placement ────────────────────────────────────────────────

    def setup_standard_position(self) -> None:
        """Clear the board and place the 32 standard pieces, white to move."""
        self._remove_all()
        self._position.setup_standard_position()
        self._status = GameStatus.IN_PROGRESS
        for sq, piece in self._position.board.occupied():
            emit(self.events.on_piece_placed, piece, sq)
        emit(self.events.on_turn_changed, self._position.current_turn)

    def clear(self) -> None:
        """Remove every piece and reset turn / castling / last-move state."""
        self._remove_all()
        self._position.clear()
        self._status = GameStatus.IN_PROGRESS

    def set_turn(self, color: Color | str) -> None:
        """Hand the move to *color* (used when setting up custom positions)."""
        color = Color.coerce(color)
        if color == self._position.current_turn:
            return
        self._position.current_turn = color
        self._status = None
        emit(self.events.on_turn_changed, color)

    def get_piece_at(self, where: SquareLike) -> Piece | None:
        return self._position.get_piece_at(where)

    def set_piece_at(self, where: SquareLike, piece: Piece | None) -> bool:
        """Place *piece* on *where*, replacing any occupant."""
        sq = as_square(where)
        if sq == INVALID_SQUARE:
            return False
        old = self._position.get_piece_at(sq)
        if old is piece:
            return True
        self._position.set_piece_at(sq, piece)
        self._status = None
        if old is not None:
            emit(self.events.on_piece_removed, old, sq)
        if piece is not None:
            emit(self.events.on_piece_placed, piece, sq)
        return True

    def remove_piece_at(self, where: SquareLike) -> Piece | None:
        sq = as_square(where)
        piece = self._position.remove_piece_at(sq)
        if piece is not None:
            self._status = None
            emit(self.events.on_piece_removed, piece, sq)
        return piece

    # ── Rules queries ────────────────────────────────────────────────────

    def is_legal_move(
        self, piece: Piece | None, from_sq: SquareLike, to_sq: SquareLike
    ) -> bool:
        """Per-piece legality, ignoring whether the own king is left in check."""
        return self._position.is_legal_move(piece, from_sq, to_sq)

    def is_in_check(self, color: Color | str) -> bool:
        return Rules.is_in_check(self._position, Color.coerce(color))

    def is_checkmate(self, color: Color | str) -> bool:
        return Rules.is_checkmate(self._position, Color.coerce(color))

    def is_stalemate(self, color: Color | str) -> bool:
        return Rules.is_stalemate(self._position, Color.coerce(color))

    def has_any_legal_moves(self, color: Color | str) -> bool:
        return Rules.has_any_legal_moves(self._position, Color.coerce(color))

    def legal_moves_from(self, where: SquareLike) -> list[Square]:
        """Target squares for highlighting the piece on *where*."""
        return Rules.legal_moves_from(self._position, where)

    def game_status(self, color: Color | str | None = None) -> GameStatus:
        color = self._position.current_turn if color is None else Color.coerce(color)
        return Rules.game_status(self._position, color)

    # ── Move execution ───────────────────────────────────────────────────

    def move_piece(self, from_sq: SquareLike, to_sq: SquareLike) -> MoveOutcome:
        """Try to play a move. The returned outcome is falsy when rejected."""
        src = as_square(from_sq)
        dst = as_square(to_sq)
        piece = self._position.get_piece_at(src)
        if piece is None or dst == INVALID_SQUARE:
            return MoveOutcome.rejected()

        if self._config.enforce_turn and piece.color != self._position.current_turn:
            _LOGGER.debug("Rejected %s%s: %s is not to move", src, dst, piece.color)
            return MoveOutcome.rejected()
        if self._config.require_legal_geometry and not self._position.is_legal_move(
            piece, src, dst
        ):
            _LOGGER.debug("Rejected %s%s: illegal for %s", src, dst, piece.piece_type)
            return MoveOutcome.rejected()

        outcome = self._position.move_piece(src, dst)
        if not outcome:
            return outcome

        self._emit_move(outcome)
        return outcome

    # ── Internal helpers ─────────────────────────────────────────────────

    def _remove_all(self) -> None:
        for sq, piece in list(self._position.board.occupied()):
            self._position.board[sq] = None
            emit(self.events.on_piece_removed, piece, sq)

    def _emit_move(self, outcome: MoveOutcome) -> None:
        events = self.events
        if outcome.captured is not None and outcome.captured_sq is not None:
            emit(events.on_piece_removed, outcome.captured, outcome.captured_sq)

        emit(events.on_piece_moved, outcome)

        if outcome.promoted_to is not None:
            assert outcome.piece is not None and outcome.to_sq is not None
            emit(events.on_piece_removed, outcome.piece, outcome.to_sq)
            emit(events.on_piece_placed, outcome.promoted_to, outcome.to_sq)

        next_color = self._position.current_turn
        emit(events.on_turn_changed, next_color)

        if not self._config.announce_game_end:
            self._status = None
            return
        self._status = Rules.game_status(self._position, next_color)
        if self._status in (GameStatus.CHECK, GameStatus.CHECKMATE):
            emit(events.on_check, next_color)
        if self._status == GameStatus.CHECKMATE:
            _LOGGER.info("Checkmate: %s has no legal moves", next_color)
            emit(events.on_checkmate, next_color)
        elif self._status == GameStatus.STALEMATE:
            _LOGGER.info("Stalemate: %s has no legal moves", next_color)
            emit(events.on_stalemate, next_color)
