"""Qt bridge exposing board notifications as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessboard.core.enums import Color
from chessboard.core.move import MoveOutcome
from chessboard.core.piece import Piece
from chessboard.core.types import Square
from chessboard.game.controller import BoardController


class BoardSignals(QObject):
    """Re-emits a :class:`BoardController`'s callbacks as Qt signals.

    A 2D scene and a 3D view can both connect to the same instance; neither
    needs to know about the callback lists on ``BoardEvents``.

    Signals:
        piece_placed(Piece, Square)
        piece_removed(Piece, Square)
        piece_moved(MoveOutcome)
        king_in_check(Color)
        checkmate(Color)
        stalemate(Color)
        turn_changed(Color)
        move_rejected(object, object): from / to as requested.
    """

    piece_placed = pyqtSignal(object, object)
    piece_removed = pyqtSignal(object, object)
    piece_moved = pyqtSignal(object)
    king_in_check = pyqtSignal(object)
    checkmate = pyqtSignal(object)
    stalemate = pyqtSignal(object)
    turn_changed = pyqtSignal(object)
    move_rejected = pyqtSignal(object, object)

    def __init__(
        self, controller: BoardController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._attached = False
        self.attach()

    @property
    def controller(self) -> BoardController:
        return self._controller

    def attach(self) -> None:
        """Subscribe to the controller's events (idempotent)."""
        if self._attached:
            return
        events = self._controller.events
        events.on_piece_placed.append(self._on_piece_placed)
        events.on_piece_removed.append(self._on_piece_removed)
        events.on_piece_moved.append(self._on_piece_moved)
        events.on_check.append(self._on_check)
        events.on_checkmate.append(self._on_checkmate)
        events.on_stalemate.append(self._on_stalemate)
        events.on_turn_changed.append(self._on_turn_changed)
        self._attached = True

    def detach(self) -> None:
        """Stop forwarding; the controller keeps its other subscribers."""
        if not self._attached:
            return
        events = self._controller.events
        events.on_piece_placed.remove(self._on_piece_placed)
        events.on_piece_removed.remove(self._on_piece_removed)
        events.on_piece_moved.remove(self._on_piece_moved)
        events.on_check.remove(self._on_check)
        events.on_checkmate.remove(self._on_checkmate)
        events.on_stalemate.remove(self._on_stalemate)
        events.on_turn_changed.remove(self._on_turn_changed)
        self._attached = False

    @pyqtSlot(object, object)
    def request_move(self, from_sq: object, to_sq: object) -> None:
        """Slot for views: try a move, emit ``move_rejected`` if refused."""
        if not self._controller.move_piece(from_sq, to_sq):  # type: ignore[arg-type]
            self.move_rejected.emit(from_sq, to_sq)

    # ── Forwarders ───────────────────────────────────────────────────────

    def _on_piece_placed(self, piece: Piece, sq: Square) -> None:
        self.piece_placed.emit(piece, sq)

    def _on_piece_removed(self, piece: Piece, sq: Square) -> None:
        self.piece_removed.emit(piece, sq)

    def _on_piece_moved(self, outcome: MoveOutcome) -> None:
        self.piece_moved.emit(outcome)

    def _on_check(self, color: Color) -> None:
        self.king_in_check.emit(color)

    def _on_checkmate(self, color: Color) -> None:
        self.checkmate.emit(color)

    def _on_stalemate(self, color: Color) -> None:
        self.stalemate.emit(color)

    def _on_turn_changed(self, color: Color) -> None:
        self.turn_changed.emit(color)
