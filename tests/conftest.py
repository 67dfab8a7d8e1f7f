"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chessboard.core.board import Board
from chessboard.core.enums import Color
from chessboard.core.piece import Piece
from chessboard.core.position import Position
from chessboard.core.types import algebraic_to_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

PositionFactory = Callable[..., Position]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def build_position() -> PositionFactory:
    """Factory for custom positions, e.g. ``build_position({"e1": "K"})``.

    Keys are square names, values piece characters (uppercase = white).
    """

    def _build(
        pieces: dict[str, str], turn: Color = Color.WHITE
    ) -> Position:
        board = Board()
        for name, char in pieces.items():
            board[algebraic_to_square(name)] = Piece.from_char(char)
        return Position(board=board, current_turn=turn)

    return _build
