"""Game layer — controller and observer notifications over the core rules.

Quick start::

    from chessboard.game import BoardController

    ctrl = BoardController()
    ctrl.events.on_checkmate.append(lambda color: print(f"{color} is mated"))
    ctrl.setup_standard_position()
    ctrl.move_piece("e2", "e4")
"""

from chessboard.game.config import RulesConfig
from chessboard.game.controller import BoardController
from chessboard.game.events import BoardEvents

__all__ = [
    "BoardController",
    "BoardEvents",
    "RulesConfig",
]
