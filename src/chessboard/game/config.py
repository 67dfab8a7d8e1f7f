"""Controller configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RulesConfig:
    """Switches for how :class:`BoardController` guards and reports moves."""

    # Reject moves by the side that is not to move
    enforce_turn: bool = True

    # Run per-piece legality before executing (move_piece itself only
    # checks that the own king is not left in check)
    require_legal_geometry: bool = True

    # Notify check / checkmate / stalemate after every move
    announce_game_end: bool = True
