"""Core game logic for Mancala (Kalah)."""

from .state import BoardState, GameResult, MoveRecord, Side
from .rules import (
    GLOBAL_HOLE_COUNT,
    PITS_PER_SIDE,
    RING_SIZE,
    STARTING_STONES,
    TOTAL_STONES,
    IllegalMoveError,
    SelectionCheck,
    apply_move,
    check_selection,
    game_result,
    is_terminal,
    is_valid_selection,
    legal_moves,
    new_game,
    opposite_pit,
    require_valid_selection,
    reset_game,
    side_of_global_index,
    sweep_remaining,
    to_global_index,
    to_local_index,
    winner,
)

__all__ = [
    "BoardState",
    "GameResult",
    "MoveRecord",
    "Side",
    "GLOBAL_HOLE_COUNT",
    "PITS_PER_SIDE",
    "RING_SIZE",
    "STARTING_STONES",
    "TOTAL_STONES",
    "IllegalMoveError",
    "SelectionCheck",
    "apply_move",
    "check_selection",
    "game_result",
    "is_terminal",
    "is_valid_selection",
    "legal_moves",
    "new_game",
    "opposite_pit",
    "require_valid_selection",
    "reset_game",
    "side_of_global_index",
    "sweep_remaining",
    "to_global_index",
    "to_local_index",
    "winner",
]
