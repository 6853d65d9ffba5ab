"""Core game logic for Smart Horses."""

from .movement import KING_OFFSETS, KNIGHT_OFFSETS, MovementRule
from .state import Coordinate, GameState, Move, MoveRecord, Side
from .rules import (
    BOARD_SIZE,
    BONUS_CELLS,
    BONUS_MULTIPLIER,
    POINT_CELLS,
    IllegalMoveError,
    apply_move,
    create_initial_state,
    generate_layout,
    legal_moves,
    state_from_layout,
)

__all__ = [
    "GameState",
    "Side",
    "Coordinate",
    "Move",
    "MoveRecord",
    "MovementRule",
    "KNIGHT_OFFSETS",
    "KING_OFFSETS",
    "BOARD_SIZE",
    "POINT_CELLS",
    "BONUS_CELLS",
    "BONUS_MULTIPLIER",
    "IllegalMoveError",
    "apply_move",
    "create_initial_state",
    "generate_layout",
    "legal_moves",
    "state_from_layout",
]
