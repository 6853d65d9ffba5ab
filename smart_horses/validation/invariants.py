from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from smart_horses.core.state import GameState


class InvariantViolation(AssertionError):
    pass


def validate_state(state: "GameState") -> None:
    """Raise :class:`InvariantViolation` if ``state`` breaks a game invariant."""
    rows, cols = state.points.shape
    if state.bonuses.shape != state.points.shape:
        raise InvariantViolation("bonus layout does not match the board shape")
    if (state.points < 0).any():
        raise InvariantViolation("board holds negative point values")
    if (state.bonuses < 0).any():
        raise InvariantViolation("board holds negative bonus values")
    if (state.scores < 0).any():
        raise InvariantViolation("negative score")
    if (state.multipliers < 1).any():
        raise InvariantViolation("multipliers must be at least 1")
    if state.remaining_points < 0:
        raise InvariantViolation("remaining points went negative")
    if int(state.points.sum()) != state.remaining_points:
        raise InvariantViolation(
            f"remaining points {state.remaining_points} != board total {int(state.points.sum())}"
        )
    if state.positions.shape != (2, 2):
        raise InvariantViolation("exactly one horse per side is required")
    for row, col in state.positions:
        if not (0 <= row < rows and 0 <= col < cols):
            raise InvariantViolation(f"horse at ({row}, {col}) is off the board")
    if np.array_equal(state.positions[0], state.positions[1]):
        raise InvariantViolation("both horses share a square")
