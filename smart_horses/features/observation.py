from __future__ import annotations

from typing import Tuple

import numpy as np

from smart_horses.core import GameState, Side

BOARD_CHANNELS = 4  # points, bonus, first horse, second horse
AUX_VECTOR_SIZE = 6  # side to move one-hot (2) + scores (2) + armed multipliers (2)


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (4, rows, cols) channel-first."""
    rows, cols = state.shape
    tensor = np.zeros((BOARD_CHANNELS, rows, cols), dtype=np.float32)
    peak = float(state.points.max())
    if peak > 0:
        tensor[0] = state.points / peak
    tensor[1] = state.bonuses > 0
    for side in Side:
        row, col = state.piece_for(side)
        tensor[2 + int(side), row, col] = 1.0
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(state.current_player)] = 1.0
    total = float(state.scores.sum() + state.remaining_points)
    if total > 0:
        aux[2:4] = np.clip(state.scores / total, 0.0, 1.0)
    aux[4:6] = state.multipliers > 1
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)
