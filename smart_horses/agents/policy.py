from __future__ import annotations

from typing import Optional

import numpy as np

from smart_horses.core import GameState, Move
from smart_horses.search import Minimax


class Policy:
    """Picks a move for the side to move, or ``None`` when it cannot move."""

    def select(self, state: GameState) -> Optional[Move]:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a copy of this policy for an independent game."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select(self, state: GameState) -> Optional[Move]:
        moves = state.legal_moves()
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class GreedyPolicy(Policy):
    """Takes the richest square in reach; first in generation order on ties."""

    def select(self, state: GameState) -> Optional[Move]:
        moves = state.legal_moves()
        if not moves:
            return None
        multiplier = int(state.multipliers[int(state.current_player)])
        gains = [int(state.points[m.target.row, m.target.col]) * multiplier for m in moves]
        return moves[int(np.argmax(gains))]


class MinimaxPolicy(Policy):
    def __init__(self, engine: Minimax) -> None:
        self.engine = engine

    def select(self, state: GameState) -> Optional[Move]:
        return self.engine.get_best_move(state)
