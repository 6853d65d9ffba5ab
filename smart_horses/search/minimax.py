from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from smart_horses.core import GameState, Move, Side

logger = logging.getLogger(__name__)

EvaluationFn = Callable[[GameState], float]


@dataclass
class MinimaxConfig:
    depth: int = 2
    alpha_beta: bool = True
    maximizing_side: Optional[Side] = None


@dataclass
class SearchResult:
    move: Optional[Move]
    value: float
    nodes: int


@dataclass
class _SearchStats:
    nodes: int = 0


class Minimax:
    """Depth-limited minimax over cloned states.

    ``depth`` counts plies including the root move, so the root is always
    expanded once. Nodes whose side to move is ``maximizing_side`` maximise
    the evaluator's score, the others minimise it. Ties keep the first move in
    generation order.
    """

    def __init__(self, evaluator: EvaluationFn, config: Optional[MinimaxConfig] = None) -> None:
        self.evaluator = evaluator
        self.config = config or MinimaxConfig()
        side = self.config.maximizing_side
        if side is None:
            side = getattr(evaluator, "side", Side.SECOND)
        self.maximizing_side = Side(side)

    @property
    def depth(self) -> int:
        return self.config.depth

    def get_best_move(self, state: GameState) -> Optional[Move]:
        return self.search(state).move

    def search(self, state: GameState) -> SearchResult:
        root = state.copy()
        stats = _SearchStats(nodes=1)
        if root.is_terminal:
            return SearchResult(move=None, value=self._evaluate(root), nodes=stats.nodes)

        moves = root.legal_moves()
        if not moves:
            logger.debug("%s has no legal move at the root", root.current_player.name)
            return SearchResult(move=None, value=self._evaluate(root), nodes=stats.nodes)

        maximizing = root.current_player == self.maximizing_side
        depth = max(self.config.depth, 1)
        alpha, beta = -math.inf, math.inf
        best_move: Optional[Move] = None
        best_value = -math.inf if maximizing else math.inf

        for move in moves:
            value = self._minimax(self._child(root, move), depth - 1, alpha, beta, stats)
            if best_move is None or (value > best_value if maximizing else value < best_value):
                best_move, best_value = move, value
            if self.config.alpha_beta:
                if maximizing:
                    alpha = max(alpha, best_value)
                else:
                    beta = min(beta, best_value)

        logger.debug(
            "Minimax depth=%d for %s chose %s (value=%.3f, nodes=%d)",
            depth,
            root.current_player.name,
            best_move,
            best_value,
            stats.nodes,
        )
        return SearchResult(move=best_move, value=best_value, nodes=stats.nodes)

    # ------------------------------------------------------------------
    def _minimax(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        stats: _SearchStats,
    ) -> float:
        stats.nodes += 1
        if depth <= 0 or state.is_terminal:
            return self._evaluate(state)

        moves = state.legal_moves()
        if not moves:
            return self._evaluate(state)

        if state.current_player == self.maximizing_side:
            value = -math.inf
            for move in moves:
                value = max(value, self._minimax(self._child(state, move), depth - 1, alpha, beta, stats))
                if self.config.alpha_beta:
                    alpha = max(alpha, value)
                    if alpha >= beta:
                        break
            return value

        value = math.inf
        for move in moves:
            value = min(value, self._minimax(self._child(state, move), depth - 1, alpha, beta, stats))
            if self.config.alpha_beta:
                beta = min(beta, value)
                if alpha >= beta:
                    break
        return value

    def _child(self, state: GameState, move: Move) -> GameState:
        child = state.copy()
        if not child.make_move(move.origin, move.target):
            raise RuntimeError(f"Generated move {move} was rejected by the game state.")
        return child

    def _evaluate(self, state: GameState) -> float:
        return float(self.evaluator(state))


def create_search(evaluator: EvaluationFn, depth: int, **kwargs) -> Minimax:
    return Minimax(evaluator, MinimaxConfig(depth=depth, **kwargs))
