from __future__ import annotations

from typing import Dict, Type

from smart_horses.core import GameState, Side


class Evaluator:
    """Scores a state from the fixed perspective of ``side``."""

    name = "base"

    def __init__(self, side: Side = Side.SECOND) -> None:
        self.side = Side(side)

    def score(self, state: GameState) -> float:
        raise NotImplementedError

    def __call__(self, state: GameState) -> float:
        return self.score(state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(side={self.side.name})"


class ScoreEvaluator(Evaluator):
    name = "score"

    def score(self, state: GameState) -> float:
        return float(state.score_for(self.side))


class ScoreDifferenceEvaluator(Evaluator):
    name = "score_difference"

    def score(self, state: GameState) -> float:
        return float(state.score_for(self.side) - state.score_for(self.side.other()))


class PositionalEvaluator(Evaluator):
    """Score difference plus access to the points each horse can reach next."""

    name = "positional"

    def __init__(
        self,
        side: Side = Side.SECOND,
        *,
        reach_weight: float = 0.5,
        multiplier_weight: float = 0.25,
    ) -> None:
        super().__init__(side)
        self.reach_weight = reach_weight
        self.multiplier_weight = multiplier_weight

    def score(self, state: GameState) -> float:
        own, opp = self.side, self.side.other()
        value = float(state.score_for(own) - state.score_for(opp))
        if state.is_terminal:
            return value
        value += self.reach_weight * (self._reach(state, own) - self._reach(state, opp))
        # An armed multiplier is worth a share of the best cell still on the board.
        best_cell = float(state.points.max())
        armed = (int(state.multipliers[int(own)]) - 1) - (int(state.multipliers[int(opp)]) - 1)
        value += self.multiplier_weight * armed * best_cell
        return value

    @staticmethod
    def _reach(state: GameState, side: Side) -> float:
        best = 0
        for target in state.legal_targets(side):
            best = max(best, int(state.points[target.row, target.col]))
        return float(best * int(state.multipliers[int(side)]))


EVALUATORS: Dict[str, Type[Evaluator]] = {
    ScoreEvaluator.name: ScoreEvaluator,
    ScoreDifferenceEvaluator.name: ScoreDifferenceEvaluator,
    PositionalEvaluator.name: PositionalEvaluator,
}


def get_evaluator(name: str, side: Side = Side.SECOND) -> Evaluator:
    try:
        cls = EVALUATORS[name]
    except KeyError:
        known = ", ".join(sorted(EVALUATORS))
        raise KeyError(f"Unknown heuristic {name!r}; expected one of: {known}") from None
    return cls(side)
