"""Position heuristics and policy-vs-policy matches."""

from .heuristics import (
    EVALUATORS,
    Evaluator,
    PositionalEvaluator,
    ScoreDifferenceEvaluator,
    ScoreEvaluator,
    get_evaluator,
)
from .match import GameOutcome, MatchResult, play_game, play_match

__all__ = [
    "EVALUATORS",
    "Evaluator",
    "ScoreEvaluator",
    "ScoreDifferenceEvaluator",
    "PositionalEvaluator",
    "get_evaluator",
    "GameOutcome",
    "MatchResult",
    "play_game",
    "play_match",
]
