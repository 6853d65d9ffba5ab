"""Smart Horses game engine and minimax opponent."""

from . import agents, core, difficulty, env, evaluation, features, search, validation
from .agents import GreedyPolicy, MinimaxPolicy, Policy, RandomPolicy
from .core import (
    Coordinate,
    GameState,
    Move,
    MovementRule,
    Side,
    create_initial_state,
    legal_moves,
    state_from_layout,
)
from .difficulty import DEFAULT_DIFFICULTIES, DifficultyConfig, build_search, load_difficulties, resolve_difficulty
from .env import SmartHorsesEnv
from .evaluation import (
    Evaluator,
    MatchResult,
    PositionalEvaluator,
    ScoreDifferenceEvaluator,
    ScoreEvaluator,
    get_evaluator,
    play_game,
    play_match,
)
from .features import AUX_VECTOR_SIZE, BOARD_CHANNELS, build_aux_vector, build_board_tensor, state_to_numpy
from .search import Minimax, MinimaxConfig, SearchResult, create_search

__all__ = [
    "agents",
    "core",
    "difficulty",
    "env",
    "evaluation",
    "features",
    "search",
    "validation",
    "Coordinate",
    "GameState",
    "Move",
    "MovementRule",
    "Side",
    "create_initial_state",
    "legal_moves",
    "state_from_layout",
    "Evaluator",
    "ScoreEvaluator",
    "ScoreDifferenceEvaluator",
    "PositionalEvaluator",
    "get_evaluator",
    "Minimax",
    "MinimaxConfig",
    "SearchResult",
    "create_search",
    "DEFAULT_DIFFICULTIES",
    "DifficultyConfig",
    "build_search",
    "load_difficulties",
    "resolve_difficulty",
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "MinimaxPolicy",
    "MatchResult",
    "play_game",
    "play_match",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
    "SmartHorsesEnv",
]
