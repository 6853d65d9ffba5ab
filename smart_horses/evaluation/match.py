from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from smart_horses.agents import Policy
from smart_horses.core import GameState, Side, create_initial_state

logger = logging.getLogger(__name__)

DEFAULT_MAX_PLY = 200

StateFactory = Callable[[np.random.Generator], GameState]


@dataclass
class GameOutcome:
    winner: Optional[Side]
    scores: Tuple[int, int]
    plies: int
    completed: bool

    @property
    def margin(self) -> int:
        return self.scores[0] - self.scores[1]


@dataclass
class MatchResult:
    games_played: int
    first_wins: int
    second_wins: int
    draws: int
    average_length: float
    average_margin: float

    def winrate_first(self) -> float:
        return self.first_wins / max(1, self.games_played)

    def winrate_second(self) -> float:
        return self.second_wins / max(1, self.games_played)


def play_game(
    policy_first: Policy,
    policy_second: Policy,
    state: GameState,
    *,
    max_ply: int = DEFAULT_MAX_PLY,
) -> GameOutcome:
    """Play ``state`` in place until no points remain or the game stalls."""
    policies = {Side.FIRST: policy_first, Side.SECOND: policy_second}
    consecutive_skips = 0

    while state.has_points_remaining() and state.ply_count < max_ply:
        side = state.current_player
        move = policies[side].select(state.copy())
        if move is None:
            if not state.skip_turn():
                raise RuntimeError(f"Policy for {side.name} returned no move while moves are available.")
            consecutive_skips += 1
            if consecutive_skips >= 2:
                logger.info("Neither horse can move; stopping at ply %d", state.ply_count)
                break
            continue
        if not state.make_move(move.origin, move.target):
            raise ValueError(f"Policy for {side.name} returned illegal move {move}.")
        consecutive_skips = 0

    first, second = state.score_for(Side.FIRST), state.score_for(Side.SECOND)
    winner: Optional[Side] = None
    if first > second:
        winner = Side.FIRST
    elif second > first:
        winner = Side.SECOND
    return GameOutcome(
        winner=winner,
        scores=(first, second),
        plies=state.ply_count,
        completed=not state.has_points_remaining(),
    )


def play_match(
    policy_first: Policy,
    policy_second: Policy,
    *,
    episodes: int,
    seed: Optional[int] = None,
    state_factory: Optional[StateFactory] = None,
    max_ply: int = DEFAULT_MAX_PLY,
) -> MatchResult:
    state_factory = state_factory or (lambda rng: create_initial_state(rng=rng))
    rng = np.random.default_rng(seed)

    first_wins = 0
    second_wins = 0
    draws = 0
    total_ply = 0
    total_margin = 0

    for episode in range(episodes):
        game_seed = int(rng.integers(2**31))
        state = state_factory(np.random.default_rng(game_seed))
        outcome = play_game(
            policy_first.spawn(game_seed),
            policy_second.spawn(game_seed + 1),
            state,
            max_ply=max_ply,
        )
        total_ply += outcome.plies
        total_margin += outcome.margin
        if outcome.winner is Side.FIRST:
            first_wins += 1
        elif outcome.winner is Side.SECOND:
            second_wins += 1
        else:
            draws += 1
        logger.info("Game %d: scores=%s winner=%s", episode + 1, outcome.scores, outcome.winner)

    return MatchResult(
        games_played=episodes,
        first_wins=first_wins,
        second_wins=second_wins,
        draws=draws,
        average_length=total_ply / max(1, episodes),
        average_margin=total_margin / max(1, episodes),
    )
