#!/usr/bin/env python3
"""Evaluate each difficulty tier against a baseline policy."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List

from smart_horses.agents import GreedyPolicy, MinimaxPolicy, RandomPolicy
from smart_horses.core import Side
from smart_horses.difficulty import DEFAULT_DIFFICULTIES, build_search, load_difficulties, resolve_difficulty
from smart_horses.evaluation import play_match


def evaluate_table(table, *, baseline: str, episodes: int, seed: int) -> List[Dict]:
    results = []
    for name, difficulty in table.items():
        ai_policy = MinimaxPolicy(build_search(difficulty, Side.SECOND))
        baseline_policy = RandomPolicy() if baseline == "random" else GreedyPolicy()
        result = play_match(baseline_policy, ai_policy, episodes=episodes, seed=seed)
        results.append(
            {
                "difficulty": name,
                "depth": difficulty.depth,
                "heuristic": difficulty.heuristic,
                "games": result.games_played,
                "ai_wins": result.second_wins,
                "baseline_wins": result.first_wins,
                "draws": result.draws,
                "ai_winrate": result.winrate_second(),
                "average_length": result.average_length,
                "average_margin": -result.average_margin,
            }
        )
    return results


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/difficulties.yaml")
    parser.add_argument("--difficulty", action="append", help="Restrict to these tiers")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--baseline", choices=["random", "greedy"], default="greedy")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    table = DEFAULT_DIFFICULTIES
    cfg_path = Path(args.config)
    if cfg_path.exists():
        table = load_difficulties(cfg_path)
    if args.difficulty:
        table = {name: resolve_difficulty(name, table) for name in args.difficulty}

    output = evaluate_table(table, baseline=args.baseline, episodes=args.episodes, seed=args.seed)
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
