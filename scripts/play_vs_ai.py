#!/usr/bin/env python3
"""Play Smart Horses against the minimax opponent via the console."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from smart_horses.core import Coordinate, GameState, MoveRecord, MovementRule, Side, create_initial_state
from smart_horses.difficulty import DEFAULT_DIFFICULTIES, build_search, load_difficulties, resolve_difficulty
from smart_horses.search import Minimax

DEFAULT_CONFIG = Path("configs/difficulties.yaml")


def parse_target(raw: str) -> Optional[Coordinate]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
        return None
    return Coordinate(int(parts[0]), int(parts[1]))


def format_status(state: GameState) -> str:
    return (
        f"White (you): {state.score_for(Side.FIRST)}  "
        f"Black (AI): {state.score_for(Side.SECOND)}  "
        f"Points left: {state.remaining_points}"
    )


def prompt_human_move(state: GameState) -> Coordinate:
    targets = state.legal_targets(Side.FIRST)
    print("Legal destinations: " + ", ".join(f"({r},{c})" for r, c in targets))
    while True:
        raw = input("Destination as 'row col' (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        target = parse_target(raw)
        if target is None:
            print("Enter two integers, e.g. '2 3'.")
            continue
        if target in targets:
            return target
        print("That square is not reachable. Try again.")


def describe_record(record: Optional[MoveRecord]) -> List[str]:
    if record is None:
        return []
    lines = []
    if record.bonus_collected:
        lines.append(f"{record.side.name} picks up a x{record.bonus_collected} bonus")
    if record.points_gained:
        lines.append(f"{record.side.name} gains {record.points_gained} (x{record.multiplier_applied})")
    return lines


def play_turn(state: GameState, engine: Minimax) -> bool:
    """Advance one turn; return False when neither horse could move."""
    side = state.current_player
    if not state.legal_targets(side):
        print(f"{side.name} horse is boxed in and passes.")
        state.skip_turn()
        return bool(state.legal_targets(state.current_player))

    if side == Side.FIRST:
        target = prompt_human_move(state)
        state.make_move(state.piece_for(Side.FIRST), target)
    else:
        result = engine.search(state)
        if result.move is None:
            return False
        state.make_move(result.move.origin, result.move.target)
        print(f"AI moves {tuple(result.move.origin)} -> {tuple(result.move.target)} (eval {result.value:+.2f})")

    for line in describe_record(state.last_move):
        print(line)
    return True


def play_interactive(args: argparse.Namespace) -> None:
    table = DEFAULT_DIFFICULTIES
    config_path = Path(args.config) if args.config else None
    if config_path is not None and config_path.exists():
        table = load_difficulties(config_path)
    difficulty = resolve_difficulty(args.difficulty, table)
    engine = build_search(difficulty, Side.SECOND)
    print(f"Difficulty {difficulty.name}: depth {difficulty.depth}, heuristic {difficulty.heuristic}")

    state = create_initial_state(
        args.seed,
        movement=MovementRule(args.movement),
        starting_player=Side.SECOND if args.ai_starts else Side.FIRST,
    )

    while state.has_points_remaining():
        print("\nBoard:")
        print(state.board_string())
        print(format_status(state))
        if not play_turn(state, engine):
            print("Neither horse can move.")
            break

    print("\nFinal board:")
    print(state.board_string())
    print(format_status(state))
    first, second = state.score_for(Side.FIRST), state.score_for(Side.SECOND)
    if first > second:
        print("You win!")
    elif second > first:
        print("The AI wins.")
    else:
        print("Draw.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Smart Horses in the console against the AI.")
    parser.add_argument("--difficulty", default="beginner")
    parser.add_argument("--config", default=str(DEFAULT_CONFIG), help="YAML difficulty table")
    parser.add_argument("--seed", type=int, help="Seed for the board layout")
    parser.add_argument("--movement", choices=[rule.value for rule in MovementRule], default="knight")
    parser.add_argument("--ai-starts", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    play_interactive(args)


if __name__ == "__main__":
    main()
