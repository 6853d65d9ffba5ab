from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import yaml

from smart_horses.core import Side
from smart_horses.evaluation.heuristics import EVALUATORS, get_evaluator
from smart_horses.search import Minimax, MinimaxConfig


# Pure score terms are flat until a point is inside the horizon.
DEFAULT_HEURISTIC = "positional"


@dataclass(frozen=True)
class DifficultyConfig:
    name: str
    depth: int
    heuristic: str = DEFAULT_HEURISTIC

    def __post_init__(self) -> None:
        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
            raise ValueError(f"Difficulty {self.name!r} needs a positive integer depth, got {self.depth!r}.")
        if self.heuristic not in EVALUATORS:
            known = ", ".join(sorted(EVALUATORS))
            raise ValueError(f"Difficulty {self.name!r} uses unknown heuristic {self.heuristic!r}; known: {known}.")


DifficultyTable = Dict[str, DifficultyConfig]

DEFAULT_DIFFICULTIES: DifficultyTable = {
    "beginner": DifficultyConfig("beginner", depth=2),
    "amateur": DifficultyConfig("amateur", depth=4),
    "expert": DifficultyConfig("expert", depth=6),
}


def parse_difficulties(raw: Mapping[str, Mapping]) -> DifficultyTable:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Difficulty table must be a mapping of name -> entry, got {type(raw).__name__}.")
    table: DifficultyTable = {}
    for name, entry in raw.items():
        if not isinstance(entry, Mapping):
            raise ValueError(f"Difficulty {name!r} must be a mapping with a 'depth' key.")
        if "depth" not in entry:
            raise ValueError(f"Difficulty {name!r} is missing 'depth'.")
        table[str(name)] = DifficultyConfig(
            name=str(name),
            depth=entry["depth"],
            heuristic=entry.get("heuristic", DEFAULT_HEURISTIC),
        )
    if not table:
        raise ValueError("Difficulty table is empty.")
    return table


def load_difficulties(path: Union[str, Path]) -> DifficultyTable:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a mapping of difficulties, got {type(data).__name__}.")
    # Accept either a bare mapping or one nested under "difficulties".
    raw = data.get("difficulties", data)
    return parse_difficulties(raw)


def resolve_difficulty(name: str, table: Optional[DifficultyTable] = None) -> DifficultyConfig:
    table = DEFAULT_DIFFICULTIES if table is None else table
    try:
        return table[name]
    except KeyError:
        known = ", ".join(table)
        raise KeyError(f"Unknown difficulty {name!r}; expected one of: {known}") from None


def build_search(
    difficulty: Union[str, DifficultyConfig],
    side: Side = Side.SECOND,
    *,
    table: Optional[DifficultyTable] = None,
    alpha_beta: bool = True,
) -> Minimax:
    if isinstance(difficulty, str):
        difficulty = resolve_difficulty(difficulty, table)
    evaluator = get_evaluator(difficulty.heuristic, side)
    return Minimax(
        evaluator,
        MinimaxConfig(depth=difficulty.depth, alpha_beta=alpha_beta, maximizing_side=side),
    )
