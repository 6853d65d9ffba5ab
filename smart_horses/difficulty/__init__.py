"""Difficulty tiers mapping to search depth and heuristic."""

from .table import (
    DEFAULT_DIFFICULTIES,
    DifficultyConfig,
    DifficultyTable,
    build_search,
    load_difficulties,
    parse_difficulties,
    resolve_difficulty,
)

__all__ = [
    "DEFAULT_DIFFICULTIES",
    "DifficultyConfig",
    "DifficultyTable",
    "build_search",
    "load_difficulties",
    "parse_difficulties",
    "resolve_difficulty",
]
