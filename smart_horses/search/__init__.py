"""Adversarial search for the automated opponent."""

from .minimax import EvaluationFn, Minimax, MinimaxConfig, SearchResult, create_search

__all__ = ["EvaluationFn", "Minimax", "MinimaxConfig", "SearchResult", "create_search"]
