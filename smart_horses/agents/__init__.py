"""Move-selection policies for both horses."""

from .policy import GreedyPolicy, MinimaxPolicy, Policy, RandomPolicy

__all__ = ["Policy", "RandomPolicy", "GreedyPolicy", "MinimaxPolicy"]
