"""Game strategies for Cucu."""

from strategies.base import Strategy, TurnView
from strategies.heuristic import HeuristicStrategy
from strategies.random_strategy import RandomStrategy

__all__ = [
    "Strategy",
    "TurnView",
    "RandomStrategy",
    "HeuristicStrategy",
]
