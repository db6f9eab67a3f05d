"""Coin-flip baseline bot."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from cucu_engine.state import PlayerAction
from strategies.base import Strategy

if TYPE_CHECKING:
    from strategies.base import TurnView


class RandomStrategy(Strategy):
    """Swaps with a fixed probability, ignoring its own card.

    Any sensible bot should beat this one; the simulator uses it as the
    reference seat.
    """

    def __init__(self, seed: int | None = None, swap_probability: float = 0.5):
        if not 0.0 <= swap_probability <= 1.0:
            raise ValueError(f"swap_probability must be in [0, 1], got {swap_probability}")
        self.swap_probability = swap_probability
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        if self.swap_probability == 0.5:
            return "Random"
        return f"Random(p={self.swap_probability:g})"

    def select_action(self, view: TurnView) -> PlayerAction:
        if self._rng.random() < self.swap_probability:
            return PlayerAction.SWAP
        return PlayerAction.KEEP

    def reset_seed(self, seed: int | None = None) -> None:
        """Restart the coin flips from a new seed."""
        self._rng = random.Random(seed)
