"""Threshold heuristic: swap low cards, hold high ones.

Player cards are uniform over 1-10 and the deck card over 1-8, so the
expected value of a swap partner is 5.5 for a player and 4.5 for the deck.
Swapping pays off when the held card is below that.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cucu_engine.cards import MAX_CARD_VALUE, MAX_DECK_VALUE, MIN_CARD_VALUE
from cucu_engine.state import PlayerAction
from strategies.base import Strategy

if TYPE_CHECKING:
    from strategies.base import TurnView


class HeuristicStrategy(Strategy):
    """Swap when the held card is at or below a threshold."""

    def __init__(self, threshold: int = 5, deck_threshold: int = 4):
        """Initialize the heuristic.

        Args:
            threshold: Highest card to give away to the next player.
            deck_threshold: Highest card to trade for the deck card.
        """
        if not MIN_CARD_VALUE <= threshold <= MAX_CARD_VALUE:
            raise ValueError(f"threshold must be between 1 and 10, got {threshold}")
        if not MIN_CARD_VALUE <= deck_threshold <= MAX_DECK_VALUE:
            raise ValueError(f"deck_threshold must be between 1 and 8, got {deck_threshold}")
        self.threshold = threshold
        self.deck_threshold = deck_threshold

    @property
    def name(self) -> str:
        return f"Heuristic({self.threshold})"

    def select_action(self, view: TurnView) -> PlayerAction:
        limit = self.deck_threshold if view.swaps_with_deck else self.threshold
        if view.card_value <= limit:
            return PlayerAction.SWAP
        return PlayerAction.KEEP
