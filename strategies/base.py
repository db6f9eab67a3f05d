"""Base strategy interface for Cucu players."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cucu_engine.state import GameSnapshot, Player, PlayerAction


@dataclass(frozen=True, slots=True)
class TurnView:
    """What the acting player is allowed to know on their turn.

    Attributes:
        username: The acting player
        card_value: Their own hidden card
        seat: Their position in the turn order
        player_count: Number of seated players
        swaps_with_deck: Whether the swap partner is the deck card
    """

    username: str
    card_value: int
    seat: int
    player_count: int

    @property
    def swaps_with_deck(self) -> bool:
        return self.seat == self.player_count - 1


class Strategy(ABC):
    """Abstract base class for player strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this strategy."""
        ...

    @abstractmethod
    def select_action(self, view: TurnView) -> PlayerAction:
        """Choose whether to keep or swap.

        Args:
            view: The acting player's view of the game.

        Returns:
            The selected action.
        """
        ...

    def on_game_start(self, snapshot: GameSnapshot, username: str) -> None:
        """Called when a game starts.

        Override to initialize per-game state.

        Args:
            snapshot: State right after dealing.
            username: Which player this strategy controls.
        """
        pass

    def on_game_end(self, snapshot: GameSnapshot, losers: tuple[Player, ...]) -> None:
        """Called when a game ends.

        Args:
            snapshot: Final game state.
            losers: Players holding the lowest card (empty on a full tie).
        """
        pass
