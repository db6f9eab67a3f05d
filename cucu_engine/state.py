"""State models for Cucu: phases, players, snapshots and action results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class GamePhase(IntEnum):
    """Lifecycle phase of a game. Transitions only move forward."""

    SETUP = 0  # Players join, no cards dealt
    IN_PROGRESS = 1  # Cards dealt, actions accepted
    END = 2  # Turn order exhausted, losers decided


class PlayerAction(IntEnum):
    """What a player may do on their turn."""

    KEEP = 0
    SWAP = 1


class ActionResultType(IntEnum):
    """Outcome of a submitted action."""

    KEPT = 0
    SWAPPED = 1
    BLOCKED = 2  # Swap target held a 10
    SKIPPED = 3  # Swap passed over one or more 9s
    SHOWDOWN = 4  # Turn order exhausted, game over


@dataclass(slots=True)
class Player:
    """A seat in the roster.

    Attributes:
        username: Unique name within the game
        card_value: Hidden card, None until dealt
    """

    username: str
    card_value: int | None = None

    def __str__(self) -> str:
        return self.username


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    """Exported copy of a player."""

    username: str
    card_value: int | None = None


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Immutable, storage-agnostic copy of a whole game.

    Attributes:
        phase: Phase at export time
        current_player_index: Index of the player whose action is awaited
        deck_card_value: The undealt card, swap partner of the last player
        players: Roster in turn order (None only for malformed records)
    """

    phase: GamePhase
    current_player_index: int = 0
    deck_card_value: int | None = None
    players: tuple[PlayerSnapshot, ...] | None = ()

    @property
    def player_count(self) -> int:
        return len(self.players) if self.players is not None else 0


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of one accepted action.

    acting_player and next_player are set for every kind except SHOWDOWN,
    which instead carries the losers (possibly empty on a full tie).
    """

    kind: ActionResultType
    acting_player: Player | None = None
    next_player: Player | None = None
    losers: tuple[Player, ...] | None = field(default=None)

    @property
    def is_showdown(self) -> bool:
        return self.kind == ActionResultType.SHOWDOWN
