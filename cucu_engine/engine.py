"""Rules engine for Cucu.

A game is a one-way state machine: SETUP while players join, IN_PROGRESS
once cards are dealt, END when the turn order runs out. Every turn moves
the pointer through the roster with the same two helpers, ``_advance`` and
``_peek``, so swaps, blocks and skip chains agree on who acts next.
"""

from __future__ import annotations

import logging
import random

from cucu_engine.cards import BLOCK_VALUE, SKIP_VALUE, deal_card_value, deal_deck_value
from cucu_engine.errors import (
    DuplicatePlayerError,
    InsufficientPlayersError,
    InvalidActionError,
    InvalidPhaseError,
    NotYourTurnError,
)
from cucu_engine.scoring import find_losers
from cucu_engine.state import (
    ActionResult,
    ActionResultType,
    GamePhase,
    GameSnapshot,
    Player,
    PlayerAction,
    PlayerSnapshot,
)
from cucu_engine.validation import validate_snapshot

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


class GameEngine:
    """A single game of Cucu.

    The engine does no locking; callers must not submit concurrent
    operations to the same instance.
    """

    def __init__(
        self,
        seed: int | None = None,
        legacy_snapshot_rules: bool = False,
    ):
        """Create an empty game in the SETUP phase.

        Args:
            seed: Random seed for dealing (None for system randomness).
            legacy_snapshot_rules: Validate imported snapshots with the
                lenient per-player rule used by older stored games.
        """
        self._rng = random.Random(seed)
        self.legacy_snapshot_rules = legacy_snapshot_rules
        self._players: list[Player] = []
        self._phase = GamePhase.SETUP
        self._current_player_index = 0
        self._deck_card_value: int | None = None

    # Read-only views -------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def players(self) -> tuple[Player, ...]:
        """Roster in turn order."""
        return tuple(self._players)

    @property
    def current_player_index(self) -> int:
        return self._current_player_index

    @property
    def deck_card_value(self) -> int | None:
        return self._deck_card_value

    @property
    def current_player(self) -> Player | None:
        """Player whose action is awaited, None before start or after the end."""
        return self._player_at(self._current_player_index)

    @property
    def next_player(self) -> Player | None:
        """Player after the current one, None when the deck is the swap partner."""
        return self._player_at(self._current_player_index + 1)

    @property
    def next_card_value(self) -> int | None:
        """Value the current player would swap with."""
        return self._peek()[1]

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.END

    # Roster ----------------------------------------------------------------

    def add_player(self, username: str) -> Player:
        """Add a player at the end of the turn order.

        Raises:
            InvalidPhaseError: If the game has already started.
            DuplicatePlayerError: If the username is already taken.
        """
        if self._phase != GamePhase.SETUP:
            raise InvalidPhaseError("Players can only join during setup")
        if any(p.username == username for p in self._players):
            raise DuplicatePlayerError(f"Player {username!r} already joined")

        player = Player(username)
        self._players.append(player)
        logger.debug("Player %s joined (%d seated)", username, len(self._players))
        return player

    def start(self) -> None:
        """Deal one card to each player plus the deck card and begin play.

        Raises:
            InvalidPhaseError: If the game has already started.
            InsufficientPlayersError: If fewer than two players joined.
        """
        if self._phase != GamePhase.SETUP:
            raise InvalidPhaseError("Game has already started")
        if len(self._players) < MIN_PLAYERS:
            raise InsufficientPlayersError(
                f"Need at least {MIN_PLAYERS} players, have {len(self._players)}"
            )

        for player in self._players:
            player.card_value = deal_card_value(self._rng)
        self._deck_card_value = deal_deck_value(self._rng)
        self._current_player_index = 0
        self._phase = GamePhase.IN_PROGRESS
        logger.debug("Game started with %d players", len(self._players))

    # Turns -----------------------------------------------------------------

    def submit_action(self, username: str, action: PlayerAction) -> ActionResult:
        """Resolve the current player's action.

        Args:
            username: Who is acting; must be the current player.
            action: KEEP or SWAP.

        Returns:
            The outcome. When the turn order runs out the game moves to END
            and the result is a SHOWDOWN carrying the losers.

        Raises:
            InvalidPhaseError: If the game is not in progress.
            NotYourTurnError: If username is not the current player.
            InvalidActionError: If action is not a PlayerAction value.
        """
        if self._phase != GamePhase.IN_PROGRESS:
            raise InvalidPhaseError("Actions are only accepted while the game is in progress")
        current = self.current_player
        if current is None or current.username != username:
            expected = current.username if current else None
            raise NotYourTurnError(f"It is {expected!r}'s turn, not {username!r}'s")

        try:
            action = PlayerAction(action)
        except ValueError as e:
            raise InvalidActionError(f"Unknown action: {action!r}") from e

        next_player, next_value = self._peek()

        if action == PlayerAction.KEEP:
            kind = ActionResultType.KEPT
        elif next_value == BLOCK_VALUE:
            kind = ActionResultType.BLOCKED
            self._advance()
            next_player, next_value = self._peek()
        elif next_value == SKIP_VALUE:
            kind = ActionResultType.SKIPPED
            while next_value == SKIP_VALUE and next_player is not None:
                self._advance()
                next_player, next_value = self._peek()
            self._swap(current, next_player, next_value)
        else:
            kind = ActionResultType.SWAPPED
            self._swap(current, next_player, next_value)

        self._advance()
        logger.debug("%s: %s -> %s", current.username, action.name, kind.name)

        if next_player is None:
            self._phase = GamePhase.END
            losers = tuple(self.get_losers())
            logger.debug("Showdown, losers: %s", [p.username for p in losers])
            return ActionResult(ActionResultType.SHOWDOWN, losers=losers)

        return ActionResult(kind, acting_player=current, next_player=next_player)

    def get_losers(self) -> list[Player]:
        """Players holding the lowest card, empty on a full tie."""
        return find_losers(self._players)

    def _player_at(self, index: int) -> Player | None:
        if 0 <= index < len(self._players):
            return self._players[index]
        return None

    def _peek(self) -> tuple[Player | None, int | None]:
        """Swap partner of the current player and its value (deck if last)."""
        candidate = self._player_at(self._current_player_index + 1)
        if candidate is None:
            return None, self._deck_card_value
        return candidate, candidate.card_value

    def _advance(self) -> None:
        self._current_player_index += 1

    @staticmethod
    def _swap(current: Player, partner: Player | None, partner_value: int | None) -> None:
        # Without a partner the deck card is taken and the old card discarded
        if partner is not None:
            partner.card_value = current.card_value
        current.card_value = partner_value

    # Snapshots -------------------------------------------------------------

    def export_state(self) -> GameSnapshot:
        """Return an immutable copy of the full game state."""
        return GameSnapshot(
            phase=self._phase,
            current_player_index=self._current_player_index,
            deck_card_value=self._deck_card_value,
            players=tuple(PlayerSnapshot(p.username, p.card_value) for p in self._players),
        )

    def import_state(self, snapshot: GameSnapshot) -> None:
        """Replace the whole game state with a validated snapshot.

        Raises:
            InvalidSnapshotError: If the snapshot fails its phase's checks.
        """
        validate_snapshot(snapshot, legacy=self.legacy_snapshot_rules)

        self._players = [Player(p.username, p.card_value) for p in snapshot.players]
        self._phase = GamePhase(snapshot.phase)
        self._current_player_index = snapshot.current_player_index
        self._deck_card_value = snapshot.deck_card_value
        logger.debug(
            "Imported %s game with %d players", self._phase.name, len(self._players)
        )
