"""Consistency checks for snapshots before they are adopted by an engine."""

from __future__ import annotations

from cucu_engine.cards import is_valid_card_value, is_valid_deck_value
from cucu_engine.errors import InvalidSnapshotError
from cucu_engine.state import GamePhase, GameSnapshot


def validate_snapshot(snapshot: GameSnapshot, *, legacy: bool = False) -> None:
    """Check that a snapshot is internally consistent for its phase.

    Args:
        snapshot: Snapshot to check.
        legacy: Accept rosters of more than one player without checking
            their card values, as older stored games were written that way.

    Raises:
        InvalidSnapshotError: If any check fails or the phase is unknown.
    """
    if snapshot.phase == GamePhase.SETUP:
        _validate_setup(snapshot)
    elif snapshot.phase == GamePhase.IN_PROGRESS:
        _validate_in_progress(snapshot, legacy)
    elif snapshot.phase == GamePhase.END:
        _validate_end(snapshot, legacy)
    else:
        raise InvalidSnapshotError(f"Unsupported game phase: {snapshot.phase!r}")


def _validate_setup(snapshot: GameSnapshot) -> None:
    if snapshot.current_player_index != 0:
        raise InvalidSnapshotError(
            f"Setup snapshot must point at player 0, got {snapshot.current_player_index}"
        )
    if snapshot.deck_card_value is not None:
        raise InvalidSnapshotError("Setup snapshot must not have a deck card")
    if snapshot.players is None:
        raise InvalidSnapshotError("Snapshot has no roster")
    if any(p.card_value is not None for p in snapshot.players):
        raise InvalidSnapshotError("Setup snapshot must not have dealt cards")


def _validate_in_progress(snapshot: GameSnapshot, legacy: bool) -> None:
    if snapshot.current_player_index < 0:
        raise InvalidSnapshotError(
            f"Negative player index: {snapshot.current_player_index}"
        )
    if not is_valid_deck_value(snapshot.deck_card_value):
        raise InvalidSnapshotError(
            f"Deck card must be between 1 and 8, got {snapshot.deck_card_value}"
        )
    if snapshot.players is None:
        raise InvalidSnapshotError("Snapshot has no roster")
    if snapshot.current_player_index >= snapshot.player_count - 1:
        raise InvalidSnapshotError(
            f"Player index {snapshot.current_player_index} out of range "
            f"for {snapshot.player_count} players"
        )
    _validate_card_values(snapshot, legacy)


def _validate_end(snapshot: GameSnapshot, legacy: bool) -> None:
    if snapshot.deck_card_value is None:
        raise InvalidSnapshotError("Finished game snapshot has no deck card")
    if snapshot.players is None:
        raise InvalidSnapshotError("Snapshot has no roster")
    _validate_card_values(snapshot, legacy)
    if snapshot.current_player_index == snapshot.player_count - 1:
        raise InvalidSnapshotError(
            "Finished game snapshot still points at the last player"
        )


def _validate_card_values(snapshot: GameSnapshot, legacy: bool) -> None:
    if legacy and snapshot.player_count > 1:
        return
    for player in snapshot.players:
        if not is_valid_card_value(player.card_value):
            raise InvalidSnapshotError(
                f"Player {player.username!r} has invalid card value {player.card_value}"
            )
