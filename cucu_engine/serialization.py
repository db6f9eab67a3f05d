"""Document form of game snapshots for storage collaborators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from cucu_engine.errors import InvalidSnapshotError
from cucu_engine.state import GamePhase, GameSnapshot, PlayerSnapshot


class PlayerDocument(BaseModel):
    """A player as stored in a snapshot document."""

    username: str
    card_value: int | None = None


class SnapshotDocument(BaseModel):
    """A snapshot as stored by a repository.

    Only the shape is checked here; phase consistency is checked when the
    snapshot is imported into an engine.
    """

    phase: GamePhase
    current_player_index: int = 0
    deck_card_value: int | None = None
    players: list[PlayerDocument] | None = Field(default_factory=list)

    @field_validator("phase", mode="before")
    @classmethod
    def parse_phase(cls, value: Any) -> GamePhase:
        """Accept phase names in any case or the ordinal used by older documents."""
        if isinstance(value, GamePhase):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return GamePhase(value)
            except ValueError:
                raise ValueError(f"Unsupported game phase: {value}") from None
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key == "INPROGRESS":
                key = "IN_PROGRESS"
            if key in GamePhase.__members__:
                return GamePhase[key]
        raise ValueError(f"Unsupported game phase: {value!r}")

    @field_serializer("phase")
    def dump_phase(self, phase: GamePhase) -> str:
        return phase.name

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot) -> SnapshotDocument:
        return cls(
            phase=snapshot.phase,
            current_player_index=snapshot.current_player_index,
            deck_card_value=snapshot.deck_card_value,
            players=(
                [PlayerDocument(username=p.username, card_value=p.card_value) for p in snapshot.players]
                if snapshot.players is not None
                else None
            ),
        )

    def to_snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            current_player_index=self.current_player_index,
            deck_card_value=self.deck_card_value,
            players=(
                tuple(PlayerSnapshot(p.username, p.card_value) for p in self.players)
                if self.players is not None
                else None
            ),
        )


def snapshot_to_dict(snapshot: GameSnapshot) -> dict:
    """Convert a snapshot to a JSON-compatible dictionary."""
    return SnapshotDocument.from_snapshot(snapshot).model_dump()


def snapshot_from_dict(data: dict) -> GameSnapshot:
    """Build a snapshot from a stored dictionary.

    Raises:
        InvalidSnapshotError: If the document is malformed or names an
            unsupported phase.
    """
    try:
        return SnapshotDocument.model_validate(data).to_snapshot()
    except ValidationError as e:
        raise InvalidSnapshotError(f"Malformed snapshot document: {e}") from e


def snapshot_to_json(snapshot: GameSnapshot) -> str:
    """Serialize a snapshot to a JSON string."""
    return SnapshotDocument.from_snapshot(snapshot).model_dump_json()


def snapshot_from_json(payload: str | bytes) -> GameSnapshot:
    """Parse a snapshot from a JSON string.

    Raises:
        InvalidSnapshotError: If the payload is not a valid snapshot document.
    """
    try:
        return SnapshotDocument.model_validate_json(payload).to_snapshot()
    except ValidationError as e:
        raise InvalidSnapshotError(f"Malformed snapshot document: {e}") from e
