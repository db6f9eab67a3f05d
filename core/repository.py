"""Snapshot storage contract used by the session manager.

The engine only needs to fetch and store one snapshot per opaque session
key; any document store can sit behind this interface.
"""

from __future__ import annotations

import threading
from typing import Protocol

from cucu_engine.serialization import snapshot_from_dict, snapshot_to_dict
from cucu_engine.state import GameSnapshot


class SnapshotRepository(Protocol):
    """Stores one snapshot per session key."""

    def get(self, session_key: str) -> GameSnapshot | None:
        """Return the stored snapshot, or None if the key is unknown."""
        ...

    def save(self, session_key: str, snapshot: GameSnapshot) -> None:
        """Create or replace the snapshot for a key."""
        ...


class InMemorySnapshotRepository:
    """Repository keeping snapshot documents in a dictionary.

    Documents are stored in their serialized form so that stored data never
    aliases live engine objects.
    """

    def __init__(self):
        self._documents: dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, session_key: str) -> GameSnapshot | None:
        with self._lock:
            document = self._documents.get(session_key)
        if document is None:
            return None
        return snapshot_from_dict(document)

    def save(self, session_key: str, snapshot: GameSnapshot) -> None:
        document = snapshot_to_dict(snapshot)
        with self._lock:
            self._documents[session_key] = document

    def delete(self, session_key: str) -> bool:
        """Remove a stored snapshot. Returns False if the key was unknown."""
        with self._lock:
            return self._documents.pop(session_key, None) is not None

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._documents)

    def __contains__(self, session_key: str) -> bool:
        with self._lock:
            return session_key in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
