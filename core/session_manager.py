"""Per-session orchestration for front ends such as chat bots.

Each request names an opaque session key (a chat id, say). The manager
keeps one live engine per key, rehydrates it from the repository on first
use, serializes all operations on the same key, and stores a fresh snapshot
after every successful change.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from cucu_engine.engine import GameEngine
from cucu_engine.errors import InvalidSnapshotError
from cucu_engine.state import ActionResult, GameSnapshot, Player, PlayerAction

from core.repository import InMemorySnapshotRepository, SnapshotRepository

logger = logging.getLogger(__name__)


class GameSessionManager:
    """Manages one Cucu game per session key."""

    def __init__(
        self,
        repository: SnapshotRepository | None = None,
        seed: int | None = None,
        legacy_snapshot_rules: bool = False,
    ):
        """Initialize the manager.

        Args:
            repository: Snapshot store; defaults to an in-memory one.
            seed: Random seed passed to every new engine.
            legacy_snapshot_rules: Rehydrate with the lenient snapshot rules.
        """
        self.repository = repository if repository is not None else InMemorySnapshotRepository()
        self._seed = seed
        self._legacy_snapshot_rules = legacy_snapshot_rules
        self._engines: dict[str, GameEngine] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _new_engine(self) -> GameEngine:
        return GameEngine(seed=self._seed, legacy_snapshot_rules=self._legacy_snapshot_rules)

    def _lock_for(self, session_key: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_key)
            if lock is None:
                lock = self._locks[session_key] = threading.Lock()
            return lock

    def _load(self, session_key: str) -> GameEngine:
        """Return the live engine for a key, rehydrating it if needed."""
        engine = self._engines.get(session_key)
        if engine is not None:
            return engine

        engine = self._new_engine()
        snapshot = self.repository.get(session_key)
        if snapshot is None:
            logger.info("Created new session %s", session_key)
        else:
            try:
                engine.import_state(snapshot)
            except InvalidSnapshotError:
                logger.warning("Stored snapshot for session %s is invalid", session_key)
                raise
            logger.info("Rehydrated session %s (%s)", session_key, engine.phase.name)

        with self._registry_lock:
            self._engines[session_key] = engine
        return engine

    @contextmanager
    def _session(self, session_key: str, persist: bool = True) -> Iterator[GameEngine]:
        """Hold the key's lock and yield its engine, saving on success."""
        with self._lock_for(session_key):
            engine = self._load(session_key)
            yield engine
            if persist:
                self.repository.save(session_key, engine.export_state())
                logger.debug("Saved session %s", session_key)

    # Operations ------------------------------------------------------------

    def join(self, session_key: str, username: str) -> Player:
        """Seat a player in the session's game."""
        with self._session(session_key) as engine:
            player = engine.add_player(username)
        logger.info("%s joined session %s", username, session_key)
        return player

    def start(self, session_key: str) -> Player:
        """Deal the cards. Returns the first player to act."""
        with self._session(session_key) as engine:
            engine.start()
            first = engine.current_player
        logger.info("Session %s started with %d players", session_key, len(engine.players))
        return first

    def submit_action(
        self, session_key: str, username: str, action: PlayerAction
    ) -> ActionResult:
        """Resolve one action for the session's current player."""
        with self._session(session_key) as engine:
            result = engine.submit_action(username, action)
        if result.is_showdown:
            logger.info(
                "Session %s ended, losers: %s",
                session_key,
                [p.username for p in result.losers],
            )
        return result

    def new_game(self, session_key: str) -> None:
        """Replace the session's game with an empty one in SETUP."""
        with self._lock_for(session_key):
            engine = self._new_engine()
            with self._registry_lock:
                self._engines[session_key] = engine
            self.repository.save(session_key, engine.export_state())
        logger.info("Reset session %s", session_key)

    # Queries ---------------------------------------------------------------

    def get_snapshot(self, session_key: str) -> GameSnapshot:
        with self._session(session_key, persist=False) as engine:
            return engine.export_state()

    def get_losers(self, session_key: str) -> list[str]:
        """Usernames currently holding the lowest card."""
        with self._session(session_key, persist=False) as engine:
            return [p.username for p in engine.get_losers()]

    def end_session(self, session_key: str) -> bool:
        """Drop the live engine for a key. The stored snapshot is kept.

        Waits for any in-flight operation on the key. The key's lock is
        never discarded, so later requests still queue behind it.
        """
        with self._lock_for(session_key), self._registry_lock:
            return self._engines.pop(session_key, None) is not None

    def list_sessions(self) -> list[dict]:
        """List all live sessions, each read under its own lock."""
        with self._registry_lock:
            keys = list(self._engines)

        sessions = []
        for key in keys:
            with self._lock_for(key):
                engine = self._engines.get(key)
                if engine is None:
                    continue
                current = engine.current_player
                sessions.append(
                    {
                        "session_key": key,
                        "phase": engine.phase.name,
                        "players": [p.username for p in engine.players],
                        "current_player": current.username if current else None,
                    }
                )
        return sessions
