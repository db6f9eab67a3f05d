"""Session orchestration and snapshot storage for Cucu front ends."""

from core.repository import InMemorySnapshotRepository, SnapshotRepository
from core.session_manager import GameSessionManager

__all__ = [
    "GameSessionManager",
    "InMemorySnapshotRepository",
    "SnapshotRepository",
]
