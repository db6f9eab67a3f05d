"""Tests for the in-memory snapshot repository."""

from core.repository import InMemorySnapshotRepository
from cucu_engine.state import GamePhase, GameSnapshot, PlayerSnapshot


class TestInMemorySnapshotRepository:
    def test_unknown_key(self):
        repo = InMemorySnapshotRepository()
        assert repo.get("chat-1") is None
        assert "chat-1" not in repo

    def test_save_and_get(self):
        repo = InMemorySnapshotRepository()
        snapshot = GameSnapshot(phase=GamePhase.SETUP, players=(PlayerSnapshot("a"),))
        repo.save("chat-1", snapshot)

        assert repo.get("chat-1") == snapshot
        assert "chat-1" in repo
        assert len(repo) == 1
        assert repo.keys() == ["chat-1"]

    def test_save_replaces(self):
        repo = InMemorySnapshotRepository()
        repo.save("chat-1", GameSnapshot(phase=GamePhase.SETUP))
        repo.save("chat-1", GameSnapshot(phase=GamePhase.END, current_player_index=2, deck_card_value=3))
        assert repo.get("chat-1").phase == GamePhase.END
        assert len(repo) == 1

    def test_stores_documents(self):
        repo = InMemorySnapshotRepository()
        repo.save("chat-1", GameSnapshot(phase=GamePhase.SETUP))
        assert repo._documents["chat-1"]["phase"] == "SETUP"

    def test_delete(self):
        repo = InMemorySnapshotRepository()
        repo.save("chat-1", GameSnapshot(phase=GamePhase.SETUP))
        assert repo.delete("chat-1")
        assert not repo.delete("chat-1")
        assert repo.get("chat-1") is None
