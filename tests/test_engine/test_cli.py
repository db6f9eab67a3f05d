"""Tests for CLI formatting helpers."""

from cucu_engine.cli import format_result, format_state
from cucu_engine.engine import GameEngine
from cucu_engine.state import (
    ActionResult,
    ActionResultType,
    GamePhase,
    GameSnapshot,
    Player,
    PlayerSnapshot,
)


def make_engine() -> GameEngine:
    engine = GameEngine()
    engine.import_state(
        GameSnapshot(
            phase=GamePhase.IN_PROGRESS,
            current_player_index=0,
            deck_card_value=3,
            players=(PlayerSnapshot("alice", 7), PlayerSnapshot("bob", 9)),
        )
    )
    return engine


class TestFormatState:
    def test_hides_other_cards(self):
        text = format_state(make_engine(), viewer="alice")
        assert "alice: 7" in text
        assert "bob: [hidden]" in text
        assert "Deck card" not in text
        assert "→ 1. alice" in text

    def test_show_all(self):
        text = format_state(make_engine(), show_all=True)
        assert "bob: 9 (skip)" in text
        assert "Deck card: 3" in text


class TestFormatResult:
    def test_swap(self):
        result = ActionResult(
            ActionResultType.SWAPPED, acting_player=Player("alice", 2), next_player=Player("bob", 7)
        )
        assert format_result(result) == "alice swapped. Next: bob"

    def test_showdown(self):
        result = ActionResult(ActionResultType.SHOWDOWN, losers=(Player("alice", 1),))
        assert format_result(result) == "SHOWDOWN - lowest card: alice"

    def test_full_tie(self):
        result = ActionResult(ActionResultType.SHOWDOWN, losers=())
        assert "nobody loses" in format_result(result)
