"""Tests for the bot strategies."""

import pytest

from cucu_engine.state import PlayerAction
from strategies.base import TurnView
from strategies.heuristic import HeuristicStrategy
from strategies.random_strategy import RandomStrategy


def view(card_value: int, seat: int = 0, player_count: int = 4) -> TurnView:
    return TurnView(username="player", card_value=card_value, seat=seat, player_count=player_count)


class TestTurnView:
    def test_swaps_with_deck_only_in_last_seat(self):
        assert not view(5, seat=0).swaps_with_deck
        assert not view(5, seat=2).swaps_with_deck
        assert view(5, seat=3).swaps_with_deck


class TestHeuristicStrategy:
    def test_default_thresholds(self):
        strategy = HeuristicStrategy()
        assert strategy.select_action(view(5)) == PlayerAction.SWAP
        assert strategy.select_action(view(6)) == PlayerAction.KEEP
        assert strategy.select_action(view(4, seat=3)) == PlayerAction.SWAP
        assert strategy.select_action(view(5, seat=3)) == PlayerAction.KEEP

    def test_never_gives_away_high_cards(self):
        strategy = HeuristicStrategy(threshold=10, deck_threshold=8)
        assert strategy.select_action(view(10)) == PlayerAction.SWAP
        assert strategy.select_action(view(9, seat=3)) == PlayerAction.KEEP

    def test_name(self):
        assert HeuristicStrategy(threshold=3).name == "Heuristic(3)"

    def test_invalid_thresholds(self):
        with pytest.raises(ValueError):
            HeuristicStrategy(threshold=0)
        with pytest.raises(ValueError):
            HeuristicStrategy(threshold=11)
        with pytest.raises(ValueError):
            HeuristicStrategy(deck_threshold=9)


class TestRandomStrategy:
    def test_returns_an_action(self):
        strategy = RandomStrategy(seed=42)
        for card in range(1, 11):
            assert strategy.select_action(view(card)) in (PlayerAction.KEEP, PlayerAction.SWAP)

    def test_seed_is_reproducible(self):
        first = RandomStrategy(seed=7)
        second = RandomStrategy(seed=7)
        assert [first.select_action(view(3)) for _ in range(20)] == [
            second.select_action(view(3)) for _ in range(20)
        ]

    def test_reset_seed(self):
        strategy = RandomStrategy(seed=1)
        actions = [strategy.select_action(view(3)) for _ in range(10)]
        strategy.reset_seed(1)
        assert [strategy.select_action(view(3)) for _ in range(10)] == actions

    def test_uses_both_actions(self):
        strategy = RandomStrategy(seed=0)
        assert len({strategy.select_action(view(3)) for _ in range(50)}) == 2

    def test_swap_probability_extremes(self):
        always = RandomStrategy(seed=3, swap_probability=1.0)
        never = RandomStrategy(seed=3, swap_probability=0.0)
        for card in range(1, 11):
            assert always.select_action(view(card)) == PlayerAction.SWAP
            assert never.select_action(view(card)) == PlayerAction.KEEP

    def test_name(self):
        assert RandomStrategy().name == "Random"
        assert RandomStrategy(swap_probability=0.25).name == "Random(p=0.25)"

    def test_invalid_probability(self):
        with pytest.raises(ValueError):
            RandomStrategy(swap_probability=1.5)
