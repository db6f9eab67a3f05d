"""Tests for the simulation runner."""

import json

import pytest

from cucu_engine.state import PlayerAction
from simulation.runner import GameResult, GameRunner, run_batch, save_game_log, summarize_batch
from strategies.base import Strategy
from strategies.heuristic import HeuristicStrategy
from strategies.random_strategy import RandomStrategy


class AlwaysKeep(Strategy):
    def __init__(self):
        self.started_as = None
        self.losers = None

    @property
    def name(self) -> str:
        return "AlwaysKeep"

    def select_action(self, view):
        return PlayerAction.KEEP

    def on_game_start(self, snapshot, username):
        self.started_as = username

    def on_game_end(self, snapshot, losers):
        self.losers = losers


class TestGameRunner:
    def test_needs_two_strategies(self):
        with pytest.raises(ValueError):
            GameRunner([RandomStrategy()])

    def test_keep_only_game_takes_one_action_per_player(self):
        runner = GameRunner([AlwaysKeep() for _ in range(4)])
        result, log = runner.run_game(seed=3)

        assert result.action_count == 4
        assert len(log.actions) == 4
        assert [a.seat for a in log.actions] == [0, 1, 2, 3]
        assert all(a.action == "KEEP" for a in log.actions)
        assert log.actions[-1].result == "SHOWDOWN"
        assert log.initial_state["phase"] == "IN_PROGRESS"
        assert log.result is result

    def test_losers_hold_the_lowest_card(self):
        runner = GameRunner([RandomStrategy(seed=s) for s in range(5)])
        for seed in range(30):
            result, _ = runner.run_game(seed=seed)
            if result.losers:
                low = min(result.final_values)
                assert all(result.final_values[s] == low for s in result.loser_seats)
                assert result.losers == [GameRunner.seat_name(s) for s in result.loser_seats]
            else:
                assert len(set(result.final_values)) == 1

    def test_strategy_hooks(self):
        strategies = [AlwaysKeep(), AlwaysKeep()]
        result, _ = GameRunner(strategies).run_game(seed=1)

        assert [s.started_as for s in strategies] == ["player0", "player1"]
        assert [p.username for p in strategies[0].losers] == result.losers

    def test_without_logging(self):
        runner = GameRunner([AlwaysKeep(), AlwaysKeep()], log_actions=False)
        result, log = runner.run_game(seed=1)
        assert log is None
        assert result.action_count == 2

    def test_same_seed_same_deal(self):
        runner = GameRunner([AlwaysKeep() for _ in range(3)])
        first, _ = runner.run_game(seed=11)
        second, _ = runner.run_game(seed=11)
        assert first.final_values == second.final_values
        assert first.deck_card_value == second.deck_card_value
        assert first.game_id != second.game_id


class TestSaveGameLog:
    def test_writes_json(self, tmp_path):
        runner = GameRunner([HeuristicStrategy(), HeuristicStrategy()])
        result, log = runner.run_game(seed=5)

        path = save_game_log(log, base_dir=str(tmp_path))

        assert path.exists()
        assert path.parent.name == log.timestamp[:10]
        data = json.loads(path.read_text())
        assert data["game_id"] == result.game_id
        assert data["player_strategies"] == ["Heuristic(5)", "Heuristic(5)"]
        assert data["result"]["losers"] == result.losers
        assert len(data["actions"]) == result.action_count


class TestBatch:
    def test_run_batch(self):
        results = run_batch([AlwaysKeep() for _ in range(3)], num_games=10, start_seed=100)
        assert len(results) == 10
        assert [r.seed for r in results] == list(range(100, 110))
        assert all(r.action_count == 3 for r in results)

    def test_summarize_batch(self):
        def result(loser_seats, actions):
            return GameResult(
                game_id="g",
                losers=[f"player{s}" for s in loser_seats],
                loser_seats=loser_seats,
                final_values=[1, 1],
                deck_card_value=1,
                player_strategies=["A", "B"],
                seed=None,
                duration_ms=0.0,
                action_count=actions,
            )

        summary = summarize_batch([result([0], 2), result([1], 1), result([], 2), result([0], 1)])

        assert summary["games"] == 4
        assert summary["no_loser_rate"] == 0.25
        assert summary["seat_loss_rates"] == [0.5, 0.25]
        assert summary["avg_actions"] == 1.5

    def test_summarize_empty(self):
        assert summarize_batch([])["games"] == 0
