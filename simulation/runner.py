"""Game runner for Cucu simulations."""

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from cucu_engine.engine import GameEngine
from cucu_engine.serialization import snapshot_to_dict
from strategies.base import TurnView

if TYPE_CHECKING:
    from strategies.base import Strategy

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    game_id: str
    losers: list[str]  # Usernames, empty on a full tie
    loser_seats: list[int]
    final_values: list[int]
    deck_card_value: int
    player_strategies: list[str]
    seed: int | None
    duration_ms: float
    action_count: int


@dataclass
class ActionRecord:
    """Record of a single action."""

    seat: int
    player: str
    action: str
    result: str
    values_after: list[int | None]


@dataclass
class GameLog:
    """Complete log of a game."""

    game_id: str
    timestamp: str
    seed: int | None
    player_strategies: list[str]
    initial_state: dict
    actions: list[ActionRecord] = field(default_factory=list)
    result: GameResult | None = None


class GameRunner:
    """Runs Cucu games between any number of strategies, one per seat."""

    def __init__(self, strategies: list[Strategy], log_actions: bool = True):
        """Initialize the game runner.

        Args:
            strategies: One strategy per seat, in turn order (at least two).
            log_actions: Whether to record individual actions.
        """
        if len(strategies) < 2:
            raise ValueError("A game needs at least two strategies")
        self.strategies = list(strategies)
        self.log_actions = log_actions

    @staticmethod
    def seat_name(seat: int) -> str:
        return f"player{seat}"

    def run_game(self, seed: int | None = None) -> tuple[GameResult, GameLog | None]:
        """Run a single game.

        Args:
            seed: Random seed for dealing.

        Returns:
            Tuple of (result, log). Log is None if log_actions is False.
        """
        start_time = time.perf_counter()
        game_id = str(uuid.uuid4())

        engine = GameEngine(seed=seed)
        for seat in range(len(self.strategies)):
            engine.add_player(self.seat_name(seat))
        engine.start()

        initial = engine.export_state()
        for seat, strategy in enumerate(self.strategies):
            strategy.on_game_start(initial, self.seat_name(seat))

        game_log = None
        if self.log_actions:
            game_log = GameLog(
                game_id=game_id,
                timestamp=datetime.now().isoformat(),
                seed=seed,
                player_strategies=[s.name for s in self.strategies],
                initial_state=snapshot_to_dict(initial),
            )

        action_count = 0
        result = None
        while not engine.is_game_over:
            seat = engine.current_player_index
            player = engine.current_player
            view = TurnView(
                username=player.username,
                card_value=player.card_value,
                seat=seat,
                player_count=len(engine.players),
            )
            action = self.strategies[seat].select_action(view)
            result = engine.submit_action(player.username, action)
            action_count += 1

            if game_log:
                game_log.actions.append(
                    ActionRecord(
                        seat=seat,
                        player=player.username,
                        action=action.name,
                        result=result.kind.name,
                        values_after=[p.card_value for p in engine.players],
                    )
                )

        losers = result.losers
        seats = {p.username: i for i, p in enumerate(engine.players)}
        duration_ms = (time.perf_counter() - start_time) * 1000

        game_result = GameResult(
            game_id=game_id,
            losers=[p.username for p in losers],
            loser_seats=[seats[p.username] for p in losers],
            final_values=[p.card_value for p in engine.players],
            deck_card_value=engine.deck_card_value,
            player_strategies=[s.name for s in self.strategies],
            seed=seed,
            duration_ms=duration_ms,
            action_count=action_count,
        )
        logger.debug("Game %s finished, losers: %s", game_id, game_result.losers)

        if game_log:
            game_log.result = game_result

        final = engine.export_state()
        for strategy in self.strategies:
            strategy.on_game_end(final, losers)

        return game_result, game_log


def save_game_log(log: GameLog, base_dir: str = "logs/games") -> Path:
    """Save a game log to disk.

    Args:
        log: Game log to save.
        base_dir: Base directory for logs.

    Returns:
        Path to the saved file.
    """
    date_str = log.timestamp[:10]  # YYYY-MM-DD
    dir_path = Path(base_dir) / date_str
    dir_path.mkdir(parents=True, exist_ok=True)

    file_path = dir_path / f"game_{log.game_id}.json"

    data = {
        "game_id": log.game_id,
        "timestamp": log.timestamp,
        "seed": log.seed,
        "player_strategies": log.player_strategies,
        "initial_state": log.initial_state,
        "actions": [
            {
                "seat": a.seat,
                "player": a.player,
                "action": a.action,
                "result": a.result,
                "values_after": a.values_after,
            }
            for a in log.actions
        ],
        "result": {
            "losers": log.result.losers,
            "loser_seats": log.result.loser_seats,
            "final_values": log.result.final_values,
            "deck_card_value": log.result.deck_card_value,
            "duration_ms": log.result.duration_ms,
            "action_count": log.result.action_count,
        }
        if log.result
        else None,
    }

    with open(file_path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info("Saved game log to %s", file_path)
    return file_path


def run_batch(
    strategies: list[Strategy],
    num_games: int,
    start_seed: int = 0,
    log_actions: bool = False,
) -> list[GameResult]:
    """Run multiple games.

    Args:
        strategies: One strategy per seat.
        num_games: Number of games to run.
        start_seed: Starting seed (incremented for each game).
        log_actions: Whether to record actions (slower).

    Returns:
        List of game results.
    """
    runner = GameRunner(strategies, log_actions=log_actions)
    results = []

    for i in range(num_games):
        result, _ = runner.run_game(seed=start_seed + i)
        results.append(result)

    return results


def summarize_batch(results: list[GameResult]) -> dict:
    """Aggregate loss rates per seat for a batch of games."""
    if not results:
        return {"games": 0, "no_loser_rate": 0.0, "seat_loss_rates": [], "avg_actions": 0.0}

    seats = len(results[0].player_strategies)
    losses = [0] * seats
    no_loser = 0
    for result in results:
        if not result.loser_seats:
            no_loser += 1
        for seat in result.loser_seats:
            losses[seat] += 1

    return {
        "games": len(results),
        "no_loser_rate": no_loser / len(results),
        "seat_loss_rates": [count / len(results) for count in losses],
        "avg_actions": sum(r.action_count for r in results) / len(results),
    }
