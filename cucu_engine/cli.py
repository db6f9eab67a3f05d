"""Command-line interface for Cucu."""

from __future__ import annotations

import argparse
import logging
import time
from typing import TYPE_CHECKING

from cucu_engine.cards import describe_value
from cucu_engine.config import load_settings
from cucu_engine.engine import GameEngine
from cucu_engine.errors import CucuError
from cucu_engine.state import ActionResultType, PlayerAction

if TYPE_CHECKING:
    from cucu_engine.state import ActionResult
    from strategies.base import Strategy

logger = logging.getLogger(__name__)


def format_state(engine: GameEngine, viewer: str | None = None, show_all: bool = False) -> str:
    """Format the table for display.

    Only the viewer's own card is shown unless show_all is set or the game
    is over.
    """
    lines = []

    lines.append("=" * 60)
    lines.append(f"Phase: {engine.phase.name}")
    lines.append("=" * 60)

    reveal = show_all or engine.is_game_over
    for i, player in enumerate(engine.players):
        prefix = "→ " if player is engine.current_player else "  "
        if reveal or player.username == viewer:
            card = describe_value(player.card_value)
        else:
            card = "[hidden]"
        lines.append(f"{prefix}{i + 1}. {player.username}: {card}")

    if reveal:
        lines.append(f"\nDeck card: {describe_value(engine.deck_card_value)}")

    return "\n".join(lines)


def format_result(result: ActionResult) -> str:
    """Describe an action result in one or two lines."""
    if result.kind == ActionResultType.SHOWDOWN:
        if not result.losers:
            return "SHOWDOWN - everybody ties, nobody loses!"
        names = ", ".join(p.username for p in result.losers)
        return f"SHOWDOWN - lowest card: {names}"

    verbs = {
        ActionResultType.KEPT: "kept their card",
        ActionResultType.SWAPPED: "swapped",
        ActionResultType.BLOCKED: "was blocked by a 10",
        ActionResultType.SKIPPED: "skipped past the 9s",
    }
    return f"{result.acting_player.username} {verbs[result.kind]}. Next: {result.next_player.username}"


def _bot_strategies(count: int, kind: str, seed: int | None) -> list[Strategy]:
    from strategies.heuristic import HeuristicStrategy
    from strategies.random_strategy import RandomStrategy

    if kind == "heuristic":
        return [HeuristicStrategy() for _ in range(count)]
    return [RandomStrategy(seed=None if seed is None else seed + i) for i in range(count)]


def _bot_action(engine: GameEngine, strategy: Strategy) -> PlayerAction:
    from strategies.base import TurnView

    player = engine.current_player
    view = TurnView(
        username=player.username,
        card_value=player.card_value,
        seat=engine.current_player_index,
        player_count=len(engine.players),
    )
    return strategy.select_action(view)


def play_interactive(
    humans: list[str], bots: int = 1, bot_kind: str = "random", seed: int | None = None
) -> None:
    """Play a hot-seat game with human players and bots."""
    engine = GameEngine(seed=seed)
    strategies: dict[str, Strategy] = {}

    for name in humans:
        engine.add_player(name)
    for i, strategy in enumerate(_bot_strategies(bots, bot_kind, seed)):
        name = f"bot{i + 1}"
        engine.add_player(name)
        strategies[name] = strategy
    engine.start()

    print("\nWelcome to Cucu!")
    print("Keep your card or swap it with the next player. Lowest card loses.")
    print("Type 'k' to keep, 's' to swap, 'q' to quit.\n")

    while not engine.is_game_over:
        player = engine.current_player

        if player.username in strategies:
            action = _bot_action(engine, strategies[player.username])
            print(f"{player.username} chooses to {action.name.lower()}")
        else:
            print(format_state(engine, viewer=player.username))
            while True:
                choice = input(f"\n{player.username}, keep or swap? ").strip().lower()
                if choice == "q":
                    print("Goodbye!")
                    return
                if choice in ("k", "keep"):
                    action = PlayerAction.KEEP
                    break
                if choice in ("s", "swap"):
                    action = PlayerAction.SWAP
                    break
                print("Please enter 'k', 's' or 'q'")

        result = engine.submit_action(player.username, action)
        print(format_result(result))
        print()

    print(format_state(engine))


def watch_game(players: int = 4, bot_kind: str = "random", seed: int | None = None, delay: float = 0.5) -> None:
    """Watch bots play against each other with every card visible."""
    engine = GameEngine(seed=seed)
    strategies = _bot_strategies(players, bot_kind, seed)
    for i in range(players):
        engine.add_player(f"bot{i + 1}")
    engine.start()

    print(f"\nWatching {players} {bot_kind} bots")
    print("Press Ctrl+C to stop.\n")

    try:
        while not engine.is_game_over:
            print(format_state(engine, show_all=True))
            player = engine.current_player
            action = _bot_action(engine, strategies[engine.current_player_index])
            result = engine.submit_action(player.username, action)
            print(f"\n{player.username} chooses to {action.name.lower()}: {format_result(result)}")
            time.sleep(delay)
            print("\n" + "-" * 60 + "\n")
    except KeyboardInterrupt:
        print("\nStopped.")

    print(format_state(engine, show_all=True))


def run_simulation(
    num_games: int = 1000,
    players: int = 4,
    bot_kind: str = "random",
    seed: int = 42,
    save_logs: bool = False,
    log_dir: str = "logs/games",
) -> None:
    """Run many bot games and print loss rates per seat."""
    from simulation.runner import GameRunner, save_game_log, summarize_batch

    runner = GameRunner(_bot_strategies(players, bot_kind, seed), log_actions=save_logs)
    results = []
    for i in range(num_games):
        result, game_log = runner.run_game(seed=seed + i)
        results.append(result)
        if game_log is not None:
            save_game_log(game_log, base_dir=log_dir)

    summary = summarize_batch(results)
    print(f"\nResults ({num_games} games, {players} {bot_kind} players):")
    for seat, rate in enumerate(summary["seat_loss_rates"]):
        print(f"  Seat {seat + 1} lost: {100 * rate:.1f}%")
    print(f"  No loser (full tie): {100 * summary['no_loser_rate']:.1f}%")
    print(f"  Average actions: {summary['avg_actions']:.1f}")


def main() -> None:
    """Main entry point for the CLI."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    parser = argparse.ArgumentParser(description="Cucu card game")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against bots")
    play_parser.add_argument("names", nargs="+", help="Human player names, in turn order")
    play_parser.add_argument("--bots", type=int, default=1, help="Number of bots")
    play_parser.add_argument("--bot-kind", choices=["random", "heuristic"], default="random")
    play_parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")

    # Watch command
    watch_parser = subparsers.add_parser("watch", help="Watch bots play")
    watch_parser.add_argument("--players", type=int, default=4, help="Number of bots")
    watch_parser.add_argument("--bot-kind", choices=["random", "heuristic"], default="random")
    watch_parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    watch_parser.add_argument(
        "--delay", type=float, default=0.5, help="Delay between actions (seconds)"
    )

    # Simulate command
    sim_parser = subparsers.add_parser("simulate", help="Run many bot games")
    sim_parser.add_argument("--games", type=int, default=1000, help="Number of games")
    sim_parser.add_argument("--players", type=int, default=4, help="Players per game")
    sim_parser.add_argument("--bot-kind", choices=["random", "heuristic"], default="random")
    sim_parser.add_argument(
        "--seed", type=int, default=settings.seed if settings.seed is not None else 42
    )
    sim_parser.add_argument("--save-logs", action="store_true", help="Write JSON game logs")

    args = parser.parse_args()

    try:
        if args.command == "play":
            play_interactive(args.names, bots=args.bots, bot_kind=args.bot_kind, seed=args.seed)
        elif args.command == "watch":
            watch_game(players=args.players, bot_kind=args.bot_kind, seed=args.seed, delay=args.delay)
        elif args.command == "simulate":
            run_simulation(
                num_games=args.games,
                players=args.players,
                bot_kind=args.bot_kind,
                seed=args.seed,
                save_logs=args.save_logs,
                log_dir=settings.game_log_dir,
            )
        else:
            parser.print_help()
    except CucuError as e:
        logger.error("%s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
