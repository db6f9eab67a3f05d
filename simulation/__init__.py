"""Simulation running for Cucu."""

from simulation.runner import (
    ActionRecord,
    GameLog,
    GameResult,
    GameRunner,
    run_batch,
    save_game_log,
    summarize_batch,
)

__all__ = [
    "ActionRecord",
    "GameLog",
    "GameResult",
    "GameRunner",
    "run_batch",
    "save_game_log",
    "summarize_batch",
]
