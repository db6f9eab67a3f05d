"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI, the session manager and simulations.

    Attributes:
        seed: Random seed for dealing (None for system randomness)
        legacy_snapshot_rules: Accept snapshots written by older versions
            that skipped per-player card checks on multi-player rosters
        log_level: Logging level name
        game_log_dir: Directory for JSON game logs
    """

    seed: int | None = None
    legacy_snapshot_rules: bool = False
    log_level: str = "INFO"
    game_log_dir: str = "logs/games"


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Load settings from the environment.

    Args:
        env_file: Optional .env file; defaults to ./.env when it exists.
            Values already set in the environment take precedence.

    Raises:
        ValueError: If a variable has an unparseable value.
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)

    return Settings(
        seed=_int_or_none("CUCU_SEED"),
        legacy_snapshot_rules=_bool("CUCU_LEGACY_SNAPSHOT_RULES", default=False),
        log_level=os.environ.get("CUCU_LOG_LEVEL", "INFO").upper(),
        game_log_dir=os.environ.get("CUCU_GAME_LOG_DIR", "logs/games"),
    )


def _int_or_none(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
