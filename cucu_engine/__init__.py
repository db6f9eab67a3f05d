"""Cucu card game engine."""

from cucu_engine.engine import GameEngine
from cucu_engine.errors import (
    CucuError,
    DuplicatePlayerError,
    InsufficientPlayersError,
    InvalidActionError,
    InvalidPhaseError,
    InvalidSnapshotError,
    NotYourTurnError,
)
from cucu_engine.state import (
    ActionResult,
    ActionResultType,
    GamePhase,
    GameSnapshot,
    Player,
    PlayerAction,
    PlayerSnapshot,
)

__all__ = [
    "GameEngine",
    "CucuError",
    "DuplicatePlayerError",
    "InsufficientPlayersError",
    "InvalidActionError",
    "InvalidPhaseError",
    "InvalidSnapshotError",
    "NotYourTurnError",
    "ActionResult",
    "ActionResultType",
    "GamePhase",
    "GameSnapshot",
    "Player",
    "PlayerAction",
    "PlayerSnapshot",
]
