"""Exceptions raised by the Cucu engine.

Every error signals a caller-side mistake; nothing here is retryable and a
rejected operation never leaves partial changes behind.
"""

from __future__ import annotations


class CucuError(Exception):
    """Base class for all engine errors."""


class InvalidPhaseError(CucuError):
    """Raised when an operation is attempted in the wrong game phase."""


class NotYourTurnError(CucuError):
    """Raised when someone other than the current player submits an action."""


class DuplicatePlayerError(CucuError):
    """Raised when a username is added twice."""


class InsufficientPlayersError(CucuError):
    """Raised when starting a game with fewer than two players."""


class InvalidSnapshotError(CucuError):
    """Raised when an imported snapshot is inconsistent or malformed."""


class InvalidActionError(CucuError):
    """Raised when a submitted action is neither KEEP nor SWAP."""
