"""Showdown scoring: who holds the lowest card."""

from __future__ import annotations

from collections.abc import Sequence

from cucu_engine.state import Player


def find_losers(players: Sequence[Player]) -> list[Player]:
    """Return every player holding the minimum card value, in roster order.

    Players without a card are ignored. When the minimum is shared by the
    whole roster nobody loses and the result is empty.

    Args:
        players: Roster in turn order.

    Returns:
        The losing players (possibly empty).
    """
    dealt = [p for p in players if p.card_value is not None]
    if not dealt:
        return []

    lowest = min(p.card_value for p in dealt)
    losers = [p for p in dealt if p.card_value == lowest]

    if len(losers) == len(players):
        return []
    return losers
