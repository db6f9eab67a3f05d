"""Card values and dealing for Cucu."""

from __future__ import annotations

import random

# Player cards are dealt from [1, 10], the deck card from [1, 8]
MIN_CARD_VALUE = 1
MAX_CARD_VALUE = 10
MAX_DECK_VALUE = 8

# A swap aimed at a 10 is blocked; a 9 makes the swap skip past its holder
BLOCK_VALUE = 10
SKIP_VALUE = 9


def is_valid_card_value(value: int | None) -> bool:
    """Whether a value can sit in a player's hand."""
    return value is not None and MIN_CARD_VALUE <= value <= MAX_CARD_VALUE


def is_valid_deck_value(value: int | None) -> bool:
    """Whether a value can be the deck card."""
    return value is not None and MIN_CARD_VALUE <= value <= MAX_DECK_VALUE


def deal_card_value(rng: random.Random) -> int:
    """Draw a player card uniformly from [1, 10]."""
    return rng.randint(MIN_CARD_VALUE, MAX_CARD_VALUE)


def deal_deck_value(rng: random.Random) -> int:
    """Draw the deck card uniformly from [1, 8]."""
    return rng.randint(MIN_CARD_VALUE, MAX_DECK_VALUE)


def describe_value(value: int | None) -> str:
    """Short label for a card value, marking the special cards."""
    if value is None:
        return "?"
    if value == BLOCK_VALUE:
        return f"{value} (block)"
    if value == SKIP_VALUE:
        return f"{value} (skip)"
    return str(value)
