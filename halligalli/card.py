"""Fruit cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CARDS_PER_FRUIT = 5


class Fruit(Enum):
    """The fruit shown on a card; the value is the first card number minus one."""

    APPLE = 0
    BANANA = 5
    GRAPE = 10
    WATERMELON = 15


_FRUIT_BY_GROUP = {0: Fruit.APPLE, 1: Fruit.BANANA, 2: Fruit.GRAPE}


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient rounded toward zero, with the matching remainder."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


@dataclass(frozen=True)
class Card:
    """A card: its number, the fruit on it and how many of that fruit."""

    number: int
    fruit: Fruit
    count: int

    @classmethod
    def from_number(cls, number: int) -> Card:
        """Build a card from its number.

        Numbers 1-5 are apples, 6-10 bananas, 11-15 grapes and anything
        higher watermelons; the fruit count cycles from 1 to 5.
        """
        group, remainder = _trunc_divmod(number - 1, CARDS_PER_FRUIT)
        fruit = _FRUIT_BY_GROUP.get(group, Fruit.WATERMELON)
        return cls(number=number, fruit=fruit, count=remainder + 1)