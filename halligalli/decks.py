"""Players' face-down decks and the pile of played cards."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .card import Card


class PlayerDeck:
    """A player's face-down deck; cards leave from the top, join at the bottom."""

    def __init__(self) -> None:
        self._cards: deque[Card] = deque()

    def give_card(self) -> Card | None:
        """Take the top card, or None when the deck is empty."""
        return self._cards.popleft() if self._cards else None

    def take_card(self, card: Card) -> None:
        """Put a card at the bottom."""
        self._cards.append(card)

    def merge(self, cards: Iterable[Card]) -> None:
        """Put cards at the bottom in the order given."""
        self._cards.extend(cards)

    def __len__(self) -> int:
        return len(self._cards)


class TableDeck:
    """The cards played onto the table, in the order they were played."""

    def __init__(self) -> None:
        self._cards: deque[Card] = deque()

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def give_all_cards(self) -> list[Card]:
        """Hand over every card, oldest first, leaving the table empty."""
        cards = list(self._cards)
        self._cards.clear()
        return cards

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)