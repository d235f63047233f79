"""The face-up cards in front of each player."""

from __future__ import annotations

from .card import Card, Fruit
from .errors import GameError, InvalidPlayerError

FIVE = 5


class FrontCards:
    """Tracks each player's face-up card and the fruit totals on the table."""

    def __init__(self, player_count: int) -> None:
        self._cards: list[Card | None] = [None] * player_count
        self._counts: dict[Fruit, int] = {fruit: 0 for fruit in Fruit}

    def _check(self, player_id: int) -> None:
        if not 0 <= player_id < len(self._cards):
            raise InvalidPlayerError(player_id, len(self._cards))

    def update_card(self, player_id: int, card: Card) -> None:
        """Lay a card face up in front of a player and add its fruit."""
        self._check(player_id)
        self._cards[player_id] = card
        self._counts[card.fruit] += card.count

    def reset_card(self, player_id: int) -> None:
        """Take away a player's face-up card and subtract its fruit."""
        self._check(player_id)
        card = self._cards[player_id]
        if card is None:
            raise GameError(f"player {player_id} has no face-up card")
        self._counts[card.fruit] -= card.count
        self._cards[player_id] = None

    def has_five_fruit(self) -> bool:
        """True when some fruit totals exactly five on the table."""
        return any(count == FIVE for count in self._counts.values())

    def fruit_count(self, fruit: Fruit) -> int:
        """The total of one fruit on the table."""
        return self._counts[fruit]

    def __getitem__(self, player_id: int) -> Card | None:
        self._check(player_id)
        return self._cards[player_id]

    def __len__(self) -> int:
        return len(self._cards)