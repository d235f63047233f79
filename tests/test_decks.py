import pytest

from halligalli.card import Card
from halligalli.decks import PlayerDeck, TableDeck


@pytest.fixture
def player_deck():
    deck = PlayerDeck()
    deck.take_card(Card.from_number(1))
    deck.take_card(Card.from_number(2))
    return deck


@pytest.fixture
def extra_cards():
    return [Card.from_number(3), Card.from_number(4)]


def test_give_card(player_deck):
    assert player_deck.give_card().number == 1


def test_merge(player_deck, extra_cards):
    player_deck.merge(extra_cards)
    assert len(player_deck) == 4
    player_deck.give_card()
    assert player_deck.give_card().number == 2
    assert player_deck.give_card().number == 3


def test_empty_deck_gives_none(player_deck):
    player_deck.give_card()
    player_deck.give_card()
    assert player_deck.give_card() is None
    assert len(player_deck) == 0


def test_table_deck_gives_all_in_order():
    table = TableDeck()
    table.add_card(Card.from_number(1))
    table.add_card(Card.from_number(2))
    given = table.give_all_cards()
    assert table.is_empty() is True
    assert [card.number for card in given] == [1, 2]


def test_table_deck_length_and_empty():
    table = TableDeck()
    assert table.is_empty() is True
    table.add_card(Card.from_number(5))
    assert len(table) == 1
    assert table.is_empty() is False


def test_table_cards_merge_into_player_deck():
    table = TableDeck()
    cards = [Card.from_number(n) for n in (7, 8, 9)]
    for card in cards:
        table.add_card(card)
    deck = PlayerDeck()
    deck.merge(table.give_all_cards())
    assert len(deck) == len(cards)
    assert [deck.give_card() for _ in cards] == cards
    assert len(table) == 0