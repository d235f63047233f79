import pytest

from halligalli.card import Card, Fruit
from halligalli.errors import GameError, InvalidPlayerError
from halligalli.front_cards import FrontCards

MAX_SIZE = 4


@pytest.fixture
def front_cards():
    cards = FrontCards(MAX_SIZE)
    cards.update_card(0, Card.from_number(2))
    cards.update_card(1, Card.from_number(3))
    return cards


def test_check_and_add_card(front_cards):
    assert front_cards.has_five_fruit() is True
    front_cards.update_card(2, Card.from_number(2))
    assert front_cards.has_five_fruit() is False


def test_check_and_remove_card(front_cards):
    assert front_cards.has_five_fruit() is True
    front_cards.reset_card(1)
    assert front_cards.has_five_fruit() is False
    assert front_cards.fruit_count(Fruit.APPLE) == Card.from_number(2).count
    assert front_cards[1] is None


def test_index_errors(front_cards):
    with pytest.raises(InvalidPlayerError):
        front_cards.update_card(MAX_SIZE, Card.from_number(2))
    front_cards.update_card(MAX_SIZE - 1, Card.from_number(2))
    with pytest.raises(InvalidPlayerError):
        front_cards.update_card(-1, Card.from_number(2))
    front_cards.update_card(0, Card.from_number(2))

    with pytest.raises(InvalidPlayerError):
        front_cards.reset_card(MAX_SIZE)
    front_cards.reset_card(MAX_SIZE - 1)
    with pytest.raises(InvalidPlayerError):
        front_cards.reset_card(-1)
    front_cards.reset_card(0)
    assert front_cards[0] is None


def test_fruit_count_totals(front_cards):
    assert front_cards.fruit_count(Fruit.APPLE) == 5
    assert front_cards.fruit_count(Fruit.BANANA) == 0


def test_reset_without_card_raises():
    cards = FrontCards(MAX_SIZE)
    with pytest.raises(GameError):
        cards.reset_card(2)


def test_invalid_index_is_an_index_error():
    cards = FrontCards(2)
    with pytest.raises(IndexError):
        cards.update_card(2, Card.from_number(1))


def test_length_is_player_count():
    assert len(FrontCards(MAX_SIZE)) == MAX_SIZE