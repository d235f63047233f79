# halligalli

This package holds the building blocks for the game logic of Halli Galli. Halli Galli is a card game. Players turn over cards one at a time. When exactly five of one fruit are showing, the fastest player to hit the bell collects the cards on the table.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `halligalli.card`

- `Fruit` is an enum with the members `APPLE`, `BANANA`, `GRAPE` and `WATERMELON`.
- `Card` is a frozen dataclass with the fields `number`, `fruit` and `count`.
- `Card.from_number(n)` builds a card from its number:

  | Numbers | Fruit |
  |---|---|
  | 1–5 | apples |
  | 6–10 | bananas |
  | 11–15 | grapes |
  | 16 and above | watermelons |

  The count runs from 1 to 5 within each fruit. For example, card 7 is two bananas.

### `halligalli.front_cards.FrontCards`

`FrontCards(player_count)` holds one face-up slot per player and keeps a running total for each fruit.

- `update_card(player_id, card)` lays a card in a player's slot and adds its fruit to the total.
- `reset_card(player_id)` takes the card out of the slot and subtracts its fruit.
  - If the slot is empty, it raises `GameError`.
- `has_five_fruit()` is true when some fruit totals exactly five.
- `fruit_count(fruit)` returns the total for one fruit.
- `front[player_id]` returns the card in a slot, or `None` if the slot is empty.
- `len(front)` returns the number of slots.

A player index outside `0 <= id < player_count` raises `InvalidPlayerError`.

### `halligalli.game_status`

`GameStatus` says what happened on the last move. Its members are:

- `PLAYER_DIE`
- `BELL_ACTIVATE`
- `PENALTY`
- `NEXT_TURN`
- `BELL_WIN`

`GameStatusManager(player_count)` starts with:

- `status` set to `NEXT_TURN`
- `target_player` set to `-1`
- `next_turn_player` set to `0`

Each of these methods sets the status and target player, then moves `next_turn_player` one seat round the table:

- `player_die(player_id)`
- `bell_activate()`
- `bell_win(player_id)`
- `penalty(player_id)`
- `next_turn()`

`bell_win` and `penalty` raise `InvalidPlayerError` for an index out of range.

### `halligalli.bell`

`Bell(delay=4.0, on_winner=None)` collects presses while it is active. You switch it on and off with `activate()` and `deactivate()`.

- `ring(player_id, time_diff)` records a `BellPress`. It does nothing while the bell is inactive.
- The press with the smallest `time_diff` wins.

When `delay` is a number of seconds, the first press starts a background timer. When the timer fires:

- the fastest press so far is chosen;
- the presses are cleared;
- the winner's id is passed to `notify_winner`, which calls `on_winner` if one was given.

While the timer is waiting, `pending` is true.

When `delay=None`, presses are only collected. `pop_winner()` returns the fastest player's id and clears the presses. It returns `None` if there were no presses.

### `halligalli.decks`

`PlayerDeck` is a player's face-down pile, first in, first out.

- `give_card()` returns the top card, or `None` when the pile is empty.
- `take_card(card)` adds a card to the bottom.
- `merge(cards)` adds cards to the bottom in the order given.
- `len(deck)` returns the number of cards.

`TableDeck` holds the cards played to the table.

- `add_card(card)` adds a card.
- `give_all_cards()` returns every card as a list, oldest first, and empties the table.
- `is_empty()` and `len(table)` report how many cards are left.

### `halligalli.errors`

- `GameError` is the base exception.
- `InvalidPlayerError` subclasses both `GameError` and `IndexError`. It carries `player_id` and `player_count`.

## Example

```python
from halligalli.card import Card
from halligalli.decks import PlayerDeck, TableDeck
from halligalli.front_cards import FrontCards
from halligalli.game_status import GameStatus, GameStatusManager

players = 4
front = FrontCards(players)
status = GameStatusManager(players)
table = TableDeck()

deck = PlayerDeck()
deck.take_card(Card.from_number(2))   # two apples
deck.take_card(Card.from_number(3))   # three apples

for player_id in (0, 1):
    card = deck.give_card()
    front.update_card(player_id, card)
    table.add_card(card)

if front.has_five_fruit():
    status.bell_activate()

assert status.status is GameStatus.BELL_ACTIVATE
```

## What it does not do

This package only models the pieces of the game. It has:

- no network server;
- no command-line program;
- no game loop that deals cards, takes turns or decides when the game ends.

Your own code has to combine the pieces above into a playable game.