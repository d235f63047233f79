"""Game status and turn tracking."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidPlayerError

NO_PLAYER = -1


class GameStatus(Enum):
    """What happened on the last move."""

    PLAYER_DIE = 0
    BELL_ACTIVATE = 1
    PENALTY = 2
    NEXT_TURN = 3
    BELL_WIN = 4


class GameStatusManager:
    """Records the last event, the player it concerns, and whose turn is next."""

    def __init__(self, player_count: int) -> None:
        self._player_count = player_count
        self._status = GameStatus.NEXT_TURN
        self._target_player = NO_PLAYER
        self._next_turn_player = 0

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def target_player(self) -> int:
        return self._target_player

    @property
    def next_turn_player(self) -> int:
        return self._next_turn_player

    def _check(self, player_id: int) -> None:
        if not 0 <= player_id < self._player_count:
            raise InvalidPlayerError(player_id, self._player_count)

    def _advance(self, status: GameStatus, target: int) -> None:
        self._status = status
        self._target_player = target
        self._next_turn_player = (self._next_turn_player + 1) % self._player_count

    def player_die(self, player_id: int) -> None:
        """A player ran out of cards."""
        self._advance(GameStatus.PLAYER_DIE, player_id)

    def bell_activate(self) -> None:
        """The bell may be rung."""
        self._advance(GameStatus.BELL_ACTIVATE, NO_PLAYER)

    def bell_win(self, player_id: int) -> None:
        """A player rang the bell first."""
        self._check(player_id)
        self._advance(GameStatus.BELL_WIN, player_id)

    def penalty(self, player_id: int) -> None:
        """A player is penalised."""
        self._check(player_id)
        self._advance(GameStatus.PENALTY, player_id)

    def next_turn(self) -> None:
        """Play passes on without incident."""
        self._advance(GameStatus.NEXT_TURN, NO_PLAYER)