"""The bell players race to ring."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

NO_PLAYER = -1
DEFAULT_DELAY = 4.0


@dataclass(frozen=True)
class BellPress:
    """One press of the bell: who pressed and their reaction time."""

    player_id: int
    time_diff: int


class Bell:
    """Collects bell presses and picks the fastest one.

    With a delay, the first press starts a timer; when it fires the fastest
    press so far wins and is passed to ``notify_winner``. With ``delay=None``
    presses are only collected, and ``pop_winner`` settles them on demand.
    """

    def __init__(
        self,
        delay: float | None = DEFAULT_DELAY,
        on_winner: Callable[[int], None] | None = None,
    ) -> None:
        self._delay = delay
        self._on_winner = on_winner
        self._active = False
        self._pending = False
        self._presses: list[BellPress] = []
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pending(self) -> bool:
        """True while a timer is waiting to settle the presses."""
        with self._lock:
            return self._pending

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def ring(self, player_id: int, time_diff: int) -> None:
        """Record a press; ignored while the bell is not active."""
        if not self._active:
            return
        press = BellPress(player_id, time_diff)
        with self._lock:
            self._presses.append(press)
            if self._pending or self._delay is None:
                return
            self._pending = True
        timer = threading.Timer(self._delay, self._settle, args=(press,))
        timer.daemon = True
        timer.start()

    def _take_fastest(self) -> BellPress | None:
        if not self._presses:
            return None
        fastest = min(self._presses, key=lambda p: p.time_diff)
        self._presses.clear()
        return fastest

    def _settle(self, first_press: BellPress) -> None:
        with self._lock:
            winner = self._take_fastest() or first_press
            self._pending = False
        if winner.player_id != NO_PLAYER:
            self.notify_winner(winner.player_id)

    def pop_winner(self) -> int | None:
        """Return the fastest player so far and clear the presses, or None."""
        with self._lock:
            winner = self._take_fastest()
        return None if winner is None else winner.player_id

    def notify_winner(self, player_id: int) -> None:
        """Announce the winner to the callback, if any."""
        if self._on_winner is not None:
            self._on_winner(player_id)