"""Exceptions raised by the game model."""


class GameError(Exception):
    """Base class for errors raised by the game model."""


class InvalidPlayerError(GameError, IndexError):
    """Raised when a player index lies outside the table."""

    def __init__(self, player_id: int, player_count: int) -> None:
        super().__init__(
            f"invalid player index {player_id} (players: {player_count})"
        )
        self.player_id = player_id
        self.player_count = player_count