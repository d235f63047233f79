"""Game logic for Halli Galli: cards, decks, face-up cards, the bell and game status."""

__version__ = "0.1.0"
__all__ = ["bell", "card", "decks", "errors", "front_cards", "game_status"]