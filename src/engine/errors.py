"""
Greed - Game Errors

Exceptions raised by the game engine. Every error is raised before any
state is touched, so a failed call leaves the game exactly as it was.
"""


class GreedError(Exception):
    """Base class for all game errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GameStartError(GreedError):
    """The game could not be created (too few players, duplicate ids)."""


class GamePlayError(GreedError):
    """A move broke a sequencing or gating rule. Retry with a legal move."""


class GameEndError(GreedError):
    """A roll was attempted after the game ended."""
