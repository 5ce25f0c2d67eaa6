"""
Greed - Banking Strategies

Decide, after each scoring roll, whether the current player banks or
keeps rolling.
"""

from dataclasses import dataclass
from typing import Protocol

from src.engine.base import Player
from src.engine.greed import GreedGame


class BankingStrategy(Protocol):
    def should_bank(
        self, turn_score: int, dice_allowed: int, player: Player, game: GreedGame
    ) -> bool: ...


@dataclass(frozen=True)
class ThresholdStrategy:
    """Bank once the turn score reaches a threshold."""

    threshold: int = 300

    def should_bank(
        self, turn_score: int, dice_allowed: int, player: Player, game: GreedGame
    ) -> bool:
        if not player.is_in and turn_score < game.config.entry_score:
            return False
        return turn_score >= self.threshold


@dataclass(frozen=True)
class AlwaysRollStrategy:
    """Never bank. The turn only ends on a bust."""

    def should_bank(
        self, turn_score: int, dice_allowed: int, player: Player, game: GreedGame
    ) -> bool:
        return False
