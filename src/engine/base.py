"""
Greed - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are immutable (frozen dataclasses) so that the
only way to change a player's standing is through the game itself.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Hashable, Sequence


class GamePhase(Enum):
    """Lifecycle of a single game."""
    ACTIVE = "active"            # Nobody has reached the final-round score
    FINAL_ROUND = "final_round"  # Armed; some players still owe a last turn
    ENDED = "ended"              # Every player has had their last turn


class ScoringCategory(Enum):
    """Categories of scoring combinations."""
    SINGLE_ONE = auto()
    SINGLE_FIVE = auto()
    TRIPLE_ONES = auto()
    THREE_OF_A_KIND = auto()


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    A single scoring component within a roll.

    Attributes:
        category: The type of scoring combination
        dice_values: The dice that contributed to this score
        points: Points awarded for this combination
        description: Human-readable description
    """
    category: ScoringCategory
    dice_values: tuple[int, ...]
    points: int
    description: str


@dataclass(frozen=True)
class ScoringResult:
    """
    Complete scoring result for a dice roll.

    Attributes:
        points: Total points scored
        breakdown: Individual scoring components
        scoring_dice_count: Number of dice that contributed points
        is_bust: Whether no dice scored
    """
    points: int
    breakdown: tuple[ScoringBreakdown, ...]
    scoring_dice_count: int
    is_bust: bool = False

    def __str__(self) -> str:
        if self.is_bust:
            return "BUST! No scoring dice."
        lines = [f"Total: {self.points} points"]
        for item in self.breakdown:
            lines.append(f"  - {item.description}: {item.points}")
        return "\n".join(lines)


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a roll of six-sided dice.

    Attributes:
        values: Tuple of dice face values
    """
    values: tuple[int, ...]

    FACES: ClassVar[int] = 6

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        for value in self.values:
            if not (1 <= value <= self.FACES):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between 1 and {self.FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class Player:
    """
    A player's standing in a game.

    Attributes:
        id: Unique, stable identifier
        score: Banked score across all completed turns
        is_in: Whether the player has banked a turn worth the entry score
        has_played_final_turn: Whether the player has finished a turn
            since the final round was armed
    """
    id: Hashable
    score: int = 0
    is_in: bool = False
    has_played_final_turn: bool = False

    def __str__(self) -> str:
        return f"{self.id} ({self.score} points)"


@dataclass(frozen=True)
class GameConfig:
    """
    Rule constants for a game.

    Attributes:
        num_dice: Dice rolled at the start of a turn and after hot dice
        entry_score: Turn score a player must bank to get in
        final_round_score: Banked score that arms the final round
        min_players: Smallest roster a game can start with
    """
    num_dice: int = 5
    entry_score: int = 300
    final_round_score: int = 3000
    min_players: int = 2

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.num_dice < 1:
            raise ValueError("Number of dice must be at least 1.")
        if self.entry_score < 0:
            raise ValueError("Entry score cannot be negative.")
        if self.final_round_score <= 0:
            raise ValueError("Final round score must be positive.")
        if self.min_players < 2:
            raise ValueError("A game needs at least 2 players.")
