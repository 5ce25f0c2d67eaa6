"""
Greed - Scoring Rules

Standard Greed scoring. All methods are stateless class methods that
operate on immutable inputs, so ``GreedScorer.score`` can be handed to a
game as its scoring oracle.

Scoring Rules:
    - Three 1s: 1,000 points
    - Three of X (2-6): X × 100 points
    - Single 1 (not part of a set): 100 points
    - Single 5 (not part of a set): 50 points
    - Everything else: 0 points

Every complete set of three is scored, so six 2s count as two sets.
"""

from collections import Counter
from typing import Sequence

from src.engine.base import (
    DiceRoll,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from src.engine.validators import validate_dice_values


class GreedScorer:
    """Stateless scoring engine for Greed."""

    SET_SIZE = 3
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    SET_MULTIPLIER = 100

    # Faces that score on their own
    SCORING_SINGLES = frozenset({1, 5})

    @classmethod
    def calculate_score(cls, dice: Sequence[int] | DiceRoll) -> ScoringResult:
        """
        Calculate the score for a given dice roll.

        Sets are taken first, then whatever 1s and 5s are left over score
        as singles.

        Args:
            dice: Dice values to score (sequence or DiceRoll)

        Returns:
            ScoringResult with total points and breakdown
        """
        if isinstance(dice, DiceRoll):
            values = dice.values
        else:
            values = validate_dice_values(dice)

        breakdown: list[ScoringBreakdown] = []
        remaining = Counter(values)

        for face_value in range(1, DiceRoll.FACES + 1):
            sets, remaining[face_value] = divmod(remaining[face_value], cls.SET_SIZE)
            for _ in range(sets):
                breakdown.append(cls._set_breakdown(face_value))

        if remaining[1]:
            breakdown.append(ScoringBreakdown(
                category=ScoringCategory.SINGLE_ONE,
                dice_values=(1,) * remaining[1],
                points=remaining[1] * cls.SINGLE_ONE_POINTS,
                description=f"{remaining[1]}x Single 1{'s' if remaining[1] > 1 else ''}"
            ))

        if remaining[5]:
            breakdown.append(ScoringBreakdown(
                category=ScoringCategory.SINGLE_FIVE,
                dice_values=(5,) * remaining[5],
                points=remaining[5] * cls.SINGLE_FIVE_POINTS,
                description=f"{remaining[5]}x Single 5{'s' if remaining[5] > 1 else ''}"
            ))

        total_points = sum(item.points for item in breakdown)
        scoring_dice = sum(len(item.dice_values) for item in breakdown)

        return ScoringResult(
            points=total_points,
            breakdown=tuple(breakdown),
            scoring_dice_count=scoring_dice,
            is_bust=total_points == 0,
        )

    @classmethod
    def _set_breakdown(cls, face_value: int) -> ScoringBreakdown:
        if face_value == 1:
            return ScoringBreakdown(
                category=ScoringCategory.TRIPLE_ONES,
                dice_values=(1, 1, 1),
                points=cls.THREE_ONES_POINTS,
                description="Three 1s",
            )
        return ScoringBreakdown(
            category=ScoringCategory.THREE_OF_A_KIND,
            dice_values=(face_value,) * cls.SET_SIZE,
            points=face_value * cls.SET_MULTIPLIER,
            description=f"Three {face_value}s",
        )

    @classmethod
    def score(cls, dice: Sequence[int] | DiceRoll) -> int:
        """Points for a roll. This is the scoring oracle a game consumes."""
        return cls.calculate_score(dice).points

    @classmethod
    def reroll_count(cls, dice: Sequence[int] | DiceRoll) -> int:
        """
        Count the dice left over to reroll after a scoring roll.

        Only faces that never score alone are considered. For each such
        face, dice that complete a set are used up and ``count % 3`` are
        left over. A result of 0 means every die scored (hot dice).
        """
        values = dice.values if isinstance(dice, DiceRoll) else tuple(dice)
        counts = Counter(v for v in values if v not in cls.SCORING_SINGLES)
        return sum(count % cls.SET_SIZE for count in counts.values())

    @classmethod
    def is_bust(cls, dice: Sequence[int] | DiceRoll) -> bool:
        """Check if a roll scores nothing."""
        return cls.calculate_score(dice).is_bust
