"""
Greed - Dice

Random dice for drivers of the game. The game engine itself never rolls;
it only validates and scores faces it is handed.
"""

import random

from src.engine.base import DiceRoll
from src.engine.validators import validate_dice_count


def roll_dice(count: int, rng: random.Random | None = None) -> DiceRoll:
    """
    Roll the specified number of six-sided dice.

    Args:
        count: Number of dice to roll
        rng: Random source (default: the module-level ``random``)

    Returns:
        DiceRoll with random values
    """
    count = validate_dice_count(count)
    source = rng if rng is not None else random
    values = tuple(source.randint(1, DiceRoll.FACES) for _ in range(count))
    return DiceRoll(values=values)
