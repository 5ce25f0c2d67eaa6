"""
Greed - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
The game translates these into its own error kinds.
"""

from typing import Hashable, Sequence

from src.engine.base import DiceRoll


def validate_dice_values(
    values: Sequence[int],
    expected_count: int | None = None,
) -> tuple[int, ...]:
    """
    Validate and normalize rolled dice values.

    The count is checked before the faces, so a roll of the wrong size
    is always reported as such.

    Args:
        values: Sequence of dice values to validate
        expected_count: Exact number of dice required (None = any positive)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if expected_count is not None and count != expected_count:
        raise ValueError(f"Must roll with {expected_count} die")

    if count == 0:
        raise ValueError("At least 1 die required.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DiceRoll.FACES):
            raise ValueError(f"Invalid die value {value} at index {i}")

    return values_tuple


def validate_player_ids(ids: Sequence[Hashable], min_count: int = 2) -> tuple[Hashable, ...]:
    """
    Validate a roster of player ids.

    Args:
        ids: Player ids in turn order
        min_count: Smallest roster allowed

    Returns:
        Validated ids as a tuple

    Raises:
        ValueError: If there are too few players or an id repeats
    """
    ids_tuple = tuple(ids)

    if len(ids_tuple) < min_count:
        raise ValueError("Not enough players")

    if len(set(ids_tuple)) != len(ids_tuple):
        raise ValueError("Players must have unique names")

    return ids_tuple


def validate_dice_count(count: int) -> int:
    """
    Validate how many dice to roll.

    Raises:
        ValueError: If count is not a positive integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Dice count must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise ValueError(f"Dice count must be positive, got {count}.")

    return count
