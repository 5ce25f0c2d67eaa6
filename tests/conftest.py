"""
Greed - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from src.engine.greed import GreedGame


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def greed_scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Common roll patterns with expected scores.

    Returns:
        Dict mapping name to (dice_values, expected_points, description)
    """
    return {
        # Singles
        "single_one": ((1,), 100, "Single 1"),
        "single_five": ((5,), 50, "Single 5"),
        "two_ones": ((1, 1), 200, "Two 1s"),
        "one_and_five": ((1, 5), 150, "One 1 and one 5"),

        # Sets
        "three_ones": ((1, 1, 1), 1000, "Three 1s"),
        "three_twos": ((2, 2, 2), 200, "Three 2s"),
        "three_fives": ((5, 5, 5), 500, "Three 5s"),
        "three_sixes": ((6, 6, 6), 600, "Three 6s"),

        # Sets with leftovers
        "four_ones": ((1, 1, 1, 1), 1100, "Three 1s + single 1"),
        "five_ones": ((1, 1, 1, 1, 1), 1200, "Three 1s + two single 1s"),
        "four_fives": ((5, 5, 5, 5), 550, "Three 5s + single 5"),
        "triple_ones_plus_five": ((5, 1, 1, 4, 1), 1050, "Three 1s + single 5"),

        # Mixed
        "mixed": ((5, 1, 3, 4, 1), 250, "Two 1s + single 5"),
        "triple_twos_mixed": ((5, 2, 1, 2, 2), 350, "Three 2s + 5 + 1"),
        "triple_fours_plus_five": ((2, 4, 4, 5, 4), 450, "Three 4s + single 5"),
        "no_straights": ((2, 3, 4, 5, 6), 50, "Straights do not score"),
        "bust_roll": ((2, 3, 4, 6, 2), 0, "Bust roll"),
    }


@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls that score nothing."""
    return [
        (2,),
        (3, 4),
        (2, 3, 4, 6),
        (2, 3, 4, 6, 2),
        (3, 3, 4, 4, 6),
    ]


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def game() -> GreedGame:
    """Fresh two-player game."""
    return GreedGame.from_ids("player1", "player2")


@pytest.fixture
def three_player_game() -> GreedGame:
    """Fresh three-player game."""
    return GreedGame.from_ids("alice", "bob", "carol")


def roll_to_3600(game: GreedGame) -> None:
    """Current player rolls three straight sets of five 1s and banks 3600."""
    for _ in range(3):
        game.roll([1, 1, 1, 1, 1])
    game.end_turn()


@pytest.fixture
def final_round_game(game: GreedGame) -> GreedGame:
    """Two-player game where player1 has just armed the final round."""
    roll_to_3600(game)
    return game
