"""
Greed Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles turn sequencing, scoring, hot dice, the entry gate and the final round.
"""

from src.engine.base import (
    DiceRoll,
    GameConfig,
    GamePhase,
    Player,
    ScoringBreakdown,
    ScoringCategory,
    ScoringResult,
)
from src.engine.dice import roll_dice
from src.engine.errors import GameEndError, GamePlayError, GameStartError, GreedError
from src.engine.events import EventPayload, GameEvent
from src.engine.greed import GreedGame, MoveResult
from src.engine.models import GameSnapshot, PlayerSnapshot
from src.engine.scoring import GreedScorer

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "Player",
    "ScoringBreakdown",
    "ScoringResult",
    "MoveResult",
    "EventPayload",
    # Snapshots
    "GameSnapshot",
    "PlayerSnapshot",
    # Enums
    "GameEvent",
    "GamePhase",
    "ScoringCategory",
    # Errors
    "GreedError",
    "GameStartError",
    "GamePlayError",
    "GameEndError",
    # Engine
    "GreedGame",
    "GreedScorer",
    "roll_dice",
]
