"""
Greed - Game Event Definitions

Event types and payloads published by a game after each state change.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Hashable


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    FINAL_ROUND_STARTED = auto()
    TURN_ADVANCED = auto()
    GAME_ENDED = auto()


@dataclass
class EventPayload:
    """Wrapper for game event data."""

    event: GameEvent
    player_id: Hashable | None = None
    data: dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventPayload], None]
