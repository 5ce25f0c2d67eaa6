"""
Greed - Snapshot Models

Pydantic models describing a game's full state at one instant. Snapshots
are frozen and detached from the game, so callers can keep, compare and
serialize them without reaching into live state.
"""

from typing import Hashable

from pydantic import BaseModel, Field


class PlayerSnapshot(BaseModel):
    """One player's standing. ``id`` keeps the type the game was given."""

    id: Hashable
    score: int = Field(default=0, ge=0)
    is_in: bool = False
    has_played_final_turn: bool = False

    model_config = {"frozen": True}


class GameSnapshot(BaseModel):
    """Everything a referee or display needs to know about a game."""

    players: list[PlayerSnapshot]
    current_player_index: int = Field(ge=0)
    turn_score: int = Field(default=0, ge=0)
    dice_allowed: int = Field(ge=1)
    has_rolled: bool = False
    phase: str = "active"

    model_config = {"frozen": True}

    @property
    def current_player(self) -> PlayerSnapshot:
        return self.players[self.current_player_index]

    @property
    def leaders(self) -> list[PlayerSnapshot]:
        """Player(s) with the highest banked score."""
        top = max(p.score for p in self.players)
        return [p for p in self.players if p.score == top]
