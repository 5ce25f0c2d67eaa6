"""
Greed - Referee

Drives a GreedGame from start to finish: rolls dice for the current player,
feeds them to the game, and asks that player's strategy whether to bank.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Hashable

from src.engine.dice import roll_dice
from src.engine.events import EventPayload, GameEvent
from src.engine.greed import GreedGame
from src.engine.models import GameSnapshot
from src.referee.strategies import BankingStrategy, ThresholdStrategy

logger = logging.getLogger(__name__)


class Referee:
    """Plays a game to completion.

    Args:
        game: The game to drive. It may already be in progress.
        strategies: One strategy for everyone, or a mapping of player id to
            strategy. Players missing from the mapping use ThresholdStrategy.
        rng: Random source for dice (default: module-level ``random``).
        max_turns: Safety cap on the number of turns played.
    """

    def __init__(
        self,
        game: GreedGame,
        strategies: BankingStrategy | Mapping[Hashable, BankingStrategy] | None = None,
        *,
        rng: random.Random | None = None,
        max_turns: int = 1000,
    ) -> None:
        self.game = game
        self.rng = rng
        self.max_turns = max_turns
        self.turns_played = 0
        self._strategies = strategies if strategies is not None else ThresholdStrategy()
        self._default = ThresholdStrategy()
        game.subscribe(self._on_event)

    def strategy_for(self, player_id: Hashable) -> BankingStrategy:
        if isinstance(self._strategies, Mapping):
            return self._strategies.get(player_id, self._default)
        return self._strategies

    def play(self) -> GameSnapshot:
        """Play turns until the game is over.

        Returns:
            Snapshot of the finished game.

        Raises:
            RuntimeError: If the game is still running after max_turns.
        """
        while not self.game.is_over:
            if self.turns_played >= self.max_turns:
                raise RuntimeError(
                    f"Game did not finish within {self.max_turns} turns"
                )
            self.play_turn()

        snapshot = self.game.snapshot()
        logger.info(
            "Game finished after %d turns: %s",
            self.turns_played,
            ", ".join(f"{p.id}={p.score}" for p in snapshot.players),
        )
        return snapshot

    def play_turn(self) -> int:
        """Play the current player's turn.

        Returns:
            Points banked, or 0 if the turn ended in a bust.
        """
        game = self.game
        player_id = game.current_player.id
        strategy = self.strategy_for(player_id)

        while True:
            faces = roll_dice(game.dice_allowed, self.rng)
            dice_allowed = game.roll(faces.values)
            if dice_allowed == 0:
                self.turns_played += 1
                logger.info("Player %s bust on %s", player_id, faces.values)
                return 0

            player = game.current_player
            if not strategy.should_bank(game.turn_score, dice_allowed, player, game):
                continue

            banked = game.turn_score
            result = game.try_end_turn()
            if result.ok:
                self.turns_played += 1
                logger.info("Player %s banked %d", player_id, banked)
                return banked
            logger.debug("Player %s cannot bank yet: %s", player_id, result.error)

    def _on_event(self, payload: EventPayload) -> None:
        if payload.event is GameEvent.FINAL_ROUND_STARTED:
            logger.info(
                "Final round started by %s at %d",
                payload.player_id, payload.data["score"],
            )
        elif payload.event is GameEvent.GAME_ENDED:
            logger.info("Winners: %s", payload.data["winners"])
