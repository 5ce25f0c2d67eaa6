"""
Greed - Game Engine

Turn-based state machine for a game of Greed. Players take turns rolling a
shrinking pool of dice, building a turn score they can bank or lose.

Game Rules:
- Each turn starts with 5 dice
- A roll that scores nothing is a bust: the turn score is lost and play passes
- After a scoring roll, only the leftover non-scoring dice are rerolled;
  if every die scored, the player rolls all 5 again (hot dice)
- A player must bank at least 300 in one turn to get in; after that any
  turn score can be banked
- Once a banked score reaches 3000 the final round starts: every player
  gets exactly one more turn, then the game is over

The game never rolls dice itself. Callers hand it the faces they rolled and
it checks there are as many as it currently allows. Every check runs before
any state changes, so a rejected move leaves the game untouched.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Hashable, Sequence

from src.engine.base import GameConfig, GamePhase, Player
from src.engine.errors import GameEndError, GamePlayError, GameStartError, GreedError
from src.engine.events import EventListener, EventPayload, GameEvent
from src.engine.models import GameSnapshot, PlayerSnapshot
from src.engine.scoring import GreedScorer
from src.engine.validators import validate_dice_values, validate_player_ids

logger = logging.getLogger(__name__)

ScoringOracle = Callable[[Sequence[int]], int]


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move made through ``try_roll`` or ``try_end_turn``.

    Attributes:
        value: What the move returned (dice allowed next, or 0 on a bust)
        error: The rejected move's error, None on success
    """
    value: int | None = None
    error: GreedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GreedGame:
    """
    A single game of Greed.

    The game owns its player records. Players passed in are only used for
    their ids; callers read standings back through ``players`` and
    ``player()``, which return immutable values.
    """

    def __init__(
        self,
        players: Sequence[Player],
        config: GameConfig | None = None,
        scorer: ScoringOracle | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()

        try:
            ids = validate_player_ids([p.id for p in players], self.config.min_players)
        except ValueError as exc:
            raise GameStartError(str(exc)) from exc

        self._players: list[Player] = [Player(id=player_id) for player_id in ids]
        self._scorer: ScoringOracle = scorer if scorer is not None else GreedScorer.score
        self._current_index = 0
        self._turn_score = 0
        self._dice_allowed = self.config.num_dice
        self._has_rolled = False
        self._phase = GamePhase.ACTIVE
        self._listeners: list[EventListener] = []

    @classmethod
    def from_ids(
        cls,
        *player_ids: Hashable,
        config: GameConfig | None = None,
        scorer: ScoringOracle | None = None,
    ) -> "GreedGame":
        """Create a game from bare player ids, in turn order."""
        return cls([Player(id=player_id) for player_id in player_ids], config, scorer)

    # -- Read access -----------------------------------------------------

    @property
    def turn_score(self) -> int:
        """Points accumulated in the current turn, not yet banked."""
        return self._turn_score

    @property
    def dice_allowed(self) -> int:
        """Number of dice the next roll must supply."""
        return self._dice_allowed

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def final_round_armed(self) -> bool:
        return self._phase is not GamePhase.ACTIVE

    @property
    def is_over(self) -> bool:
        return self._phase is GamePhase.ENDED

    @property
    def has_rolled_this_turn(self) -> bool:
        return self._has_rolled

    @property
    def current_player_index(self) -> int:
        return self._current_index

    @property
    def current_player(self) -> Player:
        return self._players[self._current_index]

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    def player(self, player_id: Hashable) -> Player:
        """Look up a player's standing by id."""
        for player in self._players:
            if player.id == player_id:
                return player
        raise KeyError(player_id)

    @property
    def winners(self) -> tuple[Player, ...]:
        """Highest-scoring player(s) once the game is over, else empty."""
        if not self.is_over:
            return ()
        top = max(p.score for p in self._players)
        return tuple(p for p in self._players if p.score == top)

    def snapshot(self) -> GameSnapshot:
        """Detached, serializable copy of the full game state."""
        return GameSnapshot(
            players=[
                PlayerSnapshot(
                    id=p.id,
                    score=p.score,
                    is_in=p.is_in,
                    has_played_final_turn=p.has_played_final_turn,
                )
                for p in self._players
            ],
            current_player_index=self._current_index,
            turn_score=self._turn_score,
            dice_allowed=self._dice_allowed,
            has_rolled=self._has_rolled,
            phase=self._phase.value,
        )

    # -- Moves -----------------------------------------------------------

    def roll(self, faces: Sequence[int]) -> int:
        """
        Apply the current player's roll.

        Args:
            faces: Dice the player just rolled; must be exactly
                ``dice_allowed`` values between 1 and 6

        Returns:
            Dice allowed on the next roll, or 0 if the roll busted and
            play passed to the next player

        Raises:
            GameEndError: If the game is over
            GamePlayError: If the wrong number of dice (or a bad face) is given
        """
        if self._phase is GamePhase.ENDED:
            raise GameEndError("Game has ended")

        try:
            values = validate_dice_values(faces, self._dice_allowed)
        except ValueError as exc:
            raise GamePlayError(str(exc)) from exc

        player = self.current_player
        points = self._scorer(values)

        if points == 0:
            logger.debug(
                "Player %s bust on %s, losing %d turn points",
                player.id, values, self._turn_score,
            )
            events = [
                EventPayload(
                    event=GameEvent.DICE_ROLLED,
                    player_id=player.id,
                    data={"faces": list(values), "points": 0, "dice_allowed": 0, "turn_score": 0},
                ),
                EventPayload(
                    event=GameEvent.PLAYER_BUST,
                    player_id=player.id,
                    data={"lost": self._turn_score},
                ),
            ]
            self._advance_turn(events)
            self._publish(events)
            return 0

        self._has_rolled = True
        self._turn_score += points
        # No leftovers means hot dice: roll the full set again
        self._dice_allowed = GreedScorer.reroll_count(values) or self.config.num_dice

        self._publish([
            EventPayload(
                event=GameEvent.DICE_ROLLED,
                player_id=player.id,
                data={
                    "faces": list(values),
                    "points": points,
                    "dice_allowed": self._dice_allowed,
                    "turn_score": self._turn_score,
                },
            ),
        ])
        return self._dice_allowed

    def end_turn(self) -> None:
        """
        Bank the turn score for the current player and pass play on.

        Raises:
            GamePlayError: If the player has not rolled this turn, or is not
                in yet and the turn score is below the entry score
        """
        if not self._has_rolled:
            raise GamePlayError("Cannot end turn until you roll")

        player = self.current_player
        if self._turn_score < self.config.entry_score and not player.is_in:
            raise GamePlayError("Cannot end turn until player is in")

        banked = self._turn_score
        player = replace(player, is_in=True, score=player.score + banked)
        self._players[self._current_index] = player
        arms_final_round = (
            self._phase is GamePhase.ACTIVE
            and player.score >= self.config.final_round_score
        )
        logger.debug("Player %s banked %d, now at %d", player.id, banked, player.score)

        events = [
            EventPayload(
                event=GameEvent.TURN_BANKED,
                player_id=player.id,
                data={"banked": banked, "score": player.score},
            ),
        ]
        self._advance_turn(events)

        # The arming turn itself does not count as anyone's final turn
        if arms_final_round:
            self._phase = GamePhase.FINAL_ROUND
            logger.debug("Player %s reached %d, final round started", player.id, player.score)
            events.append(EventPayload(
                event=GameEvent.FINAL_ROUND_STARTED,
                player_id=player.id,
                data={"score": player.score},
            ))

        self._publish(events)

    def try_roll(self, faces: Sequence[int]) -> MoveResult:
        """Like ``roll``, but returns the error instead of raising it."""
        try:
            return MoveResult(value=self.roll(faces))
        except GreedError as exc:
            return MoveResult(error=exc)

    def try_end_turn(self) -> MoveResult:
        """Like ``end_turn``, but returns the error instead of raising it."""
        try:
            self.end_turn()
        except GreedError as exc:
            return MoveResult(error=exc)
        return MoveResult()

    # -- Events ----------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback for every event the game publishes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self, events: list[EventPayload]) -> None:
        for payload in events:
            for listener in list(self._listeners):
                try:
                    listener(payload)
                except Exception:
                    logger.exception("Listener failed on %s", payload.event)

    # -- Turn bookkeeping ------------------------------------------------

    def _advance_turn(self, events: list[EventPayload]) -> None:
        """Reset per-turn state and hand play to the next player."""
        finishing = self.current_player
        self._dice_allowed = self.config.num_dice
        self._turn_score = 0
        self._has_rolled = False

        if self._phase is GamePhase.FINAL_ROUND:
            self._players[self._current_index] = replace(finishing, has_played_final_turn=True)

        self._current_index = (self._current_index + 1) % len(self._players)
        events.append(EventPayload(
            event=GameEvent.TURN_ADVANCED,
            player_id=self.current_player.id,
            data={"previous_player_id": finishing.id},
        ))

        if self._phase is GamePhase.FINAL_ROUND and all(
            p.has_played_final_turn for p in self._players
        ):
            self._phase = GamePhase.ENDED
            winner_ids = [p.id for p in self.winners]
            logger.debug("Game over, winners: %s", winner_ids)
            events.append(EventPayload(
                event=GameEvent.GAME_ENDED,
                data={"winners": winner_ids, "snapshot": self.snapshot().model_dump()},
            ))
