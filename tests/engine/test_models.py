"""Tests for src/engine/models.py - snapshot models."""

import pydantic
import pytest

from src.engine.models import GameSnapshot, PlayerSnapshot


def _snapshot(**overrides) -> GameSnapshot:
    data = {
        "players": [
            PlayerSnapshot(id="a", score=1200, is_in=True),
            PlayerSnapshot(id="b", score=3100, is_in=True),
            PlayerSnapshot(id="c", score=3100, is_in=True),
        ],
        "current_player_index": 1,
        "dice_allowed": 5,
    }
    data.update(overrides)
    return GameSnapshot(**data)


class TestPlayerSnapshot:
    def test_defaults(self):
        p = PlayerSnapshot(id="a")
        assert p.score == 0
        assert p.is_in is False
        assert p.has_played_final_turn is False

    def test_negative_score_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PlayerSnapshot(id="a", score=-1)

    def test_frozen(self):
        p = PlayerSnapshot(id="a")
        with pytest.raises(pydantic.ValidationError):
            p.score = 100


class TestGameSnapshot:
    def test_current_player(self):
        assert _snapshot().current_player.id == "b"

    def test_leaders_includes_ties(self):
        assert [p.id for p in _snapshot().leaders] == ["b", "c"]

    def test_zero_dice_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            _snapshot(dice_allowed=0)

    def test_round_trip_through_dict(self):
        snapshot = _snapshot(turn_score=250, has_rolled=True)
        assert GameSnapshot.model_validate(snapshot.model_dump()) == snapshot
