"""Tests for src/config/settings.py - environment-driven settings."""

import logging

import pydantic
import pytest

from src.config.settings import Settings, configure_logging, get_settings
from src.engine.base import GameConfig


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.num_dice == 5
        assert settings.entry_score == 300
        assert settings.final_round_score == 3000

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GREED_ENTRY_SCORE", "500")
        monkeypatch.setenv("GREED_FINAL_ROUND_SCORE", "10000")
        monkeypatch.setenv("GREED_DEBUG", "true")
        settings = Settings()
        assert settings.entry_score == 500
        assert settings.final_round_score == 10000
        assert settings.debug is True

    def test_reads_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("GREED_NUM_DICE=6\n", encoding="utf-8")
        assert Settings().num_dice == 6

    def test_game_config(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GREED_ENTRY_SCORE", "0")
        config = Settings().game_config()
        assert config == GameConfig(entry_score=0)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("GREED_NUM_DICE", "0"),
            ("GREED_ENTRY_SCORE", "-1"),
            ("GREED_FINAL_ROUND_SCORE", "0"),
            ("GREED_LOG_LEVEL", "chatty"),
        ],
    )
    def test_invalid_values_rejected_on_load(self, monkeypatch, tmp_path, name, value):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(name, value)
        with pytest.raises(pydantic.ValidationError):
            Settings()

    def test_log_level_normalized(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GREED_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_get_settings_is_cached(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_uses_log_level(self, monkeypatch):
        basic_config = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: basic_config.append(kw))
        configure_logging(Settings(log_level="warning"))
        assert basic_config[0]["level"] == "WARNING"

    def test_debug_overrides_level(self, monkeypatch):
        basic_config = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: basic_config.append(kw))
        configure_logging(Settings(debug=True, log_level="ERROR"))
        assert basic_config[0]["level"] == logging.DEBUG
