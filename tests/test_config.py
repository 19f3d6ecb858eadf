# Area: Config Tests
# PRD: docs/prd-rules.md
"""Tests for triwall.config — settings validation and loading."""

import json
import logging

import pytest
from pydantic import ValidationError

from triwall.config import (
    PLAYER_COUNT_WARNING,
    GameConfig,
    load_settings,
    resolve_player_count,
)
from triwall.errors import ConfigError


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no TRIWALL_* variables set."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "TRIWALL_PLAYERS",
        "TRIWALL_LOG_FILE",
        "TRIWALL_LOG_LEVEL",
        "TRIWALL_CANVAS_WIDTH",
        "TRIWALL_CANVAS_HEIGHT",
    ):
        # setenv first so the variable is removed again on teardown
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return tmp_path


class TestResolvePlayerCount:
    """Invalid player counts fall back to 4 with a warning."""

    @pytest.mark.parametrize("raw,expected", [(2, 2), (3, 3), (4, 4), ("2", 2), (" 3 ", 3)])
    def test_valid_values(self, raw, expected):
        assert resolve_player_count(raw) == (expected, None)

    @pytest.mark.parametrize("raw", [None, 1, 5, -3, "abc", "", "2.5", "\u00b2", "+-2", 2.0, True])
    def test_invalid_values_fall_back(self, raw):
        assert resolve_player_count(raw) == (4, PLAYER_COUNT_WARNING)

    def test_warning_text(self):
        assert PLAYER_COUNT_WARNING == "Players should be from 2 to 4. Start with 4 players."


class TestGameConfig:
    def test_defaults(self):
        config, warnings = GameConfig.from_settings({"player_count": 4})
        assert warnings == []
        assert config.canvas_width == 600
        assert config.canvas_height == 600
        assert config.board_scale == 0.9
        assert config.vertex_radius == 10.0
        assert config.wall_width == 10.0
        assert config.log_file is None
        assert config.log_level == "INFO"

    def test_missing_player_count_warns(self):
        config, warnings = GameConfig.from_settings({})
        assert config.player_count == 4
        assert warnings == [PLAYER_COUNT_WARNING]

    def test_string_values_are_coerced(self):
        config, _ = GameConfig.from_settings({"player_count": "3", "canvas_width": "800"})
        assert config.player_count == 3
        assert config.canvas_width == 800

    def test_unknown_keys_ignored(self):
        config, _ = GameConfig.from_settings({"player_count": 2, "theme": "dark"})
        assert config.player_count == 2

    def test_invalid_field_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            GameConfig.from_settings({"player_count": 2, "canvas_width": 0}, source="game.json")
        error = exc_info.value
        assert error.source == "game.json"
        assert error.settings["canvas_width"] == 0
        assert any(e.startswith("canvas_width") for e in error.validation_errors)

    def test_scale_above_one_rejected(self):
        with pytest.raises(ConfigError):
            GameConfig.from_settings({"player_count": 2, "board_scale": 1.5})

    def test_config_is_frozen(self):
        config, _ = GameConfig.from_settings({"player_count": 2})
        with pytest.raises(ValidationError):
            config.player_count = 3


class TestLoadSettings:
    def test_empty_sources(self, clean_env):
        assert load_settings() == {}

    def test_json_file(self, clean_env):
        path = clean_env / "game.json"
        path.write_text(json.dumps({"player_count": 3, "canvas_width": 500}))
        assert load_settings(str(path)) == {"player_count": 3, "canvas_width": 500}

    def test_missing_file_is_skipped(self, clean_env):
        assert load_settings(str(clean_env / "nope.json")) == {}

    def test_environment_overrides_file(self, clean_env, monkeypatch):
        path = clean_env / "game.json"
        path.write_text(json.dumps({"player_count": 3}))
        monkeypatch.setenv("TRIWALL_PLAYERS", "2")
        assert load_settings(str(path))["player_count"] == "2"

    def test_dotenv_file_is_read(self, clean_env):
        (clean_env / ".env").write_text("TRIWALL_LOG_LEVEL=DEBUG\n")
        assert load_settings()["log_level"] == "DEBUG"

    def test_overrides_win(self, clean_env, monkeypatch):
        monkeypatch.setenv("TRIWALL_PLAYERS", "2")
        settings = load_settings(overrides={"player_count": "4", "log_file": None})
        assert settings["player_count"] == "4"
        assert "log_file" not in settings

    def test_malformed_json_raises_config_error(self, clean_env):
        path = clean_env / "game.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError) as exc_info:
            load_settings(str(path))
        assert exc_info.value.source == str(path)
        assert exc_info.value.validation_errors[0].startswith("not valid JSON")

    def test_non_object_json_raises_config_error(self, clean_env):
        path = clean_env / "game.json"
        path.write_text("4")
        with pytest.raises(ConfigError) as exc_info:
            load_settings(str(path))
        assert exc_info.value.validation_errors == ["expected a JSON object, got int"]


class TestPlayerCountLogging:
    def test_fallback_logged_at_info(self, caplog):
        """The warning itself is shown by the announcer, so the log stays at INFO."""
        with caplog.at_level(logging.DEBUG, logger="triwall.config"):
            resolve_player_count("9")
        assert [r.levelname for r in caplog.records] == ["INFO"]
