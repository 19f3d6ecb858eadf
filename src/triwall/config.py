"""
triwall.config — Game settings
==============================

Settings are validated with pydantic. The player count is the one
lenient field: anything other than an integer from 2 to 4 falls back
to 4 with a warning, so a bad value never stops a game. Every other
field is strict and raises ConfigError.

Sources, lowest precedence first:
    1. Defaults below
    2. JSON config file
    3. Environment (a .env file in the working directory is loaded)
    4. Explicit overrides (CLI flags)
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._board.setup import MAX_PLAYERS, MIN_PLAYERS
from .errors import ConfigError

logger = logging.getLogger("triwall.config")

DEFAULT_PLAYER_COUNT = 4

PLAYER_COUNT_WARNING = (
    f"Players should be from {MIN_PLAYERS} to {MAX_PLAYERS}. "
    f"Start with {DEFAULT_PLAYER_COUNT} players."
)

# Environment variable → settings key
ENV_MAPPINGS = {
    "TRIWALL_PLAYERS": "player_count",
    "TRIWALL_LOG_FILE": "log_file",
    "TRIWALL_LOG_LEVEL": "log_level",
    "TRIWALL_CANVAS_WIDTH": "canvas_width",
    "TRIWALL_CANVAS_HEIGHT": "canvas_height",
}


class GameConfig(BaseModel):
    """Validated settings for one game session."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    player_count: int = Field(DEFAULT_PLAYER_COUNT, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    canvas_width: int = Field(600, gt=0)
    canvas_height: int = Field(600, gt=0)
    board_scale: float = Field(0.9, gt=0, le=1)
    vertex_radius: float = Field(10.0, gt=0)
    wall_width: float = Field(10.0, gt=0)
    log_file: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_settings(
        cls, settings: Dict[str, Any], source: str = "settings"
    ) -> Tuple["GameConfig", List[str]]:
        """
        Build a config from a raw settings dict.

        Returns:
            (config, warnings) — warnings are user-facing texts for
            values that were replaced by a default

        Raises:
            ConfigError: If any field other than player_count is invalid
        """
        values = dict(settings)
        warnings: List[str] = []

        count, warning = resolve_player_count(values.get("player_count"))
        values["player_count"] = count
        if warning:
            warnings.append(warning)

        try:
            config = cls.model_validate(values)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigError(source, settings, errors) from e

        return config, warnings


def resolve_player_count(raw: Any) -> Tuple[int, Optional[str]]:
    """
    Interpret a raw player count.

    Accepts ints and integer strings from 2 to 4. Anything else,
    including a missing value, resolves to 4 with a warning.
    """
    count: Optional[int] = None
    if isinstance(raw, bool):
        count = None
    elif isinstance(raw, int):
        count = raw
    elif isinstance(raw, str):
        try:
            count = int(raw.strip())
        except ValueError:
            count = None

    if count is not None and MIN_PLAYERS <= count <= MAX_PLAYERS:
        return count, None

    # The user-facing warning goes through the announcer
    logger.info(f"Invalid player count {raw!r}, using {DEFAULT_PLAYER_COUNT}")
    return DEFAULT_PLAYER_COUNT, PLAYER_COUNT_WARNING


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge settings from a JSON file, the environment and overrides.

    Raises:
        ConfigError: If the config file is not a JSON object
    """
    settings: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                try:
                    settings = json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigError(str(path), {}, [f"not valid JSON: {e}"]) from e
            if not isinstance(settings, dict):
                raise ConfigError(
                    str(path), {}, [f"expected a JSON object, got {type(settings).__name__}"]
                )
        else:
            logger.warning(f"Config file not found: {path}")

    load_dotenv(find_dotenv(usecwd=True))
    for env_key, settings_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            settings[settings_key] = os.environ[env_key]

    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value

    return settings
