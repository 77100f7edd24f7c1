# Area: Shared
"""
console_games.config - Configuration
====================================

Settings are read in three layers, later layers winning:

1. Optional JSON config file
2. Environment variables (a .env file in the working directory is loaded first)
3. Command-line flags (applied by cli.py)

Game rules (targets 10 and 5, blackjack at 21, dealer stays on 17) are
fixed and cannot be configured.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger("console_games")

# Environment variable -> config key
ENV_MAPPINGS = {
    "CONSOLE_GAMES_LOG_FILE": "log_file_path",
    "CONSOLE_GAMES_LOG_LEVEL": "log_level",
    "CONSOLE_GAMES_SEED": "seed",
    "CONSOLE_GAMES_PAUSE_SECONDS": "pause_seconds",
    "CONSOLE_GAMES_CLEAR_SCREEN": "clear_screen",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    """
    Runtime settings shared by all three games.

    Attributes:
        log_file_path: Where the JSON log file is written
        log_level: Name of the logging level
        seed: Seed for the random source; None draws from the OS
        pause_seconds: Length of the dramatic pauses between screens
        clear_screen: Whether the console clears between screens
    """

    model_config = ConfigDict(extra="forbid")

    log_file_path: str = "console_games.log"
    log_level: str = "INFO"
    seed: Optional[int] = None
    pause_seconds: float = Field(default=1.0, ge=0)
    clear_screen: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def read_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the JSON config file, or an empty dict when there is none."""
    if not config_path:
        return {}
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file not found: {path}")
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(path), [f"not valid JSON: {e}"]) from e
    if not isinstance(data, dict):
        raise ConfigError(str(path), [f"expected a JSON object, got {type(data).__name__}"])
    return data


def read_environment() -> Dict[str, Any]:
    """Collect config values from the environment after loading .env."""
    load_dotenv(find_dotenv(usecwd=True))
    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]
    return values


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameConfig:
    """
    Build the effective configuration.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values from the command line; None entries are ignored

    Returns:
        Validated GameConfig

    Raises:
        ConfigError: If the file is malformed or a value fails validation
    """
    raw: Dict[str, Any] = {}
    raw.update(read_config_file(config_path))
    raw.update(read_environment())
    if overrides:
        raw.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return GameConfig.model_validate(raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(config_path or "environment", errors) from e
