"""
Settings
Runtime settings for enforce-tool-versions, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_CONFIG_FILE = "tool-enforcer.json"
DEFAULT_COMMAND_TIMEOUT = 10.0

ENV_LOG_LEVEL = "ENFORCE_TOOL_VERSIONS_LOG_LEVEL"
ENV_CONFIG_FILE = "ENFORCE_TOOL_VERSIONS_CONFIG"
ENV_COMMAND_TIMEOUT = "ENFORCE_TOOL_VERSIONS_TIMEOUT"


@dataclass
class Settings:
    """Runtime settings."""
    log_level: str = "INFO"
    config_file: str = DEFAULT_CONFIG_FILE
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT


def _parse_timeout(value: Optional[str]) -> float:
    if not value:
        return DEFAULT_COMMAND_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"{ENV_COMMAND_TIMEOUT} must be a number, got {value!r}")
    if timeout <= 0:
        raise ValueError(f"{ENV_COMMAND_TIMEOUT} must be positive, got {value!r}")
    return timeout


class SettingsManager:
    """Settings manager - loads and provides settings."""

    _instance: Optional["SettingsManager"] = None

    def __init__(self):
        self._settings: Optional[Settings] = None

    @classmethod
    def get_instance(cls) -> "SettingsManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, dotenv: bool = True) -> Settings:
        """
        Load settings from environment.

        Args:
            dotenv: Also read a .env file from the working directory first.
                Variables already set in the environment win.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        self._settings = Settings(
            log_level=os.getenv(ENV_LOG_LEVEL, "INFO"),
            config_file=os.getenv(ENV_CONFIG_FILE, DEFAULT_CONFIG_FILE),
            command_timeout=_parse_timeout(os.getenv(ENV_COMMAND_TIMEOUT)),
        )
        return self._settings

    def get(self) -> Settings:
        """Get current settings."""
        if self._settings is None:
            # Create default settings if not loaded
            self._settings = Settings()
        return self._settings
