"""
Config Module
Runtime settings and the tool requirements file.
"""

from .settings import SettingsManager, Settings
from .loader import (
    BinaryRequirement,
    ConfigError,
    ToolConfig,
    load_config,
    parse_config,
)

__all__ = [
    "SettingsManager",
    "Settings",
    # Requirements file
    "BinaryRequirement",
    "ConfigError",
    "ToolConfig",
    "load_config",
    "parse_config",
]
