"""
Config file loading.

The config file lists the binaries to check and the version each must meet:

    {
        "binary": [
            {"name": "make", "version": ">= 4.0"},
            {"name": "git", "version": "~2"}
        ]
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import ValidationError, validate

from enforce_tool_versions.identifier import ProgramNotFoundError, get_program
from enforce_tool_versions.utils.semver import VersionParseError, parse_requirement

logger = logging.getLogger(__name__)


CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["binary"],
    "properties": {
        "binary": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "version"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "version": {"type": "string", "minLength": 1},
                },
                "additionalProperties": False,
            },
        },
    },
    "additionalProperties": False,
}


class ConfigError(ValueError):
    """Config file is missing, malformed, or names something unsupported."""


@dataclass
class BinaryRequirement:
    """One binary and the version requirement it must meet."""
    name: str
    version: str


@dataclass
class ToolConfig:
    """Parsed config file."""
    binaries: List[BinaryRequirement] = field(default_factory=list)
    path: Path | None = None


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def parse_config(data: Any, path: Path | None = None) -> ToolConfig:
    """
    Validate raw config data and build a ToolConfig.

    Every binary must be a supported program and every version a
    parseable requirement.

    Raises:
        ConfigError: on the first problem found
    """
    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        location = "/".join(str(p) for p in e.path) or "<root>"
        logger.error(f"Config validation failed at {location}: {e.message}")
        raise ConfigError(f"Invalid config at {location}: {e.message}") from e

    binaries = []
    for entry in data["binary"]:
        binary = BinaryRequirement(name=entry["name"], version=entry["version"])

        try:
            get_program(binary.name)
        except ProgramNotFoundError as e:
            logger.error(f"Failed to get program for {binary}: {e}")
            raise ConfigError(f"Unsupported binary {binary.name!r}") from e

        try:
            parse_requirement(binary.version)
        except VersionParseError as e:
            logger.error(f"Failed to parse requirement for {binary}: {e}")
            raise ConfigError(
                f"Invalid version requirement {binary.version!r} for {binary.name}: {e}"
            ) from e

        binaries.append(binary)

    return ToolConfig(binaries=binaries, path=path)


def load_config(path: Path | str) -> ToolConfig:
    """Load and validate a config file."""
    path = Path(path)
    config = parse_config(_read_json(path), path=path)
    logger.debug(f"Loaded config from {path}: {config.binaries}")
    return config
