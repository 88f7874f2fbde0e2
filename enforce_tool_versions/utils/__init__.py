"""
Utils Module
Version matching and logging helpers.
"""

from .semver import (
    Requirement,
    RequirementType,
    Version,
    VersionParseError,
    TooManyPartsError,
    InvalidIntegerError,
    compare_versions,
    parse_requirement,
    parse_version,
    satisfies,
)

__all__ = [
    "Requirement",
    "RequirementType",
    "Version",
    "VersionParseError",
    "TooManyPartsError",
    "InvalidIntegerError",
    "compare_versions",
    "parse_requirement",
    "parse_version",
    "satisfies",
]
