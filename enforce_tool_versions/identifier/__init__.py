"""
Identifier Module

Supported programs and how to read their installed version.
"""

from .programs import (
    Program,
    ProgramNotFoundError,
    IdentificationError,
    CommandError,
    get_program,
    get_program_name,
    identify,
    run_command,
)

__all__ = [
    "Program",
    "ProgramNotFoundError",
    "IdentificationError",
    "CommandError",
    "get_program",
    "get_program_name",
    "identify",
    "run_command",
]
