"""
Execution Module

Runs the configured tool version checks.
"""

from .enforce import (
    check_binary,
    run_enforcement,
)

__all__ = [
    "check_binary",
    "run_enforcement",
]
