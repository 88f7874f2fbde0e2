"""
Logger
Logging setup for the enforce-tool-versions CLI.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Simple logger wrapper that owns the package's stderr handler."""

    def __init__(self, name: str = "enforce_tool_versions", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.handler: Optional[logging.Handler] = None

        # Only add handler if none exist
        if not self.logger.handlers:
            self.handler = logging.StreamHandler(sys.stderr)
            self.handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(self.handler)
        else:
            self.handler = self.logger.handlers[0]

        self.set_level(level)

    def set_level(self, level: str) -> None:
        """Set the level on the logger and its handler, e.g. "DEBUG"."""
        numeric = getattr(logging, level.upper(), logging.INFO)
        self.logger.setLevel(numeric)
        if self.handler is not None:
            self.handler.setLevel(numeric)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
