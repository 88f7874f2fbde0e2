#!/usr/bin/env python3
"""
Enforce Tool Versions CLI Entry Point

Loads the config file, checks every listed binary, prints a line per
unsatisfied requirement and exits non-zero if any check did not pass.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from enforce_tool_versions import __version__, __package_name__
from enforce_tool_versions.config import ConfigError, SettingsManager, load_config
from enforce_tool_versions.execution import run_enforcement
from enforce_tool_versions.utils.logger import Logger


def print_error_line(message: str):
    """Print an error message with a bright red label."""
    print(f"\033[31;1mError:\033[0m {message}")


def print_success_line(message: str):
    """Print a success message with a bright green label."""
    print(f"\033[32;1mSuccess:\033[0m {message}")


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def report(result: Dict[str, Any], verbose: bool = False):
    """Print one line per check that did not pass, and passes when verbose."""
    for check in result["checks"]:
        name = check["name"]
        requirement = check["requirement"]
        if check["status"] == "error":
            print_error_line(f"{name} version could not be identified: {check['error']}")
        elif check["status"] == "fail":
            print_error_line(
                f"{name} version {check['installed']} does not satisfy requirement {requirement}"
            )
        elif verbose:
            print_success_line(
                f"{name} version {check['installed']} satisfies requirement {requirement}"
            )


def build_parser(default_config: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enforce-tool-versions",
        description="Enforce tool versions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  enforce-tool-versions                          Check tools listed in tool-enforcer.json
  enforce-tool-versions --config tools.json      Use another config file
  enforce-tool-versions -c tools.json --verbose  Also print passing tools

Config file:

  {
    "binary": [
      {"name": "make", "version": ">= 4.0"},
      {"name": "git", "version": "~2"}
    ]
  }
"""
    )

    parser.add_argument(
        "--config", "-c",
        default=default_config,
        help=f"Config file (default: {default_config})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging, and print tools that pass"
    )
    parser.add_argument(
        "--version", "-V",
        action="store_true",
        help="Show version and exit"
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    try:
        settings = SettingsManager.get_instance().load()
    except ValueError as e:
        print_error_line(str(e))
        return 1

    args = build_parser(settings.config_file).parse_args(argv)

    if args.version:
        print_version()
        return 0

    log = Logger(level="DEBUG" if args.verbose else settings.log_level)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        log.error(f"Failed to load config: {e}")
        print_error_line(str(e))
        return 1

    result = run_enforcement(config, timeout=settings.command_timeout)
    report(result, verbose=args.verbose)

    return 0 if result["pass"] else 1


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
