"""
Program Identifier

Finds the installed version of a supported program by running
`<program> --version` and picking the version out of its banner.
"""

import logging
import subprocess
from enum import Enum
from typing import Callable, Dict

logger = logging.getLogger(__name__)


class Program(Enum):
    """Programs whose version can be identified."""
    MAKE = "make"
    GIT = "git"


class ProgramNotFoundError(ValueError):
    """Program name is not one we know how to identify."""


class IdentificationError(RuntimeError):
    """Program output did not contain a version."""


class CommandError(RuntimeError):
    """Command could not be run or exited non-zero."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


def get_program(name: str) -> Program:
    """Return the Program for the given name."""
    try:
        return Program(name)
    except ValueError:
        raise ProgramNotFoundError(f"program not found: {name!r}")


def get_program_name(program: Program) -> str:
    return program.value


def run_command(name: str, *args: str, timeout: float = 10.0) -> str:
    """
    Run a command and return its combined stdout and stderr.

    Raises:
        CommandError: binary missing, timed out, or non-zero exit
    """
    try:
        result = subprocess.run(
            [name, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise CommandError(f"{name} is not installed or not on PATH") from e
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"{name} timed out after {timeout}s") from e

    if result.returncode != 0:
        raise CommandError(
            f"{name} exited with status {result.returncode}", output=result.stdout
        )
    return result.stdout


def get_last_word_on_first_line(output: str) -> str:
    """
    On the first line, get the last whitespace-delimited word.

    Example output:

        GNU Make 4.4
        Built for aarch64-apple-darwin21.6.0
    """
    lines = output.splitlines()
    if not lines:
        raise IdentificationError("no lines in output")
    words = lines[0].split()
    if not words:
        raise IdentificationError("no words in first line")
    return words[-1]


def identify_make(output: str) -> str:
    """`GNU Make 4.4` -> `4.4`"""
    return get_last_word_on_first_line(output)


def identify_git(output: str) -> str:
    """`git version 2.39.1` -> `2.39.1`"""
    return get_last_word_on_first_line(output)


IDENTIFIERS: Dict[Program, Callable[[str], str]] = {
    Program.MAKE: identify_make,
    Program.GIT: identify_git,
}


def identify(program: Program, timeout: float = 10.0) -> str:
    """
    Return the installed version text of a program.

    Raises:
        CommandError: the version command failed
        IdentificationError: the output had no version in it
    """
    identifier = IDENTIFIERS[program]
    name = get_program_name(program)

    try:
        output = run_command(name, "--version", timeout=timeout)
    except CommandError as e:
        logger.debug(f"Failed to get {name} version output: {e} (output: {e.output!r})")
        raise

    try:
        version = identifier(output)
    except IdentificationError as e:
        logger.debug(f"Failed to identify {name} version from {output!r}: {e}")
        raise

    logger.debug(f"Identified {name} version {version}")
    return version
