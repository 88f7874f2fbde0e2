"""
Version enforcement.

Identify each configured binary and check it against its requirement:
- pass: installed version satisfies the requirement
- fail: installed version does not satisfy it
- error: version could not be identified
"""

import logging
from typing import Any, Dict

from enforce_tool_versions.config.loader import BinaryRequirement, ToolConfig
from enforce_tool_versions.identifier import (
    CommandError,
    IdentificationError,
    get_program,
    identify,
)
from enforce_tool_versions.utils.semver import satisfies

logger = logging.getLogger(__name__)


def check_binary(binary: BinaryRequirement, timeout: float = 10.0) -> Dict[str, Any]:
    """
    Check one binary against its version requirement.

    Args:
        binary: Binary name and requirement from the config
        timeout: Seconds to wait for `<binary> --version`

    Returns:
        {"name", "requirement", "status": "pass"|"fail", "installed"}
        or {"name", "requirement", "status": "error", "error"}
    """
    result: Dict[str, Any] = {"name": binary.name, "requirement": binary.version}

    try:
        program = get_program(binary.name)
        installed = identify(program, timeout=timeout)
    except (CommandError, IdentificationError, ValueError) as e:
        logger.error(f"Failed to identify {binary.name}: {e}")
        result["status"] = "error"
        result["error"] = str(e)
        return result

    result["installed"] = installed
    if satisfies(installed, binary.version):
        logger.debug(f"{binary.name} version {installed} satisfies requirement {binary.version}")
        result["status"] = "pass"
    else:
        logger.debug(f"{binary.name} version {installed} does not satisfy requirement {binary.version}")
        result["status"] = "fail"
    return result


def run_enforcement(config: ToolConfig, timeout: float = 10.0) -> Dict[str, Any]:
    """
    Check every binary in the config.

    One binary failing does not stop the others from being checked.

    Returns:
        {
            "pass": bool,
            "checks": [...],    # one check_binary result per binary
            "failures": [...],  # checks with status "fail"
            "errors": [...]     # checks with status "error"
        }
    """
    checks = [check_binary(binary, timeout=timeout) for binary in config.binaries]
    failures = [c for c in checks if c["status"] == "fail"]
    errors = [c for c in checks if c["status"] == "error"]

    all_pass = not failures and not errors
    if all_pass:
        logger.info(f"All {len(checks)} tool version checks passed")
    else:
        logger.warning(
            f"Tool version checks failed: {len(failures)} unsatisfied, {len(errors)} errors"
        )

    return {
        "pass": all_pass,
        "checks": checks,
        "failures": failures,
        "errors": errors,
    }
