"""
Semantic versioning utilities.

Parses partial versions ("1", "1.2", "1.2.3") and requirement strings, and
checks whether an installed version satisfies a requirement.

Supported requirements:
    - Exact: "1.2.3", "1.2"
    - Caret: "^1.2.3" (matched as exact equality)
    - Tilde: "~1", "~1.2", "~1.2.3"
    - Single condition: "==1.2", ">1.2", "<1.2", ">=1.2", "<=1.2"
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Two-character operators first so ">=" is never read as ">" + "=1.2"
OPERATOR_PATTERN = re.compile(r'^(==|>=|<=|>|<)\s*(.*)$', re.DOTALL)

MAX_PARTS = 3


class VersionParseError(ValueError):
    """Base error for unparseable version text."""


class TooManyPartsError(VersionParseError):
    """Version has more than major.minor.patch."""


class InvalidIntegerError(VersionParseError):
    """A version component is not a non-negative integer."""


class RequirementType(Enum):
    EXACT = "exact"
    CARET = "caret"
    TILDE = "tilde"
    EQUAL = "=="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="


CONDITION_OPERATORS = {
    "==": RequirementType.EQUAL,
    ">": RequirementType.GREATER_THAN,
    "<": RequirementType.LESS_THAN,
    ">=": RequirementType.GREATER_THAN_OR_EQUAL,
    "<=": RequirementType.LESS_THAN_OR_EQUAL,
}


@dataclass(frozen=True)
class Version:
    """A major version with optional minor and patch components.

    A missing component is not the same as zero: "1" and "1.0" compare
    differently.
    """
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None

    def __post_init__(self):
        if self.patch is not None and self.minor is None:
            raise ValueError("patch requires minor")

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.patch]
        return ".".join(str(p) for p in parts if p is not None)


@dataclass(frozen=True)
class Requirement:
    """A parsed requirement: one constraint type and its target version."""
    type: RequirementType
    version: Version


def _parse_component(part: str, text: str) -> int:
    # int() would also accept "+1", " 1", "1_0" and non-ASCII digits
    if not part.isascii() or not part.isdigit():
        raise InvalidIntegerError(f"Invalid version component {part!r} in {text!r}")
    return int(part)


def parse_version(text: str) -> Version:
    """
    Parse a version string into a Version.

    Args:
        text: Version text like "1", "1.2", "v1.2.3"

    Returns:
        Version with minor/patch set only when present in the text

    Raises:
        TooManyPartsError: more than three dot-separated parts
        InvalidIntegerError: a part is not a non-negative integer
    """
    s = text.strip()
    if s.startswith("v"):
        s = s[1:]

    parts = s.split(".")
    if len(parts) > MAX_PARTS:
        raise TooManyPartsError(f"Invalid version, too many parts: {text!r}")

    components = [_parse_component(p, text) for p in parts]
    return Version(*components)


def parse_requirement(text: str) -> Requirement:
    """
    Parse a requirement string into a Requirement.

    Version errors from the target propagate unchanged.
    """
    s = text.strip()

    if s.startswith("^"):
        return Requirement(RequirementType.CARET, parse_version(s[1:]))

    if s.startswith("~"):
        return Requirement(RequirementType.TILDE, parse_version(s[1:]))

    match = OPERATOR_PATTERN.match(s)
    if match:
        operator, version_text = match.groups()
        return Requirement(CONDITION_OPERATORS[operator], parse_version(version_text))

    return Requirement(RequirementType.EXACT, parse_version(s))


def _compare_optional(a: Optional[int], b: Optional[int]) -> int:
    if a is not None and b is not None:
        return (a > b) - (a < b)
    if a is not None:
        return 1
    if b is not None:
        return -1
    return 0


def compare_versions(a: Version, b: Version) -> int:
    """
    Compare two versions component by component.

    A present component outranks an absent one, so "1" < "1.0" < "1.0.0".

    Returns:
        -1, 0 or 1 as a is less than, equal to or greater than b
    """
    if a.major != b.major:
        return 1 if a.major > b.major else -1

    result = _compare_optional(a.minor, b.minor)
    if result != 0:
        return result

    return _compare_optional(a.patch, b.patch)


def _satisfies_tilde(version: Version, target: Version) -> bool:
    if version.major != target.major:
        return False

    if target.minor is None:
        return True

    # Absent components count as zero here only, not in compare_versions
    minor = version.minor if version.minor is not None else 0
    if minor != target.minor:
        return False

    if target.patch is None:
        return True

    patch = version.patch if version.patch is not None else 0
    return compare_versions(Version(version.major, minor, patch), target) >= 0


def satisfies(version: str, requirement: str) -> bool:
    """
    Check if a version satisfies a requirement.

    Unparseable input never satisfies anything; no error is raised. Call
    parse_version / parse_requirement directly to get the reason.

    Examples (version on the left, requirement on the right):
        - 1.2.3 matches 1.2.3
        - 1.2.3 matches ^1.2.3
        - 1.2.3 does not match 1.2
        - 1.2.4 matches ~1.2.3
        - 1.2.3 matches ~1
        - 1.2.3 does not match ~2
        - 1.2.3 matches > 1.2
    """
    try:
        req = parse_requirement(requirement)
        v = parse_version(version)
    except VersionParseError:
        return False

    if req.type is RequirementType.TILDE:
        return _satisfies_tilde(v, req.version)

    result = compare_versions(v, req.version)

    if req.type in (RequirementType.EXACT, RequirementType.CARET, RequirementType.EQUAL):
        return result == 0
    if req.type is RequirementType.GREATER_THAN:
        return result > 0
    if req.type is RequirementType.LESS_THAN:
        return result < 0
    if req.type is RequirementType.GREATER_THAN_OR_EQUAL:
        return result >= 0
    if req.type is RequirementType.LESS_THAN_OR_EQUAL:
        return result <= 0

    return False
