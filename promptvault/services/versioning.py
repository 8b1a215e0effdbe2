# promptvault/services/versioning.py
"""
Semantic version bump rules for prompt versions.

Malformed version strings are repaired rather than rejected: anything that
does not split into three dot-separated parts resets to 1.0.0, and a part
that is not a non-negative integer falls back to a default.
"""

import re

from promptvault.models import INITIAL_VERSION, VersionBump

_NUMERIC = re.compile(r"^[0-9]+$")


def _parse_component(part: str, default: int) -> int:
    if _NUMERIC.match(part):
        return int(part)
    return default


def parse_version(current: str | None) -> tuple[int, int, int] | None:
    """Split MAJOR.MINOR.PATCH into integers, or None if it has the wrong shape."""
    parts = (current or "").split(".")
    if len(parts) != 3:
        return None

    return (
        _parse_component(parts[0], 1),
        _parse_component(parts[1], 0),
        _parse_component(parts[2], 0),
    )


def normalize_bump(kind: str | VersionBump | None) -> VersionBump:
    """Map a requested bump kind to a VersionBump. Only exact "major" and "minor" are special."""
    if isinstance(kind, VersionBump):
        return kind
    try:
        return VersionBump(kind)
    except ValueError:
        return VersionBump.PATCH


def bump_version(current: str | None, kind: str | VersionBump | None = VersionBump.PATCH) -> str:
    """
    Compute the version string that follows `current`.

    Examples:
        bump_version("1.2.3", "patch") -> "1.2.4"
        bump_version("1.2.3", "minor") -> "1.3.0"
        bump_version("1.2.3", "major") -> "2.0.0"
        bump_version("bad", "patch")   -> "1.0.0"
    """
    parsed = parse_version(current)
    if parsed is None:
        return INITIAL_VERSION

    major, minor, patch = parsed
    bump = normalize_bump(kind)

    if bump is VersionBump.MAJOR:
        return f"{major + 1}.0.0"
    if bump is VersionBump.MINOR:
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"
