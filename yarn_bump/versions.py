"""Version decision utilities.

Decides which version each outdated dependency should move to, and
classifies the resulting bump with semver for the run summary.
"""

from __future__ import annotations

import re

import semver

from .models import OutdatedRow

REGULAR_VERSION = re.compile(r"^\d+\.\d+\.\d+$")


def is_regular_version(version_str: str) -> bool:
    """Return True for a plain MAJOR.MINOR.PATCH version.

    Pre-release tags, build metadata and range operators all disqualify:
    "2.0.0" is regular, "2.0.0-beta.1", "^2.0.0" and "exotic" are not.
    """
    return REGULAR_VERSION.match(version_str) is not None


def get_new_version(row: OutdatedRow, prefer_latest: bool) -> str:
    """Pick the version a dependency should be bumped to.

    The "latest" column is only trusted when it is a regular version; some
    registries report dist-tags or pre-releases there. Otherwise the
    range-compatible "wanted" version is used.
    """
    if prefer_latest and is_regular_version(row.latest_version):
        return row.latest_version
    return row.wanted_version


def wants_update(row: OutdatedRow, prefer_latest: bool) -> bool:
    """Return True when the chosen version differs from the installed one."""
    return get_new_version(row, prefer_latest) != row.current_version


def parse_version(version_str: str) -> semver.Version:
    """Read a column of the outdated table as a semver.Version.

    yarn sometimes shows short versions such as "2" or "2.1"; missing
    components count as zero. Anything past the third dot-separated part
    is dropped, so "3.0.0-rc.1" reads as the pre-release "3.0.0-rc".

    Raises:
        ValueError: For columns that are not versions ("exotic", "").
    """
    major, minor, patch = (version_str.split(".") + ["0", "0"])[:3]
    return semver.Version.parse(f"{major}.{minor}.{patch}")


def bump_kind(old: str, new: str) -> str | None:
    """Classify a version change as "major", "minor" or "patch".

    Returns None when either side can't be parsed (e.g. "exotic" or an
    empty column) or when the versions are equal.

    Examples:
        bump_kind("1.0.0", "2.0.0") → "major"
        bump_kind("1.0.0", "1.1.0") → "minor"
        bump_kind("1.0.0", "1.0.5") → "patch"
    """
    try:
        before, after = parse_version(old), parse_version(new)
    except ValueError:
        return None
    if before.major != after.major:
        return "major"
    if before.minor != after.minor:
        return "minor"
    if before.patch != after.patch:
        return "patch"
    return None
