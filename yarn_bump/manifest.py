"""package.json reading and rewriting utilities.

Manifests are rewritten as text rather than round-tripped through a JSON
parser, so key order, indentation and trailing newlines are untouched.
Only the quoted version of each bumped dependency changes.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from .models import VersionUpdate


def load_package_json(path: Path) -> dict[str, Any]:
    """Load and parse a package.json file."""
    return json.loads(path.read_text(encoding="utf-8"))


def get_package_name(manifest: dict[str, Any], fallback: str) -> str:
    """Extract the package name from a parsed manifest.

    Args:
        manifest: Parsed package.json contents.
        fallback: Value to return if name is not specified.
    """
    return manifest.get("name") or fallback


def version_pattern(dependency_name: str) -> re.Pattern[str]:
    """Build the regex matching `"<name>": "<^|~><MAJOR.MINOR.PATCH>"`.

    The range operator, if any, is captured as group 1.
    """
    name = re.escape(dependency_name)
    return re.compile(rf'"{name}": "(\^|~)?\d+\.\d+\.\d+"')


def apply_version_patch(text: str, dependency_name: str, new_version: str) -> str:
    """Replace the version of one dependency in manifest text.

    Only the first occurrence is rewritten. A dependency listed in both
    "dependencies" and "devDependencies" keeps its second entry as is.

    Examples:
        '"foo": "^1.0.0"' → '"foo": "^1.1.0"' (new_version="1.1.0")
        '"foo": "1.0.0"' → '"foo": "1.1.0"'
    """

    def replacement(match: re.Match[str]) -> str:
        prefix = match.group(1) or ""
        return f'"{dependency_name}": "{prefix}{new_version}"'

    return version_pattern(dependency_name).sub(replacement, text, count=1)


def rewrite_manifest(
    path: Path, updates: list[VersionUpdate], *, write: bool = True
) -> list[VersionUpdate]:
    """Apply version updates to a package.json file.

    Patches are applied one after another on the same text. An update whose
    pattern matches nothing (a "1.x" range, an undeclared dependency) is
    left out of the result. The file is only written when something changed.

    Args:
        path: Path to the package.json file.
        updates: Dependencies to bump, in report order.
        write: If False, compute the change but leave the file alone.

    Returns:
        The updates that changed the text, in the order given.
    """
    text = path.read_text(encoding="utf-8")
    applied: list[VersionUpdate] = []
    for update in updates:
        patched = apply_version_patch(text, update.dependency_name, update.new)
        if patched != text:
            applied.append(update)
        text = patched

    if applied and write:
        path.write_text(text, encoding="utf-8")
    return applied
