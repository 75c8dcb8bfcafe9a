"""Workspace discovery.

Maps every workspace name to its directory, relative to the workspace
root. The root package itself is included with an empty path.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from .manifest import get_package_name, load_package_json
from .models import UpgradeSettings, WorkspaceEntry, WorkspaceMapping
from .shell import step, yarn

_WORKSPACES_INFO = TypeAdapter(dict[str, WorkspaceEntry])


def parse_workspaces_info(text: str) -> WorkspaceMapping:
    """Parse `yarn workspaces info` JSON into name → location.

    Raises:
        pydantic.ValidationError: If the output is not the expected JSON.
    """
    info = _WORKSPACES_INFO.validate_json(text)
    return {name: entry.location for name, entry in info.items()}


def discover_workspaces(settings: UpgradeSettings) -> WorkspaceMapping:
    """Build the workspace mapping for the project at the working directory.

    The root package.json must be readable and `yarn workspaces info`
    must succeed; either failure aborts the run.
    """
    step("Discovering workspaces")

    root = settings.working_directory
    root_name = get_package_name(load_package_json(root / "package.json"), root.name)
    mapping: WorkspaceMapping = {root_name: ""}
    mapping.update(parse_workspaces_info(yarn("-s", "workspaces", "info", cwd=root)))

    for name, location in mapping.items():
        print(f"  {name} ({location or '.'})")

    return mapping
