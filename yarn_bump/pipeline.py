"""Upgrade pipeline: discover → outdated → filter → group → rewrite.

This module orchestrates a yarn-bump run:
1. Discover the workspaces and where each one lives
2. Run `yarn outdated` and read its report table
3. Keep the targeted dependencies whose chosen version differs from the
   installed one
4. Group them by the workspace that declares them
5. Rewrite each workspace's package.json, one after another

Nothing is rolled back if a later workspace fails: manifests already
written stay written.
"""

from __future__ import annotations

from collections.abc import Iterable

from .manifest import rewrite_manifest
from .models import (
    GroupedUpdates,
    InvocationFailed,
    NoUpdatesFound,
    OutdatedRow,
    UpgradeSettings,
    VersionUpdate,
    WorkspaceMapping,
)
from .report import parse_outdated
from .shell import fatal, run_outdated, step
from .versions import bump_kind, get_new_version, wants_update
from .workspace import discover_workspaces


def filter_wanted_updates(
    rows: Iterable[OutdatedRow], settings: UpgradeSettings
) -> list[OutdatedRow]:
    """Keep rows that are targeted and would actually change version.

    With no targets every dependency is considered.
    """
    return [
        row
        for row in rows
        if (not settings.targets or row.dependency_name in settings.targets)
        and wants_update(row, settings.prefer_latest)
    ]


def group_by_workspace(rows: Iterable[OutdatedRow]) -> GroupedUpdates:
    """Group rows by workspace, keeping report order within and across groups."""
    groups: GroupedUpdates = {}
    for row in rows:
        groups.setdefault(row.workspace, []).append(row)
    return groups


def update_workspace_manifest(
    workspace: str,
    rows: list[OutdatedRow],
    mapping: WorkspaceMapping,
    settings: UpgradeSettings,
) -> list[VersionUpdate]:
    """Bump the given dependencies in one workspace's package.json.

    Returns:
        The updates that changed the manifest. Rows whose version could
        not be found in the text are left out.
    """
    if workspace not in mapping:
        fatal(f"Unknown workspace in outdated report: {workspace!r}")

    path = settings.working_directory / mapping[workspace] / "package.json"
    updates = [
        VersionUpdate(
            dependency_name=row.dependency_name,
            old=row.current_version,
            new=get_new_version(row, settings.prefer_latest),
        )
        for row in rows
    ]
    return rewrite_manifest(path, updates, write=not settings.dry_run)


def _describe(update: VersionUpdate) -> str:
    kind = bump_kind(update.old, update.new)
    suffix = f" ({kind})" if kind else ""
    return f"{update.dependency_name}: {update.old} → {update.new}{suffix}"


def run_upgrade(settings: UpgradeSettings) -> dict[str, list[VersionUpdate]]:
    """Execute a full upgrade run.

    Args:
        settings: Options built from the command line.

    Returns:
        Map of workspace name → updates applied to its manifest. Workspaces
        whose manifest did not change are left out.
    """
    mapping = discover_workspaces(settings)

    step("Checking for outdated dependencies")
    result = run_outdated(settings.working_directory)
    if isinstance(result, NoUpdatesFound):
        print("  All dependencies are up to date.")
        return {}
    if isinstance(result, InvocationFailed):
        print(f"  Could not run yarn outdated: {result.cause}")
        return {}

    rows = parse_outdated(result.text)
    groups = group_by_workspace(filter_wanted_updates(rows, settings))
    print(f"  {len(rows)} outdated, {sum(map(len, groups.values()))} to update")

    if not groups:
        print("\nNothing to update.")
        return {}

    if settings.dry_run:
        step("Dry run: manifests left untouched")
    else:
        step("Updating manifests")
    applied: dict[str, list[VersionUpdate]] = {}
    for workspace, workspace_rows in groups.items():
        updates = update_workspace_manifest(
            workspace, workspace_rows, mapping, settings
        )
        if not updates:
            print(f"  {workspace}: unchanged")
            continue
        applied[workspace] = updates
        print(f"  {workspace}")
        for update in updates:
            print(f"    {_describe(update)}")

    return applied
