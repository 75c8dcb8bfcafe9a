"""Data models for yarn-bump.

These Pydantic models represent the core data structures passed between
the stages of an upgrade run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class UpgradeSettings(BaseModel):
    """Options for a single upgrade run, built once from the command line.

    Attributes:
        working_directory: Root of the yarn workspace.
        targets: Dependency names to update. Empty means every dependency.
        prefer_latest: Adopt the "latest" column when it is a plain
                       MAJOR.MINOR.PATCH version instead of "wanted".
        dry_run: Report what would change without writing any manifest.
    """

    model_config = ConfigDict(frozen=True)

    working_directory: Path
    targets: frozenset[str] = frozenset()
    prefer_latest: bool = False
    dry_run: bool = False


class WorkspaceEntry(BaseModel):
    """One value from `yarn workspaces info`.

    Only the location is needed; dependency bookkeeping keys are ignored.
    """

    location: str


class OutdatedRow(BaseModel):
    """A single row of the `yarn outdated` table."""

    dependency_name: str
    current_version: str
    wanted_version: str
    latest_version: str
    workspace: str


class VersionUpdate(BaseModel):
    """Records a dependency version change applied to a manifest.

    Attributes:
        dependency_name: The dependency that was bumped.
        old: The version installed before the run.
        new: The version written to the manifest.
    """

    dependency_name: str
    old: str
    new: str


class NoUpdatesFound(BaseModel):
    """`yarn outdated` exited cleanly: nothing to update."""

    kind: Literal["no-updates"] = "no-updates"


class ReportAvailable(BaseModel):
    """`yarn outdated` found outdated dependencies and printed its table."""

    kind: Literal["report"] = "report"
    text: str


class InvocationFailed(BaseModel):
    """`yarn outdated` could not be run or produced no output."""

    kind: Literal["failed"] = "failed"
    cause: str


OutdatedResult = Union[NoUpdatesFound, ReportAvailable, InvocationFailed]

WorkspaceMapping = dict[str, str]

GroupedUpdates = dict[str, list[OutdatedRow]]
