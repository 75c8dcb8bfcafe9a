"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yarn_bump.models import OutdatedRow, UpgradeSettings

ROOT_MANIFEST = """\
{
  "name": "monorepo",
  "private": true,
  "workspaces": ["packages/*"],
  "devDependencies": {
    "eslint": "^8.0.0"
  }
}
"""

PKG_A_MANIFEST = """\
{
  "name": "pkg-a",
  "version": "1.0.0",
  "dependencies": {
    "foo": "^1.0.0",
    "bar": "~2.3.4",
    "baz": "3.0.0"
  },
  "devDependencies": {
    "foo": "^1.0.0"
  }
}
"""

OUTDATED_REPORT = """\
yarn outdated v1.22.19
info Color legend :
 "<red>"    : Major Update backward-incompatible updates
Package Current Wanted Latest Workspace Package Type URL
foo     1.0.0   1.1.0  2.0.0  pkg-a     dependencies https://example.com/foo
eslint  8.0.0   8.5.0  9.1.0  monorepo  devDependencies https://example.com/eslint
bar     2.3.4   2.3.9  3.0.0-rc.1 pkg-a dependencies https://example.com/bar
Done in 0.61s.
"""


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Create a yarn workspace with a root package and one member."""
    (tmp_path / "package.json").write_text(ROOT_MANIFEST)
    pkg_dir = tmp_path / "packages" / "pkg-a"
    pkg_dir.mkdir(parents=True)
    (pkg_dir / "package.json").write_text(PKG_A_MANIFEST)
    return tmp_path


@pytest.fixture
def workspaces_info_json() -> str:
    """Output of `yarn -s workspaces info` for workspace_root."""
    return json.dumps(
        {
            "pkg-a": {
                "location": "packages/pkg-a",
                "workspaceDependencies": [],
                "mismatchedWorkspaceDependencies": [],
            }
        }
    )


@pytest.fixture
def settings(workspace_root: Path) -> UpgradeSettings:
    """Default settings: all dependencies, wanted versions."""
    return UpgradeSettings(working_directory=workspace_root)


@pytest.fixture
def make_row():
    """Factory for OutdatedRow with sensible defaults."""

    def _make_row(
        name: str = "foo",
        current: str = "1.0.0",
        wanted: str = "1.1.0",
        latest: str = "2.0.0",
        workspace: str = "pkg-a",
    ) -> OutdatedRow:
        return OutdatedRow(
            dependency_name=name,
            current_version=current,
            wanted_version=wanted,
            latest_version=latest,
            workspace=workspace,
        )

    return _make_row
