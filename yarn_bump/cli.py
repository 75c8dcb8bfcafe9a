"""CLI entry point for yarn-bump."""

from __future__ import annotations

from pathlib import Path

import click

from yarn_bump.models import UpgradeSettings
from yarn_bump.pipeline import run_upgrade


def _count(n: int, singular: str, plural: str) -> str:
    return f"{n} {singular if n == 1 else plural}"


@click.command()
@click.version_option(package_name="yarn-bump")
@click.argument("dependencies", nargs=-1)
@click.option(
    "-l",
    "--latest",
    is_flag=True,
    help="Prefer the latest version over the range-compatible one.",
)
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    help="Show what would change without writing any package.json.",
)
@click.option(
    "-C",
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Workspace root to run in.",
)
def cli(dependencies: tuple[str, ...], latest: bool, dry_run: bool, cwd: Path) -> None:
    """Bump outdated dependencies across a yarn workspace.

    Pass DEPENDENCIES to only update those packages; with none, every
    outdated dependency is considered.
    """
    root = cwd.resolve()
    if not (root / "package.json").exists():
        raise click.ClickException(
            "No package.json found. Run from the workspace root or pass --cwd."
        )

    settings = UpgradeSettings(
        working_directory=root,
        targets=frozenset(dependencies),
        prefer_latest=latest,
        dry_run=dry_run,
    )
    applied = run_upgrade(settings)

    if applied:
        total = sum(len(updates) for updates in applied.values())
        verb = "Would update" if dry_run else "Updated"
        deps = _count(total, "dependency", "dependencies")
        spaces = _count(len(applied), "workspace", "workspaces")
        click.echo(f"\n✓ {verb} {deps} in {spaces}")
