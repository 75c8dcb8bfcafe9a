"""Shell and yarn utilities.

Provides simple wrappers around subprocess calls for running yarn
commands, plus output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from .models import InvocationFailed, NoUpdatesFound, OutdatedResult, ReportAvailable


def yarn(*args: str, cwd: Path, check: bool = True) -> str:
    """Run a yarn command and return stdout.

    Args:
        *args: Arguments to pass to yarn (e.g., "-s", "workspaces", "info").
        cwd: Directory to run yarn in (the workspace root).
        check: If True (default), raise on non-zero exit.

    Returns:
        Stripped stdout from the yarn command.
    """
    result = subprocess.run(
        ["yarn", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def run_outdated(cwd: Path) -> OutdatedResult:
    """Run `yarn outdated` and classify how it ended.

    yarn exits non-zero when it finds outdated dependencies, so a failing
    exit status is the normal way to receive the report table. A zero exit
    means everything is up to date.
    """
    try:
        result = subprocess.run(
            ["yarn", "outdated"], cwd=cwd, capture_output=True, text=True
        )
    except OSError as exc:
        # yarn not installed, or cwd does not exist
        return InvocationFailed(cause=str(exc))

    if result.returncode == 0:
        return NoUpdatesFound()

    # the table may land on either stream depending on the yarn version
    output = "\n".join(stream for stream in (result.stdout, result.stderr) if stream)
    if not output.strip():
        return InvocationFailed(
            cause=f"yarn outdated exited with {result.returncode}"
        )
    return ReportAvailable(text=output)


def step(msg: str) -> None:
    """Announce the next stage of an upgrade run between ruled lines."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Report msg on stderr and stop the run with exit status 1.

    Manifests already rewritten by earlier workspaces are kept.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
