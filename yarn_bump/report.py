"""Parser for the `yarn outdated` table.

yarn v1 prints something like::

    yarn outdated v1.22.19
    info Color legend : ...
    Package Current Wanted Latest Workspace Package Type URL
    foo     1.0.0   1.1.0  2.0.0  pkg-a     dependencies https://...
    Done in 0.61s.

Only the rows between the header and the "Done" line are data.
"""

from __future__ import annotations

from .models import OutdatedRow

FIELD_COUNT = 5


def parse_line(line: str) -> OutdatedRow:
    """Split one table row into its first five columns.

    Columns are taken positionally with no validation: a short line
    leaves the trailing fields empty, extra columns (package type, URL)
    are ignored.
    """
    fields = line.split()[:FIELD_COUNT]
    fields += [""] * (FIELD_COUNT - len(fields))
    name, current, wanted, latest, workspace = fields
    return OutdatedRow(
        dependency_name=name,
        current_version=current,
        wanted_version=wanted,
        latest_version=latest,
        workspace=workspace,
    )


def parse_outdated(text: str) -> list[OutdatedRow]:
    """Extract the rows of an outdated report, in report order.

    Returns an empty list when there is no "Package" header. A missing
    "Done" terminator means the table runs to the end of the text.
    """
    lines = text.split("\n")
    header = next(
        (i for i, line in enumerate(lines) if line.startswith("Package")), None
    )
    if header is None:
        return []

    done = next(
        (i for i in range(header, len(lines)) if lines[i].startswith("Done")),
        len(lines),
    )
    return [parse_line(line) for line in lines[header + 1 : done] if line.strip()]
