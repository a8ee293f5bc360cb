"""Show command implementation for poaclock.

Prints the packages recorded in ``poac.lock``::

    $ poaclock show
    $ poaclock show --format json > locked.json

Dependency versions are not stored in the lockfile, so only dependency
names are shown.
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List

import click

from poaclock.core import read
from poaclock.constants import LOCKFILE_NAME
from poaclock.models import DependencyGraph
from poaclock.context import PoacLockContext, pass_context
from poaclock.exceptions import PoacLockError
from poaclock.utils import (
    get_console,
    get_logger,
    print_error,
    print_table,
    print_warning,
)

logger = get_logger("commands.show")


@click.command()
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@pass_context
def show(ctx: PoacLockContext, format: str) -> None:
    """Show the packages recorded in the lockfile."""
    try:
        graph = read(ctx.project_dir, max_size=ctx.config.max_file_size)
    except PoacLockError as exc:
        print_error(str(exc))
        sys.exit(1)

    if graph is None:
        print_warning(f"No {LOCKFILE_NAME} found in {ctx.project_dir}")
        return

    rows = _graph_rows(graph)
    logger.debug("Rendering %d locked packages as %s", len(rows), format)

    if format.lower() == "json":
        get_console().print_json(json.dumps(rows))
        return

    print_table(
        [{**row, "dependencies": ", ".join(row["dependencies"])} for row in rows],
        columns=["name", "version", "dependencies"],
        title=LOCKFILE_NAME,
        caption=f"{len(rows)} packages",
    )


def _graph_rows(graph: DependencyGraph) -> List[Dict[str, Any]]:
    return [
        {
            "name": package.name,
            "version": package.version,
            "dependencies": [name for name, _version in graph[package] or ()],
        }
        for package in sorted(graph)
    ]
