"""Status command implementation for poaclock.

Reports whether ``poac.lock`` needs to be regenerated, using the same
modification-time rule as the build pipeline::

    $ poaclock status
    [OK] poac.lock is up to date

Exit status is 0 when the lockfile is fresh and 1 when it is missing,
outdated, or cannot be inspected.
"""

from __future__ import annotations

import sys

import click

from poaclock.core import is_outdated, lockfile_path
from poaclock.constants import LOCKFILE_NAME, MANIFEST_FILE_NAME
from poaclock.context import PoacLockContext, pass_context
from poaclock.exceptions import PoacLockError
from poaclock.utils import get_logger, print_error, print_success, print_warning

logger = get_logger("commands.status")


@click.command()
@pass_context
def status(ctx: PoacLockContext) -> None:
    """Check whether the lockfile is up to date with the manifest."""
    try:
        outdated = is_outdated(ctx.project_dir)
    except PoacLockError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.debug("Lockfile outdated for %s: %s", ctx.project_dir, outdated)

    if not outdated:
        print_success(f"{LOCKFILE_NAME} is up to date")
        sys.exit(0)

    if lockfile_path(ctx.project_dir).exists():
        print_warning(f"{LOCKFILE_NAME} is older than {MANIFEST_FILE_NAME}")
    else:
        print_warning(f"{LOCKFILE_NAME} has not been generated yet")
    sys.exit(1)
