"""
``poaclock`` command line.

The group callback resolves the project directory, loads configuration
and sets up logging and color before any subcommand runs; :func:`main`
turns whatever escapes into a process exit status.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from poaclock.config import load_config
from poaclock.__version__ import __version__
from poaclock.context import PoacLockContext
from poaclock.exceptions import ConfigError, PoacLockError
from poaclock.utils import get_logger, print_error, print_warning, reset_console, setup_logging
from poaclock.commands.show import show
from poaclock.commands.status import status

logger = get_logger("cli")

#: Log level for ``-v`` counts 0, 1 and 2 or more.
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--project-dir",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory holding poac.toml and poac.lock.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="POACLOCK_CONFIG",
    help="Read settings from this file instead of searching the project.",
)
@click.option("--verbose", "-v", count=True, help="Log more (-v info, -vv debug).")
@click.option(
    "--color/--no-color",
    default=True,
    envvar="POACLOCK_COLOR",
    help="Colorize terminal output.",
)
@click.version_option(version=__version__, prog_name="poaclock", message="%(prog)s %(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    project_dir: Path,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """Inspect the lockfile of a Poac project.

    \b
      poaclock status                      is poac.lock up to date?
      poaclock -C path/to/project show     list locked packages
      poaclock show --format json          same, as JSON
    """
    level = VERBOSITY_LEVELS[min(verbose, len(VERBOSITY_LEVELS) - 1)]
    setup_logging(level=level, verbose=level == logging.DEBUG)

    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reset_console()

    try:
        settings = load_config(config, project_dir=project_dir)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    state = ctx.ensure_object(PoacLockContext)
    state.project_dir = project_dir
    state.config_path = settings.source_path
    state.config = settings
    state.verbose = verbose
    state.color = color

    logger.debug(
        "poaclock %s in %s (config: %s)",
        __version__,
        project_dir,
        state.config_path or "defaults",
    )


cli.add_command(status)
cli.add_command(show)


def main() -> int:
    """Run the CLI and return its exit status.

    0 on success, 1 for lockfile, configuration and unexpected errors,
    Click's own code (2) for usage errors, and 130 when interrupted.
    """
    try:
        cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except PoacLockError as exc:
        print_error(str(exc))
        logger.debug("Error details: %s", exc.details, exc_info=True)
        return 1
    except (KeyboardInterrupt, click.Abort):
        print_warning("Interrupted")
        return 130
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
