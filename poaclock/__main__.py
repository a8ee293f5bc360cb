"""
Executable module for poaclock.

Running ``python -m poaclock`` is equivalent to running ``poaclock``.
"""

from __future__ import annotations

import sys


def main() -> int:
    """Forward to the CLI entry point and return its exit code."""
    from poaclock.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
