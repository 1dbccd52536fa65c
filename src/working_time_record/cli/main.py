# src/working_time_record/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, then runs one subcommand.
Failures are printed as "Error: <message>" on stderr with exit status 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from ..state import create_context
from .commands import execute

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    settings = get_settings()
    try:
        setup_logging(
            console_level=level_from_name(settings.log_level),
            log_file=settings.log_file,
        )
    except OSError as e:
        # Log file could not be created; nothing has been recorded yet.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    context = create_context()
    err = execute(list(argv), context)
    if err is not None:
        logger.debug("Command failed kind=%s", err.kind)
        print(f"Error: {err.message}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
