# src/working_time_record/cli/arguments.py

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..config import HomeDirLookup, resolve_record_path
from ..errors import CommandError

logger = logging.getLogger(__name__)

FILE_FLAGS = ("-f", "--file")


@dataclass(slots=True)
class ParsedArguments:
    file_path: str
    positional: list[str] = field(default_factory=list)


def parse_arguments(
    args: Sequence[str],
    environ: Mapping[str, str],
    home_dir: HomeDirLookup,
) -> ParsedArguments | CommandError:
    """
    Split everything after "<prog> <subcommand>" into a file path and positionals.

    -f/--file consumes the next argument; the last occurrence wins.
    The default path is only resolved when no flag was given.
    """
    file_path: str | None = None
    positional: list[str] = []

    it = iter(args[2:])
    for arg in it:
        if arg in FILE_FLAGS:
            value = next(it, None)
            if value is None:
                return CommandError.filename_not_provided()
            file_path = value
        else:
            positional.append(arg)

    if file_path is None:
        file_path = resolve_record_path(environ, home_dir)
        if file_path is None:
            return CommandError.home_directory_unresolvable()
        logger.debug("Using default record path %s", file_path)

    return ParsedArguments(file_path=file_path, positional=positional)
