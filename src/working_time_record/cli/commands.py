# src/working_time_record/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..errors import CommandError
from ..records.record_models import Record
from ..records.record_writer import append_record
from ..state import RecorderContext
from .arguments import ParsedArguments, parse_arguments

CommandHandler = Callable[[RecorderContext, Sequence[str]], CommandError | None]

logger = logging.getLogger(__name__)

USAGE_LINES = (
    "Usage:",
    "  start <task_name> [-f|--file <file>]    Start tracking time for a task.",
    "  stop [-f|--file <file>]                 Stop tracking time.",
    "  help                                    Display this help message.",
)


class CommandRegistry:
    """Subcommand registry (help, start, stop). Names match exactly."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def names(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, context: RecorderContext, args: Sequence[str]) -> CommandError | None:
        """
        Route the full argv (program name at index 0) to a handler.
        Returns None on success or the CommandError to report.
        """
        if len(args) < 2:
            return CommandError.missing_subcommand()

        name = args[1]
        handler = self._handlers.get(name)
        if handler is None:
            return CommandError.unknown_subcommand(name)

        logger.debug("Dispatching subcommand %r", name)
        return handler(context, args)


registry = CommandRegistry()


def cmd_help(context: RecorderContext, args: Sequence[str]) -> CommandError | None:
    for line in USAGE_LINES:
        print(line, file=context.out)
    return None


def _parse(context: RecorderContext, args: Sequence[str]) -> ParsedArguments | CommandError:
    return parse_arguments(args, context.environ, context.home_dir)


def cmd_start(context: RecorderContext, args: Sequence[str]) -> CommandError | None:
    """
    start <task_name> [-f|--file <file>]

    Extra positionals after the task name are ignored.
    """
    parsed = _parse(context, args)
    if isinstance(parsed, CommandError):
        return parsed

    if not parsed.positional:
        return CommandError.task_name_missing()

    task_name = parsed.positional[0]
    record = Record.start(context.clock(), task_name)
    logger.info("start %r -> %s", task_name, parsed.file_path)
    return append_record(parsed.file_path, record.to_line())


def cmd_stop(context: RecorderContext, args: Sequence[str]) -> CommandError | None:
    """
    stop [-f|--file <file>]

    Does not check for a preceding start; positionals are parsed and ignored.
    """
    parsed = _parse(context, args)
    if isinstance(parsed, CommandError):
        return parsed

    record = Record.stop(context.clock())
    logger.info("stop -> %s", parsed.file_path)
    return append_record(parsed.file_path, record.to_line())


def execute(args: Sequence[str], context: RecorderContext) -> CommandError | None:
    return registry.dispatch(context, args)


registry.register("help", cmd_help)
registry.register("start", cmd_start)
registry.register("stop", cmd_stop)
