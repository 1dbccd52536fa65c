# src/working_time_record/errors.py

"""
Failure values returned by the command handlers.

Handlers do not raise for expected failures; they return a CommandError and
the entrypoint turns it into "Error: <message>" on stderr and exit status 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_SUBCOMMAND = "missing_subcommand"
    UNKNOWN_SUBCOMMAND = "unknown_subcommand"
    TASK_NAME_MISSING = "task_name_missing"
    FILENAME_NOT_PROVIDED = "filename_not_provided"
    HOME_DIRECTORY_UNRESOLVABLE = "home_directory_unresolvable"
    IO_FAILURE = "io_failure"


@dataclass(frozen=True, slots=True)
class CommandError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def missing_subcommand(cls) -> CommandError:
        return cls(ErrorKind.MISSING_SUBCOMMAND, "No subcommand provided.")

    @classmethod
    def unknown_subcommand(cls, name: str) -> CommandError:
        return cls(ErrorKind.UNKNOWN_SUBCOMMAND, f"Invalid subcommand '{name}'.")

    @classmethod
    def task_name_missing(cls) -> CommandError:
        return cls(ErrorKind.TASK_NAME_MISSING, "Task name not provided.")

    @classmethod
    def filename_not_provided(cls) -> CommandError:
        return cls(ErrorKind.FILENAME_NOT_PROVIDED, "File name not specified.")

    @classmethod
    def home_directory_unresolvable(cls) -> CommandError:
        return cls(ErrorKind.HOME_DIRECTORY_UNRESOLVABLE, "Home directory could not be resolved.")

    @classmethod
    def io_failure(cls, detail: str) -> CommandError:
        # OS message is passed through verbatim.
        return cls(ErrorKind.IO_FAILURE, detail)
