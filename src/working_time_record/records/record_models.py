# src/working_time_record/records/record_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Action(StrEnum):
    START = "start"
    STOP = "stop"


def format_timestamp(moment: datetime) -> str:
    """
    Render an aware datetime as RFC 3339 with second precision.

    Example: 2024-01-15T10:30:00+09:00 (UTC is written as +00:00, never Z).
    Naive datetimes are interpreted as local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="seconds")


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True, slots=True)
class Record:
    """
    One line of the record file.

    The task name is written as-is; tabs or newlines inside it are not escaped.
    """

    timestamp: str
    action: Action
    task_name: str = ""

    def to_line(self) -> str:
        return f"{self.timestamp}\t{self.action}\t{self.task_name}\n"

    @classmethod
    def start(cls, moment: datetime, task_name: str) -> Record:
        return cls(timestamp=format_timestamp(moment), action=Action.START, task_name=task_name)

    @classmethod
    def stop(cls, moment: datetime) -> Record:
        return cls(timestamp=format_timestamp(moment), action=Action.STOP)
