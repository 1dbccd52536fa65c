# src/working_time_record/records/record_writer.py

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import CommandError

logger = logging.getLogger(__name__)


def append_record(file_path: str | Path, content: str) -> CommandError | None:
    """
    Append one pre-formatted, newline-terminated line to the record file.

    - creates the file if missing (parent directories are NOT created)
    - never truncates; existing lines stay untouched
    - single write() call, handle closed on every path
    - bytes written as given: LF stays LF, undecodable argv bytes
      (surrogate-escaped by Python) are restored
    """
    try:
        data = content.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        logger.debug("Record for %s is not encodable: %s", file_path, e)
        return CommandError.io_failure(str(e))

    try:
        with open(file_path, "ab") as fh:
            fh.write(data)
    except OSError as e:
        logger.debug("Append to %s failed: %s", file_path, e)
        return CommandError.io_failure(str(e))

    logger.debug("Appended %d bytes to %s", len(data), file_path)
    return None
