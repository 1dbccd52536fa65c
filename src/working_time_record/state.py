# src/working_time_record/state.py

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TextIO

from .config import HomeDirLookup
from .records.record_models import local_now


@dataclass
class RecorderContext:
    """
    Everything a command needs from the outside world.

    Handlers read the environment, home directory, clock and stdout only
    through this object, so tests can swap each of them.
    """

    environ: Mapping[str, str]
    home_dir: HomeDirLookup
    clock: Callable[[], datetime] = local_now
    out: TextIO = field(default_factory=lambda: sys.stdout)


def create_context() -> RecorderContext:
    """Context wired to the real process environment."""
    return RecorderContext(
        environ=os.environ,
        home_dir=Path.home,
        clock=local_now,
        out=sys.stdout,
    )
