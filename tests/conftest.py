# tests/conftest.py

from __future__ import annotations

import io
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from working_time_record.state import RecorderContext

JST = timezone(timedelta(hours=9))


class FakeClock:
    """
    Deterministic clock for unit tests.

    Returns a fixed moment and counts calls, so tests can assert that
    the clock was (or was not) read.
    """

    def __init__(self, moment: datetime | None = None) -> None:
        self.moment = moment or datetime(2024, 1, 15, 10, 30, 0, tzinfo=JST)
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.moment


@pytest.fixture()
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture()
def environ() -> dict[str, str]:
    """Fake environment mapping; the real os.environ is never touched."""
    return {}


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def context(environ: dict[str, str], home_dir: Path, clock: FakeClock) -> RecorderContext:
    return RecorderContext(
        environ=environ,
        home_dir=lambda: home_dir,
        clock=clock,
        out=io.StringIO(),
    )


@pytest.fixture()
def record_file(tmp_path: Path) -> Path:
    return tmp_path / "records" / "record.txt"


@pytest.fixture(autouse=True)
def _records_dir(tmp_path: Path) -> None:
    (tmp_path / "records").mkdir()
