# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from working_time_record.config import Settings, get_settings, resolve_record_path


def test_settings_defaults() -> None:
    s = Settings.from_env({})

    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_settings_from_env(tmp_path: Path) -> None:
    s = Settings.from_env(
        {
            "WORKING_TIME_RECORD_LOG_LEVEL": "debug",
            "WORKING_TIME_RECORD_LOG_FILE": str(tmp_path / "wtr.log"),
        }
    )

    assert s.log_level == "debug"
    assert s.log_file == tmp_path / "wtr.log"


def test_settings_empty_values_mean_unset() -> None:
    s = Settings.from_env({"WORKING_TIME_RECORD_LOG_LEVEL": " ", "WORKING_TIME_RECORD_LOG_FILE": "  "})

    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_resolve_prefers_env(tmp_path: Path) -> None:
    assert resolve_record_path({"WORKING_TIME_RECORD": "x/y.txt"}, lambda: tmp_path) == "x/y.txt"


def test_resolve_home_default(tmp_path: Path) -> None:
    assert resolve_record_path({}, lambda: str(tmp_path)) == str(
        tmp_path / "working_time_record.txt"
    )


@pytest.mark.parametrize("home", [None, ""])
def test_resolve_no_home(home) -> None:
    assert resolve_record_path({}, lambda: home) is None


def test_resolve_home_lookup_raises() -> None:
    def boom():
        raise KeyError("HOME")

    assert resolve_record_path({}, boom) is None


def test_get_settings_reads_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WORKING_TIME_RECORD_LOG_LEVEL", raising=False)
    monkeypatch.setenv("WORKING_TIME_RECORD", "from-env.txt")
    (tmp_path / ".env").write_text(
        "WORKING_TIME_RECORD=from-dotenv.txt\nWORKING_TIME_RECORD_LOG_LEVEL=INFO\n",
        "utf-8",
    )

    try:
        s = get_settings()
    finally:
        os.environ.pop("WORKING_TIME_RECORD_LOG_LEVEL", None)

    # Real environment wins over .env.
    assert os.environ["WORKING_TIME_RECORD"] == "from-env.txt"
    assert s.log_level == "INFO"
