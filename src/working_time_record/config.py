# src/working_time_record/config.py

"""Settings loaded from environment variables (+ optional .env).

Nothing is cached at import time: every invocation builds a fresh Settings
object and resolves the record path again.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "WORKING_TIME_RECORD"

# The bare prefix doubles as the record file override.
RECORD_PATH_ENV = ENV_PREFIX
DEFAULT_RECORD_FILENAME = "working_time_record.txt"

HomeDirLookup = Callable[[], str | Path | None]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(environ: Mapping[str, str], name: str, default: str = "") -> str:
    v = environ.get(name)
    return default if v is None else v


def _env_path(environ: Mapping[str, str], name: str) -> Path | None:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "Settings":
        if environ is None:
            environ = os.environ

        log_level = _env(environ, _k("LOG_LEVEL"), "WARNING").strip() or "WARNING"
        log_file = _env_path(environ, _k("LOG_FILE"))

        return Settings(
            log_level=log_level,
            log_file=log_file,
        )


def get_settings(*, use_dotenv: bool = True) -> Settings:
    """Build settings from the process environment, reading .env first if present."""
    if use_dotenv:
        # Real environment variables win over .env entries.
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env(os.environ)


def resolve_record_path(environ: Mapping[str, str], home_dir: HomeDirLookup) -> str | None:
    """
    Default record path when no -f/--file flag was given.

    Order:
    - WORKING_TIME_RECORD, verbatim, if set and non-empty
    - <home>/working_time_record.txt

    Returns None when the home directory cannot be determined.
    """
    override = environ.get(RECORD_PATH_ENV)
    if override:
        return override

    try:
        home = home_dir()
    except (RuntimeError, KeyError):
        # Path.home() raises RuntimeError (or KeyError on some platforms) without HOME.
        return None
    if home is None or str(home) == "":
        return None

    return str(Path(home) / DEFAULT_RECORD_FILENAME)
