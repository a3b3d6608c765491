"""Run configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DELIMITER = "\t"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Settings for a single run."""

    delimiter: str = DEFAULT_DELIMITER
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL


def parse_log_level(value: str) -> str:
    """Normalise a logging level name, e.g. 'debug' -> 'DEBUG'."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        msg = f"ROOMCOST_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        raise ValueError(msg)
    return level


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from ROOMCOST_* environment variables.

    Values from ``env_file`` (or a ``.env`` in the working directory)
    are loaded first but never override variables already set.
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    delimiter = os.environ.get("ROOMCOST_DELIMITER", DEFAULT_DELIMITER)
    # The two-character escape \t also selects a tab
    if delimiter == "\\t":
        delimiter = "\t"
    if not delimiter:
        msg = "ROOMCOST_DELIMITER must not be empty"
        raise ValueError(msg)

    return Settings(
        delimiter=delimiter,
        encoding=os.environ.get("ROOMCOST_ENCODING", DEFAULT_ENCODING),
        log_level=parse_log_level(
            os.environ.get("ROOMCOST_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ),
    )
