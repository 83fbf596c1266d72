"""Configuration management for discord_models."""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

from discord_models.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"


def _load_dotenv() -> None:
    """Load .env file from the working directory if one exists."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)


def _env(key: str, default: str | None = None) -> str | None:
    return os.getenv(ENV_PREFIX + key, default)


def _parse_level(key: str, value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"{ENV_PREFIX}{key} must be one of {', '.join(_LOG_LEVELS)}")
    return level


def _parse_positive_int(key: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{key} must be a positive integer") from e

    if parsed <= 0:
        raise ValueError(f"{ENV_PREFIX}{key} must be a positive integer")

    return parsed


def _collect_env_vars() -> dict:
    """Read all config environment variables and return as constructor kwargs."""
    return {
        "log_level": _parse_level("LOG_LEVEL", _env("LOG_LEVEL", "INFO") or "INFO"),
        "log_file": _env("LOG_FILE") or None,
        "log_max_bytes": _parse_positive_int(
            "LOG_MAX_BYTES", _env("LOG_MAX_BYTES", str(10 * 1024 * 1024)) or ""
        ),
        "log_backup_count": _parse_positive_int(
            "LOG_BACKUP_COUNT", _env("LOG_BACKUP_COUNT", "5") or ""
        ),
        "lossy_flag_log_level": _parse_level(
            "LOSSY_FLAG_LOG_LEVEL", _env("LOSSY_FLAG_LOG_LEVEL", "WARNING") or "WARNING"
        ),
    }


@dataclass
class Config:
    """Library configuration loaded from .env / environment."""

    # Logging configuration
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_backup_count: int = 5

    # Level at which the codec reports flag masks with unknown bits
    lossy_flag_log_level: str = "WARNING"

    @property
    def lossy_flag_log_levelno(self) -> int:
        return getattr(logging, self.lossy_flag_log_level.upper())

    @classmethod
    def load(cls) -> Config:
        """Load configuration from .env file and environment."""
        _load_dotenv()
        return cls(**_collect_env_vars())


def setup_logging(
    log_level: str,
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    stream: TextIO | None = None,
) -> None:
    """
    Route log records to ``stream`` and, optionally, a rotating file.

    The command line keeps stdout for encoded payloads, so the console
    handler writes to stderr unless a stream is given.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=max_bytes, backupCount=backup_count
            )
        )

    formatter = logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level.upper())
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file:
        logger.debug("Writing logs to %s", log_file)
