"""Tests for configuration loading and logging setup."""

from __future__ import annotations

import io
import logging
import logging.handlers
from collections.abc import Iterator
from pathlib import Path

import pytest

from discord_models.config import Config, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoad:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = Config.load()
        assert config == Config()
        assert config.lossy_flag_log_levelno == logging.WARNING

    def test_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("DISCORD_MODELS_LOG_LEVEL", "debug")
        clean_env.setenv("DISCORD_MODELS_LOSSY_FLAG_LOG_LEVEL", "info")
        clean_env.setenv("DISCORD_MODELS_LOG_BACKUP_COUNT", "2")
        config = Config.load()
        assert config.log_level == "DEBUG"
        assert config.lossy_flag_log_levelno == logging.INFO
        assert config.log_backup_count == 2

    def test_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text(
            "DISCORD_MODELS_LOG_FILE=logs/models.log\nDISCORD_MODELS_LOG_MAX_BYTES=2048\n"
        )
        config = Config.load()
        assert config.log_file == "logs/models.log"
        assert config.log_max_bytes == 2048

    def test_environment_beats_dotenv(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("DISCORD_MODELS_LOG_LEVEL=ERROR\n")
        clean_env.setenv("DISCORD_MODELS_LOG_LEVEL", "WARNING")
        assert Config.load().log_level == "WARNING"

    @pytest.mark.parametrize(
        "key, value",
        [
            ("LOG_LEVEL", "LOUD"),
            ("LOSSY_FLAG_LOG_LEVEL", "sometimes"),
            ("LOG_MAX_BYTES", "0"),
            ("LOG_BACKUP_COUNT", "many"),
        ],
    )
    def test_invalid_values(self, clean_env: pytest.MonkeyPatch, key: str, value: str) -> None:
        clean_env.setenv(f"DISCORD_MODELS_{key}", value)
        with pytest.raises(ValueError, match=f"DISCORD_MODELS_{key}"):
            Config.load()


class TestSetupLogging:
    def test_console_only(self, restore_root_logger: logging.Logger) -> None:
        setup_logging("WARNING")
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_rotating_file(self, restore_root_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "nested" / "models.log"
        setup_logging("INFO", str(log_file), max_bytes=1024, backup_count=2)
        rotating = [
            h
            for h in restore_root_logger.handlers
            if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(rotating) == 1
        assert rotating[0].maxBytes == 1024
        assert rotating[0].backupCount == 2
        logging.getLogger("discord_models.test").info("hello")
        rotating[0].flush()
        assert "hello" in log_file.read_text()

    def test_custom_stream(self, restore_root_logger: logging.Logger) -> None:
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        logging.getLogger("discord_models.test").info("to the stream")
        logging.getLogger("discord_models.test").debug("below the level")
        output = stream.getvalue()
        assert "INFO" in output and "discord_models.test: to the stream" in output
        assert "below the level" not in output
