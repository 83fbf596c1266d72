"""Tests for the command line entry point."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from discord_models.cli import main, record_types
from discord_models.tests.conftest import message_payload


@pytest.fixture(autouse=True)
def _restore_root_logger(clean_env: pytest.MonkeyPatch) -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _write(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload))
    return path


class TestMain:
    def test_round_trip_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, message_payload(unknown_field=1, edited_timestamp=None))
        assert main(["Message", str(path)]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["id"] == "1100000000000000001"
        assert "unknown_field" not in out
        assert "edited_timestamp" not in out

    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(json.dumps({"code": "abc"}).encode()))
        monkeypatch.setattr("sys.stdin", stdin)
        assert main(["Invite", "--indent", "2"]) == 0
        assert '"code": "abc"' in capsys.readouterr().out

    def test_decode_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, message_payload(type=13))
        assert main(["Message", str(path)]) == 1
        err = capsys.readouterr().err
        assert "unknown message type: 13" in err
        assert "$.type" in err

    def test_unknown_record(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {})
        with pytest.raises(SystemExit) as exc_info:
            main(["NotARecord", str(path)])
        assert exc_info.value.code == 2


class TestRecordTypes:
    def test_exports_records_only(self) -> None:
        types = record_types()
        assert "Message" in types
        assert "Server" in types
        assert "DiscordModel" not in types
        assert "MessageType" not in types


class TestLogging:
    def test_lossy_warning_goes_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(tmp_path, message_payload(flags=1 << 40))
        assert main(["Message", str(path)]) == 0
        captured = capsys.readouterr()
        assert "Lossy flag decode for Message" in captured.err
        # stdout stays a single JSON document
        assert json.loads(captured.out)["id"] == "1100000000000000001"
