"""Tests for the JSON codec: error paths, lossy flags, encoding."""

from __future__ import annotations

import json
import logging

import pytest

from discord_models.codec import Codec, decode, decode_with_warnings, encode, json_path, to_payload
from discord_models.config import Config
from discord_models.errors import (
    LossyFlagDecode,
    MalformedIdError,
    SchemaMismatchError,
)
from discord_models.models.message import Message, MessageFlag
from discord_models.models.permissions import Permission
from discord_models.models.role import Role
from discord_models.tests.conftest import guild_payload, message_payload, reaction_payload

FUTURE_PERMISSION = 1 << 62


class TestErrorPaths:
    def test_json_path(self) -> None:
        assert json_path(()) == "$"
        assert json_path(("reactions", 0, "emoji")) == "$.reactions[0].emoji"

    def test_missing_nested_field(self) -> None:
        reaction = reaction_payload(1, name="a")
        del reaction["emoji"]
        with pytest.raises(SchemaMismatchError) as exc_info:
            decode(Message, message_payload(reactions=[reaction]))
        assert exc_info.value.path == "$.reactions[0].emoji"
        assert "$.reactions[0].emoji" in str(exc_info.value)

    def test_malformed_nested_id(self) -> None:
        payload = message_payload(reactions=[reaction_payload(1, id="abc", name="a")])
        with pytest.raises(MalformedIdError) as exc_info:
            decode(Message, json.dumps(payload))
        assert exc_info.value.path == "$.reactions[0].emoji.id"
        assert exc_info.value.text == "abc"

    def test_wrong_shape(self) -> None:
        with pytest.raises(SchemaMismatchError) as exc_info:
            decode(Message, message_payload(content=["not", "text"]))
        assert exc_info.value.path == "$.content"
        assert exc_info.value.got == ["not", "text"]

    def test_missing_required_field(self) -> None:
        payload = message_payload()
        del payload["author"]
        with pytest.raises(SchemaMismatchError) as exc_info:
            decode(Message, payload)
        assert exc_info.value.path == "$.author"

    def test_invalid_json_text(self) -> None:
        with pytest.raises(SchemaMismatchError):
            decode(Message, "{not json")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            decode(Message, "{}")


class TestUnknownFields:
    def test_ignored(self) -> None:
        message = decode(Message, message_payload(brand_new_field={"x": 1}))
        assert "brand_new_field" not in to_payload(message)


class TestLossyFlags:
    def test_message_drops_unknown_bits(self) -> None:
        result = decode_with_warnings(
            Message, message_payload(flags=int(MessageFlag.CROSSPOSTED) | 1 << 40)
        )
        assert result.lossy
        assert result.warnings == [
            LossyFlagDecode(kind="MessageFlag", unknown_bits=1 << 40, field="flags")
        ]
        assert result.value.flags.unknown_bits == 0
        assert to_payload(result.value)["flags"] == 1

    def test_role_keeps_unknown_bits(self) -> None:
        role_payload = guild_payload()["roles"][0]
        role_payload["permissions"] = str(int(Permission.ADMINISTRATOR) | FUTURE_PERMISSION)
        result = decode_with_warnings(Role, role_payload)
        assert result.warnings[0].kind == "Permission"
        role = result.value
        assert list(role.permissions) == [Permission.ADMINISTRATOR]
        assert role.permissions.unknown_bits == FUTURE_PERMISSION
        assert to_payload(role)["permissions"] == int(Permission.ADMINISTRATOR) | FUTURE_PERMISSION

    def test_clean_decode_has_no_warnings(self) -> None:
        result = decode_with_warnings(Message, message_payload(flags=4))
        assert not result.lossy
        assert MessageFlag.SUPPRESS_EMBEDS in result.value.flags

    def test_logged_once_at_configured_level(self, caplog: pytest.LogCaptureFixture) -> None:
        codec = Codec(Config(lossy_flag_log_level="INFO"))
        payload = message_payload(
            flags=1 << 40,
            author={**message_payload()["author"], "public_flags": 1 << 45},
        )
        with caplog.at_level(logging.DEBUG, logger="discord_models.codec"):
            result = codec.decode_with_warnings(Message, payload)
        assert len(result.warnings) == 2
        records = [r for r in caplog.records if r.name == "discord_models.codec"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert "MessageFlag" in records[0].getMessage()
        assert "UserFlag" in records[0].getMessage()

    def test_configured_codec_logs_warning(
        self, config: Config, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="discord_models.codec"):
            Codec(config).decode(Message, message_payload(flags=1 << 40))
        assert [r.levelno for r in caplog.records if r.name == "discord_models.codec"] == [
            logging.WARNING
        ]

    def test_no_log_without_loss(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="discord_models.codec"):
            decode_with_warnings(Message, message_payload())
        assert not [r for r in caplog.records if r.name == "discord_models.codec"]


class TestEncode:
    def test_omits_absent_optionals(self) -> None:
        message = decode(Message, message_payload())
        data = json.loads(encode(message))
        assert "edited_timestamp" not in data
        assert "flags" not in data
        assert data["id"] == "1100000000000000001"
        assert data["author"]["id"] == "80351110224678912"

    def test_indent(self) -> None:
        message = decode(Message, message_payload())
        assert "\n" in encode(message, indent=2)

    def test_bytes_payload(self) -> None:
        text = json.dumps(message_payload()).encode()
        assert decode(Message, text).content == "hello"

    def test_round_trip(self) -> None:
        message = decode(Message, message_payload(flags=2, pinned=True))
        again = decode(Message, encode(message))
        assert to_payload(again) == to_payload(message)
        assert again.flags == message.flags
