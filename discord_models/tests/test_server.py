"""Tests for the gateway-state helpers on Server."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from discord_models.codec import decode
from discord_models.models import (
    Channel,
    Guild,
    GuildMember,
    Message,
    PresenceUpdate,
    Role,
    Server,
    UserStatus,
    VoiceState,
)
from discord_models.tests.conftest import (
    channel_payload,
    guild_payload,
    message_payload,
    user_payload,
)

TEXT_CHANNEL = 1100000000000000002
THREAD = 1100000000000000020
NELLY = 80351110224678912


@pytest.fixture
def server() -> Iterator[Server]:
    server = decode(
        Server,
        guild_payload(
            member_count=1,
            channels=[channel_payload()],
            threads=[channel_payload(id=str(THREAD), type=11, parent_id=str(TEXT_CHANNEL))],
            members=[{"user": user_payload(), "roles": [], "flags": 0}],
        ),
    )
    yield server
    for channel in server.channels + server.threads:
        channel.typing.close()


class TestGuildFields:
    def test_from_guild(self) -> None:
        guild = decode(Guild, guild_payload())
        server = Server.from_guild(guild)
        assert server.id == guild.id
        assert server.channels == []

    def test_update_guild_keeps_gateway_state(self, server: Server) -> None:
        server.update_guild(decode(Guild, guild_payload(name="Renamed")))
        assert server.name == "Renamed"
        assert server.get_channel(TEXT_CHANNEL) is not None
        assert server.has_member(NELLY)


class TestChannels:
    def test_get_searches_threads(self, server: Server) -> None:
        assert server.get_channel(TEXT_CHANNEL).name == "general"
        assert server.get_channel(THREAD).type.is_thread
        assert server.get_channel(1) is None

    def test_add_routes_threads(self, server: Server) -> None:
        server.add_channel(decode(Channel, channel_payload(id="30", type=12)))
        server.add_channel(decode(Channel, channel_payload(id="31", type=2)))
        assert [c.id for c in server.threads] == [THREAD, 30]
        assert [c.id for c in server.channels] == [TEXT_CHANNEL, 31]

    def test_update_keeps_messages_and_typing(self, server: Server) -> None:
        old = server.get_channel(TEXT_CHANNEL)
        server.add_message(decode(Message, message_payload()))
        server.update_channel(TEXT_CHANNEL, decode(Channel, channel_payload(name="renamed")))
        new = server.get_channel(TEXT_CHANNEL)
        assert new.name == "renamed"
        assert len(new.messages) == 1
        assert new.typing is old.typing

    def test_update_unknown_channel_is_noop(self, server: Server) -> None:
        replacement = decode(Channel, channel_payload(id="99"))
        server.update_channel(99, replacement)
        assert server.get_channel(99) is None
        replacement.typing.close()

    def test_delete_closes_typing(self, server: Server) -> None:
        deleted = server.delete_channel(THREAD)
        assert deleted is not None
        assert deleted.typing.closed
        assert server.get_channel(THREAD) is None
        assert server.delete_channel(THREAD) is None


class TestMessages:
    def test_lifecycle(self, server: Server) -> None:
        message = decode(Message, message_payload())
        server.add_message(message)
        assert server.get_message(TEXT_CHANNEL, message.id) is message

        edited = decode(Message, message_payload(content="edited"))
        server.update_message(edited)
        assert server.get_message(TEXT_CHANNEL, message.id).content == "edited"

        assert server.delete_message(TEXT_CHANNEL, message.id) is edited
        assert server.get_message(TEXT_CHANNEL, message.id) is None

    def test_unknown_channel(self, server: Server) -> None:
        server.add_message(decode(Message, message_payload(channel_id="5")))
        assert server.get_message(5, 1100000000000000001) is None
        assert server.delete_message(5, 1100000000000000001) is None

    def test_update_caches_unseen_message(self, server: Server) -> None:
        server.update_message(decode(Message, message_payload()))
        assert len(server.get_channel(TEXT_CHANNEL).messages) == 1


class TestRolesAndMembers:
    def test_roles(self, server: Server) -> None:
        role = decode(Role, {"id": "7", "name": "mods", "permissions": "8"})
        server.add_role(role)
        server.update_role(7, decode(Role, {"id": "7", "name": "admins", "permissions": "8"}))
        assert server.get_role(7).name == "admins"
        assert server.delete_role(7).name == "admins"
        assert server.delete_role(7) is None

    def test_members(self, server: Server) -> None:
        assert server.get_member(NELLY).user.username == "nelly"
        updated = decode(GuildMember, {"user": user_payload(), "nick": "nel"})
        server.update_member(NELLY, updated)
        assert server.get_member(NELLY).nick == "nel"
        assert server.delete_member(NELLY) is updated
        assert not server.has_member(NELLY)

    def test_presences(self, server: Server) -> None:
        presence = decode(PresenceUpdate, {"user": {"id": str(NELLY)}, "status": "online"})
        server.add_presence(presence)
        assert server.has_presence(NELLY)
        server.update_presence(
            NELLY, decode(PresenceUpdate, {"user": {"id": str(NELLY)}, "status": "idle"})
        )
        assert server.presences[0].status is UserStatus.IDLE

    def test_voice_state_upsert(self, server: Server) -> None:
        joined = decode(VoiceState, {"user_id": str(NELLY), "session_id": "s", "channel_id": "9"})
        server.update_voice_state(joined)
        assert server.get_voice_state(NELLY).connected
        left = decode(VoiceState, {"user_id": str(NELLY), "session_id": "s", "channel_id": None})
        server.update_voice_state(left)
        assert len(server.voice_states) == 1
        assert not server.get_voice_state(NELLY).connected
