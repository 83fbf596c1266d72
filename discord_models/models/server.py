"""A guild together with the state delivered by GUILD_CREATE.

The cache helpers mirror what a gateway consumer does with dispatch events.
They are not synchronized; callers sharing a Server across threads must
guard it themselves.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import Field

from discord_models.models.channel import Channel
from discord_models.models.guild import Guild
from discord_models.models.member import GuildMember
from discord_models.models.message import Message
from discord_models.models.presence import PresenceUpdate
from discord_models.models.role import Role
from discord_models.models.scheduled_event import GuildScheduledEvent
from discord_models.models.stage_instance import StageInstance
from discord_models.models.voice import VoiceState
from discord_models.snowflake import Snowflake

logger = logging.getLogger(__name__)


class Server(Guild):
    joined_at: datetime | None = None
    large: bool = False
    unavailable: bool | None = None
    member_count: int = 0
    voice_states: list[VoiceState] = Field(default_factory=list)
    members: list[GuildMember] = Field(default_factory=list)
    channels: list[Channel] = Field(default_factory=list)
    threads: list[Channel] = Field(default_factory=list)
    presences: list[PresenceUpdate] = Field(default_factory=list)
    stage_instances: list[StageInstance] = Field(default_factory=list)
    guild_scheduled_events: list[GuildScheduledEvent] = Field(default_factory=list)

    @classmethod
    def from_guild(cls, guild: Guild) -> Server:
        return cls(**{name: getattr(guild, name) for name in Guild.model_fields})

    def update_guild(self, guild: Guild) -> None:
        """Overwrite the guild fields, keeping the gateway state."""
        for name in Guild.model_fields:
            setattr(self, name, getattr(guild, name))

    # --- channels ---

    def _channel_index(self, channel_id: Snowflake | int) -> tuple[list[Channel], int] | None:
        for channels in (self.channels, self.threads):
            for i, channel in enumerate(channels):
                if channel.id == channel_id:
                    return channels, i
        return None

    def add_channel(self, channel: Channel) -> None:
        if channel.type.is_thread:
            self.threads.append(channel)
        else:
            self.channels.append(channel)

    def get_channel(self, channel_id: Snowflake | int) -> Channel | None:
        """Look up a channel or thread by id."""
        found = self._channel_index(channel_id)
        if found is None:
            return None
        channels, i = found
        return channels[i]

    def update_channel(self, channel_id: Snowflake | int, channel: Channel) -> None:
        """
        Replace a cached channel.

        The replacement inherits the old channel's message cache and typing
        indicator, since CHANNEL_UPDATE payloads carry neither.
        """
        found = self._channel_index(channel_id)
        if found is None:
            logger.debug("Update for unknown channel %s in guild %s", channel_id, self.id)
            return
        channels, i = found
        old = channels[i]
        channel._messages = old._messages
        channel._typing = old._typing
        channels[i] = channel

    def delete_channel(self, channel_id: Snowflake | int) -> Channel | None:
        found = self._channel_index(channel_id)
        if found is None:
            return None
        channels, i = found
        channel = channels.pop(i)
        channel.typing.close()
        return channel

    # --- messages ---

    def add_message(self, message: Message) -> None:
        channel = self.get_channel(message.channel_id)
        if channel is None:
            logger.debug("Message %s for unknown channel %s", message.id, message.channel_id)
            return
        channel.add_message(message)

    def get_message(
        self, channel_id: Snowflake | int, message_id: Snowflake | int
    ) -> Message | None:
        channel = self.get_channel(channel_id)
        return None if channel is None else channel.get_message(message_id)

    def update_message(self, message: Message) -> None:
        channel = self.get_channel(message.channel_id)
        if channel is not None:
            channel.update_message(message)

    def delete_message(
        self, channel_id: Snowflake | int, message_id: Snowflake | int
    ) -> Message | None:
        channel = self.get_channel(channel_id)
        return None if channel is None else channel.delete_message(message_id)

    # --- roles ---

    def add_role(self, role: Role) -> None:
        self.roles.append(role)

    def update_role(self, role_id: Snowflake | int, role: Role) -> None:
        for i, cached in enumerate(self.roles):
            if cached.id == role_id:
                self.roles[i] = role
                return

    def delete_role(self, role_id: Snowflake | int) -> Role | None:
        for i, cached in enumerate(self.roles):
            if cached.id == role_id:
                return self.roles.pop(i)
        return None

    # --- members ---

    def _member_index(self, user_id: Snowflake | int) -> int | None:
        for i, member in enumerate(self.members):
            if member.user_id == user_id:
                return i
        return None

    def add_member(self, member: GuildMember) -> None:
        self.members.append(member)

    def get_member(self, user_id: Snowflake | int) -> GuildMember | None:
        index = self._member_index(user_id)
        return None if index is None else self.members[index]

    def has_member(self, user_id: Snowflake | int) -> bool:
        return self._member_index(user_id) is not None

    def update_member(self, user_id: Snowflake | int, member: GuildMember) -> None:
        index = self._member_index(user_id)
        if index is not None:
            self.members[index] = member

    def delete_member(self, user_id: Snowflake | int) -> GuildMember | None:
        index = self._member_index(user_id)
        return None if index is None else self.members.pop(index)

    # --- presences ---

    def _presence_index(self, user_id: Snowflake | int) -> int | None:
        for i, presence in enumerate(self.presences):
            if presence.user.id == user_id:
                return i
        return None

    def add_presence(self, presence: PresenceUpdate) -> None:
        self.presences.append(presence)

    def has_presence(self, user_id: Snowflake | int) -> bool:
        return self._presence_index(user_id) is not None

    def update_presence(self, user_id: Snowflake | int, presence: PresenceUpdate) -> None:
        index = self._presence_index(user_id)
        if index is not None:
            self.presences[index] = presence

    # --- voice ---

    def get_voice_state(self, user_id: Snowflake | int) -> VoiceState | None:
        for state in self.voice_states:
            if state.user_id == user_id:
                return state
        return None

    def add_voice_state(self, voice_state: VoiceState) -> None:
        self.voice_states.append(voice_state)

    def update_voice_state(self, voice_state: VoiceState) -> None:
        """Replace the user's voice state, or add it if the user had none."""
        for i, state in enumerate(self.voice_states):
            if state.user_id == voice_state.user_id:
                self.voice_states[i] = voice_state
                return
        self.voice_states.append(voice_state)
