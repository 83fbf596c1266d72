"""Voice state and regions."""

from __future__ import annotations

from datetime import datetime

from discord_models.models.base import DiscordModel
from discord_models.models.member import GuildMember
from discord_models.snowflake import Snowflake


class VoiceState(DiscordModel):
    """A user's connection to a voice channel."""

    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    user_id: Snowflake
    member: GuildMember | None = None
    session_id: str
    deaf: bool = False
    mute: bool = False
    self_deaf: bool = False
    self_mute: bool = False
    self_stream: bool | None = None
    self_video: bool = False
    suppress: bool = False
    request_to_speak_timestamp: datetime | None = None

    @property
    def connected(self) -> bool:
        return self.channel_id is not None


class VoiceRegion(DiscordModel):
    id: str
    name: str
    optimal: bool = False
    deprecated: bool = False
    custom: bool = False
