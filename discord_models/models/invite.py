"""Invites."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from discord_models.models.application import Application
from discord_models.models.base import DiscordModel
from discord_models.models.channel import Channel
from discord_models.models.guild import NSFWLevel, VerificationLevel
from discord_models.models.member import GuildMember
from discord_models.models.scheduled_event import GuildScheduledEvent
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class InviteType(IntEnum):
    GUILD = 0
    GROUP_DM = 1
    FRIEND = 2


class InviteTargetType(IntEnum):
    STREAM = 1
    EMBEDDED_APPLICATION = 2


class InviteGuild(DiscordModel):
    """The partial guild embedded in an invite."""

    id: Snowflake
    name: str
    splash: str | None = None
    banner: str | None = None
    description: str | None = None
    icon: str | None = None
    features: list[str] = Field(default_factory=list)
    verification_level: VerificationLevel | None = None
    vanity_url_code: str | None = None
    nsfw_level: NSFWLevel | None = None
    premium_subscription_count: int | None = None


class InviteStageInstance(DiscordModel):
    """Deprecated by the platform but still sent for stage invites."""

    members: list[GuildMember] = Field(default_factory=list)
    participant_count: int = 0
    speaker_count: int = 0
    topic: str = ""


class Invite(DiscordModel):
    type: InviteType = InviteType.GUILD
    code: str
    guild: InviteGuild | None = None
    channel: Channel | None = None
    inviter: User | None = None
    target_type: InviteTargetType | None = None
    target_user: User | None = None
    target_application: Application | None = None
    approximate_presence_count: int | None = None
    approximate_member_count: int | None = None
    expires_at: datetime | None = None
    stage_instance: InviteStageInstance | None = None
    guild_scheduled_event: GuildScheduledEvent | None = None

    @property
    def url(self) -> str:
        return f"https://discord.gg/{self.code}"
