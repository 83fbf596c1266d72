"""Guild audit logs."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import Field

from discord_models.models.application_command import ApplicationCommand
from discord_models.models.auto_moderation import AutoModerationRule
from discord_models.models.base import DiscordModel
from discord_models.models.channel import Channel
from discord_models.models.guild import Integration
from discord_models.models.scheduled_event import GuildScheduledEvent
from discord_models.models.user import User
from discord_models.models.webhook import Webhook
from discord_models.snowflake import Snowflake


class AuditLogEvent(IntEnum):
    GUILD_UPDATE = 1
    CHANNEL_CREATE = 10
    CHANNEL_UPDATE = 11
    CHANNEL_DELETE = 12
    CHANNEL_OVERWRITE_CREATE = 13
    CHANNEL_OVERWRITE_UPDATE = 14
    CHANNEL_OVERWRITE_DELETE = 15
    MEMBER_KICK = 20
    MEMBER_PRUNE = 21
    MEMBER_BAN_ADD = 22
    MEMBER_BAN_REMOVE = 23
    MEMBER_UPDATE = 24
    MEMBER_ROLE_UPDATE = 25
    MEMBER_MOVE = 26
    MEMBER_DISCONNECT = 27
    BOT_ADD = 28
    ROLE_CREATE = 30
    ROLE_UPDATE = 31
    ROLE_DELETE = 32
    INVITE_CREATE = 40
    INVITE_UPDATE = 41
    INVITE_DELETE = 42
    WEBHOOK_CREATE = 50
    WEBHOOK_UPDATE = 51
    WEBHOOK_DELETE = 52
    EMOJI_CREATE = 60
    EMOJI_UPDATE = 61
    EMOJI_DELETE = 62
    MESSAGE_DELETE = 72
    MESSAGE_BULK_DELETE = 73
    MESSAGE_PIN = 74
    MESSAGE_UNPIN = 75
    INTEGRATION_CREATE = 80
    INTEGRATION_UPDATE = 81
    INTEGRATION_DELETE = 82
    STAGE_INSTANCE_CREATE = 83
    STAGE_INSTANCE_UPDATE = 84
    STAGE_INSTANCE_DELETE = 85
    STICKER_CREATE = 90
    STICKER_UPDATE = 91
    STICKER_DELETE = 92
    GUILD_SCHEDULED_EVENT_CREATE = 100
    GUILD_SCHEDULED_EVENT_UPDATE = 101
    GUILD_SCHEDULED_EVENT_DELETE = 102
    THREAD_CREATE = 110
    THREAD_UPDATE = 111
    THREAD_DELETE = 112
    APPLICATION_COMMAND_PERMISSION_UPDATE = 121
    SOUNDBOARD_SOUND_CREATE = 130
    SOUNDBOARD_SOUND_UPDATE = 131
    SOUNDBOARD_SOUND_DELETE = 132
    AUTO_MODERATION_RULE_CREATE = 140
    AUTO_MODERATION_RULE_UPDATE = 141
    AUTO_MODERATION_RULE_DELETE = 142
    AUTO_MODERATION_BLOCK_MESSAGE = 143
    AUTO_MODERATION_FLAG_TO_CHANNEL = 144
    AUTO_MODERATION_USER_COMMUNICATION_DISABLED = 145
    CREATOR_MONETIZATION_REQUEST_CREATED = 150
    CREATOR_MONETIZATION_TERMS_ACCEPTED = 151
    ONBOARDING_PROMPT_CREATE = 163
    ONBOARDING_PROMPT_UPDATE = 164
    ONBOARDING_PROMPT_DELETE = 165
    ONBOARDING_CREATE = 166
    ONBOARDING_UPDATE = 167
    HOME_SETTINGS_CREATE = 190
    HOME_SETTINGS_UPDATE = 191


class AuditLogChange(DiscordModel):
    """One changed key. Values keep whatever JSON shape the key has."""

    key: str
    new_value: Any = None
    old_value: Any = None


class OptionalAuditEntryInfo(DiscordModel):
    """Extra context; which fields are present depends on the action type."""

    application_id: Snowflake | None = None
    auto_moderation_rule_name: str | None = None
    auto_moderation_rule_trigger_type: str | None = None
    channel_id: Snowflake | None = None
    count: str | None = None
    delete_member_days: str | None = None
    id: Snowflake | None = None
    members_removed: str | None = None
    message_id: Snowflake | None = None
    role_name: str | None = None
    type: str | None = None
    integration_type: str | None = None


class AuditLogEntry(DiscordModel):
    target_id: str | None = None
    changes: list[AuditLogChange] | None = None
    user_id: Snowflake | None = None
    id: Snowflake
    action_type: AuditLogEvent
    options: OptionalAuditEntryInfo | None = None
    reason: str | None = None


class AuditLog(DiscordModel):
    application_commands: list[ApplicationCommand] = Field(default_factory=list)
    audit_log_entries: list[AuditLogEntry] = Field(default_factory=list)
    auto_moderation_rules: list[AutoModerationRule] = Field(default_factory=list)
    guild_scheduled_events: list[GuildScheduledEvent] = Field(default_factory=list)
    integrations: list[Integration] = Field(default_factory=list)
    threads: list[Channel] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
    webhooks: list[Webhook] = Field(default_factory=list)

    def entries_for(self, action_type: AuditLogEvent) -> list[AuditLogEntry]:
        return [entry for entry in self.audit_log_entries if entry.action_type == action_type]
