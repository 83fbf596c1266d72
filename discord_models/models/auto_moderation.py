"""Auto-moderation rules."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from pydantic import Field

from discord_models.models.base import DiscordModel
from discord_models.snowflake import Snowflake


class AutoModerationEventType(IntEnum):
    MESSAGE_SEND = 1
    MEMBER_UPDATE = 2


class AutoModerationTriggerType(IntEnum):
    KEYWORD = 1
    SPAM = 3
    KEYWORD_PRESET = 4
    MENTION_SPAM = 5
    MEMBER_PROFILE = 6


class KeywordPresetType(IntEnum):
    PROFANITY = 1
    SEXUAL_CONTENT = 2
    SLURS = 3


class AutoModerationActionType(IntEnum):
    BLOCK_MESSAGE = 1
    SEND_ALERT_MESSAGE = 2
    TIMEOUT = 3
    BLOCK_MEMBER_INTERACTION = 4


class AutoModerationTriggerMetadata(DiscordModel):
    """Which fields apply depends on the rule's trigger type."""

    keyword_filter: list[str] | None = None
    regex_patterns: list[str] | None = None
    presets: list[KeywordPresetType] | None = None
    allow_list: list[str] | None = None
    mention_total_limit: int | None = None
    mention_raid_protection_enabled: bool | None = None


class AutoModerationActionMetadata(DiscordModel):
    channel_id: Snowflake | None = None
    duration_seconds: int | None = None
    custom_message: str | None = None


class AutoModerationAction(DiscordModel):
    type: AutoModerationActionType
    metadata: AutoModerationActionMetadata | None = None


class AutoModerationRule(DiscordModel):
    id: Snowflake
    guild_id: Snowflake
    name: str
    creator_id: Snowflake
    event_type: AutoModerationEventType
    trigger_type: AutoModerationTriggerType
    trigger_metadata: AutoModerationTriggerMetadata = Field(
        default_factory=AutoModerationTriggerMetadata
    )
    actions: list[AutoModerationAction] = Field(default_factory=list)
    enabled: bool = False
    exempt_roles: list[Snowflake] = Field(default_factory=list)
    exempt_channels: list[Snowflake] = Field(default_factory=list)

    def exempts(
        self, *, role_ids: Iterable[Snowflake] = (), channel_id: Snowflake | None = None
    ) -> bool:
        """True if the given channel or any of the given roles is exempt."""
        if channel_id is not None and channel_id in self.exempt_channels:
            return True
        return any(role_id in self.exempt_roles for role_id in role_ids)
