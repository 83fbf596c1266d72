"""Stage instances (live stages in stage channels)."""

from __future__ import annotations

from enum import IntEnum

from discord_models.models.base import DiscordModel
from discord_models.snowflake import Snowflake


class StageInstancePrivacyLevel(IntEnum):
    PUBLIC = 1
    GUILD_ONLY = 2


class StageInstance(DiscordModel):
    id: Snowflake
    guild_id: Snowflake
    channel_id: Snowflake
    topic: str
    privacy_level: StageInstancePrivacyLevel = StageInstancePrivacyLevel.GUILD_ONLY
    discoverable_disabled: bool = False
    guild_scheduled_event_id: Snowflake | None = None
