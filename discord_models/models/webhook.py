"""Webhooks."""

from __future__ import annotations

from enum import IntEnum

from discord_models.models.base import DiscordModel
from discord_models.models.channel import ChannelType
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class WebhookType(IntEnum):
    INCOMING = 1
    CHANNEL_FOLLOWER = 2
    APPLICATION = 3


class WebhookSourceGuild(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None


class WebhookSourceChannel(DiscordModel):
    id: Snowflake
    name: str | None = None
    type: ChannelType | None = None


class Webhook(DiscordModel):
    """
    A webhook.

    Channel-follower webhooks carry the partial guild and channel being
    followed; only incoming webhooks carry a token.
    """

    id: Snowflake
    type: WebhookType
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    user: User | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = None
    application_id: Snowflake | None = None
    source_guild: WebhookSourceGuild | None = None
    source_channel: WebhookSourceChannel | None = None
    url: str | None = None
