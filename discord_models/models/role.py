"""Guild roles."""

from __future__ import annotations

from enum import IntFlag

from pydantic import Field

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.models.permissions import Permission
from discord_models.snowflake import Snowflake


class RoleFlag(IntFlag):
    IN_PROMPT = 1 << 0


class RoleTags(DiscordModel):
    """Tags a role may carry. Boolean tags are sent as ``null`` when true."""

    bot_id: Snowflake | None = None
    integration_id: Snowflake | None = None
    premium_subscriber: bool = False
    subscription_listing_id: Snowflake | None = None
    available_for_purchase: bool = False
    guild_connections: bool = False


class Role(DiscordModel):
    """A guild role."""

    # Permission sets grow often; keep bits this library doesn't name yet
    preserve_unknown_flag_bits = True

    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: Bitfield[Permission] = Field(default_factory=lambda: Bitfield.empty(Permission))
    managed: bool = False
    mentionable: bool = False
    tags: RoleTags | None = None
    flags: Bitfield[RoleFlag] = Field(default_factory=lambda: Bitfield.empty(RoleFlag))
