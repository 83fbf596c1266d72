"""Presence updates, received and sent."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from discord_models.models.activity import Activity
from discord_models.models.base import DiscordModel
from discord_models.models.user import PartialUser
from discord_models.snowflake import Snowflake


class UserStatus(StrEnum):
    ONLINE = "online"
    DND = "dnd"
    IDLE = "idle"
    INVISIBLE = "invisible"
    OFFLINE = "offline"


class ClientStatus(DiscordModel):
    """Status per client platform; absent platforms are offline."""

    desktop: UserStatus | None = None
    mobile: UserStatus | None = None
    web: UserStatus | None = None


class PresenceUpdate(DiscordModel):
    """A user's presence in one guild, as dispatched by the gateway."""

    user: PartialUser
    guild_id: Snowflake | None = None
    status: UserStatus = UserStatus.OFFLINE
    activities: list[Activity] = Field(default_factory=list)
    client_status: ClientStatus = Field(default_factory=ClientStatus)


class GatewayPresenceUpdate(DiscordModel):
    """Presence the client sends for itself (gateway opcode 3)."""

    since: int | None = None  # Unix ms since idle, or null
    activities: list[Activity] = Field(default_factory=list)
    status: UserStatus = UserStatus.ONLINE
    afk: bool = False
