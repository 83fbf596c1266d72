"""Guild members."""

from __future__ import annotations

from datetime import datetime
from enum import IntFlag

from pydantic import Field

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.models.permissions import Permission
from discord_models.models.user import AvatarDecorationData, User
from discord_models.snowflake import Snowflake


class GuildMemberFlag(IntFlag):
    DID_REJOIN = 1 << 0
    COMPLETED_ONBOARDING = 1 << 1
    BYPASSES_VERIFICATION = 1 << 2
    STARTED_ONBOARDING = 1 << 3
    IS_GUEST = 1 << 4
    STARTED_HOME_ACTIONS = 1 << 5
    COMPLETED_HOME_ACTIONS = 1 << 6
    AUTOMOD_QUARANTINED_USERNAME = 1 << 7
    DM_SETTINGS_UPSELL_ACKNOWLEDGED = 1 << 9


class GuildMember(DiscordModel):
    """A user's membership in a guild."""

    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[Snowflake] = Field(default_factory=list)
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool = False
    mute: bool = False
    flags: Bitfield[GuildMemberFlag] = Field(
        default_factory=lambda: Bitfield.empty(GuildMemberFlag)
    )
    pending: bool | None = None
    permissions: Bitfield[Permission] | None = None
    communication_disabled_until: datetime | None = None
    avatar_decoration_data: AvatarDecorationData | None = None

    @property
    def user_id(self) -> Snowflake | None:
        return self.user.id if self.user else None
