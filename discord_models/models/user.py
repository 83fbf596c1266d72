"""User records."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.snowflake import Snowflake


class UserFlag(IntFlag):
    STAFF = 1 << 0
    PARTNER = 1 << 1
    HYPESQUAD = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HYPESQUAD_ONLINE_HOUSE_1 = 1 << 6
    HYPESQUAD_ONLINE_HOUSE_2 = 1 << 7
    HYPESQUAD_ONLINE_HOUSE_3 = 1 << 8
    PREMIUM_EARLY_SUPPORTER = 1 << 9
    TEAM_PSEUDO_USER = 1 << 10
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18
    BOT_HTTP_INTERACTIONS = 1 << 19
    ACTIVE_DEVELOPER = 1 << 22


class PremiumType(IntEnum):
    NONE = 0
    NITRO_CLASSIC = 1
    NITRO = 2
    NITRO_BASIC = 3


class AvatarDecorationData(DiscordModel):
    """Avatar decoration asset and the SKU it was bought with."""

    asset: str
    sku_id: Snowflake


class User(DiscordModel):
    """A platform user or bot account."""

    id: Snowflake
    username: str
    discriminator: str = "0"
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
    system: bool | None = None
    mfa_enabled: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    verified: bool | None = None
    email: str | None = None
    flags: Bitfield[UserFlag] | None = None
    premium_type: PremiumType | None = None
    public_flags: Bitfield[UserFlag] | None = None
    avatar_decoration_data: AvatarDecorationData | None = None

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    def __str__(self) -> str:
        if self.discriminator and self.discriminator != "0":
            return f"{self.username}#{self.discriminator}"
        return self.username


class PartialUser(DiscordModel):
    """A user reference where only the id is guaranteed (presences, some events)."""

    id: Snowflake
    username: str | None = None
    discriminator: str | None = None
    global_name: str | None = None
    avatar: str | None = None
    bot: bool | None = None
