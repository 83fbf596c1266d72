"""Guilds and guild-level enumerations."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum, IntFlag, StrEnum

from pydantic import Field

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.models.emoji import Emoji
from discord_models.models.enums import ApplicationIntegrationType
from discord_models.models.role import Role
from discord_models.models.sticker import Sticker
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class VerificationLevel(IntEnum):
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4


class DefaultMessageNotificationLevel(IntEnum):
    ALL_MESSAGES = 0
    ONLY_MENTIONS = 1


class ExplicitContentFilterLevel(IntEnum):
    DISABLED = 0
    MEMBERS_WITHOUT_ROLES = 1
    ALL_MEMBERS = 2


class MFALevel(IntEnum):
    NONE = 0
    ELEVATED = 1


class NSFWLevel(IntEnum):
    DEFAULT = 0
    EXPLICIT = 1
    SAFE = 2
    AGE_RESTRICTED = 3


class PremiumTier(IntEnum):
    NONE = 0
    TIER_1 = 1
    TIER_2 = 2
    TIER_3 = 3


class GuildFeature(StrEnum):
    ANIMATED_BANNER = "ANIMATED_BANNER"
    ANIMATED_ICON = "ANIMATED_ICON"
    APPLICATION_COMMAND_PERMISSIONS_V2 = "APPLICATION_COMMAND_PERMISSIONS_V2"
    AUTO_MODERATION = "AUTO_MODERATION"
    BANNER = "BANNER"
    COMMUNITY = "COMMUNITY"
    CREATOR_MONETIZABLE_PROVISIONAL = "CREATOR_MONETIZABLE_PROVISIONAL"
    CREATOR_STORE_PAGE = "CREATOR_STORE_PAGE"
    DEVELOPER_SUPPORT_SERVER = "DEVELOPER_SUPPORT_SERVER"
    DISCOVERABLE = "DISCOVERABLE"
    FEATURABLE = "FEATURABLE"
    INVITES_DISABLED = "INVITES_DISABLED"
    INVITE_SPLASH = "INVITE_SPLASH"
    MEMBER_VERIFICATION_GATE_ENABLED = "MEMBER_VERIFICATION_GATE_ENABLED"
    MORE_STICKERS = "MORE_STICKERS"
    NEWS = "NEWS"
    PARTNERED = "PARTNERED"
    PREVIEW_ENABLED = "PREVIEW_ENABLED"
    RAID_ALERTS_DISABLED = "RAID_ALERTS_DISABLED"
    ROLE_ICONS = "ROLE_ICONS"
    ROLE_SUBSCRIPTIONS_AVAILABLE_FOR_PURCHASE = "ROLE_SUBSCRIPTIONS_AVAILABLE_FOR_PURCHASE"
    ROLE_SUBSCRIPTIONS_ENABLED = "ROLE_SUBSCRIPTIONS_ENABLED"
    TICKETED_EVENTS_ENABLED = "TICKETED_EVENTS_ENABLED"
    VANITY_URL = "VANITY_URL"
    VERIFIED = "VERIFIED"
    VIP_REGIONS = "VIP_REGIONS"
    WELCOME_SCREEN_ENABLED = "WELCOME_SCREEN_ENABLED"


class SystemChannelFlag(IntFlag):
    SUPPRESS_JOIN_NOTIFICATIONS = 1 << 0
    SUPPRESS_PREMIUM_SUBSCRIPTIONS = 1 << 1
    SUPPRESS_GUILD_REMINDER_NOTIFICATIONS = 1 << 2
    SUPPRESS_JOIN_NOTIFICATION_REPLIES = 1 << 3
    SUPPRESS_ROLE_SUBSCRIPTION_PURCHASE_NOTIFICATIONS = 1 << 4
    SUPPRESS_ROLE_SUBSCRIPTION_PURCHASE_NOTIFICATION_REPLIES = 1 << 5


class WelcomeScreenChannel(DiscordModel):
    channel_id: Snowflake
    description: str
    emoji_id: Snowflake | None = None
    emoji_name: str | None = None


class WelcomeScreen(DiscordModel):
    description: str | None = None
    welcome_channels: list[WelcomeScreenChannel] = Field(default_factory=list)


class IntegrationAccount(DiscordModel):
    id: str
    name: str


class IntegrationApplication(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    description: str = ""
    bot: User | None = None


class Integration(DiscordModel):
    """A third-party integration attached to a guild (twitch, youtube, bot, ...)."""

    id: Snowflake
    name: str
    type: str
    enabled: bool = False
    syncing: bool | None = None
    role_id: Snowflake | None = None
    enable_emoticons: bool | None = None
    expire_behavior: int | None = None
    expire_grace_period: int | None = None
    user: User | None = None
    account: IntegrationAccount | None = None
    synced_at: datetime | None = None
    subscriber_count: int | None = None
    revoked: bool | None = None
    application: IntegrationApplication | None = None
    scopes: list[str] | None = None
    integration_type: ApplicationIntegrationType | None = None


class Guild(DiscordModel):
    """A guild, called a server in the client."""

    id: Snowflake
    name: str
    icon: str | None = None
    icon_hash: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    owner: bool | None = None
    owner_id: Snowflake
    permissions: str | None = None
    region: str | None = None
    afk_channel_id: Snowflake | None = None
    afk_timeout: int = 0
    widget_enabled: bool | None = None
    widget_channel_id: Snowflake | None = None
    verification_level: VerificationLevel = VerificationLevel.NONE
    default_message_notifications: DefaultMessageNotificationLevel = (
        DefaultMessageNotificationLevel.ALL_MESSAGES
    )
    explicit_content_filter: ExplicitContentFilterLevel = ExplicitContentFilterLevel.DISABLED
    roles: list[Role] = Field(default_factory=list)
    emojis: list[Emoji] = Field(default_factory=list)
    # Plain strings: new features ship far more often than this library
    features: list[str] = Field(default_factory=list)
    mfa_level: MFALevel = MFALevel.NONE
    application_id: Snowflake | None = None
    system_channel_id: Snowflake | None = None
    system_channel_flags: Bitfield[SystemChannelFlag] = Field(
        default_factory=lambda: Bitfield.empty(SystemChannelFlag)
    )
    rules_channel_id: Snowflake | None = None
    max_presences: int | None = None
    max_members: int | None = None
    vanity_url_code: str | None = None
    description: str | None = None
    banner: str | None = None
    premium_tier: PremiumTier = PremiumTier.NONE
    premium_subscription_count: int | None = None
    preferred_locale: str = "en-US"
    public_updates_channel_id: Snowflake | None = None
    max_video_channel_users: int | None = None
    max_stage_video_channel_users: int | None = None
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None
    welcome_screen: WelcomeScreen | None = None
    nsfw_level: NSFWLevel = NSFWLevel.DEFAULT
    stickers: list[Sticker] = Field(default_factory=list)
    premium_progress_bar_enabled: bool = False
    safety_alerts_channel_id: Snowflake | None = None

    def has_feature(self, feature: GuildFeature | str) -> bool:
        return str(feature) in self.features

    def get_role(self, role_id: Snowflake | int) -> Role | None:
        for role in self.roles:
            if role.id == role_id:
                return role
        return None
