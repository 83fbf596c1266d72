"""Applications (bots and their OAuth2 install configuration)."""

from __future__ import annotations

from enum import IntFlag

from pydantic import Field

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.models.enums import ApplicationIntegrationType
from discord_models.models.guild import Guild
from discord_models.models.permissions import Permission
from discord_models.models.team import Team
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class ApplicationFlag(IntFlag):
    APPLICATION_AUTO_MODERATION_RULE_CREATE_BADGE = 1 << 6
    GATEWAY_PRESENCE = 1 << 12
    GATEWAY_PRESENCE_LIMITED = 1 << 13
    GATEWAY_GUILD_MEMBERS = 1 << 14
    GATEWAY_GUILD_MEMBERS_LIMITED = 1 << 15
    VERIFICATION_PENDING_GUILD_LIMIT = 1 << 16
    EMBEDDED = 1 << 17
    GATEWAY_MESSAGE_CONTENT = 1 << 18
    GATEWAY_MESSAGE_CONTENT_LIMITED = 1 << 19
    APPLICATION_COMMAND_BADGE = 1 << 23


class InstallParams(DiscordModel):
    # OAuth2Scope values, kept as strings so new scopes still decode
    scopes: list[str] = Field(default_factory=list)
    permissions: Bitfield[Permission] = Field(default_factory=lambda: Bitfield.empty(Permission))


class ApplicationIntegrationTypeConfig(DiscordModel):
    oauth2_install_params: InstallParams | None = None


class Application(DiscordModel):
    """An application registered on the developer portal."""

    id: Snowflake
    name: str
    icon: str | None = None
    description: str = ""
    rpc_origins: list[str] | None = None
    bot_public: bool = False
    bot_require_code_grant: bool = False
    bot: User | None = None
    terms_of_service_url: str | None = None
    privacy_policy_url: str | None = None
    owner: User | None = None
    summary: str = ""
    verify_key: str = ""
    team: Team | None = None
    guild_id: Snowflake | None = None
    guild: Guild | None = None
    primary_sku_id: Snowflake | None = None
    slug: str | None = None
    cover_image: str | None = None
    flags: Bitfield[ApplicationFlag] | None = None
    approximate_guild_count: int | None = None
    redirect_uris: list[str] | None = None
    interactions_endpoint_url: str | None = None
    role_connections_verification_url: str | None = None
    tags: list[str] | None = None
    install_params: InstallParams | None = None
    integration_types_config: dict[ApplicationIntegrationType, ApplicationIntegrationTypeConfig] | None = None
    custom_install_url: str | None = None
