"""Interactions and the responses sent back to them."""

from __future__ import annotations

from enum import IntEnum

from pydantic import Field

from discord_models.bitfield import Bitfield
from discord_models.constants import MAX_RESPONSE_EMBEDS
from discord_models.errors import InvalidResponseError
from discord_models.models.application_command import (
    ApplicationCommandOptionChoice,
    ApplicationCommandOptionType,
    ApplicationCommandType,
)
from discord_models.models.base import DiscordModel
from discord_models.models.channel import Channel
from discord_models.models.embed import Embed
from discord_models.models.enums import (
    ApplicationIntegrationType,
    InteractionContextType,
    InteractionType,
)
from discord_models.models.entitlement import Entitlement
from discord_models.models.guild import Guild
from discord_models.models.member import GuildMember
from discord_models.models.message import (
    AllowedMentions,
    Attachment,
    Message,
    MessageComponent,
    MessageComponentType,
    MessageFlag,
    ResolvedData,
)
from discord_models.models.permissions import Permission
from discord_models.models.poll import PollCreate
from discord_models.models.user import User
from discord_models.snowflake import Snowflake

# Only these may be set on an interaction response
RESPONSE_FLAGS = frozenset(
    {MessageFlag.EPHEMERAL, MessageFlag.SUPPRESS_EMBEDS, MessageFlag.SUPPRESS_NOTIFICATIONS}
)


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9
    PREMIUM_REQUIRED = 10
    LAUNCH_ACTIVITY = 12


class ApplicationCommandInteractionDataOption(DiscordModel):
    """A filled-in option; sub-commands nest further options."""

    name: str
    type: ApplicationCommandOptionType
    value: str | int | float | bool | None = None
    options: list[ApplicationCommandInteractionDataOption] | None = None
    focused: bool | None = None


class InteractionData(DiscordModel):
    """
    Payload of an interaction.

    Application commands fill ``id``/``name``/``type``; component
    interactions fill ``custom_id``/``component_type``/``values``; modal
    submits fill ``custom_id``/``components``.
    """

    id: Snowflake | None = None
    name: str | None = None
    type: ApplicationCommandType | None = None
    resolved: ResolvedData | None = None
    options: list[ApplicationCommandInteractionDataOption] | None = None
    guild_id: Snowflake | None = None
    target_id: Snowflake | None = None
    custom_id: str | None = None
    component_type: MessageComponentType | None = None
    values: list[str] | None = None
    components: list[MessageComponent] | None = None

    def get_option(self, name: str) -> ApplicationCommandInteractionDataOption | None:
        for option in self.options or []:
            if option.name == name:
                return option
        return None


class Interaction(DiscordModel):
    """An incoming interaction: a command, component click, or modal submit."""

    id: Snowflake
    application_id: Snowflake
    type: InteractionType
    data: InteractionData | None = None
    guild: Guild | None = None
    guild_id: Snowflake | None = None
    channel: Channel | None = None
    channel_id: Snowflake | None = None
    member: GuildMember | None = None
    user: User | None = None
    token: str
    version: int = 1
    message: Message | None = None
    app_permissions: Bitfield[Permission] | None = None
    locale: str | None = None
    guild_locale: str | None = None
    entitlements: list[Entitlement] = Field(default_factory=list)
    authorizing_integration_owners: dict[ApplicationIntegrationType, str] = Field(
        default_factory=dict
    )
    context: InteractionContextType | None = None

    @property
    def invoker(self) -> User | None:
        """The user who triggered the interaction, in a guild or a DM."""
        if self.member is not None and self.member.user is not None:
            return self.member.user
        return self.user


class InteractionResponseData(DiscordModel):
    tts: bool | None = None
    content: str | None = None
    embeds: list[Embed] | None = None
    allowed_mentions: AllowedMentions | None = None
    flags: Bitfield[MessageFlag] | None = None
    components: list[MessageComponent] | None = None
    attachments: list[Attachment] | None = None
    poll: PollCreate | None = None
    # Autocomplete results
    choices: list[ApplicationCommandOptionChoice] | None = None
    # Modals
    custom_id: str | None = None
    title: str | None = None


class InteractionResponse(DiscordModel):
    """
    Response to an interaction, built with chained setters.

    Example:
        response = (
            InteractionResponse.new()
            .set_response_type(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE)
            .set_content("pong")
        )
    """

    type: InteractionResponseType
    data: InteractionResponseData | None = None

    @classmethod
    def new(cls) -> InteractionResponse:
        return cls(type=InteractionResponseType.PONG, data=InteractionResponseData())

    def _data(self) -> InteractionResponseData:
        if self.data is None:
            self.data = InteractionResponseData()
        return self.data

    def set_response_type(self, response_type: InteractionResponseType) -> InteractionResponse:
        self.type = response_type
        return self

    def set_tts(self, tts: bool) -> InteractionResponse:
        self._data().tts = tts
        return self

    def set_content(self, content: str) -> InteractionResponse:
        self._data().content = content
        return self

    def set_embeds(self, embeds: list[Embed]) -> InteractionResponse:
        """
        Raises:
            InvalidResponseError: If more than MAX_RESPONSE_EMBEDS are given
        """
        if len(embeds) > MAX_RESPONSE_EMBEDS:
            raise InvalidResponseError(
                f"a response holds at most {MAX_RESPONSE_EMBEDS} embeds, got {len(embeds)}"
            )
        self._data().embeds = list(embeds)
        return self

    def set_allowed_mentions(self, allowed_mentions: AllowedMentions | None) -> InteractionResponse:
        self._data().allowed_mentions = allowed_mentions
        return self

    def set_flags(self, flags: Bitfield[MessageFlag]) -> InteractionResponse:
        """
        Raises:
            InvalidResponseError: If any flag other than EPHEMERAL,
                SUPPRESS_EMBEDS or SUPPRESS_NOTIFICATIONS is set
        """
        rejected = [flag for flag in flags if flag not in RESPONSE_FLAGS]
        if rejected or flags.unknown_bits:
            names = ", ".join(flag.name or str(flag.value) for flag in rejected)
            raise InvalidResponseError(
                "a response accepts only EPHEMERAL, SUPPRESS_EMBEDS and "
                f"SUPPRESS_NOTIFICATIONS flags, got {names or 'unknown bits'}"
            )
        self._data().flags = flags.copy()
        return self

    def set_components(self, components: list[MessageComponent]) -> InteractionResponse:
        self._data().components = list(components)
        return self

    def set_attachments(self, attachments: list[Attachment]) -> InteractionResponse:
        self._data().attachments = list(attachments)
        return self

    def set_poll(self, poll: PollCreate | None) -> InteractionResponse:
        self._data().poll = poll
        return self


class InteractionCallbackObject(DiscordModel):
    id: Snowflake
    type: InteractionType
    activity_instance_id: str | None = None
    response_message_id: Snowflake | None = None
    response_message_loading: bool | None = None
    response_message_ephemeral: bool | None = None


class InteractionActivityInstance(DiscordModel):
    id: str


class InteractionCallbackResource(DiscordModel):
    type: InteractionResponseType
    activity_instance: InteractionActivityInstance | None = None
    message: Message | None = None


class InteractionCallbackResponse(DiscordModel):
    """Returned when a response is created with ``with_response=true``."""

    interaction: InteractionCallbackObject
    resource: InteractionCallbackResource | None = None


ApplicationCommandInteractionDataOption.model_rebuild()
