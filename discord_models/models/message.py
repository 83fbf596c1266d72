"""Messages, their attachments and components, and reaction bookkeeping."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import IntEnum, IntFlag, StrEnum
from typing import Any

from pydantic import (
    Field,
    GetCoreSchemaHandler,
    GetJsonSchemaHandler,
    SerializerFunctionWrapHandler,
    field_serializer,
)
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from discord_models.bitfield import Bitfield
from discord_models.errors import InvalidEmojiError, SchemaMismatchError, UnknownMessageTypeError
from discord_models.models.application import Application
from discord_models.models.base import DiscordModel
from discord_models.models.channel import Channel, ChannelType
from discord_models.models.embed import Embed
from discord_models.models.emoji import Emoji
from discord_models.models.enums import ApplicationIntegrationType, InteractionType
from discord_models.models.member import GuildMember
from discord_models.models.poll import Poll
from discord_models.models.role import Role
from discord_models.models.sticker import Sticker, StickerItem
from discord_models.models.user import User
from discord_models.snowflake import Snowflake

logger = logging.getLogger(__name__)


# ── Message type ─────────────────────────────────────────────────────────────


class MessageType(IntEnum):
    """
    Kind of message.

    Values 13, 30, 33-35 and 40-43 are reserved by the platform and rejected
    when decoding, as is any value not listed here.
    """

    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    USER_JOIN = 7
    GUILD_BOOST = 8
    GUILD_BOOST_TIER_1 = 9
    GUILD_BOOST_TIER_2 = 10
    GUILD_BOOST_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    GUILD_DISCOVERY_GRACE_PERIOD_INITIAL_WARNING = 16
    GUILD_DISCOVERY_GRACE_PERIOD_FINAL_WARNING = 17
    THREAD_CREATED = 18
    REPLY = 19
    CHAT_INPUT_COMMAND = 20
    THREAD_STARTER_MESSAGE = 21
    GUILD_INVITE_REMINDER = 22
    CONTEXT_MENU_COMMAND = 23
    AUTO_MODERATION_ACTION = 24
    ROLE_SUBSCRIPTION_PURCHASE = 25
    INTERACTION_PREMIUM_UPSELL = 26
    STAGE_START = 27
    STAGE_END = 28
    STAGE_SPEAKER = 29
    STAGE_TOPIC = 31
    GUILD_APPLICATION_PREMIUM_SUBSCRIPTION = 32
    GUILD_INCIDENT_ALERT_MODE_ENABLED = 36
    GUILD_INCIDENT_ALERT_MODE_DISABLED = 37
    GUILD_INCIDENT_REPORT_RAID = 38
    GUILD_INCIDENT_REPORT_FALSE_ALARM = 39
    PURCHASE_NOTIFICATION = 44

    @property
    def type_name(self) -> str:
        return self.name

    @property
    def deletable(self) -> bool:
        """Whether a message of this type can be deleted."""
        return self not in _UNDELETABLE_MESSAGE_TYPES

    @classmethod
    def decode(cls, value: int) -> MessageType:
        """
        Look up a wire value.

        Raises:
            UnknownMessageTypeError: If ``value`` is reserved or unlisted
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownMessageTypeError(value) from None

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> MessageType:
            if isinstance(value, MessageType):
                return value
            # "0", 0.0 and true are shape errors, not message types
            if isinstance(value, bool) or not isinstance(value, int):
                raise SchemaMismatchError("", "a valid integer", value)
            return cls.decode(value)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "integer", "enum": [member.value for member in cls]}


_UNDELETABLE_MESSAGE_TYPES = frozenset(
    {
        MessageType.RECIPIENT_ADD,
        MessageType.RECIPIENT_REMOVE,
        MessageType.CALL,
        MessageType.CHANNEL_NAME_CHANGE,
        MessageType.CHANNEL_ICON_CHANGE,
        MessageType.THREAD_STARTER_MESSAGE,
    }
)


# ── Flags and small enums ────────────────────────────────────────────────────


class MessageFlag(IntFlag):
    CROSSPOSTED = 1 << 0
    IS_CROSSPOST = 1 << 1
    SUPPRESS_EMBEDS = 1 << 2
    SOURCE_MESSAGE_DELETED = 1 << 3
    URGENT = 1 << 4
    HAS_THREAD = 1 << 5
    EPHEMERAL = 1 << 6
    LOADING = 1 << 7
    FAILED_TO_MENTION_SOME_ROLES_IN_THREAD = 1 << 8
    SUPPRESS_NOTIFICATIONS = 1 << 12
    IS_VOICE_MESSAGE = 1 << 13


class AttachmentFlag(IntFlag):
    IS_REMIX = 1 << 2


class AllowedMentionType(StrEnum):
    ROLES = "roles"
    USERS = "users"
    EVERYONE = "everyone"


class MessageActivityType(IntEnum):
    JOIN = 1
    SPECTATE = 2
    LISTEN = 3
    JOIN_REQUEST = 5


class MessageReferenceType(IntEnum):
    DEFAULT = 0
    FORWARD = 1


class MessageComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    TEXT_INPUT = 4
    USER_SELECT = 5
    ROLE_SELECT = 6
    MENTIONABLE_SELECT = 7
    CHANNEL_SELECT = 8


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5
    PREMIUM = 6


# ── Sub-records ──────────────────────────────────────────────────────────────


class Attachment(DiscordModel):
    id: Snowflake
    filename: str
    title: str | None = None
    description: str | None = None
    content_type: str | None = None
    size: int = 0
    url: str
    proxy_url: str = ""
    height: int | None = None
    width: int | None = None
    ephemeral: bool | None = None
    duration_secs: float | None = None
    waveform: str | None = None
    flags: Bitfield[AttachmentFlag] | None = None


class ChannelMention(DiscordModel):
    id: Snowflake
    guild_id: Snowflake
    type: ChannelType
    name: str


class AllowedMentions(DiscordModel):
    """Which mentions in outgoing content are allowed to ping."""

    parse: list[AllowedMentionType] = Field(default_factory=list)
    roles: list[Snowflake] = Field(default_factory=list)
    users: list[Snowflake] = Field(default_factory=list)
    replied_user: bool = False


class MessageActivity(DiscordModel):
    type: MessageActivityType
    party_id: str | None = None


class MessageCall(DiscordModel):
    participants: list[Snowflake] = Field(default_factory=list)
    ended_timestamp: datetime | None = None


class RoleSubscriptionData(DiscordModel):
    role_subscription_listing_id: Snowflake
    tier_name: str
    total_months_subscribed: int
    is_renewal: bool = False


class MessageReference(DiscordModel):
    type: MessageReferenceType = MessageReferenceType.DEFAULT
    message_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    fail_if_not_exists: bool | None = None


class MessageInteractionMetadata(DiscordModel):
    """Metadata about the interaction that produced a message."""

    id: Snowflake
    type: InteractionType
    user: User
    authorizing_integration_owners: dict[ApplicationIntegrationType, str] = Field(
        default_factory=dict
    )
    original_response_message_id: Snowflake | None = None
    interacted_message_id: Snowflake | None = None
    triggering_interaction_metadata: MessageInteractionMetadata | None = None
    target_user: User | None = None
    target_message_id: Snowflake | None = None


class MessageInteraction(DiscordModel):
    """Deprecated predecessor of MessageInteractionMetadata, still sent."""

    id: Snowflake
    type: InteractionType
    name: str
    user: User
    member: GuildMember | None = None


class SelectOption(DiscordModel):
    label: str
    value: str
    description: str | None = None
    emoji: Emoji | None = None
    default: bool | None = None


class SelectDefaultValue(DiscordModel):
    id: Snowflake
    type: str


class MessageComponent(DiscordModel):
    """
    An interactive component.

    One shape covers action rows, buttons, selects, and text inputs; the
    fields that apply depend on ``type``. Action rows nest their children in
    ``components``.
    """

    type: MessageComponentType
    components: list[MessageComponent] | None = None
    custom_id: str | None = None
    style: int | None = None
    label: str | None = None
    emoji: Emoji | None = None
    url: str | None = None
    sku_id: Snowflake | None = None
    disabled: bool | None = None
    options: list[SelectOption] | None = None
    channel_types: list[ChannelType] | None = None
    placeholder: str | None = None
    default_values: list[SelectDefaultValue] | None = None
    min_values: int | None = None
    max_values: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    required: bool | None = None
    value: str | None = None

    @classmethod
    def action_row(cls, *components: MessageComponent) -> MessageComponent:
        return cls(type=MessageComponentType.ACTION_ROW, components=list(components))


# ── Reactions ────────────────────────────────────────────────────────────────


class ReactionCountDetails(DiscordModel):
    burst: int = 0
    normal: int = 0


class Reaction(DiscordModel):
    """Aggregated count of one emoji on one message."""

    count: int = 0
    count_details: ReactionCountDetails = Field(default_factory=ReactionCountDetails)
    me: bool = False
    me_burst: bool = False
    emoji: Emoji
    burst_colors: list[str] = Field(default_factory=list)

    @field_serializer("emoji", mode="wrap")
    def _serialize_emoji(self, emoji: Emoji, handler: SerializerFunctionWrapHandler) -> Any:
        if not emoji.has_identity:
            raise InvalidEmojiError()
        return handler(emoji)


# ── Resolved data ────────────────────────────────────────────────────────────


class ResolvedData(DiscordModel):
    """Partial objects referenced by an interaction's options, keyed by id."""

    users: dict[Snowflake, User] | None = None
    members: dict[Snowflake, GuildMember] | None = None
    roles: dict[Snowflake, Role] | None = None
    channels: dict[Snowflake, Channel] | None = None
    messages: dict[Snowflake, Message] | None = None
    attachments: dict[Snowflake, Attachment] | None = None


# ── Message ──────────────────────────────────────────────────────────────────


class SnapshotMessage(DiscordModel):
    """The subset of message fields carried by a forwarded-message snapshot."""

    type: MessageType = MessageType.DEFAULT
    content: str = ""
    embeds: list[Embed] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)
    timestamp: datetime | None = None
    edited_timestamp: datetime | None = None
    flags: Bitfield[MessageFlag] | None = None
    mentions: list[User] = Field(default_factory=list)
    mention_roles: list[Snowflake] = Field(default_factory=list)
    stickers: list[Sticker] | None = None
    sticker_items: list[StickerItem] | None = None
    components: list[MessageComponent] | None = None


class MessageSnapshot(DiscordModel):
    message: SnapshotMessage


class Message(DiscordModel):
    """A message sent in a channel."""

    id: Snowflake
    channel_id: Snowflake
    author: User
    content: str = ""
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: list[User] = Field(default_factory=list)
    mention_roles: list[Snowflake] = Field(default_factory=list)
    mention_channels: list[ChannelMention] | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    embeds: list[Embed] = Field(default_factory=list)
    reactions: list[Reaction] = Field(default_factory=list)
    nonce: str | int | None = None
    pinned: bool = False
    webhook_id: Snowflake | None = None
    type: MessageType = MessageType.DEFAULT
    activity: MessageActivity | None = None
    application: Application | None = None
    application_id: Snowflake | None = None
    flags: Bitfield[MessageFlag] | None = None
    message_reference: MessageReference | None = None
    message_snapshots: list[MessageSnapshot] | None = None
    referenced_message: Message | None = None
    interaction_metadata: MessageInteractionMetadata | None = None
    interaction: MessageInteraction | None = None
    thread: Channel | None = None
    components: list[MessageComponent] | None = None
    sticker_items: list[StickerItem] | None = None
    stickers: list[Sticker] | None = None
    position: int | None = None
    role_subscription_data: RoleSubscriptionData | None = None
    resolved: ResolvedData | None = None
    poll: Poll | None = None
    call: MessageCall | None = None

    # --- reactions ---

    def _reaction_index(self, emoji: Emoji) -> int | None:
        key = emoji.identity
        for i, reaction in enumerate(self.reactions):
            # A stored reaction without identity can't be addressed
            if reaction.emoji.has_identity and reaction.emoji.identity == key:
                return i
        return None

    def find_reaction(self, emoji: Emoji) -> Reaction | None:
        """
        Return the stored reaction for ``emoji``, if any.

        The returned object is the stored one; mutating it updates the
        message.

        Raises:
            InvalidEmojiError: If ``emoji`` has neither id nor name
        """
        index = self._reaction_index(emoji)
        return None if index is None else self.reactions[index]

    def upsert_reaction(self, reaction: Reaction) -> None:
        """Replace the reaction with the same emoji identity in place, or append it."""
        index = self._reaction_index(reaction.emoji)
        if index is None:
            self.reactions.append(reaction)
        else:
            self.reactions[index] = reaction

    def erase_reaction(self, emoji: Emoji) -> None:
        """Remove the reaction for ``emoji``. No-op if there is none."""
        index = self._reaction_index(emoji)
        if index is not None:
            del self.reactions[index]

    def record_reaction_add(
        self,
        emoji: Emoji,
        *,
        burst: bool = False,
        me: bool = False,
        burst_colors: list[str] | None = None,
    ) -> Reaction:
        """
        Apply one MESSAGE_REACTION_ADD event.

        Args:
            emoji: The emoji reacted with
            burst: True for a super reaction
            me: True when the reacting user is the current user
            burst_colors: Colors for a newly created burst reaction

        Returns:
            The stored reaction after the update
        """
        reaction = self.find_reaction(emoji)
        if reaction is None:
            reaction = Reaction(emoji=emoji, burst_colors=list(burst_colors or []))
            self.reactions.append(reaction)

        reaction.count += 1
        if burst:
            reaction.count_details.burst += 1
            reaction.me_burst = reaction.me_burst or me
        else:
            reaction.count_details.normal += 1
            reaction.me = reaction.me or me
        return reaction

    def record_reaction_remove(
        self, emoji: Emoji, *, burst: bool = False, me: bool = False
    ) -> Reaction | None:
        """
        Apply one MESSAGE_REACTION_REMOVE event.

        Returns:
            The stored reaction, or None if it was absent or has been erased
            because its count reached zero
        """
        reaction = self.find_reaction(emoji)
        if reaction is None:
            logger.debug("Reaction remove for untracked emoji on message %s", self.id)
            return None

        reaction.count = max(reaction.count - 1, 0)
        if burst:
            reaction.count_details.burst = max(reaction.count_details.burst - 1, 0)
            if me:
                reaction.me_burst = False
        else:
            reaction.count_details.normal = max(reaction.count_details.normal - 1, 0)
            if me:
                reaction.me = False

        if reaction.count == 0:
            self.erase_reaction(emoji)
            return None
        return reaction

    def clear_reactions(self) -> None:
        self.reactions.clear()

    # --- misc ---

    @property
    def deletable(self) -> bool:
        return self.type.deletable

    @property
    def is_reply(self) -> bool:
        return self.type is MessageType.REPLY and self.message_reference is not None


MessageInteractionMetadata.model_rebuild()
MessageComponent.model_rebuild()
ResolvedData.model_rebuild()
Message.model_rebuild()
