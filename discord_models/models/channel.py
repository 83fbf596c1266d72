"""Channels, threads, and per-channel in-memory state.

Besides the wire record, a Channel carries two pieces of state that are never
serialized: a message cache kept by the gateway consumer, and the typing
indicator for the channel.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING

from pydantic import Field, PrivateAttr

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.models.member import GuildMember
from discord_models.models.permissions import Permission
from discord_models.models.user import User
from discord_models.snowflake import Snowflake
from discord_models.typing_indicator import TypingIndicator

if TYPE_CHECKING:
    from discord_models.models.message import Message


class ChannelType(IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16

    @property
    def is_thread(self) -> bool:
        return self in (
            ChannelType.ANNOUNCEMENT_THREAD,
            ChannelType.PUBLIC_THREAD,
            ChannelType.PRIVATE_THREAD,
        )


class ChannelFlag(IntFlag):
    PINNED = 1 << 1
    REQUIRE_TAG = 1 << 4
    HIDE_MEDIA_DOWNLOAD_OPTIONS = 1 << 15


class SortOrderType(IntEnum):
    LATEST_ACTIVITY = 0
    CREATION_DATE = 1


class ForumLayoutType(IntEnum):
    NOT_SET = 0
    LIST_VIEW = 1
    GALLERY_VIEW = 2


class VideoQualityMode(IntEnum):
    AUTO = 1
    FULL = 2


class OverwriteType(IntEnum):
    ROLE = 0
    MEMBER = 1


class Overwrite(DiscordModel):
    """Permission overwrite for a role or member on one channel."""

    preserve_unknown_flag_bits = True

    id: Snowflake
    type: OverwriteType
    allow: Bitfield[Permission] = Field(default_factory=lambda: Bitfield.empty(Permission))
    deny: Bitfield[Permission] = Field(default_factory=lambda: Bitfield.empty(Permission))


class ThreadMetadata(DiscordModel):
    archived: bool = False
    auto_archive_duration: int = 1440
    archive_timestamp: datetime
    locked: bool = False
    invitable: bool | None = None
    create_timestamp: datetime | None = None


class ThreadMember(DiscordModel):
    id: Snowflake | None = None
    user_id: Snowflake | None = None
    join_timestamp: datetime
    flags: int = 0
    member: GuildMember | None = None


class ForumTag(DiscordModel):
    id: Snowflake
    name: str
    moderated: bool = False
    emoji_id: Snowflake | None = None
    emoji_name: str | None = None


class DefaultReaction(DiscordModel):
    emoji_id: Snowflake | None = None
    emoji_name: str | None = None


class Channel(DiscordModel):
    """A guild channel, DM, group DM, or thread."""

    id: Snowflake
    type: ChannelType
    guild_id: Snowflake | None = None
    position: int | None = None
    permission_overwrites: list[Overwrite] = Field(default_factory=list)
    name: str | None = None
    topic: str | None = None
    nsfw: bool | None = None
    last_message_id: Snowflake | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] = Field(default_factory=list)
    icon: str | None = None
    owner_id: Snowflake | None = None
    application_id: Snowflake | None = None
    managed: bool | None = None
    parent_id: Snowflake | None = None
    last_pin_timestamp: datetime | None = None
    rtc_region: str | None = None
    video_quality_mode: VideoQualityMode | None = None
    message_count: int | None = None
    member_count: int | None = None
    thread_metadata: ThreadMetadata | None = None
    member: ThreadMember | None = None
    default_auto_archive_duration: int | None = None
    permissions: Bitfield[Permission] | None = None
    flags: Bitfield[ChannelFlag] | None = None
    total_message_sent: int | None = None
    available_tags: list[ForumTag] = Field(default_factory=list)
    applied_tags: list[Snowflake] = Field(default_factory=list)
    default_reaction_emoji: DefaultReaction | None = None
    default_thread_rate_limit_per_user: int | None = None
    default_sort_order: SortOrderType | None = None
    default_forum_layout: ForumLayoutType | None = None

    _messages: list[Message] = PrivateAttr(default_factory=list)
    _typing: TypingIndicator = PrivateAttr(default_factory=TypingIndicator)

    @property
    def typing(self) -> TypingIndicator:
        """Users currently typing in this channel."""
        return self._typing

    @property
    def messages(self) -> list[Message]:
        """Cached messages in arrival order. Not serialized."""
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        self._messages.append(message)

    def get_message(self, message_id: Snowflake | int) -> Message | None:
        for message in self._messages:
            if message.id == message_id:
                return message
        return None

    def update_message(self, message: Message) -> None:
        """Replace the cached message with the same id, or cache it if unseen."""
        for i, cached in enumerate(self._messages):
            if cached.id == message.id:
                self._messages[i] = message
                return
        self._messages.append(message)

    def delete_message(self, message_id: Snowflake | int) -> Message | None:
        for i, cached in enumerate(self._messages):
            if cached.id == message_id:
                return self._messages.pop(i)
        return None
