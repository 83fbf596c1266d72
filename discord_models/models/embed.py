"""Rich embeds attached to messages."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from discord_models.models.base import DiscordModel


class EmbedType(StrEnum):
    RICH = "rich"
    IMAGE = "image"
    VIDEO = "video"
    GIFV = "gifv"
    ARTICLE = "article"
    LINK = "link"
    POLL_RESULT = "poll_result"


class EmbedFooter(DiscordModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedImage(DiscordModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedThumbnail(DiscordModel):
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedVideo(DiscordModel):
    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedProvider(DiscordModel):
    name: str | None = None
    url: str | None = None


class EmbedAuthor(DiscordModel):
    name: str
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedField(DiscordModel):
    name: str
    value: str
    inline: bool | None = None


class Embed(DiscordModel):
    """
    A rich embed.

    Embeds received from the gateway carry a ``type``; embeds built for
    sending usually leave it unset, which the platform treats as rich.
    """

    title: str | None = None
    type: EmbedType | None = None
    description: str | None = None
    url: str | None = None
    timestamp: datetime | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedImage | None = None
    thumbnail: EmbedThumbnail | None = None
    video: EmbedVideo | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] = Field(default_factory=list)

    def add_field(self, name: str, value: str, inline: bool | None = None) -> Embed:
        self.fields.append(EmbedField(name=name, value=value, inline=inline))
        return self
