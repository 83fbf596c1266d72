"""Stickers."""

from __future__ import annotations

from enum import IntEnum

from discord_models.models.base import DiscordModel
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class StickerType(IntEnum):
    STANDARD = 1
    GUILD = 2


class StickerFormatType(IntEnum):
    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4


class Sticker(DiscordModel):
    id: Snowflake
    pack_id: Snowflake | None = None
    name: str
    description: str | None = None
    tags: str = ""
    asset: str | None = None
    type: StickerType
    format_type: StickerFormatType
    available: bool | None = None
    guild_id: Snowflake | None = None
    user: User | None = None
    sort_value: int | None = None


class StickerItem(DiscordModel):
    """The minimal sticker shape sent on messages."""

    id: Snowflake
    name: str
    format_type: StickerFormatType
