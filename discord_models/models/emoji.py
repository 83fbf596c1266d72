"""Emoji records and emoji identity."""

from __future__ import annotations

from enum import IntEnum

from discord_models.errors import InvalidEmojiError
from discord_models.models.base import DiscordModel
from discord_models.models.user import User
from discord_models.snowflake import Snowflake

EmojiIdentity = tuple[str, int | str]


class EmojiAnimationType(IntEnum):
    PREMIUM = 1
    BASIC = 2


class Emoji(DiscordModel):
    """Custom emoji (id set) or unicode emoji (name only)."""

    id: Snowflake | None = None
    name: str | None = None
    roles: list[Snowflake] | None = None
    user: User | None = None
    require_colons: bool | None = None
    managed: bool | None = None
    animated: bool | None = None
    available: bool | None = None

    @property
    def identity(self) -> EmojiIdentity:
        """
        Key used to tell reactions apart.

        The id wins when present: custom emoji names are advisory and may be
        stale, and two custom emoji can share a name.

        Raises:
            InvalidEmojiError: If neither id nor name is set
        """
        if self.id is not None:
            return ("id", int(self.id))
        if self.name is not None:
            return ("name", self.name)
        raise InvalidEmojiError()

    @property
    def has_identity(self) -> bool:
        return self.id is not None or self.name is not None

    def __str__(self) -> str:
        if self.id is None:
            return self.name or ""
        prefix = "a" if self.animated else ""
        return f"<{prefix}:{self.name or '_'}:{self.id}>"
