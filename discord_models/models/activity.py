"""Rich presence activities and embedded activity instances."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum
from typing import Any

from pydantic import Field, model_validator

from discord_models.bitfield import Bitfield
from discord_models.models.base import DiscordModel
from discord_models.snowflake import Snowflake


class ActivityType(IntEnum):
    PLAYING = 0
    STREAMING = 1
    LISTENING = 2
    WATCHING = 3
    CUSTOM = 4
    COMPETING = 5


class ActivityFlag(IntFlag):
    INSTANCE = 1 << 0
    JOIN = 1 << 1
    SPECTATE = 1 << 2
    JOIN_REQUEST = 1 << 3
    SYNC = 1 << 4
    PLAY = 1 << 5
    PARTY_PRIVACY_FRIENDS = 1 << 6
    PARTY_PRIVACY_VOICE_CHANNEL = 1 << 7
    EMBEDDED = 1 << 8


class ActivityTimestamps(DiscordModel):
    """Unix milliseconds."""

    start: int | None = None
    end: int | None = None


class ActivityEmoji(DiscordModel):
    name: str
    id: Snowflake | None = None
    animated: bool | None = None


class ActivityParty(DiscordModel):
    id: str | None = None
    size: list[int] | None = None  # [current, max]


class ActivityAssets(DiscordModel):
    large_image: str | None = None
    large_text: str | None = None
    small_image: str | None = None
    small_text: str | None = None


class ActivitySecrets(DiscordModel):
    join: str | None = None
    spectate: str | None = None
    match: str | None = None


class ActivityButton(DiscordModel):
    """
    A custom button on a rich presence.

    Bots send ``{label, url}``; when presences are received the platform
    sends only the label as a bare string, which decodes to a button with no
    url.
    """

    label: str
    url: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_label(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"label": data}
        return data


class Activity(DiscordModel):
    name: str
    type: ActivityType = ActivityType.PLAYING
    url: str | None = None
    created_at: int | None = None
    timestamps: ActivityTimestamps | None = None
    application_id: Snowflake | None = None
    details: str | None = None
    state: str | None = None
    emoji: ActivityEmoji | None = None
    party: ActivityParty | None = None
    assets: ActivityAssets | None = None
    secrets: ActivitySecrets | None = None
    instance: bool | None = None
    flags: Bitfield[ActivityFlag] | None = None
    buttons: list[ActivityButton] | None = None


class ActivityLocationKind(StrEnum):
    GUILD_CHANNEL = "gc"
    PRIVATE_CHANNEL = "pc"


class ActivityLocation(DiscordModel):
    id: str
    kind: ActivityLocationKind
    channel_id: Snowflake
    guild_id: Snowflake | None = None


class ActivityInstance(DiscordModel):
    """A running instance of an embedded activity."""

    application_id: Snowflake
    instance_id: str
    launch_id: Snowflake
    location: ActivityLocation
    users: list[Snowflake] = Field(default_factory=list)
