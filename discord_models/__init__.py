"""Typed domain model for the Discord API: records, identifiers, and flag sets."""

from discord_models.bitfield import Bitfield
from discord_models.codec import Codec, Decoded, decode, decode_with_warnings, encode, to_payload
from discord_models.config import Config, setup_logging
from discord_models.constants import DISCORD_EPOCH_MS, TYPING_TTL
from discord_models.errors import (
    DiscordModelError,
    InvalidEmojiError,
    InvalidResponseError,
    LossyFlagDecode,
    MalformedChoiceError,
    MalformedIdError,
    SchemaMismatchError,
    UnknownMessageTypeError,
)
from discord_models.rwlock import ReadWriteLock
from discord_models.snowflake import Snowflake, SnowflakeParts, timestamp_of
from discord_models.typing_indicator import TypingIndicator

__all__ = [
    "DISCORD_EPOCH_MS",
    "TYPING_TTL",
    "Bitfield",
    "Codec",
    "Config",
    "Decoded",
    "DiscordModelError",
    "InvalidEmojiError",
    "InvalidResponseError",
    "LossyFlagDecode",
    "MalformedChoiceError",
    "MalformedIdError",
    "ReadWriteLock",
    "SchemaMismatchError",
    "Snowflake",
    "SnowflakeParts",
    "TypingIndicator",
    "UnknownMessageTypeError",
    "decode",
    "decode_with_warnings",
    "encode",
    "setup_logging",
    "timestamp_of",
    "to_payload",
]
