"""Application commands and their options.

A choice value is one of three shapes, discriminated on the wire by JSON kind
alone: a string, an integer, or a real number. In memory each shape is its
own small class so callers can ``match`` on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator

from discord_models.bitfield import Bitfield
from discord_models.constants import INT64_MAX, INT64_MIN
from discord_models.errors import MalformedChoiceError
from discord_models.models.base import DiscordModel
from discord_models.models.channel import ChannelType
from discord_models.models.enums import ApplicationIntegrationType, InteractionContextType
from discord_models.models.permissions import Permission
from discord_models.snowflake import Snowflake


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class IntegerValue:
    value: int


@dataclass(frozen=True, slots=True)
class NumberValue:
    value: float


ChoiceValue = StringValue | IntegerValue | NumberValue


def decode_choice_value(value: Any) -> ChoiceValue:
    """
    Classify a decoded JSON value as a choice value.

    Raises:
        MalformedChoiceError: For booleans, null, arrays, objects, and
            integers outside the signed 64-bit range
    """
    if isinstance(value, (StringValue, IntegerValue, NumberValue)):
        return value
    if isinstance(value, str):
        return StringValue(value)
    # bool is an int subclass; JSON true/false is not a number
    if isinstance(value, bool):
        raise MalformedChoiceError(value)
    if isinstance(value, int):
        if value < INT64_MIN or value > INT64_MAX:
            raise MalformedChoiceError(value)
        return IntegerValue(value)
    if isinstance(value, float):
        return NumberValue(value)
    raise MalformedChoiceError(value)


def encode_choice_value(choice: ChoiceValue) -> str | int | float:
    return choice.value


ChoiceValueField = Annotated[
    ChoiceValue,
    PlainValidator(decode_choice_value),
    PlainSerializer(encode_choice_value),
]


class ApplicationCommandType(IntEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3
    PRIMARY_ENTRY_POINT = 4


class ApplicationCommandOptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class EntryPointCommandHandlerType(IntEnum):
    APP_HANDLER = 1
    DISCORD_LAUNCH_ACTIVITY = 2


class ApplicationCommandOptionChoice(DiscordModel):
    """One predefined choice for a string, integer, or number option."""

    name: str
    name_localizations: dict[str, str] | None = None
    value: ChoiceValueField


class ApplicationCommandOption(DiscordModel):
    type: ApplicationCommandOptionType
    name: str
    name_localizations: dict[str, str] | None = None
    description: str
    description_localizations: dict[str, str] | None = None
    required: bool | None = None
    choices: list[ApplicationCommandOptionChoice] | None = None
    options: list[ApplicationCommandOption] | None = None
    channel_types: list[ChannelType] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool | None = None


class ApplicationCommand(DiscordModel):
    """A slash, user, message, or entry-point command."""

    id: Snowflake
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: Snowflake
    guild_id: Snowflake | None = None
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = ""
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: Bitfield[Permission] | None = None
    dm_permission: bool | None = None
    default_permission: bool | None = None
    nsfw: bool = False
    integration_types: list[ApplicationIntegrationType] | None = None
    contexts: list[InteractionContextType] | None = None
    version: Snowflake
    handler: EntryPointCommandHandlerType | None = None

    def find_option(self, name: str) -> ApplicationCommandOption | None:
        for option in self.options or []:
            if option.name == name:
                return option
        return None


ApplicationCommandOption.model_rebuild()
