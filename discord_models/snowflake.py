"""Snowflake identifiers: 64-bit ids with an embedded creation timestamp."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Any, NamedTuple

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from discord_models.constants import (
    DISCORD_EPOCH_MS,
    SNOWFLAKE_INCREMENT_MASK,
    SNOWFLAKE_MAX,
    SNOWFLAKE_PROCESS_MASK,
    SNOWFLAKE_PROCESS_SHIFT,
    SNOWFLAKE_TIMESTAMP_SHIFT,
    SNOWFLAKE_WORKER_MASK,
    SNOWFLAKE_WORKER_SHIFT,
)
from discord_models.errors import MalformedIdError

_DECIMAL = re.compile(r"[0-9]+")
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_EPOCH = _UNIX_EPOCH + timedelta(milliseconds=DISCORD_EPOCH_MS)


class SnowflakeParts(NamedTuple):
    """Decomposed view of a snowflake."""

    timestamp_ms: int
    worker_id: int
    process_id: int
    increment: int


class Snowflake(int):
    """
    Platform identifier.

    The raw 64-bit value is the only state; equality and hashing are plain
    integer equality. Derived fields are computed on access so bulk-decoded
    records stay small. On the wire a snowflake is a decimal string.
    """

    __slots__ = ()

    def __new__(cls, raw: int) -> Snowflake:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise MalformedIdError(raw)
        if raw < 0 or raw > SNOWFLAKE_MAX:
            raise MalformedIdError(raw)
        return super().__new__(cls, raw)

    @classmethod
    def parse(cls, text: str) -> Snowflake:
        """Parse a decimal string; anything else raises MalformedIdError."""
        if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
            raise MalformedIdError(text)
        value = int(text)
        if value > SNOWFLAKE_MAX:
            raise MalformedIdError(text)
        return cls(value)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Snowflake:
        """Smallest snowflake that could have been minted at ``dt``."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        ms = (dt - _EPOCH) // timedelta(milliseconds=1)
        if ms < 0:
            raise MalformedIdError(dt.isoformat())
        return cls(ms << SNOWFLAKE_TIMESTAMP_SHIFT)

    @property
    def raw(self) -> int:
        return int(self)

    @property
    def timestamp_ms(self) -> int:
        return (int(self) >> SNOWFLAKE_TIMESTAMP_SHIFT) + DISCORD_EPOCH_MS

    @property
    def created_at(self) -> datetime:
        return _UNIX_EPOCH + timedelta(milliseconds=self.timestamp_ms)

    @property
    def worker_id(self) -> int:
        return (int(self) >> SNOWFLAKE_WORKER_SHIFT) & SNOWFLAKE_WORKER_MASK

    @property
    def process_id(self) -> int:
        return (int(self) >> SNOWFLAKE_PROCESS_SHIFT) & SNOWFLAKE_PROCESS_MASK

    @property
    def increment(self) -> int:
        return int(self) & SNOWFLAKE_INCREMENT_MASK

    def parts(self) -> SnowflakeParts | None:
        """Derived view, or None for the zero id."""
        if not self:
            return None
        return SnowflakeParts(
            timestamp_ms=self.timestamp_ms,
            worker_id=self.worker_id,
            process_id=self.process_id,
            increment=self.increment,
        )

    def format(self) -> str:
        return int.__repr__(self)

    def __str__(self) -> str:
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"Snowflake({int.__repr__(self)})"

    @classmethod
    def _validate(cls, value: Any) -> Snowflake:
        if isinstance(value, Snowflake):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        # Numeric JSON literals are accepted leniently and re-encoded as strings
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise MalformedIdError(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[0-9]+$"}


def timestamp_of(snowflake: Snowflake) -> int:
    """Creation instant of a snowflake in milliseconds since the Unix epoch."""
    return snowflake.timestamp_ms
