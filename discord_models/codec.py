"""JSON decode/encode for records, with path-annotated errors.

Decoding goes through pydantic. Library errors raised inside validators come
back wrapped in a ValidationError; the codec unwraps the first one and tags
it with the JSON path where it happened. Any other validation failure is a
shape error and becomes SchemaMismatchError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from discord_models.bitfield import LOSSY_CONTEXT_KEY
from discord_models.config import Config
from discord_models.errors import DiscordModelError, LossyFlagDecode, SchemaMismatchError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Payload = str | bytes | bytearray | Mapping[str, Any]


@dataclass
class Decoded(Generic[M]):
    """A decoded record plus the lossy-flag diagnostics collected on the way."""

    value: M
    warnings: list[LossyFlagDecode] = field(default_factory=list)

    @property
    def lossy(self) -> bool:
        return bool(self.warnings)


def json_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a JSON path, e.g. ``$.reactions[0].emoji``."""
    path = "$"
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def translate_validation_error(error: ValidationError) -> DiscordModelError:
    """Reduce a ValidationError to the first underlying error, annotated with its path."""
    first = error.errors()[0]
    path = json_path(first["loc"])

    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, DiscordModelError):
        cause.path = path
        return cause

    if first["type"] == "missing":
        return SchemaMismatchError(path, "a value", None)
    expected = first["msg"].removeprefix("Input should be ")
    return SchemaMismatchError(path, expected, first.get("input"))


class Codec:
    """Decodes payloads into records and encodes records back to JSON."""

    def __init__(self, config: Config | None = None):
        """
        Args:
            config: Supplies the level lossy flag decodes are logged at.
                Defaults to Config() without reading the environment.
        """
        self._config = config or Config()

    def decode_with_warnings(self, model: type[M], payload: Payload) -> Decoded[M]:
        """
        Decode ``payload`` as ``model`` and report flag masks with unknown bits.

        Args:
            model: Record class to decode into
            payload: JSON text (str or bytes) or an already-parsed mapping

        Returns:
            The record and the LossyFlagDecode diagnostics, in field order

        Raises:
            DiscordModelError: The first error found, with ``path`` set
        """
        context: dict[str, list[LossyFlagDecode]] = {LOSSY_CONTEXT_KEY: []}
        try:
            if isinstance(payload, (str, bytes, bytearray)):
                value = model.model_validate_json(payload, context=context)
            else:
                value = model.model_validate(payload, context=context)
        except ValidationError as e:
            raise translate_validation_error(e) from e

        warnings = context[LOSSY_CONTEXT_KEY]
        if warnings:
            logger.log(
                self._config.lossy_flag_log_levelno,
                "Lossy flag decode for %s: %s",
                model.__name__,
                "; ".join(str(warning) for warning in warnings),
            )
        return Decoded(value, warnings)

    def decode(self, model: type[M], payload: Payload) -> M:
        return self.decode_with_warnings(model, payload).value

    def encode(self, record: BaseModel, indent: int | None = None) -> str:
        """
        Encode a record as JSON. Absent optional fields are omitted.

        Raises:
            pydantic_core.PydanticSerializationError: If the record breaks an
                invariant, e.g. a reaction whose emoji has neither id nor name
        """
        return record.model_dump_json(exclude_none=True, indent=indent)

    def to_payload(self, record: BaseModel) -> dict[str, Any]:
        """Encode to JSON-compatible Python objects instead of text."""
        return record.model_dump(mode="json", exclude_none=True)


_default_codec = Codec()


def decode(model: type[M], payload: Payload) -> M:
    return _default_codec.decode(model, payload)


def decode_with_warnings(model: type[M], payload: Payload) -> Decoded[M]:
    return _default_codec.decode_with_warnings(model, payload)


def encode(record: BaseModel, indent: int | None = None) -> str:
    return _default_codec.encode(record, indent=indent)


def to_payload(record: BaseModel) -> dict[str, Any]:
    return _default_codec.to_payload(record)
