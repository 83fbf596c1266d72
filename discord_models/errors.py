"""Error types raised while decoding and manipulating records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class DiscordModelError(ValueError):
    """
    Base class for every error raised by the library.

    Subclasses ValueError so that pydantic wraps it inside a ValidationError
    when raised from a validator; the codec unwraps it again and attaches the
    JSON path where it happened.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {self.path})"
        return self.message


class MalformedIdError(DiscordModelError):
    """Identifier text is not a decimal non-negative 64-bit integer."""

    def __init__(self, text: Any, path: str | None = None):
        super().__init__(f"malformed snowflake: {text!r}", path)
        self.text = text


class MalformedChoiceError(DiscordModelError):
    """Option-choice value is not a string, integer or number."""

    def __init__(self, value: Any, path: str | None = None):
        super().__init__(f"malformed choice value: {value!r}", path)
        self.value = value


class UnknownMessageTypeError(DiscordModelError):
    """Integer message type outside the known table."""

    def __init__(self, value: int, path: str | None = None):
        super().__init__(f"unknown message type: {value}", path)
        self.value = value


class InvalidEmojiError(DiscordModelError):
    """Emoji has neither an id nor a name."""

    def __init__(self, path: str | None = None):
        super().__init__("emoji has neither id nor name", path)


class InvalidResponseError(DiscordModelError):
    """Interaction response builder rejected a value."""


class SchemaMismatchError(DiscordModelError):
    """JSON shape does not match the record schema."""

    def __init__(self, path: str, expected: str, got: Any):
        super().__init__(f"expected {expected}, got {got!r}", path)
        self.expected = expected
        self.got = got


@dataclass(frozen=True)
class LossyFlagDecode:
    """Diagnostic: a flag mask carried bits with no named variant."""

    kind: str  # Flag enum name, e.g. "MessageFlag"
    unknown_bits: int
    field: str | None = None  # Record field the mask was decoded for

    def __str__(self) -> str:
        where = f" in field {self.field!r}" if self.field else ""
        return f"{self.kind}{where}: unknown bits {self.unknown_bits:#x}"
