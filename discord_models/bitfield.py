"""Generic flag set over an IntFlag enumeration.

On the wire a flag set is one signed 64-bit integer. In memory it is a mask
with set-style accessors, so call sites deal in named variants rather than
bit arithmetic.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, ValidationInfo
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from discord_models.constants import INT64_MAX, INT64_MIN
from discord_models.errors import LossyFlagDecode

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=enum.IntFlag)

# Validation-context key under which decoders collect LossyFlagDecode records
LOSSY_CONTEXT_KEY = "lossy_flags"

_SIGNED_DECIMAL = re.compile(r"-?[0-9]+")
_UINT64_MASK = (1 << 64) - 1


def known_mask(flag_type: type[enum.IntFlag]) -> int:
    """Union of every named single-bit variant of ``flag_type``."""
    mask = 0
    for member in flag_type:
        mask |= member.value
    return mask


def _check_int64(mask: int) -> int:
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise ValueError(f"flag mask must be an integer, got {mask!r}")
    if mask < INT64_MIN or mask > INT64_MAX:
        raise ValueError(f"flag mask {mask} does not fit in a signed 64-bit integer")
    return mask


class Bitfield(Generic[F]):
    """
    Set of flag variants backed by an integer mask.

    Only named variants are members. Unknown bits seen while decoding are kept
    in ``unknown_bits`` so a record that opts in can write them back out; they
    never show up in iteration or membership tests.
    """

    __slots__ = ("_flag_type", "_mask", "_unknown")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, flag_type: type[F], flags: Iterable[F] = (), *, unknown_bits: int = 0):
        self._flag_type = flag_type
        self._mask = 0
        self._unknown = unknown_bits & _UINT64_MASK & ~known_mask(flag_type)
        for flag in flags:
            self.add(flag)

    # --- construction ---

    @classmethod
    def empty(cls, flag_type: type[F]) -> Bitfield[F]:
        return cls(flag_type)

    @classmethod
    def from_mask(
        cls, flag_type: type[F], mask: int, *, keep_unknown: bool = False
    ) -> tuple[Bitfield[F], bool]:
        """
        Decode an integer mask.

        Returns the flag set and whether the mask carried bits that have no
        named variant (a lossy decode). Those bits are discarded unless
        ``keep_unknown`` is set.
        """
        # Unsigned view so a set bit 63 is a bit, not a sign
        mask = _check_int64(mask) & _UINT64_MASK
        known = known_mask(flag_type)
        unknown = mask & ~known
        result = cls(flag_type, unknown_bits=unknown if keep_unknown else 0)
        result._mask = mask & known
        return result, unknown != 0

    # --- queries ---

    @property
    def flag_type(self) -> type[F]:
        return self._flag_type

    @property
    def unknown_bits(self) -> int:
        return self._unknown

    def to_mask(self) -> int:
        """Wire value: OR of contained variants plus any retained unknown bits."""
        mask = self._mask | self._unknown
        # Bit 63 set means the signed wire value is negative
        if mask > INT64_MAX:
            mask -= 1 << 64
        return mask

    def contains(self, flag: F) -> bool:
        return self._flag_type(flag).value & self._mask == self._flag_type(flag).value

    def __contains__(self, flag: object) -> bool:
        if not isinstance(flag, self._flag_type):
            return False
        return self.contains(flag)

    def __iter__(self) -> Iterator[F]:
        mask = self._mask
        while mask:
            bit = mask & -mask
            yield self._flag_type(bit)
            mask ^= bit

    def iter(self) -> Iterator[F]:
        return iter(self)

    def __len__(self) -> int:
        return self._mask.bit_count()

    def __bool__(self) -> bool:
        return bool(self._mask)

    # --- mutation ---

    def add(self, flag: F) -> None:
        self._mask |= self._flag_type(flag).value

    def remove(self, flag: F) -> None:
        self._mask &= ~self._flag_type(flag).value

    def drop_unknown(self) -> None:
        self._unknown = 0

    # --- set algebra ---

    def _check_same_type(self, other: Bitfield[Any]) -> None:
        if other._flag_type is not self._flag_type:
            raise TypeError(
                f"cannot combine Bitfield[{self._flag_type.__name__}] "
                f"with Bitfield[{other._flag_type.__name__}]"
            )

    def union(self, other: Bitfield[F]) -> Bitfield[F]:
        self._check_same_type(other)
        result = Bitfield(self._flag_type)
        result._mask = self._mask | other._mask
        return result

    def difference(self, other: Bitfield[F]) -> Bitfield[F]:
        self._check_same_type(other)
        result = Bitfield(self._flag_type)
        result._mask = self._mask & ~other._mask
        return result

    def __or__(self, other: Bitfield[F]) -> Bitfield[F]:
        return self.union(other)

    def __sub__(self, other: Bitfield[F]) -> Bitfield[F]:
        return self.difference(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitfield):
            return NotImplemented
        return (
            self._flag_type is other._flag_type
            and self._mask == other._mask
            and self._unknown == other._unknown
        )

    def copy(self) -> Bitfield[F]:
        result = Bitfield(self._flag_type, unknown_bits=self._unknown)
        result._mask = self._mask
        return result

    # --- rendering ---

    def to_string(self) -> str:
        """Variant names sorted alphabetically, joined by ``|``."""
        return "|".join(sorted(member.name or "" for member in self))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Bitfield[{self._flag_type.__name__}]({self.to_string() or '-'})"

    # --- pydantic integration ---

    @classmethod
    def _decode(cls, flag_type: type[F], value: Any, info: ValidationInfo) -> Bitfield[F]:
        if isinstance(value, Bitfield):
            if value.flag_type is not flag_type:
                raise ValueError(
                    f"expected Bitfield[{flag_type.__name__}], "
                    f"got Bitfield[{value.flag_type.__name__}]"
                )
            # Records may drop unknown bits in place; never touch the caller's set
            return value.copy()
        # Large masks (permissions) arrive as strings
        if isinstance(value, str):
            if not _SIGNED_DECIMAL.fullmatch(value):
                raise ValueError(f"flag mask must be an integer, got {value!r}")
            value = int(value)
        result, lossy = cls.from_mask(flag_type, _check_int64(value), keep_unknown=True)
        if lossy:
            logger.debug(
                "Unknown %s bits %#x in field %s", flag_type.__name__, result.unknown_bits,
                info.field_name,
            )
            if isinstance(info.context, dict):
                info.context.setdefault(LOSSY_CONTEXT_KEY, []).append(
                    LossyFlagDecode(
                        kind=flag_type.__name__,
                        unknown_bits=result.unknown_bits,
                        field=info.field_name,
                    )
                )
        return result

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        _handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        if not args:
            raise TypeError("Bitfield must be parametrised with a flag enum, e.g. Bitfield[UserFlag]")
        flag_type = args[0]

        def validate(value: Any, info: ValidationInfo) -> Bitfield[Any]:
            return cls._decode(flag_type, value, info)

        return core_schema.with_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda bitfield: bitfield.to_mask()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        _handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "integer"}
