"""Shared pydantic base for every record."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

from discord_models.bitfield import Bitfield


class DiscordModel(BaseModel):
    """
    Base record.

    Unknown JSON fields are ignored. Flag masks keep bits without a named
    variant only when the record sets ``preserve_unknown_flag_bits``;
    otherwise they are dropped once the record is built.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    preserve_unknown_flag_bits: ClassVar[bool] = False

    @model_validator(mode="after")
    def _drop_unknown_flag_bits(self) -> DiscordModel:
        if self.preserve_unknown_flag_bits:
            return self
        for name in type(self).model_fields:
            value = getattr(self, name, None)
            if isinstance(value, Bitfield) and value.unknown_bits:
                value.drop_unknown()
        return self
