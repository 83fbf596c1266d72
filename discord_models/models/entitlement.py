"""Entitlements (premium offerings a user or guild has access to)."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import IntEnum

from discord_models.models.base import DiscordModel
from discord_models.snowflake import Snowflake


class EntitlementType(IntEnum):
    PURCHASE = 1
    PREMIUM_SUBSCRIPTION = 2
    DEVELOPER_GIFT = 3
    TEST_MODE_PURCHASE = 4
    FREE_PURCHASE = 5
    USER_GIFT = 6
    PREMIUM_PURCHASE = 7
    APPLICATION_SUBSCRIPTION = 8


class Entitlement(DiscordModel):
    id: Snowflake
    sku_id: Snowflake
    application_id: Snowflake
    user_id: Snowflake | None = None
    type: EntitlementType
    deleted: bool = False
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    guild_id: Snowflake | None = None
    consumed: bool | None = None

    def is_active(self, now: datetime | None = None) -> bool:
        """Not deleted and, when bounded, inside its validity window."""
        if self.deleted:
            return False
        now = now or datetime.now(UTC)
        if self.starts_at is not None and now < self.starts_at:
            return False
        return self.ends_at is None or now < self.ends_at
