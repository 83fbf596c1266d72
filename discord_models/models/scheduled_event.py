"""Guild scheduled events and their recurrence rules."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from discord_models.models.base import DiscordModel
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class GuildScheduledEventPrivacyLevel(IntEnum):
    GUILD_ONLY = 2


class GuildScheduledEventStatus(IntEnum):
    SCHEDULED = 1
    ACTIVE = 2
    COMPLETED = 3
    CANCELED = 4


class GuildScheduledEventEntityType(IntEnum):
    STAGE_INSTANCE = 1
    VOICE = 2
    EXTERNAL = 3


class RecurrenceRuleFrequency(IntEnum):
    YEARLY = 0
    MONTHLY = 1
    WEEKLY = 2
    DAILY = 3


class RecurrenceRuleWeekday(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class RecurrenceRuleMonth(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class RecurrenceRuleNWeekday(DiscordModel):
    n: int
    day: RecurrenceRuleWeekday


class GuildScheduledEventRecurrenceRule(DiscordModel):
    """A subset of iCalendar RRULE, as the platform supports it."""

    start: datetime
    end: datetime | None = None
    frequency: RecurrenceRuleFrequency
    interval: int = 1
    by_weekday: list[RecurrenceRuleWeekday] | None = None
    by_n_weekday: list[RecurrenceRuleNWeekday] | None = None
    by_month: list[RecurrenceRuleMonth] | None = None
    by_month_day: list[int] | None = None
    by_year_day: list[int] | None = None
    count: int | None = None


class GuildScheduledEventMetadata(DiscordModel):
    location: str | None = None


class GuildScheduledEvent(DiscordModel):
    id: Snowflake
    guild_id: Snowflake
    channel_id: Snowflake | None = None
    creator_id: Snowflake | None = None
    name: str
    description: str | None = None
    scheduled_start_time: datetime
    scheduled_end_time: datetime | None = None
    privacy_level: GuildScheduledEventPrivacyLevel = GuildScheduledEventPrivacyLevel.GUILD_ONLY
    status: GuildScheduledEventStatus
    entity_type: GuildScheduledEventEntityType
    entity_id: Snowflake | None = None
    entity_metadata: GuildScheduledEventMetadata | None = None
    creator: User | None = None
    user_count: int | None = None
    image: str | None = None
    recurrence_rule: GuildScheduledEventRecurrenceRule | None = None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence_rule is not None
