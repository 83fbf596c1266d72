"""Developer teams that own applications."""

from __future__ import annotations

from enum import IntEnum

from pydantic import Field

from discord_models.models.base import DiscordModel
from discord_models.models.user import User
from discord_models.snowflake import Snowflake


class MembershipState(IntEnum):
    INVITED = 1
    ACCEPTED = 2


class TeamMember(DiscordModel):
    membership_state: MembershipState
    team_id: Snowflake
    user: User
    role: str


class Team(DiscordModel):
    id: Snowflake
    icon: str | None = None
    members: list[TeamMember] = Field(default_factory=list)
    name: str
    owner_user_id: Snowflake
