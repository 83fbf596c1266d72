"""Message polls."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from discord_models.models.base import DiscordModel
from discord_models.models.emoji import Emoji


class PollLayoutType(IntEnum):
    DEFAULT = 1


class PollMedia(DiscordModel):
    text: str | None = None
    emoji: Emoji | None = None


class PollAnswer(DiscordModel):
    answer_id: int | None = None
    poll_media: PollMedia


class PollAnswerCount(DiscordModel):
    id: int
    count: int = 0
    me_voted: bool = False


class PollResults(DiscordModel):
    is_finalized: bool = False
    answer_counts: list[PollAnswerCount] = Field(default_factory=list)


class Poll(DiscordModel):
    """A poll as it appears on a received message."""

    question: PollMedia
    answers: list[PollAnswer] = Field(default_factory=list)
    expiry: datetime | None = None
    allow_multiselect: bool = False
    layout_type: PollLayoutType = PollLayoutType.DEFAULT
    results: PollResults | None = None

    def answer_count(self, answer_id: int) -> int:
        """Votes for one answer, or 0 when results are absent."""
        if self.results is None:
            return 0
        for counted in self.results.answer_counts:
            if counted.id == answer_id:
                return counted.count
        return 0


class PollCreate(DiscordModel):
    """Request body for creating a poll. ``duration`` is in hours."""

    question: PollMedia
    answers: list[PollAnswer] = Field(default_factory=list)
    duration: int | None = None
    allow_multiselect: bool | None = None
    layout_type: PollLayoutType | None = None
