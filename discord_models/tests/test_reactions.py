"""Tests for reaction bookkeeping on messages."""

from __future__ import annotations

import pytest
from pydantic_core import PydanticSerializationError

from discord_models.codec import decode, encode
from discord_models.errors import InvalidEmojiError
from discord_models.models.emoji import Emoji
from discord_models.models.message import Message, Reaction
from discord_models.tests.conftest import message_payload, reaction_payload

THUMBS_UP = "\N{THUMBS UP SIGN}"


@pytest.fixture
def message() -> Message:
    return decode(Message, message_payload())


def _reaction(count: int, **emoji) -> Reaction:
    return Reaction(emoji=Emoji(**emoji), count=count)


# ── identity ──────────────────────────────────────────────────────────────


class TestIdentity:
    def test_id_wins_over_name(self) -> None:
        assert Emoji(id="42", name=THUMBS_UP).identity == ("id", 42)

    def test_name_when_no_id(self) -> None:
        assert Emoji(name=THUMBS_UP).identity == ("name", THUMBS_UP)

    def test_neither_raises(self) -> None:
        emoji = Emoji()
        assert not emoji.has_identity
        with pytest.raises(InvalidEmojiError):
            emoji.identity

    def test_str(self) -> None:
        assert str(Emoji(name=THUMBS_UP)) == THUMBS_UP
        assert str(Emoji(id="42", name="blob", animated=True)) == "<a:blob:42>"


# ── upsert / find / erase ─────────────────────────────────────────────────


class TestUpsert:
    def test_same_name_replaces(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name=THUMBS_UP))
        message.upsert_reaction(_reaction(2, name=THUMBS_UP))
        assert len(message.reactions) == 1
        assert message.reactions[0].count == 2

    def test_id_makes_distinct_reaction(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name=THUMBS_UP))
        message.upsert_reaction(_reaction(2, name=THUMBS_UP))
        message.upsert_reaction(_reaction(5, id="42", name=THUMBS_UP))
        assert [r.count for r in message.reactions] == [2, 5]

    def test_custom_emoji_with_same_name_are_distinct(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, id="1", name="blob"))
        message.upsert_reaction(_reaction(1, id="2", name="blob"))
        assert len(message.reactions) == 2

    def test_stale_name_still_matches_by_id(self, message: Message) -> None:
        message.upsert_reaction(_reaction(3, id="42", name="old"))
        found = message.find_reaction(Emoji(id="42", name="new"))
        assert found is not None and found.count == 3

    def test_replace_keeps_position(self, message: Message) -> None:
        for name in "abc":
            message.upsert_reaction(_reaction(1, name=name))
        message.upsert_reaction(_reaction(9, name="b"))
        assert [(r.emoji.name, r.count) for r in message.reactions] == [
            ("a", 1),
            ("b", 9),
            ("c", 1),
        ]

    def test_find_returns_stored_reaction(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name="a"))
        message.find_reaction(Emoji(name="a")).count = 4
        assert message.reactions[0].count == 4

    def test_find_absent(self, message: Message) -> None:
        assert message.find_reaction(Emoji(name="a")) is None

    def test_invalid_query(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name="a"))
        with pytest.raises(InvalidEmojiError):
            message.find_reaction(Emoji())


class TestErase:
    def test_erase_preserves_order_of_others(self, message: Message) -> None:
        for name in "abcd":
            message.upsert_reaction(_reaction(1, name=name))
        message.erase_reaction(Emoji(name="b"))
        assert message.find_reaction(Emoji(name="b")) is None
        assert [r.emoji.name for r in message.reactions] == ["a", "c", "d"]

    def test_erase_absent_is_noop(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name="a"))
        message.erase_reaction(Emoji(id="7"))
        assert len(message.reactions) == 1

    def test_clear(self, message: Message) -> None:
        message.upsert_reaction(_reaction(1, name="a"))
        message.clear_reactions()
        assert message.reactions == []


# ── gateway events ────────────────────────────────────────────────────────


class TestRecordEvents:
    def test_add_creates_then_increments(self, message: Message) -> None:
        emoji = Emoji(name=THUMBS_UP)
        message.record_reaction_add(emoji, me=True)
        reaction = message.record_reaction_add(emoji)
        assert reaction.count == 2
        assert reaction.count_details.normal == 2
        assert reaction.me
        assert len(message.reactions) == 1

    def test_burst_add(self, message: Message) -> None:
        reaction = message.record_reaction_add(
            Emoji(id="42", name="blob"), burst=True, me=True, burst_colors=["#ff0000"]
        )
        assert reaction.count_details.burst == 1
        assert reaction.me_burst and not reaction.me
        assert reaction.burst_colors == ["#ff0000"]

    def test_remove_decrements(self, message: Message) -> None:
        emoji = Emoji(name="a")
        message.record_reaction_add(emoji, me=True)
        message.record_reaction_add(emoji)
        reaction = message.record_reaction_remove(emoji, me=True)
        assert reaction is not None
        assert reaction.count == 1
        assert reaction.count_details.normal == 1
        assert not reaction.me

    def test_remove_last_erases(self, message: Message) -> None:
        emoji = Emoji(name="a")
        message.record_reaction_add(emoji)
        assert message.record_reaction_remove(emoji) is None
        assert message.reactions == []

    def test_remove_untracked(self, message: Message) -> None:
        assert message.record_reaction_remove(Emoji(name="a")) is None


# ── JSON ──────────────────────────────────────────────────────────────────


class TestJson:
    def test_decode_reactions(self) -> None:
        payload = message_payload(
            reactions=[
                reaction_payload(3, name=THUMBS_UP),
                reaction_payload(1, id="42", name="blob"),
            ]
        )
        message = decode(Message, payload)
        assert message.find_reaction(Emoji(id="42")).count == 1
        assert message.find_reaction(Emoji(name=THUMBS_UP)).count == 3

    def test_encode_rejects_emoji_without_identity(self, message: Message) -> None:
        message.reactions.append(Reaction(emoji=Emoji(), count=1))
        with pytest.raises((PydanticSerializationError, InvalidEmojiError)):
            encode(message)
