"""Tests for snowflake identifiers."""

from __future__ import annotations

import random
from datetime import UTC, datetime

import pytest
from pydantic import BaseModel

from discord_models.constants import DISCORD_EPOCH_MS, SNOWFLAKE_MAX
from discord_models.errors import MalformedIdError
from discord_models.snowflake import Snowflake, SnowflakeParts, timestamp_of
from discord_models.tests.conftest import DOC_SNOWFLAKE


class _Holder(BaseModel):
    id: Snowflake
    parent_id: Snowflake | None = None


# ── parse / format ───────────────────────────────────────────────────────────


class TestParse:
    def test_documented_example(self) -> None:
        sf = Snowflake.parse(DOC_SNOWFLAKE)
        assert sf.timestamp_ms == 1462015105796
        assert sf.worker_id == 1
        assert sf.process_id == 0
        assert sf.increment == 7
        assert sf.format() == DOC_SNOWFLAKE
        assert str(sf) == DOC_SNOWFLAKE

    @pytest.mark.parametrize(
        "text",
        ["", "-1", "+1", " 1", "1 ", "12a", "1.0", "0x10", str(SNOWFLAKE_MAX + 1), "١٢"],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(MalformedIdError) as exc_info:
            Snowflake.parse(text)
        assert exc_info.value.text == text

    def test_accepts_bounds(self) -> None:
        assert Snowflake.parse("0") == 0
        assert Snowflake.parse(str(SNOWFLAKE_MAX)).raw == SNOWFLAKE_MAX

    def test_rejects_non_string(self) -> None:
        with pytest.raises(MalformedIdError):
            Snowflake.parse(123)  # type: ignore[arg-type]

    def test_parse_format_round_trip(self) -> None:
        rng = random.Random(1234)
        samples = [0, 1, SNOWFLAKE_MAX] + [rng.getrandbits(64) for _ in range(200)]
        for raw in samples:
            assert Snowflake.parse(Snowflake(raw).format()).raw == raw


class TestConstruct:
    @pytest.mark.parametrize("raw", [-1, SNOWFLAKE_MAX + 1])
    def test_out_of_range(self, raw: int) -> None:
        with pytest.raises(MalformedIdError):
            Snowflake(raw)

    def test_bool_rejected(self) -> None:
        with pytest.raises(MalformedIdError):
            Snowflake(True)

    def test_from_datetime_is_smallest_id_at_instant(self) -> None:
        sf = Snowflake.parse(DOC_SNOWFLAKE)
        lower = Snowflake.from_datetime(sf.created_at)
        assert lower.timestamp_ms == sf.timestamp_ms
        assert lower.worker_id == lower.process_id == lower.increment == 0
        assert lower <= sf

    def test_from_datetime_before_epoch(self) -> None:
        with pytest.raises(MalformedIdError):
            Snowflake.from_datetime(datetime(2000, 1, 1, tzinfo=UTC))


# ── derived view ─────────────────────────────────────────────────────────────


class TestDerived:
    def test_timestamp_formula(self) -> None:
        rng = random.Random(99)
        for _ in range(200):
            raw = rng.getrandbits(64)
            assert timestamp_of(Snowflake(raw)) == (raw >> 22) + DISCORD_EPOCH_MS

    def test_created_at_is_utc(self) -> None:
        created = Snowflake.parse(DOC_SNOWFLAKE).created_at
        assert created.tzinfo is UTC
        assert created == datetime(2016, 4, 30, 11, 18, 25, 796000, tzinfo=UTC)

    def test_parts(self) -> None:
        assert Snowflake.parse(DOC_SNOWFLAKE).parts() == SnowflakeParts(1462015105796, 1, 0, 7)

    def test_zero_has_no_parts(self) -> None:
        assert Snowflake(0).parts() is None


class TestEquality:
    def test_equal_by_raw(self) -> None:
        a = Snowflake.parse(DOC_SNOWFLAKE)
        b = Snowflake(int(DOC_SNOWFLAKE))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_compares_with_plain_int(self) -> None:
        assert Snowflake(42) == 42

    def test_repr(self) -> None:
        assert repr(Snowflake(42)) == "Snowflake(42)"


# ── JSON ─────────────────────────────────────────────────────────────────────


class TestJson:
    def test_decodes_string(self) -> None:
        holder = _Holder.model_validate_json(f'{{"id": "{DOC_SNOWFLAKE}"}}')
        assert isinstance(holder.id, Snowflake)
        assert holder.id.worker_id == 1

    def test_decodes_number_leniently_and_encodes_string(self) -> None:
        holder = _Holder.model_validate_json(f'{{"id": {DOC_SNOWFLAKE}}}')
        assert holder.model_dump_json(exclude_none=True) == f'{{"id":"{DOC_SNOWFLAKE}"}}'

    def test_null_optional_is_absent(self) -> None:
        holder = _Holder.model_validate_json('{"id": "1", "parent_id": null}')
        assert holder.parent_id is None

    def test_missing_optional_is_absent(self) -> None:
        assert _Holder.model_validate({"id": "1"}).parent_id is None

    def test_derived_fields_not_emitted(self) -> None:
        dumped = _Holder(id=Snowflake.parse(DOC_SNOWFLAKE)).model_dump(mode="json")
        assert dumped == {"id": DOC_SNOWFLAKE, "parent_id": None}

    @pytest.mark.parametrize("bad", ['"abc"', "true", "1.5", "[]", '"-5"'])
    def test_rejects_bad_values(self, bad: str) -> None:
        with pytest.raises(ValueError):
            _Holder.model_validate_json(f'{{"id": {bad}}}')
