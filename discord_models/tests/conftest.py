"""Pytest fixtures and payload factories for discord_models tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

import pytest

from discord_models.config import Config

# Real identifier used throughout the platform's own documentation
DOC_SNOWFLAKE = "175928847299117063"


def user_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "80351110224678912",
        "username": "nelly",
        "discriminator": "0",
        "global_name": "Nelly",
        "avatar": "8342729096ea3675442027381ff50dfe",
        "public_flags": 64,
    }
    payload.update(overrides)
    return payload


def message_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "1100000000000000001",
        "channel_id": "1100000000000000002",
        "author": user_payload(),
        "content": "hello",
        "timestamp": "2024-05-01T12:00:00.000000+00:00",
        "edited_timestamp": None,
        "tts": False,
        "mention_everyone": False,
        "mentions": [],
        "mention_roles": [],
        "attachments": [],
        "embeds": [],
        "pinned": False,
        "type": 0,
    }
    payload.update(overrides)
    return payload


def channel_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "1100000000000000002",
        "type": 0,
        "guild_id": "1100000000000000003",
        "name": "general",
        "position": 0,
        "permission_overwrites": [],
        "nsfw": False,
    }
    payload.update(overrides)
    return payload


def guild_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": "1100000000000000003",
        "name": "Test Guild",
        "owner_id": "80351110224678912",
        "afk_timeout": 300,
        "verification_level": 1,
        "default_message_notifications": 0,
        "explicit_content_filter": 2,
        "roles": [
            {
                "id": "1100000000000000003",
                "name": "@everyone",
                "permissions": "1071698660929",
                "position": 0,
                "color": 0,
                "hoist": False,
                "managed": False,
                "mentionable": False,
            }
        ],
        "emojis": [],
        "features": ["COMMUNITY", "SOME_FUTURE_FEATURE"],
        "mfa_level": 0,
        "system_channel_flags": 0,
        "premium_tier": 1,
        "preferred_locale": "en-US",
        "nsfw_level": 0,
        "premium_progress_bar_enabled": False,
    }
    payload.update(overrides)
    return payload


def reaction_payload(count: int = 1, **emoji: Any) -> dict[str, Any]:
    return {
        "count": count,
        "count_details": {"burst": 0, "normal": count},
        "me": False,
        "me_burst": False,
        "emoji": emoji,
        "burst_colors": [],
    }


class FakeClock:
    """Manually advanced monotonic clock for typing-indicator tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> Config:
    return Config(log_level="DEBUG", lossy_flag_log_level="WARNING")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[pytest.MonkeyPatch]:
    """Run with no DISCORD_MODELS_* variables and an empty working directory."""
    for key in list(os.environ):
        if key.startswith("DISCORD_MODELS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield monkeypatch
    # load_dotenv writes straight to os.environ, behind monkeypatch's back
    for key in list(os.environ):
        if key.startswith("DISCORD_MODELS_"):
            os.environ.pop(key)
