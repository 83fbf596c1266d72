"""Command line: decode a JSON payload as a record and re-encode it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic_core import PydanticSerializationError

from discord_models import models
from discord_models.codec import Codec
from discord_models.config import Config, setup_logging
from discord_models.errors import DiscordModelError
from discord_models.models.base import DiscordModel

logger = logging.getLogger(__name__)


def record_types() -> dict[str, type[DiscordModel]]:
    """Every exported record class, by name."""
    found = {}
    for name in models.__all__:
        obj = getattr(models, name)
        if isinstance(obj, type) and issubclass(obj, DiscordModel) and obj is not DiscordModel:
            found[name] = obj
    return found


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m discord_models",
        description="Decode a JSON payload as a record and print it re-encoded",
    )
    parser.add_argument("record", help="Record name, e.g. Message or Guild")
    parser.add_argument(
        "file", nargs="?", type=Path, default=None, help="JSON file to read (default: stdin)"
    )
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print with this indent")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.load()
    setup_logging(
        config.log_level,
        config.log_file,
        config.log_max_bytes,
        config.log_backup_count,
        stream=sys.stderr,
    )

    types = record_types()
    model = types.get(args.record)
    if model is None:
        parser.error(f"unknown record {args.record!r}")

    payload = args.file.read_bytes() if args.file else sys.stdin.buffer.read()
    codec = Codec(config)

    try:
        record = codec.decode(model, payload)
    except DiscordModelError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        print(codec.encode(record, indent=args.indent))
    except PydanticSerializationError as e:
        logger.error("Cannot encode %s: %s", args.record, e)
        return 1
    return 0
