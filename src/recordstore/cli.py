from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .codec import dense
from .errors import RecordStoreError
from .store import ContentKind, RecordStore
from .store.provider import DEFAULT_MAX_CONTENT_LENGTH, storage_kind

logger = logging.getLogger(__name__)

_STORAGE_LABELS = {
    ContentKind.STANDARD: "inline (empty)",
    ContentKind.DENSE: "inline (dense)",
    ContentKind.OVERFLOW: "overflow (attachment)",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m recordstore",
        description="Store and retrieve binary records in a Discord channel.",
    )
    subparsers = parser.add_subparsers(
        dest="command", metavar="<command>", required=True
    )

    subparsers.add_parser("create", help="Create an empty record and print its id.")

    write_cmd = subparsers.add_parser("write", help="Write a file's bytes to a record.")
    write_cmd.add_argument("record_id", help="Target record id.")
    write_cmd.add_argument("source", help="File to upload, or '-' for stdin.")

    read_cmd = subparsers.add_parser("read", help="Read a record's bytes.")
    read_cmd.add_argument("record_id", help="Record id to read.")
    read_cmd.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Destination file (defaults to stdout).",
    )

    delete_cmd = subparsers.add_parser("delete", help="Delete a record and its overflow data.")
    delete_cmd.add_argument("record_id", help="Record id to delete.")

    info_cmd = subparsers.add_parser(
        "info", help="Report how a file would be stored without touching Discord."
    )
    info_cmd.add_argument("source", type=Path, help="File to inspect.")
    info_cmd.add_argument(
        "--max-content-length",
        type=int,
        default=DEFAULT_MAX_CONTENT_LENGTH,
        help="Message character limit (default: %(default)s).",
    )

    return parser


def describe_storage(size: int, max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> str:
    """Return a one-line summary of the representation a payload of ``size`` gets."""

    mode = _STORAGE_LABELS[storage_kind(size, max_content_length)]
    return f"{size} bytes -> {dense.encoded_size(size)} dense chars (limit {max_content_length}): {mode}"


def _read_source(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


async def _run_online(args: argparse.Namespace) -> int:
    from .clients.disc import connect_store
    from .config import Config

    async with connect_store(
        Config.core.DISCORD_API_TOKEN,
        Config.core.STORE_CHANNEL_ID,
        max_content_length=Config.store.MAX_CONTENT_LENGTH,
        max_attachment_bytes=Config.store.max_attachment_bytes,
        attachment_filename=Config.store.ATTACHMENT_FILENAME,
        download_timeout=Config.store.DOWNLOAD_TIMEOUT_S,
    ) as store:
        return await dispatch(store, args)


async def dispatch(store: RecordStore, args: argparse.Namespace) -> int:
    """Run an online subcommand against ``store`` and return the exit code."""

    if args.command == "create":
        print(await store.create())
        return 0

    if args.command == "write":
        data = _read_source(args.source)
        await store.write(args.record_id, data)
        logger.info("Wrote %d byte(s) to record %s", len(data), args.record_id)
        return 0

    if args.command == "read":
        data = await store.read(args.record_id)
        if args.output is None:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            args.output.write_bytes(data)
        return 0

    if args.command == "delete":
        result = await store.delete(args.record_id)
        print(result.value)
        return 0 if result else 1

    raise ValueError(f"unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "info":
        if not args.source.is_file():
            parser.error(f"File {args.source} does not exist.")
        print(describe_storage(args.source.stat().st_size, args.max_content_length))
        return 0

    try:
        return asyncio.run(_run_online(args))
    except RecordStoreError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


__all__ = ["build_parser", "describe_storage", "dispatch", "main"]
