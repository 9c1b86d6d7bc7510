"""Command-line interface for MBOX Reader.

This module provides the main entry point for the CLI application. It is the
only place that touches the file system: archives are read here and handed
to the parser as text.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel

from mbox_reader import __version__
from mbox_reader.config import Settings, get_settings
from mbox_reader.conversations import (
    conversations_between,
    filter_conversations,
    group_conversations,
)
from mbox_reader.exceptions import ArchiveReadError
from mbox_reader.models import ConversationFilter
from mbox_reader.parsing import parse_emails

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mbox-reader", description="MBOX Reader")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    emails_parser = subparsers.add_parser("emails", help="Parse an archive and print its emails")
    emails_parser.add_argument("path", type=Path, help="Path to the MBOX archive")
    emails_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of emails to output (default: all)",
    )
    emails_parser.add_argument(
        "--output",
        "-o",
        default="-",
        help="Where to write the JSON output (use '-' for stdout; default: %(default)s)",
    )

    conv_parser = subparsers.add_parser(
        "conversations", help="Parse an archive and print its conversations"
    )
    conv_parser.add_argument("path", type=Path, help="Path to the MBOX archive")
    conv_parser.add_argument("--search", default=None, help="Free-text search term")
    conv_parser.add_argument("--from", dest="from_", default=None, help="Participant filter")
    conv_parser.add_argument("--to", default=None, help="Participant filter")
    conv_parser.add_argument("--subject", default=None, help="Subject filter")
    conv_parser.add_argument(
        "--between",
        action="store_true",
        help="Only conversations involving both --from and --to",
    )
    conv_parser.add_argument(
        "--output",
        "-o",
        default="-",
        help="Where to write the JSON output (use '-' for stdout; default: %(default)s)",
    )

    stats_parser = subparsers.add_parser("stats", help="Show archive summary")
    stats_parser.add_argument("path", type=Path, help="Path to the MBOX archive")

    return parser


def _configure_logging(settings: Settings) -> None:
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Logs go to stderr so stdout stays clean for JSON output.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def read_archive(path: Path, settings: Settings) -> str:
    """Read an archive file as text.

    Raises:
        ArchiveReadError: If the file cannot be read or the configured
            encoding is unknown.
    """
    try:
        return path.read_text(encoding=settings.archive_encoding, errors=settings.archive_errors)
    except (OSError, LookupError) as exc:
        logger.error("archive_read_failed", path=str(path), error=str(exc))
        raise ArchiveReadError(f"Cannot read archive {path}: {exc}") from exc


def _write_json(models: Sequence[BaseModel], output: str, settings: Settings) -> None:
    payload = json.dumps(
        [m.model_dump(mode="json", by_alias=True) for m in models],
        indent=settings.json_indent,
        ensure_ascii=False,
    )
    if output == "-":
        sys.stdout.write(payload + "\n")
        sys.stdout.flush()
        return
    Path(output).write_text(payload + "\n", encoding="utf-8")
    logger.info("json_written", output=output, record_count=len(models))


def _cmd_emails(args: argparse.Namespace, settings: Settings) -> int:
    emails = parse_emails(read_archive(args.path, settings))
    if args.limit is not None:
        emails = emails[: args.limit]
    _write_json(emails, args.output, settings)
    return 0


def _cmd_conversations(args: argparse.Namespace, settings: Settings) -> int:
    emails = parse_emails(read_archive(args.path, settings))
    conversations = group_conversations(emails, preview_length=settings.preview_length)

    if args.between:
        conversations = conversations_between(conversations, args.from_, args.to)
    else:
        conversations = filter_conversations(
            conversations,
            ConversationFilter(
                from_=args.from_,
                to=args.to,
                subject=args.subject,
                search_term=args.search,
            ),
        )

    _write_json(conversations, args.output, settings)
    return 0


def _cmd_stats(args: argparse.Namespace, settings: Settings) -> int:
    emails = parse_emails(read_archive(args.path, settings))
    conversations = group_conversations(emails, preview_length=settings.preview_length)

    participants: dict[str, None] = {}
    for c in conversations:
        for p in c.participants:
            participants.setdefault(p, None)

    print(f"Messages: {len(emails)}")
    print(f"Conversations: {len(conversations)}")
    print(f"Attachments: {sum(len(e.attachments) for e in emails)}")
    print(f"Participants: {len(participants)}")
    if conversations:
        print(f"Latest conversation: {conversations[0].date} ({conversations[0].subject})")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the MBOX Reader CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()
    _configure_logging(settings)

    logger.info("mbox_reader_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        if parsed.command == "emails":
            return _cmd_emails(parsed, settings)
        if parsed.command == "conversations":
            return _cmd_conversations(parsed, settings)
        if parsed.command == "stats":
            return _cmd_stats(parsed, settings)
    except ArchiveReadError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
