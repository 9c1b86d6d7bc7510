"""Turn MBOX archive text into email records.

Parsing never aborts the archive: a message that fails to parse is replaced
by a placeholder record so output positions still match archive positions.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import structlog

from mbox_reader.conversations import group_conversations
from mbox_reader.mime import strip_html
from mbox_reader.models import (
    NO_CONTENT_PLACEHOLDER,
    ConversationRecord,
    EmailRecord,
)
from mbox_reader.parsing.body import BodyParts, parse_multipart, parse_single_part
from mbox_reader.parsing.headers import parse_headers
from mbox_reader.parsing.splitter import split_messages
from mbox_reader.utils import parse_date, utc_now_iso

logger = structlog.get_logger()


@dataclass(frozen=True)
class Mailbox:
    """Parsed emails together with their conversations."""

    emails: list[EmailRecord]
    conversations: list[ConversationRecord]


def _resolve_date(raw: str | None) -> str:
    if raw is None:
        return utc_now_iso()
    parsed = parse_date(raw)
    return parsed.isoformat() if parsed is not None else raw


def parse_message(block: str, index: int) -> EmailRecord:
    """Parse one message block into an EmailRecord.

    Args:
        block: Message text starting with its ``From `` separator line.
        index: Zero-based position of the message in the archive.

    Returns:
        EmailRecord: The parsed message. It always carries either body text
        or HTML; a fixed placeholder text is used when neither was found.
    """
    headers = parse_headers(block)
    body = headers.body()

    if body is None:
        logger.warning("message_body_missing", index=index)
        parts = BodyParts()
    elif headers.is_multipart:
        assert headers.boundary is not None
        parts = parse_multipart(body, headers.boundary)
    else:
        parts = parse_single_part(body, headers.content_type, headers.transfer_encoding)

    body_text = parts.body_text
    if not body_text and parts.body_html:
        body_text = strip_html(parts.body_html)
    if not body_text and not parts.body_html:
        if parts.errors:
            body_text = f"Error parsing multipart content: {parts.errors[0]}"
        else:
            body_text = NO_CONTENT_PLACEHOLDER

    fields: dict[str, object] = {}
    # Absent From/To headers keep the model defaults.
    if headers.from_ is not None:
        fields["from_"] = headers.from_
    if headers.to is not None:
        fields["to"] = headers.to

    record = EmailRecord(
        subject=headers.subject if headers.subject is not None else f"Email #{index + 1}",
        date=_resolve_date(headers.date),
        body_text=body_text,
        body_html=parts.body_html,
        attachments=list(parts.attachments),
        **fields,
    )

    logger.debug(
        "message_parsed",
        index=index,
        has_text=bool(record.body_text),
        has_html=bool(record.body_html),
        attachment_count=len(record.attachments),
    )
    return record


def _placeholder(index: int, error: Exception) -> EmailRecord:
    return EmailRecord(
        from_="Error parsing email",
        to="",
        subject=f"Message #{index + 1} (parsing failed)",
        date=utc_now_iso(),
        body_text=f"This email could not be parsed correctly: {error}",
        body_html="",
        attachments=[],
    )


def parse_emails(text: str | None) -> list[EmailRecord]:
    """Parse every message in an MBOX archive.

    Args:
        text: Entire archive contents.

    Returns:
        One EmailRecord per ``From `` block, in archive order.
    """
    blocks = split_messages(text)
    logger.info("mbox_messages_found", message_count=len(blocks))

    emails: list[EmailRecord] = []
    for index, block in enumerate(blocks):
        try:
            emails.append(parse_message(block, index))
        except Exception as exc:  # noqa: BLE001
            logger.exception("message_parse_failed", index=index, error=str(exc))
            emails.append(_placeholder(index, exc))
    return emails


async def parse_emails_async(text: str | None) -> list[EmailRecord]:
    """Run ``parse_emails`` in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(parse_emails, text)


def parse_mailbox(text: str | None, *, preview_length: int = 100) -> Mailbox:
    """Parse an archive and group its emails into conversations."""
    emails = parse_emails(text)
    return Mailbox(
        emails=emails,
        conversations=group_conversations(emails, preview_length=preview_length),
    )
