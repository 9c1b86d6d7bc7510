"""Group parsed emails into subject-based conversations."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from mbox_reader.conversations.subject import extract_address, normalize_subject
from mbox_reader.models import ConversationRecord, EmailRecord
from mbox_reader.utils import date_sort_key

logger = structlog.get_logger()


def collect_participants(emails: Iterable[EmailRecord]) -> list[str]:
    """Collect distinct sender and recipient addresses in encounter order.

    Args:
        emails: Emails of one conversation.

    Returns:
        Addresses deduplicated by exact (case-sensitive) string.
    """
    participants: dict[str, None] = {}
    for em in emails:
        sender = extract_address(em.from_)
        if sender:
            participants[sender] = None
        for recipient in (em.to or "").split(","):
            address = extract_address(recipient.strip())
            if address:
                participants[address] = None
    return list(participants)


def build_conversation(
    key: str, emails: list[EmailRecord], *, preview_length: int = 100
) -> ConversationRecord:
    """Build one conversation from the emails sharing a normalized subject."""
    ordered = sorted(emails, key=lambda em: date_sort_key(em.date))
    first, last = ordered[0], ordered[-1]
    return ConversationRecord(
        id=key,
        subject=first.subject,
        participants=collect_participants(ordered),
        emails=ordered,
        date=last.date,
        count=len(ordered),
        preview_text=(last.body_text or "")[:preview_length],
    )


def group_conversations(
    emails: Iterable[EmailRecord], *, preview_length: int = 100
) -> list[ConversationRecord]:
    """Group emails by normalized subject.

    Args:
        emails: Parsed emails in any order.
        preview_length: Characters of the latest body kept as preview text.

    Returns:
        Conversations, most recent first. Emails inside each conversation are
        oldest first.
    """
    groups: dict[str, list[EmailRecord]] = {}
    email_count = 0
    for em in emails:
        groups.setdefault(normalize_subject(em.subject), []).append(em)
        email_count += 1

    conversations = [
        build_conversation(key, members, preview_length=preview_length)
        for key, members in groups.items()
    ]
    conversations.sort(key=lambda c: date_sort_key(c.date), reverse=True)

    logger.info(
        "conversations_grouped",
        email_count=email_count,
        conversation_count=len(conversations),
    )
    return conversations
