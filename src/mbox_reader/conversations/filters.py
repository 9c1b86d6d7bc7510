"""Narrow a conversation list by participants, subject or free text.

All matching is case-insensitive substring matching and keeps input order.
"""

from __future__ import annotations

from mbox_reader.models import ConversationFilter, ConversationRecord


def _contains(haystack: str | None, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def _has_participant(conversation: ConversationRecord, needle: str) -> bool:
    return any(_contains(p, needle) for p in conversation.participants)


def matches_search(conversation: ConversationRecord, term: str) -> bool:
    """True if ``term`` occurs in the subject, a participant or any body text."""
    return (
        _contains(conversation.subject, term)
        or _has_participant(conversation, term)
        or any(_contains(em.body_text, term) for em in conversation.emails)
    )


def filter_conversations(
    conversations: list[ConversationRecord], filters: ConversationFilter
) -> list[ConversationRecord]:
    """Apply a ConversationFilter.

    A search term takes precedence: when set, the from/to/subject criteria
    are not applied.
    """
    if filters.search_term:
        return [c for c in conversations if matches_search(c, filters.search_term)]

    result = list(conversations)
    if filters.from_:
        result = [c for c in result if _has_participant(c, filters.from_)]
    if filters.to:
        result = [c for c in result if _has_participant(c, filters.to)]
    if filters.subject:
        result = [c for c in result if _contains(c.subject, filters.subject)]
    return result


def conversations_between(
    conversations: list[ConversationRecord],
    from_: str | None = None,
    to: str | None = None,
) -> list[ConversationRecord]:
    """Keep conversations involving both ``from_`` and ``to``.

    An empty side matches any participant. With both sides empty the list is
    returned unchanged.
    """
    if not from_ and not to:
        return conversations
    return [
        c
        for c in conversations
        if _has_participant(c, from_ or "") and _has_participant(c, to or "")
    ]
