"""Subject-based conversation threading and filtering."""

from .filters import conversations_between, filter_conversations, matches_search
from .grouper import build_conversation, collect_participants, group_conversations
from .subject import NO_SUBJECT, extract_address, normalize_subject

__all__ = [
    "NO_SUBJECT",
    "build_conversation",
    "collect_participants",
    "conversations_between",
    "extract_address",
    "filter_conversations",
    "group_conversations",
    "matches_search",
    "normalize_subject",
]
