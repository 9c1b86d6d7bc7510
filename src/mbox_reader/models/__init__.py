"""Data models for MBOX Reader.

This module contains Pydantic models for parsed emails and conversations.
"""

from mbox_reader.models.conversation import ConversationFilter, ConversationRecord
from mbox_reader.models.email_record import NO_CONTENT_PLACEHOLDER, Attachment, EmailRecord

__all__ = [
    "NO_CONTENT_PLACEHOLDER",
    "Attachment",
    "ConversationFilter",
    "ConversationRecord",
    "EmailRecord",
]
