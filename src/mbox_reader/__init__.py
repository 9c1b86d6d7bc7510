"""MBOX Reader - lenient MBOX/MIME parsing and subject threading.

This package turns an in-memory MBOX archive into structured email records
and groups them into conversations by normalized subject.
"""

__version__ = "0.1.0"

from mbox_reader.config import Settings, get_settings
from mbox_reader.conversations import (
    conversations_between,
    filter_conversations,
    group_conversations,
    normalize_subject,
)
from mbox_reader.models import Attachment, ConversationFilter, ConversationRecord, EmailRecord
from mbox_reader.parsing import Mailbox, parse_emails, parse_emails_async, parse_mailbox

__all__ = [
    "Attachment",
    "ConversationFilter",
    "ConversationRecord",
    "EmailRecord",
    "Mailbox",
    "Settings",
    "__version__",
    "conversations_between",
    "filter_conversations",
    "get_settings",
    "group_conversations",
    "normalize_subject",
    "parse_emails",
    "parse_emails_async",
    "parse_mailbox",
]
