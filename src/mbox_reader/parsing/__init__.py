"""MBOX archive parsing.

This package splits an archive into messages, parses each message's headers
and MIME body, and produces EmailRecord models.
"""

from .archive import Mailbox, parse_emails, parse_emails_async, parse_mailbox, parse_message
from .body import BodyParts, parse_multipart, parse_single_part
from .headers import MessageHeaders, parse_headers
from .splitter import split_messages

__all__ = [
    "BodyParts",
    "Mailbox",
    "MessageHeaders",
    "parse_emails",
    "parse_emails_async",
    "parse_headers",
    "parse_mailbox",
    "parse_message",
    "parse_multipart",
    "parse_single_part",
    "split_messages",
]
