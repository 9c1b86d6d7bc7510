"""Parsed email message model.

Field aliases follow the camelCase keys that presentation layers consume, so
``record.model_dump(by_alias=True)`` can be handed to a renderer as-is.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field

NO_CONTENT_PLACEHOLDER = "No readable content found in this email."


def _new_id() -> str:
    return str(uuid.uuid4())


class Attachment(BaseModel):
    """A single attachment extracted from a multipart body."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str = Field(description="Attachment filename")
    content_type: str = Field(
        default="application/octet-stream",
        alias="contentType",
        description="MIME type of the attachment part",
    )
    # Text-decoded payload; binary attachments do not survive byte-for-byte.
    content: str = Field(default="", description="Decoded attachment payload")


class EmailRecord(BaseModel):
    """One message parsed out of an MBOX archive."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=_new_id, description="Process-unique identifier")

    # Raw "Name <addr>" header values, decoded but not split into addresses.
    from_: str = Field(default="Unknown Sender", alias="from", description="From header")
    to: str = Field(default="Unknown Recipient", description="To header")

    subject: str = Field(default="", description="Decoded Subject header")
    date: str = Field(description="ISO-8601 timestamp, or the raw Date header if unparseable")

    body_text: str = Field(default="", alias="bodyText", description="Plain-text body")
    body_html: str = Field(default="", alias="bodyHtml", description="HTML body")
    attachments: list[Attachment] = Field(default_factory=list, description="Attachments")

    is_read: bool = Field(default=False, alias="isRead", description="Whether the email was read")
    is_starred: bool = Field(
        default=False, alias="isStarred", description="Whether the email is starred"
    )
