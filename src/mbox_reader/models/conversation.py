"""Conversation (subject thread) models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mbox_reader.models.email_record import EmailRecord


class ConversationRecord(BaseModel):
    """A group of emails sharing a normalized subject."""

    model_config = ConfigDict(populate_by_name=True)

    # The normalized subject doubles as the key; duplicate subjects across
    # unrelated archives collide.
    id: str = Field(description="Normalized subject")
    subject: str = Field(description="Subject of the earliest email")
    participants: list[str] = Field(
        default_factory=list, description="Distinct addresses in encounter order"
    )
    emails: list[EmailRecord] = Field(min_length=1, description="Emails, oldest first")
    date: str = Field(description="Date of the most recent email")
    count: int = Field(ge=1, description="Number of emails in the conversation")
    preview_text: str = Field(
        default="", alias="previewText", description="Start of the latest email body"
    )
    is_read: bool = Field(default=False, alias="isRead", description="Whether the thread was read")


class ConversationFilter(BaseModel):
    """Criteria used to narrow a conversation list."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str | None = Field(default=None, alias="from", description="Participant substring")
    to: str | None = Field(default=None, description="Participant substring")
    subject: str | None = Field(default=None, description="Subject substring")
    search_term: str | None = Field(
        default=None,
        alias="searchTerm",
        description="Free-text match on subject, participants and body text",
    )
