"""Unit tests for data models."""

import pytest

from mbox_reader.models import (
    Attachment,
    ConversationRecord,
    EmailRecord,
)


class TestEmailRecord:
    """Test suite for EmailRecord model."""

    def test_email_record_creation(self) -> None:
        """Test creating an EmailRecord instance."""
        email = EmailRecord(
            from_="Sender <sender@example.com>",
            to="recipient@example.com",
            subject="Test Email",
            date="2024-01-01T00:00:00+00:00",
            body_text="This is a test email.",
            attachments=[Attachment(filename="a.txt", content_type="text/plain", content="x")],
        )

        assert email.from_ == "Sender <sender@example.com>"
        assert email.subject == "Test Email"
        assert len(email.attachments) == 1
        assert email.is_read is False
        assert email.is_starred is False

    def test_email_record_from_aliases(self) -> None:
        """Test populating an EmailRecord from camelCase keys."""
        email = EmailRecord.model_validate(
            {
                "from": "a@example.com",
                "date": "yesterday",
                "bodyHtml": "<p>x</p>",
                "attachments": [{"filename": "f.bin", "contentType": "application/pdf"}],
            }
        )

        assert email.from_ == "a@example.com"
        assert email.body_html == "<p>x</p>"
        assert email.attachments[0].content_type == "application/pdf"

    def test_ids_are_generated(self) -> None:
        """Test that every record gets a fresh identifier."""
        first = EmailRecord(date="d")
        second = EmailRecord(date="d")

        assert first.id
        assert first.id != second.id

    def test_flags_can_be_toggled(self) -> None:
        """Test that read/starred flags stay mutable for consumers."""
        email = EmailRecord(date="d")
        email.is_read = True
        email.is_starred = True

        assert email.model_dump(by_alias=True)["isRead"] is True
        assert email.model_dump(by_alias=True)["isStarred"] is True


class TestConversationRecord:
    """Test suite for ConversationRecord model."""

    def test_conversation_requires_emails(self) -> None:
        """Test that an empty conversation is rejected."""
        with pytest.raises(Exception):  # Pydantic ValidationError
            ConversationRecord(id="x", subject="x", emails=[], date="d", count=0)

    def test_conversation_dump_uses_aliases(self) -> None:
        """Test the serialized keys of a conversation."""
        email = EmailRecord(subject="Hi", date="d")
        conversation = ConversationRecord(
            id="Hi",
            subject="Hi",
            participants=["a@x"],
            emails=[email],
            date="d",
            count=1,
            preview_text="hello",
        )
        data = conversation.model_dump(by_alias=True)

        assert data["previewText"] == "hello"
        assert data["isRead"] is False
        assert data["emails"][0]["subject"] == "Hi"
