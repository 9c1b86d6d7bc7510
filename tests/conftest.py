"""Pytest configuration and shared fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from mbox_reader.config import Settings

    return Settings(
        log_level="DEBUG",
        debug=True,
        preview_length=20,
    )


@pytest.fixture
def simple_archive() -> str:
    """Two plain-text messages forming one reply thread."""
    return (
        "From alice@example.com Mon Jan  1 10:00:00 2024\n"
        "From: Alice <alice@example.com>\n"
        "To: Bob <bob@example.com>\n"
        "Subject: Hello\n"
        "Date: Mon, 01 Jan 2024 10:00:00 +0000\n"
        "\n"
        "Hi Bob,\n"
        "how are you?\n"
        "From bob@example.com Mon Jan  1 12:00:00 2024\n"
        "From: Bob <bob@example.com>\n"
        "To: Alice <alice@example.com>\n"
        "Subject: Re: Hello\n"
        "Date: Mon, 01 Jan 2024 12:00:00 +0000\n"
        "\n"
        "Fine, thanks.\n"
    )


@pytest.fixture
def multipart_archive() -> str:
    """A multipart/mixed message with an alternative body and an attachment."""
    return (
        "From carol@example.com Tue Jan  2 09:00:00 2024\r\n"
        "From: =?UTF-8?Q?Carol_Caf=C3=A9?= <carol@example.com>\r\n"
        "To: dave@example.com, Erin <erin@example.com>\r\n"
        "Subject: =?UTF-8?B?UmVwb3J0?=\r\n"
        "Date: Tue, 02 Jan 2024 09:00:00 +0100\r\n"
        "MIME-Version: 1.0\r\n"
        "Content-Type: multipart/mixed;\r\n"
        ' boundary="outer"\r\n'
        "\r\n"
        "This is a multi-part message in MIME format.\r\n"
        "--outer\r\n"
        'Content-Type: multipart/alternative; boundary="inner"\r\n'
        "\r\n"
        "--inner\r\n"
        "Content-Type: text/plain; charset=utf-8\r\n"
        "Content-Transfer-Encoding: quoted-printable\r\n"
        "\r\n"
        "Report attached, caf=C3=A9 included.\r\n"
        "--inner\r\n"
        "Content-Type: text/html; charset=utf-8\r\n"
        "Content-Transfer-Encoding: base64\r\n"
        "\r\n"
        "PHA+UmVwb3J0IGF0dGFjaGVkPC9wPg==\r\n"
        "--inner--\r\n"
        "\r\n"
        "--outer\r\n"
        "Content-Type: text/plain; name=\"report.txt\"\r\n"
        "Content-Disposition: attachment; filename=\"report.txt\"\r\n"
        "Content-Transfer-Encoding: base64\r\n"
        "\r\n"
        "UXVhcnRlcmx5IG51bWJlcnM=\r\n"
        "--outer--\r\n"
    )
