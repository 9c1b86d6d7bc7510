"""Body extraction for single-part and (nested) multipart messages.

Multipart parsing threads an immutable ``BodyParts`` accumulator through the
recursion: each call receives the parts gathered so far and returns an
updated copy. Nested multiparts therefore feed the same accumulator as their
parent, and "first text/plain, first text/html" is decided in document order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

import structlog

from mbox_reader.mime import decode_body, strip_html
from mbox_reader.models import Attachment

logger = structlog.get_logger()

DEFAULT_PART_TYPE = "text/plain"
DEFAULT_PART_ENCODING = "quoted-printable"

_PART_SEPARATOR = re.compile(r"\n\n")
_PART_TYPE = re.compile(r"Content-Type:\s*([^;\r\n]+)", re.IGNORECASE)
_PART_BOUNDARY = re.compile(r'boundary="?([^";]+)"?', re.IGNORECASE)
_PART_ENCODING = re.compile(r"Content-Transfer-Encoding:\s*([^;\r\n]+)", re.IGNORECASE)
_PART_DISPOSITION = re.compile(r"Content-Disposition:\s*([^;\r\n]+)", re.IGNORECASE)
_PART_FILENAME = re.compile(r'filename="?([^"\r\n;]+)"?', re.IGNORECASE)


@dataclass(frozen=True)
class BodyParts:
    """Body text, HTML and attachments collected from a message."""

    body_text: str = ""
    body_html: str = ""
    attachments: tuple[Attachment, ...] = ()
    errors: tuple[str, ...] = ()

    def with_text(self, text: str) -> BodyParts:
        if self.body_text:
            return self
        return replace(self, body_text=text)

    def with_html(self, html: str) -> BodyParts:
        if self.body_html:
            return self
        return replace(self, body_html=html)

    def with_attachment(self, attachment: Attachment) -> BodyParts:
        return replace(self, attachments=self.attachments + (attachment,))

    def with_error(self, error: str) -> BodyParts:
        return replace(self, errors=self.errors + (error,))


def parse_single_part(body: str, content_type: str, encoding: str | None) -> BodyParts:
    """Decode a non-multipart body.

    HTML bodies fill both fields: the decoded HTML and a tag-stripped text
    rendition of it.
    """
    if "text/html" in content_type:
        html = decode_body(body, encoding)
        return BodyParts(body_text=strip_html(html), body_html=html)
    return BodyParts(body_text=decode_body(body, encoding))


def _boundary_pattern(boundary: str) -> re.Pattern[str]:
    return re.compile(rf"^--{re.escape(boundary)}(?:\n|\Z)", re.MULTILINE)


def _search(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1).strip() if match else None


def _parse_part(segment: str, boundary: str, parts: BodyParts) -> BodyParts:
    closing = f"--{boundary}--"
    if closing in segment:
        segment = segment.split(closing, 1)[0]

    if not segment.strip():
        return parts

    split = _PART_SEPARATOR.split(segment, maxsplit=1)
    if len(split) < 2:
        # No blank line between part headers and content.
        return parts
    headers, content = split
    if not content.strip():
        return parts

    part_type = (_search(_PART_TYPE, headers) or DEFAULT_PART_TYPE).lower()

    nested_boundary = _search(_PART_BOUNDARY, headers)
    if nested_boundary and "multipart/" in part_type:
        return parse_multipart(content, nested_boundary, parts)

    encoding = (_search(_PART_ENCODING, headers) or DEFAULT_PART_ENCODING).lower()
    disposition = (_search(_PART_DISPOSITION, headers) or "").lower()
    filename = _search(_PART_FILENAME, headers)

    decoded = decode_body(content, encoding)

    if "attachment" in disposition or filename:
        return parts.with_attachment(
            Attachment(
                filename=filename or f"attachment-{len(parts.attachments) + 1}",
                content_type=part_type,
                content=decoded,
            )
        )
    if "text/plain" in part_type:
        return parts.with_text(decoded)
    if "text/html" in part_type:
        return parts.with_html(decoded)
    return parts


def parse_multipart(body: str, boundary: str, parts: BodyParts | None = None) -> BodyParts:
    """Collect bodies and attachments from a multipart body.

    Args:
        body: Text following the headers of the multipart entity.
        boundary: The entity's boundary token (without leading dashes).
        parts: Parts gathered so far by an enclosing multipart, if any.

    Returns:
        BodyParts: ``parts`` extended with what this entity contributed.
        Segments without a header/content separator are skipped; a part
        that raises is logged and recorded in ``errors``.
    """
    if parts is None:
        parts = BodyParts()

    # The first segment is the preamble before the first boundary.
    segments = _boundary_pattern(boundary).split(body)[1:]
    for index, segment in enumerate(segments):
        try:
            parts = _parse_part(segment, boundary, parts)
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "multipart_part_failed",
                boundary=boundary,
                part_index=index,
                error=str(exc),
            )
            parts = parts.with_error(str(exc))
    return parts
