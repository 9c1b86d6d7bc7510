"""Parse the header section of a single MBOX message block."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mbox_reader.mime import decode_header

DEFAULT_CONTENT_TYPE = "text/plain"

_HEADER_LINE = re.compile(r"^([^:]+):\s*(.*)")
_LEADING_WHITESPACE = re.compile(r"^\s+")
_PRIMARY_TYPE = re.compile(r"^([^;]+)")
_BOUNDARY = re.compile(r'boundary="?([^";]+)"?', re.IGNORECASE)


@dataclass(frozen=True)
class MessageHeaders:
    """Header values of one message, plus where its body starts."""

    from_: str | None = None
    to: str | None = None
    subject: str | None = None
    date: str | None = None
    content_type: str = DEFAULT_CONTENT_TYPE
    boundary: str | None = None
    transfer_encoding: str | None = None
    # Index into ``lines`` of the first body line; None if headers never ended.
    body_start: int | None = None
    lines: list[str] = field(default_factory=list, repr=False)

    @property
    def is_multipart(self) -> bool:
        return "multipart/" in self.content_type and bool(self.boundary)

    def body(self) -> str | None:
        """Return the body text, or None when the message has no body section."""
        if self.body_start is None or self.body_start >= len(self.lines):
            return None
        return "\n".join(self.lines[self.body_start :])


def fold_header_lines(lines: list[str]) -> tuple[list[str], int | None]:
    """Collect header lines, joining folded continuations.

    Args:
        lines: Message lines, excluding the leading ``From `` separator.

    Returns:
        The unfolded header lines and the index (into ``lines``) of the
        blank line that ends them, or None if there is none.
    """
    headers: list[str] = []
    for i, line in enumerate(lines):
        if not line.strip():
            return headers, i
        if headers and _LEADING_WHITESPACE.match(line):
            headers[-1] = f"{headers[-1]} {line.strip()}"
        else:
            headers.append(line)
    return headers, None


def parse_headers(block: str) -> MessageHeaders:
    """Parse the headers of a message block.

    The first line (the MBOX separator) is skipped. Only From, To, Subject,
    Date, Content-Type and Content-Transfer-Encoding are kept; everything
    else is ignored.

    Args:
        block: One message block as produced by ``split_messages``.

    Returns:
        MessageHeaders: Decoded header values and body location.
    """
    lines = block.split("\n")
    header_lines, blank_index = fold_header_lines(lines[1:])

    values: dict[str, str | None] = {
        "from_": None,
        "to": None,
        "subject": None,
        "date": None,
        "boundary": None,
        "transfer_encoding": None,
    }
    content_type = DEFAULT_CONTENT_TYPE

    for line in header_lines:
        match = _HEADER_LINE.match(line)
        if not match:
            continue
        name = match.group(1).strip().lower()
        value = match.group(2).strip()

        if name == "from":
            values["from_"] = decode_header(value)
        elif name == "to":
            values["to"] = decode_header(value)
        elif name == "subject":
            values["subject"] = decode_header(value)
        elif name == "date":
            values["date"] = value
        elif name == "content-type":
            primary = _PRIMARY_TYPE.match(value)
            if primary:
                content_type = primary.group(1).strip().lower()
            boundary = _BOUNDARY.search(value)
            if boundary:
                values["boundary"] = boundary.group(1).strip()
        elif name == "content-transfer-encoding":
            values["transfer_encoding"] = value.strip().lower()

    # lines[0] is the separator, so the blank line sits at blank_index + 1.
    body_start = blank_index + 2 if blank_index is not None else None

    return MessageHeaders(
        content_type=content_type,
        body_start=body_start,
        lines=lines,
        **values,
    )
