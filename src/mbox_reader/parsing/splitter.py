"""Split an MBOX archive into per-message blocks."""

from __future__ import annotations

import re

# A block is a "From " separator line plus every following line that does not
# itself start with "From ". Escaped ">From " body lines are left as they are.
_MESSAGE_BLOCK = re.compile(r"^From [^\n]*(?:\n(?!From )[^\n]*)*", re.MULTILINE)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and bare CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_messages(text: str | None) -> list[str]:
    """Split raw archive text into message blocks.

    Args:
        text: Entire MBOX archive contents.

    Returns:
        Message blocks in archive order, each starting with its ``From ``
        separator line. Text before the first separator is dropped and an
        archive without separators yields an empty list.
    """
    if not text:
        return []
    return _MESSAGE_BLOCK.findall(normalize_newlines(text))
