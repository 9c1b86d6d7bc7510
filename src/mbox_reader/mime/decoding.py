"""Helpers for decoding MIME transfer encodings, encoded-word headers and HTML.

Every function here is lenient: malformed input degrades to the original
text instead of raising.
"""

from __future__ import annotations

import base64
import binascii
import re

import structlog

logger = structlog.get_logger()

_SOFT_LINE_BREAK = re.compile(r"=\r?\n")
_HEX_ESCAPE = re.compile(rb"=([0-9A-Fa-f]{2})")
_WHITESPACE = re.compile(r"\s+")

_ENCODED_WORD = re.compile(r"=\?([^?]+)\?([BQ])\?([^?]*)\?=", re.IGNORECASE)

_HTML_TAG = re.compile(r"<[^>]*>")
_NUMERIC_ENTITY = re.compile(r"&#(\d+);")
_NAMED_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


def _bytes_to_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def decode_quoted_printable(content: str) -> str:
    """Decode a quoted-printable body.

    Soft line breaks are removed first, then every ``=XX`` escape becomes the
    byte it names. The resulting bytes are read as UTF-8, or Latin-1 when
    they are not valid UTF-8.
    """
    if not content:
        return ""
    joined = _SOFT_LINE_BREAK.sub("", content)
    raw = _HEX_ESCAPE.sub(lambda m: bytes([int(m.group(1), 16)]), joined.encode("utf-8"))
    return _bytes_to_text(raw)


def decode_base64(content: str) -> str:
    """Decode a base64 body, returning ``content`` unchanged if it is not valid base64."""
    if not content:
        return ""
    cleaned = _WHITESPACE.sub("", content)
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("base64_decode_failed", error=str(exc), length=len(content))
        return content
    return _bytes_to_text(raw)


def decode_body(content: str | None, encoding: str | None) -> str:
    """Decode a body or part according to its Content-Transfer-Encoding.

    Args:
        content: Encoded text.
        encoding: Transfer encoding name (case-insensitive). Unknown or
            missing encodings pass the content through untouched.

    Returns:
        Decoded text.
    """
    if not content:
        return ""
    name = (encoding or "").strip().lower()
    if name == "base64":
        return decode_base64(content)
    if name == "quoted-printable":
        return decode_quoted_printable(content)
    return content


def _decode_encoded_word(match: re.Match[str]) -> str:
    charset, kind, text = match.group(1), match.group(2).upper(), match.group(3)
    try:
        if kind == "B":
            raw = base64.b64decode(text, validate=True)
        else:
            raw = _HEX_ESCAPE.sub(
                lambda m: bytes([int(m.group(1), 16)]),
                text.replace("_", " ").encode("utf-8"),
            )
        return raw.decode(charset.strip())
    except (binascii.Error, ValueError, LookupError) as exc:
        # UnicodeDecodeError is a ValueError.
        logger.debug("encoded_word_decode_failed", charset=charset, error=str(exc))
        return match.group(0)


def decode_header(value: str | None) -> str:
    """Decode RFC 2047 encoded words (``=?charset?B|Q?text?=``) in a header value.

    Tokens that fail to decode are left exactly as they appeared.
    """
    if not value:
        return ""
    return _ENCODED_WORD.sub(_decode_encoded_word, value)


def _numeric_entity(match: re.Match[str]) -> str:
    try:
        return chr(int(match.group(1)))
    except (ValueError, OverflowError):
        return match.group(0)


def strip_html(html: str | None) -> str:
    """Reduce HTML to plain text.

    Tags are dropped, a handful of common entities are unescaped and runs of
    whitespace collapse to a single space.
    """
    if not html:
        return ""
    text = _HTML_TAG.sub("", html)
    for entity, replacement in _NAMED_ENTITIES:
        text = text.replace(entity, replacement)
    text = _NUMERIC_ENTITY.sub(_numeric_entity, text)
    return _WHITESPACE.sub(" ", text).strip()


__all__ = [
    "decode_base64",
    "decode_body",
    "decode_header",
    "decode_quoted_printable",
    "strip_html",
]
