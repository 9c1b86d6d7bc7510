"""MIME decoding helpers."""

from .decoding import (
    decode_base64,
    decode_body,
    decode_header,
    decode_quoted_printable,
    strip_html,
)

__all__ = [
    "decode_base64",
    "decode_body",
    "decode_header",
    "decode_quoted_printable",
    "strip_html",
]
