"""Base64 encoding with optional line wrapping."""

from __future__ import annotations

import base64

DEFAULT_LINE_LENGTH = 76


def encode(data: str | bytes, max_line_length: int) -> str:
    """Encode data as base64, breaking lines after ``max_line_length`` characters.

    Input ends at the first NUL byte. A negative line length disables
    wrapping; a line length of zero puts a single newline before the output.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    raw = raw.split(b"\0", 1)[0]
    encoded = base64.b64encode(raw).decode("ascii")
    if not encoded or max_line_length < 0:
        return encoded
    if max_line_length == 0:
        return "\n" + encoded
    return "\n".join(
        encoded[start : start + max_line_length]
        for start in range(0, len(encoded), max_line_length)
    )


def encode_with_default_new_lines(data: str | bytes) -> str:
    """Encode data as base64 with lines of the default length."""
    return encode(data, DEFAULT_LINE_LENGTH)


def encode_no_new_lines(data: str | bytes) -> str:
    """Encode data as base64 on a single line."""
    return encode(data, -1)