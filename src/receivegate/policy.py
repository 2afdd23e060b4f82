"""File name policy: raw byte scan for the UTF-8 Latin lead byte."""

from __future__ import annotations

import re

# 0xC3 starts every two-byte UTF-8 sequence for U+00C0..U+00FF. With
# core.quotepath on git prints it as the octal escape \303.
DENIED_PATTERN = re.compile(rb"\\303|\xc3")


def _as_bytes(path: str | bytes) -> bytes:
    if isinstance(path, bytes):
        return path
    return path.encode("utf-8", errors="surrogateescape")


def is_disallowed(path: str | bytes) -> bool:
    """Substring match only; the path is never decoded or validated."""
    return DENIED_PATTERN.search(_as_bytes(path)) is not None
