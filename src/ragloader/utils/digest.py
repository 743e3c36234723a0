"""
Content digests used as document identity keys.
"""

from __future__ import annotations

import hashlib
from typing import Iterable

# Block boundaries render as at most two newlines, so ordinary extracted text
# does not contain this separator.
SEGMENT_SEPARATOR = "\n\n\n\n"


def md5(text: str) -> str:
    """Lowercase hex MD5 of ``text`` encoded as UTF-8."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def content_digest(segments: Iterable[str]) -> str:
    """Digest of an ordered sequence of text segments."""
    return md5(SEGMENT_SEPARATOR.join(segments))
