"""Utility modules for ragloader."""

from .digest import SEGMENT_SEPARATOR, content_digest, md5

__all__ = ["SEGMENT_SEPARATOR", "content_digest", "md5"]
