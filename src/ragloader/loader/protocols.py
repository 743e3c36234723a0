"""
Protocols for pluggable document loaders.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import ExtractionResult


@runtime_checkable
class Loader(Protocol):
    """Turns a fetched document into indexable text segments."""

    identifier: str

    def load(self, buffer: bytes, url: str) -> ExtractionResult:
        """Extract content from a raw document.

        Args:
            buffer: Raw document bytes
            url: URL the document was fetched from

        Returns:
            ExtractionResult with extracted content
        """
        ...

    def supports(self, mime: str) -> bool:
        """Whether this loader handles documents of the given MIME type."""
        ...
