"""
Exception hierarchy for ragloader.

No-match conditions are not errors: they are reported through the
``warnings`` field of an otherwise successful extraction result.
"""

from __future__ import annotations


class RagLoaderError(Exception):
    """Base class for all ragloader errors."""


class ConfigurationError(RagLoaderError):
    """Raised when loader configuration fails schema validation."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        message = super().__str__()
        if self.source:
            return f"{self.source}: {message}"
        return message


class HTMLParseError(RagLoaderError):
    """Raised when a buffer cannot be interpreted as HTML."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class SelectorSyntaxError(RagLoaderError):
    """Raised when a configured CSS selector cannot be compiled."""

    def __init__(self, selector: str, message: str) -> None:
        super().__init__(f"Invalid CSS selector {selector!r}: {message}")
        self.selector = selector


class UnsupportedContentTypeError(RagLoaderError):
    """Raised when no registered loader accepts a MIME type."""

    def __init__(self, mime: str) -> None:
        super().__init__(f"No loader supports content type {mime!r}")
        self.mime = mime
