"""
BeautifulSoup-backed HTML tree parser.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

import structlog
from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.element import Tag

from ragloader.exceptions import ConfigurationError, HTMLParseError

from .models import SourcePosition

logger = structlog.get_logger(__name__)

_ENCODING_OPTIONS = frozenset({"from_encoding", "exclude_encodings"})


class TreeParser:
    """
    Parses raw HTML bytes into a queryable tree.

    The parser options are frozen at construction; one instance can be
    shared read-only by every extraction that uses the same configuration.
    """

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        """
        Initialize the parser.

        Args:
            options: Keyword arguments forwarded to ``BeautifulSoup``
                (``features``, ``from_encoding``, ``exclude_encodings``, ...)

        Raises:
            ConfigurationError: If the options name an unavailable parser
                backend or an unknown keyword
        """
        self.options: Mapping[str, Any] = MappingProxyType(dict(options or {}))
        # Text markup skips encoding detection; encoding options only apply to bytes
        check = {k: v for k, v in self.options.items() if k not in _ENCODING_OPTIONS}
        try:
            BeautifulSoup("", **check)
        except FeatureNotFound as e:
            raise ConfigurationError(f"HTML parser backend is not available: {e}") from e
        except TypeError as e:
            raise ConfigurationError(f"Invalid HTML parser option: {e}") from e

    @property
    def features(self) -> str | None:
        return self.options.get("features")

    def parse(self, buffer: bytes | str, *, url: str | None = None) -> BeautifulSoup:
        """
        Parse a document.

        Args:
            buffer: Raw HTML; bytes are decoded by BeautifulSoup's encoding detection
            url: Source URL, used only for error context

        Returns:
            The parsed document tree

        Raises:
            HTMLParseError: If the parser rejects the markup
        """
        if isinstance(buffer, (bytearray, memoryview)):
            buffer = bytes(buffer)
        try:
            return BeautifulSoup(buffer, **self.options)
        except ParserRejectedMarkup as e:
            logger.warning("Parser rejected markup", url=url, features=self.features, error=str(e))
            raise HTMLParseError(f"Unable to parse document as HTML: {e}", url=url) from e
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning("Unable to decode document", url=url, error=str(e))
            raise HTMLParseError(f"Unable to decode document: {e}", url=url) from e


def source_position(element: Tag) -> SourcePosition | None:
    """Where ``element`` starts in the source, when the parser backend tracked it."""
    line = getattr(element, "sourceline", None)
    column = getattr(element, "sourcepos", None)
    if line is None or column is None:
        return None
    return SourcePosition(line=line, column=column)
