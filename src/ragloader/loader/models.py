"""
Data models for selector resolution and extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_SELECTOR = "body"


@dataclass(slots=True, frozen=True)
class ResolvedSelector:
    """A selector that applies to the current URL."""

    selector: str
    multiple: bool = False


DEFAULT_RESOLVED_SELECTOR = ResolvedSelector(selector=DEFAULT_SELECTOR, multiple=False)


@dataclass(slots=True, frozen=True)
class SourcePosition:
    """
    Where the parser recorded a start tag (1-based line, 0-based column).

    ``html5lib`` reports the column of the tag's closing ``>``, ``html.parser``
    that of its opening ``<``. BeautifulSoup tracks neither end positions
    nor character offsets, so only this point is available.
    """

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(slots=True, frozen=True)
class ExtractedSegment:
    """Plain text of one matched element."""

    content: str
    selector: str
    position: SourcePosition | None


@dataclass(slots=True, frozen=True)
class SelectionResult:
    """Outcome of running one selector against a tree."""

    segments: tuple[ExtractedSegment, ...] = ()
    matched: bool = False


@dataclass(slots=True, frozen=True)
class Partition:
    """Traceability record linking a content segment to its origin."""

    selector: str
    position: SourcePosition | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "selector": self.selector,
            "position": self.position.to_dict() if self.position else None,
        }


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Result of loading one HTML document."""

    content: tuple[str, ...]
    digest: str
    partitions: tuple[Partition, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate the result."""
        if len(self.content) != len(self.partitions):
            raise ValueError("content and partitions must have the same length")

    def to_dict(self) -> dict[str, Any]:
        """Render in the shape consumed by downstream indexing."""
        return {
            "content": list(self.content),
            "digest": self.digest,
            "metadata": {
                "partitions": [partition.to_dict() for partition in self.partitions],
                "warning": list(self.warnings) if self.warnings else None,
            },
        }
