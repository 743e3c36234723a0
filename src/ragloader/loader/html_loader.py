"""
Rule-driven HTML loader.

Resolves the extraction rules configured for a URL, parses the document once,
runs every resolved selector and assembles the extracted text, a content
digest and per-segment traceability metadata.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence

import structlog

from ragloader.config.config import HtmlLoaderOptions
from ragloader.exceptions import ConfigurationError, SelectorSyntaxError
from ragloader.utils.digest import content_digest

from .matching import resolve_selectors
from .models import (
    DEFAULT_RESOLVED_SELECTOR,
    DEFAULT_SELECTOR,
    ExtractedSegment,
    ExtractionResult,
    Partition,
    ResolvedSelector,
)
from .parser import TreeParser
from .selector import execute_selector, validate_selector

logger = structlog.get_logger(__name__)

DEFAULT_SELECTOR_WARNING = (
    f"No selector provided for this URL. the default selector `{DEFAULT_SELECTOR}` "
    "always contains redundancy content."
)


def failed_selectors_warning(failed: Sequence[str]) -> str:
    """Aggregate warning naming every selector that matched nothing."""
    return "Select element failed for selector(s): " + ", ".join(f"`{selector}`" for selector in failed)


class HtmlLoader:
    """
    Extracts indexable text from HTML documents using per-domain rules.

    Rules map a domain wildcard to ordered ``(pattern, content_selector, all)``
    entries. When no rule applies to a URL the whole ``body`` is extracted
    and a warning is attached to the result.
    """

    identifier = "rag.loader.html"
    display_name = "HTML loader"

    def __init__(self, options: HtmlLoaderOptions | Mapping[str, Any] | None = None) -> None:
        """
        Initialize the loader.

        Args:
            options: Validated options, or a raw mapping to validate

        Raises:
            ConfigurationError: If the rules, a selector or the parser options are invalid
        """
        if not isinstance(options, HtmlLoaderOptions):
            options = HtmlLoaderOptions.from_mapping(options)
        self.options = options
        self.parser = TreeParser(options.parser_kwargs())
        self.logger = logger.bind(component="HtmlLoader")

        self._validate_selectors()

    def _validate_selectors(self) -> None:
        """Reject configurations containing selectors that cannot compile."""
        for domain, rules in self.options.content_extraction.items():
            for rule in rules:
                try:
                    validate_selector(rule.content_selector)
                except SelectorSyntaxError as e:
                    raise ConfigurationError(f"Rule {rule.pattern!r} for domain {domain!r}: {e}") from e

    def supports(self, mime: str) -> bool:
        """Whether ``mime`` names an HTML-like content type."""
        return "html" in mime.lower()

    def resolve(self, url: str) -> List[ResolvedSelector]:
        """Selectors configured for ``url``, without the default fallback."""
        return resolve_selectors(url, self.options.content_extraction)

    def load(self, buffer: bytes, url: str) -> ExtractionResult:
        """
        Extract content from an HTML document.

        Args:
            buffer: Raw HTML bytes
            url: URL the document was fetched from

        Returns:
            ExtractionResult; selectors that matched nothing are reported in
            ``warnings`` rather than raised

        Raises:
            HTMLParseError: If the buffer cannot be parsed
        """
        log = self.logger.bind(url=url)
        warnings: List[str] = []

        selectors = self.resolve(url)
        if not selectors:
            selectors = [DEFAULT_RESOLVED_SELECTOR]
            warnings.append(DEFAULT_SELECTOR_WARNING)
            log.info("No extraction rule matched, using default selector", selector=DEFAULT_SELECTOR)

        tree = self.parser.parse(buffer, url=url)

        segments: List[ExtractedSegment] = []
        failed: List[str] = []
        for resolved in selectors:
            selection = execute_selector(tree, resolved.selector, resolved.multiple)
            if selection.matched:
                segments.extend(selection.segments)
            else:
                failed.append(resolved.selector)

        if failed:
            warnings.append(failed_selectors_warning(failed))
            log.info("Selectors matched no element", failed=failed)

        content = tuple(segment.content for segment in segments)
        result = ExtractionResult(
            content=content,
            digest=content_digest(content),
            partitions=tuple(Partition(selector=s.selector, position=s.position) for s in segments),
            warnings=tuple(warnings) if warnings else None,
        )

        log.debug(
            "Extraction completed",
            selectors=[s.selector for s in selectors],
            segments=len(content),
            text_length=sum(len(text) for text in content),
            digest=result.digest,
        )
        return result
