"""
ragloader loaders - rule-driven HTML content extraction.

A loader turns a fetched document into text segments for indexing:

1. Rule matching: domain wildcard and path glob select CSS selectors for a URL
2. Parsing: BeautifulSoup builds the document tree once per document
3. Selection: each selector extracts the first or every matching element
4. Assembly: rendered text, an MD5 content digest and per-segment partitions
"""

from .html_loader import DEFAULT_SELECTOR_WARNING, HtmlLoader, failed_selectors_warning
from .manager import LoaderManager
from .matching import match_domain, match_path, resolve_selectors, url_path
from .models import (
    DEFAULT_RESOLVED_SELECTOR,
    DEFAULT_SELECTOR,
    ExtractedSegment,
    ExtractionResult,
    Partition,
    ResolvedSelector,
    SelectionResult,
    SourcePosition,
)
from .parser import TreeParser, source_position
from .protocols import Loader
from .selector import execute_selector, validate_selector
from .text import to_text

__all__ = [
    "DEFAULT_RESOLVED_SELECTOR",
    "DEFAULT_SELECTOR",
    "DEFAULT_SELECTOR_WARNING",
    "ExtractedSegment",
    "ExtractionResult",
    "HtmlLoader",
    "Loader",
    "LoaderManager",
    "Partition",
    "ResolvedSelector",
    "SelectionResult",
    "SourcePosition",
    "TreeParser",
    "execute_selector",
    "failed_selectors_warning",
    "match_domain",
    "match_path",
    "resolve_selectors",
    "source_position",
    "to_text",
    "url_path",
    "validate_selector",
]
