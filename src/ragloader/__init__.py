"""
ragloader - Rule-driven HTML content extraction for retrieval pipelines.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config, ExtractionRule, HtmlLoaderOptions
from .exceptions import (
    ConfigurationError,
    HTMLParseError,
    RagLoaderError,
    SelectorSyntaxError,
    UnsupportedContentTypeError,
)
from .loader import ExtractionResult, HtmlLoader, LoaderManager

__all__ = [
    "__version__",
    "Config",
    "ConfigurationError",
    "ExtractionResult",
    "ExtractionRule",
    "HTMLParseError",
    "HtmlLoader",
    "HtmlLoaderOptions",
    "LoaderManager",
    "RagLoaderError",
    "SelectorSyntaxError",
    "UnsupportedContentTypeError",
]
