"""
LoaderManager: routes documents to the loader that supports their MIME type.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import structlog

from ragloader.config.config import Config
from ragloader.exceptions import UnsupportedContentTypeError

from .html_loader import HtmlLoader
from .models import ExtractionResult
from .protocols import Loader

logger = structlog.get_logger(__name__)


class LoaderManager:
    """
    Dispatches documents to registered loaders.

    Loaders are consulted in registration order; the first whose
    ``supports`` accepts the MIME type handles the document.
    """

    def __init__(self, loaders: Sequence[Loader]) -> None:
        self._loaders: List[Loader] = []
        self.logger = logger.bind(component="LoaderManager")
        for loader in loaders:
            self.register(loader)

    @classmethod
    def from_config(cls, config: Config) -> LoaderManager:
        """Build a manager holding the HTML loader configured by ``config``."""
        return cls([HtmlLoader(config.loader)])

    def register(self, loader: Loader) -> None:
        """Append a loader to the routing order."""
        if not isinstance(loader, Loader):
            raise TypeError(f"{loader!r} does not implement the Loader protocol")
        if any(existing.identifier == loader.identifier for existing in self._loaders):
            raise ValueError(f"A loader with identifier '{loader.identifier}' is already registered")
        self._loaders.append(loader)
        self.logger.debug("Registered loader", identifier=loader.identifier)

    @property
    def loaders(self) -> Dict[str, Loader]:
        return {loader.identifier: loader for loader in self._loaders}

    def get_loader(self, mime: str) -> Optional[Loader]:
        """
        Find the loader for a MIME type.

        Args:
            mime: Content type of the document, parameters allowed

        Returns:
            The first supporting loader, or None
        """
        for loader in self._loaders:
            if loader.supports(mime):
                return loader
        return None

    def load(self, buffer: bytes, url: str, mime: str) -> ExtractionResult:
        """
        Extract a document with the loader supporting ``mime``.

        Raises:
            UnsupportedContentTypeError: If no registered loader accepts ``mime``
        """
        loader = self.get_loader(mime)
        if loader is None:
            self.logger.warning("No loader for content type", url=url, mime=mime)
            raise UnsupportedContentTypeError(mime)

        self.logger.debug("Routing document", url=url, mime=mime, loader=loader.identifier)
        return loader.load(buffer, url)
