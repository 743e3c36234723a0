"""
Unit tests for LoaderManager routing.
"""

import pytest
from ragloader.config import Config, load_config
from ragloader.exceptions import UnsupportedContentTypeError
from ragloader.loader import ExtractionResult, HtmlLoader, LoaderManager
from ragloader.utils import content_digest


class PlainTextLoader:
    """Minimal loader used to check routing order."""

    identifier = "test.loader.text"

    def supports(self, mime: str) -> bool:
        return mime.startswith("text/")

    def load(self, buffer: bytes, url: str) -> ExtractionResult:
        text = buffer.decode("utf-8")
        return ExtractionResult(content=(text,), digest=content_digest([text]), partitions=(), warnings=None)


class TestLoaderManager:
    """Test cases for LoaderManager."""

    def test_from_config(self, config_file):
        manager = LoaderManager.from_config(load_config(config_file))

        assert list(manager.loaders) == ["rag.loader.html"]

    def test_from_default_config(self):
        manager = LoaderManager.from_config(Config())

        assert isinstance(manager.get_loader("text/html"), HtmlLoader)

    def test_routes_by_mime(self, html_loader, article_html):
        manager = LoaderManager([html_loader])

        result = manager.load(article_html, "https://docs.example.com/blog/post1", "text/html; charset=utf-8")

        assert result.content == ("Hello world",)

    def test_unsupported_mime_raises(self, html_loader):
        manager = LoaderManager([html_loader])

        with pytest.raises(UnsupportedContentTypeError) as exc_info:
            manager.load(b"%PDF-1.7", "https://docs.example.com/file.pdf", "application/pdf")

        assert exc_info.value.mime == "application/pdf"
        assert manager.get_loader("application/pdf") is None

    def test_first_registered_loader_wins(self, html_loader):
        text_loader = PlainTextLoader()
        manager = LoaderManager([html_loader, text_loader])

        assert manager.get_loader("text/html") is html_loader
        assert manager.get_loader("text/plain") is text_loader

    def test_register_rejects_non_loader(self, html_loader):
        manager = LoaderManager([html_loader])

        with pytest.raises(TypeError):
            manager.register(object())  # type: ignore[arg-type]

    def test_register_rejects_duplicate_identifier(self, html_loader, blog_options):
        manager = LoaderManager([html_loader])

        with pytest.raises(ValueError, match="rag.loader.html"):
            manager.register(HtmlLoader(blog_options))
