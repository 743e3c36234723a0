"""
Shared test configuration for ragloader.

Provides sample documents, rule configurations and loader fixtures used
across unit and integration tests.
"""

# Standard library imports
from pathlib import Path
from typing import Any, Dict

# Third-party imports
import pytest
import yaml

# Local imports
from ragloader.config import HtmlLoaderOptions
from ragloader.loader import HtmlLoader

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Sample Documents
# ============================================================================


@pytest.fixture
def sample_html() -> bytes:
    """A blog page with navigation, scripts and several sections."""
    return b"""<!DOCTYPE html>
<html>
<head>
    <title>Test Article</title>
    <style>body { color: red; }</style>
    <script>var tracking = "should not appear";</script>
</head>
<body>
    <nav><a href="/">Home</a> <a href="/blog/">Blog</a></nav>
    <article>
        <h1>Test Article Title</h1>
        <p>This is a sample paragraph with <strong>bold text</strong>.</p>
        <script>console.log("inline script");</script>
        <section class="chapter">First chapter</section>
        <section class="chapter">Second chapter</section>
        <section class="chapter">Third chapter</section>
    </article>
    <footer>Copyright Example</footer>
</body>
</html>
"""


@pytest.fixture
def article_html() -> bytes:
    return b"<html><body><article>Hello world</article></body></html>"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def blog_rules() -> Dict[str, Any]:
    """Rules for the documented blog scenario."""
    return {
        "contentExtraction": {
            "*.example.com": [
                {"pattern": "/blog/*", "contentSelector": "article", "all": False},
            ]
        }
    }


@pytest.fixture
def blog_options(blog_rules: Dict[str, Any]) -> HtmlLoaderOptions:
    return HtmlLoaderOptions.model_validate(blog_rules)


@pytest.fixture
def html_loader(blog_options: HtmlLoaderOptions) -> HtmlLoader:
    return HtmlLoader(blog_options)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A YAML configuration file with two domains."""
    path = tmp_path / "ragloader.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "loader": {
                    "parser": {"features": "html.parser"},
                    "content_extraction": {
                        "*.example.com": [
                            {"pattern": "/blog/*", "contentSelector": "article"},
                            {"pattern": "/blog/**", "contentSelector": "section.chapter", "all": True},
                        ],
                        "docs.example.org": [
                            {"pattern": "/guide/**", "contentSelector": "main"},
                        ],
                    },
                },
                "monitoring": {"log_level": "WARNING"},
            },
            sort_keys=False,
        ),
        encoding="utf-8",
    )
    return path
