"""Configuration models and loaders."""

from .config import (
    Config,
    DomainRuleSet,
    ExtractionRule,
    HtmlLoaderOptions,
    MonitoringConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "Config",
    "DomainRuleSet",
    "ExtractionRule",
    "HtmlLoaderOptions",
    "MonitoringConfig",
    "find_config_file",
    "load_config",
]
