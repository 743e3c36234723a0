"""
Configuration management for ragloader using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ragloader.exceptions import ConfigurationError

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_PARSER_FEATURES = "html5lib"

# --- Extraction Rule Models ---


class ExtractionRule(BaseModel):
    """A single path rule within a domain: which selector extracts content."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    pattern: str = Field(min_length=1, description="Glob matched against the URL path.")
    content_selector: str = Field(
        alias="contentSelector",
        min_length=1,
        description="CSS selector locating the content element(s).",
    )
    all: bool = Field(default=False, description="Extract every match instead of the first one.")

    @field_validator("pattern", "content_selector")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


DomainRuleSet = Dict[str, List[ExtractionRule]]


class HtmlLoaderOptions(BaseModel):
    """Options for the HTML loader.

    ``parser`` is forwarded verbatim to ``BeautifulSoup`` and
    ``content_extraction`` maps domain wildcards to ordered extraction rules.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    parser: Dict[str, Any] = Field(
        default_factory=dict,
        alias="rehypeParse",
        description="Passthrough keyword arguments for the HTML tree parser.",
    )
    content_extraction: DomainRuleSet = Field(
        default_factory=dict,
        alias="contentExtraction",
        description="Domain wildcard -> ordered extraction rules.",
    )

    @field_validator("content_extraction")
    @classmethod
    def validate_domains(cls, v: DomainRuleSet) -> DomainRuleSet:
        for domain in v:
            if not domain.strip():
                raise ValueError("domain pattern must not be blank")
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None, *, source: str | None = None) -> HtmlLoaderOptions:
        """Validate a plain mapping, raising ConfigurationError on failure."""
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid loader configuration: {e}", source=source) from e

    def parser_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for BeautifulSoup, with the default parser backend filled in."""
        kwargs = dict(self.parser)
        kwargs.setdefault("features", DEFAULT_PARSER_FEATURES)
        return kwargs


# --- Ambient Configuration Models ---


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to console.",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "ragloader"
    loader: HtmlLoaderOptions = Field(default_factory=HtmlLoaderOptions)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="RAGLOADER_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            try:
                yaml_data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML: {e}", source=str(path)) from e
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        if not isinstance(yaml_data, dict):
            raise ConfigurationError("Top-level YAML value must be a mapping", source=str(path))
        try:
            return cls.model_validate(yaml_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", source=str(path)) from e


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "ragloader.yaml",
        current_dir / "ragloader.yml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path

    example_path = current_dir / "config.example.yaml"
    if example_path.exists():
        return example_path

    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path``, a discovered file, or defaults.

    Unlike a lazy fallback, validation failures propagate: extraction must
    never run with an invalid rule set.
    """
    config_path = path or find_config_file()
    if config_path is None:
        log.info("No config file found. Using default settings.")
        return Config()
    log.info("Loading configuration from: %s", config_path)
    return Config.from_yaml(config_path)
