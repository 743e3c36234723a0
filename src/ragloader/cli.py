"""Command-line interface for ragloader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from ragloader import __version__
from ragloader.config import Config, load_config
from ragloader.exceptions import ConfigurationError, RagLoaderError
from ragloader.loader import DEFAULT_RESOLVED_SELECTOR, HtmlLoader, LoaderManager
from ragloader.observability import configure_logging

console = Console()
logger = structlog.get_logger(__name__)


def _load_config(ctx: click.Context) -> Config:
    """Load configuration once per invocation and configure logging from it."""
    if "config" not in ctx.obj:
        try:
            config = load_config(ctx.obj.get("config_path"))
        except (ConfigurationError, FileNotFoundError) as e:
            raise click.ClickException(str(e)) from e
        if ctx.obj.get("log_level"):
            config.monitoring.log_level = ctx.obj["log_level"]
        configure_logging(config.monitoring)
        ctx.obj["config"] = config
    return ctx.obj["config"]


def _build_loader(config: Config) -> HtmlLoader:
    try:
        return HtmlLoader(config.loader)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """ragloader - Rule-driven HTML content extraction."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--url", "-u", required=True, help="URL the document was fetched from")
@click.option("--mime", default="text/html", show_default=True, help="Content type of the document")
@click.pass_context
def extract(ctx: click.Context, file: Path, url: str, mime: str) -> None:
    """Extract content from a saved document and print it as JSON."""
    config = _load_config(ctx)
    try:
        manager = LoaderManager.from_config(config)
        with structlog.contextvars.bound_contextvars(document_url=url):
            result = manager.load(file.read_bytes(), url, mime)
    except RagLoaderError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Extracted document", file=str(file), url=url, segments=len(result.content))
    _echo_json(result.to_dict())


@cli.command()
@click.argument("url")
@click.pass_context
def resolve(ctx: click.Context, url: str) -> None:
    """Show which selectors apply to URL."""
    loader = _build_loader(_load_config(ctx))
    selectors = loader.resolve(url)
    is_default = not selectors
    if is_default:
        selectors = [DEFAULT_RESOLVED_SELECTOR]

    _echo_json(
        {
            "url": url,
            "default": is_default,
            "selectors": [{"selector": s.selector, "multiple": s.multiple} for s in selectors],
        }
    )


@cli.command("check-config")
@click.pass_context
def check_config(ctx: click.Context) -> None:
    """Validate the configuration and summarise its extraction rules."""
    config = _load_config(ctx)
    loader = _build_loader(config)
    rules = loader.options.content_extraction

    table = Table(title="Content extraction rules")
    table.add_column("Domain", style="cyan")
    table.add_column("Pattern")
    table.add_column("Selector", style="green")
    table.add_column("All", justify="center")
    for domain, domain_rules in rules.items():
        for rule in domain_rules:
            table.add_row(domain, rule.pattern, rule.content_selector, "yes" if rule.all else "no")

    console.print(table)
    parser_backend = loader.parser.features or "default"
    console.print(
        f"[green]Configuration valid:[/green] {len(rules)} domain(s), "
        f"{sum(len(r) for r in rules.values())} rule(s), parser '{parser_backend}'"
    )


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
