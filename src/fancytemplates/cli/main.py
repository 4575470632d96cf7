#!/usr/bin/env python3
"""
FancyTemplates CLI Main Application

Typer-based command-line interface for inspecting and rendering templates
from a template directory.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from fancytemplates.cli import __version__
from fancytemplates.cli.error_handling import handle_error
from fancytemplates.core.cache import TemplateCache
from fancytemplates.core.config import ConfigManager
from fancytemplates.core.content_types import parse_content_type
from fancytemplates.core.exceptions import FancyTemplatesError, template_read_failed
from fancytemplates.core.models import DEFAULT_THEME_NAME
from fancytemplates.provider import FileTemplateProvider, create_provider

console = Console()

app = typer.Typer(
    name="fancytemplates",
    help="Localized, themeable message templates",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Manage configuration files", no_args_is_help=True)
app.add_typer(config_app, name="config")


def version_callback(value: bool):
    """Show version information."""
    if value:
        console.print(f"[bold cyan]FancyTemplates[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    FancyTemplates - resolve, theme, and render message templates.

    [bold]Quick Start:[/bold]

    • List templates: [cyan]fancytemplates list --path ./templates[/cyan]
    • Show a template: [cyan]fancytemplates show welcome --path ./templates[/cyan]
    • Render a message: [cyan]fancytemplates render welcome -t NAME=Bob --path ./templates[/cyan]
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _load_provider(path: Optional[Path], config_file: Optional[Path]) -> FileTemplateProvider:
    """Build a provider with its own cache so each command reads the given path."""
    try:
        return create_provider(
            template_path=path,
            config_file=config_file,
            cache=TemplateCache()
        )
    except FancyTemplatesError as e:
        handle_error(e)
    except (OSError, UnicodeDecodeError) as e:
        handle_error(template_read_failed(e, str(path) if path else None))


def _parse_tokens(tokens: Optional[List[str]]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for token in tokens or []:
        if '=' not in token:
            raise typer.BadParameter(f"Token must be NAME=VALUE: {token}", param_hint="--token")
        name, value = token.split('=', 1)
        values[name.strip()] = value
    return values


def _parse_type(value: str):
    try:
        return parse_content_type(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--type")


@app.command("list")
def list_templates(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Template root directory"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """List cached templates and themes."""
    provider = _load_provider(path, config_file)
    cache = provider.cache

    table = Table(title=f"Templates in {provider.config.template_directory}")
    table.add_column("Language", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Content Type")
    table.add_column("Size", justify="right")

    for lookup_key in cache.template_keys():
        language, key, content_type = lookup_key.rsplit(':', 2)
        template = cache.get_template(lookup_key)
        table.add_row(language, key, content_type, str(len(template.content)))

    console.print(table)

    if cache.theme_count:
        console.print(f"Themes: {', '.join(cache.theme_names())}")
    else:
        console.print("[dim]No themes found[/dim]")


@app.command("show")
def show_template(
    template_key: str = typer.Argument(..., help="Template key (file name without extension)"),
    theme: str = typer.Option(DEFAULT_THEME_NAME, "--theme", help="Theme name"),
    content_type: str = typer.Option("Text", "--type", help="Content type (Text, Html, JSON, XML, Markdown)"),
    language: Optional[str] = typer.Option(None, "--lang", "-l", help="Language code"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Template root directory"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Print a template wrapped in its theme."""
    parsed_type = _parse_type(content_type)
    provider = _load_provider(path, config_file)

    try:
        content = provider.get_template(template_key, theme, parsed_type, language)
    except FancyTemplatesError as e:
        handle_error(e)

    console.print(content, markup=False, highlight=False, soft_wrap=True)


@app.command("render")
def render_message(
    template_key: str = typer.Argument(..., help="Template key (file name without extension)"),
    token: Optional[List[str]] = typer.Option(None, "--token", "-t", help="Token value as NAME=VALUE"),
    theme: str = typer.Option(DEFAULT_THEME_NAME, "--theme", help="Theme name"),
    content_type: str = typer.Option("Text", "--type", help="Content type (Text, Html, JSON, XML, Markdown)"),
    language: Optional[str] = typer.Option(None, "--lang", "-l", help="Language code"),
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Template root directory"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Print a template with token values replaced."""
    parsed_type = _parse_type(content_type)
    token_values = _parse_tokens(token)
    provider = _load_provider(path, config_file)

    try:
        content = provider.get_message(template_key, token_values, theme, parsed_type, language)
    except FancyTemplatesError as e:
        handle_error(e)

    console.print(content, markup=False, highlight=False, soft_wrap=True)


@config_app.command("init")
def config_init(
    output_file: Path = typer.Argument(..., help="Configuration file to create"),
    template_path: str = typer.Option("templates", "--path", "-p", help="Template root to write"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write an example configuration file."""
    if output_file.exists() and not force:
        console.print(f"[red]{output_file} already exists (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    ConfigManager().create_example_config(output_file, template_path=template_path)
    console.print(f"[green]Created configuration file: {output_file}[/green]")


@config_app.command("validate")
def config_validate(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Template root directory"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Check the configuration and template directory layout."""
    manager = ConfigManager(config_file=config_file)
    try:
        config = manager.load_config(
            overrides={'template_path': str(path) if path is not None else None}
        )
    except FancyTemplatesError as e:
        handle_error(e)

    console.print(f"Template path: {config.template_directory}")
    console.print(f"Default language: {config.default_language}")

    warnings = manager.validate_config(config)
    if warnings:
        for warning in warnings:
            console.print(f"[yellow]Warning:[/yellow] {warning}")
        raise typer.Exit(1)

    console.print("[green]Configuration is valid[/green]")


def main():
    """Entry point for the fancytemplates console script."""
    app()


if __name__ == "__main__":
    main()
