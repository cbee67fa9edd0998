"""Shared CLI helpers."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from ..config import DistlabConfig, load_config
from ..exceptions import DistlabError
from ..logging_config import setup_logging

console = Console()

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file path (TOML format)",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")
SEED_OPTION = typer.Option(None, "--seed", help="Random seed for a reproducible run")


def fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {error}", highlight=False)
    raise typer.Exit(1)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> DistlabConfig:
    """Build config from CLI options and switch logging on to match."""
    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
    except DistlabError as e:
        fail(e)
    setup_logging(settings.verbosity, log_file=settings.log_file)
    return settings
