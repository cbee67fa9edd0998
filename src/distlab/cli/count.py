"""Count command — function-length histogram of a remote repository."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import CONFIG_OPTION, QUIET_OPTION, VERBOSE_OPTION, console, fail, resolve_config
from ..counting import COUNTERS, analyze_repository
from ..exceptions import DistlabError
from ..formatters import get_formatter


@app.command()
def count(
    repo_url: str = typer.Argument(..., help="Git repository URL to clone"),
    method: str = typer.Option(
        "braces",
        "--method",
        "-m",
        help=f"Counting method: {', '.join(COUNTERS)}",
    ),
    depth: Optional[int] = typer.Option(
        None, "--depth", min=1, help="Shallow clone with this many commits"
    ),
    keep: bool = typer.Option(
        False, "--keep", help="Keep the temporary checkout instead of deleting it"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output in machine-readable JSON format"
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Clone a repository and histogram its function lengths.

    [bold cyan]Methods:[/bold cyan]

      [bold]braces[/bold]       naive brace matching over C/C++ sources and headers

      [bold]tree-sitter[/bold]  C++ syntax tree (needs tree-sitter-cpp)

      [bold]clang-tidy[/bold]   readability-function-size warnings

      [bold]eslint[/bold]       max-lines-per-function for JavaScript/JSX (needs Node.js)

    [bold cyan]Examples:[/bold cyan]

      distlab count https://github.com/madler/zlib

      distlab count https://github.com/expressjs/express --method eslint --json
    """
    settings = resolve_config(
        config,
        verbose=verbose,
        quiet=quiet,
        clone_depth=depth,
        keep_clone=keep or None,
    )

    try:
        result = analyze_repository(repo_url, method=method, config=settings.counter)
    except DistlabError as e:
        fail(e)

    get_formatter("json" if json_output else "text", console).render(result)
