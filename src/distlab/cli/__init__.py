"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="distlab",
    help="distlab - function-length histograms and stochastic growth simulators",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"distlab {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Measure function lengths in git repositories and simulate heavy-tailed growth."""


# Import subcommands to register them
from .count import count as _count  # noqa: F401, E402
from .threshold import threshold as _threshold  # noqa: F401, E402
from .attach import attach as _attach  # noqa: F401, E402
from .power_law import power_law as _power_law  # noqa: F401, E402
from .gini import gini as _gini  # noqa: F401, E402
