"""Gini command — inequality of a list of numbers."""

from typing import List

import typer

from . import app
from ._common import console, fail
from ..math.gini import Gini


@app.command()
def gini(
    values: List[float] = typer.Argument(..., help="Non-negative values"),
    bias_correction: bool = typer.Option(
        False,
        "--bias-correction",
        help="Apply the n/(n-1) small-sample correction",
    ),
):
    """
    Print the Gini coefficient (0 = equal, 1 = maximally unequal).

    [bold cyan]Examples:[/bold cyan]

      distlab gini 3 3 3 3 80 80
    """
    try:
        value = Gini.gini_coefficient(values, bias_correction=bias_correction)
    except ValueError as e:
        fail(e)
    console.print(f"Gini Coefficient: {value:.3f}", highlight=False)
