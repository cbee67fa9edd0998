"""Monte Carlo growth processes."""

from .attachment import run_attachment, sample_preferential, sample_preferential_weighted
from .power_law import generate_power_law, preferential_attachment_step
from .rng import make_rng
from .threshold import generate_iterations, mean_iterations, simulate_iterations

__all__ = [
    "make_rng",
    "generate_iterations",
    "simulate_iterations",
    "mean_iterations",
    "sample_preferential",
    "sample_preferential_weighted",
    "run_attachment",
    "preferential_attachment_step",
    "generate_power_law",
]
