"""
distlab - Function-Length Histograms and Stochastic Growth Simulators

Two small toolkits behind one command:

* clone a git repository and histogram how long its functions are, using
  ESLint, clang-tidy, tree-sitter or a naive brace-matching scan;
* sample threshold-crossing and preferential-attachment processes and
  print histograms, percentiles and the Gini coefficient.
"""

__version__ = "0.1.0"
__author__ = "Naman Agarwal"

from .counting import LineCountResult, analyze_repository, get_counter
from .math.gini import Gini
from .math.statistics import SummaryStats

__all__ = [
    "analyze_repository",  # Main entry point for line counting
    "get_counter",
    "LineCountResult",
    "Gini",
    "SummaryStats",
]
