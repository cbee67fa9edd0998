"""Base formatter interface for line-count output."""

from abc import ABC, abstractmethod

from rich.console import Console

from ..counting.models import LineCountResult


class BaseFormatter(ABC):
    """Abstract base class for line-count formatters."""

    def __init__(self, console: Console):
        self.console = console

    @abstractmethod
    def render(self, result: LineCountResult) -> None:
        """Print the result to the formatter's console."""

    @abstractmethod
    def format(self, result: LineCountResult) -> str:
        """Return formatted string representation of the result."""
