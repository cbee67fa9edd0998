"""Output formatters for distlab."""

from rich.console import Console

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter


def get_formatter(name: str, console: Console) -> BaseFormatter:
    """Get a line-count formatter instance by name.

    Args:
        name: One of "text", "json"
        console: Console the formatter prints to

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "text": TextFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(console)


__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JsonFormatter",
    "get_formatter",
]
