"""Exception hierarchy for distlab."""

from .base import DistlabError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError
from .counting import (
    CloneError,
    CountingError,
    FileAccessError,
    InsufficientDataError,
    LinterOutputError,
    ToolNotFoundError,
    UnsupportedMethodError,
)

__all__ = [
    "DistlabError",
    "CountingError",
    "CloneError",
    "ToolNotFoundError",
    "LinterOutputError",
    "UnsupportedMethodError",
    "FileAccessError",
    "InsufficientDataError",
    "ConfigurationError",
    "InvalidConfigError",
    "ConfigFileError",
]
