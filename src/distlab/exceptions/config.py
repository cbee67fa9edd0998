"""Configuration exceptions."""

from pathlib import Path

from .base import DistlabError


class ConfigurationError(DistlabError):
    """Raised when configuration is invalid or cannot be loaded."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is rejected."""

    def __init__(self, key: str, value: object, reason: str):
        super().__init__(
            f"Invalid configuration value for '{key}'",
            details={"key": key, "value": repr(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class ConfigFileError(ConfigurationError):
    """Raised when a TOML config file is missing or malformed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot load config file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
