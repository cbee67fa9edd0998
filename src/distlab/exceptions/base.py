"""Root of the distlab exception tree."""

from typing import Mapping, Optional


class DistlabError(Exception):
    """Any failure distlab reports to the user as ``Error: ...``.

    ``details`` name the URL, tool or config key involved and are appended
    to the message as ``key=value`` pairs. Values are stored as strings so
    callers may pass numbers or paths directly.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, object]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
