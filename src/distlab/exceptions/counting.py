"""Counting-related exceptions: cloning, external tools, linter output."""

from pathlib import Path
from typing import Dict, List, Optional

from .base import DistlabError


class CountingError(DistlabError):
    """Base class for errors raised while measuring function lengths."""
    pass


class CloneError(CountingError):
    """Raised when ``git clone`` fails or times out."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Failed to clone repository: {url}",
            details={"url": url, "reason": reason},
        )
        self.url = url
        self.reason = reason


class ToolNotFoundError(CountingError):
    """Raised when an external program or optional library is missing."""

    def __init__(self, tool: str, hint: Optional[str] = None):
        details: Dict[str, str] = {"tool": tool}
        if hint:
            details["hint"] = hint
        super().__init__(f"Required tool not available: {tool}", details=details)
        self.tool = tool
        self.hint = hint


class LinterOutputError(CountingError):
    """Raised when a linter produced no output or output we cannot parse."""

    def __init__(self, linter: str, reason: str):
        super().__init__(
            f"Unusable {linter} output",
            details={"linter": linter, "reason": reason},
        )
        self.linter = linter
        self.reason = reason


class UnsupportedMethodError(CountingError):
    """Raised when asking for a counting method that does not exist."""

    def __init__(self, method: str, supported_methods: List[str]):
        super().__init__(
            f"Unsupported counting method: {method}",
            details={"method": method, "supported": ", ".join(supported_methods)},
        )
        self.method = method
        self.supported_methods = supported_methods


class FileAccessError(CountingError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class InsufficientDataError(DistlabError):
    """Raised when there's not enough data for a statistic."""

    def __init__(self, reason: str, minimum_required: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if minimum_required is not None:
            details["minimum_required"] = str(minimum_required)

        super().__init__(f"Insufficient data: {reason}", details=details)
        self.reason = reason
        self.minimum_required = minimum_required
