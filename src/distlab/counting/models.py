"""Result type shared by all counters."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from ..math.histogram import frequency, sorted_by_value


@dataclass
class LineCountResult:
    """Function lengths gathered by one counting method."""

    method: str
    line_counts: List[int] = field(default_factory=list)
    files_scanned: int = 0
    files_failed: int = 0

    @property
    def total_functions(self) -> int:
        return len(self.line_counts)

    def histogram(self) -> list[tuple[int, int]]:
        """(line count, number of functions) pairs in ascending length order."""
        return sorted_by_value(frequency(self.line_counts))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total_functions"] = self.total_functions
        data["histogram"] = {str(lines): count for lines, count in self.histogram()}
        return data
