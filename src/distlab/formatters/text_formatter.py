"""Plain "<lines> <count>" distribution, one row per function length."""

from .base import BaseFormatter
from ..counting.models import LineCountResult

TITLE = "Function Line Count Distribution:"


class TextFormatter(BaseFormatter):
    """Two-column histogram that pastes straight into a spreadsheet."""

    def render(self, result: LineCountResult) -> None:
        self.console.print(self.format(result), highlight=False, markup=False)

    def format(self, result: LineCountResult) -> str:
        if not result.line_counts:
            return "No functions found or analyzed."

        lines = ["", TITLE, "=" * len(TITLE)]
        lines.extend(f"{length} {count}" for length, count in result.histogram())
        lines.append("")
        lines.append(f"Total functions analyzed: {result.total_functions}")
        return "\n".join(lines)
