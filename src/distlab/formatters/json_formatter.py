"""JSON formatter for line-count results."""

import json

from .base import BaseFormatter
from ..counting.models import LineCountResult


class JsonFormatter(BaseFormatter):
    """Render the result as JSON."""

    def render(self, result: LineCountResult) -> None:
        self.console.print_json(self.format(result))

    def format(self, result: LineCountResult) -> str:
        return json.dumps(result.to_dict(), indent=2)
