"""Brace-matching function extractor for C and C++ sources.

This is a line-based heuristic, not a parser. It tracks paren and brace
depth and treats a line that opens a paren group and balances it, then
opens a brace (on the same line or the next), as a function start. The
function ends when brace depth comes back to zero. Braces inside strings
or comments, macros and nested declarations will confuse it; that
inaccuracy is accepted.
"""

from __future__ import annotations

from pathlib import Path

from ..config import CounterConfig
from ..logging_config import get_logger
from ..exceptions import FileAccessError
from ..repo import find_source_files, read_source
from .models import LineCountResult

logger = get_logger(__name__)


def _is_skippable(line: str) -> bool:
    return not line or line.startswith(("//", "/*", "*"))


def count_function_lines_braces(text: str, min_lines: int = 2) -> list[int]:
    """Line counts of the functions the heuristic finds in ``text``.

    Functions shorter than ``min_lines`` are dropped.
    """
    lines = text.split("\n")
    counts: list[int] = []

    in_function = False
    start = 0
    brace_depth = 0
    paren_depth = 0

    for i, raw in enumerate(lines):
        line = raw.strip()
        if _is_skippable(line):
            continue

        open_parens = line.count("(")
        close_parens = line.count(")")
        open_braces = line.count("{")
        close_braces = line.count("}")

        paren_depth += open_parens - close_parens

        if not in_function and open_parens > 0 and paren_depth == 0 and open_braces > 0:
            in_function = True
            start = i
            brace_depth = 0
        elif (
            not in_function
            and open_parens > 0
            and paren_depth == 0
            and ")" in line
            and ";" not in line
        ):
            # Signature with the opening brace on the following line
            if i + 1 < len(lines) and lines[i + 1].strip().startswith("{"):
                in_function = True
                start = i
                brace_depth = 0

        if in_function:
            brace_depth += open_braces - close_braces

            if brace_depth == 0 and (open_braces > 0 or close_braces > 0):
                length = i - start + 1
                if length >= min_lines:
                    counts.append(length)
                in_function = False
                paren_depth = 0

    return counts


def count_repository_braces(root: Path, config: CounterConfig) -> LineCountResult:
    """Run the brace heuristic over every C/C++ source and header."""
    extensions = config.cpp_source_extensions + config.cpp_header_extensions
    files = find_source_files(root, extensions)
    result = LineCountResult(method="braces")

    if not files:
        logger.warning("No C/C++ files found")
        return result

    logger.info("Analyzing %d C/C++ files...", len(files))
    for rel in files:
        try:
            text = read_source(root / rel).decode("utf-8", errors="replace")
        except FileAccessError as e:
            logger.debug("Skipping %s", e)
            result.files_failed += 1
            continue
        result.line_counts.extend(count_function_lines_braces(text, config.min_function_lines))
        result.files_scanned += 1

    return result
