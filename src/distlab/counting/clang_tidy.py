"""Function lengths of C/C++ code, as reported by clang-tidy.

``readability-function-size`` with a line threshold of 1 flags every
function, and each warning carries the function's line count.
"""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from ..config import CounterConfig
from ..exceptions import ToolNotFoundError
from ..logging_config import get_logger
from ..repo import find_source_files, log_sample_files
from .models import LineCountResult

logger = get_logger(__name__)

_FUNCTION_SIZE = re.compile(r"readability-function-size.*has (\d+) lines")
# Current releases put the count on a note following the warning
_SIZE_NOTE = re.compile(r"note: (\d+) lines including whitespace and comments")

CLANG_TIDY_CONFIG = """---
Checks: 'readability-function-size'
CheckOptions:
  - key: readability-function-size.LineThreshold
    value: 1
  - key: readability-function-size.StatementThreshold
    value: 1000
  - key: readability-function-size.BranchThreshold
    value: 1000
  - key: readability-function-size.ParameterThreshold
    value: 1000
  - key: readability-function-size.NestingThreshold
    value: 1000
  - key: readability-function-size.VariableThreshold
    value: 1000
"""


def write_clang_tidy_config(repo_dir: Path) -> Path:
    path = repo_dir / ".clang-tidy"
    path.write_text(CLANG_TIDY_CONFIG, encoding="utf-8")
    return path


def parse_clang_tidy_output(*streams: str) -> list[int]:
    """Function lengths mentioned in any of the given output streams."""
    counts: list[int] = []
    for stream in streams:
        if not stream:
            continue
        for line in stream.splitlines():
            match = _FUNCTION_SIZE.search(line) or _SIZE_NOTE.search(line)
            if match:
                counts.append(int(match.group(1)))
    return counts


def batched(items: Sequence[Path], size: int) -> Iterator[Sequence[Path]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def run_clang_tidy(
    root: Path, files: Iterable[Path], std: str, timeout: int
) -> subprocess.CompletedProcess:
    cmd = ["clang-tidy", *(str(f) for f in files), "--", f"-std={std}"]
    try:
        return subprocess.run(cmd, cwd=root, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        raise ToolNotFoundError("clang-tidy", hint="install clang-tools")


def count_repository_clang_tidy(root: Path, config: CounterConfig) -> LineCountResult:
    """Run clang-tidy over the C/C++ sources in batches."""
    files = find_source_files(root, config.cpp_source_extensions)
    log_sample_files(files, config.sample_file_limit)
    result = LineCountResult(method="clang-tidy")

    if not files:
        logger.warning("No C/C++ files found")
        return result

    write_clang_tidy_config(root)
    logger.info("Running clang-tidy analysis...")

    for batch in batched(files, config.clang_tidy_batch_size):
        try:
            proc = run_clang_tidy(
                root, batch, config.clang_tidy_std, config.tool_timeout_seconds
            )
        except subprocess.TimeoutExpired:
            logger.warning("clang-tidy timed out on a batch of %d files", len(batch))
            result.files_failed += len(batch)
            continue
        # Compile errors make clang-tidy exit non-zero; warnings still count
        result.line_counts.extend(parse_clang_tidy_output(proc.stdout, proc.stderr))
        result.files_scanned += len(batch)

    return result
