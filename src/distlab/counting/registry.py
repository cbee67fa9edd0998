"""Counting method registry and the clone-then-count entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

from ..config import CounterConfig
from ..exceptions import UnsupportedMethodError
from ..logging_config import get_logger
from ..repo import cloned_repository
from .braces import count_repository_braces
from .clang_tidy import count_repository_clang_tidy
from .eslint import count_repository_eslint
from .models import LineCountResult
from .treesitter_counter import count_repository_tree_sitter

logger = get_logger(__name__)

Counter = Callable[[Path, CounterConfig], LineCountResult]

COUNTERS: Dict[str, Counter] = {
    "eslint": count_repository_eslint,
    "clang-tidy": count_repository_clang_tidy,
    "braces": count_repository_braces,
    "tree-sitter": count_repository_tree_sitter,
}


def get_counter(method: str) -> Counter:
    """Look up a counter by method name.

    Raises:
        UnsupportedMethodError: If no counter has that name
    """
    counter = COUNTERS.get(method)
    if counter is None:
        raise UnsupportedMethodError(method, sorted(COUNTERS))
    return counter


def analyze_repository(
    url: str, method: str = "braces", config: Optional[CounterConfig] = None
) -> LineCountResult:
    """Clone ``url`` into a temp directory and measure its functions.

    The checkout is removed afterwards, even on failure, unless
    ``config.keep_clone`` is set.
    """
    config = config if config is not None else CounterConfig()
    counter = get_counter(method)

    with cloned_repository(
        url,
        prefix=f"distlab-{method}-",
        depth=config.clone_depth,
        keep=config.keep_clone,
        timeout=config.clone_timeout_seconds,
    ) as repo_dir:
        result = counter(repo_dir, config)

    logger.debug(
        "%s: %d functions from %d files (%d failed)",
        method,
        result.total_functions,
        result.files_scanned,
        result.files_failed,
    )
    return result
