"""Function line counters."""

from .braces import count_function_lines_braces, count_repository_braces
from .clang_tidy import count_repository_clang_tidy, parse_clang_tidy_output
from .eslint import count_repository_eslint, parse_eslint_output
from .models import LineCountResult
from .registry import COUNTERS, analyze_repository, get_counter
from .treesitter_counter import (
    TREE_SITTER_AVAILABLE,
    count_function_lines_tree,
    count_repository_tree_sitter,
)

__all__ = [
    "LineCountResult",
    "COUNTERS",
    "get_counter",
    "analyze_repository",
    "count_function_lines_braces",
    "count_repository_braces",
    "count_function_lines_tree",
    "count_repository_tree_sitter",
    "TREE_SITTER_AVAILABLE",
    "count_repository_eslint",
    "parse_eslint_output",
    "count_repository_clang_tidy",
    "parse_clang_tidy_output",
]
