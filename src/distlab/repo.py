"""Temporary checkouts of remote repositories via the git CLI."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .exceptions import CloneError, FileAccessError, ToolNotFoundError
from .logging_config import get_logger

logger = get_logger(__name__)

SKIP_DIRS = frozenset({".git"})


def clone_repository(
    url: str,
    destination: Path,
    depth: Optional[int] = None,
    timeout: Optional[int] = None,
) -> None:
    """Run ``git clone`` into ``destination``.

    Raises:
        ToolNotFoundError: If git is not installed
        CloneError: If the clone exits non-zero or times out
    """
    cmd = ["git", "clone"]
    if depth is not None:
        cmd += ["--depth", str(depth)]
    cmd += [url, str(destination)]

    logger.info("Cloning %s...", url)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        raise ToolNotFoundError("git")
    except subprocess.TimeoutExpired:
        raise CloneError(url, f"timed out after {timeout}s")

    if result.returncode != 0:
        raise CloneError(url, result.stderr.strip() or f"git exited with {result.returncode}")


@contextmanager
def cloned_repository(
    url: str,
    prefix: str = "distlab-",
    depth: Optional[int] = None,
    keep: bool = False,
    timeout: Optional[int] = None,
) -> Iterator[Path]:
    """Clone ``url`` into a fresh temp directory and yield its path.

    The directory is removed on exit, including when the body raises,
    unless ``keep`` is set.
    """
    temp_dir = Path(tempfile.mkdtemp(prefix=prefix))
    try:
        clone_repository(url, temp_dir, depth=depth, timeout=timeout)
        yield temp_dir
    finally:
        if keep:
            logger.info("Keeping checkout at %s", temp_dir)
        else:
            shutil.rmtree(temp_dir, ignore_errors=True)


def find_source_files(root: Path, extensions: Iterable[str]) -> list[Path]:
    """Relative paths under ``root`` whose suffix is one of ``extensions``.

    Matching is case-sensitive, like ``find -name "*.c"``.
    """
    wanted = tuple(extensions)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
        for name in filenames:
            if name.endswith(wanted):
                found.append(Path(dirpath, name).relative_to(root))
    return sorted(found)


def log_sample_files(files: list[Path], limit: int = 10) -> list[Path]:
    """Log the first ``limit`` files found and return them."""
    sample = files[:limit]
    if sample:
        logger.info("Sample files found: %s", ", ".join(str(f) for f in sample))
    else:
        logger.info("No matching files found")
    return sample


def read_source(path: Path) -> bytes:
    """Raw bytes of a source file.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e))
