"""Function lengths of JavaScript/JSX code, as reported by ESLint.

``max-lines-per-function`` is set to 1 so that every function of two or
more lines is reported, and the length is read back out of each message.
"""

from __future__ import annotations

import json
import re
import subprocess
from pathlib import Path
from typing import Any, Optional

from ..config import CounterConfig
from ..exceptions import LinterOutputError, ToolNotFoundError
from ..logging_config import get_logger
from ..repo import find_source_files, log_sample_files
from .models import LineCountResult

logger = get_logger(__name__)

RULE_ID = "max-lines-per-function"
_TOO_MANY_LINES = re.compile(r"too many lines \((\d+)\)")

# Flat config (ESLint v9+). Only the length rule is enabled.
ESLINT_CONFIG = """export default [
  {
    languageOptions: {
      ecmaVersion: 2020,
      sourceType: 'module',
      globals: {
        console: 'readonly',
        process: 'readonly',
        Buffer: 'readonly',
        __dirname: 'readonly',
        __filename: 'readonly',
        exports: 'writable',
        module: 'writable',
        require: 'readonly',
        global: 'readonly'
      }
    },
    rules: {
      'max-lines-per-function': ['error', 1]
    }
  }
];
"""

ESLINT_COMMAND = [
    "npx",
    "eslint",
    "**/*.{js,jsx}",
    "--format",
    "json",
    "--config",
    "eslint.config.js",
]


def _run(cmd: list[str], cwd: Path, timeout: int) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError:
        raise ToolNotFoundError(cmd[0], hint="install Node.js to use the eslint method")
    except subprocess.TimeoutExpired:
        raise LinterOutputError("eslint", f"{' '.join(cmd[:3])} timed out after {timeout}s")


def ensure_eslint(repo_dir: Path, timeout: int) -> None:
    """Use the repo's ESLint if it has one, otherwise install it locally."""
    if _run(["npx", "--no-install", "eslint", "--version"], repo_dir, timeout).returncode == 0:
        logger.info("ESLint already available in repo")
        return

    logger.info("Installing ESLint...")
    for cmd in (["npm", "init", "-y"], ["npm", "install", "eslint", "--save-dev"]):
        result = _run(cmd, repo_dir, timeout)
        if result.returncode != 0:
            raise ToolNotFoundError("eslint", hint=result.stderr.strip()[:200] or " ".join(cmd))


def mark_package_as_module(repo_dir: Path) -> None:
    """Set ``"type": "module"`` so the ESM config file can be loaded.

    Raises:
        LinterOutputError: If package.json is not a JSON object
    """
    package_json = repo_dir / "package.json"
    if not package_json.exists():
        return
    try:
        data = json.loads(package_json.read_text(encoding="utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LinterOutputError("eslint", f"unreadable package.json: {e}")
    if not isinstance(data, dict):
        raise LinterOutputError("eslint", "package.json is not a JSON object")
    data["type"] = "module"
    package_json.write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_eslint_config(repo_dir: Path) -> Path:
    path = repo_dir / "eslint.config.js"
    path.write_text(ESLINT_CONFIG, encoding="utf-8")
    return path


def parse_eslint_output(output: Optional[str]) -> list[int]:
    """Extract function lengths from ESLint's JSON report.

    Raises:
        LinterOutputError: If the output is empty or not valid JSON
    """
    if not output or not output.strip():
        raise LinterOutputError("eslint", "no output received")

    try:
        results: Any = json.loads(output)
    except json.JSONDecodeError as e:
        logger.debug("Output length: %d", len(output))
        logger.debug("First 500 chars: %s", output[:500])
        logger.debug("Last 500 chars: %s", output[-500:])
        raise LinterOutputError("eslint", f"invalid JSON: {e.msg}")

    counts: list[int] = []
    for file_result in results:
        for message in file_result.get("messages", []):
            if message.get("ruleId") != RULE_ID:
                continue
            match = _TOO_MANY_LINES.search(message.get("message", ""))
            if match:
                counts.append(int(match.group(1)))
    return counts


def count_repository_eslint(root: Path, config: CounterConfig) -> LineCountResult:
    """Install/configure ESLint inside ``root`` and collect function lengths."""
    files = [
        f for f in find_source_files(root, config.js_extensions) if "node_modules" not in f.parts
    ]
    log_sample_files(files, config.sample_file_limit)

    ensure_eslint(root, config.tool_timeout_seconds)
    mark_package_as_module(root)
    write_eslint_config(root)

    logger.info("Running ESLint analysis...")
    result = _run(ESLINT_COMMAND, root, config.tool_timeout_seconds)
    # Exit code 1 just means violations were found, which is the point
    if result.stderr.strip():
        logger.debug("ESLint stderr: %s", result.stderr.strip())

    counts = parse_eslint_output(result.stdout)
    return LineCountResult(method="eslint", line_counts=counts, files_scanned=len(files))
