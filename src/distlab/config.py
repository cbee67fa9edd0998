"""Configuration loading and management for distlab.

Configuration sources are merged in priority order:
    1. Defaults (defined in the dataclasses below)
    2. Global config (~/.distlab.toml)
    3. Project config (./distlab.toml)
    4. Explicit config file
    5. Environment variables (DISTLAB_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, seed=7)
    >>> config.verbosity
    'verbose'
    >>> config.simulation.seed
    7
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigFileError, ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

CPP_SOURCE_EXTENSIONS = (".cpp", ".cxx", ".cc", ".c")
CPP_HEADER_EXTENSIONS = (".hpp", ".h")
JS_EXTENSIONS = (".js", ".jsx")


@dataclass(frozen=True)
class CounterConfig:
    """Knobs for the function line counters.

    Attributes:
        clone_depth: Pass ``--depth`` to git clone (None = full history)
        clone_timeout_seconds: Abort the clone after this long
        tool_timeout_seconds: Timeout for each linter / npm invocation
        keep_clone: Leave the temporary checkout on disk for inspection
        min_function_lines: Functions shorter than this are ignored by the
            brace and tree-sitter counters
        clang_tidy_batch_size: Files handed to one clang-tidy process
        clang_tidy_std: Language standard passed after ``--``
        sample_file_limit: How many discovered files to log as a sample
    """

    clone_depth: Optional[int] = None
    clone_timeout_seconds: int = 600
    tool_timeout_seconds: int = 1800
    keep_clone: bool = False
    min_function_lines: int = 2
    clang_tidy_batch_size: int = 10
    clang_tidy_std: str = "c++17"
    sample_file_limit: int = 10
    cpp_source_extensions: tuple[str, ...] = CPP_SOURCE_EXTENSIONS
    cpp_header_extensions: tuple[str, ...] = CPP_HEADER_EXTENSIONS
    js_extensions: tuple[str, ...] = JS_EXTENSIONS

    def __post_init__(self) -> None:
        if self.clone_depth is not None and self.clone_depth < 1:
            raise InvalidConfigError("clone_depth", self.clone_depth, "must be at least 1")
        if self.clone_timeout_seconds < 1:
            raise InvalidConfigError(
                "clone_timeout_seconds", self.clone_timeout_seconds, "must be at least 1"
            )
        if self.tool_timeout_seconds < 1:
            raise InvalidConfigError(
                "tool_timeout_seconds", self.tool_timeout_seconds, "must be at least 1"
            )
        if self.min_function_lines < 1:
            raise InvalidConfigError(
                "min_function_lines", self.min_function_lines, "must be at least 1"
            )
        if self.clang_tidy_batch_size < 1:
            raise InvalidConfigError(
                "clang_tidy_batch_size", self.clang_tidy_batch_size, "must be at least 1"
            )
        if self.sample_file_limit < 0:
            raise InvalidConfigError(
                "sample_file_limit", self.sample_file_limit, "must be non-negative"
            )


@dataclass(frozen=True)
class SimulationConfig:
    """Defaults for the Monte Carlo simulators.

    Attributes:
        seed: Seed for ``numpy.random.default_rng`` (None = fresh entropy)
        growth_rate: Per-iteration growth of the threshold-crossing sample
        initial_sample: Starting value of the threshold-crossing sample
        chunk_size: Samples drawn per vectorised batch (bounds memory)
        alpha: Power-law exponent for preferential growth
        new_element_probability: Chance a growth step adds a new element
    """

    seed: Optional[int] = None
    growth_rate: float = 0.1
    initial_sample: float = 0.01
    chunk_size: int = 1_000_000
    alpha: float = 2.5
    new_element_probability: float = 0.1

    def __post_init__(self) -> None:
        if self.growth_rate < 0:
            raise InvalidConfigError("growth_rate", self.growth_rate, "must be non-negative")
        if self.initial_sample <= 0:
            raise InvalidConfigError("initial_sample", self.initial_sample, "must be positive")
        if self.chunk_size < 1:
            raise InvalidConfigError("chunk_size", self.chunk_size, "must be at least 1")
        if self.alpha <= 1.0:
            raise InvalidConfigError("alpha", self.alpha, "must be greater than 1.0")
        if not 0.0 <= self.new_element_probability <= 1.0:
            raise InvalidConfigError(
                "new_element_probability",
                self.new_element_probability,
                "must be between 0.0 and 1.0",
            )


@dataclass(frozen=True)
class DistlabConfig:
    """Top-level configuration.

    Scalar fields here may be set from ``DISTLAB_*`` environment variables;
    the nested sections come from ``[counter]`` and ``[simulation]`` tables.
    """

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None
    counter: CounterConfig = field(default_factory=CounterConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    def __post_init__(self) -> None:
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


_SECTIONS = {"counter": CounterConfig, "simulation": SimulationConfig}


def load_config(config_file: Optional[Path] = None, **overrides) -> DistlabConfig:
    """Load configuration with auto-discovery and merging.

    Overrides may name top-level fields (``verbosity``), the boolean
    shorthands ``verbose``/``quiet``, or any field of a nested section
    (``seed``, ``clone_depth``); ``None`` values are ignored so CLI options
    left at their defaults don't mask file settings.

    Raises:
        ConfigurationError: If a config file is invalid or missing, or a
            value fails validation
    """
    merged: dict = {"counter": {}, "simulation": {}}

    global_config = Path.home() / ".distlab.toml"
    if global_config.exists():
        _merge(merged, _load_toml_file(global_config))

    project_config = Path.cwd() / "distlab.toml"
    if project_config.exists():
        _merge(merged, _load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigFileError(config_file, "file not found")
        _merge(merged, _load_toml_file(config_file))

    _merge(merged, _load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    section_fields = {
        name: {f.name for f in fields(cls)} for name, cls in _SECTIONS.items()
    }
    for key, value in overrides.items():
        if value is None:
            continue
        for section, names in section_fields.items():
            if key in names:
                merged[section][key] = value
                break
        else:
            merged[key] = value

    try:
        counter = CounterConfig(**_coerce_tuples(merged.pop("counter")))
        simulation = SimulationConfig(**merged.pop("simulation"))
        return DistlabConfig(counter=counter, simulation=simulation, **merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(merged: dict, source: dict) -> None:
    for key, value in source.items():
        if key in _SECTIONS:
            if not isinstance(value, dict):
                raise ConfigurationError(f"[{key}] must be a table")
            merged[key].update(value)
        else:
            merged[key] = value


def _coerce_tuples(values: dict) -> dict:
    """TOML arrays arrive as lists; the frozen dataclasses hold tuples."""
    return {k: tuple(v) if isinstance(v, list) else v for k, v in values.items()}


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DISTLAB_* environment variables.

    Top-level fields use their plain name (``DISTLAB_VERBOSITY``); nested
    fields are prefixed by their section (``DISTLAB_SIMULATION_SEED``,
    ``DISTLAB_COUNTER_CLONE_DEPTH``). Tuple fields are not read from the
    environment.
    """
    result: dict[str, Any] = {}

    top_hints = get_type_hints(DistlabConfig)
    for name in ("verbosity", "log_file"):
        env_key = f"DISTLAB_{name.upper()}"
        if env_key in os.environ:
            result[name] = _parse_env(env_key, os.environ[env_key], top_hints[name])

    for section, cls in _SECTIONS.items():
        hints = get_type_hints(cls)
        section_values: dict[str, Any] = {}
        for f in fields(cls):
            env_key = f"DISTLAB_{section.upper()}_{f.name.upper()}"
            if env_key not in os.environ:
                continue
            parsed = _parse_env(env_key, os.environ[env_key], hints[f.name])
            if parsed is not None:
                section_values[f.name] = parsed
        if section_values:
            result[section] = section_values

    return result


def _parse_env(env_key: str, value: str, type_hint: Any) -> Any:
    try:
        return _parse_env_value(value, type_hint)
    except ValueError as e:
        raise ConfigurationError(f"Invalid {env_key}: {e}")


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the type can't come from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigFileError: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(path, str(e))
