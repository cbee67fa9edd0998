"""Tests for configuration loading and validation."""

import pytest

from distlab.config import (
    CPP_SOURCE_EXTENSIONS,
    CounterConfig,
    DistlabConfig,
    SimulationConfig,
    load_config,
)
from distlab.exceptions import ConfigFileError, ConfigurationError, InvalidConfigError


class TestDefaults:
    def test_defaults(self):
        config = DistlabConfig()
        assert config.verbosity == "normal"
        assert config.counter.clang_tidy_batch_size == 10
        assert config.counter.clang_tidy_std == "c++17"
        assert config.counter.min_function_lines == 2
        assert config.counter.cpp_source_extensions == CPP_SOURCE_EXTENSIONS
        assert config.simulation.growth_rate == 0.1
        assert config.simulation.initial_sample == 0.01
        assert config.simulation.alpha == 2.5
        assert config.simulation.seed is None

    def test_load_without_sources(self, isolated_config):
        assert load_config() == DistlabConfig()


class TestValidation:
    def test_alpha_must_exceed_one(self):
        with pytest.raises(InvalidConfigError, match="alpha"):
            SimulationConfig(alpha=1.0)

    def test_initial_sample_positive(self):
        with pytest.raises(InvalidConfigError):
            SimulationConfig(initial_sample=0)

    def test_probability_range(self):
        with pytest.raises(InvalidConfigError):
            SimulationConfig(new_element_probability=1.5)

    def test_batch_size(self):
        with pytest.raises(InvalidConfigError):
            CounterConfig(clang_tidy_batch_size=0)

    def test_clone_depth(self):
        with pytest.raises(InvalidConfigError):
            CounterConfig(clone_depth=0)

    def test_verbosity(self):
        with pytest.raises(InvalidConfigError):
            DistlabConfig(verbosity="loud")

    def test_invalid_values_are_configuration_errors(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig(chunk_size=0)


class TestLoadConfig:
    def test_project_file(self, isolated_config):
        (isolated_config / "distlab.toml").write_text(
            'verbosity = "verbose"\n'
            "[simulation]\nseed = 5\nalpha = 3.0\n"
            '[counter]\ncpp_source_extensions = [".cc"]\n'
        )
        config = load_config()
        assert config.verbose
        assert config.simulation.seed == 5
        assert config.simulation.alpha == 3.0
        assert config.counter.cpp_source_extensions == (".cc",)

    def test_explicit_file_beats_project_file(self, isolated_config, tmp_path):
        (isolated_config / "distlab.toml").write_text("[simulation]\nseed = 1\n")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("[simulation]\nseed = 2\n")
        assert load_config(config_file=explicit).simulation.seed == 2

    def test_env_beats_file(self, isolated_config, monkeypatch):
        (isolated_config / "distlab.toml").write_text("[simulation]\nseed = 1\n")
        monkeypatch.setenv("DISTLAB_SIMULATION_SEED", "9")
        monkeypatch.setenv("DISTLAB_COUNTER_KEEP_CLONE", "yes")
        config = load_config()
        assert config.simulation.seed == 9
        assert config.counter.keep_clone is True

    def test_overrides_beat_env(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DISTLAB_SIMULATION_SEED", "9")
        assert load_config(seed=3).simulation.seed == 3

    def test_none_overrides_ignored(self, isolated_config):
        (isolated_config / "distlab.toml").write_text("[counter]\nclone_depth = 4\n")
        assert load_config(clone_depth=None).counter.clone_depth == 4

    def test_verbose_and_quiet_shorthand(self, isolated_config):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False).verbosity == "normal"

    def test_missing_explicit_file(self, isolated_config, tmp_path):
        with pytest.raises(ConfigFileError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, isolated_config):
        (isolated_config / "distlab.toml").write_text("[simulation\nseed = ")
        with pytest.raises(ConfigFileError):
            load_config()

    def test_unknown_key(self, isolated_config):
        (isolated_config / "distlab.toml").write_text("[simulation]\nwarp_speed = 9\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config()

    def test_section_must_be_table(self, isolated_config):
        (isolated_config / "distlab.toml").write_text("simulation = 3\n")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_bad_env_bool(self, isolated_config, monkeypatch):
        monkeypatch.setenv("DISTLAB_COUNTER_KEEP_CLONE", "maybe")
        with pytest.raises(ConfigurationError, match="DISTLAB_COUNTER_KEEP_CLONE"):
            load_config()

    def test_global_file(self, isolated_config, tmp_path):
        (tmp_path / "home" / ".distlab.toml").write_text('log_file = "run.log"\n')
        assert load_config().log_file == "run.log"
