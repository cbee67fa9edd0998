"""End-to-end tests for the distlab command line."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from distlab import __version__
from distlab.cli import app
from distlab.counting import LineCountResult

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(isolated_config):
    return isolated_config


class TestTopLevel:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"distlab {__version__}" in result.output

    def test_commands_listed(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("count", "threshold", "attach", "power-law", "gini"):
            assert name in result.output


class TestCountCommand:
    def test_text_histogram(self):
        fake = LineCountResult("braces", [3, 4, 4], files_scanned=1)
        with patch("distlab.cli.count.analyze_repository", return_value=fake) as analyze:
            result = runner.invoke(app, ["count", "https://example.com/r.git"])

        assert result.exit_code == 0, result.output
        assert "3 1" in result.output
        assert "4 2" in result.output
        assert "Total functions analyzed: 3" in result.output
        assert analyze.call_args.kwargs["method"] == "braces"

    def test_json_and_options(self):
        fake = LineCountResult("eslint", [10], files_scanned=1)
        with patch("distlab.cli.count.analyze_repository", return_value=fake) as analyze:
            result = runner.invoke(
                app,
                ["count", "u", "--method", "eslint", "--json", "--depth", "1", "--keep", "-q"],
            )

        assert result.exit_code == 0, result.output
        assert '"total_functions": 1' in result.output
        config = analyze.call_args.kwargs["config"]
        assert config.clone_depth == 1
        assert config.keep_clone is True

    def test_missing_url(self):
        result = runner.invoke(app, ["count"])
        assert result.exit_code == 2

    def test_unsupported_method(self):
        with patch("distlab.repo.subprocess.run") as run:
            result = runner.invoke(app, ["count", "u", "--method", "cloc"])
        assert result.exit_code == 1
        assert "Unsupported counting method: cloc" in result.output
        run.assert_not_called()

    def test_clone_failure(self, completed):
        with patch("distlab.repo.subprocess.run") as run:
            run.side_effect = lambda cmd, **kw: completed(cmd, 128, stderr="fatal: nope")
            result = runner.invoke(app, ["count", "https://example.com/x.git"])
        assert result.exit_code == 1
        assert "Failed to clone repository" in result.output


class TestGiniCommand:
    def test_population_gini(self):
        result = runner.invoke(app, ["gini", "0", "0", "10"])
        assert result.exit_code == 0
        assert "Gini Coefficient: 0.667" in result.output

    def test_bias_correction(self):
        result = runner.invoke(app, ["gini", "0", "0", "0", "100", "--bias-correction"])
        assert result.exit_code == 0
        assert "Gini Coefficient: 1.000" in result.output

    def test_requires_values(self):
        assert runner.invoke(app, ["gini"]).exit_code == 2

    def test_negative_value_is_an_error(self):
        result = runner.invoke(app, ["gini", "--", "-5"])
        assert result.exit_code == 1
        assert "non-negative" in result.output


class TestAttachCommand:
    def test_weighted_run(self):
        result = runner.invoke(
            app, ["attach", "-s", "3", "-n", "10", "-w", "1", "--progress-every", "5", "--seed", "1"]
        )
        assert result.exit_code == 0, result.output
        assert "Initial state (with base weights): [1, 1, 1]" in result.output
        assert "After 5 iterations:" in result.output
        assert "After 10 iterations:" in result.output
        assert "Total iterations: 13" in result.output
        assert "=== SORTED HISTOGRAM ===" in result.output
        assert "Gini Coefficient:" in result.output

    def test_zero_weight_single_winner(self):
        result = runner.invoke(app, ["attach", "-s", "4", "-n", "20", "--seed", "2"])
        assert result.exit_code == 0, result.output
        assert "Initial state: [0, 0, 0, 0]" in result.output
        assert "Rank 1: Index" in result.output
        assert "= 20 (100.0%)" in result.output

    def test_seed_is_reproducible(self):
        args = ["attach", "-s", "5", "-n", "50", "-w", "1", "--seed", "9"]
        assert runner.invoke(app, args).output == runner.invoke(app, args).output

    def test_bad_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("DISTLAB_SIMULATION_ALPHA", "0.5")
        result = runner.invoke(app, ["attach", "-n", "1"])
        assert result.exit_code == 1
        assert "alpha" in result.output


class TestThresholdCommand:
    def test_histogram_and_average(self):
        result = runner.invoke(
            app,
            ["threshold", "-n", "200", "--average-only", "300", "--stats", "--seed", "4"],
        )
        assert result.exit_code == 0, result.output
        assert "200 samples:" in result.output
        assert "Histogram:" in result.output
        assert "Percentiles" in result.output
        assert "=== Larger Sample Averages ===" in result.output
        assert "Average with 300 samples:" in result.output

    def test_sample_at_one(self):
        result = runner.invoke(app, ["threshold", "-n", "10", "--initial-sample", "1.0"])
        assert result.exit_code == 0, result.output
        assert "10 samples: 0.000000" in result.output
        assert "0: 10 (100.000%)" in result.output


class TestPowerLawCommand:
    def test_report_with_csv(self):
        result = runner.invoke(
            app,
            ["power-law", "--steps", "200", "-n", "200", "--demo-runs", "2", "--csv", "--seed", "3"],
        )
        assert result.exit_code == 0, result.output
        assert "Run 2:" in result.output
        assert "=== Comparing Distributions ===" in result.output
        assert "generate_power_law Distribution Histogram" in result.output
        assert "CSV DATA FOR EXTERNAL PLOTTING" in result.output
        assert "value,frequency,percentage" in result.output

    def test_empty_population(self):
        result = runner.invoke(app, ["power-law", "--x-min", "0", "-p", "0", "--demo-runs", "0"])
        assert result.exit_code == 1
        assert "empty" in result.output

    def test_alpha_validated(self):
        result = runner.invoke(app, ["power-law", "--alpha", "1.0"])
        assert result.exit_code == 1
        assert "alpha" in result.output


def test_json_output_parses():
    fake = LineCountResult("braces", [5, 5])
    with patch("distlab.cli.count.analyze_repository", return_value=fake):
        result = runner.invoke(app, ["count", "u", "--json"])
    assert json.loads(result.stdout)["histogram"] == {"5": 2}
