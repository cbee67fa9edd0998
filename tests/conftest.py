"""Shared test fixtures for distlab tests."""

import os
import subprocess

import numpy as np
import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def rng():
    """Seeded generator so statistical tests are deterministic."""
    return np.random.default_rng(12345)


@pytest.fixture
def completed():
    """Factory for fake subprocess results."""

    def _make(cmd, returncode=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """No user or project config files, no DISTLAB_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("DISTLAB_"):
            monkeypatch.delenv(key)
    return work


@pytest.fixture
def simple_c_source():
    """Two functions: a 3-line one with the brace on the signature line and a
    4-line one with the brace on its own line."""
    return """\
#include <stdio.h>

int add(int a, int b) {
    return a + b;
}

void greet(void)
{
    printf("hi");
}
"""
