"""
Pytest configuration and shared test utilities.

This module provides shared fixtures for all treekeep tests.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from treekeep.utils import config as config_module


@pytest.fixture(autouse=True)
def reset_config():
    """Start every test from built-in defaults, without cached config files."""
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def runner():
    """Provide a Click CLI runner for testing."""
    return CliRunner()


def make_tree(root: Path, *directories: str) -> Path:
    """Create ``root`` and the given relative directories below it.

    Example::

        make_tree(tmp_path / "R", "a/b", "c")
    """
    root.mkdir(parents=True, exist_ok=True)
    for directory in directories:
        (root / directory).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def tree_factory():
    """Expose make_tree as a fixture."""
    return make_tree
