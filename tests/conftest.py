"""
Pytest configuration and fixtures for sandsync tests.

Provides fixtures for:
- An isolated config file per test
- Restoring root logger state after CLI runs
- Static classifiers for the common scenarios
"""
import logging

import pytest

from sandsync.sync import StaticClassifier


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config at a throwaway file."""
    config_path = tmp_path / "sandsync" / "config.json"
    monkeypatch.setenv("SANDSYNC_CONFIG", str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI callbacks reconfigure the root logger; undo that after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def classifier_for():
    """Build a static classifier that knows the given directories."""
    def _build(*dirs: str) -> StaticClassifier:
        return StaticClassifier(dirs=dirs)
    return _build
