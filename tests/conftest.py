"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import MagicMock

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after tests that configure logging."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_warning() -> MagicMock:
    """Stand-in for the warning sink passed to get_inputs."""
    return MagicMock()


@pytest.fixture
def clean_input_env(monkeypatch):
    """Remove any INPUT_* variables inherited from the environment."""
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key)
    return monkeypatch
