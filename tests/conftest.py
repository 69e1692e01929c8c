"""Shared pytest fixtures for copilot-session-logger tests."""

import tempfile
from pathlib import Path

import pytest

from copilot_session_logger.config import LoggerConfig
from copilot_session_logger.engine import SessionLogger


@pytest.fixture
def temp_workspace():
    """Create a temporary workspace directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(temp_workspace):
    """Create a test configuration pointing at the temp workspace."""
    return LoggerConfig(workspace_root=temp_workspace)


@pytest.fixture
def session_logger(config):
    """Create a test session logger."""
    return SessionLogger(config)


@pytest.fixture
def log_root(temp_workspace):
    """The log folder inside the temp workspace (not created)."""
    return temp_workspace / "copilot-session_log"
