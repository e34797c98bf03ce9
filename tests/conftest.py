"""Pytest configuration and fixtures for iowalk tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep log files and settings of test runs out of ~/.config/iowalk.
# Must run before any iowalk module creates its logger.
_TEST_HOME = Path(tempfile.mkdtemp(prefix="iowalk-tests-"))
os.environ.setdefault("IOWALK_LOG_DIR", str(_TEST_HOME / "logs"))
os.environ.setdefault("IOWALK_CONFIG_DIR", str(_TEST_HOME / "config"))


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Let caplog see records from the non-propagating iowalk root logger."""
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == "iowalk" or name.startswith("iowalk."):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def staging_target(tmp_path: Path) -> Path:
    """Target file inside a staging directory that does not exist yet."""
    return tmp_path / "staging" / "hi1.txt"
