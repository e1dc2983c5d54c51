#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import os
import sys
import logging
import tempfile
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gofile_upload.config import config


@pytest.fixture(autouse=True)
def reset_config():
    """Give every test the default configuration."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def restore_root_logger():
    """Undo any handler/level changes made to the root and urllib3 loggers."""
    root = logging.getLogger()
    urllib3_logger = logging.getLogger("urllib3")
    handlers, level = root.handlers[:], root.level
    urllib3_level = urllib3_logger.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    urllib3_logger.setLevel(urllib3_level)


@pytest.fixture
def temp_file():
    """Create a temporary file for upload testing."""
    fd, path = tempfile.mkstemp(suffix=".txt")
    os.write(fd, b"Test file content for upload testing")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_large_file():
    """Create a larger temporary file for testing."""
    fd, path = tempfile.mkstemp(suffix=".bin")
    os.write(fd, b"x" * 1024 * 100)  # 100KB
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)
