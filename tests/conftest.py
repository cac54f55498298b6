"""Pytest configuration and shared fixtures for pdftool tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# 50 characters, comfortably above the default 20-character median floor
BODY_LINE = "The quick brown fox jumps over the lazy dog again."


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str], None, None]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the pdftool logger's level and handlers after a test."""
    logger = logging.getLogger("pdftool")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def body_line() -> str:
    """A 50-character body line."""
    return BODY_LINE


@pytest.fixture
def sample_extracted_text() -> str:
    """Text shaped like pdftotext output for a two-page report."""
    return "\n".join(
        [
            "Introduction",
            "",
            BODY_LINE,
            BODY_LINE,
            "",
            "Background and Motivation",
            "",
            BODY_LINE,
            "Short line",
            BODY_LINE,
            "",
            "7",
            "",
        ]
    )
