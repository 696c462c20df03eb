"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory path.

    Returns:
        Path to the project root directory.
    """
    return PROJECT_ROOT
