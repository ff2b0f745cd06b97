"""Pytest configuration and fixtures for civiltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so civiltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from civiltime import Date  # noqa: E402


@pytest.fixture
def sample_dates() -> list[Date]:
    """A spread of valid dates, including the epoch and a leap day."""
    return [
        Date.EPOCH,
        Date(1970, 1, 1, 0, 0, 1),
        Date(1970, 12, 31, 23, 59, 59),
        Date(1999, 12, 31, 23, 59, 59),
        Date(2000, 2, 29, 12, 0, 0),
        Date(2004, 6, 14, 23, 34, 30),
        Date(2023, 2, 28, 7, 4, 3),
        Date(2024, 2, 29, 0, 0, 0),
        Date(2024, 10, 1, 9, 9, 9),
    ]
