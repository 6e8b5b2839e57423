# tests/conftest.py
"""
Shared fixtures for the textmoderate test suite.
"""

import os
import sys
import pytest

# Add the project root to sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from textmoderate import BlacklistFilter, TextModerate, default_registry


@pytest.fixture
def blacklist():
    """Filter with a tiny custom list and no packaged words."""
    return BlacklistFilter(words=["badword", "shit", "blow job", "a$$"])


@pytest.fixture
def registry():
    """Fresh registry holding the built-in languages."""
    return default_registry()


@pytest.fixture
def moderator():
    """Facade without the packaged lists, so test sentences stay predictable."""
    return TextModerate(empty_list=True, words=["badword", "shit"])
