"""
Shared fixtures for the latinym test suite.

Building a transliterator loads every dictionary and initializes the external
libraries, so the instances are session-scoped.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import latinym
sys.path.insert(0, str(Path(__file__).parent.parent))

from latinym import NameTransliterator, TransliterationConfig


@pytest.fixture(scope="session")
def transliterator():
    """Transliterator with every library enabled and the Japanese engine warmed up."""
    return NameTransliterator()


@pytest.fixture(scope="session")
def offline_transliterator():
    """Transliterator restricted to the bundled tables."""
    return NameTransliterator(TransliterationConfig.without_libraries())
