"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from radixword import Alphabet
from radixword import config as cfg


@pytest.fixture
def binary():
    """Binary alphabet."""
    return Alphabet("01")


@pytest.fixture
def hexadecimal():
    """Lowercase hexadecimal alphabet."""
    return Alphabet("0123456789abcdef")


@pytest.fixture
def decimal():
    """Identity alphabet of radix 10 (code points 0..9)."""
    return Alphabet(10)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop cached configuration between tests."""
    cfg.reset()
    yield
    cfg.reset()
