"""
Pytest configuration file for the sequence library tests.

This file ensures that the project root is in the Python path so that test
files can import the library modules directly, and provides shared fixtures.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from models import reset_settings
from sequence import Track


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings"""
    monkeypatch.delenv("SEQUENCE_SHOW_MAX_VALUES", raising=False)
    monkeypatch.delenv("SEQUENCE_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def pulled():
    """Records every element pulled from the counting_naturals source"""
    return []


@pytest.fixture
def counting_naturals(pulled):
    """Infinite sequence 0, 1, 2, ... that records each element as it is produced"""
    def produce(n):
        pulled.append(n)
        return True

    return Track(0, produce, lambda n: n + 1)
