"""
Pytest configuration and fixtures for tests
"""
import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
# sample_hands lives next to the tests
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from handreplay import config


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config so env overrides never leak between tests"""
    config._cached = None
    yield
    config._cached = None


@pytest.fixture
def hand_file(tmp_path):
    """Write hand text to a temporary file and return its path"""
    def _write(text, name="hands.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
