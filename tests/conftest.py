"""
Pytest configuration and shared fixtures for owo tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

TEST_KEY = _common.TEST_KEY
make_png = _common.make_png
make_requests_session = _common.make_requests_session


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def api_key():
    """Provide the fake API key used by offline tests."""
    return TEST_KEY


@pytest.fixture
def png_bytes():
    """Provide PNG-looking upload bytes."""
    return make_png()


@pytest.fixture
def live_key():
    """Provide a real API key, skipping the test when none is configured."""
    key = os.getenv("OWO_KEY")
    if not key:
        pytest.skip("OWO_KEY not set")
    return key


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that talk to the live service"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
