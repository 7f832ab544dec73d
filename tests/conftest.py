"""
Pytest configuration and shared fixtures for arraymerkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_trees = importlib.import_module("fixtures.trees")

make_pattern_tree = _trees.make_pattern_tree
make_leaf = _trees.make_leaf


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def pattern_tree():
    """Depth-5 tree with leaf i set to (i * 0x11) repeated."""
    return make_pattern_tree(depth=5)


@pytest.fixture
def zero_tree():
    """Depth-4 tree with every leaf zero."""
    from arraymerkle.merkle import MerkleTree
    return MerkleTree(4, bytes(32))


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep ARRAYMERKLE_* variables and the cached default config out of tests."""
    import os

    from arraymerkle.config.runtime import set_default_config

    for key in list(os.environ):
        if key.startswith("ARRAYMERKLE_"):
            monkeypatch.delenv(key, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
