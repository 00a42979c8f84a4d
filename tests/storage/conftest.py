"""
Storage Test Configuration and Fixtures

This file contains pytest fixtures shared across object store tests.
Mirrors the pattern from tests/publish/conftest.py.

To use pytest:
    pip install pytest
    pytest tests/storage/
"""

import tempfile
from pathlib import Path

import pytest

from storage.config import ObjectStoreConfig
from storage.implementations.local_storage import LocalObjectStore
from storage.implementations.mock_storage import MockObjectStore

# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def mock_object_store():
    """
    Provide a fresh MockObjectStore instance for each test.

    Usage:
        def test_something(mock_object_store):
            mock_object_store.put("videos/clip.mp4", b"data")
    """
    store = MockObjectStore()
    yield store
    store.clear_history()


@pytest.fixture
def temp_storage_dir():
    """
    Provide a temporary directory for storage tests.

    Automatically cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def object_store_config(temp_storage_dir):
    """
    Provide an ObjectStoreConfig pointing at a temp bucket.

    The config file path does not exist, so defaults are used before the
    override.

    Usage:
        def test_with_config(object_store_config):
            store = LocalObjectStore(object_store_config)
    """
    config = ObjectStoreConfig(config_path=temp_storage_dir / "object_store.yaml")
    config.set("base_path", str(temp_storage_dir / "bucket"), save=False)
    return config


@pytest.fixture
def local_object_store(object_store_config):
    """
    Provide LocalObjectStore with temp bucket directory.

    Usage:
        def test_real_store(local_object_store):
            local_object_store.put("videos/clip.mp4", b"data")
    """
    return LocalObjectStore(object_store_config)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as publish tests for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
    config.addinivalue_line("markers", "integration: Full integration tests")
    config.addinivalue_line("markers", "slow: Slow tests (use sparingly)")
