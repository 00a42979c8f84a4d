"""
Core Test Configuration and Fixtures

To use pytest:
    pip install pytest
    pytest tests/core/
"""

import logging

import pytest

# =============================================================================
# LOGGING FIXTURES
# =============================================================================


@pytest.fixture
def restore_root_logger():
    """
    Restore root logger handlers and level after the test.

    Usage:
        def test_setup(restore_root_logger):
            setup_logging(log_dir=None)
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def fake_http_session():
    """
    Provide a fake requests session for remote fetch tests.

    Usage:
        def test_fetch(fake_http_session):
            fake_http_session.status_code = 404
    """

    class FakeResponse:
        def __init__(self, session):
            self.status_code = session.status_code
            self.ok = 200 <= session.status_code < 300
            self.reason = session.reason
            self.headers = session.headers
            self.content = session.content

    class FakeSession:
        def __init__(self):
            self.status_code = 200
            self.reason = "OK"
            self.headers = {}
            self.content = b""
            self.error = None
            self.requests = []

        def get(self, url, timeout=None):
            self.requests.append({"url": url, "timeout": timeout})
            if self.error is not None:
                raise self.error
            return FakeResponse(self)

    return FakeSession()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
    config.addinivalue_line("markers", "integration: Full integration tests")
    config.addinivalue_line("markers", "slow: Slow tests (use sparingly)")
