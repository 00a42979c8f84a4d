"""
Publish Test Configuration and Fixtures

Pytest fixtures shared across publishing tests.
Mirrors the pattern from tests/storage/conftest.py.

To use pytest:
    pip install pytest
    pytest tests/publish/
"""

import io

import pytest

from publish.constants import Platform
from publish.controllers.publish_controller import PublishController
from publish.implementations.bilibili_pipeline import BilibiliPipeline
from publish.implementations.mock_platform_api import MockPlatformApi
from publish.implementations.youtube_pipeline import YouTubePipeline
from publish.models.upload_request import ThumbnailCandidate, UploadRequest, VideoMetadata
from publish.router import PlatformRouter
from storage.implementations.mock_storage import MockObjectStore
from storage.models.stored_object import StoredObject

VIDEO_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"\x01" * 64


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def mock_api():
    """
    Provide a fresh MockPlatformApi for each test.

    Usage:
        def test_something(mock_api):
            ...
            assert mock_api.call_count == 0
    """
    api = MockPlatformApi()
    yield api
    api.clear_history()


@pytest.fixture
def mock_store():
    """Provide an empty MockObjectStore"""
    return MockObjectStore()


@pytest.fixture
def mock_store_with_objects(mock_store):
    """
    Provide MockObjectStore with a video and three thumbnails.

    Keys:
        videos/clip.mp4
        covers/high.jpg, covers/medium.png, covers/default.jpg
    """
    mock_store.put("videos/clip.mp4", VIDEO_BYTES, content_type="video/mp4")
    mock_store.put("covers/high.jpg", b"high-image", content_type="image/jpeg")
    mock_store.put("covers/medium.png", b"medium-image", content_type="image/png")
    mock_store.put("covers/default.jpg", b"default-image", content_type="image/jpeg")
    mock_store.clear_history()
    return mock_store


@pytest.fixture
def fetch_tracker():
    """
    Provide a fake remote fetcher that records requested URLs.

    Usage:
        def test_url(fetch_tracker):
            attacher = ThumbnailAttacher(api, fetch_remote=fetch_tracker)
            ...
            assert fetch_tracker.urls == ["https://..."]
    """

    class FetchTracker:
        def __init__(self):
            self.urls = []
            self.payload = b"remote-image"
            self.content_type = "image/webp"
            self.error = None

        def __call__(self, url):
            self.urls.append(url)
            if self.error is not None:
                raise self.error
            return StoredObject(
                key=url,
                stream=io.BytesIO(self.payload),
                size=len(self.payload),
                content_type=self.content_type,
            )

        def was_called(self) -> bool:
            return len(self.urls) > 0

    return FetchTracker()


# =============================================================================
# REQUEST FIXTURES
# =============================================================================


@pytest.fixture
def sample_metadata():
    """Minimal valid metadata (title and description only)"""
    return VideoMetadata(title="T", description="D")


@pytest.fixture
def make_request(sample_metadata):
    """
    Provide a factory for UploadRequest objects.

    Usage:
        def test_upload(make_request):
            request = make_request(scheduled_publish_time="2030-01-01T10:00:00")
    """

    def _make(**overrides):
        values = {
            "platform": "youtube",
            "media": VIDEO_BYTES,
            "metadata": sample_metadata,
            "access_token": "abc123",
        }
        values.update(overrides)
        return UploadRequest(**values)

    return _make


@pytest.fixture
def all_thumbnail_candidates():
    """High, medium and default candidates, all usable"""
    return [
        ThumbnailCandidate("covers/default.jpg", priority=2, label="coverPath-default"),
        ThumbnailCandidate("covers/high.jpg", priority=0, label="coverPath-high"),
        ThumbnailCandidate("covers/medium.png", priority=1, label="coverPath-medium"),
    ]


# =============================================================================
# PIPELINE FIXTURES
# =============================================================================


@pytest.fixture
def youtube_pipeline(mock_api, mock_store_with_objects, fetch_tracker):
    """YouTubePipeline wired to mocks"""
    return YouTubePipeline(
        mock_api,
        object_store=mock_store_with_objects,
        fetch_remote=fetch_tracker,
    )


@pytest.fixture
def router(youtube_pipeline):
    """Router with YouTube and the Bilibili placeholder registered"""
    return PlatformRouter(
        {
            Platform.YOUTUBE: youtube_pipeline,
            Platform.BILIBILI: BilibiliPipeline(),
        },
    )


@pytest.fixture
def publish_controller(router, mock_store_with_objects, mock_api):
    """PublishController over the mock router, store and API"""
    return PublishController(router, mock_store_with_objects, mock_api)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as storage tests for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
    config.addinivalue_line("markers", "integration: Full integration tests")
    config.addinivalue_line("markers", "slow: Slow tests (use sparingly)")
