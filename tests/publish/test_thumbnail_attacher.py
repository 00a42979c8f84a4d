"""
Thumbnail Attacher Tests

Tests for the best-effort thumbnail step showing:
- Strict priority selection
- Object-store vs remote URL resolution
- Every failure becomes a failed outcome (never raises)

To run these tests:
    pytest tests/publish/test_thumbnail_attacher.py -v
"""

import pytest

from core.network import RemoteFetchError
from publish.constants import AUTO_THUMBNAIL_NOTE, ThumbnailState
from publish.controllers.thumbnail_attacher import ThumbnailAttacher
from publish.implementations.mock_platform_api import MockPlatformApi
from publish.models.upload_request import ThumbnailCandidate
from publish.utils.thumbnail_utils import (
    candidates_from_request,
    is_remote_url,
    preset_thumbnail_urls,
    select_thumbnail_candidate,
)
from storage.implementations.mock_storage import MockObjectStore

AUTH = "Bearer abc123"
MEDIA_ID = "vid123"


@pytest.fixture
def attacher(mock_api, mock_store_with_objects, fetch_tracker):
    return ThumbnailAttacher(
        mock_api,
        object_store=mock_store_with_objects,
        fetch_remote=fetch_tracker,
    )


# =============================================================================
# SELECTION TESTS
# =============================================================================


@pytest.mark.unit
def test_highest_priority_candidate_wins(all_thumbnail_candidates):
    chosen = select_thumbnail_candidate(all_thumbnail_candidates)

    assert chosen.source == "covers/high.jpg"


@pytest.mark.unit
def test_empty_and_null_sources_are_skipped():
    candidates = [
        ThumbnailCandidate("", priority=0),
        ThumbnailCandidate(None, priority=1),
        ThumbnailCandidate("covers/default.jpg", priority=2),
    ]

    assert select_thumbnail_candidate(candidates).source == "covers/default.jpg"


@pytest.mark.unit
def test_no_usable_candidate_selects_nothing():
    assert select_thumbnail_candidate([ThumbnailCandidate("", priority=0)]) is None
    assert select_thumbnail_candidate([]) is None


@pytest.mark.unit
def test_candidates_from_request_body():
    body = {
        "coverPath-default": "covers/default.jpg",
        "coverPath-high": "covers/high.jpg",
        "coverPath-medium": "",
        "videoPath": "videos/clip.mp4",
    }

    candidates = candidates_from_request(body)

    assert [c.label for c in candidates] == [
        "coverPath-high",
        "coverPath-medium",
        "coverPath-default",
    ]
    assert select_thumbnail_candidate(candidates).source == "covers/high.jpg"


@pytest.mark.unit
def test_legacy_cover_path_used_when_default_empty():
    candidates = candidates_from_request(
        {"coverPath-default": "", "coverPath": "covers/legacy.jpg"},
    )

    assert select_thumbnail_candidate(candidates).source == "covers/legacy.jpg"


@pytest.mark.unit
@pytest.mark.parametrize(
    "locator, expected",
    [
        ("https://cdn.example.com/cover.jpg", True),
        ("http://cdn.example.com/cover.jpg", True),
        ("HTTPS://cdn.example.com/cover.jpg", True),
        ("covers/cover.jpg", False),
        ("httpcovers/cover.jpg", False),
        ("ftp://cdn.example.com/cover.jpg", False),
        ("https:///cover.jpg", False),
    ],
)
def test_is_remote_url(locator, expected):
    assert is_remote_url(locator) is expected


@pytest.mark.unit
def test_preset_thumbnail_urls():
    urls = preset_thumbnail_urls("abc")

    assert urls == {
        "default": "https://i.ytimg.com/vi/abc/default.jpg",
        "medium": "https://i.ytimg.com/vi/abc/mqdefault.jpg",
        "high": "https://i.ytimg.com/vi/abc/hqdefault.jpg",
        "standard": "https://i.ytimg.com/vi/abc/sddefault.jpg",
        "maxres": "https://i.ytimg.com/vi/abc/maxresdefault.jpg",
    }


# =============================================================================
# ATTACH TESTS
# =============================================================================


@pytest.mark.unit_integration
def test_attach_uses_high_priority_object(attacher, mock_api, all_thumbnail_candidates):
    outcome = attacher.attach(MEDIA_ID, all_thumbnail_candidates, AUTH)

    assert outcome.state == ThumbnailState.SUCCEEDED
    assert outcome.source == "covers/high.jpg"

    calls = mock_api.get_calls("set_thumbnail")
    assert len(calls) == 1
    assert calls[0]["media_id"] == MEDIA_ID
    assert calls[0]["data"] == b"high-image"
    assert calls[0]["content_type"] == "image/jpeg"
    assert calls[0]["size"] == len(b"high-image")
    assert calls[0]["authorization"] == AUTH


@pytest.mark.unit_integration
def test_attach_uses_default_when_only_default_given(attacher, mock_api):
    candidates = candidates_from_request(
        {"coverPath-high": "", "coverPath-medium": None, "coverPath-default": "covers/default.jpg"},
    )

    outcome = attacher.attach(MEDIA_ID, candidates, AUTH)

    assert outcome.state == ThumbnailState.SUCCEEDED
    assert outcome.source == "covers/default.jpg"
    assert mock_api.get_calls("set_thumbnail")[0]["data"] == b"default-image"


@pytest.mark.unit
def test_no_candidate_is_not_attempted(attacher, mock_api, mock_store_with_objects):
    outcome = attacher.attach(MEDIA_ID, [], AUTH)

    assert outcome.state == ThumbnailState.NOT_ATTEMPTED
    assert outcome.message == AUTO_THUMBNAIL_NOTE
    assert mock_api.call_count == 0
    assert mock_store_with_objects.get_history == []


@pytest.mark.unit_integration
def test_url_candidate_is_fetched_remotely(attacher, mock_api, fetch_tracker, mock_store_with_objects):
    url = "https://cdn.example.com/cover.webp"

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate(url)], AUTH)

    assert outcome.state == ThumbnailState.SUCCEEDED
    assert fetch_tracker.urls == [url]
    assert mock_store_with_objects.get_history == []
    assert mock_api.get_calls("set_thumbnail")[0]["content_type"] == "image/webp"


@pytest.mark.unit
def test_missing_object_fails_without_fallback(attacher, mock_api):
    """Selection is by non-empty locator; a missing object does not fall through"""
    candidates = [
        ThumbnailCandidate("covers/missing.jpg", priority=0),
        ThumbnailCandidate("covers/default.jpg", priority=2),
    ]

    outcome = attacher.attach(MEDIA_ID, candidates, AUTH)

    assert outcome.state == ThumbnailState.FAILED
    assert outcome.source == "covers/missing.jpg"
    assert "not found" in outcome.reason
    assert mock_api.get_calls("set_thumbnail") == []


@pytest.mark.unit
def test_remote_fetch_error_is_failed_outcome(attacher, fetch_tracker):
    url = "https://cdn.example.com/gone.jpg"
    fetch_tracker.error = RemoteFetchError(url, "Failed to fetch: 404 Not Found", 404)

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate(url)], AUTH)

    assert outcome.state == ThumbnailState.FAILED
    assert "404" in outcome.reason


@pytest.mark.unit
def test_unexpected_error_is_failed_outcome(attacher, fetch_tracker):
    fetch_tracker.error = RuntimeError("boom")

    outcome = attacher.attach(
        MEDIA_ID,
        [ThumbnailCandidate("https://cdn.example.com/cover.jpg")],
        AUTH,
    )

    assert outcome.state == ThumbnailState.FAILED
    assert "boom" in outcome.reason


@pytest.mark.unit
def test_rejected_attach_is_failed_outcome(mock_store_with_objects):
    api = MockPlatformApi(thumbnail_status=403, thumbnail_payload="forbidden")
    attacher = ThumbnailAttacher(api, object_store=mock_store_with_objects)

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate("covers/high.jpg")], AUTH)

    assert outcome.state == ThumbnailState.FAILED
    assert outcome.reason == "403 forbidden"
    assert outcome.message == "Thumbnail upload failed: 403 forbidden"


@pytest.mark.unit
def test_store_failure_is_failed_outcome(mock_api):
    attacher = ThumbnailAttacher(mock_api, object_store=MockObjectStore(fail_on_get=True))

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate("covers/high.jpg")], AUTH)

    assert outcome.state == ThumbnailState.FAILED
    assert mock_api.call_count == 0


@pytest.mark.unit
def test_content_type_falls_back_to_jpeg(mock_api):
    store = MockObjectStore()
    store.put("covers/cover", b"image")
    attacher = ThumbnailAttacher(mock_api, object_store=store)

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate("covers/cover")], AUTH)

    assert outcome.state == ThumbnailState.SUCCEEDED
    assert mock_api.get_calls("set_thumbnail")[0]["content_type"] == "image/jpeg"


@pytest.mark.unit
def test_path_without_object_store_fails(mock_api):
    attacher = ThumbnailAttacher(mock_api)

    outcome = attacher.attach(MEDIA_ID, [ThumbnailCandidate("covers/high.jpg")], AUTH)

    assert outcome.state == ThumbnailState.FAILED
