"""
YouTube Pipeline Tests

End-to-end tests of the YouTube pipeline against mock collaborators:
- Happy path result shape
- Validation failures happen before any network call
- Thumbnail failures never lose the created video
- Media is consumed exactly once

To run these tests:
    pytest tests/publish/test_youtube_pipeline.py -v
"""

import io
import json
import logging

import pytest

from publish.constants import ThumbnailState
from publish.errors import (
    InvalidCredential,
    InvalidScheduleTime,
    MediaAlreadyConsumedError,
    MetadataValidationError,
    PlatformUploadError,
)
from publish.implementations.mock_platform_api import MockPlatformApi
from publish.implementations.youtube_pipeline import YouTubePipeline
from publish.models.upload_request import ThumbnailCandidate, VideoMetadata


def sent_resource(api):
    """Parse the JSON metadata part of the recorded insert"""
    raw = api.get_calls("insert_media")[0]["body"]
    metadata_part = raw.split(b"\r\n\r\n", 1)[1].split(b"\r\n", 1)[0]
    return json.loads(metadata_part)


# =============================================================================
# HAPPY PATH TESTS
# =============================================================================


@pytest.mark.integration
def test_minimal_upload_scenario(youtube_pipeline, make_request, mock_api):
    """
    Title/description only, no thumbnail, no schedule.

    Should:
    - Send categoryId "22" and privacy "private"
    - Skip the thumbnail step
    - Return five preset thumbnail URLs for the new id
    """
    result = youtube_pipeline.upload(make_request())

    resource = sent_resource(mock_api)
    assert resource["snippet"] == {"title": "T", "description": "D", "categoryId": "22"}
    assert resource["status"] == {"privacyStatus": "private"}

    assert result.media_id.startswith("mock_")
    assert result.effective_privacy_status == "private"
    assert result.thumbnail_outcome.state == ThumbnailState.NOT_ATTEMPTED
    assert result.status_warning is None
    assert result.publish_at is None

    assert len(result.preset_thumbnail_urls) == 5
    assert all(result.media_id in url for url in result.preset_thumbnail_urls.values())
    assert mock_api.get_calls("set_thumbnail") == []


@pytest.mark.integration
def test_upload_sends_metadata_before_media(youtube_pipeline, make_request, mock_api):
    youtube_pipeline.upload(make_request(media=b"MEDIA-PAYLOAD"))

    raw = mock_api.get_calls("insert_media")[0]["body"]
    assert raw.index(b'"title"') < raw.index(b"MEDIA-PAYLOAD")


@pytest.mark.integration
def test_scheduled_upload_is_private(youtube_pipeline, make_request, mock_api):
    request = make_request(
        metadata=VideoMetadata(title="T", description="D", privacy_status="public"),
        scheduled_publish_time="2030-01-01T10:00:00",
    )

    result = youtube_pipeline.upload(request)

    assert sent_resource(mock_api)["status"] == {
        "privacyStatus": "private",
        "publishAt": "2030-01-01T10:00:00Z",
    }
    assert result.effective_privacy_status == "private"
    assert result.publish_at == "2030-01-01T10:00:00Z"
    assert result.status_warning is None


@pytest.mark.integration
def test_upload_with_thumbnail(youtube_pipeline, make_request, mock_api, all_thumbnail_candidates):
    result = youtube_pipeline.upload(
        make_request(thumbnail_candidates=all_thumbnail_candidates),
    )

    assert result.thumbnail_outcome.state == ThumbnailState.SUCCEEDED
    assert result.thumbnail_outcome.source == "covers/high.jpg"
    assert mock_api.get_calls("set_thumbnail")[0]["media_id"] == result.media_id


@pytest.mark.integration
def test_credential_prefix_is_normalized(youtube_pipeline, make_request, mock_api):
    youtube_pipeline.upload(make_request(access_token="Bearer abc123"))

    assert all(call["authorization"] == "Bearer abc123" for call in mock_api.calls)


# =============================================================================
# FAILURE TESTS
# =============================================================================


@pytest.mark.integration
def test_thumbnail_failure_keeps_media_id(mock_store_with_objects, make_request):
    api = MockPlatformApi(thumbnail_status=500)
    pipeline = YouTubePipeline(api, object_store=mock_store_with_objects)

    result = pipeline.upload(
        make_request(thumbnail_candidates=[ThumbnailCandidate("covers/high.jpg")]),
    )

    assert result.media_id.startswith("mock_")
    assert result.thumbnail_outcome.state == ThumbnailState.FAILED


@pytest.mark.unit_integration
def test_malformed_schedule_makes_no_calls(youtube_pipeline, make_request, mock_api):
    request = make_request(scheduled_publish_time="2025-02-30T10:00:00")

    with pytest.raises(InvalidScheduleTime) as exc_info:
        youtube_pipeline.upload(request)

    assert exc_info.value.value == "2025-02-30T10:00:00"
    assert mock_api.call_count == 0
    assert not request.media_consumed


@pytest.mark.unit_integration
def test_empty_token_makes_no_calls(youtube_pipeline, make_request, mock_api):
    with pytest.raises(InvalidCredential):
        youtube_pipeline.upload(make_request(access_token=""))

    assert mock_api.call_count == 0


@pytest.mark.unit
def test_invalid_metadata_is_rejected_at_construction():
    with pytest.raises(MetadataValidationError):
        VideoMetadata(title="", description="D")


@pytest.mark.unit_integration
def test_insert_failure_propagates(mock_store_with_objects, make_request):
    api = MockPlatformApi(insert_status=400)
    pipeline = YouTubePipeline(api, object_store=mock_store_with_objects)

    with pytest.raises(PlatformUploadError) as exc_info:
        pipeline.upload(make_request(thumbnail_candidates=[ThumbnailCandidate("covers/high.jpg")]))

    assert exc_info.value.status_code == 400
    assert api.get_calls("set_thumbnail") == []


@pytest.mark.unit_integration
def test_broken_media_stream_is_upload_error(youtube_pipeline, make_request, mock_api):
    class BrokenStream:
        def read(self):
            raise OSError("connection reset while reading object")

        def close(self):
            pass

    with pytest.raises(PlatformUploadError) as exc_info:
        youtube_pipeline.upload(make_request(media=BrokenStream()))

    assert exc_info.value.status_code is None
    assert mock_api.call_count == 0


# =============================================================================
# MEDIA CONSUMPTION TESTS
# =============================================================================


@pytest.mark.unit_integration
def test_media_is_consumed_once(youtube_pipeline, make_request):
    request = make_request()
    youtube_pipeline.upload(request)

    assert request.media_consumed
    with pytest.raises(MediaAlreadyConsumedError):
        youtube_pipeline.upload(request)


@pytest.mark.unit_integration
def test_file_like_media_is_closed(youtube_pipeline, make_request, mock_api):
    stream = io.BytesIO(b"stream-payload")

    youtube_pipeline.upload(make_request(media=stream))

    assert stream.closed
    assert b"stream-payload" in mock_api.get_calls("insert_media")[0]["body"]


@pytest.mark.unit_integration
def test_chunked_media_is_joined(youtube_pipeline, make_request, mock_api):
    youtube_pipeline.upload(make_request(media=iter([b"part-1|", b"part-2"])))

    assert b"part-1|part-2" in mock_api.get_calls("insert_media")[0]["body"]


# =============================================================================
# LOGGING TESTS
# =============================================================================


@pytest.mark.unit_integration
def test_log_records_carry_request_id(youtube_pipeline, make_request, caplog):
    caplog.set_level(logging.INFO)
    request = make_request(request_id="req-42")

    result = youtube_pipeline.upload(request)

    tagged = [record for record in caplog.records if getattr(record, "request_id", None) == "req-42"]
    assert tagged
    assert any(getattr(record, "media_id", None) == result.media_id for record in tagged)


@pytest.mark.unit_integration
def test_injected_logger_is_used(mock_api, make_request):
    logger = logging.getLogger("tests.injected")
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        YouTubePipeline(mock_api, logger=logger).upload(make_request())
    finally:
        logger.removeHandler(handler)

    assert records
    assert all(record.name == "tests.injected" for record in records)
