"""
Mock Platform API Implementation

Simulated YouTube API for testing without network access.
Records every call so tests can assert what was (or was not) sent.
"""

import logging
from typing import Any, BinaryIO, Dict, Iterable, List, Optional, Union
from uuid import uuid4

from publish.errors import PlatformTransportError
from publish.interfaces.platform_api_interface import ApiResponse, PlatformApiInterface


class MockPlatformApi(PlatformApiInterface):
    """
    Mock platform API for testing.

    Useful for:
    - Unit tests of every pipeline step
    - Development without YouTube credentials
    - Simulating platform failures

    Example:
        # Happy path
        api = MockPlatformApi()

        # Thumbnail rejected
        api = MockPlatformApi(thumbnail_status=403)

        # Connection dropped mid-upload
        api = MockPlatformApi(abort_insert=True)
    """

    def __init__(
        self,
        insert_status: int = 200,
        insert_payload: Optional[Any] = None,
        abort_insert: bool = False,
        reported_privacy: Optional[str] = None,
        status_query_status: int = 200,
        thumbnail_status: int = 200,
        thumbnail_payload: Optional[Any] = None,
    ):
        """
        Initialize mock platform API.

        Args:
            insert_status: HTTP status returned by insert_media
            insert_payload: Insert body (None = generated video resource)
            abort_insert: If True, insert_media raises a transport error
                after consuming part of the body
            reported_privacy: privacyStatus the status query reports
                (None = echo the privacy sent in the insert)
            status_query_status: HTTP status returned by query_media_status
            thumbnail_status: HTTP status returned by set_thumbnail
            thumbnail_payload: Thumbnail body (None = generated)
        """
        self.logger = logging.getLogger(__name__)

        self.insert_status = insert_status
        self.insert_payload = insert_payload
        self.abort_insert = abort_insert
        self.reported_privacy = reported_privacy
        self.status_query_status = status_query_status
        self.thumbnail_status = thumbnail_status
        self.thumbnail_payload = thumbnail_payload

        # Canned results for the read-only queries
        self.video_details: Dict[str, Dict[str, Any]] = {}
        self.latest_videos: Dict[Optional[str], Dict[str, Any]] = {}

        # Track calls for testing
        self.calls: List[Dict[str, Any]] = []
        self._inserted: Dict[str, Dict[str, Any]] = {}

        self.logger.debug("[MOCK] Platform API initialized")

    def _record(self, call: str, **details: Any) -> None:
        self.calls.append({"call": call, **details})

    # =========================================================================
    # PLATFORM CALLS
    # =========================================================================

    def insert_media(
        self,
        body: Iterable[bytes],
        content_type: str,
        authorization: str,
    ) -> ApiResponse:
        chunks = []
        for chunk in body:
            chunks.append(bytes(chunk))
            if self.abort_insert:
                self._record(
                    "insert_media",
                    authorization=authorization,
                    content_type=content_type,
                    body=b"".join(chunks),
                    aborted=True,
                )
                raise PlatformTransportError("Connection aborted (simulated)")

        raw_body = b"".join(chunks)
        self._record(
            "insert_media",
            authorization=authorization,
            content_type=content_type,
            body=raw_body,
        )

        if self.insert_status >= 300:
            return ApiResponse(
                status=self.insert_status,
                payload=self.insert_payload or {"error": {"message": "Simulated"}},
            )

        if self.insert_payload is not None:
            return ApiResponse(status=self.insert_status, payload=self.insert_payload)

        video_id = f"mock_{uuid4().hex[:11]}"
        resource = {
            "kind": "youtube#video",
            "id": video_id,
            "status": {"privacyStatus": self._sent_privacy(raw_body)},
        }
        self._inserted[video_id] = resource
        return ApiResponse(status=self.insert_status, payload=resource)

    @staticmethod
    def _sent_privacy(raw_body: bytes) -> Optional[str]:
        """Find the privacyStatus sent in the JSON part"""
        for privacy in ("private", "public", "unlisted"):
            if f'"privacyStatus": "{privacy}"'.encode() in raw_body:
                return privacy
        return None

    def query_media_status(self, media_id: str, authorization: str) -> ApiResponse:
        self._record("query_media_status", media_id=media_id, authorization=authorization)

        if self.status_query_status >= 300:
            return ApiResponse(status=self.status_query_status, payload="Simulated error")

        resource = self._inserted.get(media_id)
        if resource is None:
            return ApiResponse(status=200, payload={"items": []})

        privacy = self.reported_privacy or resource["status"]["privacyStatus"]
        return ApiResponse(
            status=200,
            payload={"items": [{"id": media_id, "status": {"privacyStatus": privacy}}]},
        )

    def set_thumbnail(
        self,
        media_id: str,
        image: Union[BinaryIO, bytes],
        content_type: str,
        authorization: str,
        size: Optional[int] = None,
    ) -> ApiResponse:
        data = image if isinstance(image, bytes) else image.read()
        self._record(
            "set_thumbnail",
            media_id=media_id,
            content_type=content_type,
            size=size,
            data=data,
            authorization=authorization,
        )

        if self.thumbnail_status >= 300:
            return ApiResponse(
                status=self.thumbnail_status,
                payload=self.thumbnail_payload or "Simulated thumbnail failure",
            )

        return ApiResponse(
            status=self.thumbnail_status,
            payload=self.thumbnail_payload or {"kind": "youtube#thumbnailSetResponse"},
        )

    def get_video_details(self, video_id: str, authorization: str) -> ApiResponse:
        self._record("get_video_details", video_id=video_id, authorization=authorization)
        item = self.video_details.get(video_id)
        return ApiResponse(status=200, payload={"items": [item] if item else []})

    def search_latest_video(
        self,
        authorization: str,
        channel_id: Optional[str] = None,
    ) -> ApiResponse:
        self._record("search_latest_video", channel_id=channel_id, authorization=authorization)
        item = self.latest_videos.get(channel_id)
        return ApiResponse(status=200, payload={"items": [item] if item else []})

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_calls(self, call: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get recorded calls.

        Args:
            call: Only calls with this name (None = all)
        """
        if call is None:
            return list(self.calls)
        return [record for record in self.calls if record["call"] == call]

    def get_last_call(self) -> Optional[Dict[str, Any]]:
        return self.calls[-1] if self.calls else None

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def clear_history(self) -> None:
        self.calls.clear()
        self.logger.debug("[MOCK] Call history cleared")
