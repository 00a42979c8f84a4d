"""
Publish Controller

High-level coordinator for publish requests.
Turns a caller's request dict into an UploadRequest, runs it through the
router and shapes the response dict the boundary layer returns.

- Clean, simple API for the HTTP boundary
- Handles request validation and object-store reads internally
- Maps every PublishError to an error response
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from publish.errors import (
    MetadataValidationError,
    ObjectStoreReadError,
    PlatformApiError,
    PublishError,
    VideoNotFoundError,
    VideoObjectNotFound,
)
from publish.interfaces.platform_api_interface import PlatformApiInterface
from publish.models.upload_request import UploadRequest, VideoMetadata
from publish.router import PlatformRouter
from publish.utils.auth_utils import format_access_token
from publish.utils.thumbnail_utils import candidates_from_request
from storage.interfaces.storage_interface import ObjectStoreInterface, StorageError

REQUIRED_FIELDS = ("platform", "videoPath", "metadata")


class PublishController:
    """
    Request-dict boundary for the publishing pipeline.

    Usage:
        controller = PublishController(router, store, api)

        response = controller.handle_upload("ya29...", {
            "platform": "youtube",
            "videoPath": "videos/clip.mp4",
            "metadata": {"title": "T", "description": "D"},
            "coverPath-high": "covers/clip.jpg",
        })

        if response["success"]:
            print(response["videoId"])
    """

    def __init__(
        self,
        router: PlatformRouter,
        object_store: ObjectStoreInterface,
        api: Optional[PlatformApiInterface] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize publish controller.

        Args:
            router: Platform router with registered pipelines
            object_store: Store holding the source videos
            api: Platform API for the read-only queries (optional)
            logger: Injected logger (None = module logger)
        """
        self.router = router
        self.object_store = object_store
        self.api = api
        self.logger = logger or logging.getLogger(__name__)

        self.logger.info("Publish Controller initialized")

    # =========================================================================
    # UPLOAD
    # =========================================================================

    def handle_upload(self, access_token: str, body: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Publish the video a request body points at.

        Args:
            access_token: Caller's bearer credential (with or without prefix)
            body: Request dict with platform, videoPath, metadata and optional
                publish_time, YT_channelId and coverPath* keys

        Returns:
            {success, platform, videoId, videoStatus, thumbnailStatus, message}
            or {success: False, error, status} on failure
        """
        request = None
        try:
            request = self.build_request(access_token, body)
            result = self.router.upload(request)

        except PublishError as e:
            self.logger.error(f"❌ Publish failed: {e}")
            return self.error_response(e)

        finally:
            # Validation can fail before the pipeline reads the video
            if request is not None and not request.media_consumed:
                request.media.close()

        thumbnail_status = result.thumbnail_outcome.message
        response = {
            "success": True,
            "platform": body["platform"],
            "videoId": result.media_id,
            "videoStatus": result.video_status,
            "thumbnailStatus": thumbnail_status,
            "message": f"Video uploaded to {body['platform']} ({thumbnail_status})",
            "presetThumbnails": result.preset_thumbnail_urls,
        }
        if result.status_warning:
            response["statusWarning"] = result.status_warning
        return response

    def build_request(self, access_token: str, body: Mapping[str, Any]) -> UploadRequest:
        """
        Validate a request body and open its video.

        The platform is resolved before the object store is touched.

        Raises:
            MetadataValidationError: Missing field or bad metadata
            UnsupportedPlatform: Unknown platform name
            VideoObjectNotFound: videoPath absent from the object store
            ObjectStoreReadError: Object store backend failed
        """
        if not isinstance(body, Mapping):
            raise MetadataValidationError("body", "Request body must be an object")

        missing = [name for name in REQUIRED_FIELDS if not body.get(name)]
        if missing:
            raise MetadataValidationError(
                missing[0],
                f"Missing required fields: {', '.join(missing)}",
            )

        platform = body["platform"]
        self.router.pipeline_for(platform)
        metadata = VideoMetadata.from_dict(body["metadata"])

        video_path = body["videoPath"]
        try:
            video = self.object_store.get(video_path)
        except StorageError as e:
            raise ObjectStoreReadError(video_path, e) from e
        if video is None:
            raise VideoObjectNotFound(video_path)

        self.logger.info(f"Loaded video {video_path} ({video.size or '?'} bytes)")

        return UploadRequest(
            platform=platform,
            media=video.stream,
            metadata=metadata,
            access_token=access_token,
            scheduled_publish_time=body.get("publish_time") or None,
            thumbnail_candidates=candidates_from_request(body),
            channel_id=body.get("YT_channelId"),
        )

    # =========================================================================
    # READ-ONLY QUERIES
    # =========================================================================

    def latest_video(
        self,
        access_token: str,
        channel_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Newest video of a channel, or of the authenticated user.

        Raises:
            PlatformApiError: Non-2xx response
            VideoNotFoundError: No video found
        """
        authorization = format_access_token(access_token, "fetch latest video")
        response = self._require_api().search_latest_video(authorization, channel_id)

        item = self._first_item(response)
        if item is None:
            target = f"channel {channel_id}" if channel_id else "the authenticated user"
            raise VideoNotFoundError(f"No video found for {target}")

        snippet = item.get("snippet") or {}
        return {
            "id": (item.get("id") or {}).get("videoId"),
            "title": snippet.get("title"),
            "description": snippet.get("description"),
            "publishedAt": snippet.get("publishedAt"),
            "thumbnails": snippet.get("thumbnails"),
        }

    def video_details(self, access_token: str, video_id: str) -> Dict[str, Any]:
        """
        Full resource (snippet, status, contentDetails, statistics) of a video.

        Raises:
            PlatformApiError: Non-2xx response
            VideoNotFoundError: Unknown video id
        """
        authorization = format_access_token(access_token, "fetch video details")
        response = self._require_api().get_video_details(video_id, authorization)

        item = self._first_item(response)
        if item is None:
            raise VideoNotFoundError(f"Video not found: {video_id}")
        return item

    def _require_api(self) -> PlatformApiInterface:
        if self.api is None:
            raise PublishError("No platform API configured for queries")
        return self.api

    @staticmethod
    def _first_item(response) -> Optional[Dict[str, Any]]:
        if not response.ok:
            raise PlatformApiError(response.status, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise PlatformApiError(response.status, response.text) from e

        items = payload.get("items") if isinstance(payload, dict) else None
        return items[0] if items else None

    # =========================================================================
    # STATUS
    # =========================================================================

    def health(self) -> Dict[str, Any]:
        """Service health summary"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "objectStore": self.object_store.is_available(),
            "platforms": self.router.get_status(),
        }

    @staticmethod
    def error_response(error: PublishError) -> Dict[str, Any]:
        """Error dict for a PublishError raised outside handle_upload"""
        return {
            "success": False,
            "error": str(error),
            "status": error.status.value,
        }
