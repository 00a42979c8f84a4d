"""
YouTube Pipeline Implementation

Concrete implementation of UploadPipelineInterface for YouTube.

Steps, strictly in order (each depends on the previous one):
1. Normalize metadata and schedule time (no network)
2. Format the bearer credential
3. Consume the media stream and build the multipart body
4. Insert the video and verify its privacy status
5. Attach a thumbnail (best effort)
"""

import logging
from typing import Optional

from core.logging_utils import get_publish_logger
from core.network import fetch_remote_object
from publish.constants import VIDEO_CONTENT_TYPE, Platform
from publish.controllers.thumbnail_attacher import RemoteFetcher, ThumbnailAttacher
from publish.controllers.upload_executor import UploadExecutor
from publish.errors import PlatformUploadError
from publish.interfaces.pipeline_interface import UploadPipelineInterface
from publish.interfaces.platform_api_interface import PlatformApiInterface
from publish.models.upload_request import UploadRequest
from publish.models.upload_result import UploadResult
from publish.utils.auth_utils import format_access_token
from publish.utils.metadata_utils import normalize_metadata
from publish.utils.multipart_utils import MultipartRelatedBuilder
from publish.utils.thumbnail_utils import preset_thumbnail_urls
from storage.interfaces.storage_interface import ObjectStoreInterface


class YouTubePipeline(UploadPipelineInterface):
    """
    Publishes a video to YouTube via the Data API v3.

    The pipeline keeps no per-request state; executor and attacher are
    built for each request with a logger bound to its request id.
    """

    platform = Platform.YOUTUBE

    def __init__(
        self,
        api: PlatformApiInterface,
        object_store: Optional[ObjectStoreInterface] = None,
        fetch_remote: RemoteFetcher = fetch_remote_object,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize YouTube pipeline.

        Args:
            api: Platform API client
            object_store: Store used for path-style thumbnail locators
            fetch_remote: Fetcher for URL-style thumbnail locators
            logger: Injected logger (None = module logger)
        """
        self.api = api
        self.object_store = object_store
        self.fetch_remote = fetch_remote
        self.logger = logger or logging.getLogger(__name__)

    def upload(self, request: UploadRequest) -> UploadResult:
        """
        Publish one video to YouTube.

        Raises:
            MetadataValidationError, InvalidScheduleTime, InvalidCredential:
                Before any network call
            PlatformUploadError, MissingMediaId: Insert failed
        """
        log = get_publish_logger(__name__, self.logger, request_id=request.request_id)
        log.info(
            f"Preparing YouTube upload: {request.metadata.title!r} "
            f"(channel reference: {request.channel_id or 'not provided'})",
        )

        resource = normalize_metadata(
            request.metadata,
            request.scheduled_publish_time,
            log=log,
        )
        authorization = format_access_token(
            request.access_token,
            operation="upload to YouTube",
            log=log,
        )

        try:
            media = request.read_media()
        except OSError as e:
            raise PlatformUploadError(None, f"Failed to read media stream: {e}") from e

        body = (
            MultipartRelatedBuilder()
            .add_metadata(resource.to_body())
            .add_media(media, VIDEO_CONTENT_TYPE)
        )
        del media

        executor = UploadExecutor(self.api, logger=log)
        inserted = executor.execute(body, authorization, resource.privacy_status)

        attacher = ThumbnailAttacher(
            self.api,
            object_store=self.object_store,
            fetch_remote=self.fetch_remote,
            logger=log,
        )
        outcome = attacher.attach(
            inserted.media_id,
            request.thumbnail_candidates,
            authorization,
        )

        log.bind(media_id=inserted.media_id).info(
            f"✅ Publish complete ({outcome.message})",
        )

        return UploadResult(
            platform=self.platform.value,
            media_id=inserted.media_id,
            effective_privacy_status=resource.privacy_status,
            thumbnail_outcome=outcome,
            preset_thumbnail_urls=preset_thumbnail_urls(inserted.media_id),
            media_record=inserted.record,
            publish_at=resource.publish_at,
            status_warning=inserted.status_warning,
        )

    def is_available(self) -> bool:
        return True
