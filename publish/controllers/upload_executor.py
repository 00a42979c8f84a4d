"""
Upload Executor

Sends the multipart body to the media-insert endpoint, extracts the new
video id and verifies the resulting privacy status.

Verification is soft: YouTube applies writes asynchronously, so a
mismatch is recorded as a warning and the upload still counts as done.
"""

import logging
from typing import Any, Dict, Optional

from core.logging_utils import get_publish_logger
from publish.errors import MissingMediaId, PlatformTransportError, PlatformUploadError
from publish.interfaces.platform_api_interface import PlatformApiInterface
from publish.models.upload_result import InsertedMedia
from publish.utils.multipart_utils import MultipartBody


class UploadExecutor:
    """
    Executes the media insert and the post-upload status check.

    One attempt per call; nothing is retried.

    Usage:
        executor = UploadExecutor(api)
        inserted = executor.execute(body, "Bearer ya29...", "private")
        print(inserted.media_id)
    """

    def __init__(
        self,
        api: PlatformApiInterface,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize executor.

        Args:
            api: Platform API client
            logger: Injected logger (None = module logger)
        """
        self.api = api
        self.logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        body: MultipartBody,
        authorization: str,
        expected_privacy: str,
    ) -> InsertedMedia:
        """
        Upload the body and verify the created item.

        Args:
            body: Closed multipart body (consumed here)
            authorization: "Bearer <token>" header value
            expected_privacy: privacyStatus we asked for

        Returns:
            InsertedMedia with id, raw record and optional status warning

        Raises:
            PlatformUploadError: Non-2xx insert response or aborted transport
            MissingMediaId: 2xx response without an id
        """
        log = get_publish_logger(__name__, self.logger)
        log.info(f"Uploading video ({len(body)} bytes)")

        try:
            response = self.api.insert_media(body, body.content_type, authorization)
        except PlatformTransportError as e:
            log.error(f"❌ Upload aborted by transport: {e}")
            raise PlatformUploadError(None, str(e)) from e

        if not response.ok:
            log.error(f"❌ Upload rejected: {response.status} {response.text}")
            raise PlatformUploadError(response.status, response.text)

        record = self._parse_record(response)
        media_id = record.get("id")
        if not media_id:
            raise MissingMediaId(record)

        log = log.bind(media_id=media_id)
        log.info(f"✅ Video uploaded: {media_id}")

        warning = self.verify_privacy_status(media_id, authorization, expected_privacy)
        return InsertedMedia(media_id=media_id, record=record, status_warning=warning)

    def _parse_record(self, response) -> Dict[str, Any]:
        """Parse insert response; non-JSON counts as a missing id"""
        try:
            record = response.json()
        except ValueError as e:
            raise MissingMediaId(response.text) from e

        if not isinstance(record, dict):
            raise MissingMediaId(record)
        return record

    def verify_privacy_status(
        self,
        media_id: str,
        authorization: str,
        expected_privacy: str,
    ) -> Optional[str]:
        """
        Re-read the item's privacy status and compare.

        Never raises for platform problems.

        Args:
            media_id: Id of the new item
            authorization: "Bearer <token>" header value
            expected_privacy: Value sent in the insert

        Returns:
            Warning message, or None if the status matched
        """
        log = get_publish_logger(__name__, self.logger, media_id=media_id)

        try:
            response = self.api.query_media_status(media_id, authorization)
        except PlatformTransportError as e:
            warning = f"Status verification failed: {e}"
            log.warning(warning)
            return warning

        if not response.ok:
            warning = (
                f"Status verification failed: {response.status} {response.text}"
            )
            log.warning(warning)
            return warning

        actual = self._extract_privacy_status(response)
        if actual != expected_privacy:
            warning = (
                f"Privacy status verification failed: "
                f"expected {expected_privacy} but got {actual}"
            )
            log.warning(warning)
            return warning

        log.debug(f"Privacy status verified: {actual}")
        return None

    @staticmethod
    def _extract_privacy_status(response) -> Optional[str]:
        """items[0].status.privacyStatus, or None if any level is missing"""
        try:
            payload = response.json()
        except ValueError:
            return None

        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None

        status = items[0].get("status")
        if not isinstance(status, dict):
            return None
        return status.get("privacyStatus")
