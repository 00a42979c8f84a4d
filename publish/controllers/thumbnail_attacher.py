"""
Thumbnail Attacher

Best-effort thumbnail step that runs after a successful media insert.

Picks the highest-priority usable candidate, reads it from the object
store or a remote URL, and calls thumbnails.set for the new video.
Nothing in this step can fail the upload: every error becomes a
ThumbnailOutcome.failed(reason).
"""

import logging
from typing import Callable, Iterable, Optional

from core.logging_utils import get_publish_logger
from core.network import RemoteFetchError, fetch_remote_object
from publish.constants import DEFAULT_THUMBNAIL_CONTENT_TYPE
from publish.errors import PublishError
from publish.interfaces.platform_api_interface import PlatformApiInterface
from publish.models.upload_request import ThumbnailCandidate
from publish.models.upload_result import ThumbnailOutcome
from publish.utils.thumbnail_utils import is_remote_url, select_thumbnail_candidate
from storage.interfaces.storage_interface import ObjectStoreInterface, StorageError
from storage.models.stored_object import StoredObject


class ThumbnailNotFound(Exception):
    """Selected thumbnail object is absent from the object store"""


RemoteFetcher = Callable[[str], StoredObject]


class ThumbnailAttacher:
    """
    Resolves and attaches a thumbnail to an existing video.

    Usage:
        attacher = ThumbnailAttacher(api, object_store)
        outcome = attacher.attach("dQw4w9WgXcQ", candidates, "Bearer ya29...")
        print(outcome.message)
    """

    def __init__(
        self,
        api: PlatformApiInterface,
        object_store: Optional[ObjectStoreInterface] = None,
        fetch_remote: RemoteFetcher = fetch_remote_object,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize thumbnail attacher.

        Args:
            api: Platform API client (thumbnails.set)
            object_store: Store for path-style locators (None = paths fail)
            fetch_remote: Function fetching URL-style locators
            logger: Injected logger (None = module logger)
        """
        self.api = api
        self.object_store = object_store
        self.fetch_remote = fetch_remote
        self.logger = logger or logging.getLogger(__name__)

    def attach(
        self,
        media_id: str,
        candidates: Iterable[ThumbnailCandidate],
        authorization: str,
    ) -> ThumbnailOutcome:
        """
        Attach the best available thumbnail.

        Args:
            media_id: Id of the already-created video
            candidates: Thumbnail candidates (any order; priority decides)
            authorization: "Bearer <token>" header value

        Returns:
            ThumbnailOutcome (never raises)
        """
        log = get_publish_logger(__name__, self.logger, media_id=media_id)

        candidate = select_thumbnail_candidate(candidates)
        if candidate is None:
            log.info("No thumbnail provided, platform will auto-generate one")
            return ThumbnailOutcome.not_attempted()

        source = candidate.source

        try:
            thumbnail = self.resolve(source, log)
            with thumbnail:
                response = self.api.set_thumbnail(
                    media_id,
                    thumbnail.stream,
                    thumbnail.content_type or DEFAULT_THUMBNAIL_CONTENT_TYPE,
                    authorization,
                    size=thumbnail.size,
                )

        except (ThumbnailNotFound, RemoteFetchError, StorageError, PublishError) as e:
            log.error(f"❌ Thumbnail processing failed: {e}")
            return ThumbnailOutcome.failed(str(e), source=source)

        except Exception as e:
            # Thumbnail problems must never fail the upload
            log.error(f"❌ Unexpected thumbnail error: {e}", exc_info=True)
            return ThumbnailOutcome.failed(f"Unexpected error: {e}", source=source)

        if not response.ok:
            reason = f"{response.status} {response.text}"
            log.error(f"❌ Thumbnail upload rejected: {reason}")
            return ThumbnailOutcome.failed(reason, source=source)

        log.info(f"✅ Thumbnail set from {source}")
        return ThumbnailOutcome.succeeded(source)

    def resolve(self, source: str, log=None) -> StoredObject:
        """
        Open a thumbnail locator.

        Args:
            source: Absolute http(s) URL or object-store path

        Returns:
            StoredObject with stream, optional size and content type

        Raises:
            ThumbnailNotFound: Path absent from the object store
            RemoteFetchError: URL fetch failed
            StorageError: Object store backend failure
        """
        log = log or self.logger

        if is_remote_url(source):
            log.info(f"Fetching thumbnail from URL: {source}")
            return self.fetch_remote(source)

        log.info(f"Reading thumbnail from object store: {source}")
        if self.object_store is None:
            raise ThumbnailNotFound(f"No object store configured for {source}")

        thumbnail = self.object_store.get(source)
        if thumbnail is None:
            raise ThumbnailNotFound(f"Thumbnail not found in object store: {source}")
        return thumbnail
