"""
Upload Request Models

Data classes describing what the caller asks to publish.
All of them are request-scoped; nothing here outlives one orchestration call.
"""

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Iterable, List, Optional, Union
from uuid import uuid4

from config.settings import DEFAULT_CATEGORY_ID, DEFAULT_PRIVACY_STATUS
from publish.constants import VALID_PRIVACY_STATUSES
from publish.errors import MediaAlreadyConsumedError, MetadataValidationError

# A file-like object, a whole buffer, or an iterator of byte chunks
MediaSource = Union[BinaryIO, bytes, bytearray, memoryview, Iterable[bytes]]


@dataclass
class VideoMetadata:
    """
    Caller-supplied video metadata.

    Attributes:
        title: Video title (required, non-empty)
        description: Video description (required, non-empty)
        tags: Ordered list of tags (optional)
        category_id: Platform category id, as a string
        privacy_status: public, private or unlisted
    """

    title: str
    description: str
    tags: Optional[List[str]] = None
    category_id: str = DEFAULT_CATEGORY_ID
    privacy_status: str = DEFAULT_PRIVACY_STATUS

    def __post_init__(self):
        """Validate fields and coerce category id to string"""
        for name in ("title", "description"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise MetadataValidationError(
                    name,
                    "Metadata must include a non-empty title and description "
                    f"(missing: {name})",
                )

        if self.tags is not None:
            if not isinstance(self.tags, list) or not all(
                isinstance(tag, str) for tag in self.tags
            ):
                raise MetadataValidationError(
                    "tags",
                    f"Metadata tags must be a list of strings: {self.tags!r}",
                )

        if self.category_id is None:
            self.category_id = DEFAULT_CATEGORY_ID
        self.category_id = str(self.category_id)

        if not self.privacy_status:
            self.privacy_status = DEFAULT_PRIVACY_STATUS
        if self.privacy_status not in VALID_PRIVACY_STATUSES:
            raise MetadataValidationError(
                "privacyStatus",
                f"Invalid privacy status: {self.privacy_status}. "
                f"Expected one of {list(VALID_PRIVACY_STATUSES)}",
            )

    @classmethod
    def from_dict(cls, data: Any) -> "VideoMetadata":
        """
        Build metadata from the JSON shape used by callers.

        Args:
            data: Dict with title, description, tags, categoryId, privacyStatus

        Returns:
            Validated VideoMetadata

        Raises:
            MetadataValidationError: If data is not a dict or fields are invalid

        Example:
            meta = VideoMetadata.from_dict({
                "title": "My Video",
                "description": "Uploaded by the publisher",
                "categoryId": "22",
            })
        """
        if not isinstance(data, dict):
            raise MetadataValidationError(
                "metadata",
                "Metadata must be an object with title and description",
            )

        return cls(
            title=data.get("title"),
            description=data.get("description"),
            tags=data.get("tags"),
            category_id=data.get("categoryId", DEFAULT_CATEGORY_ID),
            privacy_status=data.get("privacyStatus") or DEFAULT_PRIVACY_STATUS,
        )


@dataclass
class ThumbnailCandidate:
    """
    One caller-supplied thumbnail locator.

    Lower priority values are tried first. The source may be an object-store
    path or an absolute http(s) URL; None or "" means "not provided".
    """

    source: Optional[str]
    priority: int = 0
    label: str = ""

    @property
    def is_usable(self) -> bool:
        """True if the locator is a non-empty string"""
        return isinstance(self.source, str) and self.source != ""


@dataclass
class UploadRequest:
    """
    Everything needed to publish one video.

    The media source is single-consumption: read_media() may be called once.
    """

    platform: str
    media: MediaSource
    metadata: VideoMetadata
    access_token: str
    scheduled_publish_time: Optional[str] = None
    thumbnail_candidates: List[ThumbnailCandidate] = field(default_factory=list)
    channel_id: Optional[str] = None  # Reference only, logged
    request_id: str = field(default_factory=lambda: uuid4().hex[:12])
    _media_consumed: bool = field(default=False, init=False, repr=False)

    @property
    def media_consumed(self) -> bool:
        """True once read_media() has been called"""
        return self._media_consumed

    def read_media(self) -> bytes:
        """
        Consume the media source into a single buffer.

        File-like sources are closed after reading.

        Returns:
            Complete media payload

        Raises:
            MediaAlreadyConsumedError: If called a second time
            OSError: If the underlying stream fails mid-read
        """
        if self._media_consumed:
            raise MediaAlreadyConsumedError()
        self._media_consumed = True

        source = self.media
        self.media = None

        if isinstance(source, (bytes, bytearray, memoryview)):
            return bytes(source)

        if hasattr(source, "read"):
            try:
                return source.read()
            finally:
                close = getattr(source, "close", None)
                if close is not None:
                    close()

        return b"".join(source)
