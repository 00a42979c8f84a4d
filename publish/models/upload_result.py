"""
Upload Result Models

Data classes returned by the publishing pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from publish.constants import AUTO_THUMBNAIL_NOTE, ThumbnailState


@dataclass
class ThumbnailOutcome:
    """
    Result of the best-effort thumbnail step.

    Attributes:
        state: not_attempted, succeeded or failed
        source: Candidate path/URL actually used (if any)
        reason: Failure reason or explanatory note
    """

    state: ThumbnailState
    source: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def not_attempted(cls, note: str = AUTO_THUMBNAIL_NOTE) -> "ThumbnailOutcome":
        return cls(state=ThumbnailState.NOT_ATTEMPTED, reason=note)

    @classmethod
    def succeeded(cls, source: str) -> "ThumbnailOutcome":
        return cls(state=ThumbnailState.SUCCEEDED, source=source)

    @classmethod
    def failed(cls, reason: str, source: Optional[str] = None) -> "ThumbnailOutcome":
        return cls(state=ThumbnailState.FAILED, source=source, reason=reason)

    @property
    def message(self) -> str:
        """Human-readable status line"""
        if self.state == ThumbnailState.SUCCEEDED:
            return f"Thumbnail uploaded (using: {self.source})"
        if self.state == ThumbnailState.FAILED:
            return f"Thumbnail upload failed: {self.reason}"
        return self.reason or AUTO_THUMBNAIL_NOTE


@dataclass
class InsertedMedia:
    """
    Media item created by the insert call.

    Attributes:
        media_id: Platform id of the new item
        record: Parsed insert response (id, snippet, status, ...)
        status_warning: Set when post-upload verification disagreed
    """

    media_id: str
    record: Dict[str, Any]
    status_warning: Optional[str] = None


@dataclass
class UploadResult:
    """
    Normalized result of a successful publish.

    A result is only ever produced for a successful media insert.
    Fatal problems raise PublishError subclasses instead.
    """

    platform: str
    media_id: str
    effective_privacy_status: str
    thumbnail_outcome: ThumbnailOutcome
    preset_thumbnail_urls: Dict[str, str] = field(default_factory=dict)
    media_record: Dict[str, Any] = field(default_factory=dict)
    publish_at: Optional[str] = None
    status_warning: Optional[str] = None

    @property
    def video_status(self) -> Dict[str, Any]:
        """Status block from the platform record, or the one we requested"""
        status = self.media_record.get("status")
        if isinstance(status, dict):
            return status

        requested = {"privacyStatus": self.effective_privacy_status}
        if self.publish_at:
            requested["publishAt"] = self.publish_at
        return requested

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view used by the boundary layer"""
        return {
            "platform": self.platform,
            "mediaId": self.media_id,
            "effectivePrivacyStatus": self.effective_privacy_status,
            "publishAt": self.publish_at,
            "thumbnailOutcome": {
                "state": self.thumbnail_outcome.state.value,
                "source": self.thumbnail_outcome.source,
                "reason": self.thumbnail_outcome.reason,
            },
            "presetThumbnails": dict(self.preset_thumbnail_urls),
            "statusWarning": self.status_warning,
        }
