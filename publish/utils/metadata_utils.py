"""
Metadata Utilities

Normalization of caller metadata and scheduled publish time into the
snippet/status resource YouTube expects in videos.insert.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from publish.constants import SCHEDULED_PRIVACY_STATUS
from publish.errors import InvalidScheduleTime
from publish.models.upload_request import VideoMetadata

logger = logging.getLogger(__name__)

# Explicit timezone designator at the end of the string
_TZ_SUFFIX = re.compile(r"(?:Z|[+-]\d{2}:\d{2})$")

# fromisoformat before 3.11 only accepts 3- or 6-digit fractions
_FRACTION = re.compile(r"\.(\d+)")


@dataclass
class VideoResource:
    """
    Normalized video resource sent as the JSON part of the upload.

    Attributes:
        snippet: title, description, tags, categoryId
        status: privacyStatus and optional publishAt
    """

    snippet: Dict[str, Any]
    status: Dict[str, Any]

    @property
    def privacy_status(self) -> str:
        return self.status["privacyStatus"]

    @property
    def publish_at(self) -> Optional[str]:
        return self.status.get("publishAt")

    def to_body(self) -> Dict[str, Any]:
        """Request body for videos.insert"""
        return {"snippet": dict(self.snippet), "status": dict(self.status)}


def normalize_schedule_time(
    value: str,
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Normalize and validate a scheduled publish time.

    A "Z" (UTC) is appended when the string has no explicit timezone.
    Normalizing an already-suffixed value returns it unchanged.

    Args:
        value: ISO 8601 timestamp, e.g. "2025-04-17T23:57:16"
        log: Logger to use (defaults to module logger)

    Returns:
        Timestamp with explicit timezone, e.g. "2025-04-17T23:57:16Z"

    Raises:
        InvalidScheduleTime: If the value is not a valid calendar instant
            (carries the original caller string)
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidScheduleTime(value)

    formatted = value
    if not _TZ_SUFFIX.search(value):
        formatted = f"{value}Z"
        (log or logger).info(
            f"Publish time has no timezone, assuming UTC: {formatted}",
        )

    if parse_instant(formatted) is None:
        raise InvalidScheduleTime(value)

    return formatted


def parse_instant(value: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 instant with explicit timezone.

    Args:
        value: Timestamp ending in "Z" or "+HH:MM"/"-HH:MM"

    Returns:
        Timezone-aware datetime, or None if not a real calendar instant
    """
    if not _TZ_SUFFIX.search(value) or value[10:11] != "T":
        return None

    iso = value[:-1] + "+00:00" if value.endswith("Z") else value
    iso = _FRACTION.sub(
        lambda m: "." + m.group(1)[:6].ljust(6, "0"),
        iso,
        count=1,
    )

    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        # Out-of-range field (month 13, Feb 30, offset >= 24h, ...)
        return None


def normalize_metadata(
    metadata: VideoMetadata,
    scheduled_publish_time: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> VideoResource:
    """
    Build the snippet/status resource for a video.

    Rules:
    - publishAt is set iff a schedule time is provided
    - a scheduled item is always "private" until its publish time
    - otherwise privacyStatus is the caller's value (default "private")

    Args:
        metadata: Validated caller metadata
        scheduled_publish_time: Optional ISO 8601 publish time
        log: Logger to use (defaults to module logger)

    Returns:
        VideoResource ready for the multipart builder

    Raises:
        InvalidScheduleTime: If the schedule time is malformed
    """
    snippet: Dict[str, Any] = {
        "title": metadata.title,
        "description": metadata.description,
        "categoryId": metadata.category_id,
    }
    if metadata.tags is not None:
        snippet["tags"] = list(metadata.tags)

    if scheduled_publish_time is not None:
        publish_at = normalize_schedule_time(scheduled_publish_time, log=log)
        status = {
            "privacyStatus": SCHEDULED_PRIVACY_STATUS,
            "publishAt": publish_at,
        }
    else:
        status = {"privacyStatus": metadata.privacy_status}

    return VideoResource(snippet=snippet, status=status)
