"""
Publish Constants

Centralized constants for the platform publishing module.
Deployment-tunable values live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# YOUTUBE API CONFIGURATION
# =============================================================================

# YouTube API service details (discovery client)
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# Parts requested when re-reading an item after upload
STATUS_QUERY_PARTS = "status"
DETAILS_QUERY_PARTS = "snippet,status,contentDetails,statistics"

# =============================================================================
# METADATA CONFIGURATION
# =============================================================================

PRIVACY_PUBLIC = "public"
PRIVACY_PRIVATE = "private"
PRIVACY_UNLISTED = "unlisted"

VALID_PRIVACY_STATUSES = (PRIVACY_PUBLIC, PRIVACY_PRIVATE, PRIVACY_UNLISTED)

# Items scheduled for later must stay private until publishAt
SCHEDULED_PRIVACY_STATUS = PRIVACY_PRIVATE

# =============================================================================
# MULTIPART CONFIGURATION
# =============================================================================

METADATA_CONTENT_TYPE = "application/json; charset=UTF-8"
VIDEO_CONTENT_TYPE = "video/mp4"
MULTIPART_CONTENT_TYPE = "multipart/related"
CRLF = b"\r\n"

# =============================================================================
# THUMBNAIL CONFIGURATION
# =============================================================================

DEFAULT_THUMBNAIL_CONTENT_TYPE = "image/jpeg"

# Request keys carrying thumbnail locators, highest priority first.
# "coverPath" is the legacy name of "coverPath-default".
THUMBNAIL_CANDIDATE_KEYS = [
    ("coverPath-high", 0),
    ("coverPath-medium", 1),
    ("coverPath-default", 2),
    ("coverPath", 2),
]

# Preset thumbnails generated by YouTube: key -> file name
PRESET_THUMBNAIL_FILES = {
    "default": "default.jpg",
    "medium": "mqdefault.jpg",
    "high": "hqdefault.jpg",
    "standard": "sddefault.jpg",
    "maxres": "maxresdefault.jpg",
}

AUTO_THUMBNAIL_NOTE = (
    "No usable thumbnail path provided; "
    "the platform's auto-generated thumbnail will be used"
)

# =============================================================================
# AUTHORIZATION
# =============================================================================

BEARER_PREFIX = "Bearer "

# =============================================================================
# PLATFORMS & STATUS
# =============================================================================


class Platform(Enum):
    """Supported publishing targets"""

    YOUTUBE = "youtube"
    BILIBILI = "bilibili"


class PublishStatus(Enum):
    """Publish operation status codes"""

    SUCCESS = "success"
    FAILED = "failed"
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    AUTH_ERROR = "auth_error"
    NETWORK_ERROR = "network_error"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    NOT_IMPLEMENTED = "not_implemented"


class ThumbnailState(Enum):
    """Outcome of the best-effort thumbnail step"""

    NOT_ATTEMPTED = "not_attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
