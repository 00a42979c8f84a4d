"""
Publish Utilities Package

Pure helpers used by the pipeline: credential formatting, metadata
normalization, multipart body construction and thumbnail helpers.
"""

from publish.utils.auth_utils import format_access_token, strip_bearer_prefix
from publish.utils.metadata_utils import (
    VideoResource,
    normalize_metadata,
    normalize_schedule_time,
)
from publish.utils.multipart_utils import MultipartBody, MultipartRelatedBuilder
from publish.utils.thumbnail_utils import (
    candidates_from_request,
    is_remote_url,
    preset_thumbnail_urls,
    select_thumbnail_candidate,
)

__all__ = [
    "MultipartBody",
    "MultipartRelatedBuilder",
    "VideoResource",
    "candidates_from_request",
    "format_access_token",
    "is_remote_url",
    "normalize_metadata",
    "normalize_schedule_time",
    "preset_thumbnail_urls",
    "select_thumbnail_candidate",
    "strip_bearer_prefix",
]
