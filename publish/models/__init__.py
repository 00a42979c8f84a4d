"""
Models Package

Request and result data classes for the publishing pipeline.
"""

from publish.models.upload_request import (
    ThumbnailCandidate,
    UploadRequest,
    VideoMetadata,
)
from publish.models.upload_result import InsertedMedia, ThumbnailOutcome, UploadResult

__all__ = [
    "InsertedMedia",
    "ThumbnailCandidate",
    "ThumbnailOutcome",
    "UploadRequest",
    "UploadResult",
    "VideoMetadata",
]
