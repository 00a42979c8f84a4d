"""
Publish Errors

Exception hierarchy for the publishing pipeline.

Every error carries a PublishStatus so the boundary layer can map it to a
response without inspecting message text. Validation errors are raised before
any network call; upload-fatal errors abort the whole request; thumbnail and
verification problems never raise (they are recorded on the result).
"""

from typing import Any, Optional

from publish.constants import PublishStatus


class PublishError(Exception):
    """
    Base exception for publishing errors.

    Examples:
    - Invalid metadata or schedule time
    - Platform rejected the upload
    - Platform not supported
    """

    def __init__(self, message: str, status: PublishStatus = PublishStatus.FAILED):
        super().__init__(message)
        self.status = status


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class MetadataValidationError(PublishError):
    """Caller-supplied metadata is missing a field or has a bad value"""

    def __init__(self, field: str, message: str):
        super().__init__(message, status=PublishStatus.INVALID_REQUEST)
        self.field = field


class InvalidScheduleTime(PublishError):
    """Scheduled publish time is not a valid ISO 8601 instant"""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid publish time format: {value}. "
            f"Expected ISO 8601 (e.g. 2025-04-17T23:57:16Z)",
            status=PublishStatus.INVALID_REQUEST,
        )
        self.value = value


class InvalidCredential(PublishError):
    """Access token missing or empty"""

    def __init__(self, message: str = "Missing access token"):
        super().__init__(message, status=PublishStatus.AUTH_ERROR)


class UnsupportedPlatform(PublishError):
    """Platform name does not map to any pipeline"""

    def __init__(self, name: Any):
        super().__init__(
            f"Unsupported platform: {name}",
            status=PublishStatus.UNSUPPORTED_PLATFORM,
        )
        self.name = name


class VideoObjectNotFound(PublishError):
    """Source video object is absent from the object store"""

    def __init__(self, path: str):
        super().__init__(
            f"Video file not found in object store: {path}",
            status=PublishStatus.NOT_FOUND,
        )
        self.path = path


class ObjectStoreReadError(PublishError):
    """Object store backend failed while reading the source video"""

    def __init__(self, path: str, reason: Any):
        super().__init__(
            f"Failed to read video from object store: {path} ({reason})",
            status=PublishStatus.NETWORK_ERROR,
        )
        self.path = path


# =============================================================================
# UPLOAD-FATAL ERRORS
# =============================================================================


class PlatformUploadError(PublishError):
    """Media insert failed (non-2xx response or aborted transport)"""

    def __init__(self, status_code: Optional[int], body: Any):
        if status_code is None:
            message = f"Video upload aborted: {body}"
        else:
            message = f"YouTube API video upload error: {status_code} {body}"
        super().__init__(message, status=_status_for_http(status_code))
        self.status_code = status_code
        self.body = body


class MissingMediaId(PublishError):
    """Insert succeeded at HTTP level but the response carries no id"""

    def __init__(self, record: Any):
        super().__init__(
            f"Video upload succeeded but no video id was returned: {record}",
        )
        self.record = record


class PlatformTransportError(PublishError):
    """
    Connection-level failure raised by platform API implementations.

    Raised instead of a response when the request never completed
    (connection reset, aborted stream, DNS failure).
    """

    def __init__(self, message: str):
        super().__init__(message, status=PublishStatus.NETWORK_ERROR)


class PlatformApiError(PublishError):
    """Non-2xx response from a read-only platform query"""

    def __init__(self, status_code: int, body: Any):
        super().__init__(
            f"YouTube API error ({status_code}): {body}",
            status=_status_for_http(status_code),
        )
        self.status_code = status_code
        self.body = body


class VideoNotFoundError(PublishError):
    """A platform query returned no items"""

    def __init__(self, message: str):
        super().__init__(message, status=PublishStatus.NOT_FOUND)


# =============================================================================
# CAPABILITY / MISUSE ERRORS
# =============================================================================


class PlatformNotImplemented(PublishError):
    """Permanent capability gap, never a transient condition"""

    def __init__(self, platform_name: str):
        super().__init__(
            f"{platform_name} upload is not implemented yet",
            status=PublishStatus.NOT_IMPLEMENTED,
        )
        self.platform_name = platform_name


class MediaAlreadyConsumedError(PublishError):
    """The single-consumption media stream was read a second time"""

    def __init__(self):
        super().__init__("Media stream has already been consumed")


class MultipartStateError(PublishError):
    """Multipart builder phase used out of order or more than once"""


def _status_for_http(status_code: Optional[int]) -> PublishStatus:
    """
    Map an HTTP status code to a PublishStatus.

    Args:
        status_code: HTTP status, or None for transport failures

    Returns:
        Appropriate PublishStatus enum
    """
    if status_code is None:
        return PublishStatus.NETWORK_ERROR
    if status_code in [401, 403]:
        return PublishStatus.AUTH_ERROR
    if status_code == 429:
        return PublishStatus.QUOTA_EXCEEDED
    if status_code == 404:
        return PublishStatus.NOT_FOUND
    if status_code >= 500:
        return PublishStatus.NETWORK_ERROR
    return PublishStatus.FAILED
