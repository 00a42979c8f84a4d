"""
Multipart Utilities

Two-phase builder for multipart/related upload bodies.

Phase order is fixed by the API: JSON metadata part, then the media part,
then the closing boundary. The builder enforces it structurally:

    body = (
        MultipartRelatedBuilder()
        .add_metadata(resource)          # -> MediaPhase
        .add_media(video_bytes)          # -> MultipartBody (closed)
    )
    session.post(url, data=body, headers={"Content-Type": body.content_type})
"""

import json
import logging
import secrets
from typing import Any, Dict, Iterator, Optional

from config.settings import MULTIPART_BOUNDARY_PREFIX
from publish.constants import (
    CRLF,
    METADATA_CONTENT_TYPE,
    MULTIPART_CONTENT_TYPE,
    VIDEO_CONTENT_TYPE,
)
from publish.errors import MultipartStateError

logger = logging.getLogger(__name__)

# Attempts at finding a boundary absent from both payloads
MAX_BOUNDARY_ATTEMPTS = 8


def generate_boundary(prefix: str = MULTIPART_BOUNDARY_PREFIX) -> str:
    """
    Create a fresh boundary token.

    Args:
        prefix: Fixed prefix

    Returns:
        Prefix plus 32 random hex characters
    """
    return f"{prefix}{secrets.token_hex(16)}"


class MultipartRelatedBuilder:
    """
    Metadata phase of a multipart/related body.

    Usage:
        media_phase = MultipartRelatedBuilder().add_metadata({"snippet": ...})
        body = media_phase.add_media(data)
    """

    def __init__(self, boundary: Optional[str] = None):
        """
        Initialize builder.

        Args:
            boundary: Explicit boundary token (None = generate per body)
        """
        self._explicit_boundary = boundary
        self._used = False

    def add_metadata(self, resource: Dict[str, Any]) -> "MediaPhase":
        """
        Finalize the JSON metadata part.

        Args:
            resource: Video resource (snippet/status)

        Returns:
            MediaPhase that accepts the media payload

        Raises:
            MultipartStateError: If metadata was already added
        """
        if self._used:
            raise MultipartStateError("Metadata part already added")
        self._used = True

        metadata_json = json.dumps(resource, ensure_ascii=False).encode("utf-8")
        return MediaPhase(metadata_json, self._explicit_boundary)


class MediaPhase:
    """Media phase: accepts exactly one media payload"""

    def __init__(self, metadata_json: bytes, boundary: Optional[str] = None):
        self._metadata_json = metadata_json
        self._explicit_boundary = boundary
        self._used = False

    def add_media(
        self,
        media: bytes,
        content_type: str = VIDEO_CONTENT_TYPE,
    ) -> "MultipartBody":
        """
        Append the media payload and close the body.

        The whole payload must already be in memory (no chunked upload).

        Args:
            media: Complete media buffer
            content_type: Media MIME type

        Returns:
            Closed MultipartBody

        Raises:
            MultipartStateError: If media was already added
            ValueError: If an explicit boundary occurs inside a payload
        """
        if self._used:
            raise MultipartStateError("Media part already added")
        self._used = True

        boundary = self._choose_boundary(media)
        return MultipartBody(
            boundary=boundary,
            metadata_json=self._metadata_json,
            media=media,
            media_content_type=content_type,
        )

    def _choose_boundary(self, media: bytes) -> str:
        """Pick a boundary token that appears in neither part"""
        if self._explicit_boundary is not None:
            if self._collides(self._explicit_boundary, media):
                raise ValueError(
                    f"Boundary {self._explicit_boundary!r} occurs in payload",
                )
            return self._explicit_boundary

        for _ in range(MAX_BOUNDARY_ATTEMPTS):
            boundary = generate_boundary()
            if not self._collides(boundary, media):
                return boundary
            logger.debug("Generated boundary collided with payload, retrying")

        raise MultipartStateError("Could not generate a collision-free boundary")

    def _collides(self, boundary: str, media: bytes) -> bool:
        token = boundary.encode("ascii")
        return token in self._metadata_json or token in media


class MultipartBody:
    """
    Closed multipart/related body.

    Iterating yields byte chunks lazily. The body can be iterated once.
    """

    def __init__(
        self,
        boundary: str,
        metadata_json: bytes,
        media: bytes,
        media_content_type: str = VIDEO_CONTENT_TYPE,
    ):
        self.boundary = boundary
        self.media_content_type = media_content_type
        self._metadata_json = metadata_json
        self._media = media
        self._consumed = False
        self._length = sum(len(chunk) for chunk in self._parts())

    @property
    def content_type(self) -> str:
        """Value for the Content-Type request header"""
        return f"{MULTIPART_CONTENT_TYPE}; boundary={self.boundary}"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        # Lets HTTP clients send Content-Length instead of chunked encoding
        return self._length

    def __iter__(self) -> Iterator[bytes]:
        if self._consumed:
            raise MultipartStateError("Multipart body has already been consumed")
        self._consumed = True
        return self._generate()

    def _generate(self) -> Iterator[bytes]:
        for chunk in self._parts():
            yield chunk
        # Drop the reference once the transport has the last chunk
        self._media = b""

    def _parts(self):
        delimiter = b"--" + self.boundary.encode("ascii")
        yield (
            delimiter + CRLF
            + f"Content-Type: {METADATA_CONTENT_TYPE}".encode("ascii") + CRLF
            + CRLF
            + self._metadata_json + CRLF
        )
        yield (
            delimiter + CRLF
            + f"Content-Type: {self.media_content_type}".encode("ascii") + CRLF
            + CRLF
        )
        yield self._media
        yield CRLF + delimiter + b"--" + CRLF
