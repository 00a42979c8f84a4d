"""
Platform API Interface

Abstract interface for the bearer-token media platform API.
Follows Dependency Inversion Principle - the pipeline depends on this
abstraction, not on the concrete HTTP client, so every step can be tested
against a recording mock.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, BinaryIO, Iterable, Optional, Union


@dataclass
class ApiResponse:
    """
    Plain request/response result of one platform call.

    Attributes:
        status: HTTP status code
        payload: Parsed JSON body (dict) or raw text if not JSON
    """

    status: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        """True for 2xx responses"""
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body as text, for error messages"""
        if isinstance(self.payload, str):
            return self.payload
        if self.payload is None:
            return ""
        return json.dumps(self.payload, ensure_ascii=False)

    def json(self) -> Any:
        """
        Body as parsed JSON.

        Returns:
            The payload if it is already structured, else json.loads(text)

        Raises:
            ValueError: If the body is not valid JSON
        """
        if isinstance(self.payload, (dict, list)):
            return self.payload
        return json.loads(self.text)


class PlatformApiInterface(ABC):
    """
    Abstract base class for media platform API clients.

    Every call takes the already-normalized Authorization header value.
    Implementations return ApiResponse for any completed HTTP exchange
    (including non-2xx) and raise PlatformTransportError when the
    request could not complete at all.
    """

    @abstractmethod
    def insert_media(
        self,
        body: Iterable[bytes],
        content_type: str,
        authorization: str,
    ) -> ApiResponse:
        """
        Create a media item from a multipart/related body.

        Args:
            body: Lazily produced byte chunks of the multipart body
            content_type: multipart/related content type with boundary
            authorization: "Bearer <token>" header value

        Returns:
            ApiResponse with the created resource on success
        """

    @abstractmethod
    def query_media_status(self, media_id: str, authorization: str) -> ApiResponse:
        """
        Re-read the status block of a media item.

        Args:
            media_id: Platform id of the item
            authorization: "Bearer <token>" header value

        Returns:
            ApiResponse with {"items": [{"status": {...}}]}
        """

    @abstractmethod
    def set_thumbnail(
        self,
        media_id: str,
        image: Union[BinaryIO, bytes],
        content_type: str,
        authorization: str,
        size: Optional[int] = None,
    ) -> ApiResponse:
        """
        Attach a still image as the thumbnail of an existing item.

        Args:
            media_id: Platform id of the item
            image: Image bytes or readable stream
            content_type: Image MIME type
            authorization: "Bearer <token>" header value
            size: Declared Content-Length (optional)

        Returns:
            ApiResponse (JSON or text body)
        """

    @abstractmethod
    def get_video_details(self, video_id: str, authorization: str) -> ApiResponse:
        """
        Read snippet, status, contentDetails and statistics of a video.

        Returns:
            ApiResponse with {"items": [...]}
        """

    @abstractmethod
    def search_latest_video(
        self,
        authorization: str,
        channel_id: Optional[str] = None,
    ) -> ApiResponse:
        """
        Search for the newest video of a channel (or of the token's owner).

        Args:
            authorization: "Bearer <token>" header value
            channel_id: Target channel, or None for the authenticated user

        Returns:
            ApiResponse with {"items": [...]} (at most one item)
        """
