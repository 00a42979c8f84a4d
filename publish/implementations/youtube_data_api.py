"""
YouTube Data API Implementation

Concrete implementation of PlatformApiInterface for YouTube Data API v3.

Upload calls (videos.insert with our own multipart/related body and
thumbnails.set) go through a requests session with the bearer header.
Read-only queries go through the discovery client built on a per-request
google-auth credential.
"""

import logging
from typing import BinaryIO, Iterable, Optional, Union

import httplib2
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from config.settings import (
    HTTP_TIMEOUT,
    THUMBNAIL_SET_URL,
    VIDEO_INSERT_PARTS,
    VIDEO_INSERT_URL,
)
from publish.constants import (
    DETAILS_QUERY_PARTS,
    STATUS_QUERY_PARTS,
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
)
from publish.errors import PlatformTransportError
from publish.interfaces.platform_api_interface import ApiResponse, PlatformApiInterface
from publish.utils.auth_utils import strip_bearer_prefix


class YouTubeDataApi(PlatformApiInterface):
    """
    YouTube Data API v3 client.

    Holds no credential: every call receives the Authorization value of
    the request it serves, so one instance is safe to share.

    Usage:
        api = YouTubeDataApi()
        response = api.query_media_status("dQw4w9WgXcQ", "Bearer ya29...")
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = HTTP_TIMEOUT,
    ):
        """
        Initialize YouTube API client.

        Args:
            session: requests session for upload calls (None = new session)
            timeout: Request timeout in seconds (None = transport default)
        """
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.timeout = timeout

    # =========================================================================
    # UPLOAD CALLS (raw HTTP)
    # =========================================================================

    def insert_media(
        self,
        body: Iterable[bytes],
        content_type: str,
        authorization: str,
    ) -> ApiResponse:
        """POST the multipart body to videos.insert"""
        return self._post(
            VIDEO_INSERT_URL,
            params={"part": VIDEO_INSERT_PARTS},
            headers={"Authorization": authorization, "Content-Type": content_type},
            data=body,
        )

    def set_thumbnail(
        self,
        media_id: str,
        image: Union[BinaryIO, bytes],
        content_type: str,
        authorization: str,
        size: Optional[int] = None,
    ) -> ApiResponse:
        """POST the image to thumbnails.set for an existing video"""
        headers = {"Authorization": authorization, "Content-Type": content_type}
        if size:
            headers["Content-Length"] = str(size)

        return self._post(
            THUMBNAIL_SET_URL,
            params={"videoId": media_id},
            headers=headers,
            data=image,
        )

    def _post(self, url: str, params: dict, headers: dict, data) -> ApiResponse:
        try:
            response = self.session.post(
                url,
                params=params,
                headers=headers,
                data=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # Connection reset or aborted stream: nothing was created
            raise PlatformTransportError(f"Request to {url} failed: {e}") from e

        self.logger.debug(f"POST {url} -> {response.status_code}")
        return self._to_api_response(response)

    @staticmethod
    def _to_api_response(response: requests.Response) -> ApiResponse:
        try:
            payload = response.json()
        except ValueError:
            payload = response.text
        return ApiResponse(status=response.status_code, payload=payload)

    # =========================================================================
    # READ-ONLY QUERIES (discovery client)
    # =========================================================================

    def _build_service(self, authorization: str):
        """
        Build a discovery client for one request's credential.

        Raises:
            PlatformTransportError: If the client cannot be built
        """
        credentials = Credentials(token=strip_bearer_prefix(authorization))
        try:
            return build(
                YOUTUBE_API_SERVICE_NAME,
                YOUTUBE_API_VERSION,
                credentials=credentials,
                cache_discovery=False,
            )
        except Exception as e:
            raise PlatformTransportError(
                f"Failed to initialize YouTube service: {e}",
            ) from e

    def _execute(self, request) -> ApiResponse:
        """Execute a discovery request and map errors to ApiResponse"""
        try:
            return ApiResponse(status=200, payload=request.execute())

        except HttpError as e:
            body = e.content.decode("utf-8", "replace") if e.content else ""
            return ApiResponse(status=e.resp.status, payload=body)

        except GoogleAuthError as e:
            # Bare access token cannot be refreshed; treat as unauthorized
            return ApiResponse(status=401, payload=str(e))

        except (OSError, httplib2.HttpLib2Error) as e:
            raise PlatformTransportError(f"YouTube API request failed: {e}") from e

    def query_media_status(self, media_id: str, authorization: str) -> ApiResponse:
        """videos.list(part=status, id=media_id)"""
        service = self._build_service(authorization)
        return self._execute(
            service.videos().list(part=STATUS_QUERY_PARTS, id=media_id),
        )

    def get_video_details(self, video_id: str, authorization: str) -> ApiResponse:
        """videos.list(part=snippet,status,contentDetails,statistics)"""
        self.logger.info(f"Requesting video details for {video_id}")
        service = self._build_service(authorization)
        return self._execute(
            service.videos().list(part=DETAILS_QUERY_PARTS, id=video_id),
        )

    def search_latest_video(
        self,
        authorization: str,
        channel_id: Optional[str] = None,
    ) -> ApiResponse:
        """search.list ordered by date, one result"""
        params = {
            "part": "snippet",
            "maxResults": 1,
            "order": "date",
            "type": "video",
        }
        if channel_id:
            params["channelId"] = channel_id
            self.logger.info(f"Searching latest video of channel {channel_id}")
        else:
            params["forMine"] = True
            self.logger.info("Searching latest video of the authenticated user")

        service = self._build_service(authorization)
        return self._execute(service.search().list(**params))
