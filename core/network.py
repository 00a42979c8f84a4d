"""
Remote Fetch

Plain GET of remote resources (URL-sourced thumbnails).
Response headers supply content type and length.
"""

import io
import logging
from typing import Optional

import requests

from config.settings import HTTP_TIMEOUT
from storage.models.stored_object import StoredObject


class RemoteFetchError(Exception):
    """Remote resource could not be fetched (non-2xx or connection error)"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def fetch_remote_object(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = HTTP_TIMEOUT,
) -> StoredObject:
    """
    Fetch a remote resource into memory.

    Args:
        url: Absolute http(s) URL
        session: requests session to use (None = module-level requests)
        timeout: Request timeout in seconds (None = transport default)

    Returns:
        StoredObject with the body, Content-Type and Content-Length

    Raises:
        RemoteFetchError: On non-2xx status or connection failure

    Example:
        obj = fetch_remote_object("https://cdn.example.com/cover.jpg")
        print(obj.content_type, obj.size)
    """
    logger = logging.getLogger(__name__)
    http = session or requests

    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise RemoteFetchError(url, f"Failed to fetch {url}: {e}") from e

    if not response.ok:
        raise RemoteFetchError(
            url,
            f"Failed to fetch {url}: {response.status_code} {response.reason}",
            status_code=response.status_code,
        )

    content_length = response.headers.get("Content-Length")
    size = int(content_length) if content_length and content_length.isdigit() else None

    logger.debug(f"Fetched {url} ({size if size is not None else '?'} bytes)")

    return StoredObject(
        key=url,
        stream=io.BytesIO(response.content),
        size=size,
        content_type=response.headers.get("Content-Type"),
    )
