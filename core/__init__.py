"""
Core utilities and modules.

Public API:
    - fetch_remote_object: GET a remote resource into a StoredObject
    - RemoteFetchError: Raised when a remote fetch fails
    - PublishLogAdapter: Logger adapter carrying request_id / media_id
    - setup_logging: Console + rotating file logging for the service

Usage:
    from core.network import fetch_remote_object

    cover = fetch_remote_object("https://cdn.example.com/cover.jpg")
"""

from core.logging_utils import PublishLogAdapter, get_publish_logger, setup_logging
from core.network import RemoteFetchError, fetch_remote_object

__all__ = [
    "PublishLogAdapter",
    "RemoteFetchError",
    "fetch_remote_object",
    "get_publish_logger",
    "setup_logging",
]
