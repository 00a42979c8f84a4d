"""
Thumbnail Utilities

Pure helpers for the thumbnail step: candidate selection, locator
classification and preset thumbnail URLs. None of these touch the network.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import urlparse

from config.settings import PRESET_THUMBNAIL_HOST
from publish.constants import PRESET_THUMBNAIL_FILES, THUMBNAIL_CANDIDATE_KEYS
from publish.models.upload_request import ThumbnailCandidate


def candidates_from_request(body: Mapping[str, Any]) -> List[ThumbnailCandidate]:
    """
    Collect thumbnail candidates from a caller request body.

    Recognized keys: coverPath-high, coverPath-medium, coverPath-default
    and the legacy coverPath (same priority as coverPath-default, used only
    when coverPath-default is empty).

    Args:
        body: Request body dict

    Returns:
        Candidates in priority order (empty values included, unusable)
    """
    candidates = [
        ThumbnailCandidate(source=body.get(key), priority=priority, label=key)
        for key, priority in THUMBNAIL_CANDIDATE_KEYS
        if key in body
    ]
    return sorted(candidates, key=lambda candidate: candidate.priority)


def select_thumbnail_candidate(
    candidates: Iterable[ThumbnailCandidate],
) -> Optional[ThumbnailCandidate]:
    """
    Pick the first usable candidate in priority order.

    Ties keep their original order, so the caller's list order breaks them.

    Args:
        candidates: Thumbnail candidates

    Returns:
        Winning candidate, or None if none has a non-empty source
    """
    for candidate in sorted(candidates, key=lambda c: c.priority):
        if candidate.is_usable:
            return candidate
    return None


def is_remote_url(locator: str) -> bool:
    """
    Check if a locator is an absolute http(s) URL.

    Everything else is treated as an object-store path.

    Example:
        is_remote_url("https://cdn.example.com/cover.jpg")  # True
        is_remote_url("covers/cover.jpg")                   # False
    """
    parsed = urlparse(locator)
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)


def preset_thumbnail_urls(media_id: str) -> Dict[str, str]:
    """
    Platform-generated thumbnail URLs for a video.

    Computed purely from the id; no network call.

    Args:
        media_id: YouTube video id

    Returns:
        Dict keyed by resolution: default, medium, high, standard, maxres
    """
    return {
        key: f"{PRESET_THUMBNAIL_HOST}/vi/{media_id}/{filename}"
        for key, filename in PRESET_THUMBNAIL_FILES.items()
    }
