"""
Publish Module

Publishes a stored video (plus an optional thumbnail) to a video platform.

Public API:
    - PublishController: Request-dict boundary coordinator
    - PlatformRouter: Platform -> pipeline dispatch
    - UploadRequest / VideoMetadata: What to publish
    - UploadResult: Normalized publish result
    - PublishError: Base of every publishing error
    - create_router: Factory function

Usage:
    from publish import PublishController, create_router
    from storage import create_object_store

    store = create_object_store()
    router = create_router(object_store=store)
    controller = PublishController(router, store)

    response = controller.handle_upload("ya29...", {
        "platform": "youtube",
        "videoPath": "videos/clip.mp4",
        "metadata": {"title": "My Video", "description": "Uploaded"},
    })
"""

from publish.constants import Platform, PublishStatus, ThumbnailState
from publish.controllers.publish_controller import PublishController
from publish.errors import PublishError
from publish.factory import create_router
from publish.models.upload_request import ThumbnailCandidate, UploadRequest, VideoMetadata
from publish.models.upload_result import ThumbnailOutcome, UploadResult
from publish.router import PlatformRouter, resolve_platform

# Public API
__all__ = [
    "Platform",
    "PlatformRouter",
    "PublishController",
    "PublishError",
    "PublishStatus",
    "ThumbnailCandidate",
    "ThumbnailOutcome",
    "ThumbnailState",
    "UploadRequest",
    "UploadResult",
    "VideoMetadata",
    "create_router",
    "resolve_platform",
]
