"""
Controllers Package

Pipeline steps and the request-dict coordinator.
"""

from publish.controllers.publish_controller import PublishController
from publish.controllers.thumbnail_attacher import ThumbnailAttacher
from publish.controllers.upload_executor import UploadExecutor

__all__ = [
    "PublishController",
    "ThumbnailAttacher",
    "UploadExecutor",
]
