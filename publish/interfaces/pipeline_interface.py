"""
Upload Pipeline Interface

Common capability every platform pipeline provides.
The router holds one pipeline per Platform; adding a platform means adding
an implementation of this interface, not editing a branch.
"""

from abc import ABC, abstractmethod
from typing import Optional

from publish.constants import Platform
from publish.models.upload_request import UploadRequest
from publish.models.upload_result import UploadResult


class UploadPipelineInterface(ABC):
    """
    Abstract base class for platform upload pipelines.

    Any pipeline implementation (YouTube, Bilibili, ...) must implement
    these methods.
    """

    platform: Platform

    @abstractmethod
    def upload(self, request: UploadRequest) -> UploadResult:
        """
        Publish one video.

        This is the main pipeline method. It should handle:
        - Metadata validation and normalization
        - Building and sending the upload
        - Any post-upload steps

        Args:
            request: Fully populated upload request

        Returns:
            UploadResult for the created item

        Raises:
            PublishError: For validation, upload-fatal or unimplemented errors
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the pipeline can publish at all.

        Returns:
            False for placeholder pipelines
        """

    def describe(self) -> Optional[str]:
        """Short human-readable pipeline name"""
        return type(self).__name__
